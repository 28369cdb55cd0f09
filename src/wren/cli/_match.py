"""``wren match`` and ``wren url`` — exercise a router from the shell."""

import argparse
import sys

from wren.cli._resolve import load_router
from wren.errors import UnknownRouteName


def run_match(args: argparse.Namespace) -> None:
    """Print the route hit by ``args.method`` ``args.path``, or exit 1."""
    router = load_router(args)

    match = router.match(args.path, args.method)
    if match is None:
        print(f"No route matches {args.method.upper()} {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"target: {match.target!r}")
    print(f"name:   {match.name or '-'}")
    if match.params:
        print("params:")
        for key, value in match.params.items():
            print(f"  {key} = {value}")
    else:
        print("params: (none)")


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ``["id=5", "action=edit"]`` into a dict.

    Raises ``ValueError`` for an item without ``=``.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Expected key=value, got {pair!r}"
            raise ValueError(msg)
        params[key] = value
    return params


def run_url(args: argparse.Namespace) -> None:
    """Print the URL generated for ``args.name``, or exit 1."""
    router = load_router(args)

    try:
        params = parse_params(args.params)
        print(router.generate(args.name, params))
    except (ValueError, UnknownRouteName) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
