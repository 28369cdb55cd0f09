"""Locate the Router a CLI invocation points at.

Every subcommand takes a ``module[:attribute]`` argument naming either a
``Router`` or a zero-argument callable that builds one.
"""

import argparse
import importlib
import sys

from wren.routing.router import Router

DEFAULT_ATTRIBUTE = "router"


def resolve_router(import_string: str) -> Router:
    """Import *import_string* and return the Router it names.

    ``"blog.urls:routes"`` reads ``routes`` from ``blog.urls``; a bare
    ``"blog.urls"`` reads ``blog.urls.router``. A callable that is not
    already a Router is treated as a factory and called once.

    Import and attribute lookup failures propagate unchanged
    (``ModuleNotFoundError``, ``AttributeError``). A factory that fails,
    or an object that is not a Router, raises ``TypeError``.
    """
    module_name, _, attribute = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attribute or DEFAULT_ATTRIBUTE)

    if not isinstance(target, Router) and callable(target):
        try:
            target = target()
        except Exception as exc:
            msg = f"Router factory {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(target, Router):
        return target
    msg = f"{import_string!r} gave a {type(target).__name__}, not a wren.Router instance"
    raise TypeError(msg)


def load_router(args: argparse.Namespace) -> Router:
    """``resolve_router`` for subcommands: report the failure and exit 1."""
    try:
        return resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
