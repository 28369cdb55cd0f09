"""``wren routes`` — list registered routes.

Prints every route in registration order (which is also match order)
with its methods, template, name, and target.
"""

import argparse

from wren.cli._resolve import load_router


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHODS, TEMPLATE, NAME and TARGET."""
    router = load_router(args)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = [
        (route.methods.upper(), router.base_path + route.template, route.name or "-", repr(route.target))
        for route in routes
    ]

    # Column widths, never narrower than the headers
    widths = [
        max(max(len(row[col]) for row in rows), len(header))
        for col, header in enumerate(("METHODS", "TEMPLATE", "NAME"))
    ]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format("METHODS", "TEMPLATE", "NAME", "TARGET"))
    sep_len = sum(widths) + 6 + max(len(row[3]) for row in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
