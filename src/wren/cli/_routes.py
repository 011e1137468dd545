"""``wren routes`` — list the compiled route table.

Resolves an import string to a wren App and prints every route key with
its output kind and target.
"""

import argparse
import sys

from wren.cli._resolve import resolve_app
from wren.routing.route import FunctionRoute, output_kind


def _target(value: object) -> str:
    if isinstance(value, FunctionRoute):
        return value.name
    return getattr(value, "path", repr(value))


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of KEY, KIND, and TARGET for the app's routes.

    Paths are listed first in sorted order, then status pages.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    table = app.routes
    keys = sorted((k for k in table if isinstance(k, str)))
    keys += sorted(k for k in table if isinstance(k, int))

    rows: list[tuple[str, str, str]] = [
        (str(key), output_kind(table[key]).value, _target(table[key])) for key in keys
    ]

    # Column widths
    max_key = max(max(len(r[0]) for r in rows), 3)  # "KEY" header
    max_kind = max(max(len(r[1]) for r in rows), 4)  # "KIND" header

    fmt = f"{{:<{max_key}}}  {{:<{max_kind}}}  {{}}"
    print(fmt.format("KEY", "KIND", "TARGET"))
    sep_len = max_key + max_kind + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for key, kind, target in rows:
        print(fmt.format(key, kind, target))
