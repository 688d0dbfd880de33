"""Switchyard CLI — route table inspection.

Entry point registered as ``switchyard`` in ``pyproject.toml``::

    [project.scripts]
    switchyard = "switchyard.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``switchyard`` command."""
    parser = argparse.ArgumentParser(
        prog="switchyard",
        description="Switchyard: method and path request routing.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- switchyard routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )

    # -- switchyard match -------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a request hits")
    match_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    match_parser.add_argument("method", help="Request method (e.g. GET)")
    match_parser.add_argument("uri", help="Request URI (e.g. /users/42?tab=posts)")
    match_parser.add_argument(
        "--override",
        default=None,
        help="Value of the _method form field (POST only)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from switchyard.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from switchyard.cli._match import run_match

        run_match(args)
