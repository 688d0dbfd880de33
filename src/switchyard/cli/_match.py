"""``switchyard match`` — show which route a request would dispatch to.

Matches only; the handler is never called.
"""

import argparse
import sys

from switchyard.cli._resolve import resolve_router
from switchyard.errors import SwitchyardError
from switchyard.routing.route import NoRoute


def run_match(args: argparse.Namespace) -> None:
    """Print the matched route and its params, or exit 1 on no match."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, SwitchyardError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    form = {router.config.method_override_field: args.override} if args.override else None
    result = router.match(args.method, args.uri, form)

    if isinstance(result, NoRoute):
        print(f"404 Not Found: {result.method} {result.path}")
        raise SystemExit(1)

    route = result.route
    print(f"{route.method.value} {route.path} -> {route.handler.describe()}")
    for name, value in result.path_params.items():
        print(f"  {name} = {value}")
