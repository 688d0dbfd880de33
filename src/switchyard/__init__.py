"""Switchyard — maps an HTTP method and path to a registered handler.

Routes are ``{name}`` placeholder paths registered per method, matched in
registration order, first match wins.

Basic usage::

    from switchyard import Router

    router = Router()
    router.get("/users/{id}", lambda id: f"user {id}")

    with router.prefixed("/api"):
        router.any("/ping", lambda: "pong")

    router.dispatch("GET", "/users/42?tab=posts")  # "user 42"
    router.dispatch("GET", "/nope")  # Response(status=404, ...)
"""

__version__ = "0.1.0"
__all__ = [
    "CallableHandler",
    "ConfigurationError",
    "HTTPError",
    "HandlerError",
    "ImportResolver",
    "Method",
    "MethodHandler",
    "NoRoute",
    "NotFound",
    "Request",
    "Response",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "SwitchyardError",
    "TypeRegistry",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchyard`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from switchyard.routing.router import Router

        return Router

    if name == "RouterConfig":
        from switchyard.config import RouterConfig

        return RouterConfig

    if name in ("Method", "Route", "RouteMatch", "NoRoute"):
        from switchyard.routing import route

        return getattr(route, name)

    if name in ("CallableHandler", "MethodHandler", "TypeRegistry", "ImportResolver"):
        from switchyard.routing import handlers

        return getattr(handlers, name)

    if name == "Request":
        from switchyard.http.request import Request

        return Request

    if name == "Response":
        from switchyard.http.response import Response

        return Response

    if name in (
        "SwitchyardError",
        "ConfigurationError",
        "HandlerError",
        "HTTPError",
        "NotFound",
    ):
        from switchyard import errors

        return getattr(errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
