"""Router — registration API over the route table, plus the dispatcher.

Routes are registered during setup and only read while dispatching.
Dispatch is a pure function of the method, URI and form fields passed in;
reading them off the live request is the caller's job.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager
from typing import Any

from switchyard._internal.types import FormData, GroupCallback, Handler, NotFoundHandler
from switchyard.config import RouterConfig
from switchyard.errors import ConfigurationError, NotFound
from switchyard.http.request import Request
from switchyard.http.response import Response
from switchyard.routing.compile import compile_path
from switchyard.routing.groups import PrefixStack
from switchyard.routing.handlers import HandlerResolver, TypeRegistry, coerce_handler
from switchyard.routing.route import DispatchResult, Method, NoRoute, Route, RouteMatch
from switchyard.routing.table import RouteTable

logger = logging.getLogger("switchyard.routing")


class Router:
    """Method + path router with first-match-wins dispatch.

    Usage::

        router = Router()
        router.get("/users/{id}", show_user)
        router.group("/admin", lambda r: r.delete("/users/{id}", ("Admin", "drop")))

        router.dispatch("GET", "/users/42")  # show_user("42")
        router.dispatch("POST", "/admin/users/7", {"_method": "DELETE"})

    Registration is not thread-safe. Once the last route is added the
    router is only read, so concurrent dispatch needs no locking.
    """

    __slots__ = ("_config", "_groups", "_not_found_handler", "_resolver", "_table")

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        resolver: HandlerResolver | None = None,
    ) -> None:
        self._config = config or RouterConfig()
        self._resolver: HandlerResolver = resolver if resolver is not None else TypeRegistry()
        self._table = RouteTable()
        self._groups = PrefixStack()
        self._not_found_handler: NotFoundHandler | None = None

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def resolver(self) -> HandlerResolver:
        """Resolves the type half of ``(type, method)`` handlers."""
        return self._resolver

    # -- Route registration --

    def get(self, path: str, handler: Handler) -> Router:
        return self.add(Method.GET, path, handler)

    def post(self, path: str, handler: Handler) -> Router:
        return self.add(Method.POST, path, handler)

    def put(self, path: str, handler: Handler) -> Router:
        return self.add(Method.PUT, path, handler)

    def patch(self, path: str, handler: Handler) -> Router:
        return self.add(Method.PATCH, path, handler)

    def delete(self, path: str, handler: Handler) -> Router:
        return self.add(Method.DELETE, path, handler)

    def any(self, path: str, handler: Handler) -> Router:
        """Register *handler* for every supported method.

        Each method gets its own compiled ``Route``.
        """
        for method in Method:
            self.add(method, path, handler)
        return self

    def add(self, method: Method | str, path: str, handler: Handler) -> Router:
        """Register *handler* for *method* at *path*, under any open groups.

        Raises ``ConfigurationError`` for an unsupported method or a path
        that does not compile.
        """
        key = method if isinstance(method, Method) else Method.parse(method.upper())
        if key is None:
            supported = ", ".join(m.value for m in Method)
            msg = f"Unsupported method {method!r}. Supported methods: {supported}"
            raise ConfigurationError(msg)

        full_path = self._groups.apply(path)
        pattern = compile_path(full_path, escape=self._config.escape_literals)
        route = Route(method=key, path=full_path, pattern=pattern, handler=coerce_handler(handler))
        self._table.add(route)
        logger.debug("registered %s %s -> %s", key.value, full_path, route.handler.describe())
        return self

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a route handler via decorator.

        Args:
            path: URL path pattern. Use ``{param}`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            for method in methods or ["GET"]:
                self.add(method, path, func)
            return func

        return decorator

    # -- Groups --

    def prefixed(self, prefix: str) -> AbstractContextManager[None]:
        """Open a group as a ``with`` block::

            with router.prefixed("/api"):
                router.get("/users", list_users)  # /api/users
        """
        return self._groups.scoped(prefix)

    def group(self, prefix: str, callback: GroupCallback) -> Router:
        """Register the routes added by *callback* under *prefix*.

        *callback* takes either no arguments or the router. Groups nest;
        prefixes concatenate outermost first. The prefix is removed again
        even when *callback* raises.
        """
        if not callable(callback):
            msg = f"Group callback for {prefix!r} must be callable, got {type(callback).__name__}"
            raise ConfigurationError(msg)
        with self.prefixed(prefix):
            if _accepts_argument(callback):
                callback(self)
            else:
                callback()
        return self

    # -- Not found --

    def set_not_found_handler(self, handler: NotFoundHandler) -> Router:
        """Use *handler* (called with no arguments) for unmatched requests."""
        if not callable(handler):
            msg = f"Not-found handler must be callable, got {type(handler).__name__}"
            raise ConfigurationError(msg)
        self._not_found_handler = handler
        return self

    def not_found_response(self) -> Response:
        """The default not-found outcome, for the server to render."""
        cfg = self._config
        return Response.json(
            {"error": cfg.not_found_message},
            status=cfg.not_found_status,
        ).with_content_type(cfg.not_found_content_type)

    # -- Introspection --

    @property
    def routes(self) -> dict[str, list[Route]]:
        """All registered routes keyed by method name, in registration order."""
        return self._table.as_dict()

    def get_routes(self) -> dict[str, list[Route]]:
        return self.routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    # -- Dispatch --

    def effective_method(self, method: str, form: FormData | None = None) -> str:
        """Apply the POST ``_method`` override, when enabled."""
        if not self._config.allow_method_override or not form:
            return method
        request = Request(method=method, uri="/", form=form)
        return request.effective_method(self._config.method_override_field)

    def match(self, method: str, uri: str, form: FormData | None = None) -> DispatchResult:
        """Find the first route matching *method* and *uri*.

        Returns a ``RouteMatch`` with the named path params, or ``NoRoute``
        when nothing matches or the effective method is unsupported.
        Never invokes a handler.
        """
        effective = self.effective_method(method, form)
        path = Request(method=effective, uri=uri).path

        routes = self._table.routes_for(effective)
        if routes is None:
            return NoRoute(method=effective, path=path)

        for route in routes:
            params = route.match(path)
            if params is not None:
                return RouteMatch(route=route, path_params=params)
        return NoRoute(method=effective, path=path)

    def dispatch(
        self,
        method: str,
        uri: str,
        form: FormData | None = None,
        *,
        raise_not_found: bool = False,
    ) -> Any:
        """Match the request and return whatever its handler returns.

        Handler failures propagate; dispatch never retries a later route.
        Without a match, returns the not-found handler's result or the
        default not-found ``Response`` (raises ``NotFound`` instead when
        *raise_not_found* is set and no not-found handler exists).
        """
        result = self.match(method, uri, form)
        if isinstance(result, NoRoute):
            return self._handle_not_found(result, raise_not_found=raise_not_found)

        logger.debug(
            "matched %s %s -> %s %s",
            result.route.method.value,
            uri,
            result.route.path,
            result.handler.describe(),
        )
        return result.handler.invoke(result.path_params, self._resolver)

    def dispatch_request(self, request: Request, *, raise_not_found: bool = False) -> Any:
        """``dispatch()`` for an already-built ``Request``."""
        return self.dispatch(
            request.method,
            request.uri,
            request.form,
            raise_not_found=raise_not_found,
        )

    def _handle_not_found(self, result: NoRoute, *, raise_not_found: bool) -> Any:
        logger.debug("no route for %s %s", result.method, result.path)
        if self._not_found_handler is not None:
            return self._not_found_handler()
        if raise_not_found:
            raise NotFound(self._config.not_found_message)
        return self.not_found_response()


def _accepts_argument(callback: Callable[..., Any]) -> bool:
    """True if *callback* can be called with one positional argument."""
    try:
        sig = inspect.signature(callback)
    except (TypeError, ValueError):
        return True
    try:
        sig.bind(None)
    except TypeError:
        return False
    return True

