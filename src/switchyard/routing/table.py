"""Route table — per-method route sequences in registration order."""

from collections.abc import Iterator

from switchyard.routing.route import Method, Route


class RouteTable:
    """Routes keyed by method, each sequence kept in insertion order.

    Order is significant: dispatch walks a method's routes front to back
    and the first match wins. Every supported method has an entry, even
    when empty.

    Usage::

        table = RouteTable()
        table.add(Route(Method.GET, "/users", compile_path("/users"), handler))
        table.routes_for("GET")  # (Route(...),)
        table.routes_for("OPTIONS")  # None
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        # Immutable per-method sequences; add() replaces the tuple
        self._routes: dict[Method, tuple[Route, ...]] = {method: () for method in Method}

    def add(self, route: Route) -> None:
        """Append *route* to the sequence for its method."""
        self._routes[route.method] = (*self._routes[route.method], route)

    def routes_for(self, method: str) -> tuple[Route, ...] | None:
        """Routes registered for *method*, or ``None`` if it is unsupported."""
        key = Method.parse(method)
        if key is None:
            return None
        return self._routes[key]

    def as_dict(self) -> dict[str, list[Route]]:
        """Copy of the table keyed by method name."""
        return {method.value: list(routes) for method, routes in self._routes.items()}

    def __iter__(self) -> Iterator[Route]:
        for routes in self._routes.values():
            yield from routes

    def __len__(self) -> int:
        return sum(len(routes) for routes in self._routes.values())
