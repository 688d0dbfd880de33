"""Switchyard exception hierarchy.

Shared across the route table, dispatcher, and handler resolution so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class SwitchyardError(Exception):
    """Base for all switchyard-specific errors."""


class ConfigurationError(SwitchyardError):
    """Raised when a route registration is invalid.

    Surfaces at registration time, before any request is dispatched.
    """


class HandlerError(SwitchyardError):
    """Raised when a matched route's handler cannot be invoked.

    Covers handlers that are neither callable nor a ``(type, method)``
    pair, types the resolver does not know, and methods missing from
    the constructed instance. A route misconfiguration, so dispatch
    never falls through to later routes when this is raised.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(SwitchyardError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request method and path."""

    def __init__(self, detail: str = "Route not found") -> None:
        super().__init__(status=404, detail=detail)
