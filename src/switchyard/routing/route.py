"""Method enum plus the Route, RouteMatch and NoRoute frozen dataclasses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from switchyard.routing.handlers import HandlerRef


class Method(str, Enum):
    """The HTTP methods a route can be registered for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: str) -> Method | None:
        """Return the member named *value*, or ``None`` if unsupported.

        Matching is exact: ``"get"`` and ``"OPTIONS"`` are both unsupported.
        """
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route. Immutable once added to the table."""

    method: Method
    path: str
    pattern: re.Pattern[str]
    handler: HandlerRef

    def match(self, path: str) -> dict[str, str] | None:
        """Match the whole of *path*, returning named captures or ``None``.

        Captures come back in the order their placeholders appear.
        """
        m = self.pattern.fullmatch(path)
        if m is None:
            return None
        return m.groupdict()


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]

    matched = True

    @property
    def handler(self) -> HandlerRef:
        return self.route.handler


@dataclass(frozen=True, slots=True)
class NoRoute:
    """Result of a dispatch where no route matched.

    Also produced when the effective method is not a supported one.
    """

    method: str
    path: str

    matched = False


DispatchResult: TypeAlias = RouteMatch | NoRoute
