"""Shared type aliases used across switchyard modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Route handler: a callable, a (type, method_name) pair, or a handler ref
Handler: TypeAlias = Any

# Not-found handler: called with no arguments
NotFoundHandler: TypeAlias = Callable[[], Any]

# Group body: receives the router it registers against
GroupCallback: TypeAlias = Callable[..., Any]

# Submitted form fields, read only for the method override
FormData: TypeAlias = Mapping[str, str]
