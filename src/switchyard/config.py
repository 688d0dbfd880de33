"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(method_override_field="__method", escape_literals=False)
    """

    # Method override (HTML forms can only POST)
    method_override_field: str = "_method"
    allow_method_override: bool = True

    # Pattern compilation. False keeps literal segments unescaped,
    # so "." in "/a.b" matches any character
    escape_literals: bool = True

    # Default not-found outcome
    not_found_status: int = 404
    not_found_content_type: str = "application/json"
    not_found_message: str = "Route not found"
