"""Path normalization and pattern compilation.

Both are pure functions of their inputs: compiling the same path twice
yields equal patterns.
"""

import re

from switchyard.errors import ConfigurationError
from switchyard.routing.params import PLACEHOLDER, SEGMENT


def normalize_path(path: str) -> str:
    """Ensure *path* is absolute.

    Runs after group prefixes are joined on, so ``"api"`` + ``"/users"``
    still comes out as ``"/api/users"``.
    """
    if not path or path[0] != "/":
        return "/" + path
    return path


def pattern_source(path: str, *, escape: bool = True) -> str:
    """Translate a route path into an anchored regular expression source.

    Examples::

        "/users"             -> "^/users$"
        "/users/{id}"        -> "^/users/(?P<id>[^/]+)$"
        "/files/{name}.txt"  -> "^/files/(?P<name>[^/]+)\\.txt$"

    With ``escape=False`` literal text is copied through as-is, so regex
    metacharacters in the path keep their regex meaning.
    """
    # split() with one capture group alternates literal, name, literal, ...
    pieces = PLACEHOLDER.split(path)
    parts: list[str] = []
    for i, piece in enumerate(pieces):
        if i % 2:
            parts.append(f"(?P<{piece}>{SEGMENT})")
        else:
            parts.append(re.escape(piece) if escape else piece)
    return "^" + "".join(parts) + "$"


def compile_path(path: str, *, escape: bool = True) -> re.Pattern[str]:
    """Compile a normalized route path into a matching pattern.

    Raises ``ConfigurationError`` when the result is not a valid
    expression, e.g. a placeholder name used twice in one path.
    """
    source = pattern_source(path, escape=escape)
    try:
        return re.compile(source)
    except re.error as exc:
        msg = f"Route path {path!r} does not compile to a valid pattern: {exc}"
        raise ConfigurationError(msg) from exc
