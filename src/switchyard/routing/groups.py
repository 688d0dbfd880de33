"""Group prefix stack.

Tracks the prefixes of the groups currently open so nested registrations
compose their paths without repeating them.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from switchyard.routing.compile import normalize_path


class PrefixStack:
    """Open group prefixes, outermost first.

    Empty whenever no group body is running. ``scoped()`` pops its
    prefix on every exit path, including exceptions raised by the body.
    """

    __slots__ = ("_prefixes",)

    def __init__(self) -> None:
        self._prefixes: list[str] = []

    def __len__(self) -> int:
        return len(self._prefixes)

    @property
    def prefixes(self) -> tuple[str, ...]:
        return tuple(self._prefixes)

    @property
    def prefix(self) -> str:
        """All open prefixes concatenated in push order."""
        return "".join(self._prefixes)

    @contextmanager
    def scoped(self, prefix: str) -> Iterator[None]:
        """Push *prefix* for the duration of the ``with`` block."""
        self._prefixes.append(prefix)
        try:
            yield
        finally:
            self._prefixes.pop()

    def apply(self, path: str) -> str:
        """Prepend the open prefixes to *path* and make it absolute."""
        return normalize_path(self.prefix + path)
