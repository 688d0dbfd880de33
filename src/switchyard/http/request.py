"""Immutable request descriptor.

The router never reads server globals. Whatever sits in front of it
builds a ``Request`` from the live request and hands it over.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# scheme://authority of an absolute-form request target
_ABSOLUTE_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://[^/?#]*")


@dataclass(frozen=True, slots=True)
class Request:
    """The inputs dispatch needs: method, raw URI, and submitted form fields.

    ``form`` is only consulted for the method override field, so any
    string mapping works (a dict, a parsed form, a multi-value mapping).
    """

    method: str
    uri: str
    form: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, Any],
        form: Mapping[str, str] | None = None,
    ) -> Request:
        """Build a request from a WSGI environ.

        The body is not read. Callers that want the method override pass
        the already-parsed form fields.
        """
        uri = environ.get("PATH_INFO") or "/"
        query = environ.get("QUERY_STRING")
        if query:
            uri = f"{uri}?{query}"
        return cls(
            method=environ.get("REQUEST_METHOD", "GET"),
            uri=uri,
            form=form if form is not None else {},
        )

    @property
    def path(self) -> str:
        """Path component of the URI, query string and fragment dropped.

        The rest is kept byte for byte: a leading ``//`` is part of the
        path, not an authority, and control characters survive.
        """
        path = self.uri.partition("#")[0].partition("?")[0]
        path = _ABSOLUTE_PREFIX.sub("", path, count=1)
        return path or "/"

    def effective_method(self, field_name: str = "_method") -> str:
        """The method used for matching after the override convention.

        A POST carrying *field_name* in its form data is treated as the
        upper-cased value of that field. Anything else keeps its method.
        """
        if self.method == "POST" and field_name in self.form:
            return str(self.form[field_name]).upper()
        return self.method
