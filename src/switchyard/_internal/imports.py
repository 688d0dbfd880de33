"""Import-string parsing shared by handler resolution and the CLI.

Two spellings are accepted: ``"pkg.module:attr.sub"`` (explicit split)
and ``"pkg.module.attr"`` (last dot splits). Callers that want a bare
module name to mean one of its attributes pass *default_attr*.
"""

import importlib
from typing import Any


def split_import_string(name: str, default_attr: str | None = None) -> tuple[str, str]:
    """Split *name* into ``(module_path, attribute_path)``.

    Either half may come back empty when *name* has no usable split.
    """
    module_path, sep, attr_path = name.partition(":")
    if sep:
        return module_path, attr_path
    if default_attr is not None:
        return name, default_attr
    module_path, _, attr_path = name.rpartition(".")
    return module_path, attr_path


def is_missing_module(exc: ModuleNotFoundError, module_path: str) -> bool:
    """True if *exc* is about *module_path* (or a parent package) itself.

    False when the module exists but one of its own imports failed.
    """
    missing = exc.name or ""
    return module_path == missing or module_path.startswith(missing + ".")


def import_object(module_path: str, attr_path: str) -> Any:
    """Import *module_path* and walk the dotted *attr_path* on it.

    Raises ``ModuleNotFoundError`` and ``AttributeError`` unchanged.
    """
    obj: Any = importlib.import_module(module_path)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj
