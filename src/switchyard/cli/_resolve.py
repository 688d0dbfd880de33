"""Locate the Router a CLI command should inspect.

The target is an import string: ``"myapp.routes:router"``, a dotted
attribute path after the colon, or a bare module name meaning its
``router`` attribute. The object found may be a ``Router`` or a
zero-argument factory that builds one.
"""

from switchyard._internal.imports import import_object, split_import_string
from switchyard.errors import ConfigurationError
from switchyard.routing.router import Router


def resolve_router(import_string: str) -> Router:
    """Import and return the ``Router`` named by *import_string*.

    Raises:
        ModuleNotFoundError: The module cannot be imported.
        AttributeError: The attribute path does not exist on the module.
        ConfigurationError: The target is neither a Router nor a factory
            for one, or the factory failed.
    """
    module_path, attr_path = split_import_string(import_string, default_attr="router")
    target = import_object(module_path, attr_path)
    if isinstance(target, Router):
        return target

    if not callable(target):
        msg = f"{import_string!r} is a {type(target).__name__}, expected a Router or a Router factory"
        raise ConfigurationError(msg)

    try:
        built = target()
    except Exception as exc:
        msg = f"Router factory {import_string!r} failed: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(built, Router):
        msg = f"Router factory {import_string!r} returned {type(built).__name__}, not a Router"
        raise ConfigurationError(msg)
    return built
