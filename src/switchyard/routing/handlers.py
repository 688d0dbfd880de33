"""Handler references and the resolvers behind ``(type, method)`` pairs.

A route handler is registered as one of:

- a callable, called with the path params as positional arguments
- a ``(type, method_name)`` pair: the type is resolved, a default
  instance constructed, and the named method called the same way
- an ``(instance, method_name)`` pair: the instance's bound method,
  treated as a plain callable

``coerce_handler`` turns whatever was registered into a handler ref.
Shapes it does not recognise are kept as ``InvalidHandler`` so the
failure surfaces when the route is dispatched.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

from switchyard._internal.imports import import_object, is_missing_module, split_import_string
from switchyard.errors import ConfigurationError, HandlerError

# Zero-argument callable producing a handler instance (usually a class)
Factory: TypeAlias = Callable[[], Any]


@runtime_checkable
class HandlerResolver(Protocol):
    """Maps a type identifier to a factory, or ``None`` if unknown."""

    def resolve(self, name: str) -> Factory | None: ...


class TypeRegistry:
    """Explicit name -> factory registry supplied by the application.

    Works as a decorator::

        registry = TypeRegistry()

        @registry.register
        class UserController:
            def show(self, id): ...

        router = Router(resolver=registry)
        router.get("/users/{id}", ("UserController", "show"))
    """

    __slots__ = ("_factories",)

    def __init__(self, factories: Mapping[str, Factory] | None = None) -> None:
        self._factories: dict[str, Factory] = dict(factories or {})

    def register(
        self,
        factory: Factory | None = None,
        *,
        name: str | None = None,
    ) -> Any:
        """Register *factory* under *name* (defaults to its ``__name__``).

        Returns the factory unchanged, or a decorator when called with
        only ``name=``.
        """

        def decorator(obj: Factory) -> Factory:
            key = name or getattr(obj, "__name__", None)
            if not key:
                msg = f"Cannot derive a type name for {obj!r}; pass name="
                raise ValueError(msg)
            self._factories[key] = obj
            return obj

        if factory is None:
            return decorator
        return decorator(factory)

    def resolve(self, name: str) -> Factory | None:
        return self._factories.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


class ImportResolver:
    """Resolve ``"module:Class"`` or ``"module.Class"`` by importing it.

    Only classes resolve. A missing module or attribute resolves to
    ``None``; an import error raised from inside an existing module
    propagates.
    """

    __slots__ = ()

    def resolve(self, name: str) -> Factory | None:
        module_path, attr_path = split_import_string(name)
        if not module_path or not attr_path:
            return None
        try:
            obj = import_object(module_path, attr_path)
        except ModuleNotFoundError as exc:
            if not is_missing_module(exc, module_path):
                raise
            return None
        except AttributeError:
            return None
        if not isinstance(obj, type):
            return None
        return obj


def _describe(obj: Any) -> str:
    return getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or repr(obj)


@dataclass(frozen=True, slots=True)
class CallableHandler:
    """A directly invocable handler."""

    func: Callable[..., Any]

    def invoke(self, params: Mapping[str, str], resolver: HandlerResolver) -> Any:
        return self.func(*params.values())

    def describe(self) -> str:
        return _describe(self.func)


@dataclass(frozen=True, slots=True)
class MethodHandler:
    """A ``(type, method_name)`` handler resolved at call time.

    *target* is either the class itself or an identifier looked up
    through the router's resolver.
    """

    target: type | str
    method_name: str

    def invoke(self, params: Mapping[str, str], resolver: HandlerResolver) -> Any:
        factory = self._factory(resolver)
        instance = factory()
        method = getattr(instance, self.method_name, None)
        if method is None or not callable(method):
            msg = f"Handler method {self.describe()!r} does not exist"
            raise HandlerError(msg)
        return method(*params.values())

    def _factory(self, resolver: HandlerResolver) -> Factory:
        if isinstance(self.target, type):
            return self.target
        factory = resolver.resolve(self.target)
        if factory is None:
            msg = f"Handler type {self.target!r} does not exist"
            raise HandlerError(msg)
        return factory

    def describe(self) -> str:
        target = self.target if isinstance(self.target, str) else _describe(self.target)
        return f"{target}.{self.method_name}"


@dataclass(frozen=True, slots=True)
class InvalidHandler:
    """Placeholder for a registered value that is not a usable handler."""

    value: Any

    def invoke(self, params: Mapping[str, str], resolver: HandlerResolver) -> Any:
        msg = f"Invalid route handler: {self.value!r}"
        raise HandlerError(msg)

    def describe(self) -> str:
        return f"<invalid {self.value!r}>"


HandlerRef: TypeAlias = CallableHandler | MethodHandler | InvalidHandler


def coerce_handler(value: Any) -> HandlerRef:
    """Wrap a registered handler value in the matching handler ref.

    An ``(instance, method_name)`` pair binds to that instance's method
    now, with no per-call construction. Raises ``ConfigurationError`` if
    the instance has no such callable attribute.
    """
    if isinstance(value, (CallableHandler, MethodHandler, InvalidHandler)):
        return value
    if callable(value):
        return CallableHandler(value)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        target, method_name = value
        if not isinstance(method_name, str):
            return InvalidHandler(value)
        if isinstance(target, (type, str)):
            return MethodHandler(target, method_name)
        bound = getattr(target, method_name, None)
        if bound is None or not callable(bound):
            msg = f"{type(target).__name__} instance has no callable {method_name!r} for a route handler"
            raise ConfigurationError(msg)
        return CallableHandler(bound)
    return InvalidHandler(value)
