"""Shared-behavior objects linked through prototype chains."""
from __future__ import annotations

import functools
import reprlib
from typing import Any, Callable, Iterator

from .errors import PrototypeCycleError

_ROOT = object()


class Method:
    """Operation whose receiver is resolved when it is looked up.

    The wrapped callable takes the receiver as its first argument. Reading a
    Method off a ProtoObject binds that object as the receiver, so the same
    Method stored once on a prototype reports whichever instance it was read
    from.
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: Callable[..., Any], name: str | None = None) -> None:
        self.fn = fn
        self.name = name or fn.__name__

    def bind(self, receiver: Any) -> Callable[..., Any]:
        """Return the operation with `receiver` fixed as `this`."""
        return functools.partial(self.fn, receiver)

    def __call__(self, *args: Any) -> Any:
        return self.fn(None, *args)

    def __repr__(self) -> str:
        return f"[Function: {self.name}]"


class Arrow:
    """Operation whose receiver was captured where it was defined."""

    __slots__ = ("fn", "this", "name")

    def __init__(self, fn: Callable[..., Any], this: Any, name: str | None = None) -> None:
        self.fn = fn
        self.this = this
        self.name = name or fn.__name__

    def __call__(self, *args: Any) -> Any:
        return self.fn(self.this, *args)

    def __repr__(self) -> str:
        return f"[Function: {self.name}]"


class ProtoObject:
    """Attribute bag whose reads fall back along a prototype chain.

    Writes always land on the object itself. Attribute syntax raises
    AttributeError for names missing from the whole chain, while `get`
    returns a default, which is how an "undefined" read is expressed.
    """

    __slots__ = ("_fields", "_proto")

    def __init__(self, proto: Any = _ROOT, /, **fields: Any) -> None:
        object.__setattr__(self, "_fields", dict(fields))
        object.__setattr__(self, "_proto", OBJECT_PROTOTYPE if proto is _ROOT else proto)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        found, value = _lookup(self, name)
        if not found:
            raise AttributeError(f"'{name}' is not defined on {self!r} or its prototypes")
        return _bind(value, self)

    def __setattr__(self, name: str, value: Any) -> None:
        self._fields[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._fields[name]
        except KeyError as exc:
            raise AttributeError(name) from exc

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _lookup(self, name)[0]

    def get(self, name: str, default: Any = None) -> Any:
        """Read `name` through the chain, returning `default` when absent."""
        found, value = _lookup(self, name)
        if not found:
            return default
        return _bind(value, self)

    def has_own(self, name: str) -> bool:
        return name in self._fields

    def own_keys(self) -> list[str]:
        return list(self._fields)

    def own_items(self) -> Iterator[tuple[str, Any]]:
        return iter(list(self._fields.items()))

    @reprlib.recursive_repr(fillvalue="[Circular]")
    def __repr__(self) -> str:
        parts = [f"{key}: {_describe(value)}" for key, value in self._fields.items()]
        if not parts:
            return "{}"
        return "{" + ", ".join(parts) + "}"


def _lookup(obj: ProtoObject, name: str) -> tuple[bool, Any]:
    current: ProtoObject | None = obj
    while current is not None:
        fields = current._fields
        if name in fields:
            return True, fields[name]
        current = current._proto
    return False, None


def _bind(value: Any, receiver: ProtoObject) -> Any:
    if isinstance(value, Method):
        return value.bind(receiver)
    return value


def _describe(value: Any) -> str:
    if isinstance(value, (Method, Arrow, ProtoObject)):
        return repr(value)
    if callable(value):
        name = getattr(value, "name", None) or getattr(value, "__name__", "anonymous")
        return f"[Function: {name}]"
    return repr(value)


OBJECT_PROTOTYPE = ProtoObject(None)


def define(target: ProtoObject, name: str, fn: Callable[..., Any]) -> Method:
    """Store `fn` on `target` as a receiver-bound Method called `name`."""
    method = Method(fn, name)
    setattr(target, name, method)
    return method


def lookup(obj: ProtoObject, name: str, default: Any = None) -> Any:
    """Read `name` through the chain without binding a receiver."""
    found, value = _lookup(obj, name)
    return value if found else default


def call(fn: Any, receiver: Any, *args: Any) -> Any:
    """Invoke `fn` with an explicit receiver.

    Only Methods honour the receiver. Arrows keep the one they captured and
    plain callables never had one.
    """
    if isinstance(fn, Method):
        return fn.fn(receiver, *args)
    return fn(*args)


def get_prototype_of(obj: ProtoObject) -> ProtoObject | None:
    return obj._proto


def set_prototype_of(obj: ProtoObject, proto: ProtoObject | None) -> ProtoObject:
    """Relink `obj` to `proto`, refusing links that would form a cycle."""
    current = proto
    while current is not None:
        if current is obj:
            raise PrototypeCycleError(f"Cyclic prototype chain while linking {obj!r}.")
        current = current._proto
    object.__setattr__(obj, "_proto", proto)
    return obj


def create(proto: ProtoObject | None, **fields: Any) -> ProtoObject:
    """Build a new object that uses an existing one as its template."""
    return ProtoObject(proto, **fields)


def assign(target: ProtoObject, *sources: ProtoObject) -> ProtoObject:
    """Copy the own fields of each source onto `target`, left to right."""
    for source in sources:
        for key, value in source.own_items():
            setattr(target, key, value)
    return target


def prototype_chain(obj: ProtoObject) -> list[ProtoObject]:
    """Return the prototypes above `obj`, nearest first."""
    chain: list[ProtoObject] = []
    current = obj._proto
    while current is not None:
        chain.append(current)
        current = current._proto
    return chain
