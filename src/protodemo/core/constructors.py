"""Constructor functions, class kinds and the construct operator."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Union

from .errors import ConstructorInvocationError, ObjectModelError
from .objects import OBJECT_PROTOTYPE, ProtoObject, define, prototype_chain


class ConstructorFunction:
    """A plain initializer paired with the prototype its instances share.

    `fn(this, *args)` fills in a fresh receiver when used through
    `construct`. Calling the constructor directly hands it no receiver at
    all, so the first `this.field = ...` fails with an ordinary
    AttributeError on None.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        name: str | None = None,
        prototype: ProtoObject | None = None,
    ) -> None:
        self.fn = fn
        self.name = name or fn.__name__
        self.prototype = prototype if prototype is not None else ProtoObject()
        self.prototype.constructor = self

    def __call__(self, *args: Any) -> Any:
        return self.fn(None, *args)

    def initialize(self, this: ProtoObject, *args: Any) -> None:
        self.fn(this, *args)

    def __repr__(self) -> str:
        return f"[Function: {self.name}]"


class ClassKind:
    """Class-style declaration built on the same prototype machinery."""

    def __init__(
        self,
        name: str,
        init: Callable[..., Any] | None = None,
        methods: Mapping[str, Callable[..., Any]] | None = None,
        extends: Kind | None = None,
    ) -> None:
        self.name = name
        self.init = init
        self.parent = extends
        parent_prototype = extends.prototype if extends is not None else OBJECT_PROTOTYPE
        self.prototype = ProtoObject(parent_prototype, constructor=self)
        for method_name, fn in (methods or {}).items():
            define(self.prototype, method_name, fn)

    def __call__(self, *args: Any) -> Any:
        raise ConstructorInvocationError(
            f"Class constructor {self.name} cannot be invoked without 'new'"
        )

    def initialize(self, this: ProtoObject, *args: Any) -> None:
        if self.init is not None:
            self.init(this, *args)
        elif self.parent is not None:
            self.parent.initialize(this, *args)

    def super_init(self, this: ProtoObject, *args: Any) -> None:
        """Run the parent kind's initializer on `this`."""
        if self.parent is None:
            raise ObjectModelError(f"Class {self.name} does not extend another kind.")
        self.parent.initialize(this, *args)

    def __repr__(self) -> str:
        return f"[class {self.name}]"


Kind = Union[ConstructorFunction, ClassKind]


def construct(kind: Kind, *args: Any) -> ProtoObject:
    """Create an instance of `kind` and run its initializer on it."""
    this = ProtoObject(kind.prototype)
    kind.initialize(this, *args)
    return this


def is_instance_of(obj: Any, kind: Kind) -> bool:
    """Return True when `kind.prototype` sits anywhere on `obj`'s chain."""
    if not isinstance(obj, ProtoObject):
        return False
    return any(proto is kind.prototype for proto in prototype_chain(obj))


def kind_name_of(prototype: ProtoObject | None) -> str:
    """Label a prototype by the kind that owns it."""
    if prototype is None:
        return "null"
    owner = prototype.get("constructor")
    if owner is None:
        return repr(prototype)
    return f"{owner.name}.prototype"


def _object_initializer(this: ProtoObject) -> None:
    return None


OBJECT_KIND = ConstructorFunction(_object_initializer, name="Object", prototype=OBJECT_PROTOTYPE)
