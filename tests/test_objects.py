import pytest

from protodemo.core.errors import PrototypeCycleError
from protodemo.core.objects import (
    OBJECT_PROTOTYPE,
    Arrow,
    Method,
    ProtoObject,
    assign,
    call,
    create,
    define,
    get_prototype_of,
    lookup,
    prototype_chain,
    set_prototype_of,
)


def test_new_objects_link_to_root_prototype() -> None:
    obj = ProtoObject(name="Dave")

    assert get_prototype_of(obj) is OBJECT_PROTOTYPE
    assert get_prototype_of(OBJECT_PROTOTYPE) is None


def test_reads_fall_back_along_chain_and_writes_stay_local() -> None:
    base = ProtoObject(kind="base", shared=1)
    child = create(base, kind="child")

    assert child.kind == "child"
    assert child.shared == 1
    child.shared = 2
    assert child.shared == 2
    assert base.shared == 1
    assert child.own_keys() == ["kind", "shared"]


def test_missing_attribute_raises_but_get_returns_default() -> None:
    obj = ProtoObject(name="Dave")

    with pytest.raises(AttributeError):
        obj.weapon
    assert obj.get("weapon") is None
    assert obj.get("weapon", "none") == "none"
    assert "name" in obj
    assert "weapon" not in obj


def test_method_binds_the_object_it_was_read_from() -> None:
    proto = ProtoObject()
    define(proto, "whoami", lambda this: this.name)
    first = create(proto, name="first")
    second = create(proto, name="second")

    assert first.whoami() == "first"
    assert second.whoami() == "second"
    assert isinstance(lookup(first, "whoami"), Method)


def test_arrow_ignores_the_object_it_was_read_from() -> None:
    captured = ProtoObject(name="captured")
    obj = ProtoObject(name="holder", whoami=Arrow(lambda this: this.name, captured))

    assert obj.whoami() == "captured"
    assert call(lookup(obj, "whoami"), obj) == "captured"


def test_call_supplies_an_explicit_receiver_to_methods() -> None:
    method = Method(lambda this, suffix: this.name + suffix, "shout")

    assert call(method, ProtoObject(name="Boris"), "!") == "Boris!"


def test_set_prototype_of_rejects_cycles() -> None:
    parent = ProtoObject()
    child = create(parent)

    with pytest.raises(PrototypeCycleError):
        set_prototype_of(parent, child)
    with pytest.raises(PrototypeCycleError):
        set_prototype_of(child, child)


def test_prototype_chain_lists_nearest_first() -> None:
    parent = ProtoObject()
    child = create(parent)

    assert prototype_chain(child) == [parent, OBJECT_PROTOTYPE]


def test_assign_copies_own_fields_left_to_right() -> None:
    inherited = create(ProtoObject(hidden=True), a=1)
    target = ProtoObject(a=0, b=0)

    result = assign(target, inherited, ProtoObject(b=2))

    assert result is target
    assert (target.a, target.b) == (1, 2)
    assert not target.has_own("hidden")


def test_repr_renders_like_an_object_literal() -> None:
    obj = ProtoObject(name="Dave", age=27)
    define(obj, "say_name", lambda this: this.name)

    assert repr(obj) == "{name: 'Dave', age: 27, say_name: [Function: say_name]}"
    assert repr(ProtoObject()) == "{}"


def test_repr_handles_self_reference() -> None:
    obj = ProtoObject(name="loop")
    obj.me = obj

    assert repr(obj) == "{name: 'loop', me: [Circular]}"
