"""Units about constructor functions and linked prototypes."""
from __future__ import annotations

from protodemo.core.constructors import OBJECT_KIND, construct, is_instance_of, kind_name_of
from protodemo.core.objects import (
    OBJECT_PROTOTYPE,
    ProtoObject,
    create,
    define,
    get_prototype_of,
    set_prototype_of,
)
from protodemo.domain.demo_models import DemoContext
from protodemo.domain.entities import build_person_kinds
from protodemo.presentation.cli.render import render_lines, render_value


def run_prototype_chain(ctx: DemoContext) -> None:
    person, enemy = build_person_kinds()

    dave = construct(person, "Dave", 27)
    print(dave.say_name())

    bill = construct(enemy, "Bill", 32, "a mega laser")
    render_lines([bill.say_name(), bill.attack(dave)])

    print(f"Person.prototype links to {kind_name_of(get_prototype_of(person.prototype))}")
    print(f"Enemy.prototype links to {kind_name_of(get_prototype_of(enemy.prototype))}")
    ctx.bindings.update(Person=person, Enemy=enemy, dave=dave, bill=bill)


def _method_invocation(this: ProtoObject) -> str:
    return f"Enemy details: {this!r}"


def run_method_invocation(ctx: DemoContext) -> None:
    enemy = ctx.require("Enemy")
    bill = ctx.require("bill")
    define(enemy.prototype, "method_invocation", _method_invocation)
    print(bill.method_invocation())


def run_object_create(ctx: DemoContext) -> None:
    bill = ctx.require("bill")
    dave = ctx.require("dave")

    jimmy = create(bill)
    jimmy.name = "Jimmy"
    print(jimmy.attack(dave))
    print(bill.say_name())
    render_value("jimmy", jimmy)
    print(f"jimmy's prototype is bill: {get_prototype_of(jimmy) is bill}")
    ctx.bindings["jimmy"] = jimmy


def run_instance_of(ctx: DemoContext) -> None:
    person = ctx.require("Person")
    enemy = ctx.require("Enemy")
    bill = ctx.require("bill")
    jimmy = ctx.require("jimmy")

    render_lines(
        [
            f"bill is an Enemy: {is_instance_of(bill, enemy)}",
            f"bill is a Person: {is_instance_of(bill, person)}",
            f"bill is an Object: {is_instance_of(bill, OBJECT_KIND)}",
            f"jimmy is an Enemy: {is_instance_of(jimmy, enemy)}",
        ]
    )

    # Caveat: the answer follows the current link, not how the object was made.
    stranger = construct(enemy, "Stranger", 40, "a rubber chicken")
    set_prototype_of(stranger, OBJECT_PROTOTYPE)
    render_lines(
        [
            "stranger was built by Enemy, then relinked to Object.prototype",
            f"stranger is an Enemy: {is_instance_of(stranger, enemy)}",
            f"stranger can attack: {stranger.get('attack') is not None}",
        ]
    )
