"""Units comparing class kinds with constructor functions."""
from __future__ import annotations

from protodemo.core.constructors import construct
from protodemo.core.objects import ProtoObject, define
from protodemo.domain.demo_models import DemoContext
from protodemo.domain.entities import build_person_classes
from protodemo.presentation.cli.render import render_lines


def _greet(this: ProtoObject, other: ProtoObject) -> str:
    return f"{this.name} waves at {other.name}"


def run_class_sugar(ctx: DemoContext) -> None:
    person = ctx.require("Person")
    dave = ctx.require("dave")
    bill = ctx.require("bill")
    person_class, enemy_class = build_person_classes()

    from_function = construct(person, "Ada", 36)
    from_class = construct(person_class, "Ada", 36)
    villain = construct(enemy_class, "Mallory", 41, "a rusty spoon")
    render_lines(
        [
            f"constructor function: {from_function.say_name()}",
            f"class: {from_class.say_name()}",
            f"same greeting: {from_function.say_name() == from_class.say_name()}",
            villain.attack(from_class),
        ]
    )

    # dave and bill already exist; the prototype changes still reach them.
    define(person.prototype, "greet", _greet)
    person.prototype.species = "human"
    render_lines([dave.greet(bill), bill.greet(dave)])

    dave.species = "robot"
    render_lines([f"dave.species -> {dave.species}", f"bill.species -> {bill.species}"])
    ctx.bindings.update(PersonClass=person_class, EnemyClass=enemy_class)


def run_missing_construct_function(ctx: DemoContext) -> None:
    person = ctx.require("Person")
    ctx.bindings["eve"] = person("Eve", 30)


def run_missing_construct_class(ctx: DemoContext) -> None:
    person_class = ctx.require("PersonClass")
    ctx.bindings["eve"] = person_class("Eve", 30)
