"""Units about factories, closures and the module pattern."""
from __future__ import annotations

from protodemo.domain.demo_models import DemoContext
from protodemo.domain.modules import my_module
from protodemo.presentation.cli.render import render_lines, render_value
from protodemo.services.factories import factory_enemy, factory_person, factory_vector


def run_factory_functions(ctx: DemoContext) -> None:
    sabrina = factory_person("Sabrina", 28)
    jonny = factory_enemy("Jonny", 32, "a baguette")

    render_lines([sabrina.say_name(), jonny.say_name(), jonny.attack(sabrina)])
    print(f"sabrina exposes: {', '.join(sabrina.own_keys())}")
    print(f"sabrina.private_var -> {sabrina.get('private_var')}")
    ctx.bindings.update(sabrina=sabrina, jonny=jonny)


def run_module_pattern(ctx: DemoContext) -> None:
    render_lines(my_module.my_public_method("BURGER PLUGS"))
    print(f"my_module exposes: {', '.join(my_module.own_keys())}")
    ctx.bindings["my_module"] = my_module


def run_vector_swap(ctx: DemoContext) -> None:
    v1 = factory_vector(0, 0)
    v2 = factory_vector(2, 5)
    render_value("v1", v1)
    render_value("v2", v2)

    # Tuple assignment swaps the bindings without a temporary.
    v1, v2 = v2, v1
    render_value("v1", v1)
    render_value("v2", v2)
    ctx.bindings.update(v1=v1, v2=v2)
