"""Factory for enemies composed from a factory person."""
from __future__ import annotations

from protodemo.core.objects import ProtoObject, assign
from protodemo.services.errors import FactoryError

from .person_factory import factory_person


def factory_enemy(name: str, age: int, weapon: str) -> ProtoObject:
    """Merge a weapon and `attack` into a freshly built factory person."""
    if not isinstance(weapon, str):
        raise FactoryError(f"Factory enemy needs a weapon label, got {weapon!r}.")

    def attack(target: ProtoObject) -> str:
        return f"{name} is attacking {target.name} with {weapon}!"

    return assign(ProtoObject(weapon=weapon, attack=attack), factory_person(name, age))
