"""Factory for plain person value objects."""
from __future__ import annotations

from protodemo.core.objects import ProtoObject
from protodemo.services.errors import FactoryError


def factory_person(name: str, age: int) -> ProtoObject:
    """Build a person whose `say_name` reads state kept out of its fields."""
    if not isinstance(name, str) or not name:
        raise FactoryError(f"Factory person needs a non-empty name, got {name!r}.")

    # Only say_name can reach this.
    private_var = list(name)

    def say_name() -> str:
        return (
            f"I am a factory person and my name is {name}! "
            f"I have a private variable that says: {private_var[0]}!"
        )

    return ProtoObject(name=name, age=age, say_name=say_name)
