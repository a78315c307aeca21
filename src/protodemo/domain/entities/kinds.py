"""Person and Enemy kinds built on linked prototypes."""
from __future__ import annotations

from protodemo.core.constructors import ClassKind, ConstructorFunction
from protodemo.core.objects import ProtoObject, define, set_prototype_of


def _init_person(this: ProtoObject, name: str = "Some Default Name", age: int = 0) -> None:
    this.name = name
    this.age = age


def _init_enemy(
    this: ProtoObject,
    name: str = "Some Default Enemy Name",
    age: int = 0,
    weapon: str = "Some Default Weapon",
) -> None:
    this.name = name
    this.age = age
    this.weapon = weapon


def say_name(this: ProtoObject) -> str:
    return f"Hi, I'm {this.name}"


def attack(this: ProtoObject, target: ProtoObject) -> str:
    return f"{this.name} is attacking {target.name} with {this.weapon}!"


def build_person_kinds() -> tuple[ConstructorFunction, ConstructorFunction]:
    """Create fresh Person and Enemy constructor functions.

    `say_name` is defined once on Person.prototype. Enemy.prototype is linked
    to it rather than copying it, and only adds `attack`.
    """
    person = ConstructorFunction(_init_person, name="Person")
    define(person.prototype, "say_name", say_name)

    enemy = ConstructorFunction(_init_enemy, name="Enemy")
    set_prototype_of(enemy.prototype, person.prototype)
    define(enemy.prototype, "attack", attack)
    return person, enemy


def build_person_classes() -> tuple[ClassKind, ClassKind]:
    """Create the class-style equivalents of Person and Enemy."""
    person_class = ClassKind("Person", init=_init_person, methods={"say_name": say_name})

    def _init_enemy_class(
        this: ProtoObject,
        name: str = "Some Default Enemy Name",
        age: int = 0,
        weapon: str = "Some Default Weapon",
    ) -> None:
        enemy_class.super_init(this, name, age)
        this.weapon = weapon

    enemy_class = ClassKind(
        "Enemy",
        init=_init_enemy_class,
        methods={"attack": attack},
        extends=person_class,
    )
    return person_class, enemy_class
