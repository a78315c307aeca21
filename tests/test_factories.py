import pytest

from protodemo.core.objects import get_prototype_of
from protodemo.services.errors import FactoryError
from protodemo.services.factories import factory_enemy, factory_person, factory_vector


def test_factory_person_exposes_name_age_and_say_name() -> None:
    sabrina = factory_person("Sabrina", 28)

    assert sabrina.own_keys() == ["name", "age", "say_name"]
    assert sabrina.say_name() == (
        "I am a factory person and my name is Sabrina! "
        "I have a private variable that says: S!"
    )


def test_factory_person_private_state_is_unreachable() -> None:
    sabrina = factory_person("Sabrina", 28)

    assert sabrina.get("private_var") is None
    assert "private_var" not in sabrina
    with pytest.raises(AttributeError):
        sabrina.private_var


def test_factory_person_keeps_private_state_after_field_change() -> None:
    sabrina = factory_person("Sabrina", 28)

    sabrina.name = "Renamed"

    assert "my name is Sabrina!" in sabrina.say_name()


def test_factory_enemy_merges_person_fields() -> None:
    sabrina = factory_person("Sabrina", 28)
    jonny = factory_enemy("Jonny", 32, "a baguette")

    assert jonny.own_keys() == ["weapon", "attack", "name", "age", "say_name"]
    assert "my name is Jonny!" in jonny.say_name()
    assert jonny.attack(sabrina) == "Jonny is attacking Sabrina with a baguette!"


def test_factory_enemies_share_no_behavior() -> None:
    jonny = factory_enemy("Jonny", 32, "a baguette")
    johnny = factory_enemy("Jonny", 32, "a baguette")
    target = factory_person("Sabrina", 28)

    assert jonny.attack is not johnny.attack
    assert jonny.say_name is not johnny.say_name
    assert get_prototype_of(jonny) is get_prototype_of(johnny)

    jonny.attack = lambda other: "replaced"

    assert johnny.attack(target) == "Jonny is attacking Sabrina with a baguette!"


@pytest.mark.parametrize("name", ["", None, 42])
def test_factory_person_rejects_bad_names(name: object) -> None:
    with pytest.raises(FactoryError):
        factory_person(name, 1)  # type: ignore[arg-type]


def test_factory_enemy_rejects_bad_weapon() -> None:
    with pytest.raises(FactoryError):
        factory_enemy("Jonny", 32, None)  # type: ignore[arg-type]


def test_vector_swap_without_temporary() -> None:
    v1 = factory_vector(0, 0)
    v2 = factory_vector(2, 5)

    v1, v2 = v2, v1

    assert (v1.x, v1.y) == (2, 5)
    assert (v2.x, v2.y) == (0, 0)
