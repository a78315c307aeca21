"""Factory helpers for value objects."""

from .enemy_factory import factory_enemy
from .person_factory import factory_person
from .vector_factory import factory_vector

__all__ = [
    "factory_enemy",
    "factory_person",
    "factory_vector",
]
