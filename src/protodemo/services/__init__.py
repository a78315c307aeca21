"""Service layer exports."""

from .errors import DemoError, FactoryError, UnknownDemoError
from .factories import factory_enemy, factory_person, factory_vector

__all__ = [
    "DemoError",
    "FactoryError",
    "UnknownDemoError",
    "factory_enemy",
    "factory_person",
    "factory_vector",
]
