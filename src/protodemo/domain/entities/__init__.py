"""Entity kinds exports."""

from .kinds import attack, build_person_classes, build_person_kinds, say_name

__all__ = [
    "attack",
    "build_person_classes",
    "build_person_kinds",
    "say_name",
]
