"""Factory for two-dimensional vectors."""
from __future__ import annotations

from protodemo.core.objects import ProtoObject


def factory_vector(x: float, y: float) -> ProtoObject:
    return ProtoObject(x=x, y=y)
