"""Module-pattern singleton: one public operation, one hidden helper."""
from __future__ import annotations

from protodemo.core.objects import ProtoObject


def _build_my_module() -> ProtoObject:
    def my_private_method(some_arg: object) -> str:
        return f"Wow it's a private method on my_module! Called with an argument of: {some_arg}."

    def my_public_method(some_arg: object) -> list[str]:
        return [
            f"Wow it's my public method, called with an argument of: {some_arg}.",
            "But this module has a private method called my_private_method "
            "which can't be called externally.",
            my_private_method(some_arg),
        ]

    return ProtoObject(my_public_method=my_public_method)


# Built once, when the module is first imported.
my_module = _build_my_module()
