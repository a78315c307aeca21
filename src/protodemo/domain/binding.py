"""Three-level object graph contrasting dynamic and lexical receivers."""
from __future__ import annotations

from typing import Callable

from protodemo.core.host import HostEnvironment
from protodemo.core.objects import Arrow, ProtoObject, define

CHAIN_NAMES = ("Boris", "Natasha", "Fearless Leader")


def _describe(this: ProtoObject) -> list[str]:
    lines = [f"describe() receiver is {this.name}"]
    child = this.get("child")
    if child is not None:
        lines.extend(child.describe())
    return lines


def _whoami(this: ProtoObject) -> str:
    return this.name


def _lexical_describe(child: ProtoObject | None) -> Callable[[ProtoObject], list[str]]:
    def describe_lexical(this: ProtoObject) -> list[str]:
        lines = [f"describe_lexical() receiver is {this.name}"]
        if child is not None:
            lines.extend(child.describe_lexical())
        return lines

    return describe_lexical


def _report_later(this: ProtoObject) -> str:
    report = Arrow(lambda captured: f"arrow defined inside a method sees {captured.name}", this)
    return report()


def _level(name: str, child: ProtoObject | None, host: HostEnvironment) -> ProtoObject:
    level = ProtoObject(name=name)
    if child is not None:
        level.child = child
    define(level, "describe", _describe)
    define(level, "whoami", _whoami)
    level.describe_lexical = Arrow(_lexical_describe(child), host.global_object, "describe_lexical")
    return level


def build_receiver_chain(host: HostEnvironment) -> ProtoObject:
    """Return the outermost of three nested objects.

    Every level carries a dynamic `describe` and `whoami` and a lexical
    `describe_lexical`. The lexical operations are defined at top level, so
    their receiver is the host's global object no matter which level they are
    reached through.
    """
    *outer_names, innermost = CHAIN_NAMES
    outer = _level(innermost, None, host)
    for name in reversed(outer_names):
        outer = _level(name, outer, host)
    define(outer, "report_later", _report_later)
    return outer
