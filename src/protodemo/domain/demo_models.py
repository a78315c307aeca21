"""Runtime models shared by the demonstration runner."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from protodemo.core.host import HostEnvironment


@dataclass(slots=True)
class DemoContext:
    """Shared top-level scope visible to every unit in a run."""

    host: HostEnvironment
    bindings: dict[str, Any] = field(default_factory=dict)

    def require(self, name: str) -> Any:
        """Return a binding made by an earlier unit."""
        try:
            return self.bindings[name]
        except KeyError as exc:
            raise NameError(f"'{name}' is not defined; an earlier unit must bind it.") from exc


@dataclass(frozen=True, slots=True)
class DemoUnit:
    """One self-contained demonstration.

    `requires` names earlier units whose bindings this one reads.
    `expected_error` marks a unit whose point is to be aborted by that error.
    """

    unit_id: str
    title: str
    run: Callable[[DemoContext], None]
    requires: tuple[str, ...] = ()
    expected_error: type[BaseException] | None = None


@dataclass(slots=True)
class RunReport:
    """Which units completed and which were aborted by their error."""

    completed: list[str] = field(default_factory=list)
    aborted: list[str] = field(default_factory=list)
