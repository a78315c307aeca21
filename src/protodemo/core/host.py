"""Stand-in for the host environment a script runs inside."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from .objects import ProtoObject, call

DialogMode = Literal["print", "silent"]


@dataclass(slots=True)
class HostEnvironment:
    """Holds the global object and the blocking-dialog stub."""

    global_name: str = "global"
    dialog_mode: DialogMode = "print"
    alerts: list[Any] = field(default_factory=list)
    global_object: ProtoObject = field(init=False)

    def __post_init__(self) -> None:
        self.global_object = ProtoObject(name=self.global_name)

    def alert(self, value: Any) -> None:
        """Record a dialog request instead of blocking on it."""
        self.alerts.append(value)
        if self.dialog_mode == "print":
            print(f"[alert] {value!r}")

    def invoke(self, fn: Any, *args: Any) -> Any:
        """Plain function invocation: the global object becomes the receiver."""
        return call(fn, self.global_object, *args)
