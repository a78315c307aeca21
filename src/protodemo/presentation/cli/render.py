"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Any, Iterable


def debug_enabled() -> bool:
    """Return True only when PROTODEMO_DEBUG is explicitly set to '1'."""
    return os.getenv("PROTODEMO_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_unit_header(unit_id: str, title: str) -> None:
    """Print a unit heading, tagged with its id in debug mode."""
    render_heading(title)
    if debug_enabled():
        print(f"[{unit_id}]")


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def render_value(label: str, value: Any) -> None:
    """Print a labelled object the way a console would show it."""
    print(f"{label}: {value!r}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def render_diagnostic(exc: BaseException) -> None:
    """Print the developer-facing text of an error that aborted a unit."""
    print(f"{type(exc).__name__}: {exc}")
