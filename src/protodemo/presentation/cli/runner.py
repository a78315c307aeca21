"""Sequential runner for demonstration units."""
from __future__ import annotations

from typing import Iterable, Sequence

from protodemo.core.host import HostEnvironment
from protodemo.domain.demo_models import DemoContext, DemoUnit, RunReport
from protodemo.services.errors import DemoError, UnknownDemoError

from .render import render_diagnostic, render_unit_header


class DemoRunner:
    """Runs units top to bottom against one shared context."""

    def __init__(self, units: Sequence[DemoUnit], host: HostEnvironment | None = None) -> None:
        self._units = tuple(units)
        self.context = DemoContext(host=host or HostEnvironment())

    @property
    def unit_ids(self) -> list[str]:
        return [unit.unit_id for unit in self._units]

    def select(self, only: Iterable[str] | None = None) -> list[DemoUnit]:
        """Return the requested units and the units they require, in declaration order."""
        if not only:
            return list(self._units)
        wanted = set(only)
        unknown = sorted(wanted.difference(self.unit_ids))
        if unknown:
            raise UnknownDemoError(f"Unknown demonstration unit(s): {', '.join(unknown)}.")

        position = {unit.unit_id: idx for idx, unit in enumerate(self._units)}
        pending = list(wanted)
        while pending:
            unit = self._units[position[pending.pop()]]
            for required in unit.requires:
                if position.get(required, len(self._units)) >= position[unit.unit_id]:
                    raise DemoError(
                        f"Unit '{unit.unit_id}' requires '{required}', which is not declared before it."
                    )
                if required not in wanted:
                    wanted.add(required)
                    pending.append(required)
        return [unit for unit in self._units if unit.unit_id in wanted]

    def run(self, only: Iterable[str] | None = None) -> RunReport:
        """Run the selected units.

        A unit with an `expected_error` is aborted by that error, whose text is
        printed before the next unit starts. Any other error propagates and
        ends the run.
        """
        units = self.select(only)
        report = RunReport()
        for unit in units:
            render_unit_header(unit.unit_id, unit.title)
            if unit.expected_error is None:
                unit.run(self.context)
                report.completed.append(unit.unit_id)
                continue
            try:
                unit.run(self.context)
            except unit.expected_error as exc:
                render_diagnostic(exc)
                report.aborted.append(unit.unit_id)
                continue
            raise DemoError(
                f"Unit '{unit.unit_id}' was expected to fail with "
                f"{unit.expected_error.__name__} but completed."
            )
        return report
