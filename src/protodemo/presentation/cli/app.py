"""Console entry for the demonstration run."""
from __future__ import annotations

from pathlib import Path

from protodemo.core.host import HostEnvironment
from protodemo.domain.demo_models import RunReport

from .config import load_config
from .demos import DEFAULT_UNITS
from .runner import DemoRunner


def build_runner(config_path: Path | None = None) -> tuple[DemoRunner, list[str]]:
    """Construct the runner and the unit selection from config."""
    config = load_config(config_path)
    host = HostEnvironment(
        global_name=config["global_name"],
        dialog_mode=config["dialog_mode"],
    )
    return DemoRunner(DEFAULT_UNITS, host=host), config["demos"]


def main(config_path: Path | None = None) -> RunReport:
    """Run every configured demonstration in order."""
    runner, selection = build_runner(config_path)
    print("=== Object model demonstrations ===")
    report = runner.run(selection)
    print(f"\nCompleted {len(report.completed)} unit(s); {len(report.aborted)} aborted as expected.")
    return report
