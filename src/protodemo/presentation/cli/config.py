"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

_DEFAULT_GLOBAL_NAME = "global"
_DEFAULT_DIALOG_MODE = "print"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "protodemo"
        return Path.home() / "protodemo"
    return Path.home() / ".config" / "protodemo"


def get_default_config_path() -> Path:
    """Return the config path, honouring PROTODEMO_CONFIG when set."""
    override = os.environ.get("PROTODEMO_CONFIG")
    if override:
        return Path(override)
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {
        "global_name": _DEFAULT_GLOBAL_NAME,
        "dialog_mode": _DEFAULT_DIALOG_MODE,
        "demos": [],
    }


def _normalize_global_name(value: object) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return _DEFAULT_GLOBAL_NAME


def _normalize_dialog_mode(value: object) -> str:
    return "silent" if value == "silent" else _DEFAULT_DIALOG_MODE


def _normalize_demos(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "global_name": _normalize_global_name(raw.get("global_name")),
        "dialog_mode": _normalize_dialog_mode(raw.get("dialog_mode")),
        "demos": _normalize_demos(raw.get("demos")),
    }


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)

