"""Configuration helpers for the playback window launcher."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict


@dataclass
class InitialClientSettings:
    """Values used to bootstrap the launcher before any media is loaded."""

    log_retention: int = 5
    debug: bool = False
    options: Dict[str, str] = field(default_factory=dict)


def _coerce_options(raw: Any) -> Dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    options: Dict[str, str] = {}
    for key, value in raw.items():
        if value is None:
            continue
        name = str(key).strip()
        if not name:
            continue
        if not name.startswith("options/"):
            name = f"options/{name}"
        if isinstance(value, bool):
            options[name] = "yes" if value else "no"
        else:
            options[name] = str(value)
    return options


def load_initial_settings(settings_path: Path) -> InitialClientSettings:
    """Read bootstrap defaults from window_settings.json if it exists."""
    defaults = InitialClientSettings()
    try:
        raw = settings_path.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return defaults

    try:
        data: Dict[str, Any] = json.loads(raw)
    except json.JSONDecodeError:
        return defaults
    if not isinstance(data, dict):
        return defaults

    retention = defaults.log_retention
    try:
        retention = int(data.get("log_retention", retention))
    except (TypeError, ValueError):
        retention = defaults.log_retention
    debug = bool(data.get("debug", defaults.debug))

    return InitialClientSettings(
        log_retention=max(1, retention),
        debug=debug,
        options=_coerce_options(data.get("options")),
    )
