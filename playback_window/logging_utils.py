from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Mapping, Optional, Tuple

LOGGER_NAME = "PlaybackWindow.Sizing"
LOG_DIR_ENV_VAR = "PLAYBACK_WINDOW_LOG_DIR"
LOG_LEVEL_ENV_VAR = "PLAYBACK_WINDOW_LOG_LEVEL"
PROPAGATE_ENV_VAR = "PLAYBACK_WINDOW_PROPAGATE_LOGS"
_TRUTHY = {"1", "true", "yes", "on"}


def resolve_logs_dir(log_dir_name: str = "PlaybackWindow", env: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the directory to store sizing logs.

    Strategy:
    - Use PLAYBACK_WINDOW_LOG_DIR if set.
    - Fall back to XDG state/cache locations, then `cwd/logs/<log_dir_name>`.
    - Final fallback: tempdir/<log_dir_name>.
    """
    environ = os.environ if env is None else env
    candidates = []

    env_override = environ.get(LOG_DIR_ENV_VAR)
    if env_override:
        candidates.append(Path(env_override).expanduser())

    state_home = Path(environ.get("XDG_STATE_HOME") or Path.home() / ".local" / "state")
    cache_home = Path(environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")
    candidates.append(state_home / log_dir_name)
    candidates.append(cache_home / log_dir_name)
    candidates.append(Path.cwd() / "logs" / log_dir_name)

    for target in candidates:
        try:
            target.mkdir(parents=True, exist_ok=True)
            return target
        except OSError:
            continue

    temp_fallback = Path(tempfile.gettempdir()) / log_dir_name
    temp_fallback.mkdir(parents=True, exist_ok=True)
    return temp_fallback


def build_rotating_file_handler(
    log_dir: Path,
    filename: str,
    *,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Construct a rotating file handler with sane defaults."""
    retention = max(1, retention)
    backup_count = max(0, retention - 1)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / filename,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def resolve_log_level_hint(env: Optional[Mapping[str, str]] = None) -> Tuple[Optional[int], Optional[str]]:
    """Read PLAYBACK_WINDOW_LOG_LEVEL as a number or a level name."""
    environ = os.environ if env is None else env
    raw = (environ.get(LOG_LEVEL_ENV_VAR) or "").strip()
    if not raw:
        return None, None
    try:
        value = int(raw)
    except ValueError:
        value = logging.getLevelName(raw.upper())
        if not isinstance(value, int):
            return None, None
    return value, logging.getLevelName(value)


def configure_sizing_logger(
    *,
    debug_enabled: bool = False,
    retention: int = 5,
    log_dir: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> logging.Logger:
    environ = os.environ if env is None else env
    logger = logging.getLogger(LOGGER_NAME)
    level, _ = resolve_log_level_hint(environ)
    logger.setLevel(level if level is not None else resolve_log_level(debug_enabled))
    logger.propagate = environ.get(PROPAGATE_ENV_VAR, "").lower() in _TRUTHY
    target_dir = log_dir if log_dir is not None else resolve_logs_dir(env=environ)
    handler = build_rotating_file_handler(
        target_dir,
        "playback-window.log",
        retention=retention,
        formatter=logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"),
    )
    for existing in list(logger.handlers):
        if isinstance(existing, RotatingFileHandler):
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
    return logger
