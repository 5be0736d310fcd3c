"""Per-module log level list parsed from ``msg-level``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

# Ordered from least to most verbose.
LOG_LEVELS: Tuple[str, ...] = ("no", "fatal", "error", "warn", "info", "v", "debug", "trace")
DEFAULT_LOG_LEVEL = "error"
_LEVEL_RANK: Dict[str, int] = {name: rank for rank, name in enumerate(LOG_LEVELS)}


@dataclass(frozen=True)
class ModuleLogLevel:
    prefix: str
    level: str


class MessageLevelFilter:
    """Ordered ``(prefix, level)`` entries plus the minimum level to request."""

    def __init__(self, entries: Optional[List[ModuleLogLevel]] = None, minimum: str = DEFAULT_LOG_LEVEL) -> None:
        self._entries: List[ModuleLogLevel] = list(entries or [])
        self._minimum = minimum

    @classmethod
    def parse(cls, text: Optional[str]) -> "MessageLevelFilter":
        """Build a filter from ``prefix=level,prefix=level``.

        Unknown levels are skipped. ``all=<level>`` only raises the minimum
        and is not kept as an entry.
        """
        entries: List[ModuleLogLevel] = []
        minimum = DEFAULT_LOG_LEVEL
        for token in (text or "").split(","):
            prefix, _, level = token.partition("=")
            if level not in _LEVEL_RANK:
                continue
            if _LEVEL_RANK[level] > _LEVEL_RANK[minimum]:
                minimum = level
            if prefix != "all":
                entries.append(ModuleLogLevel(prefix=prefix, level=level))
        return cls(entries, minimum)

    @property
    def entries(self) -> Tuple[ModuleLogLevel, ...]:
        return tuple(self._entries)

    @property
    def minimum(self) -> str:
        return self._minimum
