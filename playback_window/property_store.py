"""Media engine property access used by the sizing passes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Protocol

GEOMETRY_OPTION = "options/geometry"
WINDOW_SCALE_OPTION = "options/window-scale"
AUTOFIT_OPTION = "options/autofit"
AUTOFIT_LARGER_OPTION = "options/autofit-larger"
AUTOFIT_SMALLER_OPTION = "options/autofit-smaller"
FULLSCREEN_OPTION = "options/fs"
MSG_LEVEL_OPTION = "options/msg-level"
VIDEO_WIDTH_PROPERTY = "dwidth"
VIDEO_HEIGHT_PROPERTY = "dheight"


@dataclass(frozen=True)
class VideoExtent:
    width: int
    height: int


class PropertyStore(Protocol):
    """String-keyed view of the media engine."""

    def get_property_string(self, name: str) -> Optional[str]:
        ...

    def get_property_int(self, name: str) -> Optional[int]:
        ...

    def request_log_messages(self, level: str) -> None:
        ...


class DictPropertyStore:
    """In-memory property store backed by a plain mapping."""

    def __init__(self, properties: Optional[Mapping[str, object]] = None) -> None:
        self._properties: Dict[str, object] = dict(properties or {})
        self.requested_log_levels: List[str] = []

    def set_property(self, name: str, value: object) -> None:
        self._properties[name] = value

    def get_property_string(self, name: str) -> Optional[str]:
        value = self._properties.get(name)
        if value is None:
            return None
        if isinstance(value, bool):
            return "yes" if value else "no"
        return str(value)

    def get_property_int(self, name: str) -> Optional[int]:
        value = self._properties.get(name)
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return None

    def request_log_messages(self, level: str) -> None:
        self.requested_log_levels.append(level)


def read_option(store: PropertyStore, name: str) -> Optional[str]:
    """Return the option string, or ``None`` when it is unset or empty."""
    value = store.get_property_string(name)
    if not value:
        return None
    return value


def get_video_extent(store: PropertyStore) -> Optional[VideoExtent]:
    width = store.get_property_int(VIDEO_WIDTH_PROPERTY)
    height = store.get_property_int(VIDEO_HEIGHT_PROPERTY)
    if width is None or height is None:
        return None
    if width <= 0 or height <= 0:
        return None
    return VideoExtent(width, height)
