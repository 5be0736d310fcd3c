"""Inbound triggers and outbound window events."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from playback_window.geom_value import GeomValue


class SizingTrigger(str, Enum):
    READY = "ready"
    VIDEO_RECONFIG = "video-reconfig"


@dataclass(frozen=True)
class WindowMoveEvent:
    flip_x: bool
    flip_y: bool
    x: GeomValue
    y: GeomValue


@dataclass(frozen=True)
class WindowResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class FullscreenRequest:
    pass


WindowEvent = Union[WindowMoveEvent, WindowResizeEvent, FullscreenRequest]
