"""Scale the native video size by the ``window-scale`` factor."""
from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from playback_window.property_store import VideoExtent

_LOGGER_NAME = "PlaybackWindow.Sizing"
_SIZING_LOGGER = logging.getLogger(_LOGGER_NAME)

Size = Tuple[int, int]


def parse_scale_factor(text: Optional[str]) -> Optional[float]:
    if not text:
        return None
    try:
        scale = float(text.strip())
    except ValueError:
        _SIZING_LOGGER.debug("Ignoring malformed window scale %r", text)
        return None
    if not math.isfinite(scale):
        _SIZING_LOGGER.debug("Ignoring non-finite window scale %r", text)
        return None
    return scale


def apply_window_scale(scale_text: Optional[str], video: Optional[VideoExtent], candidate: Size) -> Size:
    """Return ``scale * video`` truncated, or ``candidate`` when nothing applies."""
    scale = parse_scale_factor(scale_text)
    if scale is None or video is None:
        return candidate
    return int(scale * video.width), int(scale * video.height)
