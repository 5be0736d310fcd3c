"""Aspect-preserving autofit using the autofit/autofit-smaller/autofit-larger triple."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from playback_window.dimension_string import ResolvedDimensions, ScreenExtent, parse_dimension_string
from playback_window.property_store import VideoExtent

_LOGGER_NAME = "PlaybackWindow.Sizing"
_SIZING_LOGGER = logging.getLogger(_LOGGER_NAME)

Size = Tuple[int, int]


@dataclass(frozen=True)
class AutofitConstraints:
    target: Optional[ResolvedDimensions] = None
    floor: Optional[ResolvedDimensions] = None
    ceiling: Optional[ResolvedDimensions] = None

    @property
    def is_empty(self) -> bool:
        return self.target is None and self.floor is None and self.ceiling is None


def _parse_constraint(label: str, text: Optional[str], screen: ScreenExtent) -> Optional[ResolvedDimensions]:
    if not text:
        return None
    _SIZING_LOGGER.debug("Retrieved option --%s=%s", label, text)
    resolved = parse_dimension_string(text, screen).resolved()
    if resolved is None:
        _SIZING_LOGGER.debug("Ignoring --%s=%s: not a valid size", label, text)
    return resolved


def parse_autofit_constraints(
    autofit: Optional[str],
    smaller: Optional[str],
    larger: Optional[str],
    screen: ScreenExtent,
) -> AutofitConstraints:
    return AutofitConstraints(
        target=_parse_constraint("autofit", autofit, screen),
        floor=_parse_constraint("autofit-smaller", smaller, screen),
        ceiling=_parse_constraint("autofit-larger", larger, screen),
    )


def _clamp(value: int, low: int, high: Optional[int]) -> int:
    # ceiling is checked first, so it wins when floor > ceiling
    if high is not None and value > high:
        return high
    if value < low:
        return low
    return value


def apply_autofit(
    constraints: AutofitConstraints,
    video: Optional[VideoExtent],
    candidate: Size,
) -> Size:
    """Clamp the target into the floor/ceiling box and fit the video into it.

    The target is 0x0 when no autofit size is given, so ``candidate`` only
    survives when no constraint is set at all. One ratio, taken from the
    tighter axis, is applied to both sides so the result keeps the video's
    aspect ratio.
    """
    if constraints.is_empty or video is None:
        return candidate

    target = (0, 0)
    if constraints.target is not None:
        target = (constraints.target.width, constraints.target.height)
    floor = (0, 0)
    if constraints.floor is not None:
        floor = (constraints.floor.width, constraints.floor.height)
    ceiling: Tuple[Optional[int], Optional[int]] = (None, None)
    if constraints.ceiling is not None:
        ceiling = (constraints.ceiling.width, constraints.ceiling.height)

    box_width = _clamp(target[0], floor[0], ceiling[0])
    box_height = _clamp(target[1], floor[1], ceiling[1])
    ratio = min(box_width / float(video.width), box_height / float(video.height))
    return int(ratio * video.width), int(ratio * video.height)
