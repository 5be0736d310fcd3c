"""Split a geometry directive into its dimension and position sections."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playback_window.dimension_string import ResolvedDimensions, ScreenExtent, parse_dimension_string
from playback_window.position_string import PositionSpec, parse_position_string

_SIGNS = "+-"


@dataclass(frozen=True)
class GeometrySpec:
    size: Optional[ResolvedDimensions] = None
    position: Optional[PositionSpec] = None


def _first_sign_index(text: str) -> int:
    for index, char in enumerate(text):
        if char in _SIGNS:
            return index
    return len(text)


def parse_geometry_string(text: str, screen: ScreenExtent) -> GeometrySpec:
    """Parse ``[W[%]xH[%]][+-X+-Y]``; each half is validated on its own."""
    split_at = _first_sign_index(text)
    size: Optional[ResolvedDimensions] = None
    if split_at > 0:
        size = parse_dimension_string(text[:split_at], screen).resolved()
    position = parse_position_string(text[split_at:])
    return GeometrySpec(size=size, position=position)
