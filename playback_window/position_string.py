"""Parse the ``+X+Y`` position section of a geometry directive."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from playback_window.geom_value import GeomValue, parse_geom_token

_SIGNS = "+-"


@dataclass(frozen=True)
class PositionSpec:
    x: GeomValue
    y: GeomValue
    flip_x: bool = False
    flip_y: bool = False


def _parse_sign_prefix(text: str, pos: int) -> Optional[Tuple[str, int]]:
    end = pos
    while end < len(text) and text[end] in _SIGNS:
        end += 1
    if end - pos > 2:
        return None
    if end - pos == 2:
        # the second sign belongs to the number: "--10" is -10 from the far edge
        end -= 1
    return text[pos:end], end


def _parse_axis(text: str, pos: int) -> Optional[Tuple[GeomValue, bool, int]]:
    prefix = _parse_sign_prefix(text, pos)
    if prefix is None:
        return None
    sign, pos = prefix
    value, pos = parse_geom_token(text, pos)
    if value is None:
        return None
    return value, sign == "-", pos


def parse_position_string(text: str) -> Optional[PositionSpec]:
    """Parse X then Y; both axes are required."""
    x_axis = _parse_axis(text, 0)
    if x_axis is None:
        return None
    x, flip_x, pos = x_axis
    y_axis = _parse_axis(text, pos)
    if y_axis is None:
        return None
    y, flip_y, _ = y_axis
    return PositionSpec(x=x, y=y, flip_x=flip_x, flip_y=flip_y)
