"""Turn a move event into a top-left window origin on the screen."""
from __future__ import annotations

from typing import Tuple

from playback_window.dimension_string import ScreenExtent
from playback_window.events import WindowMoveEvent
from playback_window.geom_value import GeomValue, to_pixels


def _resolve_axis(value: GeomValue, flip: bool, screen_extent: int, window_extent: int) -> int:
    free_space = screen_extent - window_extent
    offset = to_pixels(value, free_space)
    if flip:
        return free_space - offset
    return offset


def resolve_window_origin(
    event: WindowMoveEvent,
    screen: ScreenExtent,
    window_size: Tuple[int, int],
) -> Tuple[int, int]:
    """Return ``(x, y)`` for the window's top-left corner.

    Percentages are shares of the space left beside the window, so ``50%``
    centres it. Flipped axes are measured from the right or bottom edge.
    """
    window_width, window_height = window_size
    x = _resolve_axis(event.x, event.flip_x, screen.width, window_width)
    y = _resolve_axis(event.y, event.flip_y, screen.height, window_height)
    return x, y
