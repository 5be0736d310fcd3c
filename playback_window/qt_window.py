"""PyQt6 side of the sizing boundary: screen extent in, window events out."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtGui import QGuiApplication, QScreen
from PyQt6.QtWidgets import QWidget

from playback_window.dimension_string import ScreenExtent
from playback_window.events import FullscreenRequest, WindowEvent, WindowMoveEvent, WindowResizeEvent
from playback_window.window_placement import resolve_window_origin

_LOGGER_NAME = "PlaybackWindow.Sizing"
_SIZING_LOGGER = logging.getLogger(_LOGGER_NAME)


def screen_extent(screen: Optional[QScreen]) -> ScreenExtent:
    if screen is None:
        return ScreenExtent(0, 0)
    geometry = screen.geometry()
    return ScreenExtent(geometry.width(), geometry.height())


def primary_screen_extent() -> ScreenExtent:
    return screen_extent(QGuiApplication.primaryScreen())


class QtWindowSink:
    """Applies window events to a QWidget.

    Moves are resolved against the widget size at the time they arrive. The
    last move is kept and re-applied after every later resize, so a
    fractional or flipped position such as `+50%+50%` still holds once the
    size lands.
    """

    def __init__(
        self,
        widget: QWidget,
        *,
        screen_fn: Optional[Callable[[], ScreenExtent]] = None,
    ) -> None:
        self._widget = widget
        self._screen_fn = screen_fn or self._widget_screen_extent
        self._last_move: Optional[WindowMoveEvent] = None

    def _widget_screen_extent(self) -> ScreenExtent:
        return screen_extent(self._widget.screen())

    def _place(self, event: WindowMoveEvent) -> None:
        size = self._widget.size()
        x, y = resolve_window_origin(event, self._screen_fn(), (size.width(), size.height()))
        _SIZING_LOGGER.debug("Moving window to (%d, %d) for %s", x, y, event)
        self._widget.move(x, y)

    def __call__(self, event: WindowEvent) -> None:
        if isinstance(event, WindowResizeEvent):
            _SIZING_LOGGER.debug("Resizing window to %dx%d", event.width, event.height)
            self._widget.resize(event.width, event.height)
            if self._last_move is not None:
                self._place(self._last_move)
        elif isinstance(event, WindowMoveEvent):
            self._last_move = event
            self._place(event)
        elif isinstance(event, FullscreenRequest):
            _SIZING_LOGGER.debug("Entering fullscreen")
            self._widget.showFullScreen()
