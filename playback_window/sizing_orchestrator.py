"""Run the sizing passes for window-ready and video-reconfig triggers.

The orchestrator stays free of Qt types; callers inject a screen provider and
an event sink. Both entry points must run on the thread that created it,
normally the GUI thread.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable

from playback_window.autofit import apply_autofit, parse_autofit_constraints
from playback_window.dimension_string import ScreenExtent
from playback_window.events import (
    FullscreenRequest,
    SizingTrigger,
    WindowEvent,
    WindowMoveEvent,
    WindowResizeEvent,
)
from playback_window.geometry_string import parse_geometry_string
from playback_window.msg_level import MessageLevelFilter
from playback_window.property_store import (
    AUTOFIT_LARGER_OPTION,
    AUTOFIT_OPTION,
    AUTOFIT_SMALLER_OPTION,
    FULLSCREEN_OPTION,
    GEOMETRY_OPTION,
    MSG_LEVEL_OPTION,
    WINDOW_SCALE_OPTION,
    PropertyStore,
    get_video_extent,
    read_option,
)
from playback_window.window_scale import apply_window_scale

_LOGGER_NAME = "PlaybackWindow.Sizing"
_SIZING_LOGGER = logging.getLogger(_LOGGER_NAME)


class SizingOrchestrator:
    """Dispatches sizing triggers and emits the resulting window events."""

    def __init__(
        self,
        store: PropertyStore,
        *,
        screen_fn: Callable[[], ScreenExtent],
        emit_fn: Callable[[WindowEvent], None],
    ) -> None:
        self._store = store
        self._screen_fn = screen_fn
        self._emit = emit_fn
        self._owner_thread = threading.get_ident()
        self._message_levels = MessageLevelFilter()

    @property
    def message_levels(self) -> MessageLevelFilter:
        return self._message_levels

    def dispatch(self, trigger: SizingTrigger, *, new_file: bool = True) -> None:
        if threading.get_ident() != self._owner_thread:
            raise RuntimeError("SizingOrchestrator must be dispatched from the thread that created it")
        if trigger is SizingTrigger.READY:
            self._handle_ready()
        elif trigger is SizingTrigger.VIDEO_RECONFIG:
            if new_file:
                self._handle_video_reconfig()
            else:
                _SIZING_LOGGER.debug("Video reconfig for the current file; window size left alone")
        else:
            raise ValueError(f"Unknown sizing trigger: {trigger!r}")

    def _handle_ready(self) -> None:
        self._handle_geometry()
        self._handle_fullscreen()
        self._handle_msg_level()

    def _handle_geometry(self) -> None:
        geometry = read_option(self._store, GEOMETRY_OPTION)
        if geometry is None:
            return
        _SIZING_LOGGER.debug("Retrieved option --geometry=%s", geometry)
        spec = parse_geometry_string(geometry, self._screen_fn())
        if spec.position is not None:
            position = spec.position
            self._emit(WindowMoveEvent(position.flip_x, position.flip_y, position.x, position.y))
        else:
            _SIZING_LOGGER.debug("Geometry %r carries no usable position", geometry)
        if spec.size is not None:
            self._emit(WindowResizeEvent(spec.size.width, spec.size.height))
        else:
            _SIZING_LOGGER.debug("Geometry %r carries no usable size", geometry)

    def _handle_fullscreen(self) -> None:
        if self._store.get_property_string(FULLSCREEN_OPTION) == "yes":
            self._emit(FullscreenRequest())

    def _handle_msg_level(self) -> None:
        text = self._store.get_property_string(MSG_LEVEL_OPTION)
        self._message_levels = MessageLevelFilter.parse(text)
        _SIZING_LOGGER.debug(
            "Message levels: minimum=%s entries=%d",
            self._message_levels.minimum,
            len(self._message_levels.entries),
        )
        self._store.request_log_messages(self._message_levels.minimum)

    def _handle_video_reconfig(self) -> None:
        video = get_video_extent(self._store)
        scale_text = read_option(self._store, WINDOW_SCALE_OPTION)
        if scale_text is not None:
            _SIZING_LOGGER.debug("Retrieved option --window-scale=%s", scale_text)
        size = apply_window_scale(scale_text, video, (0, 0))

        constraints = parse_autofit_constraints(
            read_option(self._store, AUTOFIT_OPTION),
            read_option(self._store, AUTOFIT_SMALLER_OPTION),
            read_option(self._store, AUTOFIT_LARGER_OPTION),
            self._screen_fn(),
        )
        size = apply_autofit(constraints, video, size)

        width, height = size
        if width > 0 and height > 0:
            self._emit(WindowResizeEvent(width, height))
        else:
            _SIZING_LOGGER.debug("No window size resolved for video %s", video)
