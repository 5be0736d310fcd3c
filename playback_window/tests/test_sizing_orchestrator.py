from __future__ import annotations

import threading
from typing import Dict, List, Optional

import pytest

from playback_window.dimension_string import ScreenExtent
from playback_window.events import (
    FullscreenRequest,
    SizingTrigger,
    WindowEvent,
    WindowMoveEvent,
    WindowResizeEvent,
)
from playback_window.geom_value import Fraction, Pixels
from playback_window.property_store import DictPropertyStore
from playback_window.sizing_orchestrator import SizingOrchestrator


def _orchestrator(
    properties: Dict[str, object],
    *,
    screen: ScreenExtent = ScreenExtent(1920, 1080),
) -> tuple[SizingOrchestrator, DictPropertyStore, List[WindowEvent]]:
    events: List[WindowEvent] = []
    store = DictPropertyStore(properties)
    orchestrator = SizingOrchestrator(store, screen_fn=lambda: screen, emit_fn=events.append)
    return orchestrator, store, events


def test_ready_emits_move_then_resize() -> None:
    orchestrator, _, events = _orchestrator({"options/geometry": "800x600+10+20"})
    orchestrator.dispatch(SizingTrigger.READY)
    assert events == [
        WindowMoveEvent(False, False, Pixels(10), Pixels(20)),
        WindowResizeEvent(800, 600),
    ]


def test_ready_with_position_only() -> None:
    orchestrator, _, events = _orchestrator({"options/geometry": "-50%+0"})
    orchestrator.dispatch(SizingTrigger.READY)
    assert events == [WindowMoveEvent(True, False, Fraction(0.5), Pixels(0))]


def test_ready_with_oversized_geometry_emits_only_position() -> None:
    orchestrator, _, events = _orchestrator({"options/geometry": "800x99999999999999999999999+0+0"})
    orchestrator.dispatch(SizingTrigger.READY)
    assert events == [WindowMoveEvent(False, False, Pixels(0), Pixels(0))]


def test_ready_without_geometry_emits_nothing() -> None:
    orchestrator, store, events = _orchestrator({"options/geometry": ""})
    orchestrator.dispatch(SizingTrigger.READY)
    assert events == []
    assert store.requested_log_levels == ["error"]


def test_ready_fullscreen_trigger() -> None:
    orchestrator, _, events = _orchestrator({"options/fs": "yes"})
    orchestrator.dispatch(SizingTrigger.READY)
    assert events == [FullscreenRequest()]


def test_ready_fullscreen_requires_exact_yes() -> None:
    orchestrator, _, events = _orchestrator({"options/fs": "no"})
    orchestrator.dispatch(SizingTrigger.READY)
    assert events == []


def test_ready_forwards_minimum_log_level_and_rebuilds_list() -> None:
    orchestrator, store, _ = _orchestrator({"options/msg-level": "all=v,vo=debug"})
    orchestrator.dispatch(SizingTrigger.READY)
    assert store.requested_log_levels == ["debug"]
    assert [entry.prefix for entry in orchestrator.message_levels.entries] == ["vo"]

    store.set_property("options/msg-level", "ao=warn")
    orchestrator.dispatch(SizingTrigger.READY)
    assert store.requested_log_levels == ["debug", "error"]
    assert [entry.prefix for entry in orchestrator.message_levels.entries] == ["ao"]


def test_reconfig_window_scale() -> None:
    orchestrator, _, events = _orchestrator({"options/window-scale": "2.0", "dwidth": 640, "dheight": 480})
    orchestrator.dispatch(SizingTrigger.VIDEO_RECONFIG)
    assert events == [WindowResizeEvent(1280, 960)]


def test_reconfig_autofit_overrides_scale() -> None:
    orchestrator, _, events = _orchestrator(
        {
            "options/window-scale": "2.0",
            "options/autofit": "1280x720",
            "dwidth": 640,
            "dheight": 480,
        }
    )
    orchestrator.dispatch(SizingTrigger.VIDEO_RECONFIG)
    assert events == [WindowResizeEvent(960, 720)]


def test_reconfig_autofit_larger_alone_cancels_scale() -> None:
    # no autofit target means a 0x0 target, clamped to nothing by the ceiling
    orchestrator, _, events = _orchestrator(
        {
            "options/window-scale": "2.0",
            "options/autofit-larger": "1000x1000",
            "dwidth": 640,
            "dheight": 480,
        }
    )
    orchestrator.dispatch(SizingTrigger.VIDEO_RECONFIG)
    assert events == []


def test_reconfig_autofit_smaller_alone_replaces_scale() -> None:
    orchestrator, _, events = _orchestrator(
        {
            "options/window-scale": "3",
            "options/autofit-smaller": "50%x50%",
            "dwidth": 1280,
            "dheight": 720,
        }
    )
    orchestrator.dispatch(SizingTrigger.VIDEO_RECONFIG)
    assert events == [WindowResizeEvent(960, 540)]


def test_reconfig_without_directives_emits_nothing() -> None:
    orchestrator, _, events = _orchestrator({"dwidth": 640, "dheight": 480})
    orchestrator.dispatch(SizingTrigger.VIDEO_RECONFIG)
    assert events == []


def test_reconfig_with_unknown_video_size_emits_nothing() -> None:
    orchestrator, _, events = _orchestrator({"options/window-scale": "1.0", "options/autofit": "800x600"})
    orchestrator.dispatch(SizingTrigger.VIDEO_RECONFIG)
    assert events == []


def test_reconfig_same_file_is_ignored() -> None:
    orchestrator, _, events = _orchestrator({"options/window-scale": "1.0", "dwidth": 640, "dheight": 480})
    orchestrator.dispatch(SizingTrigger.VIDEO_RECONFIG, new_file=False)
    assert events == []


def test_screen_is_sampled_on_every_pass() -> None:
    screens = [ScreenExtent(1000, 1000), ScreenExtent(2000, 2000)]
    events: List[WindowEvent] = []
    store = DictPropertyStore({"options/geometry": "50%x50%"})
    orchestrator = SizingOrchestrator(store, screen_fn=lambda: screens.pop(0), emit_fn=events.append)
    orchestrator.dispatch(SizingTrigger.READY)
    orchestrator.dispatch(SizingTrigger.READY)
    assert events == [WindowResizeEvent(500, 500), WindowResizeEvent(1000, 1000)]


def test_repeated_passes_are_identical() -> None:
    properties = {
        "options/geometry": "50%x+10-10",
        "options/window-scale": "1.5",
        "options/autofit-smaller": "320x240",
        "dwidth": 720,
        "dheight": 576,
    }
    first, _, first_events = _orchestrator(properties)
    for _ in range(3):
        first.dispatch(SizingTrigger.READY)
        first.dispatch(SizingTrigger.VIDEO_RECONFIG)
    assert first_events[:3] == first_events[3:6] == first_events[6:9]


def test_dispatch_from_other_thread_is_refused() -> None:
    orchestrator, _, _ = _orchestrator({})
    errors: List[Optional[BaseException]] = []

    def _run() -> None:
        try:
            orchestrator.dispatch(SizingTrigger.READY)
        except RuntimeError as exc:
            errors.append(exc)

    worker = threading.Thread(target=_run)
    worker.start()
    worker.join()
    assert len(errors) == 1


def test_unknown_trigger_is_rejected() -> None:
    orchestrator, _, _ = _orchestrator({})
    with pytest.raises(ValueError):
        orchestrator.dispatch("ready")  # type: ignore[arg-type]
