from __future__ import annotations

import argparse
import os
import re
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

from playback_window.client_config import InitialClientSettings, load_initial_settings
from playback_window.events import SizingTrigger
from playback_window.logging_utils import configure_sizing_logger
from playback_window.property_store import (
    AUTOFIT_LARGER_OPTION,
    AUTOFIT_OPTION,
    AUTOFIT_SMALLER_OPTION,
    FULLSCREEN_OPTION,
    GEOMETRY_OPTION,
    MSG_LEVEL_OPTION,
    VIDEO_HEIGHT_PROPERTY,
    VIDEO_WIDTH_PROPERTY,
    WINDOW_SCALE_OPTION,
    DictPropertyStore,
)
from playback_window.sizing_orchestrator import SizingOrchestrator

_VIDEO_SIZE_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")
_OPTION_FLAGS = {
    "geometry": GEOMETRY_OPTION,
    "autofit": AUTOFIT_OPTION,
    "autofit_larger": AUTOFIT_LARGER_OPTION,
    "autofit_smaller": AUTOFIT_SMALLER_OPTION,
    "window_scale": WINDOW_SCALE_OPTION,
    "fs": FULLSCREEN_OPTION,
    "msg_level": MSG_LEVEL_OPTION,
}


def parse_video_size(text: str) -> Tuple[int, int]:
    match = _VIDEO_SIZE_RE.match(text)
    if match is None:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")
    return int(match.group(1)), int(match.group(2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview playback window sizing")
    parser.add_argument("--settings", help="Path to window_settings.json")
    parser.add_argument("--geometry", help="[W[%%]xH[%%]][+-X+-Y]")
    parser.add_argument("--autofit", help="Target size, aspect preserved")
    parser.add_argument("--autofit-larger", dest="autofit_larger", help="Maximum size")
    parser.add_argument("--autofit-smaller", dest="autofit_smaller", help="Minimum size")
    parser.add_argument("--window-scale", dest="window_scale", help="Multiplier on the video size")
    parser.add_argument("--fs", choices=("yes", "no"), help="Start in fullscreen")
    parser.add_argument("--msg-level", dest="msg_level", help="prefix=level[,prefix=level]")
    parser.add_argument("--video-size", dest="video_size", type=parse_video_size, help="Native video size WxH")
    return parser


def build_properties(args: argparse.Namespace, settings: InitialClientSettings) -> Dict[str, object]:
    """Merge settings-file options with command-line flags; flags win."""
    properties: Dict[str, object] = dict(settings.options)
    for attr, name in _OPTION_FLAGS.items():
        value = getattr(args, attr, None)
        if value is not None:
            properties[name] = value
    if args.video_size is not None:
        properties[VIDEO_WIDTH_PROPERTY], properties[VIDEO_HEIGHT_PROPERTY] = args.video_size
    return properties


def resolve_settings_path(arg_path: Optional[str]) -> Path:
    if arg_path:
        return Path(arg_path).expanduser().resolve()
    env_override = os.getenv("PLAYBACK_WINDOW_SETTINGS")
    if env_override:
        return Path(env_override).expanduser().resolve()
    return (Path.cwd() / "window_settings.json").resolve()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings_path = resolve_settings_path(args.settings)
    settings = load_initial_settings(settings_path)
    logger = configure_sizing_logger(debug_enabled=settings.debug, retention=settings.log_retention)
    logger.info("Starting playback window preview (pid=%s)", os.getpid())
    logger.debug("Loaded settings from %s: debug=%s options=%d", settings_path, settings.debug, len(settings.options))

    from PyQt6.QtWidgets import QApplication, QWidget

    from playback_window.qt_window import QtWindowSink, primary_screen_extent

    app = QApplication(sys.argv)
    window = QWidget()
    window.setWindowTitle("Playback window")
    store = DictPropertyStore(build_properties(args, settings))
    orchestrator = SizingOrchestrator(store, screen_fn=primary_screen_extent, emit_fn=QtWindowSink(window))

    orchestrator.dispatch(SizingTrigger.READY)
    orchestrator.dispatch(SizingTrigger.VIDEO_RECONFIG, new_file=True)
    logger.debug("Window ready; size=%dx%d pos=(%d, %d)", window.width(), window.height(), window.x(), window.y())
    window.show()

    exit_code = app.exec()
    logger.info("Playback window preview exiting with code %s", exit_code)
    return int(exit_code)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
