from __future__ import annotations

from playback_window.msg_level import DEFAULT_LOG_LEVEL, MessageLevelFilter, ModuleLogLevel


def test_empty_uses_default_minimum() -> None:
    levels = MessageLevelFilter.parse(None)
    assert levels.minimum == DEFAULT_LOG_LEVEL == "error"
    assert levels.entries == ()


def test_entries_keep_order_and_raise_minimum() -> None:
    levels = MessageLevelFilter.parse("vo=debug,ao=warn")
    assert levels.entries == (ModuleLogLevel("vo", "debug"), ModuleLogLevel("ao", "warn"))
    assert levels.minimum == "debug"


def test_less_verbose_levels_do_not_lower_minimum() -> None:
    levels = MessageLevelFilter.parse("cplayer=fatal")
    assert levels.minimum == "error"
    assert levels.entries == (ModuleLogLevel("cplayer", "fatal"),)


def test_all_only_moves_minimum() -> None:
    levels = MessageLevelFilter.parse("all=trace,vo=info")
    assert levels.minimum == "trace"
    assert levels.entries == (ModuleLogLevel("vo", "info"),)


def test_invalid_levels_and_tokens_are_ignored() -> None:
    levels = MessageLevelFilter.parse("vo=loud,ao,=info,demux=v")
    assert levels.entries == (ModuleLogLevel("", "info"), ModuleLogLevel("demux", "v"))
    assert levels.minimum == "v"


def test_entries_are_a_read_only_snapshot() -> None:
    levels = MessageLevelFilter.parse("vo=warn")
    entries = levels.entries
    assert isinstance(entries, tuple)
    assert MessageLevelFilter.parse("vo=warn").entries == entries
