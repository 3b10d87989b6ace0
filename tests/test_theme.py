from __future__ import annotations

import logging

import pytest

import theme
from theme import normalize_hex, resolve_hex


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("#A1b2C3", "#A1b2C3"),
        ("a1b2c3", "#a1b2c3"),
        (" #000000 ", "#000000"),
        ("#12345", None),
        ("zzzzzz", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_hex(raw, expected) -> None:
    assert normalize_hex(raw) == expected


def test_environment_beats_dotenv_beats_default() -> None:
    env = {"TODO_DONE": "111111"}
    dotenv = {"TODO_DONE": "#222222", "TODO_PENDING": "#333333"}

    assert resolve_hex("TODO_DONE", "#ffffff", env, dotenv) == "#111111"
    assert resolve_hex("TODO_PENDING", "#ffffff", env, dotenv) == "#333333"
    assert resolve_hex("TODO_PRIMARY", "#ffffff", env, dotenv) == "#ffffff"


def test_invalid_override_falls_through_with_warning(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="theme")

    value = resolve_hex("TODO_DONE", "#ffffff", {"TODO_DONE": "green"}, {"TODO_DONE": "#00ff00"})

    assert value == "#00ff00"
    assert "Ignoring invalid environment color TODO_DONE='green'." in caplog.messages


def test_color_is_plain_when_disabled(monkeypatch) -> None:
    monkeypatch.setattr(theme, "_ENABLE", False)
    assert theme.color("hi", theme.BOLD) == "hi"


def test_color_wraps_when_enabled(monkeypatch) -> None:
    monkeypatch.setattr(theme, "_ENABLE", True)
    assert theme.color("hi", "\033[1m") == "\033[1mhi" + theme.RESET


def test_256_color_cube() -> None:
    assert theme._fg_256(255, 255, 255) == "\033[38;5;231m"
    assert theme._fg_256(0, 0, 0) == "\033[38;5;16m"


def test_dotenv_setting_prefers_environment(monkeypatch) -> None:
    monkeypatch.setitem(theme._DOTENV, "TODO_ALT_SCREEN", "0")
    monkeypatch.delenv("TODO_ALT_SCREEN", raising=False)
    assert theme.dotenv_setting("TODO_ALT_SCREEN") == "0"

    monkeypatch.setenv("TODO_ALT_SCREEN", "1")
    assert theme.dotenv_setting("TODO_ALT_SCREEN") == "1"


def test_problems_are_collected_instead_of_logged(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="theme")
    problems: list[str] = []

    value = resolve_hex("TODO_PENDING", "#ffffff", {}, {"TODO_PENDING": "nope"}, problems)

    assert value == "#ffffff"
    assert problems == ["Ignoring invalid .env color TODO_PENDING='nope'."]
    assert caplog.messages == []


def test_report_config_warnings_logs_once(monkeypatch, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="theme")
    monkeypatch.setattr(theme, "_CONFIG_WARNINGS", ["Ignoring invalid environment color TODO_DONE='x'."])

    assert theme.report_config_warnings() == 1
    assert theme.report_config_warnings() == 0
    assert caplog.messages == ["Ignoring invalid environment color TODO_DONE='x'."]


def test_public_names_exist_and_are_public() -> None:
    for name in theme.__all__:
        assert not name.startswith("_")
        assert hasattr(theme, name)
