from __future__ import annotations

import logging

from click.testing import CliRunner

import theme
from main import main


def test_session_through_entry_point(restore_root_logging) -> None:
    runner = CliRunner()

    result = runner.invoke(main, ["--no-alt-screen"], input="add Buy milk\nadd\n   \nd 1\nexit\n")

    assert result.exit_code == 0, result.output
    assert "Buy milk" in result.output
    assert "Pending: 0 tasks, Done: 1 tasks" in result.output
    assert result.output.rstrip().endswith("Goodbye.")
    assert "\033[?1049h" not in result.output


def test_alt_screen_defaults_on(restore_root_logging) -> None:
    result = CliRunner().invoke(main, [], input="q\n")

    assert result.exit_code == 0, result.output
    assert "\033[?1049h" in result.output
    assert "\033[?1049l" in result.output


def test_alt_screen_from_environment(restore_root_logging) -> None:
    result = CliRunner().invoke(main, [], input="q\n", env={"TODO_ALT_SCREEN": "off"})

    assert result.exit_code == 0, result.output
    assert "\033[?1049h" not in result.output


def test_log_dir_collects_debug_records(tmp_path, restore_root_logging) -> None:
    log_dir = tmp_path / "logs"

    result = CliRunner().invoke(main, ["--no-alt-screen", "--log-dir", str(log_dir)], input="add A\nexit\n")

    assert result.exit_code == 0, result.output
    for h in logging.getLogger().handlers:
        h.flush()
    text = (log_dir / "todo.log").read_text(encoding="utf-8")
    assert "Starting (alt_screen=False" in text
    assert "Added task 1 'A'." in text


def test_bad_log_level_is_a_usage_error(restore_root_logging) -> None:
    result = CliRunner().invoke(main, ["--log-level", "chatty"])

    assert result.exit_code == 2


def test_version() -> None:
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "todo, version 0.1.0" in result.output


def test_config_warnings_reach_the_log_file(tmp_path, monkeypatch, restore_root_logging) -> None:
    monkeypatch.setattr(theme, "_CONFIG_WARNINGS", ["Ignoring invalid environment color TODO_DONE='teal'."])
    log_dir = tmp_path / "logs"

    result = CliRunner().invoke(
        main, ["--no-alt-screen", "--log-dir", str(log_dir)], input="exit\n", env={"TODO_LOG_LEVEL": "chatty"}
    )

    assert result.exit_code == 0, result.output
    for h in logging.getLogger().handlers:
        h.flush()
    text = (log_dir / "todo.log").read_text(encoding="utf-8")
    assert "WARNING logging_setup: Unknown log level 'chatty'; using INFO." in text
    assert "WARNING theme: Ignoring invalid environment color TODO_DONE='teal'." in text
