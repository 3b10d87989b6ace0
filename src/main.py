"""Main entry point for the terminal to-do list.

Settings come from command-line options first, then the environment
(or the project .env file), then defaults.
"""
import logging
from pathlib import Path
from typing import Optional
import click
from cli import CLI
from logging_setup import setup_logging
from task_store import TaskStore
from theme import dotenv_setting, report_config_warnings

__version__ = "0.1.0"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--alt-screen/--no-alt-screen", default=None,
              help="Draw in the terminal's alternate screen (default: on, or TODO_ALT_SCREEN).")
@click.option("--log-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Also write DEBUG logs to DIR/todo.log.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help="Console log level (default: WARNING, or TODO_LOG_LEVEL).")
@click.version_option(__version__, prog_name="todo")
def main(alt_screen: Optional[bool], log_dir: Optional[Path], log_level: Optional[str]) -> None:
    """Single-screen to-do list: add tasks, tick them off, clear finished ones."""
    if alt_screen is None:
        alt_screen = _truthy_env(dotenv_setting("TODO_ALT_SCREEN"), True)
    setup_logging(log_dir=log_dir, console_level=log_level or dotenv_setting("TODO_LOG_LEVEL"))
    report_config_warnings()
    logger.debug("Starting (alt_screen=%s, log_dir=%s).", alt_screen, log_dir)
    CLI(TaskStore(), alt_screen=alt_screen).run()

if __name__ == "__main__":
    main()
