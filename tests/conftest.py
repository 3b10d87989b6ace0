from __future__ import annotations

import logging
import re

import pytest

from task_store import TaskStore

ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Drop colors and terminal control sequences so assertions see plain text."""
    return ANSI_RE.sub("", text)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def restore_root_logging():
    """Undo setup_logging() so handlers do not leak between tests."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)
