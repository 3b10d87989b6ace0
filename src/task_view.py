"""Rendering of the task list: one checkbox row per task, wrapped to the terminal.

Row layout (visible text, colors aside):

    1. [ ] Buy milk                    Pending
    2. [x] Call the plumber about      Done
           the kitchen sink

Row numbers are 1-based positions in the current list; the CLI uses them
to address tasks.
"""
from __future__ import annotations
import re, shutil
from typing import Iterable, List
from models import Task
from task_store import TaskStore
from theme import color, HEADER_COLOR, STATUS_COLOR, ROW_COLOR, EMPTY_COLOR, BOLD, DIM

TITLE = "TO-DO LIST"
EMPTY_TEXT = "(no tasks)"
CHECKED = "[x]"
UNCHECKED = "[ ]"
MIN_WIDTH = 24
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
WORD_RE = re.compile(r"(\S+)(\s*)")
UNPRINTABLE = "?"

def visible_len(s: str) -> int:
    return len(ANSI_RE.sub('', s))

def printable(text: str) -> str:
    """Replace control characters (ESC, tabs, newlines, ...) so a name cannot drive the terminal."""
    return ''.join(c if c.isprintable() else UNPRINTABLE for c in text)

def _wrap_words(text: str, limit: int) -> List[str]:
    """Wrap on word boundaries; spacing between words on the same line is kept as typed."""
    lines: List[str] = []
    current = ''
    gap = ''
    for m in WORD_RE.finditer(text):
        w, next_gap = m.group(1), m.group(2)
        candidate = current + gap + w if current else w
        if len(candidate) <= limit or not current:
            current = candidate
        else:
            lines.append(current)
            current = w
        gap = next_gap
    if current:
        lines.append(current)
    return lines

def _render_task(position: int, task: Task, width: int) -> List[str]:
    box = UNCHECKED if task.is_pending else CHECKED
    prefix_visible = f"{position}. {box} "
    prefix_colored = color(f"{position}.", ROW_COLOR) + ' ' + color(box, STATUS_COLOR[task.is_pending]) + ' '
    status = task.status_label
    indent = ' ' * len(prefix_visible)
    # reserve room for " <status>" on the first line
    limit = max(1, width - len(prefix_visible) - len(status) - 1)
    lines_raw = _wrap_words(printable(task.name), limit) or ['']
    left = prefix_colored + color(lines_raw[0], BOLD)
    pad = max(1, width - visible_len(left) - len(status))
    out = [left + ' ' * pad + color(status, STATUS_COLOR[task.is_pending])]
    for raw_line in lines_raw[1:]:
        out.append(indent + color(raw_line, BOLD))
    return out

def render_rows(tasks: Iterable[Task], width: int) -> List[str]:
    """Return the display lines for ``tasks`` laid out in ``width`` columns."""
    width = max(MIN_WIDTH, width)
    lines: List[str] = []
    for position, task in enumerate(tasks, start=1):
        lines.extend(_render_task(position, task, width))
    if not lines:
        lines.append(color(EMPTY_TEXT, EMPTY_COLOR))
    return lines

def render_screen(store: TaskStore, width: int) -> List[str]:
    width = max(MIN_WIDTH, width)
    lines: List[str] = [color(TITLE, HEADER_COLOR, BOLD), color('-' * width, HEADER_COLOR)]
    lines.extend(render_rows(store.list(), width))
    lines.append(color('-' * width, HEADER_COLOR))
    lines.append(color(str(store), DIM))
    return lines

def display(store: TaskStore) -> None:
    term_width = shutil.get_terminal_size((80, 24)).columns
    for line in render_screen(store, term_width):
        print(line)
