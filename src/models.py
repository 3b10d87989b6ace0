"""Data models for the terminal to-do list.

Tasks are identified by a store-allocated integer id rather than by name,
so two tasks sharing a name remain distinct rows.
"""
from __future__ import annotations
from dataclasses import dataclass

PENDING_LABEL = "Pending"
DONE_LABEL = "Done"

@dataclass(frozen=True)
class Task:
    """A single to-do item.

    Fields:
        id: Unique integer id allocated by the TaskStore (never reused).
        name: Trimmed, non-blank task name.
        is_pending: True until the task is marked done.
    """
    id: int
    name: str
    is_pending: bool = True

    @property
    def status_label(self) -> str:
        return PENDING_LABEL if self.is_pending else DONE_LABEL
