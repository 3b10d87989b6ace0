"""Task store: ordered in-memory task list, id allocation and mutation.

Tasks are kept in insertion order. Status changes replace the stored
record with a copy, so snapshots handed out by list() never change under
the caller; a snapshot that no longer matches is simply ignored.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import List, Optional, Tuple
from models import Task

logger = logging.getLogger(__name__)

class TaskStore:
    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._next_id: int = 1

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # -------------------- queries --------------------
    def list(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_pending)

    def done_count(self) -> int:
        return len(self._tasks) - self.pending_count()

    def __len__(self) -> int:
        return len(self._tasks)

    # -------------------- task operations --------------------
    def add_task(self, raw_name: Optional[str]) -> Optional[Task]:
        """Append a pending task named ``raw_name.strip()``.

        Blank or whitespace-only names are ignored and None is returned.
        """
        name = (raw_name or '').strip()
        if not name:
            logger.debug("Ignoring blank task name.")
            return None
        task = Task(id=self._allocate_id(), name=name)
        self._tasks.append(task)
        logger.debug("Added task %d %r.", task.id, task.name)
        return task

    def mark_done(self, task: Task) -> Optional[Task]:
        return self._set_pending(task, False)

    def mark_pending(self, task: Task) -> Optional[Task]:
        return self._set_pending(task, True)

    def toggle(self, task: Task) -> Optional[Task]:
        """Flip a task's checkbox: pending -> done, done -> pending."""
        if task.is_pending:
            return self.mark_done(task)
        return self.mark_pending(task)

    def _set_pending(self, task: Task, is_pending: bool) -> Optional[Task]:
        try:
            idx = self._tasks.index(task)
        except ValueError:
            logger.debug("Task %d not found (stale reference); ignoring.", task.id)
            return None
        updated = replace(task, is_pending=is_pending)
        self._tasks[idx] = updated
        logger.debug("Task %d marked %s.", updated.id, updated.status_label.lower())
        return updated

    def clear_finished_tasks(self) -> int:
        """Remove every done task, keeping pending tasks in order.

        Returns the number of tasks removed.
        """
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.is_pending]
        removed = before - len(self._tasks)
        logger.debug("Cleared %d finished task(s).", removed)
        return removed

    def __str__(self) -> str:
        return f'Pending: {self.pending_count()} tasks, Done: {self.done_count()} tasks'
