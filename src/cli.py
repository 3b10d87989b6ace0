"""Command-line interface loop for the to-do list.

Tasks are addressed by their row number as shown on screen; the loop
looks up the row's task snapshot and forwards it to the store, so a row
number never reaches the store itself.
"""
import logging
from typing import Optional
from models import Task
from task_store import TaskStore
from task_view import display

logger = logging.getLogger(__name__)

# --- terminal control helpers ---
# We aggressively clear: ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home))
# Order (3J first) improves reliability in some terminals.
def _clear_screen() -> None:
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _enter_alt_screen() -> None:
    # Switch to alternate screen buffer
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    # Return to normal screen buffer
    print("\033[?1049l", end="", flush=True)


COMMAND_ALIASES = {
    'a': 'add',
    'add': 'add',
    'd': 'done',
    'done': 'done',
    'p': 'pending',
    'undo': 'pending',
    'pending': 'pending',
    't': 'toggle',
    'x': 'toggle',
    'toggle': 'toggle',
    'c': 'clear',
    'clear': 'clear',
    'h': 'help',
    '?': 'help',
    'help': 'help',
    'q': 'exit',
    'quit': 'exit',
    'exit': 'exit',
}

UNKNOWN_COMMAND = "Unknown command. Type 'help' for instructions."
MAX_ROW_DIGITS = 9


class CLI:
    def __init__(self, store: Optional[TaskStore] = None, alt_screen: bool = True):
        self.store: TaskStore = store if store is not None else TaskStore()
        self.alt_screen: bool = alt_screen
        # one-line notice shown under the list on the next redraw
        self.message: Optional[str] = None

    def run(self) -> None:
        """Main REPL loop; the list is cleared/redrawn each cycle.

        Uses the terminal's alternate screen (if enabled) so prior renders
        do not remain in scrollback history.
        """
        exit_message: Optional[str] = None
        logger.info("Session started (alt_screen=%s).", self.alt_screen)
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                self._redraw()
                line = input("\n: ").strip()
                if not line:
                    continue
                if COMMAND_ALIASES.get(line.split()[0].lower()) == 'exit':
                    exit_message = "Goodbye."
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                print(exit_message)
        logger.info("Session ended: %s", self.store)

    def _redraw(self) -> None:
        _clear_screen()
        display(self.store)
        if self.message:
            print("\n" + self.message)
            self.message = None

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        cmd = COMMAND_ALIASES.get(tokens[0].lower())
        if cmd == 'add':
            self._cmd_add(line, tokens)
        elif cmd == 'done':
            self._cmd_row(tokens, self.store.mark_done)
        elif cmd == 'pending':
            self._cmd_row(tokens, self.store.mark_pending)
        elif cmd == 'toggle':
            self._cmd_row(tokens, self.store.toggle)
        elif cmd == 'clear':
            self.store.clear_finished_tasks()
        elif cmd == 'help':
            _clear_screen()
            self._help()
            input("\nPress Enter to return to the list...")
        else:
            logger.debug("Unknown command %r.", tokens[0])
            self.message = UNKNOWN_COMMAND

    # ---- individual command helpers ----
    def _cmd_add(self, line: str, tokens: list[str]) -> None:
        if len(tokens) > 1:  # inline shorthand
            # keep the user's spacing inside the name; the store trims the ends
            self.store.add_task(line.split(None, 1)[1])
        else:
            self._add()

    def _cmd_row(self, tokens: list[str], action) -> None:
        if len(tokens) != 2:
            self.message = f"Usage: {tokens[0].lower()} <row>"
            return
        task = self._task_for_row(tokens[1])
        if task is not None:
            action(task)

    def _task_for_row(self, raw: str) -> Optional[Task]:
        raw = raw.rstrip('.')
        # isdecimal(), not isdigit(): superscripts like "²" are digits int() rejects
        if not raw.isdecimal() or len(raw) > MAX_ROW_DIGITS:
            self.message = "Invalid row."
            return None
        position = int(raw)
        tasks = self.store.list()
        if position < 1 or position > len(tasks):
            self.message = f"No task #{position}."
            return None
        return tasks[position - 1]

    # -------------------- user-interactive flows --------------------
    def _help(self) -> None:
        print("Commands:")
        print("  add                 Add a task (prompts for the name)")
        print("  add <name...>       Shorthand add with inline name (e.g., add buy milk)")
        print("  done <row>          Mark the task on that row done (alias: d)")
        print("  pending <row>       Mark the task on that row pending again (aliases: p, undo)")
        print("  toggle <row>        Tick/untick the checkbox on that row (aliases: t, x)")
        print("  clear               Clear finished tasks (alias: c)")
        print("  help                Show this help (press Enter to return)")
        print("  exit                Exit (aliases: q, quit)")

    def _add(self) -> None:
        # blank input is ignored: the Add action does nothing without a name
        self.store.add_task(input("Enter task: "))
