"""Interactive run loop for the todo list.

Each cycle: draw, block for one event, route it (the router persists any
change), repeat until Escape in NORMAL mode or Ctrl-C. curses.wrapper
restores the terminal on every exit path, errors included.
"""
import curses
import logging
from models import Mode
from render import render
from router import Router
from storage import TaskStore
from terminal import CursesScreen
from todolist import TodoList

logger = logging.getLogger(__name__)

TERMINAL_ROWS = 40
TERMINAL_COLS = 60
TERMINAL_TITLE = "Todolist"


# --- terminal control helpers ---
def _request_size(rows: int, cols: int) -> None:
    # xterm window op: resize text area to rows x cols (ignored where unsupported)
    print(f"\033[8;{rows};{cols}t", end="", flush=True)


def _set_title(title: str) -> None:
    # OSC 0: window and icon title
    print(f"\033]0;{title}\007", end="", flush=True)


def run_loop(screen, router: Router) -> None:
    """Drive ``screen`` until the router asks to stop."""
    while True:
        rows, cols = screen.size()
        screen.paint(render(router.todos, rows, cols))
        event = screen.read_event()
        if event is None:
            continue
        if not router.handle(event, rows):
            logger.info("exit requested")
            return


class CLI:
    def __init__(self, todos: TodoList, store: TaskStore, resize_terminal: bool = True, color: bool = True):
        self.todos: TodoList = todos
        self.store: TaskStore = store
        self.resize_terminal: bool = resize_terminal
        self.color: bool = color

    def run(self) -> None:
        """Take over the terminal until the user quits.

        Store errors propagate after the terminal has been restored.
        """
        if self.resize_terminal:
            _request_size(TERMINAL_ROWS, TERMINAL_COLS)
        _set_title(TERMINAL_TITLE)
        self.todos.mode = Mode.NORMAL
        try:
            curses.wrapper(self._main)
        except KeyboardInterrupt:
            logger.info("interrupted")

    def _main(self, stdscr) -> None:
        screen = CursesScreen.setup(stdscr, self.color)
        try:
            run_loop(screen, Router(self.todos, self.store))
        finally:
            screen.close()
