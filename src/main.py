"""Main entry point for the terminal todo list."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional
from cli import CLI
from config import load_settings
from errors import StoreError
from logging_setup import setup_logging
from storage import FileKeyValueStore, TaskStore
from todolist import TodoList

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="todolist", description="Terminal todo list.")
    parser.add_argument("--store", type=Path, help="path of the store file")
    parser.add_argument("--log-level", help="log level name (DEBUG, INFO, ...)")
    parser.add_argument("--no-resize", action="store_true",
                        help="do not ask the terminal to resize to 60x40")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = load_settings(
        store_path=args.store,
        log_level=args.log_level,
        resize_terminal=False if args.no_resize else None,
    )
    setup_logging(settings.log_path, settings.log_level_value)

    try:
        kv = FileKeyValueStore(settings.store_path).open()
        store = TaskStore(kv, settings.store_key)
        todos = TodoList(store.load())
        CLI(todos, store, settings.resize_terminal, settings.color).run()
    except StoreError as exc:
        logger.exception("fatal store error")
        print(f"todolist: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
