# src/stmta/cli/main.py

"""
CLI entrypoint.

One invocation performs exactly one action, picked by flag priority:
-add > -complete N > -del N > -list > "invalid command".

Errors are reported once on stderr with a short prefix and exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence, TextIO

from rich.console import Console

from ..config import Settings, get_settings
from ..errors import StmtaError, StoreConnectionError, ValidationError
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore
from .bootstrap import open_task_store
from .render import print_tasks

logger = logging.getLogger(__name__)

EMPTY_TASK_MESSAGE = "empty todo is not allowed"

StoreFactory = Callable[[Settings], TaskStore]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stmta",
        description="Simple Task Management Terminal Application",
        allow_abbrev=False,
    )
    parser.add_argument("-add", action="store_true", help="Add a new todo")
    parser.add_argument("-complete", type=int, default=0, metavar="N", help="Mark a todo as completed")
    parser.add_argument("-del", dest="delete", type=int, default=0, metavar="N", help="Deletes a todo")
    parser.add_argument("-list", action="store_true", help="List all todos")
    # Like a flag parser that stops at the first non-flag word: everything after
    # it is task text, even words starting with a dash.
    parser.add_argument(
        "words",
        nargs=argparse.REMAINDER,
        help="Task text for -add (read from stdin if omitted)",
    )
    return parser


def read_task_text(stream: TextIO, args: Sequence[str]) -> str:
    """
    Task text from positional args (joined by single spaces) or one stdin line.

    Stdin is only read when no args are given.
    """
    if args:
        text = " ".join(args)
    else:
        text = stream.readline().rstrip("\r\n")

    if not text.strip():
        raise ValidationError(EMPTY_TASK_MESSAGE)
    return text


def _fail(stderr: TextIO, prefix: str | None, err: Exception) -> int:
    logger.debug("Command failed", exc_info=err)
    if prefix:
        print(f"{prefix}: {err}", file=stderr)
    else:
        print(str(err), file=stderr)
    return 1


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    store_factory: StoreFactory = open_task_store,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    if settings is None:
        settings = get_settings()

    opts = build_parser().parse_args(argv)

    try:
        store = store_factory(settings)
    except StoreConnectionError as e:
        return _fail(stderr, "Failed to connect to DB", e)

    try:
        if opts.add:
            try:
                text = read_task_text(stdin, opts.words)
            except ValidationError as e:
                return _fail(stderr, None, e)
            try:
                store.add(text)
            except StmtaError as e:
                return _fail(stderr, "Failed to add task", e)

        elif opts.complete > 0:
            try:
                store.complete(opts.complete)
            except StmtaError as e:
                return _fail(stderr, "Failed to mark task as completed", e)

        elif opts.delete > 0:
            try:
                store.delete(opts.delete)
            except StmtaError as e:
                return _fail(stderr, "Failed to delete task", e)

        elif opts.list:
            try:
                tasks = store.get_all()
                pending = store.count_pending()
            except StmtaError as e:
                return _fail(stderr, "Failed to list tasks", e)
            print_tasks(tasks, pending, console=Console(file=stdout))

        else:
            print("invalid command", file=stdout)

        return 0
    finally:
        store.close()


def configure_logging(settings: Settings) -> None:
    """Set up logging; an unusable data dir drops the file log instead of failing the command."""
    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.data_dir if settings.log_to_file else None
    try:
        setup_logging(log_dir=log_dir, console_level=console_level)
    except OSError as e:
        setup_logging(log_dir=None, console_level=console_level)
        logger.warning("File logging disabled, cannot write to %s: %s", log_dir, e)


def run() -> None:
    """Console-script entry: configure logging from settings, then dispatch."""
    settings = get_settings()
    configure_logging(settings)

    sys.exit(main(settings=settings))


if __name__ == "__main__":
    run()
