# src/stmta/cli/render.py

"""Terminal rendering for `stmta -list`."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..tasks.task_models import Task

# RFC 822 layout: "02 Jan 06 15:04 UTC"
TIMESTAMP_FORMAT = "%d %b %y %H:%M %Z"

BANNER = """\
╔═════════════════════════════════════════════╗
║              Welcome to STMTA!              ║
║ Simple Task Management Terminal Application ║
╚═════════════════════════════════════════════╝"""


def format_timestamp(ts: datetime | None) -> str:
    if ts is None:
        return "-"
    return ts.astimezone().strftime(TIMESTAMP_FORMAT)


def build_table(tasks: Sequence[Task], pending: int) -> Table:
    table = Table(
        box=box.ROUNDED,
        caption=Text(f"You have {pending} pending todos", style="bold red"),
    )
    table.add_column("#", justify="right")
    table.add_column("Task")
    table.add_column("Done?", justify="center")
    table.add_column("CreatedAt", justify="center")
    table.add_column("CompletedAt", justify="center")

    for idx, task in enumerate(tasks, start=1):
        created = format_timestamp(task.created_at)
        completed = format_timestamp(task.completed_at)
        if task.done:
            table.add_row(
                str(idx),
                Text(f"✅ {task.text}", style="green"),
                Text("yes", style="green"),
                Text(created, style="bright_black"),
                Text(completed, style="bright_black"),
            )
        else:
            table.add_row(
                str(idx),
                Text(task.text, style="blue"),
                Text("no", style="blue"),
                created,
                completed,
            )
    return table


def print_tasks(tasks: Sequence[Task], pending: int, *, console: Console | None = None) -> None:
    """Clear the screen (TTY only), then print banner, task table and pending footer."""
    if console is None:
        console = Console()

    # Console.clear() is a no-op when output is not a terminal.
    console.clear()
    console.print()
    console.print(Text(BANNER, style="bright_green"), justify="center")
    console.print(build_table(tasks, pending))
