# src/stmta/errors.py

"""Error taxonomy shared by the task store and the CLI.

Every error is fatal to the invocation that raised it: the CLI reports it once
on stderr and exits with status 1. Nothing is retried.
"""

from __future__ import annotations


class StmtaError(Exception):
    """Base class for all application errors."""


class StoreConnectionError(StmtaError):
    """The document store could not be reached or pinged at startup."""


class ValidationError(StmtaError, ValueError):
    """User input rejected before reaching the store (e.g. empty task text)."""


class TaskIndexError(StmtaError, IndexError):
    """A 1-based task position is outside the current listing."""

    def __init__(self, index: int, total: int, message: str | None = None) -> None:
        self.index = index
        self.total = total
        super().__init__(message or f"invalid index {index} (have {total} tasks)")


class StorageError(StmtaError):
    """A store operation (insert/find/update/delete/decode) failed."""
