# src/stmta/core/ports.py

"""
Ports (interfaces) used by the task store.

TaskStore depends on this Protocol instead of pymongo's Collection directly,
so tests can hand it an in-memory collection.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol

Document = dict[str, Any]


class InsertResult(Protocol):
    @property
    def inserted_id(self) -> Any: ...


class UpdateResult(Protocol):
    @property
    def matched_count(self) -> int: ...


class DeleteResult(Protocol):
    @property
    def deleted_count(self) -> int: ...


class TaskCollection(Protocol):
    """The subset of pymongo.collection.Collection used by TaskStore."""

    def insert_one(self, document: Document) -> InsertResult: ...

    def find(self, filter: Mapping[str, Any] | None = None) -> Iterable[Document]: ...

    def update_one(self, filter: Mapping[str, Any], update: Mapping[str, Any]) -> UpdateResult: ...

    def delete_one(self, filter: Mapping[str, Any]) -> DeleteResult: ...
