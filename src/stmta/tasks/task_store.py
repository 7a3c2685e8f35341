# src/stmta/tasks/task_store.py

from __future__ import annotations

import logging
from typing import Any

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from ..core.ports import TaskCollection
from ..errors import StorageError, TaskIndexError
from .task_models import FIELD_COMPLETED_AT, FIELD_DONE, FIELD_ID, Task, utc_now

logger = logging.getLogger(__name__)

_STORE_ERRORS = (PyMongoError, BSONError)


class TaskStore:
    """
    Document-store backed task list.

    Users address tasks by 1-based position in the current listing. Every
    position-based call re-fetches the full listing, maps the position to the
    document _id, and then filters on that _id. Nothing is cached between calls.

    Store failures are wrapped into StorageError and never retried.
    """

    def __init__(self, collection: TaskCollection, *, client: Any = None) -> None:
        self._collection = collection
        self._client = client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    # ---- low-level helpers ----

    def _resolve(self, index: int) -> tuple[Task, int]:
        tasks = self.get_all()
        if index < 1 or index > len(tasks):
            raise TaskIndexError(index, len(tasks))
        return tasks[index - 1], len(tasks)

    # ---- public API ----

    def add(self, text: str) -> Task:
        task = Task.new(text)
        try:
            result = self._collection.insert_one(task.to_document())
        except _STORE_ERRORS as e:
            raise StorageError(f"failed to add task: {e}") from e
        task.id = result.inserted_id
        logger.info("Task added id=%s", task.id)
        return task

    def get_all(self) -> list[Task]:
        try:
            docs = list(self._collection.find({}))
        except _STORE_ERRORS as e:
            raise StorageError(f"failed to retrieve tasks: {e}") from e

        try:
            return [Task.from_document(d) for d in docs]
        except (KeyError, TypeError) as e:
            raise StorageError(f"failed to decode tasks: {e!r}") from e

    def complete(self, index: int) -> Task:
        """
        Mark the task at 1-based `index` done.

        completed_at is set once: completing an already-done task changes nothing.
        """
        task, total = self._resolve(index)
        if task.done:
            logger.info("Task #%s id=%s already done; leaving completed_at as is", index, task.id)
            return task

        now = utc_now()
        try:
            result = self._collection.update_one(
                {FIELD_ID: task.id},
                {"$set": {FIELD_DONE: True, FIELD_COMPLETED_AT: now}},
            )
        except _STORE_ERRORS as e:
            raise StorageError(f"failed to complete task: {e}") from e

        if result.matched_count == 0:
            # Removed by another process between listing and update.
            raise TaskIndexError(index, total, f"task #{index} no longer exists")

        task.done = True
        task.completed_at = now
        logger.info("Task #%s id=%s completed", index, task.id)
        return task

    def delete(self, index: int) -> Task:
        task, total = self._resolve(index)
        try:
            result = self._collection.delete_one({FIELD_ID: task.id})
        except _STORE_ERRORS as e:
            raise StorageError(f"failed to delete task: {e}") from e

        if result.deleted_count == 0:
            raise TaskIndexError(index, total, f"task #{index} no longer exists")

        logger.info("Task #%s id=%s deleted", index, task.id)
        return task

    def count_pending(self) -> int:
        return sum(1 for t in self.get_all() if not t.done)
