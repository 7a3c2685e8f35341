# src/stmta/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

# Document field names (kept compatible with existing todoApp.todos data).
FIELD_ID = "_id"
FIELD_TEXT = "task"
FIELD_DONE = "done"
FIELD_CREATED_AT = "created_at"
FIELD_COMPLETED_AT = "completed_at"


def utc_now() -> datetime:
    # BSON dates carry millisecond precision. Round up so stored == returned
    # and the stored value is never earlier than the moment of the call.
    now = datetime.now(timezone.utc)
    ms_up = -(-now.microsecond // 1000) * 1000
    return now.replace(microsecond=0) + timedelta(microseconds=ms_up)


def _as_utc(value: Any) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, datetime):
        raise TypeError(f"expected datetime, got {type(value).__name__}")
    # Zero timestamps (0001-01-01) mean "never set".
    if value.year <= 1:
        return None
    if value.tzinfo is None:
        # pymongo returns naive UTC datetimes unless tz_aware=True.
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(slots=True)
class Task:
    """
    A single to-do entry.

    `id` is the document _id assigned by the store; it is never shown to the user,
    who addresses tasks by their 1-based position in a listing.
    """

    text: str
    done: bool = False
    created_at: datetime | None = None
    completed_at: datetime | None = None
    id: Any = None

    @classmethod
    def new(cls, text: str) -> Task:
        return cls(text=text, done=False, created_at=utc_now(), completed_at=None)

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            FIELD_TEXT: self.text,
            FIELD_DONE: self.done,
            FIELD_CREATED_AT: self.created_at,
            FIELD_COMPLETED_AT: self.completed_at,
        }
        if self.id is not None:
            doc[FIELD_ID] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Task:
        """Decode a stored document. Raises KeyError/TypeError on malformed data."""
        text = doc[FIELD_TEXT]
        if not isinstance(text, str):
            raise TypeError(f"task text must be a string, got {type(text).__name__}")

        done = bool(doc.get(FIELD_DONE, False))
        completed_at = _as_utc(doc.get(FIELD_COMPLETED_AT))

        return cls(
            id=doc.get(FIELD_ID),
            text=text,
            done=done,
            created_at=_as_utc(doc.get(FIELD_CREATED_AT)),
            completed_at=completed_at if done else None,
        )
