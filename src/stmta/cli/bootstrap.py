# src/stmta/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- builds the MongoDB client from settings,
- checks the server is reachable (ping),
- wires the collection into a TaskStore that owns the client.
"""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from ..config import Settings, get_settings
from ..errors import StoreConnectionError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def open_task_store(settings: Settings | None = None) -> TaskStore:
    """
    Connect to the configured store and return a ready TaskStore.

    Raises StoreConnectionError if the server cannot be reached within
    settings.server_timeout_ms.
    """
    if settings is None:
        settings = get_settings()

    try:
        client: MongoClient = MongoClient(
            settings.mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.server_timeout_ms,
        )
    except PyMongoError as e:
        raise StoreConnectionError(f"failed to connect to MongoDB: {e}") from e

    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StoreConnectionError(f"failed to ping MongoDB: {e}") from e

    collection = client[settings.db_name][settings.collection_name]
    logger.info(
        "Connected to MongoDB db=%s collection=%s",
        settings.db_name,
        settings.collection_name,
    )
    return TaskStore(collection, client=client)
