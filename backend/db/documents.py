"""Document store for full page text (MongoDB)."""

from __future__ import annotations

from typing import Any, Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from backend.config import settings
from backend.summary.models import SummaryRecord


class MongoDocumentSink:
    """Inserts one ``{url, fullText, createdAt}`` document per successful run."""

    name = "mongodb"

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def save(self, record: SummaryRecord) -> None:
        self._collection.insert_one(
            {
                "url": record.url,
                "fullText": record.full_text,
                "createdAt": record.created_at,
            }
        )


def get_mongo_client(uri: Optional[str] = None) -> Optional[MongoClient]:
    """Build a client for *uri* (default ``settings.mongodb_uri``).

    Returns ``None`` when no URI is configured.  The client connects lazily,
    so an unreachable server only shows up when a document is written.
    """
    uri = uri if uri is not None else settings.mongodb_uri
    if not uri:
        return None
    return MongoClient(uri, serverSelectionTimeoutMS=settings.mongodb_timeout_ms)


def get_document_collection(client: Optional[MongoClient]) -> Optional[Collection[Any]]:
    """Return the configured blogs collection of *client*, if there is one."""
    if client is None:
        return None
    return client[settings.mongodb_database][settings.mongodb_collection]
