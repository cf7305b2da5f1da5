"""Structured record store for summaries (SQLite ``summaries`` table)."""

from __future__ import annotations

import sqlite3
import threading
import uuid
from typing import Any

from backend.summary.models import SummaryRecord


class SqliteSummarySink:
    """Appends one ``{url, summary, urdu}`` row per successful run.

    The connection is shared with the API's worker threads; writes are
    serialised so one sink's transaction never interleaves with another's.
    """

    name = "sqlite"

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.Lock()

    def save(self, record: SummaryRecord) -> None:
        with self._lock, self._conn:
            self._conn.execute(
                """
                INSERT INTO summaries (id, url, summary, urdu, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    str(uuid.uuid4()),
                    record.url,
                    record.summary,
                    record.urdu,
                    record.created_at.isoformat(),
                ),
            )


def list_summaries(conn: sqlite3.Connection, limit: int = 20) -> list[dict[str, Any]]:
    """Return the most recent summary rows, newest first."""
    rows = conn.execute(
        """
        SELECT id, url, summary, urdu, created_at
        FROM summaries
        ORDER BY created_at DESC
        LIMIT ?
        """,
        (limit,),
    ).fetchall()
    return [dict(row) for row in rows]
