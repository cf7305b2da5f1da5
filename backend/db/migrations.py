"""Database initialisation.

``init_db(conn)`` is idempotent — safe to call on an existing database.
"""

from __future__ import annotations

import sqlite3

_SCHEMA = """
CREATE TABLE IF NOT EXISTS summaries (
    id          TEXT PRIMARY KEY,
    url         TEXT NOT NULL,
    summary     TEXT NOT NULL,
    urdu        TEXT NOT NULL,
    created_at  TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_summaries_created_at ON summaries(created_at);
"""


def init_db(conn: sqlite3.Connection) -> None:
    """Create the ``summaries`` table and its index if absent.

    There is deliberately no uniqueness constraint on ``url``: the table is an
    append-only log and the same page may be summarised many times.
    """
    conn.executescript(_SCHEMA)
