"""Summarise pipeline — URL variant.

``SummaryPipeline.summarise`` runs the whole flow for a single address:

    validate → fetch → extract → summarise → gloss → persist

Steps up to extraction fail fast with a member of the
:mod:`backend.errors` taxonomy.  Summarising and glossing cannot fail on
viable text.  Persistence is best-effort: each sink is written
independently, and a failing sink is logged and otherwise ignored.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from backend.config import settings
from backend.errors import ContentTooShortError, InvalidInputError
from backend.scraper.extractor import extract_content
from backend.scraper.fetcher import fetch_url
from backend.scraper.models import CleanPage, RawPage
from backend.summary.dictionary import URDU_DICTIONARY
from backend.summary.glossator import gloss
from backend.summary.models import SummaryRecord
from backend.summary.summarizer import DEFAULT_MAX_SENTENCES, summarize

logger = logging.getLogger(__name__)

# http(s) with a host, no length cap.
_URL_ADAPTER = TypeAdapter(AnyHttpUrl)


class SummarySink(Protocol):
    """A write-only persistence collaborator."""

    name: str

    def save(self, record: SummaryRecord) -> None: ...


@dataclass
class SummaryPipeline:
    """Fetch → extract → summarise → gloss, with explicit collaborators."""

    fetch: Callable[[str], RawPage] = fetch_url
    extract: Callable[[RawPage], CleanPage] = extract_content
    sinks: Sequence[SummarySink] = field(default_factory=tuple)
    dictionary: Mapping[str, str] = field(default_factory=lambda: URDU_DICTIONARY)
    min_content_length: int = 50
    max_sentences: int = DEFAULT_MAX_SENTENCES

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def validate(self, url: Any) -> str:
        """Return *url*, trimmed, if it is an http(s) URL with a host."""
        if not isinstance(url, str) or not url.strip():
            raise InvalidInputError()
        url = url.strip()
        try:
            _URL_ADAPTER.validate_python(url)
        except ValidationError as exc:
            logger.info("Rejected address %r: %s", url, exc.errors()[0].get("msg", ""))
            raise InvalidInputError() from exc
        return url

    def run(self, url: Any) -> SummaryRecord:
        """Run steps 1–5 and return the record without persisting it."""
        address = self.validate(url)
        raw = self.fetch(address)
        page = self.extract(raw)

        if len(page.text) < self.min_content_length:
            logger.info(
                "Content of %s too short (%d < %d chars)",
                address, len(page.text), self.min_content_length,
            )
            raise ContentTooShortError()

        summary = summarize(page.text, self.max_sentences)
        return SummaryRecord(
            url=address,
            summary=summary,
            gloss=gloss(summary, self.dictionary),
            full_text=page.text,
            title=page.title,
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def save_to(self, sink: SummarySink, record: SummaryRecord) -> bool:
        """Write *record* to one sink; failures are logged, never raised."""
        try:
            sink.save(record)
        except Exception:
            logger.exception("Saving %s to %s failed", record.url, sink.name)
            return False
        return True

    def persist(self, record: SummaryRecord) -> None:
        for sink in self.sinks:
            self.save_to(sink, record)

    def summarise(self, url: Any) -> SummaryRecord:
        """Run the pipeline, then persist the record best-effort."""
        record = self.run(url)
        self.persist(record)
        return record


def build_pipeline(
    conn: Optional[sqlite3.Connection] = None,
    collection: Optional[Any] = None,
) -> SummaryPipeline:
    """Wire the default pipeline from :data:`backend.config.settings`.

    Args:
        conn: Open SQLite connection for the summaries table; no SQLite sink
            when omitted.
        collection: MongoDB collection for full-text documents; no document
            sink when omitted.
    """
    from backend.db.documents import MongoDocumentSink  # noqa: PLC0415
    from backend.db.summaries import SqliteSummarySink  # noqa: PLC0415

    sinks: list[SummarySink] = []
    if conn is not None:
        sinks.append(SqliteSummarySink(conn))
    if collection is not None:
        sinks.append(MongoDocumentSink(collection))

    return SummaryPipeline(
        fetch=partial(
            fetch_url,
            relay_url=settings.relay_url or None,
            timeout=settings.request_timeout,
        ),
        sinks=tuple(sinks),
        min_content_length=settings.min_content_length,
        max_sentences=settings.summary_sentences,
    )
