"""Data models for the scraper stage of the pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class CleanPage:
    """Main readable text extracted from a :class:`RawPage`.

    ``text`` is whitespace-normalised and may be empty when nothing readable
    was found; callers decide whether that is acceptable.
    """

    url: str
    title: str
    text: str

    @property
    def word_count(self) -> int:
        return len(self.text.split())
