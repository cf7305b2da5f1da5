"""Result models for the summarise pipeline.

These are plain, immutable Python objects created fresh for every request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator, Optional, Tuple

UNTRANSLATED_TEMPLATE = "[{}]"


@dataclass(frozen=True)
class GlossToken:
    """One input token and its dictionary translation (``None`` if unknown)."""

    source: str
    translation: Optional[str] = None

    @property
    def translated(self) -> bool:
        return self.translation is not None

    def render(self) -> str:
        """The translation, or the original token in square brackets."""
        if self.translation is not None:
            return self.translation
        return UNTRANSLATED_TEMPLATE.format(self.source)


@dataclass(frozen=True)
class Gloss:
    """Ordered gloss of a text; one :class:`GlossToken` per input token."""

    tokens: Tuple[GlossToken, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[GlossToken]:
        return iter(self.tokens)

    @property
    def untranslated(self) -> list[str]:
        return [t.source for t in self.tokens if not t.translated]

    def render(self) -> str:
        return " ".join(t.render() for t in self.tokens)


@dataclass(frozen=True)
class SummaryRecord:
    """Everything one successful pipeline run produced.

    ``url``, ``summary`` and ``urdu`` go back to the caller; ``full_text``
    and ``created_at`` are only handed to the persistence sinks.
    """

    url: str
    summary: str
    gloss: Gloss
    full_text: str
    title: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def urdu(self) -> str:
        return self.gloss.render()

    def to_response(self) -> dict[str, str]:
        return {"summary": self.summary, "urdu": self.urdu}
