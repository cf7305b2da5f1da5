"""Positional summarizer: the summary is the first few sentences, verbatim."""

from __future__ import annotations

import re
from typing import List

# A sentence ends right after ``.``, ``?`` or ``!`` when whitespace follows.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.?!])\s+")
_WHITESPACE = re.compile(r"\s+")

DEFAULT_MAX_SENTENCES = 3


def split_sentences(text: str) -> List[str]:
    """Split *text* into sentences, in order, dropping empty fragments."""
    cleaned = _WHITESPACE.sub(" ", text).strip()
    if not cleaned:
        return []
    return [s for s in _SENTENCE_BOUNDARY.split(cleaned) if s]


def summarize(text: str, max_sentences: int = DEFAULT_MAX_SENTENCES) -> str:
    """Return the first *max_sentences* sentences of *text* joined by spaces.

    Text with fewer boundaries than that is returned whole (normalised).
    """
    return " ".join(split_sentences(text)[:max_sentences])
