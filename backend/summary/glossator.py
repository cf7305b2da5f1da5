"""Word-for-word dictionary gloss.

The text is split on single spaces; every token is looked up by its
lowercased ASCII letters only, so ``"React,"`` and ``"react"`` share a key.
Tokens without an entry are kept as-is and flagged untranslated.
"""

from __future__ import annotations

import re
from typing import Mapping

from backend.summary.dictionary import URDU_DICTIONARY
from backend.summary.models import Gloss, GlossToken

_NON_LETTERS = re.compile(r"[^a-z]")


def lookup_key(token: str) -> str:
    return _NON_LETTERS.sub("", token.lower())


def gloss(text: str, dictionary: Mapping[str, str] = URDU_DICTIONARY) -> Gloss:
    """Gloss *text* token by token; output order and count mirror the input."""
    if not text:
        return Gloss(())
    tokens = []
    for token in text.split(" "):
        key = lookup_key(token)
        tokens.append(GlossToken(source=token, translation=dictionary.get(key) if key else None))
    return Gloss(tuple(tokens))
