"""Tests for the summarizer, the dictionary and the glossator."""

from __future__ import annotations

import pytest

from backend.summary.dictionary import URDU_DICTIONARY
from backend.summary.glossator import gloss, lookup_key
from backend.summary.models import Gloss, GlossToken
from backend.summary.summarizer import split_sentences, summarize

_ARTICLE_TEXT = (
    "React is a library. It simplifies development. "
    "You can use it with hooks. Extra sentence ignored."
)


# ---------------------------------------------------------------------------
# Summarizer
# ---------------------------------------------------------------------------

class TestSplitSentences:
    def test_splits_after_terminal_punctuation(self) -> None:
        assert split_sentences("One. Two? Three! Four") == ["One.", "Two?", "Three!", "Four"]

    def test_requires_whitespace_after_punctuation(self) -> None:
        assert split_sentences("Version 1.2 shipped. e.g.this stays") == [
            "Version 1.2 shipped.",
            "e.g.this stays",
        ]

    def test_newlines_and_tabs_count_as_whitespace(self) -> None:
        assert split_sentences("First.\n\nSecond.\tThird.") == ["First.", "Second.", "Third."]

    def test_empty_text(self) -> None:
        assert split_sentences("   ") == []


class TestSummarize:
    def test_keeps_first_three_sentences(self) -> None:
        assert summarize(_ARTICLE_TEXT) == (
            "React is a library. It simplifies development. You can use it with hooks."
        )

    def test_fewer_sentences_returns_everything(self) -> None:
        assert summarize("Only one sentence here") == "Only one sentence here"
        assert summarize("One. Two.") == "One. Two."

    def test_custom_sentence_count(self) -> None:
        assert summarize(_ARTICLE_TEXT, max_sentences=1) == "React is a library."

    def test_deterministic_and_idempotent(self) -> None:
        first = summarize(_ARTICLE_TEXT)
        assert summarize(_ARTICLE_TEXT) == first
        assert summarize(first) == first

    @pytest.mark.parametrize(
        "text",
        [
            _ARTICLE_TEXT,
            "a. b. c. d. e. f.",
            "No boundary at all, just a long clause that keeps going",
            "Why? Because! It works. Yes. No.",
        ],
    )
    def test_output_is_a_verbatim_prefix(self, text: str) -> None:
        summary = summarize(text)
        assert text.startswith(summary)
        assert 1 <= len(split_sentences(summary)) <= 3


# ---------------------------------------------------------------------------
# Dictionary
# ---------------------------------------------------------------------------

class TestDictionary:
    def test_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            URDU_DICTIONARY["new"] = "نیا"  # type: ignore[index]

    def test_keys_are_lowercase_letters(self) -> None:
        assert all(key.isascii() and key.isalpha() and key.islower() for key in URDU_DICTIONARY)
        assert len(URDU_DICTIONARY) < 100

    def test_known_entries(self) -> None:
        assert URDU_DICTIONARY["react"] == "ری ایکٹ"
        assert URDU_DICTIONARY["hooks"] == "ہکس"


# ---------------------------------------------------------------------------
# Glossator
# ---------------------------------------------------------------------------

class TestLookupKey:
    @pytest.mark.parametrize(
        "token, key",
        [
            ("React", "react"),
            ("hooks.", "hooks"),
            ("(JavaScript)", "javascript"),
            ("class-based", "classbased"),
            ("2024", ""),
            ("café", "caf"),
        ],
    )
    def test_lowercases_and_keeps_ascii_letters(self, token: str, key: str) -> None:
        assert lookup_key(token) == key


class TestGloss:
    def test_translates_known_tokens(self) -> None:
        result = gloss("React hooks")
        assert [t.translation for t in result] == ["ری ایکٹ", "ہکس"]
        assert result.render() == "ری ایکٹ ہکس"

    def test_flags_unknown_tokens_with_original_text(self) -> None:
        result = gloss("It simplifies, really.")
        assert result.untranslated == ["It", "simplifies,", "really."]
        assert result.render() == "[It] [simplifies,] [really.]"

    def test_punctuation_does_not_block_lookup(self) -> None:
        assert gloss("development.").render() == "ترقی"

    def test_tokens_without_letters_are_untranslated(self) -> None:
        assert gloss("2024 —").render() == "[2024] [—]"

    def test_summary_gloss(self) -> None:
        summary = summarize(_ARTICLE_TEXT)
        assert gloss(summary).render() == (
            "ری ایکٹ ہے ایک [library.] [It] [simplifies] ترقی "
            "آپ سکتے ہیں استعمال کریں [it] کے ساتھ ہکس"
        )

    @pytest.mark.parametrize(
        "text",
        [_ARTICLE_TEXT, "single", "a  double  spaced  text", "Mixed CASE with 42 numbers!"],
    )
    def test_preserves_token_count_and_order(self, text: str) -> None:
        result = gloss(text)
        tokens = text.split(" ")
        assert len(result) == len(tokens)
        assert [t.source for t in result] == tokens

    def test_custom_dictionary(self) -> None:
        result = gloss("Hello world", {"hello": "hola"})
        assert result.render() == "hola [world]"

    def test_empty_text(self) -> None:
        assert len(gloss("")) == 0


class TestGlossModels:
    def test_token_render(self) -> None:
        assert GlossToken("is", "ہے").render() == "ہے"
        assert GlossToken("library.").render() == "[library.]"
        assert not GlossToken("x").translated

    def test_gloss_is_immutable(self) -> None:
        g = Gloss((GlossToken("a", "ایک"),))
        with pytest.raises(AttributeError):
            g.tokens = ()  # type: ignore[misc]
