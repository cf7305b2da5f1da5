"""Summarise pipeline package — summarizer, glossator and orchestrator."""

from backend.summary.dictionary import URDU_DICTIONARY
from backend.summary.glossator import gloss, lookup_key
from backend.summary.models import Gloss, GlossToken, SummaryRecord
from backend.summary.pipeline import SummaryPipeline, build_pipeline
from backend.summary.summarizer import split_sentences, summarize

__all__ = [
    "URDU_DICTIONARY",
    "Gloss",
    "GlossToken",
    "SummaryPipeline",
    "SummaryRecord",
    "build_pipeline",
    "gloss",
    "lookup_key",
    "split_sentences",
    "summarize",
]
