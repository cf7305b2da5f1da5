"""Content extraction: turns a :class:`RawPage` into a :class:`CleanPage`.

The markup is parsed once and stripped of boilerplate (script, style,
navigation, header/footer/aside and elements whose class or id names them
as sidebars, menus, ads and the like).  Extraction then runs in three
stages over the cleaned tree and the first one that yields text wins:

1. ``trafilatura`` main-content extraction.
2. A readability-style scorer over the BeautifulSoup tree: paragraph-like
   blocks award points to their parent and grandparent, candidates are
   weighted by tag semantics and class/id hints, then discounted by link
   density.
3. A container fallback chain: ``<article>``, then ``<main>``, then
   ``<body>``, then the whole document.

The result is always whitespace-normalised.  An empty string means nothing
readable was found; it is not an error at this stage.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import trafilatura
from bs4 import BeautifulSoup, Tag

from backend.scraper.models import CleanPage, RawPage

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

# Never part of the readable article body.
_STRIP_TAGS = [
    "script", "style", "noscript", "nav", "header", "footer", "aside", "form", "iframe",
]

# Elements whose text is a unit of prose; these feed the candidate scores.
_PARAGRAPH_TAGS = ["p", "pre", "blockquote", "td"]

# Elements that start a new line when rendered.
_BLOCK_TAGS = [
    "p", "div", "section", "article", "main", "li", "ul", "ol", "tr", "table",
    "blockquote", "pre", "h1", "h2", "h3", "h4", "h5", "h6",
]

_MIN_PARAGRAPH_CHARS = 25

_TAG_WEIGHTS = {
    "article": 25,
    "main": 20,
    "section": 5,
    "div": 5,
    "blockquote": 3,
    "td": 3,
    "pre": 3,
    "ol": -3,
    "ul": -3,
    "li": -3,
    "dl": -3,
    "address": -3,
    "th": -5,
    "h1": -5,
    "h2": -5,
    "h3": -5,
}

_POSITIVE_HINTS = re.compile(
    r"article|body|content|entry|main|page|post|story|text|blog", re.IGNORECASE
)
_NEGATIVE_HINTS = re.compile(
    r"comment|footer|sidebar|widget|menu|nav|promo|share|social|related|sponsor"
    r"|banner|cookie|popup|\bads?\b|advert",
    re.IGNORECASE,
)
_HINT_WEIGHT = 25


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


# ---------------------------------------------------------------------------
# Readability-style scoring
# ---------------------------------------------------------------------------

def _mark_block_boundaries(soup: BeautifulSoup) -> None:
    """Make sure adjacent blocks never run together in ``get_text()``."""
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.append("\n")


def _text_of(node: Tag) -> str:
    return normalize_whitespace(node.get_text())


def _hint_weight(node: Tag) -> int:
    """Score the class and id attributes of *node* for content-like names."""
    weight = 0
    for value in (" ".join(node.get("class") or []), node.get("id") or ""):
        if not value:
            continue
        if _NEGATIVE_HINTS.search(value):
            weight -= _HINT_WEIGHT
        if _POSITIVE_HINTS.search(value):
            weight += _HINT_WEIGHT
    return weight


def _initial_score(node: Tag) -> float:
    return float(_TAG_WEIGHTS.get(node.name, 0) + _hint_weight(node))


def _link_density(node: Tag) -> float:
    """Share of *node*'s text that sits inside ``<a>`` elements (0.0–1.0)."""
    text_length = len(_text_of(node))
    if not text_length:
        return 1.0
    link_length = sum(len(_text_of(a)) for a in node.find_all("a"))
    return min(link_length / text_length, 1.0)


def _best_candidate(soup: BeautifulSoup) -> Optional[Tag]:
    """Return the highest-scoring content block, or ``None`` if none is clear."""
    scores: dict[int, float] = {}
    candidates: dict[int, Tag] = {}

    for block in soup.find_all(_PARAGRAPH_TAGS):
        text = _text_of(block)
        if len(text) < _MIN_PARAGRAPH_CHARS:
            continue
        content_score = 1 + text.count(",") + min(len(text) / 100, 3)

        parent = block.parent
        grandparent = parent.parent if parent is not None else None
        for ancestor, share in ((parent, 1.0), (grandparent, 0.5)):
            # The BeautifulSoup object itself is not a content block.
            if ancestor is None or isinstance(ancestor, BeautifulSoup):
                continue
            key = id(ancestor)
            if key not in candidates:
                candidates[key] = ancestor
                scores[key] = _initial_score(ancestor)
            scores[key] += content_score * share

    best: Optional[Tag] = None
    best_score = 0.0
    for key, node in candidates.items():
        score = scores[key] * (1 - _link_density(node))
        if score > best_score:
            best, best_score = node, score
    return best


def _container_fallback(soup: BeautifulSoup) -> Tag:
    """Primary article container, else main container, else body, else everything."""
    for name in ("article", "main", "body"):
        node = soup.find(name)
        if node is not None:
            return node
    return soup


def _is_unlikely(node: Tag) -> bool:
    """Boilerplate by class/id name, unless the name also looks like content."""
    if node.name in ("html", "body", "article", "main"):
        return False
    names = " ".join(node.get("class") or []) + " " + (node.get("id") or "")
    return bool(_NEGATIVE_HINTS.search(names)) and not _POSITIVE_HINTS.search(names)


def _clean_soup(html: str) -> BeautifulSoup:
    """Parse *html* and drop every element no extraction stage may return."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_STRIP_TAGS):
        tag.decompose()
    for tag in soup.find_all(True):
        # Descendants of an already removed element are dead; skip them.
        if tag.decomposed:
            continue
        if _is_unlikely(tag):
            tag.decompose()
    return soup


def _score_extract(soup: BeautifulSoup) -> str:
    _mark_block_boundaries(soup)
    node = _best_candidate(soup)
    if node is None:
        logger.debug("No scored candidate; using container fallback")
        node = _container_fallback(soup)
    return _text_of(node)


def _bs4_extract(html: str) -> str:
    return _score_extract(_clean_soup(html))


def _page_title(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    if soup.title is None:
        return ""
    return normalize_whitespace(soup.title.get_text())


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_text(html: str, url: Optional[str] = None) -> str:
    """Return the main readable text of *html*, normalised, or ``""``.

    Boilerplate is removed before either stage runs, so trafilatura only
    ever sees markup the scorer would also accept.
    """
    if not html or not html.strip():
        return ""

    soup = _clean_soup(html)
    text: str | None = trafilatura.extract(
        str(soup),
        include_comments=False,
        include_links=False,
        include_images=False,
        include_tables=True,
        favor_precision=True,
        url=url,
    )
    if text:
        logger.debug("Extracted %d chars with trafilatura", len(text))
    else:
        text = _score_extract(soup)
        logger.debug("Extracted %d chars with the readability scorer", len(text))

    return normalize_whitespace(text or "")


def extract_content(raw: RawPage) -> CleanPage:
    """Extract the title and main readable text from *raw*."""
    return CleanPage(
        url=raw.url,
        title=_page_title(raw.html) if raw.html else "",
        text=extract_text(raw.html, url=raw.url),
    )
