"""Text heuristics over article HTML content."""

from __future__ import annotations

import re
from typing import List, Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from articles.models.domain import FORBIDDEN_WORDS

_TAG = re.compile(r"<[^>]*>")
_BLOCKQUOTE = re.compile(r"<blockquote[\s\S]*?</blockquote>", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_URL = TypeAdapter(AnyUrl)

EM_DASH = "—"
OPENING_WORD_LIMIT = 80
ANSWER_FIRST_VERBS = ("represents", "stands for", "signifies", "means", "symbolizes")


def strip_tags(html: str, replacement: str = " ") -> str:
    return _TAG.sub(replacement, html)


def word_count(content: str) -> int:
    return len([word for word in _WHITESPACE.split(strip_tags(content)) if word])


def forbidden_words(content: str) -> List[str]:
    """Flagged words present in the lower-cased, tag-stripped text, in list order."""
    text = strip_tags(content.lower())
    return [word for word in FORBIDDEN_WORDS if word in text]


def has_em_dash_outside_blockquotes(content: str) -> bool:
    """True if an em dash appears outside every ``<blockquote>`` element.

    Only block quotations are exempt. Inline ``<q>`` tags and quotation marks
    inside a paragraph are scanned like the rest of the prose.
    """
    if EM_DASH not in content:
        return False
    return EM_DASH in _BLOCKQUOTE.sub("", content)


def opening_text(content: str, limit: int = OPENING_WORD_LIMIT) -> str:
    """First ``limit`` words of the first paragraph, markup removed, lower-cased."""
    first_paragraph = content.split("</p>")[0]
    text = strip_tags(first_paragraph, "").strip()
    words = [word for word in _WHITESPACE.split(text) if word]
    return " ".join(words[:limit]).lower()


def has_answer_first_opening(content: str, card_name: str) -> bool:
    """Whether the opening states the card's meaning directly.

    A fixed phrase match; openings phrased differently are missed.
    """
    name = card_name.strip().lower()
    if not name:
        return False
    opening = opening_text(content)
    return any(f"{name} {verb}" in opening for verb in ANSWER_FIRST_VERBS)


def derive_card_name(title: Optional[str]) -> str:
    """Card name taken from a title such as ``"The Fool: Meaning ..."``."""
    return (title or "").split(":")[0].strip()


def is_valid_url(value: str) -> bool:
    try:
        _URL.validate_python(value)
    except ValidationError:
        return False
    return True
