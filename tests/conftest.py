from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from articles.settings import reset_settings_cache  # noqa: E402

PARAGRAPH = "<p>Card study notes on intuition, patience and quiet wisdom for daily reflection.</p>\n"

CONTENT = (
    "<p>The High Priestess represents intuition, sacred knowledge and the quiet voice within.</p>\n"
    + PARAGRAPH * 70
)

VALID_ARTICLE: Dict[str, Any] = {
    "title": "The High Priestess: Meaning and Symbolism",
    "excerpt": "Discover what The High Priestess card means in love, career and spiritual readings today.",
    "content": CONTENT,
    "slug": "the-high-priestess-meaning",
    "author": "Jane Reader",
    "readTime": "12 min read",
    "datePublished": "2024-03-01",
    "dateModified": "2024-03-05",
    "featuredImage": "https://cdn.example.com/cards/high-priestess.webp",
    "featuredImageAlt": "The High Priestess card showing a seated figure between two pillars",
    "cardType": "Major Arcana",
    "cardNumber": "II",
    "astrologicalCorrespondence": "Moon",
    "element": "WATER",
    "categories": ["Major Arcana"],
    "tags": ["intuition", "mystery", "wisdom"],
    "seo": {
        "focusKeyword": "high priestess meaning",
        "metaTitle": "The High Priestess Tarot Card Meaning",
        "metaDescription": "Learn the meaning of The High Priestess tarot card upright and reversed in love and career.",
    },
    "faq": [
        {
            "question": f"What does The High Priestess mean in situation {n}?",
            "answer": "It points to intuition, patience and trusting your inner voice.",
        }
        for n in range(1, 6)
    ],
    "breadcrumbCategory": "Major Arcana",
    "breadcrumbCategoryUrl": "/tarot/major-arcana",
    "relatedCards": ["the-empress"],
    "isCourtCard": False,
    "isChallengeCard": False,
    "status": "PUBLISHED",
}


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def valid_article() -> Dict[str, Any]:
    return copy.deepcopy(VALID_ARTICLE)
