from __future__ import annotations

from datetime import datetime, timezone

import pytest

from articles.models.domain import PersistableRecord
from articles.services.converter import card_type_key, convert_lenient, convert_strict, parse_date
from articles.services.validators import validate_lenient, validate_strict
from articles.settings import ArticleSettings

FIXED_NOW = datetime(2025, 6, 1, 8, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("display", "key"),
    [
        ("Major Arcana", "MAJOR_ARCANA"),
        ("Suit of Wands", "SUIT_OF_WANDS"),
        ("Suit of Cups", "SUIT_OF_CUPS"),
        ("Suit of Swords", "SUIT_OF_SWORDS"),
        ("Suit of Pentacles", "SUIT_OF_PENTACLES"),
    ],
)
def test_card_type_key(display, key):
    assert card_type_key(display) == key


def test_convert_strict_maps_every_field(valid_article):
    data = validate_strict(valid_article).require()

    record = convert_strict(data)

    assert isinstance(record, PersistableRecord)
    assert record.card_type == "MAJOR_ARCANA"
    assert record.element == "WATER"
    assert record.date_published == datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert record.date_modified == datetime(2024, 3, 5, tzinfo=timezone.utc)
    assert record.seo_meta_title == "The High Priestess Tarot Card Meaning"
    assert record.seo_focus_keyword == "high priestess meaning"
    assert len(record.faq) == 5
    assert record.status == "PUBLISHED"
    payload = record.to_payload()
    assert None not in payload.values()
    assert set(payload) >= {"seoMetaDescription", "breadcrumbCategoryUrl", "isCourtCard", "relatedCards"}


def test_convert_strict_fills_optional_gaps(valid_article):
    for key in ("breadcrumbCategoryUrl", "relatedCards", "status"):
        valid_article.pop(key)
    data = validate_strict(valid_article).require()

    record = convert_strict(data)

    assert record.breadcrumb_category_url == ""
    assert record.related_cards == []
    assert record.status == "DRAFT"


def test_convert_lenient_defaults_everything():
    record = convert_lenient(validate_lenient({}), now=FIXED_NOW)

    assert record.title == "Untitled Article"
    assert record.slug == f"untitled-{int(FIXED_NOW.timestamp() * 1000)}"
    assert record.author == "Unknown"
    assert record.read_time == "5 min read"
    assert record.card_type == "MAJOR_ARCANA"
    assert record.card_number == "0"
    assert record.element == "FIRE"
    assert record.status == "DRAFT"
    assert record.tags == []
    assert record.faq == []
    assert record.categories == []
    assert record.seo_meta_title == ""
    assert record.date_published == FIXED_NOW
    assert record.date_modified == FIXED_NOW
    assert record.is_court_card is False


def test_convert_lenient_keeps_present_values_and_survives_bad_dates():
    data = validate_lenient(
        {
            "title": "Ace of Cups",
            "cardType": "Suit of Cups",
            "element": "WATER",
            "datePublished": "2024-01-15",
            "dateModified": "yesterday",
            "seo": {"metaTitle": "Ace of Cups meaning"},
            "faq": [{"question": "Is it positive?"}],
        }
    )

    record = convert_lenient(data, now=FIXED_NOW)

    assert record.title == "Ace of Cups"
    assert record.card_type == "SUIT_OF_CUPS"
    assert record.date_published == parse_date("2024-01-15")
    assert record.date_modified == FIXED_NOW
    assert record.seo_meta_title == "Ace of Cups meaning"
    assert record.seo_meta_description == ""
    assert record.faq[0].question == "Is it positive?"
    assert record.faq[0].answer == ""


def test_convert_lenient_is_deterministic_with_fixed_clock(valid_article):
    valid_article.pop("datePublished")
    data = validate_lenient(valid_article)

    first = convert_lenient(data, now=FIXED_NOW)
    second = convert_lenient(data, now=FIXED_NOW)

    assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)


def test_convert_lenient_uses_configured_defaults():
    settings = ArticleSettings(default_author="Editorial Team", default_title="Draft Article")

    record = convert_lenient(validate_lenient({}), now=FIXED_NOW, settings=settings)

    assert record.author == "Editorial Team"
    assert record.title == "Draft Article"


def test_conversion_is_idempotent(valid_article):
    data = validate_strict(valid_article).require()

    assert convert_strict(data) == convert_strict(data)
