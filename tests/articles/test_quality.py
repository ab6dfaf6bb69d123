from __future__ import annotations

from articles.models.domain import QualityWarning
from articles.services.quality import CHECKS, check_quality
from articles.services.validators import validate_lenient, validate_strict
from articles.settings import ArticleSettings


def _by_field(warnings, field):
    return [w for w in warnings if w.field == field]


def test_publish_ready_article_has_only_info_warnings(valid_article):
    data = validate_strict(valid_article).require()

    warnings = check_quality(data, "The High Priestess")

    assert all(w.severity == "info" for w in warnings)


def test_long_meta_title_yields_single_warning(valid_article):
    valid_article["seo"]["metaTitle"] = "m" * 90
    data = validate_lenient(valid_article)

    warnings = check_quality(data, "The High Priestess")

    blocking_like = [w for w in warnings if w.severity == "warning"]
    assert len(blocking_like) == 1
    warning = blocking_like[0]
    assert warning.field == "seo.metaTitle"
    assert warning.current_value == 90
    assert warning.recommended_range.min == 20
    assert warning.recommended_range.max == 60


def test_short_seo_fields_are_info(valid_article):
    valid_article["seo"]["metaTitle"] = "Short title"
    valid_article["seo"]["metaDescription"] = "Too brief."
    data = validate_lenient(valid_article)

    warnings = check_quality(data)

    assert [w.severity for w in _by_field(warnings, "seo.metaTitle")] == ["info"]
    assert [w.severity for w in _by_field(warnings, "seo.metaDescription")] == ["info"]


def test_missing_fields_produce_warnings():
    data = validate_lenient({"content": "<p>Short body.</p>"})

    warnings = check_quality(data, "The Fool")
    fields = {(w.field, w.severity) for w in warnings}

    assert ("seo.focusKeyword", "warning") in fields
    assert ("excerpt", "warning") in fields
    assert ("faq", "warning") in fields
    assert ("tags", "warning") in fields
    assert ("categories", "warning") in fields
    assert ("content", "info") in fields
    focus = _by_field(warnings, "seo.focusKeyword")[0]
    assert focus.message == "Focus keyword is missing"
    assert focus.current_value == 0


def test_counts_above_band_are_info(valid_article):
    valid_article["faq"] = valid_article["faq"] * 3
    valid_article["tags"] = [f"tag-{n}" for n in range(12)]
    valid_article["categories"] = [f"cat-{n}" for n in range(6)]
    data = validate_lenient(valid_article)

    warnings = check_quality(data, "The High Priestess")

    for field in ("faq", "tags", "categories"):
        assert [w.severity for w in _by_field(warnings, field)] == ["info"]


def test_excerpt_outside_band_is_info(valid_article):
    valid_article["excerpt"] = "e" * 400
    warnings = check_quality(validate_lenient(valid_article), "The High Priestess")

    excerpt = _by_field(warnings, "excerpt")
    assert len(excerpt) == 1
    assert excerpt[0].severity == "info"
    assert excerpt[0].message == "Excerpt exceeds recommended length"


def test_alt_text_checks(valid_article):
    valid_article["featuredImageAlt"] = "image of card"
    warnings = check_quality(validate_lenient(valid_article), "The High Priestess")

    alt = _by_field(warnings, "featuredImageAlt")
    assert {w.severity for w in alt} == {"warning", "info"}


def test_content_style_checks(valid_article):
    valid_article["content"] = (
        "<p>This card invites you to delve into the realm of dreams — slowly.</p>"
        "<blockquote>Quiet — still</blockquote>"
    )
    valid_article["featuredImage"] = "cards/priestess.webp"
    warnings = check_quality(validate_lenient(valid_article), "The High Priestess")

    messages = [w.message for w in warnings]
    assert "Forbidden words found: delve, realm" in messages
    assert "Content contains em dashes (—) which may affect readability" in messages
    assert "Opening may not follow answer-first pattern" in messages
    assert _by_field(warnings, "featuredImage")[0].severity == "warning"


def test_card_name_falls_back_to_title(valid_article):
    data = validate_lenient(valid_article)

    warnings = check_quality(data)

    assert "Opening may not follow answer-first pattern" not in [w.message for w in warnings]


def test_word_count_band_uses_settings(valid_article):
    data = validate_lenient(valid_article)
    settings = ArticleSettings(word_count_min=10, word_count_max=20)

    warnings = check_quality(data, "The High Priestess", settings=settings)

    word = [w for w in warnings if w.message.startswith("Word count")]
    assert len(word) == 1
    assert word[0].message.endswith("may be too long")


def test_checks_are_order_independent(valid_article):
    valid_article["seo"]["metaTitle"] = "m" * 90
    valid_article["tags"] = []
    data = validate_lenient(valid_article)

    forward = check_quality(data, "The High Priestess", checks=CHECKS)
    backward = check_quality(data, "The High Priestess", checks=tuple(reversed(CHECKS)))

    key = lambda w: (w.field, w.message)  # noqa: E731
    assert sorted(forward, key=key) == sorted(backward, key=key)


def test_quality_never_raises_on_empty_article():
    warnings = check_quality(validate_lenient(None))

    assert all(isinstance(w, QualityWarning) for w in warnings)
    assert warnings
