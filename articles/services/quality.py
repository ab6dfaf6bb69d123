"""Non-blocking content-quality checks.

Each check looks at one aspect of an already-parsed article (core, strict or
lenient model) and returns at most one :class:`QualityWarning`. Checks are
independent of each other and may run in any order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from articles.models.domain import QualityWarning, RecommendedRange
from articles.services import content as text
from articles.settings import ArticleSettings, get_settings

META_TITLE_RANGE = (20, 60)
META_DESCRIPTION_RANGE = (50, 155)
FOCUS_KEYWORD_MIN = 3
EXCERPT_RANGE = (50, 300)
CONTENT_MIN_CHARS = 5000
FAQ_RANGE = (5, 10)
TAGS_RANGE = (3, 10)
CATEGORIES_RANGE = (1, 5)
ALT_TEXT_MIN = 20


@dataclass(frozen=True)
class QualityContext:
    article: BaseModel
    card_name: str
    word_count_min: int
    word_count_max: int

    def seo(self, name: str) -> Optional[str]:
        seo = getattr(self.article, "seo", None)
        return getattr(seo, name, None) if seo is not None else None

    def value(self, name: str) -> Any:
        return getattr(self.article, name, None)

    def count(self, name: str) -> int:
        return len(self.value(name) or [])


Check = Callable[[QualityContext], Optional[QualityWarning]]


def _range(bounds: Tuple[int, int]) -> RecommendedRange:
    return RecommendedRange(min=bounds[0], max=bounds[1])


def _length_band(
    field: str,
    value: Optional[str],
    bounds: Tuple[int, int],
    *,
    too_long: str,
    too_short: str,
) -> Optional[QualityWarning]:
    if not value:
        return None
    if len(value) > bounds[1]:
        severity, message = "warning", too_long
    elif len(value) < bounds[0]:
        severity, message = "info", too_short
    else:
        return None
    return QualityWarning(
        field=field,
        message=message,
        severity=severity,
        current_value=len(value),
        recommended_range=_range(bounds),
    )


def _count_band(
    field: str,
    count: int,
    bounds: Tuple[int, int],
    *,
    too_few: str,
    too_many: str,
) -> Optional[QualityWarning]:
    if count < bounds[0]:
        severity, message = "warning", too_few
    elif count > bounds[1]:
        severity, message = "info", too_many
    else:
        return None
    return QualityWarning(
        field=field,
        message=message,
        severity=severity,
        current_value=count,
        recommended_range=_range(bounds),
    )


def check_meta_title(ctx: QualityContext) -> Optional[QualityWarning]:
    return _length_band(
        "seo.metaTitle",
        ctx.seo("meta_title"),
        META_TITLE_RANGE,
        too_long="Meta title exceeds 60 characters and may be truncated in search results",
        too_short="Meta title is shorter than recommended for SEO",
    )


def check_meta_description(ctx: QualityContext) -> Optional[QualityWarning]:
    return _length_band(
        "seo.metaDescription",
        ctx.seo("meta_description"),
        META_DESCRIPTION_RANGE,
        too_long="Meta description exceeds 155 characters and may be truncated",
        too_short="Meta description is shorter than recommended for SEO",
    )


def check_focus_keyword(ctx: QualityContext) -> Optional[QualityWarning]:
    keyword = ctx.seo("focus_keyword")
    if keyword and len(keyword) >= FOCUS_KEYWORD_MIN:
        return None
    return QualityWarning(
        field="seo.focusKeyword",
        message="Focus keyword is too short" if keyword else "Focus keyword is missing",
        severity="warning",
        current_value=len(keyword or ""),
        recommended_range=RecommendedRange(min=FOCUS_KEYWORD_MIN),
    )


def check_excerpt(ctx: QualityContext) -> Optional[QualityWarning]:
    excerpt = ctx.value("excerpt")
    if not excerpt:
        return QualityWarning(
            field="excerpt",
            message="Excerpt is missing - recommended for article previews",
            severity="warning",
        )
    if EXCERPT_RANGE[0] <= len(excerpt) <= EXCERPT_RANGE[1]:
        return None
    too_short = len(excerpt) < EXCERPT_RANGE[0]
    return QualityWarning(
        field="excerpt",
        message="Excerpt is shorter than recommended" if too_short else "Excerpt exceeds recommended length",
        severity="info",
        current_value=len(excerpt),
        recommended_range=_range(EXCERPT_RANGE),
    )


def check_content_length(ctx: QualityContext) -> Optional[QualityWarning]:
    length = len(ctx.value("content") or "")
    if length >= CONTENT_MIN_CHARS:
        return None
    return QualityWarning(
        field="content",
        message="Content length may be insufficient for optimal SEO performance",
        severity="info",
        current_value=length,
        recommended_range=RecommendedRange(min=CONTENT_MIN_CHARS),
    )


def check_word_count(ctx: QualityContext) -> Optional[QualityWarning]:
    content = ctx.value("content")
    if not content:
        return None
    words = text.word_count(content)
    if ctx.word_count_min <= words <= ctx.word_count_max:
        return None
    message = (
        f"Word count is {words}, target is {ctx.word_count_min}-{ctx.word_count_max}"
        if words < ctx.word_count_min
        else f"Word count is {words}, may be too long"
    )
    return QualityWarning(
        field="content",
        message=message,
        severity="info",
        current_value=words,
        recommended_range=RecommendedRange(min=ctx.word_count_min, max=ctx.word_count_max),
    )


def check_faq_count(ctx: QualityContext) -> Optional[QualityWarning]:
    return _count_band(
        "faq",
        ctx.count("faq"),
        FAQ_RANGE,
        too_few="Fewer than 5 FAQ items - more FAQs improve search visibility",
        too_many="More than 10 FAQ items may dilute focus",
    )


def check_tags_count(ctx: QualityContext) -> Optional[QualityWarning]:
    return _count_band(
        "tags",
        ctx.count("tags"),
        TAGS_RANGE,
        too_few="Fewer than 3 tags - more tags improve discoverability",
        too_many="More than 10 tags may appear spammy",
    )


def check_categories_count(ctx: QualityContext) -> Optional[QualityWarning]:
    return _count_band(
        "categories",
        ctx.count("categories"),
        CATEGORIES_RANGE,
        too_few="No categories assigned - at least one category is recommended",
        too_many="More than 5 categories may dilute focus",
    )


def check_alt_text_length(ctx: QualityContext) -> Optional[QualityWarning]:
    alt = ctx.value("featured_image_alt")
    if not alt or len(alt) >= ALT_TEXT_MIN:
        return None
    return QualityWarning(
        field="featuredImageAlt",
        message="Alt text is too short for accessibility",
        severity="warning",
        current_value=len(alt),
        recommended_range=RecommendedRange(min=ALT_TEXT_MIN),
    )


def check_alt_text_prefix(ctx: QualityContext) -> Optional[QualityWarning]:
    alt = ctx.value("featured_image_alt")
    if not alt or not alt.lower().startswith("image of"):
        return None
    return QualityWarning(
        field="featuredImageAlt",
        message='Alt text should not start with "image of" - describe the content directly',
        severity="info",
        current_value=alt,
    )


def check_forbidden_words(ctx: QualityContext) -> Optional[QualityWarning]:
    found = text.forbidden_words(ctx.value("content") or "")
    if not found:
        return None
    return QualityWarning(
        field="content",
        message=f"Forbidden words found: {', '.join(found)}",
        severity="warning",
        current_value=", ".join(found),
    )


def check_em_dashes(ctx: QualityContext) -> Optional[QualityWarning]:
    if not text.has_em_dash_outside_blockquotes(ctx.value("content") or ""):
        return None
    return QualityWarning(
        field="content",
        message="Content contains em dashes (—) which may affect readability",
        severity="warning",
    )


def check_featured_image_url(ctx: QualityContext) -> Optional[QualityWarning]:
    url = ctx.value("featured_image")
    if not url or text.is_valid_url(url):
        return None
    return QualityWarning(
        field="featuredImage",
        message="Featured image URL may not be valid - ensure it is a proper URL before publishing",
        severity="warning",
        current_value=url,
    )


def check_answer_first(ctx: QualityContext) -> Optional[QualityWarning]:
    body = ctx.value("content")
    if not body or text.has_answer_first_opening(body, ctx.card_name):
        return None
    return QualityWarning(
        field="content",
        message="Opening may not follow answer-first pattern",
        severity="warning",
    )


CHECKS: Tuple[Check, ...] = (
    check_meta_title,
    check_meta_description,
    check_focus_keyword,
    check_excerpt,
    check_content_length,
    check_word_count,
    check_faq_count,
    check_tags_count,
    check_categories_count,
    check_alt_text_length,
    check_alt_text_prefix,
    check_forbidden_words,
    check_em_dashes,
    check_featured_image_url,
    check_answer_first,
)


def resolve_card_name(article: BaseModel, card_name: Optional[str] = None) -> str:
    return (card_name or "").strip() or text.derive_card_name(getattr(article, "title", None))


def check_quality(
    article: BaseModel,
    card_name: Optional[str] = None,
    *,
    settings: Optional[ArticleSettings] = None,
    checks: Sequence[Check] = CHECKS,
) -> List[QualityWarning]:
    """Run every check against ``article`` and collect the warnings."""
    cfg = settings or get_settings()
    ctx = QualityContext(
        article=article,
        card_name=resolve_card_name(article, card_name),
        word_count_min=cfg.word_count_min,
        word_count_max=cfg.word_count_max,
    )
    warnings: List[QualityWarning] = []
    for check in checks:
        warning = check(ctx)
        if warning is not None:
            warnings.append(warning)
    return warnings
