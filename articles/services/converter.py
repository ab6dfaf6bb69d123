"""Map validated or best-effort articles onto the persistence record shape."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel

from articles.models.domain import (
    CARD_TYPE_KEYS,
    CARD_TYPES,
    ELEMENTS,
    FaqEntry,
    PersistableRecord,
)
from articles.settings import ArticleSettings, get_settings

DEFAULT_STATUS = "DRAFT"


def card_type_key(card_type: str) -> str:
    """Display tag (``"Major Arcana"``) to persistence enum key (``"MAJOR_ARCANA"``)."""
    return CARD_TYPE_KEYS.get(card_type, card_type)


def parse_date(value: str) -> datetime:
    """``YYYY-MM-DD`` as midnight UTC."""
    return datetime.strptime(value, "%Y-%m-%d").replace(tzinfo=timezone.utc)


def _date_or(value: Optional[str], fallback: datetime) -> datetime:
    if not value:
        return fallback
    try:
        return parse_date(value)
    except ValueError:
        return fallback


def _faq_entries(items: Optional[List[Any]]) -> List[FaqEntry]:
    return [
        FaqEntry(question=item.question or "", answer=item.answer or "")
        for item in items or []
    ]


def convert_strict(data: BaseModel) -> PersistableRecord:
    """Field-for-field conversion of a strictly validated article."""
    return PersistableRecord(
        title=data.title,
        slug=data.slug,
        excerpt=data.excerpt,
        content=data.content,
        author=data.author,
        read_time=data.read_time,
        date_published=parse_date(data.date_published),
        date_modified=parse_date(data.date_modified),
        featured_image=data.featured_image,
        featured_image_alt=data.featured_image_alt,
        card_type=card_type_key(data.card_type),
        card_number=data.card_number,
        astrological_correspondence=data.astrological_correspondence,
        element=data.element,
        categories=list(data.categories),
        tags=list(data.tags),
        seo_focus_keyword=data.seo.focus_keyword,
        seo_meta_title=data.seo.meta_title,
        seo_meta_description=data.seo.meta_description,
        faq=_faq_entries(data.faq),
        breadcrumb_category=data.breadcrumb_category,
        breadcrumb_category_url=data.breadcrumb_category_url or "",
        related_cards=list(data.related_cards or []),
        is_court_card=data.is_court_card,
        is_challenge_card=data.is_challenge_card,
        status=data.status or DEFAULT_STATUS,
    )


def convert_lenient(
    data: BaseModel,
    *,
    now: Optional[datetime] = None,
    settings: Optional[ArticleSettings] = None,
) -> PersistableRecord:
    """Conversion that fills every gap with a deterministic default.

    ``now`` is read once and used for both date fallbacks and the generated
    slug; pass it explicitly to make the output reproducible.
    """
    cfg = settings or get_settings()
    stamp = now or datetime.now(timezone.utc)
    seo = data.seo
    return PersistableRecord(
        title=data.title or cfg.default_title,
        slug=data.slug or f"untitled-{int(stamp.timestamp() * 1000)}",
        excerpt=data.excerpt or "",
        content=data.content or "",
        author=data.author or cfg.default_author,
        read_time=data.read_time or cfg.default_read_time,
        date_published=_date_or(data.date_published, stamp),
        date_modified=_date_or(data.date_modified, stamp),
        featured_image=data.featured_image or "",
        featured_image_alt=data.featured_image_alt or "",
        card_type=card_type_key(data.card_type or CARD_TYPES[0]),
        card_number=data.card_number or cfg.default_card_number,
        astrological_correspondence=data.astrological_correspondence or "",
        element=data.element or ELEMENTS[0],
        categories=list(data.categories or []),
        tags=list(data.tags or []),
        seo_focus_keyword=(seo.focus_keyword if seo else None) or "",
        seo_meta_title=(seo.meta_title if seo else None) or "",
        seo_meta_description=(seo.meta_description if seo else None) or "",
        faq=_faq_entries(data.faq),
        breadcrumb_category=data.breadcrumb_category or "",
        breadcrumb_category_url=data.breadcrumb_category_url or "",
        related_cards=list(data.related_cards or []),
        is_court_card=bool(data.is_court_card),
        is_challenge_card=bool(data.is_challenge_card),
        status=data.status or DEFAULT_STATUS,
    )
