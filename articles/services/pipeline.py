"""Entry points that chain normalization, validation, quality checks and conversion."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel

from articles.models.domain import ArticleStats, ForceSaveResult, ReviewResult, ValidationResult
from articles.services import content as text
from articles.services.converter import convert_lenient
from articles.services.normalizer import normalize_keys
from articles.services.quality import check_quality, resolve_card_name
from articles.services.validators import project_lenient, validate_core, validate_strict
from articles.settings import ArticleSettings
from articles.utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_FOR_SAVE = ("title", "slug", "content")


def compute_stats(article: BaseModel, card_name: Optional[str] = None) -> ArticleStats:
    body = getattr(article, "content", None) or ""
    name = resolve_card_name(article, card_name)
    return ArticleStats(
        word_count=text.word_count(body),
        faq_count=len(getattr(article, "faq", None) or []),
        tags_count=len(getattr(article, "tags", None) or []),
        categories_count=len(getattr(article, "categories", None) or []),
        content_length=len(body),
        has_answer_first_opening=bool(body) and text.has_answer_first_opening(body, name),
    )


def _review(
    result: ValidationResult,
    canonical: Any,
    card_name: Optional[str],
    settings: Optional[ArticleSettings],
) -> ReviewResult:
    best_effort, _ = project_lenient(canonical)
    stats = compute_stats(best_effort, card_name)
    if not result.success:
        return ReviewResult(success=False, errors=result.errors, stats=stats)
    warnings = check_quality(result.data, card_name, settings=settings)
    return ReviewResult(success=True, data=result.data, warnings=warnings, stats=stats)


def review_article(
    raw: Any,
    card_name: Optional[str] = None,
    *,
    settings: Optional[ArticleSettings] = None,
) -> ReviewResult:
    """Fast ingestion path: core gate, then advisory quality warnings."""
    canonical = normalize_keys(raw)
    result = _review(validate_core(canonical), canonical, card_name, settings)
    logger.info(
        "articles.core_reviewed",
        extra={"success": result.success, "errors": len(result.errors), "warnings": len(result.warnings)},
    )
    return result


def review_for_publish(
    raw: Any,
    card_name: Optional[str] = None,
    *,
    settings: Optional[ArticleSettings] = None,
) -> ReviewResult:
    """Publish gate: strict bounds, then advisory quality warnings."""
    canonical = normalize_keys(raw)
    result = _review(validate_strict(canonical), canonical, card_name, settings)
    logger.info(
        "articles.strict_reviewed",
        extra={"success": result.success, "errors": len(result.errors), "warnings": len(result.warnings)},
    )
    return result


def force_save(
    raw: Any,
    card_name: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
    settings: Optional[ArticleSettings] = None,
) -> ForceSaveResult:
    """Always-succeeding save path.

    Strict violations, dropped fields and quality findings are all reported
    as warning strings; the record is filled with defaults wherever the input
    falls short.
    """
    canonical = normalize_keys(raw)
    warnings: List[str] = []

    strict = validate_strict(canonical)
    warnings.extend(f"[Schema] {error}" for error in strict.errors)

    data, dropped = project_lenient(canonical)
    warnings.extend(f"[Dropped] {path}: value has the wrong type and was ignored" for path in dropped)
    warnings.extend(w.describe() for w in check_quality(data, card_name, settings=settings))

    record = convert_lenient(data, now=now, settings=settings)
    stats = compute_stats(data, card_name)
    logger.info(
        "articles.force_save",
        extra={"warnings": len(warnings), "dropped": len(dropped), "strict_passed": strict.success},
    )
    return ForceSaveResult(data=data, record=record, warnings=warnings, stats=stats)


def review_batch(
    payload: Any,
    *,
    force: bool = False,
    publish: bool = False,
    card_name: Optional[str] = None,
    now: Optional[datetime] = None,
    settings: Optional[ArticleSettings] = None,
) -> List[Union[ReviewResult, ForceSaveResult]]:
    """Run one article or a list of articles through the chosen path."""
    items = payload if isinstance(payload, list) else [payload]
    results: List[Union[ReviewResult, ForceSaveResult]] = []
    for item in items:
        if force:
            results.append(force_save(item, card_name, now=now, settings=settings))
        elif publish:
            results.append(review_for_publish(item, card_name, settings=settings))
        else:
            results.append(review_article(item, card_name, settings=settings))
    return results


def missing_required_fields(raw: Any) -> List[str]:
    """Names of save-critical fields that are absent or blank."""
    if not isinstance(raw, dict):
        return ["data"]
    canonical = normalize_keys(raw)
    return [
        name
        for name in REQUIRED_FOR_SAVE
        if not isinstance(canonical.get(name), str) or not canonical[name].strip()
    ]
