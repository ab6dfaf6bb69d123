"""Core, strict and lenient validation over canonical (camelCase) input."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from pydantic import BaseModel, ValidationError

from articles.models.domain import ValidationResult
from articles.models.schema import (
    ARTICLE_FIELDS,
    FieldSpec,
    LenientArticle,
    Tier,
    build_article_model,
    required_message,
)
from articles.utils.logging import get_logger

logger = get_logger(__name__)


def format_errors(exc: ValidationError, tier: Tier) -> List[str]:
    """Render pydantic errors as ``dotted.path: reason`` strings."""
    messages: List[str] = []
    for err in exc.errors(include_url=False):
        loc = err.get("loc") or ()
        path = ".".join(str(part) for part in loc) or "<root>"
        if err.get("type") == "missing":
            reason = required_message(str(loc[-1]), tier) if len(loc) == 1 else "Required"
        else:
            reason = err.get("msg", "Invalid value")
        messages.append(f"{path}: {reason}")
    return messages


def _validate(canonical: Any, tier: Tier) -> ValidationResult:
    model = build_article_model(tier)
    try:
        data = model.model_validate(canonical)
    except ValidationError as exc:
        errors = format_errors(exc, tier)
        logger.debug(f"articles.{tier.value}_failed", extra={"error_count": len(errors)})
        return ValidationResult(success=False, errors=errors)
    return ValidationResult(success=True, data=data)


def validate_core(canonical: Any) -> ValidationResult:
    """Required-fields gate for the fast ingestion path."""
    return _validate(canonical, Tier.CORE)


def validate_strict(canonical: Any) -> ValidationResult:
    """Publish-readiness gate: every bound must hold."""
    return _validate(canonical, Tier.STRICT)


def _parses(spec: FieldSpec, value: Any) -> bool:
    try:
        spec.adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def _project(
    specs: Iterable[FieldSpec],
    payload: Dict[str, Any],
    prefix: str,
    dropped: List[str],
) -> Dict[str, Any]:
    kept: Dict[str, Any] = {}
    for spec in specs:
        key = spec.alias
        if key not in payload:
            continue
        value = payload[key]
        path = f"{prefix}{key}"
        if spec.nested is None:
            if _parses(spec, value):
                kept[key] = value
            else:
                dropped.append(path)
        elif value is None:
            kept[key] = None
        elif spec.many:
            if not isinstance(value, list):
                dropped.append(path)
                continue
            items = []
            for index, item in enumerate(value):
                if not isinstance(item, dict):
                    dropped.append(f"{path}.{index}")
                    continue
                items.append(_project(spec.nested, item, f"{path}.{index}.", dropped))
            kept[key] = items
        elif isinstance(value, dict):
            kept[key] = _project(spec.nested, value, f"{path}.", dropped)
        else:
            dropped.append(path)
    return kept


def project_lenient(canonical: Any) -> Tuple[BaseModel, List[str]]:
    """Best-effort typed projection plus the paths that were dropped.

    Never raises: a field (or nested sub-field) whose value does not parse is
    omitted, and a non-mapping input yields an empty article.
    """
    dropped: List[str] = []
    if not isinstance(canonical, dict):
        if canonical is not None:
            dropped.append("<root>")
        return LenientArticle(), dropped
    kept = _project(ARTICLE_FIELDS, canonical, "", dropped)
    if dropped:
        logger.debug("articles.lenient_dropped", extra={"dropped": list(dropped)})
    return LenientArticle.model_validate(kept), dropped


def validate_lenient(canonical: Any) -> BaseModel:
    """Lenient validation; always returns a value."""
    data, _ = project_lenient(canonical)
    return data
