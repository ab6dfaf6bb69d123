"""Tarot article admission pipeline: normalize, validate, check quality, convert."""

from .errors import ArticleError, ArticleValidationError  # noqa: F401
from .models.domain import (  # noqa: F401
    ArticleStats,
    ForceSaveResult,
    PersistableRecord,
    QualityWarning,
    ReviewResult,
    ValidationResult,
)
from .services.converter import convert_lenient, convert_strict  # noqa: F401
from .services.normalizer import normalize_keys  # noqa: F401
from .services.pipeline import (  # noqa: F401
    force_save,
    missing_required_fields,
    review_article,
    review_batch,
    review_for_publish,
)
from .services.quality import check_quality  # noqa: F401
from .services.validators import validate_core, validate_lenient, validate_strict  # noqa: F401
from .settings import ArticleSettings, get_settings, reset_settings_cache  # noqa: F401

__all__ = [
    "ArticleError",
    "ArticleSettings",
    "ArticleStats",
    "ArticleValidationError",
    "ForceSaveResult",
    "PersistableRecord",
    "QualityWarning",
    "ReviewResult",
    "ValidationResult",
    "check_quality",
    "convert_lenient",
    "convert_strict",
    "force_save",
    "get_settings",
    "missing_required_fields",
    "normalize_keys",
    "reset_settings_cache",
    "review_article",
    "review_batch",
    "review_for_publish",
    "validate_core",
    "validate_lenient",
    "validate_strict",
]
