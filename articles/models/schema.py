"""One article field table, three strictness tiers.

Every field is declared once in ``ARTICLE_FIELDS`` together with the bounds
it must satisfy on the core (fast ingestion) path and on the strict (publish)
path. ``build_article_model`` turns the table into a pydantic model for a
tier; the lenient tier keeps only the base types and makes every field
optional. Constraint failures are raised as ``PydanticCustomError`` so the
message reaches the caller verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from functools import cached_property, lru_cache
from typing import Annotated, Any, Callable, Dict, FrozenSet, List, Optional, Tuple, Type

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter, create_model
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from articles.models.domain import ArticleStatus, CardType, Element

Check = Callable[[Any], Any]

# Matched against the whole value; ASCII only, so no Unicode digits or spaces.
SLUG_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*", re.ASCII)
READ_TIME_PATTERN = re.compile(r"\d+\s*min\s*read", re.ASCII | re.IGNORECASE)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class Tier(str, Enum):
    CORE = "core"
    STRICT = "strict"
    LENIENT = "lenient"


def min_length(limit: int, message: Optional[str] = None) -> Check:
    def check(value: Any) -> Any:
        if len(value) < limit:
            raise PydanticCustomError(
                "too_short",
                message or f"Must be at least {limit} characters",
            )
        return value

    return check


def max_length(limit: int, message: Optional[str] = None) -> Check:
    def check(value: Any) -> Any:
        if len(value) > limit:
            raise PydanticCustomError(
                "too_long",
                message or f"Must be {limit} characters or less",
            )
        return value

    return check


def item_count(
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
    *,
    too_few: Optional[str] = None,
    too_many: Optional[str] = None,
) -> Check:
    def check(value: List[Any]) -> List[Any]:
        if minimum is not None and len(value) < minimum:
            raise PydanticCustomError("too_short", too_few or f"Must contain at least {minimum} items")
        if maximum is not None and len(value) > maximum:
            raise PydanticCustomError("too_long", too_many or f"Must contain at most {maximum} items")
        return value

    return check


def matches(pattern: re.Pattern[str], message: str) -> Check:
    def check(value: str) -> str:
        if not pattern.fullmatch(value):
            raise PydanticCustomError("pattern_mismatch", message)
        return value

    return check


def calendar_date(message: str) -> Check:
    def check(value: str) -> str:
        try:
            datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            raise PydanticCustomError("invalid_date", message) from None
        return value

    return check


def not_prefixed(prefix: str, message: str) -> Check:
    def check(value: str) -> str:
        if value.lower().startswith(prefix):
            raise PydanticCustomError("forbidden_prefix", message)
        return value

    return check


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one field across all tiers."""

    name: str
    annotation: Any = None
    core: Tuple[Check, ...] = ()
    strict: Tuple[Check, ...] = ()
    required: FrozenSet[Tier] = frozenset()
    strict_default: Any = None
    required_message: Optional[str] = None
    nested: Optional[Tuple["FieldSpec", ...]] = None
    many: bool = False

    @property
    def alias(self) -> str:
        return to_camel(self.name)

    @cached_property
    def adapter(self) -> TypeAdapter:
        """Type-only validator for a leaf field (no bounds), used by lenient projection."""
        return TypeAdapter(Optional[self.annotation])

    def checks(self, tier: Tier) -> Tuple[Check, ...]:
        if tier is Tier.CORE:
            return self.core
        if tier is Tier.STRICT:
            return self.strict
        return ()


BOTH = frozenset({Tier.CORE, Tier.STRICT})
STRICT_ONLY = frozenset({Tier.STRICT})

SEO_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec(
        "focus_keyword",
        StrictStr,
        strict=(min_length(5, "Focus keyword required"), max_length(100)),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "meta_title",
        StrictStr,
        strict=(min_length(20, "Meta title too short"), max_length(60, "Meta title must be 60 characters or less")),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "meta_description",
        StrictStr,
        strict=(
            min_length(50, "Meta description too short"),
            max_length(155, "Meta description must be 155 characters or less"),
        ),
        required=STRICT_ONLY,
    ),
)

FAQ_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec(
        "question",
        StrictStr,
        strict=(
            min_length(10, "Question must be at least 10 characters"),
            max_length(200, "Question must be under 200 characters"),
        ),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "answer",
        StrictStr,
        strict=(
            min_length(20, "Answer must be at least 20 characters"),
            max_length(1000, "Answer must be under 1000 characters"),
        ),
        required=STRICT_ONLY,
    ),
)

ARTICLE_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec(
        "title",
        StrictStr,
        core=(min_length(1, "Title is required"), max_length(200, "Title must be 200 characters or less")),
        strict=(min_length(10, "Title too short"), max_length(100, "Title too long")),
        required=BOTH,
        required_message="Title is required",
    ),
    FieldSpec(
        "excerpt",
        StrictStr,
        strict=(min_length(50, "Excerpt too short"), max_length(300, "Excerpt too long")),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "content",
        StrictStr,
        core=(min_length(100, "Content must be at least 100 characters"),),
        strict=(min_length(5000, "Content too short (minimum ~2500 words)"),),
        required=BOTH,
        required_message="Content is required",
    ),
    FieldSpec(
        "slug",
        StrictStr,
        strict=(
            min_length(5),
            max_length(100),
            matches(SLUG_PATTERN, "Slug must be lowercase with hyphens only"),
        ),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "author",
        StrictStr,
        core=(min_length(1, "Author is required"),),
        strict=(min_length(2), max_length(100)),
        required=BOTH,
        required_message="Author is required",
    ),
    FieldSpec(
        "read_time",
        StrictStr,
        strict=(matches(READ_TIME_PATTERN, 'Format: "X min read"'),),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "date_published",
        StrictStr,
        strict=(
            matches(DATE_PATTERN, "Must be YYYY-MM-DD format"),
            calendar_date("Must be a valid calendar date"),
        ),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "date_modified",
        StrictStr,
        strict=(
            matches(DATE_PATTERN, "Must be YYYY-MM-DD format"),
            calendar_date("Must be a valid calendar date"),
        ),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "featured_image",
        StrictStr,
        strict=(min_length(1, "Featured image URL required"),),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "featured_image_alt",
        StrictStr,
        strict=(
            min_length(20, "Alt text too short"),
            max_length(200, "Alt text too long"),
            not_prefixed("image of", 'Alt text should not start with "image of"'),
        ),
        required=STRICT_ONLY,
    ),
    FieldSpec("card_type", CardType, required=BOTH),
    FieldSpec(
        "card_number",
        StrictStr,
        core=(min_length(1, "Card number is required"),),
        strict=(min_length(1), max_length(20)),
        required=BOTH,
        required_message="Card number is required",
    ),
    FieldSpec(
        "astrological_correspondence",
        StrictStr,
        strict=(min_length(2), max_length(50)),
        required=STRICT_ONLY,
    ),
    FieldSpec("element", Element, required=BOTH),
    FieldSpec("categories", List[StrictStr], strict=(item_count(1, 5),), required=STRICT_ONLY),
    FieldSpec("tags", List[StrictStr], strict=(item_count(3, 10),), required=STRICT_ONLY),
    FieldSpec("seo", nested=SEO_FIELDS, required=STRICT_ONLY),
    FieldSpec(
        "faq",
        nested=FAQ_FIELDS,
        many=True,
        strict=(item_count(5, 10, too_few="Must have at least 5 FAQ items", too_many="Maximum 10 FAQ items"),),
        required=STRICT_ONLY,
    ),
    FieldSpec(
        "breadcrumb_category",
        StrictStr,
        strict=(min_length(2), max_length(50)),
        required=STRICT_ONLY,
    ),
    FieldSpec("breadcrumb_category_url", StrictStr),
    FieldSpec("related_cards", List[StrictStr], strict=(item_count(maximum=10),)),
    FieldSpec("is_court_card", StrictBool, strict_default=False),
    FieldSpec("is_challenge_card", StrictBool, strict_default=False),
    FieldSpec("status", ArticleStatus),
)

ARTICLE_FIELDS_BY_ALIAS: Dict[str, FieldSpec] = {spec.alias: spec for spec in ARTICLE_FIELDS}


class ArticleSchemaBase(BaseModel):
    """Shared config: camelCase input keys, unknown keys dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


_MODEL_NAMES = {
    Tier.CORE: "CoreArticle",
    Tier.STRICT: "StrictArticle",
    Tier.LENIENT: "LenientArticle",
}


def _annotation_for(spec: FieldSpec, tier: Tier, model_name: str) -> Any:
    if spec.nested is None:
        base = spec.annotation
    else:
        sub_name = f"{model_name}{to_camel(spec.name).capitalize()}"
        sub_model = _build_model(sub_name, spec.nested, tier)
        base = List[sub_model] if spec.many else sub_model  # type: ignore[valid-type]
    checks = spec.checks(tier)
    if not checks:
        return base
    return Annotated[(base, *(AfterValidator(check) for check in checks))]


def _build_model(name: str, specs: Tuple[FieldSpec, ...], tier: Tier) -> Type[BaseModel]:
    definitions: Dict[str, Any] = {}
    for spec in specs:
        annotation = _annotation_for(spec, tier, name)
        if tier in spec.required:
            definitions[spec.name] = (annotation, Field(...))
        elif tier is Tier.STRICT and spec.strict_default is not None:
            definitions[spec.name] = (annotation, Field(spec.strict_default))
        else:
            definitions[spec.name] = (Optional[annotation], Field(None))
    return create_model(name, __base__=ArticleSchemaBase, __module__=__name__, **definitions)


@lru_cache(maxsize=None)
def build_article_model(tier: Tier) -> Type[BaseModel]:
    """Return the (cached) article model for ``tier``."""
    return _build_model(_MODEL_NAMES[tier], ARTICLE_FIELDS, tier)


def required_message(alias: str, tier: Tier) -> str:
    spec = ARTICLE_FIELDS_BY_ALIAS.get(alias)
    if tier is Tier.CORE and spec is not None and spec.required_message:
        return spec.required_message
    return "Required"


CoreArticle = build_article_model(Tier.CORE)
StrictArticle = build_article_model(Tier.STRICT)
LenientArticle = build_article_model(Tier.LENIENT)
