"""Domain types for the article admission pipeline.

Closed tag sets and the forbidden vocabulary are immutable module constants.
Result objects are pydantic models dumped with camelCase keys for callers
that speak the canonical field names.
"""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Any, List, Literal, Mapping, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from articles.errors import ArticleValidationError

CardType = Literal[
    "Major Arcana",
    "Suit of Wands",
    "Suit of Cups",
    "Suit of Swords",
    "Suit of Pentacles",
]
CardTypeKey = Literal[
    "MAJOR_ARCANA",
    "SUIT_OF_WANDS",
    "SUIT_OF_CUPS",
    "SUIT_OF_SWORDS",
    "SUIT_OF_PENTACLES",
]
Element = Literal["FIRE", "WATER", "AIR", "EARTH"]
ArticleStatus = Literal["DRAFT", "PUBLISHED", "ARCHIVED"]
Severity = Literal["info", "warning", "error"]

CARD_TYPES: tuple[str, ...] = get_args(CardType)
ELEMENTS: tuple[str, ...] = get_args(Element)
ARTICLE_STATUSES: tuple[str, ...] = get_args(ArticleStatus)

# Display tag -> persistence enum key.
CARD_TYPE_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "Major Arcana": "MAJOR_ARCANA",
        "Suit of Wands": "SUIT_OF_WANDS",
        "Suit of Cups": "SUIT_OF_CUPS",
        "Suit of Swords": "SUIT_OF_SWORDS",
        "Suit of Pentacles": "SUIT_OF_PENTACLES",
    }
)

FORBIDDEN_WORDS: tuple[str, ...] = (
    "transmute",
    "ethereal",
    "precipice",
    "myriad",
    "delve",
    "realm",
    "embark",
    "unveil",
    "unravel",
    "resonate",
    "harness",
    "catalyst",
    "conduit",
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class RecommendedRange(CamelModel):
    min: Optional[int] = None
    max: Optional[int] = None


class QualityWarning(CamelModel):
    """Advisory finding about one field; never blocks persistence."""

    field: str
    message: str
    severity: Severity
    current_value: Optional[Union[int, str]] = None
    recommended_range: Optional[RecommendedRange] = None

    def describe(self) -> str:
        return f"[{self.severity}] {self.field}: {self.message}"


class ArticleStats(CamelModel):
    word_count: int = 0
    faq_count: int = 0
    tags_count: int = 0
    categories_count: int = 0
    content_length: int = 0
    has_answer_first_opening: bool = False


class ValidationResult(CamelModel):
    """Outcome of a gate (core or strict) validation.

    ``success=False`` implies ``data`` is absent and ``errors`` is non-empty.
    """

    success: bool
    data: Optional[Any] = None
    errors: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _consistent(self) -> "ValidationResult":
        if self.success and self.errors:
            raise ValueError("successful result cannot carry errors")
        if not self.success and (self.data is not None or not self.errors):
            raise ValueError("failed result needs errors and no data")
        return self

    def require(self) -> BaseModel:
        """Return the validated data or raise :class:`ArticleValidationError`."""
        if not self.success or self.data is None:
            raise ArticleValidationError(self.errors)
        return self.data


class ReviewResult(ValidationResult):
    warnings: List[QualityWarning] = Field(default_factory=list)
    stats: ArticleStats = Field(default_factory=ArticleStats)


class FaqEntry(CamelModel):
    question: str = ""
    answer: str = ""


class PersistableRecord(CamelModel):
    """Flat record in the exact column shape of the article store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    title: str
    slug: str
    excerpt: str
    content: str
    author: str
    read_time: str
    date_published: datetime
    date_modified: datetime
    featured_image: str
    featured_image_alt: str
    card_type: CardTypeKey
    card_number: str
    astrological_correspondence: str
    element: Element
    categories: List[str]
    tags: List[str]
    seo_focus_keyword: str
    seo_meta_title: str
    seo_meta_description: str
    faq: List[FaqEntry]
    breadcrumb_category: str
    breadcrumb_category_url: str
    related_cards: List[str]
    is_court_card: bool
    is_challenge_card: bool
    status: ArticleStatus


class ForceSaveResult(CamelModel):
    """Result of the force-save path; ``success`` is always true."""

    success: Literal[True] = True
    data: Any
    record: PersistableRecord
    warnings: List[str] = Field(default_factory=list)
    stats: ArticleStats = Field(default_factory=ArticleStats)
