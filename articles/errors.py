"""Error types raised by callers that prefer exceptions over result objects."""

from __future__ import annotations

from typing import Iterable, List


class ArticleError(Exception):
    """Base article pipeline error."""


class ArticleValidationError(ArticleError, ValueError):
    """Blocking validation failure; carries one ``field: reason`` string per violation."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        summary = "; ".join(self.errors) if self.errors else "validation failed"
        super().__init__(f"Article validation failed: {summary}")
