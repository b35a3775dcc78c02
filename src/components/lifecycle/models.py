"""Lifecycle component models - frozen dataclass inputs and outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import ceil

from src.domain.entities import AuthorSummary, Publication, PublicationStatus

# --- Input Models ---


@dataclass(frozen=True)
class CreatePublicationInput:
    """Input for creating a new publication."""

    title: str
    content: str
    author_id: int


@dataclass(frozen=True)
class GetPublicationInput:
    """Input for retrieving a single publication."""

    publication_id: int


@dataclass(frozen=True)
class ListPublicationsInput:
    """Input for listing publications, optionally restricted to one author."""

    page: int = 0
    size: int = 10
    author_id: int | None = None


@dataclass(frozen=True)
class ChangeStatusInput:
    """
    Input for a status change.

    Review details, when given, are applied to the record before the
    transition rules run.
    """

    publication_id: int
    to_status: PublicationStatus
    editor_name: str | None = None
    review_comments: str | None = None
    rejection_reason: str | None = None

    def review_details(self) -> dict[str, str]:
        details = {
            "editor_name": self.editor_name,
            "review_comments": self.review_comments,
            "rejection_reason": self.rejection_reason,
        }
        return {k: v for k, v in details.items() if v is not None}


# --- Output Models ---


@dataclass(frozen=True)
class PublicationView:
    """A publication plus best-effort author data."""

    publication: Publication
    author: AuthorSummary | None = None

    @property
    def enriched(self) -> bool:
        return self.author is not None


@dataclass(frozen=True)
class PublicationPageOutput:
    """One page of publications, each independently enriched."""

    items: list[PublicationView] = field(default_factory=list)
    page: int = 0
    size: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return ceil(self.total / self.size)
