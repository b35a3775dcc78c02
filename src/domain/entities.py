from datetime import datetime
from enum import Enum
from math import ceil
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# --- Enums ---


class PublicationStatus(str, Enum):
    """Editorial workflow states. PUBLISHED and REJECTED are terminal."""

    DRAFT = "DRAFT"
    IN_REVIEW = "IN_REVIEW"
    APPROVED = "APPROVED"
    PUBLISHED = "PUBLISHED"
    REJECTED = "REJECTED"
    REQUIRES_CHANGES = "REQUIRES_CHANGES"


# --- Publications ---


class Publication(BaseModel):
    id: int | None = None  # Assigned by persistence on first save
    title: str
    content: str
    author_id: int
    status: PublicationStatus = PublicationStatus.DRAFT

    review_comments: str | None = None
    editor_name: str | None = None
    rejection_reason: str | None = None

    version: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


# --- Authors (owned by the external registry) ---


class AuthorSummary(BaseModel):
    """Read-only author data fetched from the author registry."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: int
    first_name: str
    last_name: str
    email: str | None = None
    biography: str | None = None
    organization: str | None = None
    active: bool = True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


# --- Pagination ---


class Page(BaseModel, Generic[T]):
    items: list[T] = Field(default_factory=list)
    page: int = 0
    size: int = 10
    total: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return ceil(self.total / self.size)
