from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.components.lifecycle import PublicationPageOutput, PublicationView
from src.domain.entities import AuthorSummary, PublicationStatus


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# --- Requests ---
class PublicationCreateRequest(BaseModel):
    title: str = Field(min_length=5, max_length=200)
    content: str = Field(min_length=1)
    author_id: int = Field(gt=0)

    @field_validator("title", "content")
    @classmethod
    def _strip_check(cls, v: str) -> str:
        return _not_blank(v)


class StatusChangeRequest(BaseModel):
    status: PublicationStatus
    editor_name: str | None = Field(default=None, max_length=100)
    review_comments: str | None = Field(default=None, max_length=500)
    rejection_reason: str | None = Field(default=None, max_length=500)


# --- Responses ---
class AuthorResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str | None = None
    biography: str | None = None
    organization: str | None = None

    @classmethod
    def from_summary(cls, author: AuthorSummary) -> "AuthorResponse":
        return cls(
            id=author.id,
            first_name=author.first_name,
            last_name=author.last_name,
            full_name=author.full_name,
            email=author.email,
            biography=author.biography,
            organization=author.organization,
        )


class PublicationResponse(BaseModel):
    id: int
    title: str
    content: str
    author_id: int
    status: PublicationStatus
    review_comments: str | None = None
    editor_name: str | None = None
    rejection_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: AuthorResponse | None = None  # None when the registry could not be reached

    @classmethod
    def from_view(cls, view: PublicationView) -> "PublicationResponse":
        pub = view.publication
        if pub.id is None:
            raise ValueError("Cannot render an unsaved publication")
        return cls(
            id=pub.id,
            title=pub.title,
            content=pub.content,
            author_id=pub.author_id,
            status=pub.status,
            review_comments=pub.review_comments,
            editor_name=pub.editor_name,
            rejection_reason=pub.rejection_reason,
            created_at=pub.created_at,
            updated_at=pub.updated_at,
            author=AuthorResponse.from_summary(view.author) if view.author else None,
        )


class PublicationPageResponse(BaseModel):
    items: list[PublicationResponse]
    page: int
    size: int
    total: int
    total_pages: int

    @classmethod
    def from_output(cls, out: PublicationPageOutput) -> "PublicationPageResponse":
        return cls(
            items=[PublicationResponse.from_view(v) for v in out.items],
            page=out.page,
            size=out.size,
            total=out.total,
            total_pages=out.total_pages,
        )


class ErrorResponse(BaseModel):
    error: str
    message: str
