import logging

from fastapi import APIRouter, Depends, Query, status

from src.api.deps import get_lifecycle, get_rules
from src.api.schemas import (
    PublicationCreateRequest,
    PublicationPageResponse,
    PublicationResponse,
    StatusChangeRequest,
)
from src.components.lifecycle import (
    ChangeStatusInput,
    CreatePublicationInput,
    ListPublicationsInput,
    PublicationLifecycle,
)
from src.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


def _page_size(size: int | None, rules: Rules) -> int:
    if size is None:
        return rules.pagination.default_size
    return min(size, rules.pagination.max_size)


@router.post("", response_model=PublicationResponse, status_code=status.HTTP_201_CREATED)
def create_publication(
    req: PublicationCreateRequest,
    lifecycle: PublicationLifecycle = Depends(get_lifecycle),
) -> PublicationResponse:
    """Create a publication in DRAFT after confirming the author exists."""
    logger.info("Creating publication: %s", req.title)
    view = lifecycle.create(
        CreatePublicationInput(title=req.title, content=req.content, author_id=req.author_id)
    )
    return PublicationResponse.from_view(view)


@router.get("", response_model=PublicationPageResponse)
def list_publications(
    page: int = Query(0, ge=0),
    size: int | None = Query(None, ge=1),
    lifecycle: PublicationLifecycle = Depends(get_lifecycle),
    rules: Rules = Depends(get_rules),
) -> PublicationPageResponse:
    out = lifecycle.list_page(ListPublicationsInput(page=page, size=_page_size(size, rules)))
    return PublicationPageResponse.from_output(out)


@router.get("/author/{author_id}", response_model=PublicationPageResponse)
def list_publications_by_author(
    author_id: int,
    page: int = Query(0, ge=0),
    size: int | None = Query(None, ge=1),
    lifecycle: PublicationLifecycle = Depends(get_lifecycle),
    rules: Rules = Depends(get_rules),
) -> PublicationPageResponse:
    out = lifecycle.list_page(
        ListPublicationsInput(page=page, size=_page_size(size, rules), author_id=author_id)
    )
    return PublicationPageResponse.from_output(out)


@router.get("/{publication_id}", response_model=PublicationResponse)
def get_publication(
    publication_id: int,
    lifecycle: PublicationLifecycle = Depends(get_lifecycle),
) -> PublicationResponse:
    """Get a publication; author data is attached when the registry answers."""
    return PublicationResponse.from_view(lifecycle.get(publication_id))


@router.patch("/{publication_id}/status", response_model=PublicationResponse)
def change_status(
    publication_id: int,
    req: StatusChangeRequest,
    lifecycle: PublicationLifecycle = Depends(get_lifecycle),
) -> PublicationResponse:
    logger.info("Changing publication status: id=%s, new_status=%s", publication_id, req.status.value)
    view = lifecycle.change_status(
        ChangeStatusInput(
            publication_id=publication_id,
            to_status=req.status,
            editor_name=req.editor_name,
            review_comments=req.review_comments,
            rejection_reason=req.rejection_reason,
        )
    )
    return PublicationResponse.from_view(view)
