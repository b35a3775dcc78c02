"""
Lifecycle component - the single entry point for publication operations.

Coordinates creation, retrieval, listing and status changes.

Dependency policy toward the author registry:
- create: author existence is a hard precondition. A negative answer
  raises AuthorNotFoundError; a registry failure propagates as-is. No
  record is written in either case.
- read/list/after-write: author data is best effort. Any failure leaves
  the author slot empty and the operation still succeeds. In a list,
  each item is enriched independently.

Status changes: graph check (InvalidTransitionError), then review
details applied, then transition rules (TransitionRuleError subclass),
then save. Nothing is saved unless every check passes.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from src.domain import state, transition_rules
from src.domain.entities import Page, Publication
from src.domain.errors import (
    AuthorNotFoundError,
    InvalidPublicationError,
    InvalidTransitionError,
    PublicationNotFoundError,
)

from .models import (
    ChangeStatusInput,
    CreatePublicationInput,
    GetPublicationInput,
    ListPublicationsInput,
    PublicationPageOutput,
    PublicationView,
)
from .ports import AuthorGatewayPort, PublicationRepoPort

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8
DEFAULT_TITLE_MIN_LENGTH = 5
DEFAULT_TITLE_MAX_LENGTH = 200

LifecycleInput = (
    CreatePublicationInput | GetPublicationInput | ListPublicationsInput | ChangeStatusInput
)
LifecycleOutput = PublicationView | PublicationPageOutput


class PublicationLifecycle:
    """Orchestrates the publication lifecycle over persistence and the author registry."""

    def __init__(
        self,
        repo: PublicationRepoPort,
        authors: AuthorGatewayPort,
        max_workers: int = DEFAULT_MAX_WORKERS,
        title_min_length: int = DEFAULT_TITLE_MIN_LENGTH,
        title_max_length: int = DEFAULT_TITLE_MAX_LENGTH,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._repo = repo
        self._authors = authors
        self._max_workers = max_workers
        self._title_min_length = title_min_length
        self._title_max_length = title_max_length

    def run(self, inp: LifecycleInput) -> LifecycleOutput:
        """Dispatch to the handler for the input type."""
        if isinstance(inp, CreatePublicationInput):
            return self.create(inp)
        elif isinstance(inp, GetPublicationInput):
            return self.get(inp.publication_id)
        elif isinstance(inp, ListPublicationsInput):
            return self.list_page(inp)
        elif isinstance(inp, ChangeStatusInput):
            return self.change_status(inp)
        else:
            raise TypeError(f"Unknown input type: {type(inp)}")

    # --- Commands ---

    def create(self, inp: CreatePublicationInput) -> PublicationView:
        """
        Create a publication in DRAFT.

        Raises:
            InvalidPublicationError: title/content/author_id are malformed.
            AuthorNotFoundError: registry says the author does not exist.
            GatewayUnavailableError: registry could not answer.
        """
        self._check_create_input(inp)

        # Hard dependency: errors from the registry are not caught here.
        if not self._authors.exists(inp.author_id):
            raise AuthorNotFoundError(inp.author_id)

        publication = Publication(
            title=inp.title,
            content=inp.content,
            author_id=inp.author_id,
            status=state.INITIAL_STATUS,
        )
        saved = self._repo.save(publication)

        logger.info(
            "Publication created: id=%s, title=%s, author_id=%s",
            saved.id,
            saved.title,
            saved.author_id,
        )
        return self._enrich(saved)

    def change_status(self, inp: ChangeStatusInput) -> PublicationView:
        """
        Move a publication along one edge of the status graph.

        Raises:
            PublicationNotFoundError: no record with this id.
            InvalidTransitionError: not a graph edge from the current status.
            TransitionRuleError: edge is legal but the publication is not ready.
        """
        publication = self._load(inp.publication_id)
        current = publication.status

        if not state.can_transition(current, inp.to_status):
            raise InvalidTransitionError(
                current, inp.to_status, state.allowed_transitions(current)
            )

        candidate = publication.model_copy(update=inp.review_details())
        transition_rules.validate(candidate, inp.to_status)

        candidate.status = inp.to_status
        updated = self._repo.save(candidate)

        logger.info(
            "Publication status changed: id=%s, %s -> %s",
            updated.id,
            current.value,
            updated.status.value,
        )
        return self._enrich(updated)

    # --- Queries ---

    def get(self, publication_id: int) -> PublicationView:
        """Load one publication. Raises PublicationNotFoundError if absent."""
        return self._enrich(self._load(publication_id))

    def list_page(self, inp: ListPublicationsInput) -> PublicationPageOutput:
        """List a page of publications, optionally for one author."""
        if inp.author_id is None:
            page = self._repo.find_all(inp.page, inp.size)
        else:
            page = self._repo.find_by_author(inp.author_id, inp.page, inp.size)
        return self._enrich_page(page)

    def list_all(self, page: int = 0, size: int = 10) -> PublicationPageOutput:
        return self.list_page(ListPublicationsInput(page=page, size=size))

    def list_by_author(self, author_id: int, page: int = 0, size: int = 10) -> PublicationPageOutput:
        return self.list_page(ListPublicationsInput(page=page, size=size, author_id=author_id))

    # --- Internals ---

    def _load(self, publication_id: int) -> Publication:
        publication = self._repo.find_by_id(publication_id)
        if publication is None:
            raise PublicationNotFoundError(publication_id)
        return publication

    def _check_create_input(self, inp: CreatePublicationInput) -> None:
        title = (inp.title or "").strip()
        if not title:
            raise InvalidPublicationError("title", "Title is required")
        if not self._title_min_length <= len(title) <= self._title_max_length:
            raise InvalidPublicationError(
                "title",
                f"Title must be between {self._title_min_length} "
                f"and {self._title_max_length} characters",
            )
        if not inp.content or not inp.content.strip():
            raise InvalidPublicationError("content", "Content is required")
        if inp.author_id <= 0:
            raise InvalidPublicationError("author_id", "Author ID must be positive")

    def _enrich(self, publication: Publication) -> PublicationView:
        """Attach author data if the registry can provide it; never raises."""
        try:
            author = self._authors.fetch_summary(publication.author_id)
        except Exception as e:
            logger.warning(
                "Could not enrich publication %s with author %s: %s",
                publication.id,
                publication.author_id,
                e,
            )
            return PublicationView(publication=publication, author=None)
        return PublicationView(publication=publication, author=author)

    def _enrich_page(self, page: Page[Publication]) -> PublicationPageOutput:
        items: list[PublicationView] = []
        if page.items:
            workers = min(self._max_workers, len(page.items))
            with ThreadPoolExecutor(max_workers=workers) as executor:
                # map keeps page order; _enrich never raises
                items = list(executor.map(self._enrich, page.items))

        return PublicationPageOutput(
            items=items,
            page=page.page,
            size=page.size,
            total=page.total,
        )
