"""
Lifecycle component port definitions - protocols for collaborators.

Persistence and the author registry are owned elsewhere; the lifecycle
only depends on these contracts.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import AuthorSummary, Page, Publication


class PublicationRepoPort(Protocol):
    """Repository interface for publication persistence."""

    def save(self, publication: Publication) -> Publication:
        """Insert or update; assigns id and timestamps."""
        ...

    def find_by_id(self, publication_id: int) -> Publication | None:
        """Get publication by ID."""
        ...

    def find_all(self, page: int, size: int) -> Page[Publication]:
        """List publications, one page at a time."""
        ...

    def find_by_author(self, author_id: int, page: int, size: int) -> Page[Publication]:
        """List one author's publications, one page at a time."""
        ...


class AuthorGatewayPort(Protocol):
    """
    Author registry operations.

    Both calls may raise GatewayUnavailableError; fetch_summary may also
    raise AuthorSummaryNotFoundError.
    """

    def exists(self, author_id: int) -> bool:
        """Check whether the registry knows this author."""
        ...

    def fetch_summary(self, author_id: int) -> AuthorSummary:
        """Fetch display data for an author."""
        ...
