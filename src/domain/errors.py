"""
Publication lifecycle failures.

Every failure the lifecycle can report is a distinct type with a stable
``code`` so the inbound surface can map it to a response without parsing
messages. Anything not listed here (storage errors, bugs) propagates
untouched.
"""

from __future__ import annotations

from src.domain.entities import PublicationStatus


class PublicationError(Exception):
    """Base class for lifecycle failures."""

    code = "publication_error"


# --- Author registry ---


class AuthorNotFoundError(PublicationError):
    """The author registry reports no such author (raised on create only)."""

    code = "author_not_found"

    def __init__(self, author_id: int) -> None:
        self.author_id = author_id
        super().__init__(f"Author not found with id: {author_id}")


class GatewayUnavailableError(PublicationError):
    """The author registry could not be reached or answered garbage."""

    code = "gateway_unavailable"

    def __init__(self, author_id: int, reason: str = "") -> None:
        self.author_id = author_id
        self.reason = reason
        msg = f"Unable to reach author registry for author {author_id}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class AuthorSummaryNotFoundError(PublicationError):
    """The registry answered 404 for an author summary lookup."""

    code = "author_summary_not_found"

    def __init__(self, author_id: int) -> None:
        self.author_id = author_id
        super().__init__(f"Author summary not found for id: {author_id}")


# --- Publications ---


class InvalidPublicationError(PublicationError):
    """Create input that would produce an invalid record."""

    code = "invalid_publication"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class PublicationNotFoundError(PublicationError):
    code = "publication_not_found"

    def __init__(self, publication_id: int) -> None:
        self.publication_id = publication_id
        super().__init__(f"Publication not found with id: {publication_id}")


class InvalidTransitionError(PublicationError):
    """Raised when a status change is not an edge of the status graph."""

    code = "invalid_transition"

    def __init__(
        self,
        from_status: PublicationStatus,
        to_status: PublicationStatus,
        allowed: list[PublicationStatus] | None = None,
    ) -> None:
        self.from_status = from_status
        self.to_status = to_status
        self.allowed = list(allowed or [])
        msg = f"Cannot change publication status from {from_status.value} to {to_status.value}"
        if self.allowed:
            msg += f". Allowed: {[s.value for s in self.allowed]}"
        super().__init__(msg)


# --- Transition rules ---


class TransitionRuleError(PublicationError):
    """A graph-legal transition whose business rule is not met."""

    code = "transition_rule_failed"
    field: str | None = None
    default_message = "Transition rule not satisfied"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyContentError(TransitionRuleError):
    code = "empty_content"
    field = "content"
    default_message = "Publication content cannot be empty"


class MissingEditorError(TransitionRuleError):
    code = "missing_editor"
    field = "editor_name"
    default_message = "Editor name is required for approval"


class MissingRejectionReasonError(TransitionRuleError):
    code = "missing_rejection_reason"
    field = "rejection_reason"
    default_message = "Rejection reason is required"


class MissingReviewCommentsError(TransitionRuleError):
    code = "missing_review_comments"
    field = "review_comments"
    default_message = "Review comments are required when requesting changes"
