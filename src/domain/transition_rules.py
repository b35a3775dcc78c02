"""
Content-readiness rules for status transitions.

The status graph says which edges exist; these rules say whether a
publication is ready to take one. Rules are keyed by target status and
only ever look at field values. They are run after the graph check and
never re-check graph legality.

Rules by target:
- IN_REVIEW: content must be non-blank
- APPROVED: editor_name must be non-blank
- REJECTED: rejection_reason must be non-blank
- REQUIRES_CHANGES: review_comments must be non-blank
- PUBLISHED: no rule
"""

from __future__ import annotations

from collections.abc import Callable

from src.domain.entities import Publication, PublicationStatus
from src.domain.errors import (
    EmptyContentError,
    MissingEditorError,
    MissingRejectionReasonError,
    MissingReviewCommentsError,
    TransitionRuleError,
)

Rule = Callable[[Publication], TransitionRuleError | None]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _require_content(publication: Publication) -> TransitionRuleError | None:
    if _is_blank(publication.content):
        return EmptyContentError()
    return None


def _require_editor(publication: Publication) -> TransitionRuleError | None:
    if _is_blank(publication.editor_name):
        return MissingEditorError()
    return None


def _require_rejection_reason(publication: Publication) -> TransitionRuleError | None:
    if _is_blank(publication.rejection_reason):
        return MissingRejectionReasonError()
    return None


def _require_review_comments(publication: Publication) -> TransitionRuleError | None:
    if _is_blank(publication.review_comments):
        return MissingReviewCommentsError()
    return None


RULES: dict[PublicationStatus, Rule] = {
    PublicationStatus.IN_REVIEW: _require_content,
    PublicationStatus.APPROVED: _require_editor,
    PublicationStatus.REJECTED: _require_rejection_reason,
    PublicationStatus.REQUIRES_CHANGES: _require_review_comments,
}


def check(publication: Publication, target: PublicationStatus) -> TransitionRuleError | None:
    """Return the failed rule for `target`, or None if the publication is ready."""
    rule = RULES.get(target)
    if rule is None:
        return None
    return rule(publication)


def validate(publication: Publication, target: PublicationStatus) -> None:
    """
    Enforce the rule for `target`.

    Raises:
        TransitionRuleError: the specific subclass for the unmet rule.
    """
    error = check(publication, target)
    if error is not None:
        raise error
