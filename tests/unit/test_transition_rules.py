"""Transition rule tests - content readiness per target status."""

from __future__ import annotations

import pytest

from src.domain import transition_rules
from src.domain.entities import Publication, PublicationStatus
from src.domain.errors import (
    EmptyContentError,
    MissingEditorError,
    MissingRejectionReasonError,
    MissingReviewCommentsError,
    TransitionRuleError,
)

BLANKS = ["", " ", "   ", "\n", "\t \n"]


def make_pub(**overrides: object) -> Publication:
    fields: dict[str, object] = {"title": "A valid title", "content": "Body", "author_id": 1}
    fields.update(overrides)
    return Publication(**fields)  # type: ignore[arg-type]


class TestInReview:
    @pytest.mark.parametrize("content", BLANKS)
    def test_blank_content_fails(self, content: str) -> None:
        error = transition_rules.check(make_pub(content=content), PublicationStatus.IN_REVIEW)
        assert isinstance(error, EmptyContentError)
        assert error.code == "empty_content"

    def test_content_present_passes(self) -> None:
        assert transition_rules.check(make_pub(content="Draft text"), PublicationStatus.IN_REVIEW) is None


class TestApproved:
    @pytest.mark.parametrize("editor", [None, *BLANKS])
    def test_missing_editor(self, editor: str | None) -> None:
        with pytest.raises(MissingEditorError):
            transition_rules.validate(make_pub(editor_name=editor), PublicationStatus.APPROVED)

    def test_editor_present(self) -> None:
        transition_rules.validate(make_pub(editor_name="J. Smith"), PublicationStatus.APPROVED)


class TestRejected:
    @pytest.mark.parametrize("reason", [None, *BLANKS])
    def test_missing_reason(self, reason: str | None) -> None:
        with pytest.raises(MissingRejectionReasonError):
            transition_rules.validate(make_pub(rejection_reason=reason), PublicationStatus.REJECTED)

    def test_reason_present(self) -> None:
        transition_rules.validate(make_pub(rejection_reason="Off topic"), PublicationStatus.REJECTED)


class TestRequiresChanges:
    @pytest.mark.parametrize("comments", [None, *BLANKS])
    def test_missing_comments(self, comments: str | None) -> None:
        with pytest.raises(MissingReviewCommentsError):
            transition_rules.validate(
                make_pub(review_comments=comments), PublicationStatus.REQUIRES_CHANGES
            )

    def test_comments_present(self) -> None:
        transition_rules.validate(
            make_pub(review_comments="Fix intro"), PublicationStatus.REQUIRES_CHANGES
        )


def test_published_has_no_rule() -> None:
    bare = make_pub(content=" ", editor_name=None)
    assert transition_rules.check(bare, PublicationStatus.PUBLISHED) is None


def test_draft_has_no_rule() -> None:
    assert transition_rules.check(make_pub(content=""), PublicationStatus.DRAFT) is None


def test_rules_only_read_their_own_field() -> None:
    # Other empty fields are irrelevant to the approval rule
    pub = make_pub(content="", editor_name="J. Smith", rejection_reason=None)
    assert transition_rules.check(pub, PublicationStatus.APPROVED) is None


@pytest.mark.parametrize(
    ("target", "error_type"),
    [
        (PublicationStatus.IN_REVIEW, EmptyContentError),
        (PublicationStatus.APPROVED, MissingEditorError),
        (PublicationStatus.REJECTED, MissingRejectionReasonError),
        (PublicationStatus.REQUIRES_CHANGES, MissingReviewCommentsError),
    ],
)
def test_errors_are_distinct_rule_errors(
    target: PublicationStatus, error_type: type[TransitionRuleError]
) -> None:
    error = transition_rules.check(make_pub(content=""), target)
    assert type(error) is error_type
    assert isinstance(error, TransitionRuleError)
    assert error.field is not None


def test_rules_do_not_mutate_publication() -> None:
    pub = make_pub(content="")
    before = pub.model_dump()
    transition_rules.check(pub, PublicationStatus.IN_REVIEW)
    assert pub.model_dump() == before
