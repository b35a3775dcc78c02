from src.domain.entities import PublicationStatus

DRAFT = PublicationStatus.DRAFT
IN_REVIEW = PublicationStatus.IN_REVIEW
APPROVED = PublicationStatus.APPROVED
PUBLISHED = PublicationStatus.PUBLISHED
REJECTED = PublicationStatus.REJECTED
REQUIRES_CHANGES = PublicationStatus.REQUIRES_CHANGES

# The only legal edges. Self-transitions are deliberately absent.
TRANSITIONS: dict[PublicationStatus, frozenset[PublicationStatus]] = {
    DRAFT: frozenset({IN_REVIEW}),
    IN_REVIEW: frozenset({APPROVED, REJECTED, REQUIRES_CHANGES}),
    REQUIRES_CHANGES: frozenset({IN_REVIEW}),
    APPROVED: frozenset({PUBLISHED}),
    PUBLISHED: frozenset(),
    REJECTED: frozenset(),
}

INITIAL_STATUS = DRAFT
TERMINAL_STATUSES = frozenset(s for s, targets in TRANSITIONS.items() if not targets)


def can_transition(current: PublicationStatus, target: PublicationStatus) -> bool:
    """Return True if `current -> target` is an edge of the status graph."""
    return target in TRANSITIONS.get(current, frozenset())


def allowed_transitions(current: PublicationStatus) -> list[PublicationStatus]:
    """Targets reachable from `current`, in declaration order of the enum."""
    targets = TRANSITIONS.get(current, frozenset())
    return [s for s in PublicationStatus if s in targets]


def is_terminal(status: PublicationStatus) -> bool:
    return status in TERMINAL_STATUSES
