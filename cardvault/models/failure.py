"""
Failure Classification — Outcomes of Inventory Operations.

Business failures never escape the managers as exceptions. Constructors
raise a KnownError subclass; managers catch it, log it, and turn it into
a boolean, a nullable result, or an AddCardStatus code.

Status codes returned by add-to-container operations:
- 0: Success
- 1: Container or card not found
- 2: No available copies in the collection
- 3: Container is full
- 4: Card violates the container's rules

Presentation layers render a FailureDetail via `describe_status()`
instead of keeping their own message tables.
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Construction failures
    VALIDATION_FAILED = "validation_failed"

    # Resource failures
    NOT_FOUND = "not_found"
    INSUFFICIENT_QUANTITY = "insufficient_quantity"

    # Constraint violations
    CAPACITY_EXCEEDED = "capacity_exceeded"
    RULE_VIOLATION = "rule_violation"


class AddCardStatus(IntEnum):
    """Result of moving a card from the collection into a binder or deck."""

    SUCCESS = 0
    NOT_FOUND = 1
    NO_COPIES = 2
    CONTAINER_FULL = 3
    RULE_VIOLATION = 4

    @property
    def ok(self) -> bool:
        return self is AddCardStatus.SUCCESS

    @property
    def failure_kind(self) -> FailureKind | None:
        """The failure classification, or None for SUCCESS."""
        return _STATUS_KINDS.get(self)


_STATUS_KINDS: dict[AddCardStatus, FailureKind] = {
    AddCardStatus.NOT_FOUND: FailureKind.NOT_FOUND,
    AddCardStatus.NO_COPIES: FailureKind.INSUFFICIENT_QUANTITY,
    AddCardStatus.CONTAINER_FULL: FailureKind.CAPACITY_EXCEEDED,
    AddCardStatus.RULE_VIOLATION: FailureKind.RULE_VIOLATION,
}


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


# Fixed, boring messages per status code; binders and decks share 0-3
STANDARD_MESSAGES: dict[AddCardStatus, str] = {
    AddCardStatus.NOT_FOUND: "The card or container could not be found.",
    AddCardStatus.NO_COPIES: "No copies of this card are available in the collection.",
    AddCardStatus.CONTAINER_FULL: "The container is full.",
    AddCardStatus.RULE_VIOLATION: "This card is not allowed in this container.",
}

STANDARD_SUGGESTIONS: dict[AddCardStatus, str] = {
    AddCardStatus.NOT_FOUND: "Check the spelling of the card and container names.",
    AddCardStatus.NO_COPIES: "Increase the card's count or remove a copy from another container.",
    AddCardStatus.CONTAINER_FULL: "Remove a card first or use another container.",
    AddCardStatus.RULE_VIOLATION: "Pick a card that matches the container's rules.",
}


def describe_status(status: int) -> FailureDetail | None:
    """
    Explain an add-to-container status code.

    Returns None for SUCCESS. Raises ValueError for codes outside 0-4.
    """
    status = AddCardStatus(status)
    kind = status.failure_kind
    if kind is None:
        return None
    return FailureDetail(
        kind=kind,
        message=STANDARD_MESSAGES[status],
        suggestion=STANDARD_SUGGESTIONS[status],
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(kind=self.kind, message=self.message, suggestion=self.suggestion)


class CardValidationError(KnownError):
    """Raised when a Card is constructed from invalid fields."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(
            kind=FailureKind.VALIDATION_FAILED,
            message=f"Invalid card {field}: {reason}",
        )


class ContainerValidationError(KnownError):
    """Raised when a Binder or Deck is constructed with an invalid name."""

    def __init__(self, container: str, reason: str):
        self.container = container
        self.reason = reason
        super().__init__(
            kind=FailureKind.VALIDATION_FAILED,
            message=f"Invalid {container} name: {reason}",
        )
