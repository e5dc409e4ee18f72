"""Domain models and rules for user feedback."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from snap_photo.errors import FeedbackTransitionError, FeedbackValidationError

NAME_REQUIRED_MESSAGE = "Нэрээ оруулна уу!"
MESSAGE_REQUIRED_MESSAGE = "Ямар нэгэн үг бичнэ үү!"


class FeedbackStatus(StrEnum):
    """Review state of a feedback entry."""

    PENDING = "pending"
    REVIEWED = "reviewed"


@dataclass(frozen=True)
class FeedbackRecord:
    """Represents a feedback entry stored in the database."""

    id: UUID
    name: str
    content: str
    status: FeedbackStatus
    created_at: datetime

    @property
    def is_reviewed(self) -> bool:
        return self.status is FeedbackStatus.REVIEWED


def validate_feedback(name: str, message: str) -> tuple[str, str]:
    """Return stripped name and message, or raise on blank input."""
    cleaned_name = name.strip()
    if not cleaned_name:
        raise FeedbackValidationError(NAME_REQUIRED_MESSAGE)
    cleaned_message = message.strip()
    if not cleaned_message:
        raise FeedbackValidationError(MESSAGE_REQUIRED_MESSAGE)
    return cleaned_name, cleaned_message


def parse_status(raw: str) -> FeedbackStatus:
    """Parse a status string from an API payload."""
    try:
        return FeedbackStatus(raw)
    except ValueError as exc:
        raise FeedbackTransitionError(f"Unknown feedback status: {raw!r}") from exc


def check_transition(current: FeedbackStatus, target: FeedbackStatus) -> bool:
    """Return true when the status must change, false for a no-op.

    Reviewed feedback never goes back to pending.
    """
    if current is target:
        return False
    if current is FeedbackStatus.REVIEWED:
        raise FeedbackTransitionError("Reviewed feedback cannot be reopened")
    return True
