"""Feedback persistence logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from snap_photo.domain.feedback import (
    FeedbackRecord,
    FeedbackStatus,
    check_transition,
    parse_status,
    validate_feedback,
)
from snap_photo.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class FeedbackRepository(Protocol):
    """Persistence interface for feedback entries."""

    def create_feedback(
        self, name: str, content: str, status: FeedbackStatus
    ) -> FeedbackRecord:
        """Store a feedback entry and return it."""

    def list_feedback(self) -> list[FeedbackRecord]:
        """Return all feedback, newest first."""

    def get_feedback(self, feedback_id: UUID) -> FeedbackRecord | None:
        """Return a feedback entry by id, if present."""

    def update_status(
        self, feedback_id: UUID, status: FeedbackStatus
    ) -> FeedbackRecord | None:
        """Set the status of a feedback entry and return the updated row."""


@dataclass
class FeedbackService:
    """Application service for the feedback endpoints."""

    repository: FeedbackRepository

    def submit(self, name: str, message: str) -> FeedbackRecord:
        """Create a pending feedback entry."""
        cleaned_name, cleaned_message = validate_feedback(name, message)
        feedback = self.repository.create_feedback(
            cleaned_name, cleaned_message, FeedbackStatus.PENDING
        )
        logger.info("Stored feedback %s", feedback.id)
        return feedback

    def list_feedback(self) -> list[FeedbackRecord]:
        """Return feedback ordered newest first."""
        entries = self.repository.list_feedback()
        return sorted(entries, key=lambda entry: entry.created_at, reverse=True)

    def update_status(self, feedback_id: UUID, raw_status: str) -> FeedbackRecord:
        """Move feedback forward to the requested status.

        Repeating the current status returns the stored record unchanged.
        """
        target = parse_status(raw_status)
        current = self.repository.get_feedback(feedback_id)
        if current is None:
            raise RecordNotFoundError(f"Feedback {feedback_id} not found")
        if not check_transition(current.status, target):
            return current
        updated = self.repository.update_status(feedback_id, target)
        if updated is None:
            raise RecordNotFoundError(f"Feedback {feedback_id} not found")
        logger.info("Feedback %s marked %s", feedback_id, target.value)
        return updated
