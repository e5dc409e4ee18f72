"""Feedback form state and submission."""

import logging
from dataclasses import dataclass

from snap_photo.adapters.feedback_api_client import FeedbackApiClient
from snap_photo.domain.feedback import FeedbackRecord, validate_feedback
from snap_photo.errors import FeedbackValidationError, SubmissionError

logger = logging.getLogger(__name__)

THANK_YOU_MESSAGE = "Баярлалаа ёстой гоё үг байнө бро 👍"
SUBMIT_FAILED_MESSAGE = "Failed to submit feedback. Please try again."


@dataclass
class FeedbackForm:
    """Collects a name and message and sends them once they are valid."""

    client: FeedbackApiClient
    name: str = ""
    message: str = ""
    error: str | None = None
    submitting: bool = False
    submitted: FeedbackRecord | None = None

    @property
    def thank_you(self) -> str | None:
        return THANK_YOU_MESSAGE if self.submitted else None

    async def submit(self) -> FeedbackRecord | None:
        """Validate locally, then send. Invalid input never reaches the network."""
        if self.submitting:
            return None
        self.error = None
        try:
            name, message = validate_feedback(self.name, self.message)
        except FeedbackValidationError as exc:
            self.error = str(exc)
            return None

        self.submitting = True
        try:
            record = await self.client.create_feedback(name, message)
        except SubmissionError as exc:
            logger.warning("Feedback submission failed: %s", exc)
            self.error = str(exc) or SUBMIT_FAILED_MESSAGE
            return None
        finally:
            self.submitting = False
        self.submitted = record
        return record

    def reset(self) -> None:
        self.name = ""
        self.message = ""
        self.error = None
        self.submitted = None
