"""Review dashboard for stored photos and feedback."""

import logging
from dataclasses import dataclass, field

from snap_photo.adapters.feedback_api_client import FeedbackApiClient
from snap_photo.adapters.photo_api_client import PhotoApiClient
from snap_photo.domain.feedback import FeedbackRecord, FeedbackStatus
from snap_photo.domain.photos import PhotoRecord
from snap_photo.errors import SubmissionError

logger = logging.getLogger(__name__)


@dataclass
class ReviewDashboard:
    """State behind the admin review page."""

    photo_client: PhotoApiClient
    feedback_client: FeedbackApiClient
    photos: list[PhotoRecord] = field(default_factory=list)
    feedbacks: list[FeedbackRecord] = field(default_factory=list)
    error: str | None = None
    busy: bool = False

    async def refresh(self) -> None:
        """Load photos and feedback; each failure is reported separately."""
        try:
            self.photos = await self.photo_client.list_photos()
        except SubmissionError:
            logger.exception("Error fetching photos")
            self.error = "Failed to load photos"
        try:
            self.feedbacks = await self.feedback_client.list_feedback()
        except SubmissionError:
            logger.exception("Error fetching feedbacks")
            self.error = "Failed to load feedbacks"

    def can_mark_reviewed(self, feedback: FeedbackRecord) -> bool:
        return not feedback.is_reviewed and not self.busy

    async def mark_reviewed(self, feedback: FeedbackRecord) -> FeedbackRecord | None:
        """Mark feedback reviewed. Disabled once it already is."""
        if not self.can_mark_reviewed(feedback):
            return None
        self.busy = True
        try:
            updated = await self.feedback_client.update_status(
                feedback.id, FeedbackStatus.REVIEWED
            )
        except SubmissionError:
            logger.exception("Error updating feedback %s", feedback.id)
            self.error = "Failed to update feedback"
            return None
        finally:
            self.busy = False
        self.feedbacks = [
            updated if entry.id == feedback.id else entry for entry in self.feedbacks
        ]
        return updated

    async def delete_photo(self, photo: PhotoRecord) -> bool:
        """Delete a photo; the local list changes only after the server agrees."""
        self.busy = True
        try:
            await self.photo_client.delete_photo(photo.id)
        except SubmissionError:
            logger.exception("Error deleting photo %s", photo.id)
            self.error = "Failed to delete photo"
            return False
        finally:
            self.busy = False
        self.photos = [entry for entry in self.photos if entry.id != photo.id]
        return True

    def dismiss_error(self) -> None:
        self.error = None
