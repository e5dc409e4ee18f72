"""Supabase-backed feedback repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from snap_photo.domain.feedback import FeedbackRecord, FeedbackStatus
from snap_photo.services.feedback import FeedbackRepository

_COLUMNS = "id, name, content, status, created_at"


@dataclass
class SupabaseFeedbackRepository(FeedbackRepository):
    """Supabase implementation for feedback persistence."""

    client: Client

    def create_feedback(
        self, name: str, content: str, status: FeedbackStatus
    ) -> FeedbackRecord:
        """Insert a feedback row and return it."""
        response = (
            self.client.table("feedbacks")
            .insert({"name": name, "content": content, "status": status.value})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create feedback")
        return _row_to_feedback(response.data[0])

    def list_feedback(self) -> list[FeedbackRecord]:
        """Return all feedback ordered by creation time, newest first."""
        response = (
            self.client.table("feedbacks")
            .select(_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [_row_to_feedback(row) for row in response.data or []]

    def get_feedback(self, feedback_id: UUID) -> FeedbackRecord | None:
        """Fetch one feedback row by id."""
        response = (
            self.client.table("feedbacks")
            .select(_COLUMNS)
            .eq("id", str(feedback_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _row_to_feedback(response.data[0])

    def update_status(
        self, feedback_id: UUID, status: FeedbackStatus
    ) -> FeedbackRecord | None:
        """Set the status column and return the updated row."""
        response = (
            self.client.table("feedbacks")
            .update({"status": status.value})
            .eq("id", str(feedback_id))
            .execute()
        )
        if not response.data:
            return None
        return _row_to_feedback(response.data[0])


def _row_to_feedback(row: dict[str, object]) -> FeedbackRecord:
    return FeedbackRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        content=str(row["content"]),
        status=FeedbackStatus(str(row["status"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
