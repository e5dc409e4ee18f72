"""HTTP client for the feedback endpoints."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import httpx
from pydantic import ValidationError

from snap_photo.adapters.http_support import send_json
from snap_photo.api.models import FeedbackOut
from snap_photo.domain.feedback import FeedbackRecord, FeedbackStatus
from snap_photo.errors import SubmissionError


class FeedbackApiClient(Protocol):
    """Interface for the feedback persistence endpoint."""

    async def create_feedback(self, name: str, message: str) -> FeedbackRecord:
        """Submit feedback and return the stored record."""

    async def list_feedback(self) -> list[FeedbackRecord]:
        """Return feedback entries, newest first."""

    async def update_status(
        self, feedback_id: UUID, status: FeedbackStatus
    ) -> FeedbackRecord:
        """Change a feedback status and return the updated record."""


@dataclass
class HttpxFeedbackApiClient(FeedbackApiClient):
    """Feedback client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxFeedbackApiClient":
        """Create a feedback client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def create_feedback(self, name: str, message: str) -> FeedbackRecord:
        """POST a feedback entry."""
        data = await send_json(
            self.http_client,
            "POST",
            f"{self.base_url}/api/feedbacks",
            payload={"name": name, "message": message},
        )
        return _parse_feedback(data)

    async def list_feedback(self) -> list[FeedbackRecord]:
        """Fetch all feedback entries."""
        data = await send_json(
            self.http_client, "GET", f"{self.base_url}/api/feedbacks"
        )
        if not isinstance(data, list):
            raise SubmissionError("Feedback list response was not a list")
        return [_parse_feedback(item) for item in data]

    async def update_status(
        self, feedback_id: UUID, status: FeedbackStatus
    ) -> FeedbackRecord:
        """PATCH the status of a feedback entry."""
        data = await send_json(
            self.http_client,
            "PATCH",
            f"{self.base_url}/api/feedbacks/{feedback_id}",
            payload={"status": status.value},
        )
        return _parse_feedback(data)

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


def _parse_feedback(data: object) -> FeedbackRecord:
    try:
        return FeedbackOut.model_validate(data).to_record()
    except ValidationError as exc:
        raise SubmissionError(f"Malformed feedback record: {exc}") from exc
