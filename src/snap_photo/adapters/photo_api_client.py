"""HTTP client for the photo endpoints."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import httpx
from pydantic import ValidationError

from snap_photo.adapters.http_support import send_json
from snap_photo.api.models import PhotoOut
from snap_photo.domain.photos import PhotoRecord
from snap_photo.errors import SubmissionError


class PhotoApiClient(Protocol):
    """Interface for the photo persistence endpoint."""

    async def create_photo(self, image_url: str) -> PhotoRecord:
        """Store an encoded image and return the created record."""

    async def list_photos(self) -> list[PhotoRecord]:
        """Return stored photos, newest first."""

    async def delete_photo(self, photo_id: UUID) -> PhotoRecord:
        """Delete a photo and return the removed record."""


@dataclass
class HttpxPhotoApiClient(PhotoApiClient):
    """Photo client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxPhotoApiClient":
        """Create a photo client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def create_photo(self, image_url: str) -> PhotoRecord:
        """POST a data URI; a single attempt with no retry."""
        data = await send_json(
            self.http_client,
            "POST",
            f"{self.base_url}/api/photos",
            payload={"imageUrl": image_url},
            timeout=30,
        )
        return _parse_photo(data)

    async def list_photos(self) -> list[PhotoRecord]:
        """Fetch all stored photos."""
        data = await send_json(self.http_client, "GET", f"{self.base_url}/api/photos")
        if not isinstance(data, list):
            raise SubmissionError("Photo list response was not a list")
        return [_parse_photo(item) for item in data]

    async def delete_photo(self, photo_id: UUID) -> PhotoRecord:
        """Delete a photo by id."""
        data = await send_json(
            self.http_client, "DELETE", f"{self.base_url}/api/photos/{photo_id}"
        )
        return _parse_photo(data)

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


def _parse_photo(data: object) -> PhotoRecord:
    try:
        return PhotoOut.model_validate(data).to_record()
    except ValidationError as exc:
        raise SubmissionError(f"Malformed photo record: {exc}") from exc
