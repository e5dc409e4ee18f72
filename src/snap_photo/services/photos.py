"""Photo persistence logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from snap_photo.domain.photos import PhotoRecord
from snap_photo.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photos."""

    def create_photo(self, image_url: str) -> PhotoRecord:
        """Store a photo and return the created record."""

    def list_photos(self) -> list[PhotoRecord]:
        """Return all photos, newest first."""

    def delete_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Delete a photo and return the removed record, if it existed."""


@dataclass
class PhotoService:
    """Application service for the photo endpoints."""

    repository: PhotoRepository

    def create_photo(self, image_url: str) -> PhotoRecord:
        """Persist a captured image."""
        if not image_url:
            raise ValueError("imageUrl is required")
        photo = self.repository.create_photo(image_url)
        logger.info("Stored photo %s", photo.id)
        return photo

    def list_photos(self) -> list[PhotoRecord]:
        """Return photos ordered newest first."""
        photos = self.repository.list_photos()
        return sorted(photos, key=lambda photo: photo.created_at, reverse=True)

    def delete_photo(self, photo_id: UUID) -> PhotoRecord:
        """Delete a single photo by id."""
        deleted = self.repository.delete_photo(photo_id)
        if deleted is None:
            raise RecordNotFoundError(f"Photo {photo_id} not found")
        logger.info("Deleted photo %s", photo_id)
        return deleted
