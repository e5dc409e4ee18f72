"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from snap_photo.domain.photos import PhotoRecord
from snap_photo.services.photos import PhotoRepository


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo persistence."""

    client: Client

    def create_photo(self, image_url: str) -> PhotoRecord:
        """Insert a photo row and return it."""
        response = (
            self.client.table("photos").insert({"image_url": image_url}).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create photo")
        return _row_to_photo(response.data[0])

    def list_photos(self) -> list[PhotoRecord]:
        """Return all photos ordered by creation time, newest first."""
        response = (
            self.client.table("photos")
            .select("id, image_url, created_at")
            .order("created_at", desc=True)
            .execute()
        )
        return [_row_to_photo(row) for row in response.data or []]

    def delete_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Delete a photo row and return it, if it existed."""
        response = (
            self.client.table("photos").delete().eq("id", str(photo_id)).execute()
        )
        if not response.data:
            return None
        return _row_to_photo(response.data[0])


def _row_to_photo(row: dict[str, object]) -> PhotoRecord:
    return PhotoRecord(
        id=UUID(str(row["id"])),
        image_url=str(row["image_url"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
