"""Domain models for stored photos."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PhotoRecord:
    """Represents a photo stored in the database."""

    id: UUID
    image_url: str
    created_at: datetime
