"""In-memory photo list backing the capture and browse screens."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from snap_photo.adapters.photo_api_client import PhotoApiClient
from snap_photo.domain.capture import CapturedImage, ViewMode
from snap_photo.domain.photos import PhotoRecord
from snap_photo.errors import SubmissionError
from snap_photo.services.frames import decode_data_uri

logger = logging.getLogger(__name__)

SNAPPED_MESSAGE = "U're a snapped dude but don't worry it's just for fun SMILE😁"
SAVE_FAILED_MESSAGE = "Failed to save photo"
LOAD_FAILED_MESSAGE = "Failed to load photos"
DOWNLOAD_FAILED_MESSAGE = "Failed to download photo"


@dataclass
class PhotoGallery:
    """Photos known to the client, newest first, plus screen state."""

    client: PhotoApiClient
    photos: list[PhotoRecord] = field(default_factory=list)
    mode: ViewMode = ViewMode.CAPTURING
    banner: str | None = None
    message: str | None = None

    async def submit(self, image: CapturedImage) -> PhotoRecord | None:
        """Persist a captured image and show it once the server acknowledges.

        Nothing is added to ``photos`` before the record comes back.
        """
        try:
            photo = await self.client.create_photo(image.data_uri)
        except SubmissionError:
            logger.exception("Error saving photo")
            self.banner = SAVE_FAILED_MESSAGE
            return None
        self.photos.insert(0, photo)
        self.mode = ViewMode.BROWSING
        self.message = SNAPPED_MESSAGE
        return photo

    async def load(self) -> None:
        """Replace the local list with the server's photos."""
        try:
            self.photos = await self.client.list_photos()
        except SubmissionError:
            logger.exception("Error loading photos")
            self.banner = LOAD_FAILED_MESSAGE

    def download(self, photo: PhotoRecord, directory: Path) -> Path | None:
        """Write a photo to ``directory`` as ``snap-<epoch ms>.jpg``."""
        try:
            payload = decode_data_uri(photo.image_url)
            path = directory / f"snap-{int(time.time() * 1000)}.jpg"
            path.write_bytes(payload)
        except (ValueError, OSError):
            logger.exception("Error downloading photo %s", photo.id)
            self.banner = DOWNLOAD_FAILED_MESSAGE
            return None
        logger.info("Saved photo %s to %s", photo.id, path)
        return path

    def retake(self) -> None:
        """Return to the capture screen for a new cycle."""
        self.mode = ViewMode.CAPTURING
        self.message = None

    def dismiss_banner(self) -> None:
        self.banner = None

    def dismiss_message(self) -> None:
        self.message = None
