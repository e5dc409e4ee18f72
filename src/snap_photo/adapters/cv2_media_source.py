"""OpenCV webcam acquisition with facing-mode fallback."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

import cv2

from snap_photo.config import Settings
from snap_photo.domain.capture import CameraSession, VideoStream
from snap_photo.errors import CameraAcquisitionError

logger = logging.getLogger(__name__)

CAMERA_ERROR_MESSAGE = (
    "Could not access camera. Please make sure you've granted permission."
)


class MediaSource(Protocol):
    """Interface for acquiring a live camera stream."""

    async def acquire(self, preferred_facing: str | None) -> CameraSession:
        """Open a camera, preferring the given facing mode."""


@dataclass
class Cv2MediaSource(MediaSource):
    """Media source backed by ``cv2.VideoCapture``.

    Facing modes are mapped to device indices; the fallback attempt opens the
    default device with no facing constraint.
    """

    camera_indices: dict[str, int] = field(default_factory=dict)
    fallback_index: int = 0
    opener: Callable[[int], VideoStream] = cv2.VideoCapture

    @classmethod
    def create(cls, settings: Settings) -> "Cv2MediaSource":
        """Create a media source from application settings."""
        return cls(
            camera_indices=settings.camera_indices(),
            fallback_index=settings.fallback_camera_index,
        )

    async def acquire(self, preferred_facing: str | None) -> CameraSession:
        """Open the preferred camera, retrying once with any camera."""
        if preferred_facing is not None:
            try:
                return await asyncio.to_thread(self._open_facing, preferred_facing)
            except CameraAcquisitionError as exc:
                logger.warning(
                    "Camera with facing %s unavailable, falling back: %s",
                    preferred_facing,
                    exc,
                )
        try:
            return await asyncio.to_thread(self._open, self.fallback_index, None)
        except CameraAcquisitionError as exc:
            logger.error("Camera acquisition failed: %s", exc)
            raise CameraAcquisitionError(CAMERA_ERROR_MESSAGE) from exc

    def _open_facing(self, facing: str) -> CameraSession:
        index = self.camera_indices.get(facing)
        if index is None:
            raise CameraAcquisitionError(f"No camera configured for facing {facing}")
        return self._open(index, facing=facing)

    def _open(self, index: int, facing: str | None) -> CameraSession:
        try:
            stream = self.opener(index)
        except Exception as exc:
            raise CameraAcquisitionError(f"Failed to open device {index}") from exc
        if not stream.isOpened():
            stream.release()
            raise CameraAcquisitionError(f"Device {index} is not available")
        logger.info("Opened camera device %s (facing=%s)", index, facing)
        return CameraSession(stream=stream, device_index=index, facing=facing)
