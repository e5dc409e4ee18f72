"""Domain models for the capture pipeline."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Protocol

import numpy as np

logger = logging.getLogger(__name__)


class VideoStream(Protocol):
    """Minimal interface of an opened video device."""

    def isOpened(self) -> bool:  # noqa: N802
        """Return true while the device is held."""

    def read(self) -> tuple[bool, Any]:
        """Grab and decode the next frame."""

    def release(self) -> None:
        """Stop the device and free it for other consumers."""


class ViewMode(Enum):
    """What the capture screen is currently showing."""

    CAPTURING = "capturing"
    BROWSING = "browsing"


@dataclass
class CameraSession:
    """One active acquisition of a camera device.

    The session is the only owner of ``stream``; ``release`` must run on every
    exit path so the device is not left locked.
    """

    stream: VideoStream
    device_index: int
    facing: str | None
    native_size: tuple[int, int] | None = None
    released: bool = False

    @property
    def ready(self) -> bool:
        return self.native_size is not None

    def read_frame(self) -> np.ndarray | None:
        """Return the current decoded frame, or None when nothing is available."""
        if self.released:
            return None
        ok, frame = self.stream.read()
        if not ok or frame is None or getattr(frame, "size", 0) == 0:
            return None
        return frame

    async def wait_ready(self, poll_seconds: float = 0.05) -> None:
        """Suspend until a frame with non-zero dimensions has been decoded.

        Returns early, still not ready, if the session is released meanwhile.
        """
        while not self.ready and not self.released:
            frame = await asyncio.to_thread(self.read_frame)
            if self.released:
                return
            if frame is not None:
                height, width = frame.shape[:2]
                if width > 0 and height > 0:
                    self.native_size = (width, height)
                    logger.info(
                        "Camera %s ready at %sx%s", self.device_index, width, height
                    )
                    return
            await asyncio.sleep(poll_seconds)

    def release(self) -> None:
        """Stop the underlying device. Safe to call more than once."""
        if self.released:
            return
        try:
            self.stream.release()
        finally:
            self.released = True
            logger.info("Camera %s released", self.device_index)

    def __enter__(self) -> "CameraSession":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.release()


@dataclass(frozen=True)
class CapturedImage:
    """An encoded still frame ready for submission."""

    data_uri: str
    width: int
    height: int
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
