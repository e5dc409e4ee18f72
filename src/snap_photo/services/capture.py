"""Capture screen: camera, countdown, flash, capture and submit."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from snap_photo.adapters.cv2_media_source import MediaSource
from snap_photo.domain.capture import CameraSession, CapturedImage
from snap_photo.domain.photos import PhotoRecord
from snap_photo.errors import CameraAcquisitionError
from snap_photo.services.countdown import CountdownTimer
from snap_photo.services.frames import FrameCapturer
from snap_photo.services.gallery import PhotoGallery

logger = logging.getLogger(__name__)

CAPTURE_FAILED_MESSAGE = "Could not capture photo"


@dataclass
class CaptureView:
    """Owns one camera session and one countdown for a capture cycle.

    Use as an async context manager; leaving the block cancels the countdown
    and releases the camera, whichever state either is in.
    """

    media_source: MediaSource
    capturer: FrameCapturer
    gallery: PhotoGallery
    delay_ms: int = 1000
    preferred_facing: str | None = "environment"
    flash_seconds: float = 0.2
    tick_seconds: float = 1.0
    ready_poll_seconds: float = 0.05
    on_tick: Callable[[int], None] | None = None
    on_flash: Callable[[bool], None] | None = None
    session: CameraSession | None = field(default=None, init=False)
    timer: CountdownTimer | None = field(default=None, init=False)
    camera_error: str | None = field(default=None, init=False)
    countdown: int | None = field(default=None, init=False)
    flash: bool = field(default=False, init=False)
    captures: int = field(default=0, init=False)
    closed: bool = field(default=False, init=False)
    _captured: "asyncio.Future[CapturedImage | None] | None" = field(
        default=None, init=False, repr=False
    )
    _flash_handle: asyncio.TimerHandle | None = field(
        default=None, init=False, repr=False
    )

    async def __aenter__(self) -> "CaptureView":
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        self.close()

    async def run(self) -> PhotoRecord | None:
        """Run one capture cycle and return the stored photo, if any."""
        if self.closed:
            raise RuntimeError("Capture view is closed")
        try:
            self.session = await self.media_source.acquire(self.preferred_facing)
        except CameraAcquisitionError as exc:
            logger.error("Error accessing camera: %s", exc)
            self.camera_error = str(exc)
            return None
        if self.closed:
            self.session.release()
            return None

        await self.session.wait_ready(self.ready_poll_seconds)
        if self.closed:
            return None

        self._captured = asyncio.get_running_loop().create_future()
        self.timer = CountdownTimer(
            self.delay_ms,
            on_fire=self._on_fire,
            on_tick=self._on_tick,
            tick_seconds=self.tick_seconds,
        )
        self.timer.start()
        image = await self._captured
        if self.closed:
            return None
        if image is None:
            self.gallery.banner = CAPTURE_FAILED_MESSAGE
            return None
        return await self.gallery.submit(image)

    def close(self) -> None:
        """Cancel the countdown and release the camera."""
        self.closed = True
        try:
            if self.timer is not None:
                self.timer.cancel()
            if self._flash_handle is not None:
                self._flash_handle.cancel()
                self._flash_handle = None
        finally:
            try:
                if self.session is not None:
                    self.session.release()
            finally:
                if self._captured is not None and not self._captured.done():
                    self._captured.set_result(None)

    def _on_tick(self, remaining: int) -> None:
        self.countdown = remaining
        if self.on_tick is not None:
            self.on_tick(remaining)

    def _on_fire(self) -> None:
        """Flash and capture exactly once, always resolving the pending cycle."""
        self.countdown = None
        image: CapturedImage | None = None
        try:
            self._flash_handle = asyncio.get_running_loop().call_later(
                self.flash_seconds, self._set_flash, False
            )
            self._set_flash(True)
            if self.session is not None:
                self.captures += 1
                image = self.capturer.capture(self.session)
        except Exception:
            logger.exception("Error capturing photo")
            image = None
        finally:
            if self._captured is not None and not self._captured.done():
                self._captured.set_result(image)

    def _set_flash(self, value: bool) -> None:
        self.flash = value
        if not value:
            self._flash_handle = None
        if self.on_flash is None:
            return
        try:
            self.on_flash(value)
        except Exception:
            logger.exception("Flash callback failed")
