"""Still-frame capture and data URI encoding."""

import base64
import logging
from dataclasses import dataclass

import cv2
import numpy as np

from snap_photo.domain.capture import CameraSession, CapturedImage

logger = logging.getLogger(__name__)

_DATA_URI_PREFIX = "data:image/jpeg;base64,"


@dataclass
class FrameCapturer:
    """Copies the current camera frame into a JPEG data URI."""

    jpeg_quality: int = 92

    def capture(self, session: CameraSession) -> CapturedImage | None:
        """Capture the visible frame at the stream's native resolution.

        Returns None, after logging, when no frame or buffer is available.
        """
        if session.native_size is None:
            logger.warning("Capture requested before camera was ready")
            return None
        frame = session.read_frame()
        if frame is None:
            logger.warning("Camera %s returned no frame", session.device_index)
            return None
        width, height = session.native_size
        try:
            buffer = _to_native_buffer(frame, width, height)
            ok, encoded = cv2.imencode(
                ".jpg", buffer, [cv2.IMWRITE_JPEG_QUALITY, self.jpeg_quality]
            )
        except (cv2.error, ValueError) as exc:
            logger.warning("Frame encoding failed: %s", exc)
            return None
        if not ok:
            logger.warning("Frame encoding returned no data")
            return None
        return CapturedImage(
            data_uri=to_data_uri(encoded.tobytes()), width=width, height=height
        )


def _to_native_buffer(frame: np.ndarray, width: int, height: int) -> np.ndarray:
    """Copy a frame into an off-screen BGR buffer of exactly width x height."""
    if frame.ndim == 2:
        frame = cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
    elif frame.shape[2] == 4:
        frame = cv2.cvtColor(frame, cv2.COLOR_BGRA2BGR)
    if frame.shape[1] != width or frame.shape[0] != height:
        frame = cv2.resize(frame, (width, height), interpolation=cv2.INTER_LINEAR)
    buffer = np.empty((height, width, 3), dtype=np.uint8)
    buffer[...] = frame
    return buffer


def to_data_uri(jpeg_bytes: bytes) -> str:
    """Convert JPEG bytes to a base64 data URI."""
    encoded = base64.b64encode(jpeg_bytes).decode("utf-8")
    return f"{_DATA_URI_PREFIX}{encoded}"


def decode_data_uri(data_uri: str) -> bytes:
    """Return the binary payload of a base64 data URI."""
    header, sep, payload = data_uri.partition(",")
    if not sep or not header.startswith("data:") or ";base64" not in header:
        raise ValueError("Not a base64 data URI")
    return base64.b64decode(payload, validate=True)
