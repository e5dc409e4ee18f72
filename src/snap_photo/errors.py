"""Exceptions raised across the capture pipeline and the persistence API."""


class SnapPhotoError(Exception):
    """Base class for application errors."""


class CameraAcquisitionError(SnapPhotoError):
    """Raised when no camera could be opened."""


class SubmissionError(SnapPhotoError):
    """Raised when the persistence endpoint rejects or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecordNotFoundError(SnapPhotoError, LookupError):
    """Raised when a record id does not exist."""


class FeedbackValidationError(SnapPhotoError, ValueError):
    """Raised when feedback input is incomplete."""


class FeedbackTransitionError(SnapPhotoError, ValueError):
    """Raised when a feedback status change is not allowed."""
