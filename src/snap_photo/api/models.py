"""Pydantic models for the photo and feedback JSON payloads."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from snap_photo.domain.feedback import FeedbackRecord, FeedbackStatus
from snap_photo.domain.photos import PhotoRecord


class PhotoCreate(BaseModel):
    """Create photo request."""

    image_url: str = Field(alias="imageUrl", min_length=1)


class PhotoOut(BaseModel):
    """Photo record as exposed over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    image_url: str = Field(alias="imageUrl")
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_record(cls, record: PhotoRecord) -> "PhotoOut":
        return cls(id=record.id, image_url=record.image_url, created_at=record.created_at)

    def to_record(self) -> PhotoRecord:
        return PhotoRecord(
            id=self.id, image_url=self.image_url, created_at=self.created_at
        )


class FeedbackCreate(BaseModel):
    """Create feedback request."""

    name: str
    message: str


class FeedbackStatusUpdate(BaseModel):
    """Update feedback status request."""

    status: str


class FeedbackOut(BaseModel):
    """Feedback record as exposed over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    content: str
    status: FeedbackStatus
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_record(cls, record: FeedbackRecord) -> "FeedbackOut":
        return cls(
            id=record.id,
            name=record.name,
            content=record.content,
            status=record.status,
            created_at=record.created_at,
        )

    def to_record(self) -> FeedbackRecord:
        return FeedbackRecord(
            id=self.id,
            name=self.name,
            content=self.content,
            status=self.status,
            created_at=self.created_at,
        )


class ErrorOut(BaseModel):
    """Generic failure body."""

    error: str
