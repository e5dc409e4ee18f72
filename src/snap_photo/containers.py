"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from snap_photo.adapters.cv2_media_source import Cv2MediaSource, MediaSource
from snap_photo.adapters.feedback_api_client import (
    FeedbackApiClient,
    HttpxFeedbackApiClient,
)
from snap_photo.adapters.photo_api_client import HttpxPhotoApiClient, PhotoApiClient
from snap_photo.adapters.supabase_feedback_repository import (
    SupabaseFeedbackRepository,
)
from snap_photo.adapters.supabase_photo_repository import SupabasePhotoRepository
from snap_photo.config import Settings
from snap_photo.services.feedback import FeedbackService
from snap_photo.services.frames import FrameCapturer
from snap_photo.services.photos import PhotoService


@dataclass
class AppContainer:
    """Holds dependencies of the persistence API."""

    settings: Settings
    photo_service: PhotoService
    feedback_service: FeedbackService
    close_resources: Callable[[], Awaitable[None]]


@dataclass
class ClientContainer:
    """Holds dependencies of the capture client."""

    settings: Settings
    photo_client: PhotoApiClient
    feedback_client: FeedbackApiClient
    media_source: MediaSource
    frame_capturer: FrameCapturer
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default API dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    photo_service = PhotoService(SupabasePhotoRepository(supabase_client))
    feedback_service = FeedbackService(SupabaseFeedbackRepository(supabase_client))

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        photo_service=photo_service,
        feedback_service=feedback_service,
        close_resources=close_resources,
    )


def build_client_container(settings: Settings | None = None) -> ClientContainer:
    """Create the capture client container."""
    resolved_settings = settings or Settings()
    photo_client = HttpxPhotoApiClient.create(resolved_settings.api_base_url)
    feedback_client = HttpxFeedbackApiClient.create(resolved_settings.api_base_url)

    async def close_resources() -> None:
        await photo_client.close()
        await feedback_client.close()

    return ClientContainer(
        settings=resolved_settings,
        photo_client=photo_client,
        feedback_client=feedback_client,
        media_source=Cv2MediaSource.create(resolved_settings),
        frame_capturer=FrameCapturer(jpeg_quality=resolved_settings.jpeg_quality),
        close_resources=close_resources,
    )
