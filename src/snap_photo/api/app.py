"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from snap_photo.api.admin import router as admin_router
from snap_photo.api.models import (
    ErrorOut,
    FeedbackCreate,
    FeedbackOut,
    FeedbackStatusUpdate,
    PhotoCreate,
    PhotoOut,
)
from snap_photo.app_logging import configure_logging
from snap_photo.config import Settings
from snap_photo.containers import AppContainer

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {500: {"model": ErrorOut}}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Collapse validation failures into the generic error response."""
        logger.warning("Rejected request to %s: %s", request.url.path, exc)
        state_container: AppContainer = request.app.state.container
        return _error_response(state_container.settings, exc, "Invalid request")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/photos", response_model=list[PhotoOut], responses=_ERROR_RESPONSES)
    async def list_photos(request: Request) -> list[PhotoOut] | JSONResponse:
        """Return all photos, newest first."""
        state_container: AppContainer = request.app.state.container
        try:
            photos = state_container.photo_service.list_photos()
        except Exception as exc:
            logger.exception("Error fetching photos")
            return _error_response(
                state_container.settings, exc, "Failed to fetch photos"
            )
        return [PhotoOut.from_record(photo) for photo in photos]

    @app.post("/api/photos", response_model=PhotoOut, responses=_ERROR_RESPONSES)
    async def create_photo(request: Request) -> PhotoOut | JSONResponse:
        """Store a captured image."""
        state_container: AppContainer = request.app.state.container
        try:
            payload = PhotoCreate.model_validate(await request.json())
            photo = state_container.photo_service.create_photo(payload.image_url)
        except Exception as exc:
            logger.exception("Error creating photo")
            return _error_response(
                state_container.settings, exc, "Failed to create photo"
            )
        return PhotoOut.from_record(photo)

    @app.delete(
        "/api/photos/{photo_id}", response_model=PhotoOut, responses=_ERROR_RESPONSES
    )
    async def delete_photo(photo_id: str, request: Request) -> PhotoOut | JSONResponse:
        """Delete one photo and echo it back."""
        state_container: AppContainer = request.app.state.container
        try:
            photo = state_container.photo_service.delete_photo(UUID(photo_id))
        except Exception as exc:
            logger.exception("Error deleting photo", extra={"photo_id": photo_id})
            return _error_response(
                state_container.settings, exc, "Failed to delete photo"
            )
        return PhotoOut.from_record(photo)

    @app.get(
        "/api/feedbacks", response_model=list[FeedbackOut], responses=_ERROR_RESPONSES
    )
    async def list_feedbacks(request: Request) -> list[FeedbackOut] | JSONResponse:
        """Return all feedback, newest first."""
        state_container: AppContainer = request.app.state.container
        try:
            entries = state_container.feedback_service.list_feedback()
        except Exception as exc:
            logger.exception("Error fetching feedbacks")
            return _error_response(
                state_container.settings, exc, "Failed to fetch feedbacks"
            )
        return [FeedbackOut.from_record(entry) for entry in entries]

    @app.post("/api/feedbacks", response_model=FeedbackOut, responses=_ERROR_RESPONSES)
    async def create_feedback(request: Request) -> FeedbackOut | JSONResponse:
        """Store a pending feedback entry."""
        state_container: AppContainer = request.app.state.container
        try:
            payload = FeedbackCreate.model_validate(await request.json())
            entry = state_container.feedback_service.submit(
                payload.name, payload.message
            )
        except Exception as exc:
            logger.exception("Error submitting feedback")
            return _error_response(
                state_container.settings, exc, "Failed to submit feedback"
            )
        return FeedbackOut.from_record(entry)

    @app.patch(
        "/api/feedbacks/{feedback_id}",
        response_model=FeedbackOut,
        responses=_ERROR_RESPONSES,
    )
    async def update_feedback_status(
        feedback_id: str, request: Request
    ) -> FeedbackOut | JSONResponse:
        """Move a feedback entry to a new status."""
        state_container: AppContainer = request.app.state.container
        try:
            payload = FeedbackStatusUpdate.model_validate(await request.json())
            entry = state_container.feedback_service.update_status(
                UUID(feedback_id), payload.status
            )
        except Exception as exc:
            logger.exception(
                "Error updating feedback status", extra={"feedback_id": feedback_id}
            )
            return _error_response(
                state_container.settings, exc, "Failed to update feedback status"
            )
        return FeedbackOut.from_record(entry)

    return app


def _error_response(settings: Settings, exc: Exception, fallback: str) -> JSONResponse:
    """Return the generic 500 body, with the cause only in verbose mode."""
    message = fallback
    if settings.show_error_details():
        detail = str(exc).strip() or type(exc).__name__
        message = f"{fallback}: {detail}"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorOut(error=message).model_dump(),
    )
