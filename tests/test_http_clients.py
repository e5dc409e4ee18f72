"""Tests for HTTP-based adapters."""

import asyncio
import json
from uuid import UUID, uuid4

import httpx
import pytest

from snap_photo.adapters.feedback_api_client import HttpxFeedbackApiClient
from snap_photo.adapters.photo_api_client import HttpxPhotoApiClient
from snap_photo.domain.feedback import FeedbackStatus
from snap_photo.errors import SubmissionError


def _photo_json(photo_id: str) -> dict[str, object]:
    return {
        "id": photo_id,
        "imageUrl": "data:image/jpeg;base64,AAAA",
        "createdAt": "2025-01-01T10:00:00+00:00",
    }


def _feedback_json(feedback_id: str, status: str = "pending") -> dict[str, object]:
    return {
        "id": feedback_id,
        "name": "Bat",
        "content": "hi",
        "status": status,
        "createdAt": "2025-01-01T10:00:00+00:00",
    }


def test_photo_client_create_and_list() -> None:
    photo_id = str(uuid4())
    seen: list[tuple[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.method == "POST":
            payload = json.loads(request.content.decode())
            assert payload == {"imageUrl": "data:image/jpeg;base64,AAAA"}
            return httpx.Response(200, json=_photo_json(photo_id))
        return httpx.Response(200, json=[_photo_json(photo_id)])

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxPhotoApiClient(base_url="http://api.test", http_client=async_client)

    created = asyncio.run(client.create_photo("data:image/jpeg;base64,AAAA"))
    listed = asyncio.run(client.list_photos())

    assert str(created.id) == photo_id
    assert listed == [created]
    assert seen == [("POST", "/api/photos"), ("GET", "/api/photos")]


def test_photo_client_delete() -> None:
    photo_id = str(uuid4())

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        assert request.url.path == f"/api/photos/{photo_id}"
        return httpx.Response(200, json=_photo_json(photo_id))

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxPhotoApiClient(base_url="http://api.test", http_client=async_client)

    deleted = asyncio.run(client.delete_photo(UUID(photo_id)))

    assert str(deleted.id) == photo_id


def test_photo_client_surfaces_server_error_text() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "Failed to create photo"})

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxPhotoApiClient(base_url="http://api.test", http_client=async_client)

    with pytest.raises(SubmissionError) as excinfo:
        asyncio.run(client.create_photo("data:image/jpeg;base64,AAAA"))

    assert str(excinfo.value) == "Failed to create photo"
    assert excinfo.value.status_code == 500


def test_photo_client_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxPhotoApiClient(base_url="http://api.test", http_client=async_client)

    with pytest.raises(SubmissionError):
        asyncio.run(client.list_photos())


def test_photo_client_rejects_malformed_record() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": "not-a-uuid"})

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxPhotoApiClient(base_url="http://api.test", http_client=async_client)

    with pytest.raises(SubmissionError):
        asyncio.run(client.create_photo("data:image/jpeg;base64,AAAA"))


def test_feedback_client_submit_list_and_update() -> None:
    feedback_id = str(uuid4())
    payloads: list[object] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=[_feedback_json(feedback_id)])
        payloads.append(json.loads(request.content.decode()))
        if request.method == "PATCH":
            assert request.url.path == f"/api/feedbacks/{feedback_id}"
            return httpx.Response(200, json=_feedback_json(feedback_id, "reviewed"))
        return httpx.Response(200, json=_feedback_json(feedback_id))

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxFeedbackApiClient(
        base_url="http://api.test", http_client=async_client
    )

    created = asyncio.run(client.create_feedback("Bat", "hi"))
    listed = asyncio.run(client.list_feedback())
    updated = asyncio.run(client.update_status(created.id, FeedbackStatus.REVIEWED))

    assert created.status is FeedbackStatus.PENDING
    assert listed == [created]
    assert updated.status is FeedbackStatus.REVIEWED
    assert payloads == [{"name": "Bat", "message": "hi"}, {"status": "reviewed"}]


def test_feedback_client_error_without_body() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxFeedbackApiClient(
        base_url="http://api.test", http_client=async_client
    )

    with pytest.raises(SubmissionError) as excinfo:
        asyncio.run(client.list_feedback())

    assert excinfo.value.status_code == 502
    assert "502" in str(excinfo.value)
