"""Shared request handling for the persistence API clients."""

import httpx

from snap_photo.errors import SubmissionError


async def send_json(
    http_client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    payload: dict[str, object] | None = None,
    timeout: float = 15,
) -> object:
    """Send a request and return the decoded JSON body.

    Transport failures and non-2xx responses become ``SubmissionError``; the
    server's ``{"error": ...}`` text is used as the message when present.
    """
    try:
        response = await http_client.request(method, url, json=payload, timeout=timeout)
    except httpx.HTTPError as exc:
        raise SubmissionError(f"{method} {url} failed: {exc}") from exc
    if response.is_error:
        raise SubmissionError(_error_message(response), response.status_code)
    try:
        return response.json()
    except ValueError as exc:
        raise SubmissionError(f"{method} {url} returned invalid JSON") from exc


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"Request failed with status {response.status_code}"
