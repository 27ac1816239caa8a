from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from igdb_client.core.errors import DecodeError, NoResultsError, RemoteAPIError

T = TypeVar("T")


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _as_status(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


_MESSAGE_KEYS = ("message", "title", "cause")


def _remote_error(data: Any, status_code: int) -> RemoteAPIError | None:
    """
    Pick out a service-reported error from a decoded body.

    Two envelopes are recognised:
      - {"status": 403, "message": "invalid key"}
      - [{"title": "Syntax Error", "status": 400, "cause": "..."}]
    On a 2xx the body must carry a `status` to count as an error. On any other
    HTTP status a `message`, `title` or `cause` is enough and the HTTP status is used.
    """
    success = _is_success(status_code)

    if isinstance(data, list) and data:
        first = data[0]
        if not isinstance(first, dict) or "id" in first:
            return None
        if success and not ("status" in first and "title" in first):
            return None
        data = first

    if not isinstance(data, dict):
        return None
    if "status" not in data and (success or not any(data.get(k) for k in _MESSAGE_KEYS)):
        return None

    message = data.get("message")
    if not message:
        title = data.get("title") or ""
        cause = data.get("cause") or ""
        message = f"{title}: {cause}" if title and cause else title or cause or "unknown error"

    return RemoteAPIError(_as_status(data.get("status"), status_code), str(message))


def classify(status_code: int, body: bytes, *, reason: str = "") -> None:
    """
    Decide whether a response is usable before any decoding happens.

    Returns None for a usable body, otherwise raises NoResultsError, RemoteAPIError
    or DecodeError. The body is inspected even on 2xx since the service reports
    some logical errors inside a 200.
    """
    text = body.strip()

    if not text:
        if _is_success(status_code):
            raise NoResultsError()
        raise RemoteAPIError(status_code, reason or "empty response body")

    try:
        data = json.loads(text)
    except ValueError as e:
        if _is_success(status_code):
            raise DecodeError("response body is not valid JSON") from e
        raise RemoteAPIError(status_code, text.decode("utf-8", "replace")[:200]) from e

    error = _remote_error(data, status_code)
    if error is not None:
        raise error

    if not _is_success(status_code):
        raise RemoteAPIError(status_code, reason or "unexpected HTTP status")

    if data == []:
        raise NoResultsError()


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def decode(body: bytes, result_type: type[T]) -> T:
    try:
        return _adapter(result_type).validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"cannot decode response into {result_type!r}") from e
