"""Domain models: request payload, normalized response, response snapshot."""
from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fetch_integration.app.constants import (
    CONTENT_TYPE_HEADER,
    DEFAULT_LOGICAL_ERROR_STATUS,
    HTTP_METHODS,
    JSON_CONTENT_TYPE,
)


@dataclass(frozen=True)
class FetchPayload:
    """Request descriptor handed to a FetchStrategy (value object)."""

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.url, str):
            raise TypeError("payload.url must be a str")
        if not self.url.strip():
            raise ValueError("payload.url must be a non-empty str")
        if not isinstance(self.method, str):
            raise TypeError("payload.method must be a str")
        if self.method.upper() not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")
        if not isinstance(self.headers, Mapping):
            raise TypeError("payload.headers must be a mapping")
        for name, value in self.headers.items():
            if not isinstance(name, str) or not isinstance(value, str):
                raise TypeError("payload.headers names and values must be str")
            if not name.isascii() or not value.isascii():
                raise ValueError(f"payload.headers must be ASCII: {name!r}")
        if not isinstance(self.params, Mapping):
            raise TypeError("payload.params must be a mapping")
        for key, value in self.params.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError("payload.params keys and values must be str")
        if self.body is not None and not isinstance(self.body, str):
            raise TypeError("payload.body must be a str or None")


@dataclass(frozen=True)
class ResponseSnapshot:
    """Read-only aggregate view of a Response."""

    status: int
    headers: dict[str, str]
    body: str | None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialisable dict for logging or transport by the caller."""
        return {
            "status": int(self.status),
            "headers": dict(self.headers),
            "body": self.body,
            "error": self.error,
        }


class Response:
    """Normalized outcome of one HTTP call.

    Built through chained setters, each returning the same instance. A logical
    (application-level) failure is represented in-band via set_error(); it is
    never raised.
    """

    def __init__(self) -> None:
        self._status: int | None = None
        self._headers: dict[str, str] = {}
        self._body: str | None = None
        self._error_message: str | None = None

    def set_status(self, code: int) -> Response:
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError("response.status must be an int")
        self._status = code
        return self

    @property
    def status(self) -> int:
        if self._status is None:
            raise RuntimeError("response status is not set")
        return self._status

    def set_header(self, name: str, value: str) -> Response:
        self._headers[name] = value
        return self

    def get_header(self, name: str) -> str | None:
        """Case-sensitive header lookup."""
        return self._headers.get(name)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def set_body(self, body: str) -> Response:
        self._body = body
        return self

    @property
    def body(self) -> str:
        return self._body if self._body is not None else ""

    def set_json(self, data: Any) -> Response:
        """Replace the body with the JSON encoding of data and force the JSON content type."""
        self._body = json.dumps(data, separators=(",", ":"), allow_nan=False)
        self.set_header(CONTENT_TYPE_HEADER, JSON_CONTENT_TYPE)
        return self

    def json(self) -> dict[str, Any]:
        """Decode the body as a JSON object.

        Best-effort: a missing, malformed, or non-object body yields an empty
        dict instead of an error.
        """
        if not self._body:
            return {}
        try:
            data = json.loads(self._body)
        except (ValueError, RecursionError):
            return {}
        return data if isinstance(data, dict) else {}

    def set_error(self, message: str, code: int = DEFAULT_LOGICAL_ERROR_STATUS) -> Response:
        self._error_message = message
        self.set_status(code)
        self.set_json({"error": message})
        return self

    @property
    def error_message(self) -> str | None:
        return self._error_message

    def snapshot(self) -> ResponseSnapshot:
        return ResponseSnapshot(
            status=self.status,
            headers=dict(self._headers),
            body=self._body,
            error=self._error_message,
        )

    def __repr__(self) -> str:
        return (
            f"Response(status={self._status!r}, headers={self._headers!r}, "
            f"error_message={self._error_message!r})"
        )
