"""Concrete FetchStrategy implementation using httpx (injected where FetchStrategy is needed)."""
from __future__ import annotations

from typing import Any

import httpx

from fetch_integration.app.constants import (
    DEFAULT_TRANSPORT_ERROR_STATUS,
    HEADER_VALUE_SEPARATOR,
)
from fetch_integration.app.domain.models import FetchPayload, Response
from fetch_integration.app.ports.fetch_strategy import FetchStrategy, RestException


def _group_headers(headers: httpx.Headers) -> dict[str, list[str]]:
    """Group raw header values by name, keeping the first-seen casing and wire order."""
    grouped: dict[str, list[str]] = {}
    names: dict[str, str] = {}
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        key = names.setdefault(name.lower(), name)
        grouped.setdefault(key, []).append(raw_value.decode(headers.encoding))
    return grouped


def _handler_context(exc: Exception) -> dict[str, Any]:
    """Diagnostic payload describing the failed call, forwarded on RestException."""
    context: dict[str, Any] = {"error_type": type(exc).__name__}
    try:
        request = exc.request  # type: ignore[attr-defined]
    except (AttributeError, RuntimeError):
        # httpx raises RuntimeError when no request is attached.
        request = None
    if request is not None:
        context["method"] = request.method
        context["url"] = str(request.url)
    return context


def _status_code(exc: Exception) -> int:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return DEFAULT_TRANSPORT_ERROR_STATUS


class HttpxFetchStrategy(FetchStrategy):
    """FetchStrategy implementation using httpx.Client.

    With raise_for_status enabled, 4xx/5xx responses are treated as transport
    failures and surface as RestException carrying the response status.
    """

    def __init__(self, client: httpx.Client, *, raise_for_status: bool = True) -> None:
        self._client = client
        self._raise_for_status = raise_for_status

    def fetch(self, payload: FetchPayload) -> Response:
        transport_response = self._perform_request(
            payload.method.upper(),
            payload.url,
            headers=dict(payload.headers),
            body=payload.body,
            params=dict(payload.params),
        )

        response = Response()
        response.set_status(transport_response.status_code).set_body(transport_response.text)

        for name, values in _group_headers(transport_response.headers).items():
            response.set_header(name, HEADER_VALUE_SEPARATOR.join(values))

        return response

    def _perform_request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: str | None,
        params: dict[str, str],
    ) -> httpx.Response:
        try:
            response = self._client.request(
                method,
                url,
                headers=headers,
                content=body,
                params=params,
            )
            if self._raise_for_status and response.is_error:
                response.raise_for_status()
            return response
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RestException(str(exc), _handler_context(exc), _status_code(exc)) from exc

    def close(self) -> None:
        self._client.close()
