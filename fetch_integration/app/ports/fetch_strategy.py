"""Fetch strategy port: contract for performing one HTTP request per call.

Callers depend on this port; infrastructure (e.g. httpx) implements it. Keeps
callers free of transport imports and transport exception types.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from fetch_integration.app.constants import DEFAULT_TRANSPORT_ERROR_STATUS
from fetch_integration.app.domain.models import FetchPayload, Response


class RestException(Exception):
    """Raised when the transport fails to complete a request.

    handler_context is the transport's diagnostic payload, forwarded as-is.
    """

    def __init__(
        self,
        message: str,
        handler_context: Any = None,
        status_code: int = DEFAULT_TRANSPORT_ERROR_STATUS,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.handler_context = handler_context
        self.status_code = status_code

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"


@runtime_checkable
class FetchStrategy(Protocol):
    """Port: perform HTTP requests. Implementations live in infrastructure."""

    def fetch(self, payload: FetchPayload) -> Response:
        """Perform the request; raise RestException on transport failure."""
        ...

    def close(self) -> None:
        """Release the underlying client. No-op allowed if nothing to close."""
        ...
