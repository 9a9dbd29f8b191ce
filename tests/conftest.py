from __future__ import annotations

from typing import Callable

import httpx
import pytest

from fetch_integration.app.infrastructure.http.httpx_fetch_strategy import HttpxFetchStrategy

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled for assertions."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture()
def make_strategy():
    """Build an HttpxFetchStrategy over a RecordingTransport; clients are closed after the test."""
    clients: list[httpx.Client] = []

    def _make(handler: Handler, *, raise_for_status: bool = True) -> tuple[HttpxFetchStrategy, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return HttpxFetchStrategy(client, raise_for_status=raise_for_status), transport

    yield _make

    for client in clients:
        client.close()
