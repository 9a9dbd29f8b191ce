"""Fetch strategy factory: selects implementation from config. Only place that imports concrete strategies."""
from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from fetch_integration.app.config.settings import Settings
from fetch_integration.app.constants import FETCH_BACKEND
from fetch_integration.app.core import SERVICE_NAME
from fetch_integration.app.infrastructure.http.httpx_fetch_strategy import HttpxFetchStrategy
from fetch_integration.app.ports.fetch_strategy import FetchStrategy


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def create_httpx_client(settings: Settings) -> httpx.Client:
    """Build the long-lived httpx client. Timeouts and redirects are transport configuration."""
    headers: dict[str, str] = {}
    if settings.fetch_user_agent:
        headers["User-Agent"] = settings.fetch_user_agent

    timeout = httpx.Timeout(
        connect=settings.fetch_connect_timeout_seconds,
        read=settings.fetch_read_timeout_seconds,
        write=settings.fetch_read_timeout_seconds,
        pool=settings.fetch_connect_timeout_seconds,
    )
    return httpx.Client(
        timeout=timeout,
        follow_redirects=settings.fetch_follow_redirects,
        verify=settings.fetch_verify_tls,
        headers=headers,
    )


def create_fetch_strategy(settings: Settings) -> FetchStrategy:
    """Select the fetch strategy from configuration and return port type."""
    backend = settings.fetch_backend.strip().lower()

    if backend == FETCH_BACKEND.HTTPX:
        client = create_httpx_client(settings)
        _log(
            "fetch_strategy_created",
            backend=backend,
            follow_redirects=settings.fetch_follow_redirects,
            raise_for_status=settings.fetch_raise_for_status,
        )
        return HttpxFetchStrategy(client, raise_for_status=settings.fetch_raise_for_status)

    raise ValueError(f"Unsupported fetch backend: {backend}")
