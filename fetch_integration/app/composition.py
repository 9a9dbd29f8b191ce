"""Composition root: build and lifecycle-manage the fetch strategy.

Composition may: import factories, store interface types, manage high-level
lifecycle. Backend selection is driven by settings (fetch_backend).
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from fetch_integration.app.config.settings import Settings
from fetch_integration.app.core import SERVICE_NAME
from fetch_integration.app.infrastructure.http.factory import create_fetch_strategy
from fetch_integration.app.ports.fetch_strategy import FetchStrategy


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class FetchDependencies:
    """Holds the wired fetch strategy and its lifecycle."""

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._fetch_strategy: FetchStrategy | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def fetch_strategy(self) -> FetchStrategy:
        if self._fetch_strategy is None:
            raise RuntimeError("fetch_strategy is not initialized")
        return self._fetch_strategy

    @property
    def connected(self) -> bool:
        return self._fetch_strategy is not None

    def connect(self) -> None:
        if self._fetch_strategy is not None:
            return
        self._fetch_strategy = create_fetch_strategy(self._settings)
        _log("fetch_dependencies_connected", backend=self._settings.fetch_backend)

    def close(self) -> None:
        if self._fetch_strategy is not None:
            try:
                self._fetch_strategy.close()
            except Exception as exc:
                logger.warning("fetch strategy close failed: {}", exc)
            self._fetch_strategy = None
            _log("fetch_dependencies_closed")


def create_fetch_dependencies(settings: Settings | None = None) -> FetchDependencies:
    return FetchDependencies(settings=settings or Settings())
