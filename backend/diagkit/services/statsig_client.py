"""Lightweight Statsig integration for diagnostic events.

Event metadata goes through prepare_diagnostic_payload before it leaves the
process, so absolute paths are reduced to basenames and nested keys are
flattened into readable labels.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from statsig import StatsigEvent, StatsigOptions, StatsigServer, StatsigUser

from diagkit.config import get_settings
from diagkit.services.diagnostics import ROOT_VALUE_KEY, PathConvention, prepare_diagnostic_payload

logger = logging.getLogger(__name__)


def sanitize_metadata(
    metadata: Mapping[str, Any] | None,
    *,
    convention: PathConvention | str | None = None,
) -> dict[str, str] | None:
    """Turn an arbitrary payload into flat str -> str Statsig metadata."""
    if metadata is None:
        return None
    payload = prepare_diagnostic_payload(metadata, convention=convention)
    if not isinstance(payload, dict):
        payload = {ROOT_VALUE_KEY: payload}
    return {
        key: value if isinstance(value, str) else json.dumps(value)
        for key, value in payload.items()
    }


class _StatsigAdapter:
    def __init__(
        self,
        secret_key: str | None,
        environment: str,
        *,
        client: Any | None = None,
    ):
        self._client = client
        if self._client is not None or not secret_key:
            return

        try:
            server = StatsigServer()
            server.initialize(secret_key, StatsigOptions(tier=environment))
            self._client = server
        except Exception as exc:  # noqa: BLE001
            logger.warning("Statsig initialization failed: %s", exc)
            self._client = None

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def log_event(
        self,
        *,
        user_id: str,
        event_name: str,
        value: float | int | str | None = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> None:
        if not self._client:
            return

        # Payload errors belong to the caller; only SDK failures are swallowed.
        sanitized = sanitize_metadata(metadata)
        try:
            event = StatsigEvent(StatsigUser(user_id), event_name, value=value, metadata=sanitized)
            self._client.log_event(event)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig event failed: %s", exc)

    def shutdown(self) -> None:
        if not self._client:
            return

        try:
            self._client.shutdown()
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig shutdown failed: %s", exc)


_statsig_client: _StatsigAdapter | None = None


def get_statsig_client() -> _StatsigAdapter:
    global _statsig_client
    if _statsig_client is None:
        settings = get_settings()
        _statsig_client = _StatsigAdapter(
            settings.statsig_server_secret, settings.environment
        )
    return _statsig_client


def reset_statsig_client() -> None:
    """Drop the cached adapter so the next call re-reads settings."""
    global _statsig_client
    _statsig_client = None


def log_backend_event(
    event_name: str,
    *,
    user_id: str = "diagkit",
    value: float | int | str | None = None,
    metadata: Mapping[str, Any] | None = None,
) -> None:
    client = get_statsig_client()
    client.log_event(user_id=user_id, event_name=event_name, value=value, metadata=metadata)


def shutdown_statsig() -> None:
    client = get_statsig_client()
    client.shutdown()
