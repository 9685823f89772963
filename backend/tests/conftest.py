from __future__ import annotations

import pytest

from diagkit.config import get_settings
from diagkit.services import statsig_client


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in (
        "DIAGKIT_ENVIRONMENT",
        "DIAGKIT_PATH_CONVENTION",
        "DIAGKIT_STATSIG_SERVER_SECRET",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    statsig_client.reset_statsig_client()
    yield
    get_settings.cache_clear()
    statsig_client.reset_statsig_client()
