"""Pytest configuration shared across the ShiftHub test suite.

Keeps tests independent of the developer's environment: SHIFT_HUB_* variables
and the cached Settings instance are reset around every test.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

import pytest

from shift_hub.config.settings import get_settings
from tests.fixtures.workplace_factory import (
    SHIFTS_ENDPOINT,
    WORKPLACES_ENDPOINT,
    FakeFetcher,
    Gate,
    Response,
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop SHIFT_HUB_* overrides and the cached Settings around every test."""
    for key in list(os.environ):
        if key.startswith("SHIFT_HUB_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_fetcher():
    """Factory building a FakeFetcher for the default endpoints."""

    def _build(
        workplaces: Response,
        shifts: Response,
        gates: Optional[Dict[str, Gate]] = None,
    ) -> FakeFetcher:
        return FakeFetcher(
            {WORKPLACES_ENDPOINT: workplaces, SHIFTS_ENDPOINT: shifts},
            gates=gates,
        )

    return _build
