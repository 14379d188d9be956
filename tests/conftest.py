"""Pytest configuration for trendcast tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch) -> None:
    """Keep host configuration out of tests."""
    monkeypatch.delenv("TRENDCAST_API_KEY", raising=False)
