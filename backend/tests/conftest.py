"""Shared test fixtures."""

import pytest

from api.router import limiter
from config import settings


@pytest.fixture(autouse=True)
def _no_gemini(monkeypatch):
    """Run every test without a Gemini key unless a test patches the client."""
    monkeypatch.setattr(settings, "gemini_api_key", "")


@pytest.fixture(autouse=True)
def _no_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True
