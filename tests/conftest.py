"""Global pytest fixtures for minimalpack."""

from __future__ import annotations

import random

import pytest

from minimalpack.config import MATCH_TIMEOUT_ENV


@pytest.fixture
def rng() -> random.Random:
    """A seeded random generator so sampling tests are reproducible."""
    return random.Random(20240301)


@pytest.fixture(autouse=True)
def _no_timeout_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's environment from changing the default match timeout."""
    monkeypatch.delenv(MATCH_TIMEOUT_ENV, raising=False)
