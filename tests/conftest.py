"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lifetune_backend.game_logic.configuration import get_default_rules
from lifetune_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("LIQUIDATION_REVEAL_DELAY_SECONDS", "0")
    get_settings.cache_clear()
    get_default_rules.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_rules.cache_clear()
