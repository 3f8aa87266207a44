"""Shared fixtures for capability manager tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from sm.browser.session import SessionContext


@pytest.fixture
def driver() -> MagicMock:
    """A WebDriver stand-in; configure return values per test."""
    return MagicMock(name="driver")


@pytest.fixture
def session(driver: MagicMock) -> SessionContext:
    """A session with the mock driver attached."""
    return SessionContext(driver)


@pytest.fixture
def empty_session() -> SessionContext:
    """A session before start_browser."""
    return SessionContext()
