"""Unit tests for the SeleniumClient facade."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from sm.browser.client import SeleniumClient
from sm.browser.session import SessionContext
from sm.errors import NoActiveSessionError


@pytest.mark.unit
@pytest.mark.browser
class TestSeleniumClient:
    """Test manager wiring and delegation."""

    def test_managers_share_one_session(self):
        client = SeleniumClient()
        managers = [
            client.browser,
            client.navigation,
            client.locator,
            client.interactor,
            client.inspector,
            client.actions,
            client.windows,
            client.analyzer,
            client.accessibility,
            client.console,
        ]

        assert all(manager.session is client.session for manager in managers)

    def test_attached_driver_is_seen_everywhere(self, driver):
        client = SeleniumClient()
        driver.title = "Example"
        driver.window_handles = ["A"]

        client.session.attach(driver)

        assert client.get_title() == {"title": "Example"}
        assert client.get_window_handles() == {"handles": ["A"]}

    def test_every_operation_needs_a_session(self):
        client = SeleniumClient()

        with pytest.raises(NoActiveSessionError):
            client.navigate("https://example.com")
        with pytest.raises(NoActiveSessionError):
            client.get_all_links()

    def test_delegates_with_argument_order(self):
        client = SeleniumClient(SessionContext(MagicMock()))

        with patch.object(client.interactor, "drag_and_drop") as drag:
            client.drag_and_drop("id", "a", "css", ".b", 500)

        drag.assert_called_once_with("id", "a", "css", ".b", 500)

    def test_close(self, driver):
        client = SeleniumClient(SessionContext(driver))

        assert client.close() is True
        driver.quit.assert_called_once()
        assert client.close() is False
