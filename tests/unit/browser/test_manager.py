"""Unit tests for BrowserManager session lifecycle."""

from __future__ import annotations

from unittest.mock import MagicMock, call, patch

import pytest
from selenium.common.exceptions import WebDriverException

from sm.browser.manager import BrowserManager
from sm.browser.session import SessionContext
from sm.errors import DriverFailureError, NoActiveSessionError, UnsupportedBrowserError


@pytest.mark.unit
@pytest.mark.browser
class TestStart:
    """Test BrowserManager.start()."""

    @patch("sm.browser.manager.webdriver")
    def test_starts_chrome_by_default(self, mock_webdriver, empty_session):
        result = BrowserManager(empty_session).start()

        assert result == {"success": True, "message": "chrome browser started successfully"}
        assert empty_session.driver is mock_webdriver.Chrome.return_value
        options = mock_webdriver.ChromeOptions.return_value
        options.set_capability.assert_called_once_with("goog:loggingPrefs", {"browser": "ALL"})

    @patch("sm.browser.manager.webdriver")
    def test_none_browser_means_chrome(self, mock_webdriver, empty_session):
        BrowserManager(empty_session).start(None, None)

        mock_webdriver.Chrome.assert_called_once()

    @patch("sm.browser.manager.webdriver")
    def test_chrome_options_applied(self, mock_webdriver, empty_session):
        BrowserManager(empty_session).start(
            "chrome",
            {"headless": True, "arguments": ["--no-sandbox"], "windowSize": {"width": 800, "height": 600}},
        )

        options = mock_webdriver.ChromeOptions.return_value
        assert options.add_argument.call_args_list == [
            call("--headless"),
            call("--no-sandbox"),
            call("--window-size=800,600"),
        ]

    @patch("sm.browser.manager.webdriver")
    def test_window_size_applied_after_launch_unless_headless(self, mock_webdriver, empty_session):
        manager = BrowserManager(empty_session)

        manager.start("firefox", {"windowSize": {"width": 1024, "height": 768}})
        driver = mock_webdriver.Firefox.return_value
        driver.set_window_rect.assert_called_once_with(x=0, y=0, width=1024, height=768)

        manager.start("firefox", {"headless": True, "windowSize": {"width": 1024, "height": 768}})
        driver.set_window_rect.assert_called_once()

    @patch("sm.browser.manager.webdriver")
    def test_restart_quits_previous_session(self, mock_webdriver):
        previous = MagicMock()
        session = SessionContext(previous)

        BrowserManager(session).start("edge")

        previous.quit.assert_called_once()
        assert session.driver is mock_webdriver.Edge.return_value

    @patch("sm.browser.manager.webdriver")
    def test_safari_ignores_headless_and_arguments(self, mock_webdriver, empty_session):
        result = BrowserManager(empty_session).start(
            "safari", {"headless": True, "arguments": ["--foo"]}
        )

        assert result["success"] is True
        mock_webdriver.Safari.assert_called_once()
        mock_webdriver.SafariOptions.return_value.add_argument.assert_not_called()

    @patch("sm.browser.manager.webdriver")
    def test_unsupported_browser(self, mock_webdriver, empty_session):
        with pytest.raises(UnsupportedBrowserError, match="Unsupported browser: opera"):
            BrowserManager(empty_session).start("opera")

        assert not empty_session.active

    @patch("sm.browser.manager.webdriver")
    def test_driver_launch_failure(self, mock_webdriver, empty_session):
        mock_webdriver.Chrome.side_effect = WebDriverException("chromedriver not found")

        with pytest.raises(DriverFailureError, match="Failed to start browser: chromedriver not found"):
            BrowserManager(empty_session).start("chrome")


@pytest.mark.unit
@pytest.mark.browser
class TestClose:
    """Test BrowserManager.close()."""

    def test_close_quits_driver(self, session, driver):
        result = BrowserManager(session).close()

        assert result == {"success": True, "message": "Browser closed successfully"}
        driver.quit.assert_called_once()
        assert not session.active

    def test_close_without_session_succeeds(self, empty_session):
        result = BrowserManager(empty_session).close()

        assert result == {"success": True, "message": "No browser session to close"}


@pytest.mark.unit
@pytest.mark.browser
class TestWindowGeometry:
    """Test window sizing operations."""

    def test_set_window_size(self, session, driver):
        result = BrowserManager(session).set_window_size(1280, 720)

        driver.set_window_rect.assert_called_once_with(x=0, y=0, width=1280, height=720)
        assert result["message"] == "Window size set to 1280x720"

    def test_get_window_size(self, session, driver):
        driver.get_window_rect.return_value = {"x": 0, "y": 0, "width": 1280, "height": 720}

        assert BrowserManager(session).get_window_size() == {"width": 1280, "height": 720}

    def test_maximize_and_minimize(self, session, driver):
        manager = BrowserManager(session)

        assert manager.maximize_window()["success"] is True
        assert manager.minimize_window()["success"] is True
        driver.maximize_window.assert_called_once()
        driver.minimize_window.assert_called_once()

    def test_requires_session(self, empty_session):
        with pytest.raises(NoActiveSessionError):
            BrowserManager(empty_session).maximize_window()
