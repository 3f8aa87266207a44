"""Browser session lifecycle and window geometry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from selenium import webdriver

from sm.browser.session import BaseManager
from sm.errors import UnsupportedBrowserError, reraise

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver

SUPPORTED_BROWSERS = ("chrome", "firefox", "edge", "safari")

# Capability that makes Chromium drivers keep console entries for get_log("browser")
_LOGGING_PREFS = {"browser": "ALL"}


class WindowSize(BaseModel):
    width: int
    height: int


class BrowserOptions(BaseModel):
    """Options accepted by start_browser."""

    model_config = ConfigDict(populate_by_name=True)

    headless: bool = False
    arguments: list[str] = Field(default_factory=list)
    window_size: WindowSize | None = Field(default=None, alias="windowSize")


class BrowserManager(BaseManager):
    """Starts and closes the session and manages the window rectangle."""

    def start(
        self, browser: str | None = "chrome", options: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Start a new browser session, closing any existing one first."""
        browser = browser or "chrome"
        opts = BrowserOptions.model_validate(options or {})

        with reraise("Failed to start browser"):
            self.session.quit()

            kind = browser.lower()
            if kind not in SUPPORTED_BROWSERS:
                raise UnsupportedBrowserError(f"Unsupported browser: {browser}")

            driver = self._build(kind, opts)
            self.session.attach(driver)

            if opts.window_size and not opts.headless:
                driver.set_window_rect(
                    x=0,
                    y=0,
                    width=opts.window_size.width,
                    height=opts.window_size.height,
                )

        logger.info(f"Started {kind} session (headless={opts.headless})")
        return {"success": True, "message": f"{browser} browser started successfully"}

    def _build(self, kind: str, opts: BrowserOptions) -> WebDriver:
        if kind == "chrome":
            chrome_options = webdriver.ChromeOptions()
            if opts.headless:
                chrome_options.add_argument("--headless")
            for arg in opts.arguments:
                chrome_options.add_argument(arg)
            if opts.window_size:
                chrome_options.add_argument(
                    f"--window-size={opts.window_size.width},{opts.window_size.height}"
                )
            chrome_options.set_capability("goog:loggingPrefs", _LOGGING_PREFS)
            return webdriver.Chrome(options=chrome_options)

        if kind == "firefox":
            firefox_options = webdriver.FirefoxOptions()
            if opts.headless:
                firefox_options.add_argument("--headless")
            for arg in opts.arguments:
                firefox_options.add_argument(arg)
            return webdriver.Firefox(options=firefox_options)

        if kind == "edge":
            edge_options = webdriver.EdgeOptions()
            if opts.headless:
                edge_options.add_argument("--headless")
            for arg in opts.arguments:
                edge_options.add_argument(arg)
            edge_options.set_capability("ms:loggingPrefs", _LOGGING_PREFS)
            return webdriver.Edge(options=edge_options)

        safari_options = webdriver.SafariOptions()
        if opts.arguments:
            logger.warning(
                "Safari does not support custom arguments. Ignoring provided arguments."
            )
        if opts.headless:
            logger.warning(
                "Safari does not support headless mode. Running in normal mode."
            )
        return webdriver.Safari(options=safari_options)

    def close(self) -> dict[str, Any]:
        """Close the session; closing with no session succeeds."""
        with reraise("Failed to close browser"):
            closed = self.session.quit()
        if closed:
            logger.info("Browser session closed")
            return {"success": True, "message": "Browser closed successfully"}
        return {"success": True, "message": "No browser session to close"}

    def maximize_window(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to maximize window"):
            driver.maximize_window()
        return {"success": True, "message": "Window maximized successfully"}

    def minimize_window(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to minimize window"):
            driver.minimize_window()
        return {"success": True, "message": "Window minimized successfully"}

    def set_window_size(self, width: int, height: int) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to set window size"):
            driver.set_window_rect(x=0, y=0, width=width, height=height)
        return {"success": True, "message": f"Window size set to {width}x{height}"}

    def get_window_size(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to get window size"):
            rect = driver.get_window_rect()
        return {"width": rect["width"], "height": rect["height"]}
