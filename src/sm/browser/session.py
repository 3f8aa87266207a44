"""Session context shared by every capability manager.

The facade client creates one SessionContext and hands the same object to each
manager, so a driver change made through the context is seen by all of them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger
from selenium.common.exceptions import WebDriverException

from sm.errors import NoActiveSessionError

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver

# Default wait for locate/wait operations, in milliseconds
DEFAULT_TIMEOUT_MS = 10000

NO_SESSION_MESSAGE = "Browser not started. Please call start_browser first."


class SessionContext:
    """Holds the single live WebDriver for this process."""

    def __init__(self, driver: WebDriver | None = None) -> None:
        self._driver = driver

    @property
    def driver(self) -> WebDriver | None:
        return self._driver

    @property
    def active(self) -> bool:
        return self._driver is not None

    def require(self) -> WebDriver:
        """Return the live driver or raise NoActiveSessionError."""
        if self._driver is None:
            raise NoActiveSessionError(NO_SESSION_MESSAGE)
        return self._driver

    def attach(self, driver: WebDriver) -> None:
        """Make driver the live session, quitting a different previous one."""
        previous = self._driver
        self._driver = driver
        if previous is not None and previous is not driver:
            _quit_quietly(previous)

    def detach(self) -> WebDriver | None:
        """Clear the handle without quitting; returns the previous driver."""
        previous = self._driver
        self._driver = None
        return previous

    def quit(self) -> bool:
        """Quit the live driver if any. Returns True when a session was closed."""
        driver = self.detach()
        if driver is None:
            return False
        driver.quit()
        return True


def _quit_quietly(driver: WebDriver) -> None:
    try:
        driver.quit()
    except WebDriverException as e:
        logger.warning(f"Failed to quit replaced browser session: {e.msg}")


class BaseManager:
    """Base for capability managers bound to a SessionContext."""

    def __init__(self, session: SessionContext) -> None:
        self.session = session

    def ensure_session(self) -> WebDriver:
        return self.session.require()


def timeout_ms(timeout: float | str | None) -> float:
    """Normalise a timeout argument to non-negative milliseconds.

    None selects DEFAULT_TIMEOUT_MS. Numeric strings are accepted; anything
    that does not parse as a number also falls back to the default.
    """
    if timeout is None:
        return float(DEFAULT_TIMEOUT_MS)
    try:
        ms = float(timeout)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid timeout {timeout!r}; using {DEFAULT_TIMEOUT_MS}ms")
        return float(DEFAULT_TIMEOUT_MS)
    return max(ms, 0.0)


def resolve_timeout(timeout: float | str | None) -> float:
    """Milliseconds (None -> default) to seconds for WebDriverWait."""
    return timeout_ms(timeout) / 1000
