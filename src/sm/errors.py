"""Error taxonomy for browser automation tools.

Capability managers raise these (wrapping Selenium's own exceptions) so the
protocol server can render every failure as a single human-readable message.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from selenium.common.exceptions import WebDriverException

__all__ = [
    "AuditScriptUnavailableError",
    "DriverFailureError",
    "ElementNotClickableError",
    "ElementNotFoundError",
    "ElementNotVisibleError",
    "NoActiveSessionError",
    "SeleniumMcpError",
    "TextNotFoundError",
    "UnknownToolError",
    "UnsupportedBrowserError",
    "UnsupportedLocatorStrategyError",
    "UploadFileNotFoundError",
    "driver_message",
    "reraise",
]


class SeleniumMcpError(Exception):
    """Base class for all browser automation failures."""

    def prefixed(self, action: str) -> SeleniumMcpError:
        """Return a copy of this error with an action prefix on the message."""
        return type(self)(f"{action}: {self}")


class NoActiveSessionError(SeleniumMcpError):
    """An operation was attempted before start_browser."""


class UnsupportedBrowserError(SeleniumMcpError):
    """The requested browser kind is not one of chrome/firefox/edge/safari."""


class UnsupportedLocatorStrategyError(SeleniumMcpError):
    """The locator strategy tag is not in the supported set."""


class ElementNotFoundError(SeleniumMcpError):
    """No element matched the locator within the timeout."""


class ElementNotVisibleError(SeleniumMcpError):
    """The element did not become visible within the timeout."""


class ElementNotClickableError(SeleniumMcpError):
    """The element did not become enabled within the timeout."""


class TextNotFoundError(SeleniumMcpError):
    """The expected text did not appear in the element within the timeout."""


class UploadFileNotFoundError(SeleniumMcpError, FileNotFoundError):
    """The local file given to upload_file does not exist."""


class UnknownToolError(SeleniumMcpError):
    """The tool name has no route or is not served."""


class DriverFailureError(SeleniumMcpError):
    """The underlying WebDriver raised; the driver message is passed through."""


class AuditScriptUnavailableError(SeleniumMcpError):
    """The axe-core script could not be read or downloaded."""


def driver_message(error: WebDriverException) -> str:
    """The driver's one-line message without the remote stacktrace."""
    return (error.msg or str(error)).strip()


@contextmanager
def reraise(action: str) -> Iterator[None]:
    """Convert failures inside the block into prefixed taxonomy errors.

    Example:
        with reraise("Failed to click element"):
            element.click()
    """
    try:
        yield
    except SeleniumMcpError as e:
        raise e.prefixed(action) from e
    except WebDriverException as e:
        raise DriverFailureError(f"{action}: {driver_message(e)}") from e
