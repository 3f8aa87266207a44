"""Frame, window and tab switching."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sm.browser.session import BaseManager
from sm.errors import reraise

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement


def coerce_frame_reference(reference: str | int | WebElement) -> str | int | WebElement:
    """Turn numeric strings into frame indexes.

    Only strings that round-trip exactly (``"2"`` but not ``"02"`` or
    ``" 2"``) are converted; everything else is passed to the driver as is.
    """
    if isinstance(reference, str):
        try:
            index = int(reference)
        except ValueError:
            return reference
        if str(index) == reference:
            return index
    return reference


class WindowManager(BaseManager):
    def switch_to_frame(self, frame_reference: str | int | WebElement) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to switch to frame"):
            driver.switch_to.frame(coerce_frame_reference(frame_reference))
        return {"success": True, "message": "Switched to frame successfully"}

    def switch_to_default_content(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to switch to default content"):
            driver.switch_to.default_content()
        return {"success": True, "message": "Switched to default content successfully"}

    def switch_to_window(self, window_handle: str) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to switch to window"):
            driver.switch_to.window(window_handle)
        return {"success": True, "message": "Switched to window successfully"}

    def get_window_handles(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to get window handles"):
            return {"handles": list(driver.window_handles)}

    def get_current_window_handle(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to get current window handle"):
            return {"handle": driver.current_window_handle}

    def close_current_window(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to close current window"):
            driver.close()
        return {"success": True, "message": "Current window closed successfully"}

    def open_new_window(self, kind: str | None = "tab") -> dict[str, Any]:
        """Open a tab (default) or window, switch to it and return its handle."""
        driver = self.ensure_session()
        kind = kind or "tab"
        with reraise(f"Failed to open new {kind}"):
            driver.switch_to.new_window(kind)
            handle = driver.current_window_handle
        return {"success": True, "message": f"New {kind} opened successfully", "handle": handle}
