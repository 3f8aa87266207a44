"""Element interactions: clicks, typing, pointer actions and file upload."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from selenium.webdriver.common.action_chains import ActionChains

from sm.browser.locate import ElementLocator
from sm.browser.session import BaseManager, SessionContext
from sm.errors import UploadFileNotFoundError, reraise


class ElementInteractor(BaseManager):
    """Acts on elements after waiting for presence and, mostly, enabled state.

    hover, clear and drag-and-drop only wait for presence.
    """

    def __init__(self, session: SessionContext) -> None:
        super().__init__(session)
        self._locator = ElementLocator(session)

    def click_element(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Failed to click element"):
            element = self._locator.locate_enabled(by, value, timeout)
            element.click()
        return {"success": True, "message": "Element clicked successfully"}

    def send_keys(
        self, by: str, value: str, text: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Failed to send keys"):
            element = self._locator.locate_enabled(by, value, timeout)
            element.send_keys(text or "")
        return {"success": True, "message": "Text sent successfully"}

    def clear_element(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Failed to clear element"):
            element = self._locator.locate(by, value, timeout)
            element.clear()
        return {"success": True, "message": "Element cleared successfully"}

    def double_click_element(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to double click element"):
            element = self._locator.locate_enabled(by, value, timeout)
            actions = ActionChains(driver)
            actions.double_click(element)
            actions.perform()
        return {"success": True, "message": "Double clicked element successfully"}

    def right_click_element(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to right click element"):
            element = self._locator.locate_enabled(by, value, timeout)
            actions = ActionChains(driver)
            actions.context_click(element)
            actions.perform()
        return {"success": True, "message": "Right clicked element successfully"}

    def hover_element(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to hover over element"):
            element = self._locator.locate(by, value, timeout)
            actions = ActionChains(driver)
            actions.move_to_element(element)
            actions.perform()
        return {"success": True, "message": "Hovered over element successfully"}

    def drag_and_drop(
        self,
        source_by: str,
        source_value: str,
        target_by: str,
        target_value: str,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to perform drag and drop"):
            source = self._locator.locate(source_by, source_value, timeout)
            target = self._locator.locate(target_by, target_value, timeout)
            actions = ActionChains(driver)
            actions.drag_and_drop(source, target)
            actions.perform()
        return {"success": True, "message": "Drag and drop completed successfully"}

    def upload_file(
        self, by: str, value: str, file_path: str, timeout: float | None = None
    ) -> dict[str, Any]:
        """Send a local file path to a file input.

        The path is resolved and checked before the element is looked up, so a
        missing file never touches the page.
        """
        self.ensure_session()
        with reraise("Failed to upload file"):
            path = Path(file_path or "").expanduser().resolve()
            if not path.is_file():
                raise UploadFileNotFoundError(f"File not found: {file_path}")
            element = self._locator.locate(by, value, timeout)
            element.send_keys(str(path))
        return {"success": True, "message": f"File uploaded successfully: {path}"}
