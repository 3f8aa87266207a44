"""Navigation, page source, screenshots and script execution."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sm.browser.session import BaseManager
from sm.errors import reraise


class NavigationManager(BaseManager):
    def navigate(self, url: str) -> dict[str, Any]:
        """Load url and report where the browser ended up (after redirects)."""
        driver = self.ensure_session()
        with reraise(f"Failed to navigate to {url}"):
            driver.get(url)
            current_url = driver.current_url
        return {"success": True, "message": "Navigation successful", "url": current_url}

    def get_current_url(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to get current URL"):
            return {"url": driver.current_url}

    def get_title(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to get page title"):
            return {"title": driver.title}

    def refresh(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to refresh page"):
            driver.refresh()
        return {"success": True, "message": "Page refreshed successfully"}

    def go_back(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to go back"):
            driver.back()
        return {"success": True, "message": "Navigated back successfully"}

    def go_forward(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to go forward"):
            driver.forward()
        return {"success": True, "message": "Navigated forward successfully"}

    def get_page_source(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to get page source"):
            return {"source": driver.page_source}

    def take_screenshot(self, output_path: str | None = None) -> dict[str, Any]:
        """Capture the viewport as PNG.

        With output_path the image is written there and the path returned;
        without it only success is reported and no image data is returned.
        """
        driver = self.ensure_session()
        with reraise("Failed to take screenshot"):
            if output_path:
                png = driver.get_screenshot_as_png()
                try:
                    Path(output_path).write_bytes(png)
                except OSError as e:
                    raise OSError(f"Cannot write {output_path}: {e.strerror}") from e
                return {
                    "success": True,
                    "message": "Screenshot saved successfully",
                    "path": output_path,
                }
            # Capture only to confirm the page can be screenshotted; no image is returned
            driver.get_screenshot_as_base64()
        return {"success": True, "message": "Screenshot taken successfully"}

    def execute_script(self, script: str, args: list[Any] | None = None) -> dict[str, Any]:
        """Run script in the page with args passed as arguments[0..n]."""
        driver = self.ensure_session()
        with reraise("Failed to execute script"):
            result = driver.execute_script(script, *(args or []))
        return {"result": result}
