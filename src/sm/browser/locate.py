"""Element lookup, waiting and selector validation.

The ``locate*`` helpers are shared with the interactor and inspector so every
element operation waits the same way. Timeouts are milliseconds; ``None``
selects DEFAULT_TIMEOUT_MS.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from sm.browser.locators import translate
from sm.browser.session import BaseManager, resolve_timeout, timeout_ms
from sm.errors import (
    ElementNotClickableError,
    ElementNotFoundError,
    ElementNotVisibleError,
    SeleniumMcpError,
    TextNotFoundError,
    driver_message,
    reraise,
)

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement

# Seconds between condition checks while waiting
POLL_FREQUENCY = 0.1

# Upper bound of the settle delay before find_elements counts matches, in ms
SETTLE_CAP_MS = 1000


def _describe(by: str, value: str, timeout: float | None) -> str:
    ms = timeout_ms(timeout)
    return f"{by}={value!r} after {ms:g}ms"


class ElementLocator(BaseManager):
    """Finds and waits for elements; the probe is find_element."""

    def _until(
        self,
        condition: Callable[[Any], Any],
        timeout: float | None,
        error: SeleniumMcpError,
    ) -> Any:
        driver = self.ensure_session()
        wait = WebDriverWait(
            driver, resolve_timeout(timeout), poll_frequency=POLL_FREQUENCY
        )
        try:
            return wait.until(condition)
        except TimeoutException as e:
            raise error from e

    def locate(self, by: str, value: str, timeout: float | None = None) -> WebElement:
        """Wait until an element matching (by, value) is present and return it."""
        locator = translate(by, value)
        return self._until(
            EC.presence_of_element_located(locator),
            timeout,
            ElementNotFoundError(f"No element matched {_describe(by, value, timeout)}"),
        )

    def locate_enabled(
        self, by: str, value: str, timeout: float | None = None
    ) -> WebElement:
        """Locate an element, then wait (same timeout) until it is enabled."""
        element = self.locate(by, value, timeout)
        return self._until(
            lambda _driver: element if element.is_enabled() else False,
            timeout,
            ElementNotClickableError(
                f"Element {_describe(by, value, timeout)} is still disabled"
            ),
        )

    def find_element(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        """Probe for an element. Lookup failures become ``found: False``."""
        self.ensure_session()
        try:
            self.locate(by, value, timeout)
        except SeleniumMcpError as e:
            return {"found": False, "message": f"Element not found: {e}"}
        except WebDriverException as e:
            return {"found": False, "message": f"Element not found: {driver_message(e)}"}
        return {"found": True, "message": "Element found successfully"}

    def find_elements(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        """Count matches after a short settle delay of min(timeout, 1000) ms."""
        driver = self.ensure_session()
        with reraise("Failed to find elements"):
            locator = translate(by, value)
            time.sleep(min(timeout_ms(timeout), SETTLE_CAP_MS) / 1000)
            count = len(driver.find_elements(*locator))
        return {"count": count, "message": f"Found {count} elements"}

    def wait_for_element(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Element not found within timeout"):
            self.locate(by, value, timeout)
        return {"success": True, "message": "Element found within timeout"}

    def wait_for_element_visible(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Element did not become visible within timeout"):
            locator = translate(by, value)
            self._until(
                EC.visibility_of_element_located(locator),
                timeout,
                ElementNotVisibleError(
                    f"Element {_describe(by, value, timeout)} is not visible"
                ),
            )
        return {"success": True, "message": "Element became visible within timeout"}

    def wait_for_element_clickable(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Element did not become clickable within timeout"):
            self.locate_enabled(by, value, timeout)
        return {"success": True, "message": "Element became clickable within timeout"}

    def wait_for_text_present(
        self, by: str, value: str, text: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise(f"Text '{text}' not found in element within timeout"):
            locator = translate(by, value)
            self._until(
                EC.text_to_be_present_in_element(locator, text or ""),
                timeout,
                TextNotFoundError(f"Element {_describe(by, value, timeout)}"),
            )
        return {
            "success": True,
            "message": f"Text '{text}' found in element within timeout",
        }

    def scroll_to_element(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to scroll to element"):
            element = self.locate(by, value, timeout)
            driver.execute_script("arguments[0].scrollIntoView(true);", element)
        return {"success": True, "message": "Scrolled to element successfully"}

    def validate_selectors(
        self, selectors: list[dict[str, Any]] | None
    ) -> dict[str, Any]:
        """Count matches for each selector independently.

        Returns one result per input, in input order. A selector that cannot
        be evaluated reports ``found: False, count: 0`` and its error text.
        """
        driver = self.ensure_session()
        results: list[dict[str, Any]] = []
        for selector in selectors or []:
            try:
                locator = translate(selector["by"], selector["value"])
                count = len(driver.find_elements(*locator))
            except KeyError as e:
                results.append(_invalid(selector, f"Missing selector field: {e.args[0]}"))
            except TypeError:
                results.append(_invalid(selector, "Selector must be an object with by and value"))
            except SeleniumMcpError as e:
                results.append(_invalid(selector, str(e)))
            except WebDriverException as e:
                results.append(_invalid(selector, driver_message(e)))
            else:
                results.append({"selector": selector, "found": count > 0, "count": count})
        return {"results": results}


def _invalid(selector: Any, error: str) -> dict[str, Any]:
    return {"selector": selector, "found": False, "count": 0, "error": error}
