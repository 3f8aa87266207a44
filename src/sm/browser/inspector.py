"""Read-only element inspection.

Two kinds of operation live here. The getters are assertive and raise when
the element cannot be located. The ``is_element_*`` probes never raise for a
lookup failure and report ``False`` instead, so callers can branch on them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from selenium.common.exceptions import WebDriverException

from sm.browser.locate import ElementLocator
from sm.browser.session import BaseManager, SessionContext
from sm.errors import SeleniumMcpError, reraise

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement


class ElementInspector(BaseManager):
    def __init__(self, session: SessionContext) -> None:
        super().__init__(session)
        self._locator = ElementLocator(session)

    def get_element_text(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Failed to get element text"):
            element = self._locator.locate(by, value, timeout)
            return {"text": element.text}

    def get_element_attribute(
        self, by: str, value: str, attribute: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Failed to get element attribute"):
            element = self._locator.locate(by, value, timeout)
            return {"attribute": attribute, "value": element.get_attribute(attribute)}

    def get_element_property(
        self, by: str, value: str, property: str, timeout: float | None = None
    ) -> dict[str, Any]:
        """Read a live DOM property such as ``value`` or ``checked``.

        Falls back to the attribute of the same name when the property is unset.
        """
        self.ensure_session()
        with reraise("Failed to get element property"):
            element = self._locator.locate(by, value, timeout)
            prop = element.get_property(property)
            if prop is None:
                prop = element.get_attribute(property)
            return {"property": property, "value": prop}

    def get_element_css_value(
        self, by: str, value: str, css_property: str, timeout: float | None = None
    ) -> dict[str, Any]:
        self.ensure_session()
        with reraise("Failed to get element CSS value"):
            element = self._locator.locate(by, value, timeout)
            return {
                "property": css_property,
                "value": element.value_of_css_property(css_property),
            }

    def _probe(
        self,
        by: str,
        value: str,
        timeout: float | None,
        check: Callable[[WebElement], bool],
    ) -> bool:
        self.ensure_session()
        try:
            return bool(check(self._locator.locate(by, value, timeout)))
        except (SeleniumMcpError, WebDriverException):
            return False

    def is_element_displayed(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, bool]:
        return {"displayed": self._probe(by, value, timeout, lambda el: el.is_displayed())}

    def is_element_enabled(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, bool]:
        return {"enabled": self._probe(by, value, timeout, lambda el: el.is_enabled())}

    def is_element_selected(
        self, by: str, value: str, timeout: float | None = None
    ) -> dict[str, bool]:
        return {"selected": self._probe(by, value, timeout, lambda el: el.is_selected())}
