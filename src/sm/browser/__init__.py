"""Selenium capability managers and the SeleniumClient facade."""

from sm.browser.client import SeleniumClient
from sm.browser.locators import LOCATOR_STRATEGIES, translate
from sm.browser.session import DEFAULT_TIMEOUT_MS, SessionContext

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "LOCATOR_STRATEGIES",
    "SeleniumClient",
    "SessionContext",
    "translate",
]
