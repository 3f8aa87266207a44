"""Locator strategy translation.

Maps the tool-level strategy names to Selenium ``(By, value)`` locators.
``tag`` is resolved through a CSS selector rather than By.TAG_NAME.
"""

from __future__ import annotations

from selenium.webdriver.common.by import By

from sm.errors import UnsupportedLocatorStrategyError

__all__ = ["LOCATOR_STRATEGIES", "Locator", "translate"]

Locator = tuple[str, str]

_STRATEGIES: dict[str, str] = {
    "id": By.ID,
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "name": By.NAME,
    "tag": By.CSS_SELECTOR,
    "class": By.CLASS_NAME,
    "linkText": By.LINK_TEXT,
    "partialLinkText": By.PARTIAL_LINK_TEXT,
}

LOCATOR_STRATEGIES: tuple[str, ...] = tuple(_STRATEGIES)


def translate(strategy: str, value: str) -> Locator:
    """Translate a strategy name and value into a Selenium locator.

    Args:
        strategy: One of LOCATOR_STRATEGIES
        value: Selector text; its syntax is left to the driver

    Returns:
        A (By, value) tuple accepted by find_element and expected conditions

    Raises:
        UnsupportedLocatorStrategyError: For any other strategy name
    """
    try:
        by = _STRATEGIES[strategy]
    except (KeyError, TypeError):
        raise UnsupportedLocatorStrategyError(
            f"Unsupported locator strategy: {strategy}"
        ) from None
    return (by, value)
