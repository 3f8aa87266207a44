"""Page analysis helpers that summarise the live DOM for an agent.

Collections of links and buttons are capped at MAX_ITEMS. Each item gets a
"best" CSS selector: ``#id``, else the first class token, else an attribute
selector built from what the element does have.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from sm.browser.session import BaseManager
from sm.errors import reraise

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

MAX_ITEMS = 50
MAX_HEADINGS = 10
MAIN_CONTENT_CHARS = 500
NO_MAIN_CONTENT = "Could not extract main content"

LINK_SELECTOR = "a[href]"
BUTTON_SELECTOR = (
    'button, input[type="button"], input[type="submit"], '
    'input[type="reset"], [role="button"]'
)
SUMMARY_BUTTON_SELECTOR = 'button, input[type="button"], input[type="submit"]'
FIELD_SELECTOR = "input, select, textarea"
HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"
MAIN_SELECTOR = 'main, [role="main"], .main-content, #main-content'


def best_selector(element_id: str | None, class_name: str | None, fallback: str) -> str:
    """Pick #id, then .first-class-token, then fallback."""
    if element_id:
        return f"#{element_id}"
    tokens = (class_name or "").split()
    if tokens:
        return f".{tokens[0]}"
    return fallback


def _css(driver: WebDriver | WebElement, selector: str) -> list[WebElement]:
    return driver.find_elements(By.CSS_SELECTOR, selector)


def _optional_attribute(driver: WebDriver, selector: str, attribute: str) -> str:
    try:
        return driver.find_element(By.CSS_SELECTOR, selector).get_attribute(attribute) or ""
    except WebDriverException:
        return ""


class PageAnalyzer(BaseManager):
    def get_all_links(self) -> dict[str, Any]:
        driver = self.ensure_session()
        links = []
        with reraise("Failed to get all links"):
            for link in _css(driver, LINK_SELECTOR)[:MAX_ITEMS]:
                href = link.get_attribute("href") or ""
                links.append(
                    {
                        "text": (link.text or "").strip(),
                        "href": href,
                        "selector": best_selector(
                            link.get_attribute("id"),
                            link.get_attribute("class"),
                            f'a[href="{href}"]',
                        ),
                    }
                )
        return {"links": links}

    def get_all_forms(self) -> dict[str, Any]:
        """Describe each form and its fields.

        A field's label comes from ``label[for=<id>]`` and falls back to its
        placeholder when there is no such label.
        """
        driver = self.ensure_session()
        forms = []
        with reraise("Failed to get all forms"):
            for form in _css(driver, "form"):
                fields = []
                for field in _css(form, FIELD_SELECTOR):
                    name = field.get_attribute("name") or ""
                    field_type = field.get_attribute("type") or "text"
                    field_id = field.get_attribute("id") or ""
                    placeholder = field.get_attribute("placeholder") or ""

                    label = ""
                    if field_id:
                        try:
                            label = driver.find_element(
                                By.CSS_SELECTOR, f'label[for="{field_id}"]'
                            ).text
                        except WebDriverException:
                            # Missing label, or an id that is not valid inside a selector
                            pass

                    if field_id:
                        selector = f"#{field_id}"
                    elif name:
                        selector = f'[name="{name}"]'
                    else:
                        selector = f'[type="{field_type}"]'

                    fields.append(
                        {
                            "name": name,
                            "type": field_type,
                            "label": label or placeholder,
                            "selector": selector,
                        }
                    )
                forms.append(
                    {
                        "action": form.get_attribute("action") or "",
                        "method": form.get_attribute("method") or "GET",
                        "fields": fields,
                    }
                )
        return {"forms": forms}

    def get_all_buttons(self) -> dict[str, Any]:
        driver = self.ensure_session()
        buttons = []
        with reraise("Failed to get all buttons"):
            for button in _css(driver, BUTTON_SELECTOR)[:MAX_ITEMS]:
                text = button.text or button.get_attribute("value") or ""
                button_type = button.get_attribute("type") or "button"
                buttons.append(
                    {
                        "text": text.strip(),
                        "type": button_type,
                        "selector": best_selector(
                            button.get_attribute("id"),
                            button.get_attribute("class"),
                            f'[type="{button_type}"]',
                        ),
                    }
                )
        return {"buttons": buttons}

    def get_page_summary(self) -> dict[str, Any]:
        """Counts, first headings and a short excerpt of the main content."""
        driver = self.ensure_session()
        with reraise("Failed to get page summary"):
            headings = [
                {"level": h.tag_name.upper(), "text": (h.text or "").strip()}
                for h in _css(driver, HEADING_SELECTOR)[:MAX_HEADINGS]
            ]
            return {
                "title": driver.title,
                "url": driver.current_url,
                "forms": len(_css(driver, "form")),
                "links": len(_css(driver, LINK_SELECTOR)),
                "buttons": len(_css(driver, SUMMARY_BUTTON_SELECTOR)),
                "inputs": len(_css(driver, FIELD_SELECTOR)),
                "images": len(_css(driver, "img")),
                "headings": headings,
                "mainContent": self._main_content(driver),
            }

    @staticmethod
    def _main_content(driver: WebDriver) -> str:
        for selector in (MAIN_SELECTOR, "body"):
            try:
                element = driver.find_element(By.CSS_SELECTOR, selector)
                return (element.text or "")[:MAIN_CONTENT_CHARS]
            except WebDriverException:
                continue
        return NO_MAIN_CONTENT

    def get_page_metadata(self) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to get page metadata"):
            return {
                "title": driver.title,
                "description": _optional_attribute(
                    driver, 'meta[name="description"]', "content"
                ),
                "keywords": _optional_attribute(driver, 'meta[name="keywords"]', "content"),
                "viewport": _optional_attribute(driver, 'meta[name="viewport"]', "content"),
                "charset": _optional_attribute(driver, "meta[charset]", "charset"),
                "language": _optional_attribute(driver, "html", "lang"),
            }
