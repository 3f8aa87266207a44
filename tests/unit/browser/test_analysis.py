"""Unit tests for page analysis."""

from __future__ import annotations

from unittest.mock import MagicMock, PropertyMock

import pytest
from selenium.common.exceptions import (
    InvalidSelectorException,
    NoSuchElementException,
    StaleElementReferenceException,
)

from sm.browser.analysis import (
    BUTTON_SELECTOR,
    HEADING_SELECTOR,
    LINK_SELECTOR,
    MAIN_SELECTOR,
    MAX_ITEMS,
    NO_MAIN_CONTENT,
    PageAnalyzer,
    best_selector,
)


def fake_element(text: str = "", tag: str = "div", children=None, **attributes) -> MagicMock:
    """An element whose get_attribute reads from the given keywords."""
    element = MagicMock()
    element.text = text
    element.tag_name = tag
    element.get_attribute.side_effect = attributes.get
    element.find_elements.side_effect = lambda _by, _selector: list(children or [])
    return element


def serve_dom(driver: MagicMock, many: dict[str, list], one: dict[str, MagicMock] | None = None) -> None:
    """Answer find_elements/find_element by CSS selector."""
    one = one or {}

    def find_element(_by, selector):
        if selector not in one:
            raise NoSuchElementException(selector)
        return one[selector]

    driver.find_elements.side_effect = lambda _by, selector: list(many.get(selector, []))
    driver.find_element.side_effect = find_element


@pytest.mark.unit
@pytest.mark.browser
@pytest.mark.parametrize(
    ("element_id", "class_name", "expected"),
    [
        ("login", "btn primary", "#login"),
        (None, "btn primary", ".btn"),
        ("", "  ", "a[href=\"/x\"]"),
        (None, None, "a[href=\"/x\"]"),
    ],
)
def test_best_selector(element_id, class_name, expected) -> None:
    """Id wins, then the first class token, then the fallback."""
    assert best_selector(element_id, class_name, 'a[href="/x"]') == expected


@pytest.mark.unit
@pytest.mark.browser
class TestLinksAndButtons:
    """Test get_all_links and get_all_buttons."""

    def test_links_are_capped(self, session, driver):
        links = [fake_element(f" Link {i} ", href=f"https://example.com/{i}") for i in range(80)]
        serve_dom(driver, {LINK_SELECTOR: links})

        result = PageAnalyzer(session).get_all_links()

        assert len(result["links"]) == MAX_ITEMS == 50
        assert result["links"][0] == {
            "text": "Link 0",
            "href": "https://example.com/0",
            "selector": 'a[href="https://example.com/0"]',
        }

    def test_link_selector_prefers_id(self, session, driver):
        serve_dom(driver, {LINK_SELECTOR: [fake_element("Docs", href="/docs", id="docs-link")]})

        assert PageAnalyzer(session).get_all_links()["links"][0]["selector"] == "#docs-link"

    def test_buttons(self, session, driver):
        buttons = [
            fake_element("Save", type="submit", id="save"),
            fake_element("", value="Reset form", type="reset", **{"class": "ghost small"}),
            fake_element("Menu"),
        ]
        serve_dom(driver, {BUTTON_SELECTOR: buttons})

        result = PageAnalyzer(session).get_all_buttons()["buttons"]

        assert result == [
            {"text": "Save", "type": "submit", "selector": "#save"},
            {"text": "Reset form", "type": "reset", "selector": ".ghost"},
            {"text": "Menu", "type": "button", "selector": '[type="button"]'},
        ]


@pytest.mark.unit
@pytest.mark.browser
class TestForms:
    """Test get_all_forms."""

    def test_fields_labels_and_selectors(self, session, driver):
        email = fake_element(name="email", type="email", id="email")
        search = fake_element(name="q", placeholder="Search...")
        bare = fake_element()
        form = fake_element(children=[email, search, bare], action="/login", method="post")
        serve_dom(
            driver,
            {"form": [form]},
            one={'label[for="email"]': fake_element("Email address")},
        )

        result = PageAnalyzer(session).get_all_forms()

        assert result == {
            "forms": [
                {
                    "action": "/login",
                    "method": "post",
                    "fields": [
                        {"name": "email", "type": "email", "label": "Email address", "selector": "#email"},
                        {"name": "q", "type": "text", "label": "Search...", "selector": '[name="q"]'},
                        {"name": "", "type": "text", "label": "", "selector": '[type="text"]'},
                    ],
                }
            ]
        }

    def test_method_defaults_to_get(self, session, driver):
        serve_dom(driver, {"form": [fake_element()]})

        form = PageAnalyzer(session).get_all_forms()["forms"][0]

        assert form == {"action": "", "method": "GET", "fields": []}

    def test_unusable_label_selector_falls_back_to_placeholder(self, session, driver):
        quoted = fake_element(name="note", id='a"b', placeholder="Your note")
        serve_dom(driver, {"form": [fake_element(children=[quoted])]})
        driver.find_element.side_effect = InvalidSelectorException("invalid selector")

        fields = PageAnalyzer(session).get_all_forms()["forms"][0]["fields"]

        assert fields == [
            {"name": "note", "type": "text", "label": "Your note", "selector": '#a"b'}
        ]

    def test_no_forms(self, session, driver):
        serve_dom(driver, {})

        assert PageAnalyzer(session).get_all_forms() == {"forms": []}


@pytest.mark.unit
@pytest.mark.browser
class TestSummary:
    """Test get_page_summary and get_page_metadata."""

    def test_summary(self, session, driver):
        driver.title = "Shop"
        driver.current_url = "https://shop.test/"
        headings = [fake_element(f"Heading {i}", tag="h2") for i in range(12)]
        serve_dom(
            driver,
            {
                HEADING_SELECTOR: headings,
                LINK_SELECTOR: [fake_element()] * 3,
                "img": [fake_element()] * 2,
            },
            one={MAIN_SELECTOR: fake_element("x" * 900)},
        )

        summary = PageAnalyzer(session).get_page_summary()

        assert summary["title"] == "Shop"
        assert summary["url"] == "https://shop.test/"
        assert summary["links"] == 3
        assert summary["images"] == 2
        assert summary["forms"] == 0
        assert len(summary["headings"]) == 10
        assert summary["headings"][0] == {"level": "H2", "text": "Heading 0"}
        assert summary["mainContent"] == "x" * 500

    def test_main_content_falls_back_to_body(self, session, driver):
        serve_dom(driver, {}, one={"body": fake_element("Body text")})

        assert PageAnalyzer(session).get_page_summary()["mainContent"] == "Body text"

    def test_main_content_placeholder(self, session, driver):
        serve_dom(driver, {})

        assert PageAnalyzer(session).get_page_summary()["mainContent"] == NO_MAIN_CONTENT

    def test_stale_main_content_falls_back_to_body(self, session, driver):
        main = MagicMock()
        type(main).text = PropertyMock(side_effect=StaleElementReferenceException("stale"))
        serve_dom(driver, {}, one={MAIN_SELECTOR: main, "body": fake_element("Body text")})

        assert PageAnalyzer(session).get_page_summary()["mainContent"] == "Body text"

    def test_unreadable_metadata_is_empty(self, session, driver):
        driver.title = "Docs"
        description = MagicMock()
        description.get_attribute.side_effect = StaleElementReferenceException("stale")
        serve_dom(driver, {}, one={'meta[name="description"]': description})

        metadata = PageAnalyzer(session).get_page_metadata()

        assert metadata["description"] == ""
        assert metadata["language"] == ""

    def test_metadata(self, session, driver):
        driver.title = "Docs"
        serve_dom(
            driver,
            {},
            one={
                'meta[name="description"]': fake_element(content="Reference docs"),
                "meta[charset]": fake_element(charset="utf-8"),
                "html": fake_element(lang="en"),
            },
        )

        assert PageAnalyzer(session).get_page_metadata() == {
            "title": "Docs",
            "description": "Reference docs",
            "keywords": "",
            "viewport": "",
            "charset": "utf-8",
            "language": "en",
        }
