"""SeleniumClient: one object that fronts every capability manager.

All managers share the client's SessionContext, so starting or closing the
browser through any of them is immediately visible to the rest. Methods are
one-line delegations with the manager's argument order.
"""

from __future__ import annotations

from typing import Any

from sm.browser.accessibility import AccessibilityManager
from sm.browser.actions import ActionManager
from sm.browser.analysis import PageAnalyzer
from sm.browser.console import ConsoleManager
from sm.browser.inspector import ElementInspector
from sm.browser.interact import ElementInteractor
from sm.browser.locate import ElementLocator
from sm.browser.manager import BrowserManager
from sm.browser.navigation import NavigationManager
from sm.browser.session import SessionContext
from sm.browser.windows import WindowManager
from sm.config import AccessibilityConfig

Result = dict[str, Any]


class SeleniumClient:
    def __init__(
        self,
        session: SessionContext | None = None,
        accessibility: AccessibilityConfig | None = None,
    ) -> None:
        self._session = session or SessionContext()
        self.browser = BrowserManager(self._session)
        self.navigation = NavigationManager(self._session)
        self.locator = ElementLocator(self._session)
        self.interactor = ElementInteractor(self._session)
        self.inspector = ElementInspector(self._session)
        self.actions = ActionManager(self._session)
        self.windows = WindowManager(self._session)
        self.analyzer = PageAnalyzer(self._session)
        self.accessibility = AccessibilityManager(self._session, accessibility)
        self.console = ConsoleManager(self._session)

    @property
    def session(self) -> SessionContext:
        return self._session

    def close(self) -> bool:
        """Quit the browser if one is running (used on server shutdown)."""
        return self._session.quit()

    # Session and window geometry
    def start_browser(self, browser: str | None = "chrome", options: dict[str, Any] | None = None) -> Result:
        return self.browser.start(browser, options)

    def close_browser(self) -> Result:
        return self.browser.close()

    def maximize_window(self) -> Result:
        return self.browser.maximize_window()

    def minimize_window(self) -> Result:
        return self.browser.minimize_window()

    def set_window_size(self, width: int, height: int) -> Result:
        return self.browser.set_window_size(width, height)

    def get_window_size(self) -> Result:
        return self.browser.get_window_size()

    # Navigation
    def navigate(self, url: str) -> Result:
        return self.navigation.navigate(url)

    def get_current_url(self) -> Result:
        return self.navigation.get_current_url()

    def get_title(self) -> Result:
        return self.navigation.get_title()

    def refresh(self) -> Result:
        return self.navigation.refresh()

    def go_back(self) -> Result:
        return self.navigation.go_back()

    def go_forward(self) -> Result:
        return self.navigation.go_forward()

    def get_page_source(self) -> Result:
        return self.navigation.get_page_source()

    def take_screenshot(self, output_path: str | None = None) -> Result:
        return self.navigation.take_screenshot(output_path)

    def execute_script(self, script: str, args: list[Any] | None = None) -> Result:
        return self.navigation.execute_script(script, args)

    # Locating and waiting
    def find_element(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.locator.find_element(by, value, timeout)

    def find_elements(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.locator.find_elements(by, value, timeout)

    def wait_for_element(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.locator.wait_for_element(by, value, timeout)

    def wait_for_element_visible(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.locator.wait_for_element_visible(by, value, timeout)

    def wait_for_element_clickable(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.locator.wait_for_element_clickable(by, value, timeout)

    def wait_for_text_present(self, by: str, value: str, text: str, timeout: float | None = None) -> Result:
        return self.locator.wait_for_text_present(by, value, text, timeout)

    def scroll_to_element(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.locator.scroll_to_element(by, value, timeout)

    def validate_selectors(self, selectors: list[dict[str, Any]] | None) -> Result:
        return self.locator.validate_selectors(selectors)

    # Interaction
    def click_element(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.interactor.click_element(by, value, timeout)

    def send_keys(self, by: str, value: str, text: str, timeout: float | None = None) -> Result:
        return self.interactor.send_keys(by, value, text, timeout)

    def clear_element(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.interactor.clear_element(by, value, timeout)

    def double_click_element(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.interactor.double_click_element(by, value, timeout)

    def right_click_element(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.interactor.right_click_element(by, value, timeout)

    def hover_element(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.interactor.hover_element(by, value, timeout)

    def drag_and_drop(
        self,
        source_by: str,
        source_value: str,
        target_by: str,
        target_value: str,
        timeout: float | None = None,
    ) -> Result:
        return self.interactor.drag_and_drop(source_by, source_value, target_by, target_value, timeout)

    def upload_file(self, by: str, value: str, file_path: str, timeout: float | None = None) -> Result:
        return self.interactor.upload_file(by, value, file_path, timeout)

    # Inspection
    def get_element_text(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.inspector.get_element_text(by, value, timeout)

    def get_element_attribute(self, by: str, value: str, attribute: str, timeout: float | None = None) -> Result:
        return self.inspector.get_element_attribute(by, value, attribute, timeout)

    def get_element_property(self, by: str, value: str, property: str, timeout: float | None = None) -> Result:
        return self.inspector.get_element_property(by, value, property, timeout)

    def get_element_css_value(self, by: str, value: str, css_property: str, timeout: float | None = None) -> Result:
        return self.inspector.get_element_css_value(by, value, css_property, timeout)

    def is_element_displayed(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.inspector.is_element_displayed(by, value, timeout)

    def is_element_enabled(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.inspector.is_element_enabled(by, value, timeout)

    def is_element_selected(self, by: str, value: str, timeout: float | None = None) -> Result:
        return self.inspector.is_element_selected(by, value, timeout)

    # Keyboard
    def press_key(self, key: str) -> Result:
        return self.actions.press_key(key)

    def press_key_combo(self, keys: list[str]) -> Result:
        return self.actions.press_key_combo(keys)

    # Frames, windows and tabs
    def switch_to_frame(self, frame_reference: Any) -> Result:
        return self.windows.switch_to_frame(frame_reference)

    def switch_to_default_content(self) -> Result:
        return self.windows.switch_to_default_content()

    def switch_to_window(self, window_handle: str) -> Result:
        return self.windows.switch_to_window(window_handle)

    def get_window_handles(self) -> Result:
        return self.windows.get_window_handles()

    def get_current_window_handle(self) -> Result:
        return self.windows.get_current_window_handle()

    def close_current_window(self) -> Result:
        return self.windows.close_current_window()

    def open_new_window(self, kind: str | None = "tab") -> Result:
        return self.windows.open_new_window(kind)

    # Page analysis
    def get_all_links(self) -> Result:
        return self.analyzer.get_all_links()

    def get_all_forms(self) -> Result:
        return self.analyzer.get_all_forms()

    def get_all_buttons(self) -> Result:
        return self.analyzer.get_all_buttons()

    def get_page_summary(self) -> Result:
        return self.analyzer.get_page_summary()

    def get_page_metadata(self) -> Result:
        return self.analyzer.get_page_metadata()

    # Accessibility and console
    def run_accessibility_scan(
        self,
        context_selector: str | None = None,
        axe_options: dict[str, Any] | None = None,
        save_path: str | None = None,
    ) -> Result:
        return self.accessibility.run_accessibility_scan(context_selector, axe_options, save_path)

    def get_browser_console(self, level: str | None = None, since: float | None = None) -> Result:
        return self.console.get_browser_console(level, since)
