"""Route tool calls to SeleniumClient methods.

ROUTES maps each tool name to the client method it calls and the argument
fields passed to it, in positional order. Missing fields are passed as None
and the browser layer applies its own defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sm.errors import UnknownToolError

if TYPE_CHECKING:
    from sm.browser.client import SeleniumClient

_LOCATE = ("by", "value", "timeout")

ROUTES: dict[str, tuple[str, tuple[str, ...]]] = {
    # session
    "start_browser": ("start_browser", ("browser", "options")),
    "navigate": ("navigate", ("url",)),
    "get_current_url": ("get_current_url", ()),
    "close_browser": ("close_browser", ()),
    "get_title": ("get_title", ()),
    "refresh": ("refresh", ()),
    "go_back": ("go_back", ()),
    "go_forward": ("go_forward", ()),
    # discovery
    "get_page_source": ("get_page_source", ()),
    "find_element": ("find_element", _LOCATE),
    "find_elements": ("find_elements", _LOCATE),
    "take_screenshot": ("take_screenshot", ("outputPath",)),
    "execute_script": ("execute_script", ("script", "args")),
    # inspection
    "get_element_text": ("get_element_text", _LOCATE),
    "get_element_attribute": ("get_element_attribute", ("by", "value", "attribute", "timeout")),
    "get_element_property": ("get_element_property", ("by", "value", "property", "timeout")),
    "is_element_displayed": ("is_element_displayed", _LOCATE),
    "is_element_enabled": ("is_element_enabled", _LOCATE),
    "is_element_selected": ("is_element_selected", _LOCATE),
    "get_element_css_value": ("get_element_css_value", ("by", "value", "cssProperty", "timeout")),
    "scroll_to_element": ("scroll_to_element", _LOCATE),
    # interaction
    "click_element": ("click_element", _LOCATE),
    "send_keys": ("send_keys", ("by", "value", "text", "timeout")),
    "hover_element": ("hover_element", _LOCATE),
    "clear_element": ("clear_element", _LOCATE),
    "double_click_element": ("double_click_element", _LOCATE),
    "right_click_element": ("right_click_element", _LOCATE),
    "drag_and_drop": (
        "drag_and_drop",
        ("sourceBy", "sourceValue", "targetBy", "targetValue", "timeout"),
    ),
    # keyboard
    "press_key": ("press_key", ("key",)),
    "press_key_combo": ("press_key_combo", ("keys",)),
    # file
    "upload_file": ("upload_file", ("by", "value", "filePath", "timeout")),
    # window
    "maximize_window": ("maximize_window", ()),
    "minimize_window": ("minimize_window", ()),
    "set_window_size": ("set_window_size", ("width", "height")),
    "get_window_size": ("get_window_size", ()),
    "switch_to_window": ("switch_to_window", ("windowHandle",)),
    "get_window_handles": ("get_window_handles", ()),
    "get_current_window_handle": ("get_current_window_handle", ()),
    "close_current_window": ("close_current_window", ()),
    "open_new_window": ("open_new_window", ("type",)),
    # frame
    "switch_to_frame": ("switch_to_frame", ("frameReference",)),
    "switch_to_default_content": ("switch_to_default_content", ()),
    # wait
    "wait_for_element": ("wait_for_element", _LOCATE),
    "wait_for_element_visible": ("wait_for_element_visible", _LOCATE),
    "wait_for_element_clickable": ("wait_for_element_clickable", _LOCATE),
    "wait_for_text_present": ("wait_for_text_present", ("by", "value", "text", "timeout")),
    # console
    "get_browser_console": ("get_browser_console", ("level", "since")),
    # page analysis
    "get_all_links": ("get_all_links", ()),
    "get_all_forms": ("get_all_forms", ()),
    "get_all_buttons": ("get_all_buttons", ()),
    "get_page_summary": ("get_page_summary", ()),
    "get_page_metadata": ("get_page_metadata", ()),
    "validate_selectors": ("validate_selectors", ("selectors",)),
    # accessibility
    "run_accessibility_scan": (
        "run_accessibility_scan",
        ("contextSelector", "axeOptions", "savePath"),
    ),
}


def execute_tool_method(
    client: SeleniumClient, tool_name: str, args: dict[str, Any] | None = None
) -> Any:
    """Call the client method routed for tool_name with fields from args.

    Raises:
        UnknownToolError: If tool_name has no route
    """
    try:
        method_name, fields = ROUTES[tool_name]
    except KeyError:
        raise UnknownToolError(f"Unknown tool: {tool_name}") from None
    args = args or {}
    return getattr(client, method_name)(*(args.get(field) for field in fields))
