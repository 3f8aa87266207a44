"""Keyboard actions: single key presses and chorded combinations."""

from __future__ import annotations

from typing import Any

from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.keys import Keys

from sm.browser.session import BaseManager
from sm.errors import reraise

# Case-insensitive key names accepted by press_key
KEY_NAMES: dict[str, str] = {
    "enter": Keys.ENTER,
    "return": Keys.ENTER,
    "tab": Keys.TAB,
    "escape": Keys.ESCAPE,
    "esc": Keys.ESCAPE,
    "space": Keys.SPACE,
    "backspace": Keys.BACK_SPACE,
    "delete": Keys.DELETE,
    "arrowup": Keys.ARROW_UP,
    "up": Keys.ARROW_UP,
    "arrowdown": Keys.ARROW_DOWN,
    "down": Keys.ARROW_DOWN,
    "arrowleft": Keys.ARROW_LEFT,
    "left": Keys.ARROW_LEFT,
    "arrowright": Keys.ARROW_RIGHT,
    "right": Keys.ARROW_RIGHT,
    "home": Keys.HOME,
    "end": Keys.END,
    "pageup": Keys.PAGE_UP,
    "pagedown": Keys.PAGE_DOWN,
    **{f"f{n}": getattr(Keys, f"F{n}") for n in range(1, 13)},
    "shift": Keys.SHIFT,
    "control": Keys.CONTROL,
    "ctrl": Keys.CONTROL,
    "alt": Keys.ALT,
}

# press_key_combo also understands the platform command key
COMBO_KEY_NAMES: dict[str, str] = {
    **KEY_NAMES,
    "meta": Keys.META,
    "cmd": Keys.META,
}


def resolve_key(name: str, names: dict[str, str] = KEY_NAMES) -> str:
    """Map a key name to its WebDriver key code; unknown names pass through."""
    return names.get(name.lower(), name)


class ActionManager(BaseManager):
    def press_key(self, key: str) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to press key"):
            code = resolve_key(key)
            actions = ActionChains(driver)
            actions.key_down(code)
            actions.key_up(code)
            actions.perform()
        return {"success": True, "message": f"Key '{key}' pressed successfully"}

    def press_key_combo(self, keys: list[str]) -> dict[str, Any]:
        """Press keys as a chord.

        Keys go down left to right and come up in reverse order, all committed
        in one perform() call. ``["ctrl", "shift", "t"]`` releases t first.
        """
        driver = self.ensure_session()
        keys = list(keys or [])
        with reraise("Failed to press key combination"):
            codes = [resolve_key(k, COMBO_KEY_NAMES) for k in keys]
            actions = ActionChains(driver)
            for code in codes:
                actions.key_down(code)
            for code in reversed(codes):
                actions.key_up(code)
            actions.perform()
        return {
            "success": True,
            "message": f"Key combination '{'+'.join(keys)}' pressed successfully",
        }
