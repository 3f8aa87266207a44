"""Browser console log retrieval.

Entries come from the driver's ``browser`` log, which Chromium drivers fill
when started with logging preferences (see BrowserManager). Each entry is a
dict with ``level``, ``message``, ``source`` and ``timestamp`` (ms since epoch).
"""

from __future__ import annotations

from typing import Any

from sm.browser.session import BaseManager
from sm.errors import reraise

CONSOLE_LEVELS = ("ALL", "SEVERE", "WARNING", "INFO", "DEBUG")


def filter_entries(
    entries: list[dict[str, Any]], level: str | None = None, since: float | None = None
) -> list[dict[str, Any]]:
    """Keep entries at level (ALL or None keeps every level) newer than since."""
    wanted = (level or "ALL").upper()
    kept = []
    for entry in entries:
        if wanted != "ALL" and str(entry.get("level", "")).upper() != wanted:
            continue
        if since is not None and entry.get("timestamp", 0) <= since:
            continue
        kept.append(entry)
    return kept


class ConsoleManager(BaseManager):
    def get_browser_console(
        self, level: str | None = None, since: float | None = None
    ) -> dict[str, Any]:
        driver = self.ensure_session()
        with reraise("Failed to read browser console"):
            entries = driver.get_log("browser")
        return {"logs": filter_entries(entries, level, since)}
