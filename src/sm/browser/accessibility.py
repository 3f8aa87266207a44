"""axe-core accessibility scans.

The axe-core source is read from ``accessibility.axe_script_path`` when set,
otherwise downloaded once per process from ``accessibility.axe_script_url``.
In-page scan failures come back as ``{"error": ...}`` rather than raising.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from sm.browser.session import BaseManager, SessionContext
from sm.config import AccessibilityConfig
from sm.errors import AuditScriptUnavailableError, reraise
from sm.logging import LogSpan

# Runs inside the page; the last argument is the async-script callback
_RUN_AXE_JS = """
var selector = arguments[0];
var options = arguments[1] || {};
var done = arguments[arguments.length - 1];
try {
  var ctx = selector ? document.querySelector(selector) : document;
  window.axe.run(ctx || document, options, function (err, results) {
    if (err) {
      done({error: err && err.message ? err.message : String(err)});
    } else {
      done({results: results});
    }
  });
} catch (e) {
  done({error: e && e.message ? e.message : String(e)});
}
"""


@lru_cache(maxsize=4)
def load_axe_source(path: str, url: str, timeout: float) -> str:
    """Return the axe-core script text from a local file or a URL.

    Raises:
        AuditScriptUnavailableError: When the file cannot be read or the
            download fails
    """
    if path:
        script = Path(path).expanduser()
        try:
            return script.read_text(encoding="utf-8")
        except OSError as e:
            raise AuditScriptUnavailableError(
                f"Cannot read axe-core script {script}: {e.strerror or e}"
            ) from e

    with LogSpan(span="accessibility.download", url=url) as span:
        try:
            with httpx.Client(timeout=timeout, follow_redirects=True) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise AuditScriptUnavailableError(
                f"Downloading axe-core failed ({e.response.status_code}): {url}"
            ) from e
        except httpx.RequestError as e:
            raise AuditScriptUnavailableError(
                f"Downloading axe-core failed: {e}"
            ) from e
        span.add(bytes=len(response.content))
    return response.text


def save_results(results: Any, save_path: str) -> None:
    """Write scan results as indented JSON; failures are logged, not raised."""
    try:
        target = Path(save_path).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(results, indent=2, default=str), encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to save axe results to {save_path}: {e}")


class AccessibilityManager(BaseManager):
    def __init__(
        self, session: SessionContext, config: AccessibilityConfig | None = None
    ) -> None:
        super().__init__(session)
        self.config = config or AccessibilityConfig()

    def run_accessibility_scan(
        self,
        context_selector: str | None = None,
        axe_options: dict[str, Any] | None = None,
        save_path: str | None = None,
    ) -> dict[str, Any]:
        """Inject axe-core and scan the page, or the first match of context_selector.

        Returns the in-page payload, either ``{"results": ...}`` or
        ``{"error": ...}``. Results are also written to save_path when given.
        """
        driver = self.ensure_session()
        with reraise("Failed to run accessibility scan"):
            source = load_axe_source(
                self.config.axe_script_path,
                self.config.axe_script_url,
                self.config.download_timeout,
            )
            driver.execute_script(source)
            payload = driver.execute_async_script(
                _RUN_AXE_JS, context_selector or None, axe_options or {}
            )

        if not isinstance(payload, dict):
            payload = {"error": f"Unexpected scan result: {payload!r}"}
        if save_path and payload.get("results") is not None:
            save_results(payload["results"], save_path)
        return payload
