"""FastMCP server exposing the Selenium tool catalog.

Every served catalog entry is registered as a CatalogTool whose JSON Schema is
the catalog's input_schema, so tools/list returns the catalog as written.
tools/call goes through call_tool():

  name check -> SeleniumClient (created on first use) -> dispatch -> JSON text

Calls run one at a time in a worker thread because the browser session is a
single shared resource and Selenium's API is blocking. Any failure becomes a
text payload ``Error: <message>`` with the MCP error flag set.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Collection

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from loguru import logger
from selenium.common.exceptions import WebDriverException

from sm.browser.client import SeleniumClient
from sm.catalog import ToolDescriptor, served_tools
from sm.config import get_config
from sm.dispatch import execute_tool_method
from sm.errors import UnknownToolError

# Import logging first to remove Loguru's default console handler
from sm.logging import LogSpan, configure_logging
from sm.utils.format import serialize_result

_config = get_config()

configure_logging(
    log_name="serve", level=_config.log_level, log_dir=_config.log_dir or None
)

SERVED_TOOLS: list[ToolDescriptor] = served_tools(_config.allowed_tools_source())
_served_names = frozenset(tool.name for tool in SERVED_TOOLS)

INSTRUCTIONS = """Selenium browser automation server.

Call start_browser before any other browser tool; close_browser ends the
session. Elements are addressed with a locator strategy (by: id, css, xpath,
name, tag, class, linkText, partialLinkText) and a selector value. Timeouts
are in milliseconds. Use get_page_summary, get_all_links, get_all_forms and
get_all_buttons to discover a page before interacting with it."""


@dataclass(frozen=True)
class ToolCallResult:
    """Text sent back for one tools/call, with the MCP error flag."""

    text: str
    is_error: bool = False


# Global client instance (one browser session per process)
_client: SeleniumClient | None = None

# Serializes tool calls against the shared session
_call_lock = asyncio.Lock()


def _get_client() -> SeleniumClient:
    """Get or create the Selenium client."""
    global _client

    if _client is None:
        _client = SeleniumClient(accessibility=_config.accessibility)

    return _client


async def _run_exclusive(
    client: SeleniumClient, name: str, arguments: dict[str, Any]
) -> Any:
    """Dispatch in a worker thread while holding the call lock.

    A cancelled caller keeps the lock until the worker thread has finished,
    since the thread cannot be interrupted and is still driving the browser.
    """
    async with _call_lock:
        worker = asyncio.ensure_future(
            asyncio.to_thread(execute_tool_method, client, name, arguments)
        )
        try:
            return await asyncio.shield(worker)
        except asyncio.CancelledError:
            await asyncio.wait({worker})
            raise


async def call_tool(
    name: str,
    arguments: dict[str, Any] | None = None,
    *,
    client: SeleniumClient | None = None,
    served: Collection[str] | None = None,
) -> ToolCallResult:
    """Run one tool call and render its outcome as text.

    Never raises: failures of any kind come back with is_error set.

    Args:
        name: Tool name from the request
        arguments: Argument object from the request
        client: Client to use instead of the process-wide one
        served: Names callable in this server (defaults to the served catalog)
    """
    served_names = _served_names if served is None else served

    with LogSpan(span="tool.call", tool=name) as span:
        try:
            if name not in served_names:
                raise UnknownToolError(f"Unknown tool: {name}")
            target = client if client is not None else _get_client()
            result = await _run_exclusive(target, name, arguments or {})
            text = serialize_result(result)
        except Exception as e:
            span.add(error=f"{type(e).__name__}: {e}")
            return ToolCallResult(text=f"Error: {e}", is_error=True)
        span.add(success=True, chars=len(text))
    return ToolCallResult(text=text)


class CatalogTool(Tool):
    """A catalog entry served over MCP with its schema passed through verbatim."""

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor) -> CatalogTool:
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=dict(descriptor.input_schema),
            tags={descriptor.group},
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        outcome = await call_tool(self.name, arguments)
        if outcome.is_error:
            raise ToolError(outcome.text)
        return ToolResult(content=outcome.text)


@asynccontextmanager
async def _lifespan(_server: FastMCP) -> AsyncIterator[None]:
    """Manage server lifecycle - startup and shutdown."""
    with LogSpan(span="mcp.server.start") as start_span:
        start_span.add("toolCount", len(SERVED_TOOLS))

    yield

    with LogSpan(span="mcp.server.stop") as stop_span:
        if _client is not None and _client.session.active:
            try:
                await asyncio.to_thread(_client.close)
                stop_span.add("browserClosed", True)
            except WebDriverException as e:
                logger.warning(f"Failed to close browser on shutdown: {e.msg}")


mcp = FastMCP(
    name="selenium",
    instructions=INSTRUCTIONS,
    lifespan=_lifespan,
)

for _descriptor in SERVED_TOOLS:
    mcp.add_tool(CatalogTool.from_descriptor(_descriptor))


def main() -> None:
    """Run the MCP server over stdio transport."""
    mcp.run(show_banner=False)
