"""Selenium MCP - browser automation tools for MCP clients.

Features:
- Selenium WebDriver session exposed as a catalog of MCP tools
- Navigation, element location, interaction, inspection and waits
- Page analysis helpers and axe-core accessibility scans
- Configurable allow-list of served tools

Usage:
    # Start MCP server (stdio transport)
    sm-serve

    # With config
    sm-serve --config config/sm-serve.yaml

    # Serve a subset of tools
    MCP_TOOLS='["start_browser","navigate"]' sm-serve
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

try:
    __version__ = version("selenium-mcp-server")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["__version__", "main"]


def __getattr__(name: str) -> Any:
    """Lazy import for server module to avoid loading config at import time."""
    if name == "main":
        from sm.server import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
