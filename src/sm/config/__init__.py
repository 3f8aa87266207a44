"""Centralized configuration for Selenium MCP.

Usage:
    from sm.config import get_config, load_config

    config = get_config()
    print(config.log_level)
    print(config.allowed_tools_source())
"""

from sm.config.loader import (
    AccessibilityConfig,
    SeleniumMcpConfig,
    get_config,
    load_config,
)

__all__ = [
    "AccessibilityConfig",
    "SeleniumMcpConfig",
    "get_config",
    "load_config",
]
