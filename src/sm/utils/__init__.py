"""Shared helpers for Selenium MCP."""

from sm.utils.format import serialize_result

__all__ = ["serialize_result"]
