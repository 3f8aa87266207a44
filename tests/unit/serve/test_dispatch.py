"""Unit tests for routing tool calls to client methods."""

from __future__ import annotations

import inspect
from unittest.mock import MagicMock

import pytest

from sm.browser.client import SeleniumClient
from sm.catalog import load_catalog
from sm.dispatch import ROUTES, execute_tool_method
from sm.errors import UnknownToolError


@pytest.mark.unit
@pytest.mark.serve
def test_every_catalog_tool_has_a_route() -> None:
    """Catalog and routing table describe the same tools."""
    assert {tool.name for tool in load_catalog()} == set(ROUTES)


@pytest.mark.unit
@pytest.mark.serve
@pytest.mark.parametrize("tool", sorted(ROUTES))
def test_route_fields_match_schema_and_method(tool: str) -> None:
    """Routed fields exist in the schema and fit the client method signature."""
    descriptor = {t.name: t for t in load_catalog()}[tool]
    method_name, fields = ROUTES[tool]

    assert set(fields) <= set(descriptor.input_schema.get("properties", {}))
    method = getattr(SeleniumClient, method_name)
    inspect.signature(method).bind(None, *fields)


@pytest.mark.unit
@pytest.mark.serve
class TestExecuteToolMethod:
    """Test argument mapping."""

    def test_arguments_passed_positionally(self):
        client = MagicMock()

        result = execute_tool_method(
            client, "get_element_attribute", {"value": "#q", "by": "css", "attribute": "name"}
        )

        client.get_element_attribute.assert_called_once_with("css", "#q", "name", None)
        assert result is client.get_element_attribute.return_value

    def test_renamed_fields(self):
        client = MagicMock()

        execute_tool_method(
            client,
            "drag_and_drop",
            {"sourceBy": "id", "sourceValue": "a", "targetBy": "css", "targetValue": ".b"},
        )

        client.drag_and_drop.assert_called_once_with("id", "a", "css", ".b", None)

    def test_no_arguments(self):
        client = MagicMock()

        execute_tool_method(client, "get_title")

        client.get_title.assert_called_once_with()

    def test_extra_fields_are_ignored(self):
        client = MagicMock()

        execute_tool_method(client, "navigate", {"url": "https://example.com", "extra": 1})

        client.navigate.assert_called_once_with("https://example.com")

    def test_unknown_tool(self):
        with pytest.raises(UnknownToolError, match="^Unknown tool: teleport$"):
            execute_tool_method(MagicMock(), "teleport", {})
