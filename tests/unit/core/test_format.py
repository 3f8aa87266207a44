"""Unit tests for serialize_result() helper."""

from __future__ import annotations

import json

import pytest

from sm.utils import serialize_result


@pytest.mark.unit
@pytest.mark.core
class TestSerializeResult:
    """Test serialize_result rendering for MCP responses."""

    def test_dict_is_pretty_printed(self):
        """Dicts are indented by two spaces."""
        data = {"success": True, "message": "Navigation successful"}

        result = serialize_result(data)

        assert result == '{\n  "success": true,\n  "message": "Navigation successful"\n}'
        assert json.loads(result) == data

    def test_nested_structures(self):
        data = {"links": [{"text": "Home", "href": "https://example.com/"}]}

        assert json.loads(serialize_result(data)) == data

    def test_non_ascii_kept(self):
        """Page text in other scripts is not escaped."""
        assert "Überschrift" in serialize_result({"text": "Überschrift"})

    def test_unencodable_values_use_str(self):
        """Objects JSON cannot encode fall back to str()."""

        class Handle:
            def __str__(self) -> str:
                return "<element 42>"

        result = serialize_result({"result": Handle()})

        assert json.loads(result) == {"result": "<element 42>"}

    def test_none_result(self):
        assert serialize_result({"result": None}) == '{\n  "result": null\n}'
