"""Result serialization for MCP responses."""

from __future__ import annotations

import json
from typing import Any

__all__ = ["serialize_result"]


def serialize_result(result: Any) -> str:
    """Serialize a tool result as pretty-printed JSON text.

    Browser operations return plain dicts; values JSON cannot encode (for
    example WebElement objects returned by execute_script) fall back to str().
    Non-ASCII text is kept as is.

    Args:
        result: Tool result, normally a dict

    Returns:
        JSON indented by two spaces
    """
    return json.dumps(result, indent=2, ensure_ascii=False, default=str)
