"""Tool catalog and allow-list filtering.

The catalog is data: ``tools.yaml`` in this package, grouped by capability
area. The allow-list narrows it to the tools a deployment wants to expose.

Usage:
    from sm.catalog import load_catalog, served_tools

    catalog = load_catalog()
    tools = served_tools(config.allowed_tools_source())
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

import yaml
from loguru import logger

from sm.catalog.models import CatalogFile, ToolDescriptor

__all__ = [
    "CATALOG_PACKAGE",
    "ToolDescriptor",
    "filter_tools",
    "load_catalog",
    "parse_allowed_tools",
    "parse_catalog",
    "served_tools",
]

CATALOG_PACKAGE = "sm.catalog"
CATALOG_FILENAME = "tools.yaml"

WILDCARD = "*"


def parse_catalog(text: str) -> tuple[ToolDescriptor, ...]:
    """Parse catalog YAML into descriptors, in file order.

    Raises:
        ValueError: If the YAML is invalid or a tool name repeats
    """
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid tool catalog YAML: {e}") from e

    catalog = CatalogFile.model_validate(raw)
    descriptors: list[ToolDescriptor] = []
    seen: set[str] = set()
    for group in catalog.groups:
        for entry in group.tools:
            descriptor = ToolDescriptor.model_validate({**entry, "group": group.name})
            if descriptor.name in seen:
                raise ValueError(f"Duplicate tool name in catalog: {descriptor.name}")
            seen.add(descriptor.name)
            descriptors.append(descriptor)
    return tuple(descriptors)


@lru_cache(maxsize=1)
def load_catalog() -> tuple[ToolDescriptor, ...]:
    """Load the bundled catalog (cached for the process)."""
    text = resources.files(CATALOG_PACKAGE).joinpath(CATALOG_FILENAME).read_text(
        encoding="utf-8"
    )
    return parse_catalog(text)


def parse_allowed_tools(raw: Any) -> list[str] | None:
    """Normalise an allow-list setting.

    Accepts a list of names, a JSON array string, a comma-separated string or
    the wildcard. Returns None when every tool should be served.

    Examples:
        parse_allowed_tools(None)                    -> None
        parse_allowed_tools("*")                     -> None
        parse_allowed_tools('["navigate", "refresh"]') -> ["navigate", "refresh"]
        parse_allowed_tools("navigate, refresh")     -> ["navigate", "refresh"]
    """
    if raw is None:
        return None
    if isinstance(raw, (list, tuple)):
        return [str(name).strip() for name in raw if str(name).strip()]
    if not isinstance(raw, str):
        return None

    text = raw.strip()
    if not text or text == WILDCARD:
        return None

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        names = [part.strip() for part in text.split(",") if part.strip()]
        return names or None

    if isinstance(parsed, list):
        return [str(name).strip() for name in parsed if str(name).strip()]
    # Valid JSON that is not an array (including "*") means no restriction
    return None


def filter_tools(
    catalog: tuple[ToolDescriptor, ...], allowed: list[str] | None
) -> list[ToolDescriptor]:
    """Narrow catalog to allowed names, never returning an empty list.

    Catalog order is preserved. If nothing matches, the full catalog is served
    and a warning logged.
    """
    if allowed is None:
        return list(catalog)
    wanted = set(allowed)
    if WILDCARD in wanted:
        return list(catalog)

    selected = [tool for tool in catalog if tool.name in wanted]
    if not selected:
        logger.warning(
            f"Tool allow-list {sorted(wanted)} matched no tools; serving all "
            f"{len(catalog)} tools"
        )
        return list(catalog)

    unknown = wanted - {tool.name for tool in selected}
    if unknown:
        logger.warning(f"Ignoring unknown tools in allow-list: {sorted(unknown)}")
    return selected


def served_tools(raw_allowed: Any = None) -> list[ToolDescriptor]:
    """The bundled catalog narrowed by a raw allow-list setting."""
    return filter_tools(load_catalog(), parse_allowed_tools(raw_allowed))
