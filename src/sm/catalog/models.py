"""Pydantic models for the tool catalog."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """One servable tool: name, description and JSON Schema for its arguments."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique tool name used in tools/call")
    description: str = Field(description="Human description shown to the agent")
    group: str = Field(description="Capability area the tool belongs to")
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []},
        description="JSON Schema for the argument object, served verbatim",
    )

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))


class ToolGroup(BaseModel):
    name: str
    tools: list[dict[str, Any]] = Field(default_factory=list)


class CatalogFile(BaseModel):
    """Top-level layout of tools.yaml (``shared`` holds YAML anchors only)."""

    version: int = 1
    shared: dict[str, Any] = Field(default_factory=dict)
    groups: list[ToolGroup] = Field(default_factory=list)
