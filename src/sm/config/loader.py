"""YAML configuration loading for Selenium MCP.

Loads sm-serve.yaml with logging, tool allow-list and accessibility settings.

Example sm-serve.yaml:

    log_level: DEBUG
    log_dir: ~/.selenium-mcp/logs

    # Serve only these tools ("*" or absent serves the full catalog)
    tools:
      - start_browser
      - navigate
      - get_page_summary

    accessibility:
      axe_script_path: vendor/axe.min.js
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from loguru import logger
from pydantic import BaseModel, Field

from sm.paths import find_config_file

# Current config schema version
CURRENT_CONFIG_VERSION = 1

# Environment variable consulted for the tool allow-list before config
TOOLS_ENV_VAR = "MCP_TOOLS"

DEFAULT_AXE_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/axe-core@4.10.2/axe.min.js"


class AccessibilityConfig(BaseModel):
    """Where the axe-core audit script comes from."""

    axe_script_path: str = Field(
        default="",
        description="Local axe.min.js to inject (takes precedence over the URL)",
    )
    axe_script_url: str = Field(
        default=DEFAULT_AXE_SCRIPT_URL,
        description="URL to download axe.min.js from when no local path is set",
    )
    download_timeout: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Download timeout in seconds",
    )


class SeleniumMcpConfig(BaseModel):
    """Root configuration for sm-serve."""

    version: int = Field(
        default=CURRENT_CONFIG_VERSION,
        description="Config schema version",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_dir: str = Field(
        default="",
        description="Directory for serve.log (empty logs to stderr only)",
    )
    tools: list[str] | str | None = Field(
        default=None,
        description=(
            "Allow-list of served tool names: a list, a JSON array string, "
            "a comma-separated string, or '*' for all"
        ),
    )
    accessibility: AccessibilityConfig = Field(
        default_factory=AccessibilityConfig,
        description="Accessibility scan settings",
    )

    def allowed_tools_source(self) -> list[str] | str | None:
        """Raw allow-list value, MCP_TOOLS taking precedence over config."""
        env_tools = os.getenv(TOOLS_ENV_VAR)
        if env_tools:
            return env_tools
        return self.tools


def load_config(config_path: Path | str | None = None) -> SeleniumMcpConfig:
    """Load Selenium MCP configuration from YAML file.

    Resolution order (when config_path is None):
    1. SM_CONFIG env var
    2. cwd/.selenium-mcp/sm-serve.yaml
    3. ~/.selenium-mcp/sm-serve.yaml
    4. Built-in defaults

    Args:
        config_path: Path to config file (overrides resolution)

    Returns:
        Validated SeleniumMcpConfig

    Raises:
        FileNotFoundError: If an explicit config path doesn't exist
        ValueError: If YAML is invalid or validation fails
    """
    if config_path is None:
        env_config = os.getenv("SM_CONFIG")
        if env_config:
            config_path = Path(env_config)
        else:
            found = find_config_file()
            if found is None:
                logger.debug("No sm-serve.yaml found, using defaults")
                return SeleniumMcpConfig()
            config_path = found
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open() as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Error reading {config_path}: {e}") from e

    if raw_data is None:
        raw_data = {}

    try:
        config = SeleniumMcpConfig.model_validate(raw_data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

    logger.debug(f"Loaded config from {config_path}")
    return config


# Global config instance
_config: SeleniumMcpConfig | None = None


def get_config(
    config_path: Path | str | None = None, reload: bool = False
) -> SeleniumMcpConfig:
    """Get or load the global configuration.

    Args:
        config_path: Path to config file (only used on first load)
        reload: Force reload configuration

    Returns:
        SeleniumMcpConfig instance
    """
    global _config

    if _config is None or reload:
        _config = load_config(config_path)

    return _config
