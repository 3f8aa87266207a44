"""Path resolution for Selenium MCP global and project directories.

Selenium MCP uses a two-tier directory structure:
- Global: ~/.selenium-mcp/ (user-wide settings)
- Project: .selenium-mcp/ (project-specific config)

Directories are never created implicitly; a missing directory means defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

# Directory names
GLOBAL_DIR_NAME = ".selenium-mcp"
PROJECT_DIR_NAME = ".selenium-mcp"

CONFIG_FILENAME = "sm-serve.yaml"


def get_effective_cwd() -> Path:
    """Get the working directory used for project config lookup.

    SM_CWD overrides the process working directory, which lets MCP clients
    that spawn the server from an arbitrary directory point it at a project.
    """
    env_cwd = os.getenv("SM_CWD")
    if env_cwd:
        return Path(env_cwd).expanduser().resolve()
    return Path.cwd()


def get_global_dir() -> Path:
    """Get the global config directory (~/.selenium-mcp/)."""
    return Path.home() / GLOBAL_DIR_NAME


def get_project_dir() -> Path | None:
    """Get the project config directory if it exists."""
    project_dir = get_effective_cwd() / PROJECT_DIR_NAME
    if project_dir.is_dir():
        return project_dir
    return None


def find_config_file() -> Path | None:
    """Locate sm-serve.yaml without an explicit path.

    Resolution order:
    1. cwd/.selenium-mcp/sm-serve.yaml
    2. ~/.selenium-mcp/sm-serve.yaml

    Returns:
        Path to the first existing config file, or None
    """
    project_dir = get_project_dir()
    if project_dir is not None:
        project_config = project_dir / CONFIG_FILENAME
        if project_config.exists():
            return project_config

    global_config = get_global_dir() / CONFIG_FILENAME
    if global_config.exists():
        return global_config

    return None
