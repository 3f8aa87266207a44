"""Smoke tests for the sm-serve CLI."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def _run(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    """Run the CLI module with the in-tree sources importable."""
    python_path = os.pathsep.join(filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "sm_serve.cli", *args],
        capture_output=True,
        text=True,
        timeout=60,
        env={**os.environ, "PYTHONPATH": python_path, **(env or {})},
    )


@pytest.mark.smoke
@pytest.mark.serve
def test_sm_serve_help() -> None:
    """Verify sm-serve --help runs successfully."""
    result = _run("--help")

    assert result.returncode == 0
    assert "Selenium MCP server" in result.stdout


@pytest.mark.smoke
@pytest.mark.serve
def test_sm_serve_version() -> None:
    """Verify sm-serve --version prints the package version."""
    import sm

    result = _run("--version")

    assert result.returncode == 0
    assert f"sm-serve {sm.__version__}" in result.stdout


@pytest.mark.smoke
@pytest.mark.serve
def test_sm_serve_tools_lists_allow_list(tmp_path: Path) -> None:
    """The tools command honours --tools."""
    result = _run("tools", "--tools", "start_browser,navigate", env={"SM_CWD": str(tmp_path)})

    assert result.returncode == 0
    assert "Served tools (2)" in result.stdout
    assert "navigate" in result.stdout
    assert "get_page_summary" not in result.stdout


@pytest.mark.smoke
@pytest.mark.serve
def test_sm_serve_bad_config(tmp_path: Path) -> None:
    """An invalid config file exits with an error before serving."""
    config = tmp_path / "sm-serve.yaml"
    config.write_text("log_level: LOUD\n")

    result = _run("tools", "--config", str(config))

    assert result.returncode == 1
    assert "Configuration error" in result.stderr
