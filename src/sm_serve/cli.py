"""Serve CLI entry point for the Selenium MCP server."""

from __future__ import annotations

import os
import signal
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

import sm

app = typer.Typer(
    name="sm-serve",
    help="Selenium MCP server - browser automation tools over stdio.",
    no_args_is_help=False,
    add_completion=False,
)

# Console for stderr output (stdout is reserved for MCP JSON-RPC)
_stderr_console = Console(stderr=True)


def _version_callback(value: bool | None) -> None:
    if value:
        typer.echo(f"sm-serve {sm.__version__}")
        raise typer.Exit()


def _apply_overrides(config: Path | None, tools: str | None) -> None:
    """Load config and the allow-list override before the server module imports."""
    from sm.config import get_config
    from sm.config.loader import TOOLS_ENV_VAR

    if tools is not None:
        os.environ[TOOLS_ENV_VAR] = tools

    try:
        get_config(config, reload=config is not None)
    except (FileNotFoundError, ValueError) as e:
        _stderr_console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1) from e


def _print_startup_banner() -> None:
    """Print startup message to stderr."""
    _stderr_console.print(
        f"[bold cyan]Selenium MCP Server[/bold cyan] [dim]v{sm.__version__}[/dim]"
    )
    _stderr_console.print(
        "Running on stdio transport. Press [bold yellow]Ctrl+C[/bold yellow] to stop."
    )


def _setup_signal_handlers() -> None:
    """Set up signal handlers for clean exit."""

    def handle_signal(signum: int, _frame: object) -> None:
        """Handle termination signals gracefully."""
        sig_name = signal.Signals(signum).name
        _stderr_console.print(f"\n[dim]Received {sig_name}, shutting down...[/dim]")
        # sys.exit() inside the asyncio loop can need several Ctrl+C presses
        os._exit(0)

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)


_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to sm-serve.yaml configuration file.",
    exists=True,
    readable=True,
)

_TOOLS_OPTION = typer.Option(
    None,
    "--tools",
    "-t",
    help="Tool allow-list: comma-separated names, a JSON array, or '*' for all.",
)


@app.command("tools")
def list_tools(
    config: Path | None = _CONFIG_OPTION,
    tools: str | None = _TOOLS_OPTION,
) -> None:
    """List the tools this configuration would serve."""
    _apply_overrides(config, tools)

    from sm.catalog import served_tools
    from sm.config import get_config

    served = served_tools(get_config().allowed_tools_source())

    table = Table(title=f"Served tools ({len(served)})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Group", style="magenta")
    table.add_column("Description")
    for tool in served:
        table.add_row(tool.name, tool.group, tool.description)

    Console().print(table)


@app.callback(invoke_without_command=True)
def serve(
    ctx: typer.Context,
    _version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = _CONFIG_OPTION,
    tools: str | None = _TOOLS_OPTION,
) -> None:
    """Run the Selenium MCP server over stdio transport.

    The server is normally launched by an MCP client. Browser sessions are
    started on demand by the start_browser tool.

    Examples:
        sm-serve
        sm-serve --config .selenium-mcp/sm-serve.yaml
        sm-serve --tools start_browser,navigate,get_page_summary
    """
    # Only run if no subcommand was invoked (handles --help automatically)
    if ctx.invoked_subcommand is not None:
        return

    _apply_overrides(config, tools)

    # Set up signal handlers for clean exit (before starting server)
    _setup_signal_handlers()

    # Print startup banner to stderr (stdout is for MCP JSON-RPC)
    _print_startup_banner()

    # The server module reads config and registers tools at import
    from sm.server import main as server_main

    server_main()


def cli() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    cli()
