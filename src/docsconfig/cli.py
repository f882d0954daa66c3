"""CLI entry point.

Running ``docsconfig`` with no arguments builds the configuration file using
the default settings (overridable through DOCSCONFIG_* variables).
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from docsconfig.core.exceptions import DocsConfigError

app = typer.Typer(
    name="docsconfig",
    help="Build the documentation website configuration from API doc comments",
    invoke_without_command=True,
)
console = Console()


def run_build() -> None:
    """Build the configuration, exiting with status 1 on a build error."""
    from docsconfig.core.builder import ConfigBuilder
    from docsconfig.core.config import get_settings
    from docsconfig.core.log import configure_logging

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    try:
        result = asyncio.run(ConfigBuilder(settings).build())
    except DocsConfigError as e:
        console.print(f"[bold red]Build failed:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    console.print(
        f"[bold]Saved[/bold] {result.output_path}: "
        f"{result.documented}/{result.modules} modules documented "
        f"from {result.packages} packages in {result.duration_seconds:.1f}s"
    )


@app.callback()
def main(ctx: typer.Context) -> None:
    """Build the configuration when no command is given."""
    if ctx.invoked_subcommand is None:
        run_build()


@app.command()
def build() -> None:
    """Build the configuration file."""
    run_build()


@app.command()
def version() -> None:
    """Show version."""
    from docsconfig import __version__

    console.print(f"docsconfig {__version__}")


@app.command()
def info() -> None:
    """Show the resolved build settings."""
    from docsconfig.core.builder import ConfigBuilder
    from docsconfig.core.config import get_settings

    builder = ConfigBuilder(get_settings())
    for key, value in builder.info().items():
        console.print(f"[bold]{key}[/bold]: {value}")


if __name__ == "__main__":
    app()
