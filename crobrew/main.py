"""
Crobrew — CLI entrypoint.

Usage:
    crobrew                     # interactive menu
    crobrew search nginx
    crobrew install htop
    python -m crobrew.main --help
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import click

from crobrew import __version__
from crobrew.core.observability.logging_config import setup_logging


class CrobrewGroup(click.Group):
    """Root group: unknown commands and missing arguments exit 1, not click's 2."""

    def resolve_command(
        self,
        ctx: click.Context,
        args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            click.secho(f"❌ {e.format_message()}", fg="red")
            click.echo("Run 'crobrew help' for the list of commands.")
            ctx.exit(1)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.MissingParameter as e:
            e.exit_code = 1
            raise


@click.group(cls=CrobrewGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="crobrew")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to config.yml (default: ~/.config/crobrew/config.yml).",
)
@click.option("--manager", "-m", default=None, help="Use this package manager (skip detection).")
@click.option("--mock", is_flag=True, help="Print commands instead of running them.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    manager: str | None,
    mock: bool,
) -> None:
    """Crobrew — search, install and remove packages with your system's package manager."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["manager"] = manager
    ctx.obj["mock"] = mock

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("CROBREW_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("CROBREW_LOG_FILE"),
        log_file_level=os.environ.get("CROBREW_LOG_FILE_LEVEL"),
    )

    if mock and not quiet:
        click.secho("[mock] commands are printed, not executed", fg="yellow")

    if ctx.invoked_subcommand is None:
        ctx.invoke(interactive)


@cli.command("help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show this message."""
    click.echo(ctx.find_root().get_help())


# ── Register commands from crobrew/ui/cli/ ────────────────────────

from crobrew.ui.cli.interactive import interactive  # noqa: E402
from crobrew.ui.cli.packages import install, managers, remove, search, update  # noqa: E402

cli.add_command(update)
cli.add_command(search)
cli.add_command(install)
cli.add_command(remove)
cli.add_command(managers)
cli.add_command(interactive)


if __name__ == "__main__":
    cli()
