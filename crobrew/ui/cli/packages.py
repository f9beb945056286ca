"""
CLI commands for package operations.

Thin wrappers over ``crobrew.core.services.dispatcher``. The dispatcher
(and with it the selected profile) is built once per process, on first
use, and cached on the click context.
"""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from crobrew.core.services.dispatcher import DispatchError, Dispatcher


def resolve_dispatcher(ctx: click.Context) -> Dispatcher:
    """Return the process dispatcher, detecting the manager on first call."""
    obj = ctx.find_root().obj
    if obj.get("dispatcher") is not None:
        return obj["dispatcher"]

    from crobrew.adapters import MockAdapter, ShellCommandAdapter
    from crobrew.core.config.loader import ConfigError, load_settings
    from crobrew.core.services.detection import select_profile

    try:
        settings = load_settings(obj.get("config_path"))
        if obj.get("manager"):
            settings = settings.model_copy(update={"manager": obj["manager"]})
        profile = select_profile(settings)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    adapter = MockAdapter() if obj.get("mock") else ShellCommandAdapter()
    dispatcher = Dispatcher(profile, adapter, stream_output=settings.stream_output)
    obj["settings"] = settings
    obj["dispatcher"] = dispatcher
    return dispatcher


def _echo_output(output: str) -> None:
    if output.strip():
        click.echo(output.rstrip())


def _fail(error: DispatchError) -> NoReturn:
    click.secho(f"❌ {error}", fg="red")
    sys.exit(1)


# ── Act ─────────────────────────────────────────────────────────


@click.command()
@click.pass_context
def update(ctx: click.Context) -> None:
    """Update the package list."""
    dispatcher = resolve_dispatcher(ctx)
    click.secho("🔄 Updating package list...", fg="cyan")

    try:
        output = dispatcher.update()
    except DispatchError as e:
        _fail(e)

    _echo_output(output)
    click.secho("✅ Package list updated successfully!", fg="green", bold=True)


@click.command()
@click.argument("query", required=False, default="")
@click.pass_context
def search(ctx: click.Context, query: str) -> None:
    """Search packages (no QUERY lists all)."""
    dispatcher = resolve_dispatcher(ctx)
    click.secho("🔍 Searching packages...", fg="cyan")

    try:
        output = dispatcher.search(query)
    except DispatchError as e:
        _fail(e)

    click.secho("\nAvailable packages:", bold=True)
    click.echo(output.rstrip())


@click.command()
@click.argument("package")
@click.pass_context
def install(ctx: click.Context, package: str) -> None:
    """Install PACKAGE."""
    dispatcher = resolve_dispatcher(ctx)
    click.secho(f"📦 Installing {package}...", fg="cyan")

    try:
        output = dispatcher.install(package)
    except DispatchError as e:
        _fail(e)

    _echo_output(output)
    click.secho(f"✅ Installed {package} ({dispatcher.profile.name})", fg="green", bold=True)


@click.command()
@click.argument("package")
@click.pass_context
def remove(ctx: click.Context, package: str) -> None:
    """Remove PACKAGE."""
    dispatcher = resolve_dispatcher(ctx)
    click.secho(f"🗑️  Removing {package}...", fg="cyan")

    try:
        output = dispatcher.remove(package)
    except DispatchError as e:
        _fail(e)

    _echo_output(output)
    click.secho(f"✅ Removed {package} ({dispatcher.profile.name})", fg="green", bold=True)


# ── Observe ─────────────────────────────────────────────────────


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def managers(ctx: click.Context, as_json: bool) -> None:
    """Show candidate package managers and the selected one."""
    from crobrew.core.registry import current_platform, profiles_for

    dispatcher = resolve_dispatcher(ctx)
    settings = ctx.find_root().obj["settings"]
    platform_id = current_platform()
    candidates = profiles_for(platform_id, extra=settings.profiles)
    selected = dispatcher.profile.name

    if as_json:
        click.echo(json.dumps({
            "platform": platform_id,
            "selected": selected,
            "candidates": [p.model_dump(mode="json") for p in candidates],
        }, indent=2))
        return

    click.secho(f"📦 Package managers ({platform_id}):", fg="cyan", bold=True)
    for profile in candidates:
        marker = " ← selected" if profile is dispatcher.profile else ""
        click.echo(f"   • {profile.name:<10} {profile.search}{marker}")
    if not any(p is dispatcher.profile for p in candidates):
        click.echo(f"   • {selected:<10} {dispatcher.profile.search} ← selected")
    click.echo()
