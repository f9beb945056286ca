"""
Interactive menu — the default when crobrew runs without a command.

Errors are printed and the menu comes back; only "Exit" or end of
input leaves the loop.
"""

from __future__ import annotations

import click

from crobrew.core.services.dispatcher import DispatchError, Dispatcher
from crobrew.ui.cli.packages import resolve_dispatcher

BANNER = r"""
     ____           _
    / ___|_ __ ___ | |__  _ __ _____      __
   | |   | '__/ _ \| '_ \| '__/ _ \ \ /\ / /
   | |___| | | (_) | |_) | | |  __/\ V  V /
    \____|_|  \___/|_.__/|_|  \___| \_/\_/
"""

_MENU = (
    "Update package list",
    "Search packages",
    "Install a package",
    "Remove a package",
    "Exit",
)


def _ask(text: str) -> str:
    return click.prompt(text, default="", show_default=False).strip()


def _update(dispatcher: Dispatcher) -> None:
    click.echo("Updating package list...")
    output = dispatcher.update()
    if output.strip():
        click.echo(output.rstrip())
    click.secho("Package list updated successfully!", fg="green")


def _search(dispatcher: Dispatcher) -> None:
    query = _ask("Enter search term (or press Enter to list all)")
    click.echo("Searching packages...")
    results = dispatcher.search(query)
    click.secho("\nAvailable packages:", bold=True)
    click.echo(results.rstrip())


def _install(dispatcher: Dispatcher) -> None:
    name = _ask("Enter package name")
    if not name:
        click.secho("Package name cannot be empty.", fg="yellow")
        return
    click.echo(f"Installing {name}...")
    dispatcher.install(name)
    click.secho(f"Installed {name}.", fg="green")


def _remove(dispatcher: Dispatcher) -> None:
    name = _ask("Enter package name")
    if not name:
        click.secho("Package name cannot be empty.", fg="yellow")
        return
    click.echo(f"Removing {name}...")
    dispatcher.remove(name)
    click.secho(f"Removed {name}.", fg="green")


_HANDLERS = {
    "1": _update,
    "2": _search,
    "3": _install,
    "4": _remove,
}


@click.command()
@click.pass_context
def interactive(ctx: click.Context) -> None:
    """Menu-driven session (default with no command)."""
    dispatcher = resolve_dispatcher(ctx)

    click.secho("Welcome to Crobrew - Cross-platform Package Manager", bold=True)
    click.echo(BANNER)
    click.echo(f"Using package manager: {dispatcher.profile.name}")

    while True:
        click.echo("\nOptions:")
        for number, label in enumerate(_MENU, start=1):
            click.echo(f"{number}. {label}")

        try:
            choice = _ask(f"\nChoose an option (1-{len(_MENU)})")
            if choice == str(len(_MENU)):
                break

            handler = _HANDLERS.get(choice)
            if handler is None:
                click.echo("Invalid option. Please try again.")
                continue

            handler(dispatcher)
        except DispatchError as e:
            click.secho(f"Error: {e}", fg="red")
        except click.Abort:
            # end of input
            click.echo()
            break

    click.echo("Thank you for using Crobrew!")
