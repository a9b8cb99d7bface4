"""
Spezi Storage CLI - Command-line interface.

Inspect storage keys and read or change app storage values from the terminal.
"""

import math
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from spezi_storage.config import configure_logging
from spezi_storage.core.exceptions import SpeziStorageError
from spezi_storage.core.keys import StorageKeys, all_keys, lookup_key
from spezi_storage.onboarding.flow import FeatureFlags, OnboardingFlag, apply_testing_setup
from spezi_storage.storage.app_storage import AppStorage, StorageValue
from spezi_storage.template import TemplatePackage

app = typer.Typer(
    name="spezi-storage",
    help="Spezi Storage - storage keys and onboarding state",
    no_args_is_help=True,
)
console = Console()


class ValueType(str, Enum):
    """Value types accepted by the set command."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"


def _parse_value(raw: str, value_type: ValueType) -> StorageValue:
    """Convert a command-line string into a storage value."""
    if value_type == ValueType.BOOL:
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise typer.BadParameter(f"Not a boolean: {raw}")
    if value_type == ValueType.INT:
        try:
            return int(raw)
        except ValueError:
            raise typer.BadParameter(f"Not an integer: {raw}")
    if value_type == ValueType.FLOAT:
        try:
            number = float(raw)
        except ValueError:
            raise typer.BadParameter(f"Not a number: {raw}")
        if not math.isfinite(number):
            raise typer.BadParameter(f"Not a finite number: {raw}")
        return number
    return raw


def _storage(ctx: typer.Context) -> AppStorage:
    return AppStorage(ctx.obj.get("storage_path") if ctx.obj else None)


def _fail(error: SpeziStorageError) -> NoReturn:
    console.print(f"[red]{escape(str(error))}[/red]")
    raise typer.Exit(1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    storage: Optional[Path] = typer.Option(
        None, "--storage", "-s", help="Path to the app storage document"
    ),
):
    """Spezi Storage - storage keys and onboarding state."""
    try:
        configure_logging()
    except SpeziStorageError as e:
        _fail(e)
    ctx.obj = {"storage_path": storage}


@app.command()
def keys():
    """List all registered storage keys."""
    table = Table(title="Storage Keys")
    table.add_column("Name", style="cyan")
    table.add_column("Key", style="green")

    for name, value in all_keys().items():
        table.add_row(name, value)

    console.print(table)


@app.command()
def get(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Registered key name or literal"),
):
    """Show the stored value for a key."""
    try:
        storage_key = lookup_key(key)
        store = _storage(ctx)
        if not store.contains(storage_key):
            console.print(f"[yellow]{storage_key.value} is not set[/yellow]")
            return
        console.print(f"{storage_key.value} = {escape(repr(store.get(storage_key)))}")
    except SpeziStorageError as e:
        _fail(e)


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Registered key name or literal"),
    value: str = typer.Argument(..., help="Value to store"),
    value_type: ValueType = typer.Option(ValueType.BOOL, "--type", "-t", help="Value type"),
):
    """Store a value under a key."""
    parsed = _parse_value(value, value_type)
    try:
        storage_key = lookup_key(key)
        _storage(ctx).set(storage_key, parsed)
    except SpeziStorageError as e:
        _fail(e)
    console.print(f"[green]Stored[/green] {storage_key.value} = {escape(repr(parsed))}")


@app.command()
def remove(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Registered key name or literal"),
):
    """Remove the stored value for a key."""
    try:
        storage_key = lookup_key(key)
        removed = _storage(ctx).remove(storage_key)
    except SpeziStorageError as e:
        _fail(e)

    if removed:
        console.print(f"[green]Removed[/green] {storage_key.value}")
    else:
        console.print(f"[yellow]{storage_key.value} was not set[/yellow]")


@app.command()
def onboarding(
    ctx: typer.Context,
    key: str = typer.Option(
        StorageKeys.ONBOARDING_FLOW_COMPLETE.name, "--key", "-k", help="Onboarding key"
    ),
    complete: bool = typer.Option(False, "--complete", help="Mark onboarding completed"),
    reset: bool = typer.Option(False, "--reset", help="Mark onboarding not completed"),
):
    """Show or change an onboarding completion flag."""
    if complete and reset:
        console.print("[red]--complete and --reset are mutually exclusive[/red]")
        raise typer.Exit(1)

    try:
        storage_key = lookup_key(key)
        flag = OnboardingFlag(_storage(ctx), storage_key)
        if complete:
            flag.complete()
        elif reset:
            flag.reset()
        completed = flag.completed
    except SpeziStorageError as e:
        _fail(e)

    status_style = "green" if completed else "yellow"
    status = "completed" if completed else "not completed"
    console.print(
        f"{storage_key.value}: [{status_style}]{status}[/{status_style}]"
    )


@app.command("testing-setup")
def testing_setup(
    ctx: typer.Context,
    show_onboarding: bool = typer.Option(
        False, "--show-onboarding", help="Reset the onboarding completion flag"
    ),
):
    """Prepare app storage for a test launch."""
    try:
        flags = FeatureFlags.load([])
        if show_onboarding:
            flags = FeatureFlags(show_onboarding=True)
        reset_keys = apply_testing_setup(_storage(ctx), flags)
    except SpeziStorageError as e:
        _fail(e)

    if not reset_keys:
        console.print("[yellow]Nothing to reset[/yellow]")
        return

    for storage_key in reset_keys:
        console.print(f"[green]Reset[/green] {storage_key.value}")


@app.command()
def about():
    """Show package information."""
    template = TemplatePackage()
    console.print(Panel.fit(f"[bold blue]Spezi Storage[/bold blue]\nProvided by {template.stanford}"))


@app.command()
def version():
    """Show version information."""
    from spezi_storage import __version__

    console.print(f"Spezi Storage v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
