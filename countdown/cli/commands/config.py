# countdown/cli/commands/config.py
# Settings mgmt subcommands (show/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from typing import Any

import typer

from ...config.settings import settings_manager, known_keys
from ...timer_io.console import console
from ..app import app
from ..decorators import handle_countdown_error

config_app = typer.Typer(rich_markup_mode="rich", help="Manage countdown defaults")
app.add_typer(config_app, name="config")


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# * Show current settings when no subcommand provided
@config_app.callback(invoke_without_command=True)
@handle_countdown_error
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is not None:
        return
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    for key, value in settings_manager.list_settings().items():
        console.print(f"[cyan]{key}[/] = {json.dumps(value)}")


# * Print a single setting as JSON
@config_app.command()
@handle_countdown_error
def get(key: str) -> None:
    if key not in known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    typer.echo(json.dumps(settings_manager.get(key)))


# * Set a setting; VALUE is parsed as JSON when possible
@config_app.command("set")
@handle_countdown_error
def set_value(key: str, value: str) -> None:
    settings_manager.set(key, _coerce_value(value))
    console.print(f"[green]✓[/] {key} = {json.dumps(settings_manager.get(key))}")


# * Restore default settings
@config_app.command()
@handle_countdown_error
def reset() -> None:
    settings_manager.reset()
    console.print("[green]✓[/] Settings reset to defaults")


# * Print the config file location
@config_app.command()
def path() -> None:
    typer.echo(str(settings_manager.config_path))
