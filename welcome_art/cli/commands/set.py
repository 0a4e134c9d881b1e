# welcome_art/cli/commands/set.py
# Setting subcommands: active template, welcome text, colour & arbitrary keys

from __future__ import annotations

from typing import List

import typer
from rich.markup import escape

from ...art_io.console import console
from ...config.editing import EditResult
from ...config.settings import get_paths
from ...ui.display.settings_display import show_settings
from ...ui.theming.styled_helpers import styled_success_line
from ...ui.theming.theme_engine import accent_gradient
from ..app import app, render_banner
from ..decorators import handle_welcome_art_error
from ..logic import (
    activate_template,
    current_settings,
    set_color,
    set_setting,
    set_welcome_text,
)
from ..params import ScopeOpt, SectionOpt, scope_from_flag

# * Sub-app for set commands; registered on root app
set_app = typer.Typer(
    rich_markup_mode="rich",
    help="[art.accent2]Change the active template & display settings[/]",
)
app.add_typer(set_app, name="set")


def _report(result: EditResult, label: str) -> None:
    console.print(*styled_success_line(label, result.value), highlight=False)
    action = "Created" if result.created else "Updated"
    console.print(
        f"[dim]{action} {result.scope.value} configuration: {escape(str(result.path))}[/]",
        highlight=False,
    )
    if result.backup_path is not None:
        console.print(f"[dim]Backup: {escape(str(result.backup_path))}[/]", highlight=False)


@set_app.command(help="Activate a template by name")
@handle_welcome_art_error
def template(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Template name (file stem)"),
    system: bool = ScopeOpt(),
) -> None:
    result = activate_template(get_paths(ctx), name, scope_from_flag(system))
    _report(result, "Template set to")


@set_app.command(name="welcome-text", help="Set the welcome text (placeholders like {{USER}} allowed)")
@handle_welcome_art_error
def welcome_text(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., help="Welcome text; words are joined by spaces"),
    system: bool = ScopeOpt(),
) -> None:
    result = set_welcome_text(get_paths(ctx), scope_from_flag(system), " ".join(words))
    _report(result, "Welcome text set to")


@set_app.command(help="Turn colour output on or off (on|off|true|false|yes|no|1|0)")
@handle_welcome_art_error
def color(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="on or off"),
    system: bool = ScopeOpt(),
) -> None:
    result = set_color(get_paths(ctx), scope_from_flag(system), value)
    _report(result, "Color enabled set to")


@set_app.command(help="Set an arbitrary key in a configuration section")
@handle_welcome_art_error
def key(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Key to set"),
    value: str = typer.Argument(..., help="Value to store"),
    section: str = SectionOpt(),
    system: bool = ScopeOpt(),
) -> None:
    result = set_setting(get_paths(ctx), scope_from_flag(system), name, value, section)
    _report(result, f"{result.section}.{result.key} set to")


@set_app.command(help="Show system, user & effective display settings")
@handle_welcome_art_error
def show(ctx: typer.Context) -> None:
    paths = get_paths(ctx)
    show_settings(current_settings(paths), paths.system_config, paths.user_config)


@set_app.command(help="Render the banner w/ the current settings")
@handle_welcome_art_error
def test(ctx: typer.Context) -> None:
    console.print(accent_gradient("Testing current configuration..."))
    console.print()
    render_banner(get_paths(ctx))
