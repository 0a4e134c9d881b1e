# welcome_art/cli/commands/config.py
# Config file subcommands (show/validate/reset/edit/path)

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from ...art_io.console import console
from ...config.settings import Scope, WelcomeArtPaths, get_paths
from ...core.constants import ShowTarget
from ...core.exceptions import InvalidSyntaxError
from ...core.verbose import warn
from ...ui.display.settings_display import (
    show_config_views,
    show_paths,
    show_validation,
)
from ...ui.theming.styled_helpers import styled_success_line
from ..app import app
from ..decorators import handle_welcome_art_error
from ..logic import edit_config, reset_config, show_config, validate_config_file
from ..params import ConfigFileArg, ScopeOpt, scope_from_flag

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich",
    help="[art.accent2]Inspect, validate & edit configuration files[/]",
)
app.add_typer(config_app, name="config")


# * Print raw config file contents for one or both scopes
@config_app.command(help="Show raw configuration file contents")
@handle_welcome_art_error
def show(
    ctx: typer.Context,
    target: ShowTarget = typer.Argument(
        ShowTarget.BOTH, case_sensitive=False, help="system, user or both"
    ),
) -> None:
    show_config_views(show_config(get_paths(ctx), target))


# * Line-level syntax check; exit code 3 on any malformed line
@config_app.command(help="Validate a configuration file's syntax")
@handle_welcome_art_error
def validate(path: Path = ConfigFileArg()) -> None:
    errors = validate_config_file(path)
    if errors:
        raise InvalidSyntaxError(
            f"{len(errors)} syntax error(s) in {path}", errors, path
        )
    show_validation(path, errors)


# * Restore the user config from the packaged template
@config_app.command(help="Reset a configuration file to its template")
@handle_welcome_art_error
def reset(
    ctx: typer.Context,
    scope: Scope = typer.Argument(Scope.USER, case_sensitive=False, help="user or system"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    paths = get_paths(ctx)
    backup = reset_config(paths, scope, force)
    console.print(*styled_success_line("User configuration reset to template"))
    if backup is not None:
        console.print(f"[dim]Backup: {escape(str(backup))}[/]", highlight=False)


def _open_editor(path: Path) -> None:
    # $VISUAL / $EDITOR resolution is handled by click
    typer.edit(filename=str(path))


# * Edit a config in $EDITOR, then validate the result
@config_app.command(help="Open a configuration file in your editor")
@handle_welcome_art_error
def edit(ctx: typer.Context, system: bool = ScopeOpt()) -> None:
    paths: WelcomeArtPaths = get_paths(ctx)
    session = edit_config(paths, scope_from_flag(system), _open_editor)
    if session.created:
        console.print(f"[dim]Created {escape(str(session.path))}[/]", highlight=False)
    if session.errors:
        show_validation(session.path, session.errors)
        warn("Configuration has syntax errors; fix them before the next edit", "CONFIG")
        return
    console.print(*styled_success_line("Configuration updated", str(session.path)))


# * Show every well-known location
@config_app.command(help="Show configuration & template paths")
def path(ctx: typer.Context) -> None:
    show_paths(get_paths(ctx).as_dict())
