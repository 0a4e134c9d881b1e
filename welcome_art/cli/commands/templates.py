# welcome_art/cli/commands/templates.py
# Template listing & preview commands

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import Scope, get_paths
from ...core.constants import ListMode
from ...ui.display.template_listing import show_listing, show_preview
from ..app import app
from ..decorators import handle_welcome_art_error
from ..logic import list_templates, preview_template
from ..params import FormatOpt


# * --system/--user filters; both or neither means the merged view
def _only_scope(system: bool, user: bool) -> Optional[Scope]:
    if system and not user:
        return Scope.SYSTEM
    if user and not system:
        return Scope.USER
    return None


@app.command(name="list", help="List available art templates (or preview one by name)")
@handle_welcome_art_error
def list_cmd(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Template to preview"),
    system: bool = typer.Option(False, "--system", help="List system templates only"),
    user: bool = typer.Option(False, "--user", help="List user templates only"),
    fmt: ListMode = FormatOpt(),
    details: bool = typer.Option(
        False, "--details", help="Show a detail block per template"
    ),
    count: bool = typer.Option(False, "--count", help="Show template counts"),
) -> None:
    paths = get_paths(ctx)
    if name:
        show_preview(preview_template(paths, name))
        return
    # --details decorates the table view; an explicit json format wins
    mode = ListMode.DETAILED if details and fmt is not ListMode.JSON else fmt
    listing = list_templates(paths, mode, _only_scope(system, user))
    show_listing(listing, details=details, count=count)


@app.command(help="Show a template's metadata, content & a rendered sample")
@handle_welcome_art_error
def preview(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Template name (file stem)"),
) -> None:
    show_preview(preview_template(get_paths(ctx), name))
