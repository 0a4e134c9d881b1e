# welcome_art/ui/display/settings_display.py
# Display of per-scope settings, raw config files, validation reports & well-known paths

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Mapping

from rich.markup import escape

from ...art_io.console import console
from ...cli.logic import ConfigView, SettingsSnapshot
from ...core.exceptions import LineError
from ..core.rich_components import Text, themed_table
from ..theming.styled_helpers import styled_setting_line
from ..theming.theme_engine import ArtColors, accent_gradient

HEADER_STYLE = f"bold {ArtColors.ACCENT_PRIMARY}"

SETTING_LABELS: Dict[str, str] = {
    "template": "Template",
    "welcome_text": "Welcome Text",
    "color_enabled": "Color Enabled",
}


def _scope_block(title: str, path: Path, values: Mapping[str, str], exists: bool, missing: str) -> None:
    console.print(f"[bold]{title}[/] [dim]({escape(str(path))})[/]", highlight=False)
    if not exists:
        console.print(f"  [dim]{missing}[/]")
        return
    for key, label in SETTING_LABELS.items():
        console.print(" ", *styled_setting_line(label, values.get(key, "")), highlight=False)


# * `set show`: system, user & effective display settings
def show_settings(snapshot: SettingsSnapshot, system_path: Path, user_path: Path) -> None:
    console.print(accent_gradient("Current Welcome-Art Settings"))
    console.print()
    _scope_block(
        "System Configuration",
        system_path,
        snapshot.system,
        snapshot.system_exists,
        "(No system configuration found)",
    )
    console.print()
    _scope_block(
        "User Configuration",
        user_path,
        snapshot.user,
        snapshot.user_exists,
        "(No user configuration found)",
    )
    console.print()
    console.print("[bold]Effective Settings[/]")
    for key, label in SETTING_LABELS.items():
        console.print(" ", *styled_setting_line(label, snapshot.effective[key]), highlight=False)
    console.print()
    console.print("[dim]Note: User settings override system settings.[/]")


# * `config show`: raw file contents under a header per scope
def show_config_views(views: Iterable[ConfigView]) -> None:
    for index, view in enumerate(views):
        if index:
            console.print()
        title = f"{view.scope.value.capitalize()} Configuration ({view.path}):"
        console.print(accent_gradient(title))
        console.print("=" * len(title), style="dim", markup=False)
        if view.text is None:
            console.print(f"(No {view.scope.value} configuration found)", style="dim", markup=False)
        else:
            console.print(view.text.rstrip("\n"), markup=False, highlight=False)


# * Line-level syntax report for `config validate` & `config edit`
def show_validation(path: Path, errors: List[LineError]) -> None:
    if not errors:
        console.print(f"[success]✓[/] Configuration is valid: {escape(str(path))}", highlight=False)
        return
    console.print(
        f"[error]✗[/] {len(errors)} syntax error(s) in {escape(str(path))}", highlight=False
    )
    for error in errors:
        console.print(f"  {error}", markup=False, highlight=False)


# * `config path`: every well-known location
def show_paths(paths: Mapping[str, str]) -> None:
    table = themed_table(show_header=True, header_style=HEADER_STYLE)
    table.add_column("NAME", no_wrap=True)
    table.add_column("PATH")
    for name, value in paths.items():
        table.add_row(Text(name), Text(value))
    console.print(table)
