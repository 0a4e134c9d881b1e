# welcome_art/cli/params.py
# Shared Typer option definitions & normalization helpers

from __future__ import annotations

from typing import Any

import typer

from ..config.settings import DISPLAY_SECTION, Scope
from ..core.constants import ListMode


# * --system/--user flag -> Scope (user is the default edit scope)
def scope_from_flag(system: bool) -> Scope:
    return Scope.SYSTEM if system else Scope.USER


def ScopeOpt() -> Any:
    return typer.Option(
        False,
        "--system/--user",
        help="Apply to the system-wide configuration instead of your user configuration",
    )


def SectionOpt() -> Any:
    return typer.Option(
        DISPLAY_SECTION, "--section", "-s", help="Configuration section to write into"
    )


def FormatOpt() -> Any:
    return typer.Option(
        ListMode.SIMPLE,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format: simple, detailed or json",
    )


def ConfigFileArg() -> Any:
    return typer.Argument(
        ...,
        help="Configuration file to validate",
        dir_okay=False,
    )


def LogFileOpt() -> Any:
    return typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    )


__all__ = [
    "scope_from_flag",
    "ScopeOpt",
    "SectionOpt",
    "FormatOpt",
    "ConfigFileArg",
    "LogFileOpt",
]
