# welcome_art/ui/display/template_listing.py
# Formatting of template listings (simple, detailed table, detail blocks, json) & previews

from __future__ import annotations

import json
from datetime import datetime
from typing import Dict

from rich.markup import escape

from ...art_io.console import console
from ...art_io.render import UNKNOWN
from ...art_io.templates import ResolvedTemplate, template_record
from ...cli.logic import TemplateListing, TemplatePreview
from ...config.settings import Scope
from ...core.constants import ListMode
from ..core.rich_components import Text, themed_table
from ..theming.theme_engine import ArtColors, accent_gradient

MODIFIED_FORMAT = "%Y-%m-%d %H:%M"

# concrete colour so tables render before the theme is pushed
HEADER_STYLE = f"bold {ArtColors.ACCENT_PRIMARY}"


def format_modified(timestamp: float) -> str:
    if not timestamp:
        return UNKNOWN
    try:
        return datetime.fromtimestamp(timestamp).strftime(MODIFIED_FORMAT)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN


# * JSON document for `list --format json`
def listing_json(listing: TemplateListing) -> str:
    payload = {
        "templates": [template_record(entry) for entry in listing.entries],
        "total_count": listing.total,
    }
    return json.dumps(payload, indent=2)


def _print_simple(listing: TemplateListing) -> None:
    for entry in listing.entries:
        console.print(entry.template.name, markup=False, highlight=False)


def _print_table(listing: TemplateListing) -> None:
    table = themed_table(show_header=True, header_style=HEADER_STYLE)
    for column in ("NAME", "SOURCE", "TITLE", "SIZE", "MODIFIED"):
        table.add_column(column, no_wrap=column != "TITLE")
    for entry in listing.entries:
        template = entry.template
        table.add_row(
            Text(template.name),
            Text(entry.scope.value),
            Text(template.title),
            Text(template.size_human),
            Text(format_modified(template.modified)),
        )
    console.print(table)


def _print_blocks(listing: TemplateListing) -> None:
    for entry in listing.entries:
        template = entry.template
        console.print(
            f"[bold art.accent]Template:[/] {escape(template.name)} [dim]({entry.scope.value})[/]"
        )
        for label, value in (
            ("Title", template.title),
            ("Description", template.description),
            ("Author", template.author),
            ("Version", template.version),
            ("Size", template.size_human),
            ("Modified", format_modified(template.modified)),
            ("Path", str(template.path)),
        ):
            console.print(f"  {label}: {escape(value)}", highlight=False)
        console.print()


def _print_counts(listing: TemplateListing) -> None:
    console.print()
    console.print(f"Total templates: {listing.total}", highlight=False)
    if listing.only_scope is None:
        counts: Dict[Scope, int] = listing.counts
        console.print(f"  User templates: {counts.get(Scope.USER, 0)}", highlight=False)
        console.print(f"  System templates: {counts.get(Scope.SYSTEM, 0)}", highlight=False)


# * Print a listing in its mode; --details & --count decorate detailed/simple output
def show_listing(listing: TemplateListing, details: bool = False, count: bool = False) -> None:
    if listing.mode is ListMode.JSON:
        # soft_wrap keeps long paths on one line so the output stays parseable
        console.print(listing_json(listing), markup=False, highlight=False, soft_wrap=True)
    elif listing.mode is ListMode.DETAILED and details:
        _print_blocks(listing)
    elif listing.mode is ListMode.DETAILED:
        _print_table(listing)
    else:
        _print_simple(listing)
    if count:
        _print_counts(listing)


def _heading(title: str) -> None:
    console.print(accent_gradient(title))
    console.print("-" * len(title), style="dim", markup=False)


# * Metadata, content & rendered sample for one template
def show_preview(preview: TemplatePreview) -> None:
    resolved: ResolvedTemplate = preview.resolved
    template = resolved.template
    _heading(f"Template Preview: {template.name}")
    console.print(f"Path: {template.path}", markup=False, highlight=False)
    console.print(f"Source: {resolved.scope.value}", markup=False, highlight=False)
    console.print()
    for label, value in (
        ("Title", template.title),
        ("Description", template.description),
        ("Author", template.author),
        ("Version", template.version),
        ("Font", template.font),
        ("Alignment", template.alignment),
    ):
        console.print(f"{label}: {value}", markup=False, highlight=False)
    console.print()

    _heading("Template Content:")
    console.print(template.content.rstrip("\n"), markup=False, highlight=False)
    console.print()

    _heading("Rendered Preview (with sample text):")
    console.print(preview.rendered.rstrip("\n"), markup=False, highlight=False)
    for message in preview.warnings:
        console.print(f"[warning]Warning:[/] {escape(message)}", highlight=False)
