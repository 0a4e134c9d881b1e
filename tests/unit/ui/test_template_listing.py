# tests/unit/ui/test_template_listing.py
# Tests for listing formats, previews & banner display

import json

import pytest

from welcome_art.art_io.banner import Banner
from welcome_art.art_io.console import configure_console
from welcome_art.cli.logic import list_templates, preview_template
from welcome_art.config.settings import Scope
from welcome_art.core.constants import ListMode
from welcome_art.ui.display.banner import show_banner
from welcome_art.ui.display.template_listing import (
    format_modified,
    listing_json,
    show_listing,
    show_preview,
)


@pytest.fixture
def recorded():
    return configure_console(width=200, record=True)


@pytest.fixture
def templates(write_template):
    write_template("modern", title="Modern Look", author="Ada")
    write_template("modern", scope="user", title="My Modern")
    write_template("classic", title="Classic")


# * Simple mode prints one name per line
def test_simple(paths, templates, recorded):
    show_listing(list_templates(paths, ListMode.SIMPLE))
    assert recorded.export_text().split() == ["classic", "modern"]


# * JSON lists every template w/ total_count
def test_json(paths, templates):
    payload = json.loads(listing_json(list_templates(paths, ListMode.JSON)))
    assert payload["total_count"] == 2
    names = {t["name"]: t for t in payload["templates"]}
    assert names["modern"]["source"] == "user"
    assert names["modern"]["title"] == "My Modern"
    assert names["classic"]["source"] == "system"


# * Detailed table has headers & titles
def test_detailed_table(paths, templates, recorded):
    show_listing(list_templates(paths, ListMode.DETAILED))
    text = recorded.export_text()
    for header in ("NAME", "SOURCE", "TITLE", "SIZE", "MODIFIED"):
        assert header in text
    assert "My Modern" in text
    assert "Modern Look" not in text


# * --details blocks & --count summary w/ per-root counts
def test_details_and_count(paths, templates, recorded):
    show_listing(list_templates(paths, ListMode.DETAILED), details=True, count=True)
    text = recorded.export_text()
    assert "Template: classic (system)" in text
    assert "  Title: Classic" in text
    assert "Total templates: 2" in text
    assert "User templates: 1" in text
    assert "System templates: 2" in text


# * Scope filter counts only that root
def test_scope_filter_count(paths, templates, recorded):
    listing = list_templates(paths, ListMode.SIMPLE, Scope.SYSTEM)
    show_listing(listing, count=True)
    text = recorded.export_text()
    assert "Total templates: 2" in text
    assert "User templates" not in text


# * Unknown timestamps stay "unknown"
def test_format_modified():
    assert format_modified(0) == "unknown"
    assert len(format_modified(1_700_000_000)) == 16


# * Preview shows metadata, content & the placeholder when figlet is absent
def test_preview(paths, write_template, recorded):
    write_template("modern", title="Modern [Look]", font="slant", body="## not metadata\n<ART>\n")
    show_preview(preview_template(paths, "modern"))
    text = recorded.export_text()
    assert "Template Preview: modern" in text
    assert "Title: Modern [Look]" in text
    assert "<ART>" in text
    assert "(Preview not available)" in text


# * Plain banner when colour is off; art printed above the text
def test_show_banner_plain(recorded):
    banner = Banner("x", None, "[art]\n", "Hello\n", False, color_enabled=False)
    show_banner(banner)
    assert recorded.export_text() == "[art]\nHello\n"


# * ANSI from lolcat is decoded rather than printed raw
def test_show_banner_ansi(recorded):
    banner = Banner("x", None, "", "\x1b[31mHi\x1b[0m\n", False, color_enabled=True, colored=True)
    show_banner(banner)
    assert recorded.export_text() == "Hi\n"


# * Local gradient keeps the characters intact
def test_show_banner_gradient(recorded):
    banner = Banner("x", None, "/\\\n", "Hello there\n", False, color_enabled=True)
    show_banner(banner)
    assert recorded.export_text() == "/\\\nHello there\n"
