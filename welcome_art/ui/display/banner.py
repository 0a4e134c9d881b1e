# welcome_art/ui/display/banner.py
# Banner output: template art above the rendered welcome text

from __future__ import annotations

from ...art_io.banner import Banner
from ...art_io.console import console
from ..core.rich_components import Text
from ..theming.theme_engine import rainbow_block


# * Print a composed banner; colour comes from lolcat, else a local rainbow gradient
def show_banner(banner: Banner) -> None:
    for block in (banner.art, banner.text):
        if not block:
            continue
        body = block.rstrip("\n")
        if banner.colored:
            # lolcat output carries ANSI escapes
            console.print(Text.from_ansi(body))
        elif banner.color_enabled:
            console.print(rainbow_block(body))
        else:
            console.print(body, markup=False, highlight=False)
