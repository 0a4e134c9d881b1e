# welcome_art/art_io/banner.py
# Banner composition from the effective config: placeholder expansion, art rendering & colouring

from __future__ import annotations

import getpass
import os
import re
import socket
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

from ..config.layers import EffectiveConfig
from ..config.settings import DISPLAY_DEFAULTS, DISPLAY_SECTION
from ..core.exceptions import RenderError, TemplateNotFoundError
from ..core.verbose import vlog, vlog_config, warn
from .render import Colorizer, Renderer, render_or_plain
from .templates import Template, TemplateRegistry

PLACEHOLDER_RE = re.compile(r"\{\{([A-Z_]+)\}\}")

UPTIME_PATH = Path("/proc/uptime")


def _user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return os.environ.get("USER", "user")


def _uptime() -> str:
    try:
        seconds = int(float(UPTIME_PATH.read_text().split()[0]))
    except (OSError, ValueError, IndexError):
        return "unknown"
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60
    clock = f"{hours}:{minutes:02d}"
    if days:
        return f"{days} day{'s' if days != 1 else ''}, {clock}"
    return clock


def _load() -> str:
    try:
        return ", ".join(f"{v:.2f}" for v in os.getloadavg())
    except (AttributeError, OSError):
        return "unknown"


# values are computed only for tokens actually present in the text
PLACEHOLDER_PROVIDERS: Dict[str, Callable[[], str]] = {
    "USER": _user,
    "HOSTNAME": socket.gethostname,
    "DATE": lambda: datetime.now().strftime("%Y-%m-%d"),
    "TIME": lambda: datetime.now().strftime("%H:%M:%S"),
    "UPTIME": _uptime,
    "LOAD": _load,
}


# * Expand {{TOKEN}} placeholders; unknown tokens are left untouched
def expand_placeholders(text: str, values: Optional[Mapping[str, str]] = None) -> str:
    cache: Dict[str, str] = dict(values or {})

    def _replace(match: re.Match[str]) -> str:
        token = match.group(1)
        if token not in cache:
            provider = PLACEHOLDER_PROVIDERS.get(token)
            if provider is None:
                return match.group(0)
            cache[token] = provider()
        return cache[token]

    return PLACEHOLDER_RE.sub(_replace, text)


# rendered banner pieces; `colored` tells the display layer whether colour was applied
@dataclass
class Banner:
    template_name: str
    template: Optional[Template]
    art: str
    text: str
    rendered: bool
    color_enabled: bool
    colored: bool = False


# * Build the banner described by the effective configuration
def compose_banner(
    config: EffectiveConfig,
    registry: TemplateRegistry,
    renderer: Optional[Renderer] = None,
    colorizer: Optional[Colorizer] = None,
    values: Optional[Mapping[str, str]] = None,
) -> Banner:
    name = config.get(DISPLAY_SECTION, "template", DISPLAY_DEFAULTS["template"]) or ""
    raw_text = config.get(
        DISPLAY_SECTION, "welcome_text", DISPLAY_DEFAULTS["welcome_text"]
    ) or ""
    color_enabled = config.get_bool(DISPLAY_SECTION, "color_enabled", True)
    vlog_config("template", name)
    vlog_config("color_enabled", color_enabled)

    template: Optional[Template] = None
    try:
        template = registry.get(name).template
    except TemplateNotFoundError as e:
        warn(f"{e}; showing plain welcome text", "DISPLAY")

    welcome = expand_placeholders(raw_text, values)
    font = template.font if template else None
    alignment = template.alignment if template else None
    text, rendered = render_or_plain(renderer or registry.renderer, welcome, font, alignment)

    banner = Banner(
        template_name=name,
        template=template,
        art=template.content if template else "",
        text=text,
        rendered=rendered,
        color_enabled=color_enabled,
    )

    if color_enabled and colorizer is not None:
        try:
            art = colorizer.colorize(banner.art) if banner.art else banner.art
            text = colorizer.colorize(banner.text)
            banner.art, banner.text, banner.colored = art, text, True
        except RenderError as e:
            vlog("RENDER", "Colour filter unavailable; display layer will style text", str(e))
    return banner
