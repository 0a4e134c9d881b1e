# welcome_art/config/settings.py
# Scopes, well-known paths & display defaults for welcome-art

from __future__ import annotations

import os
from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, NamedTuple, Optional, cast

import typer

from ..core.exceptions import InvalidValueError


# * Configuration/template domain: system (root-owned, shared) or user (per-account)
class Scope(str, Enum):
    SYSTEM = "system"
    USER = "user"

    def __str__(self) -> str:
        return self.value


DEFAULT_SCOPE = Scope.USER

# section holding every key the CLI edits
DISPLAY_SECTION = "display"

# display keys & the values used when neither layer sets them
DISPLAY_DEFAULTS: Dict[str, str] = {
    "template": "default",
    "welcome_text": "Welcome to {{HOSTNAME}}!",
    "color_enabled": "true",
}

TRUE_LITERALS = frozenset({"on", "true", "yes", "1"})
FALSE_LITERALS = frozenset({"off", "false", "no", "0"})

# environment overrides (also read from .env via python-dotenv at startup)
ENV_SYSTEM_DIR = "WELCOME_ART_SYSTEM_DIR"
ENV_USER_CONFIG = "WELCOME_ART_USER_CONFIG"
ENV_USER_DIR = "WELCOME_ART_USER_DIR"
ENV_LOG_FILE = "WELCOME_ART_LOG_FILE"


# * Normalize a boolean literal to its stored form ("true"/"false")
def normalize_bool(raw: str, setting_name: str = "color_enabled") -> str:
    literal = raw.strip().lower()
    if literal in TRUE_LITERALS:
        return "true"
    if literal in FALSE_LITERALS:
        return "false"
    raise InvalidValueError(
        f"Invalid value for {setting_name}: {raw!r}. Use 'on' or 'off'.",
        setting_name,
        raw,
    )


# config file & template directory bound to one scope
class ScopePaths(NamedTuple):
    scope: Scope
    config_file: Path
    templates_dir: Path


# * Well-known locations of every file welcome-art reads or writes
@dataclass
class WelcomeArtPaths:
    system_dir: Path
    user_config: Path
    user_dir: Path
    log_file: Path

    def __post_init__(self) -> None:
        # accept plain strings from env/tests
        self.system_dir = Path(self.system_dir)
        self.user_config = Path(self.user_config)
        self.user_dir = Path(self.user_dir)
        self.log_file = Path(self.log_file)

    @property
    def system_config(self) -> Path:
        return self.system_dir / "config"

    @property
    def system_templates_dir(self) -> Path:
        return self.system_dir / "art"

    @property
    def user_config_template(self) -> Path:
        return self.system_dir / "welcome-artrc.template"

    @property
    def user_templates_dir(self) -> Path:
        return self.user_dir / "art"

    def paths_for(self, scope: Scope) -> ScopePaths:
        if scope is Scope.SYSTEM:
            return ScopePaths(scope, self.system_config, self.system_templates_dir)
        return ScopePaths(scope, self.user_config, self.user_templates_dir)

    def config_file(self, scope: Scope) -> Path:
        return self.paths_for(scope).config_file

    def as_dict(self) -> Dict[str, str]:
        data = {k: str(v) for k, v in asdict(self).items()}
        data.update(
            system_config=str(self.system_config),
            system_templates_dir=str(self.system_templates_dir),
            user_config_template=str(self.user_config_template),
            user_templates_dir=str(self.user_templates_dir),
        )
        return data


# * Builds WelcomeArtPaths from the environment w/ system defaults
class PathsManager:
    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ
        self._paths: Optional[WelcomeArtPaths] = None

    def _env(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def load(self) -> WelcomeArtPaths:
        if self._paths is not None:
            return self._paths

        env = self._env()
        home = Path.home()
        self._paths = WelcomeArtPaths(
            system_dir=Path(env.get(ENV_SYSTEM_DIR) or "/etc/welcome-art"),
            user_config=Path(env.get(ENV_USER_CONFIG) or home / ".welcome-artrc"),
            user_dir=Path(env.get(ENV_USER_DIR) or home / ".welcome-art"),
            log_file=Path(env.get(ENV_LOG_FILE) or "/var/log/welcome-art.log"),
        )
        return self._paths

    # drop cached paths (after env changes)
    def reset(self) -> None:
        self._paths = None

    def override(self, paths: WelcomeArtPaths) -> None:
        self._paths = paths


# global paths manager instance
paths_manager = PathsManager()


# * Retrieve paths preferring injected object from Typer context
def get_paths(
    ctx: Optional[typer.Context] = None, provided: Optional[WelcomeArtPaths] = None
) -> WelcomeArtPaths:
    if provided is not None:
        return provided

    # search ctx, parent, & root for WelcomeArtPaths
    candidates: list[typer.Context] = []
    if ctx is not None:
        candidates.append(ctx)
        parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
        if parent is not None:
            candidates.append(parent)
        find_root = getattr(ctx, "find_root", None)
        root_ctx = (
            cast(Optional[typer.Context], find_root()) if callable(find_root) else None
        )
        if root_ctx is not None:
            candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, WelcomeArtPaths):
            return obj

    return paths_manager.load()
