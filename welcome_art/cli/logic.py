# welcome_art/cli/logic.py
# CLI-layer operations consumed by the Typer commands; each returns a result or raises WelcomeArtError

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..art_io.banner import Banner, compose_banner
from ..art_io.generics import backup_file, read_text_safe, write_text_atomic
from ..art_io.render import Colorizer, LolcatColorizer, Renderer
from ..art_io.templates import ResolvedTemplate, TemplateRegistry
from ..config.editing import EditResult, SettingMutator, TemplateActivator
from ..config.layers import EffectiveConfig
from ..config.layers import resolve_effective_config as _resolve_layers
from ..config.settings import (
    DISPLAY_DEFAULTS,
    DISPLAY_SECTION,
    Scope,
    WelcomeArtPaths,
    normalize_bool,
)
from ..config.store import is_writable, validate_file
from ..core.constants import NOT_SET, ListMode, ShowTarget
from ..core.exceptions import (
    ConfigNotFoundError,
    LineError,
    PermissionDeniedError,
    TemplateNotFoundError,
    WelcomeArtError,
)
from ..core.verbose import record

# keys whose literals are normalized to "true"/"false" before storing
BOOLEAN_KEYS = frozenset({"color_enabled", "auto_execute", "auto_execute_local"})

# user config written when neither the file nor the packaged template exists
USER_CONFIG_SKELETON = """\
# Welcome-Art User Configuration
# Personal settings that override system configuration

[display]
# template=modern
# welcome_text="Welcome back, {{USER}}!"
# color_enabled=true

[personal]
# show_system_info=true
# show_last_login=false
# custom_message="Have a great day!"
"""


def build_registry(
    paths: WelcomeArtPaths, renderer: Optional[Renderer] = None
) -> TemplateRegistry:
    return TemplateRegistry(
        paths.system_templates_dir, paths.user_templates_dir, renderer=renderer
    )


# * Effective configuration for the banner renderer
def resolve_effective_config(paths: WelcomeArtPaths) -> EffectiveConfig:
    return _resolve_layers(paths.system_config, paths.user_config)


# * Banner for the current effective configuration (lolcat used when colour is on)
def build_banner(
    paths: WelcomeArtPaths,
    renderer: Optional[Renderer] = None,
    colorizer: Optional[Colorizer] = None,
) -> Banner:
    registry = build_registry(paths, renderer)
    return compose_banner(
        resolve_effective_config(paths),
        registry,
        colorizer=colorizer if colorizer is not None else LolcatColorizer(),
    )


# listing result; `counts` is per physical root, independent of shadowing
@dataclass
class TemplateListing:
    mode: ListMode
    entries: List[ResolvedTemplate]
    only_scope: Optional[Scope] = None
    counts: Dict[Scope, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.entries)


# * Discover templates once; the mode only affects later formatting
def list_templates(
    paths: WelcomeArtPaths,
    mode: ListMode = ListMode.SIMPLE,
    only_scope: Optional[Scope] = None,
    registry: Optional[TemplateRegistry] = None,
) -> TemplateListing:
    registry = registry or build_registry(paths)
    entries = registry.list_entries(only_scope)
    counts = {scope: len(registry.scan(scope)) for scope in Scope}
    record("INFO", f"Listed {len(entries)} templates (format: {mode.value})", "LIST")
    if not entries:
        raise TemplateNotFoundError(
            f"No templates found in {registry.user_dir} or {registry.system_dir}.",
            "*",
        )
    return TemplateListing(mode, entries, only_scope, counts)


@dataclass
class TemplatePreview:
    resolved: ResolvedTemplate
    rendered: str
    warnings: List[str]


# * Metadata, raw content & rendered sample for one template
def preview_template(
    paths: WelcomeArtPaths,
    name: str,
    registry: Optional[TemplateRegistry] = None,
) -> TemplatePreview:
    registry = registry or build_registry(paths)
    resolved = registry.get(name)
    return TemplatePreview(
        resolved=resolved,
        rendered=registry.preview(name),
        warnings=registry.validate(resolved.template),
    )


def activate_template(
    paths: WelcomeArtPaths,
    name: str,
    scope: Scope = Scope.USER,
    registry: Optional[TemplateRegistry] = None,
) -> EditResult:
    activator = TemplateActivator(paths, registry or build_registry(paths))
    return activator.activate(name, scope)


# * Generic setting write; boolean keys get literal normalization
def set_setting(
    paths: WelcomeArtPaths,
    scope: Scope,
    key: str,
    value: str,
    section: str = DISPLAY_SECTION,
) -> EditResult:
    mutator = SettingMutator(paths)
    normalize: Optional[Callable[[str], str]] = None
    if key.strip() in BOOLEAN_KEYS:
        normalize = lambda raw: normalize_bool(raw, key.strip())  # noqa: E731
    return mutator.set_setting(scope, section, key, value, normalize=normalize)


def set_color(paths: WelcomeArtPaths, scope: Scope, literal: str) -> EditResult:
    return SettingMutator(paths).set_color(scope, literal)


def set_welcome_text(paths: WelcomeArtPaths, scope: Scope, text: str) -> EditResult:
    return SettingMutator(paths).set_welcome_text(scope, text)


# raw contents of one config file for `config show`
@dataclass
class ConfigView:
    scope: Scope
    path: Path
    text: Optional[str]

    @property
    def exists(self) -> bool:
        return self.text is not None


def show_config(paths: WelcomeArtPaths, target: ShowTarget = ShowTarget.BOTH) -> List[ConfigView]:
    scopes = {
        ShowTarget.SYSTEM: [Scope.SYSTEM],
        ShowTarget.USER: [Scope.USER],
        ShowTarget.BOTH: [Scope.SYSTEM, Scope.USER],
    }[target]
    views: List[ConfigView] = []
    for scope in scopes:
        path = paths.config_file(scope)
        try:
            text: Optional[str] = read_text_safe(path)
        except ConfigNotFoundError:
            text = None
        views.append(ConfigView(scope, path, text))
    return views


def validate_config_file(path: Path) -> List[LineError]:
    return validate_file(path)


# per-scope & effective values of the display keys for `set show`
@dataclass
class SettingsSnapshot:
    system: Dict[str, str]
    user: Dict[str, str]
    effective: Dict[str, str]
    system_exists: bool
    user_exists: bool


def current_settings(paths: WelcomeArtPaths) -> SettingsSnapshot:
    config = resolve_effective_config(paths)
    system: Dict[str, str] = {}
    user: Dict[str, str] = {}
    effective: Dict[str, str] = {}
    for key, default in DISPLAY_DEFAULTS.items():
        system[key] = config.layer_value(Scope.SYSTEM, DISPLAY_SECTION, key) or default
        user[key] = config.layer_value(Scope.USER, DISPLAY_SECTION, key) or NOT_SET
        effective[key] = config.get(DISPLAY_SECTION, key, default) or default
    return SettingsSnapshot(
        system=system,
        user=user,
        effective=effective,
        system_exists=paths.system_config.is_file(),
        user_exists=paths.user_config.is_file(),
    )


# * Replace the user config w/ the packaged template (backup taken first)
def reset_config(paths: WelcomeArtPaths, scope: Scope, force: bool = False) -> Optional[Path]:
    if scope is Scope.SYSTEM:
        raise PermissionDeniedError(
            "Cannot reset system configuration. Edit manually or reinstall package.",
            paths.system_config,
        )
    target = paths.user_config
    if target.exists() and not force:
        raise WelcomeArtError(
            f"User configuration exists: {target}. Use --force to overwrite."
        )
    template = paths.user_config_template
    if not template.is_file():
        raise ConfigNotFoundError(f"Template file not found: {template}", template)

    backup = backup_file(target)
    write_text_atomic(target, read_text_safe(template))
    record("INFO", "User configuration reset to template", "CONFIG")
    return backup


# * Make sure the user config exists before editing; returns True when created
def ensure_user_config(paths: WelcomeArtPaths) -> bool:
    target = paths.user_config
    if target.exists():
        return False
    template = paths.user_config_template
    if template.is_file():
        write_text_atomic(target, read_text_safe(template))
        record("INFO", "User configuration created from template", "CONFIG")
    else:
        write_text_atomic(target, USER_CONFIG_SKELETON)
        record("INFO", "Minimal user configuration created", "CONFIG")
    return True


@dataclass
class EditSession:
    path: Path
    created: bool
    backup_path: Optional[Path]
    errors: List[LineError]


# * Open a scope's config in an editor, then validate the result
def edit_config(
    paths: WelcomeArtPaths,
    scope: Scope,
    open_editor: Callable[[Path], None],
) -> EditSession:
    target = paths.config_file(scope)
    created = False
    if scope is Scope.USER:
        created = ensure_user_config(paths)
    elif not target.exists():
        raise ConfigNotFoundError(f"System configuration not found: {target}", target)

    if not is_writable(target):
        raise PermissionDeniedError(
            f"No write permission to {target}. Run as root or with sudo.", target
        )

    backup = backup_file(target)
    record("INFO", f"Editing {scope.value} configuration", "CONFIG")
    open_editor(target)
    errors = validate_file(target)
    if errors:
        record("WARN", f"{scope.value.capitalize()} configuration validation failed", "CONFIG")
    else:
        record("INFO", f"{scope.value.capitalize()} configuration updated", "CONFIG")
    return EditSession(target, created, backup, errors)
