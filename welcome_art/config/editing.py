# welcome_art/config/editing.py
# Template Activator & Setting Mutator: validated, backed-up writes into a scope's config file

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Tuple

from ..core.exceptions import (
    ConfigNotFoundError,
    ConfigWriteError,
    InvalidSyntaxError,
    InvalidValueError,
    PermissionDeniedError,
    TemplateNotFoundError,
    WelcomeArtError,
)
from ..core.verbose import record, vlog_state, warn
from .document import ConfigDocument
from .settings import (
    DEFAULT_SCOPE,
    DISPLAY_SECTION,
    Scope,
    ScopePaths,
    WelcomeArtPaths,
    normalize_bool,
)
from .store import ConfigStore

if TYPE_CHECKING:
    from ..art_io.templates import TemplateRegistry


# * Lifecycle shared by every scoped edit
class EditState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    WRITING = "writing"
    SAVED = "saved"
    PERMISSION_DENIED = "permission_denied"
    TEMPLATE_NOT_FOUND = "template_not_found"
    INVALID_VALUE = "invalid_value"
    INVALID_SYNTAX = "invalid_syntax"
    IO_ERROR = "io_error"


# terminal failure state for each error raised mid-edit (checked in order)
_FAILURE_STATES: Tuple[Tuple[type, EditState], ...] = (
    (PermissionDeniedError, EditState.PERMISSION_DENIED),
    (TemplateNotFoundError, EditState.TEMPLATE_NOT_FOUND),
    (InvalidValueError, EditState.INVALID_VALUE),
    (InvalidSyntaxError, EditState.INVALID_SYNTAX),
    (ConfigWriteError, EditState.IO_ERROR),
)


# outcome of a successful scoped write
@dataclass
class EditResult:
    scope: Scope
    path: Path
    section: str
    key: str
    value: str
    created: bool = False
    backup_path: Optional[Path] = None
    warnings: List[str] = field(default_factory=list)


# * Shared machinery: permission check, load-or-create, set key, atomic save
class ScopedEditor:
    operation = "edit"

    def __init__(
        self, paths: WelcomeArtPaths, now: Callable[[], datetime] = datetime.now
    ) -> None:
        self.paths = paths
        self._now = now
        self.state = EditState.IDLE
        self.history: List[EditState] = [EditState.IDLE]

    def _transition(self, state: EditState, detail: Optional[str] = None) -> None:
        self.state = state
        self.history.append(state)
        vlog_state(self.operation, state.value, detail)

    @contextmanager
    def _tracking(self) -> Iterator[None]:
        self.state = EditState.IDLE
        self.history = [EditState.IDLE]
        self._transition(EditState.VALIDATING)
        try:
            yield
        except WelcomeArtError as e:
            for error_type, state in _FAILURE_STATES:
                if isinstance(e, error_type):
                    self._transition(state, str(e))
                    break
            raise

    def _check_permission(self, scope: Scope) -> ScopePaths:
        scope_paths = self.paths.paths_for(scope)
        store = ConfigStore(scope_paths.config_file, self._now)
        if not store.is_writable():
            hint = (
                " Run as root or with sudo." if scope is Scope.SYSTEM else ""
            )
            raise PermissionDeniedError(
                f"No write permission to {scope_paths.config_file}.{hint}",
                scope_paths.config_file,
            )
        return scope_paths

    def _load(self, store: ConfigStore) -> Tuple[ConfigDocument, bool]:
        try:
            doc = store.load()
        except ConfigNotFoundError:
            return ConfigDocument.new(store.path), True

        errors = doc.errors
        if errors:
            raise InvalidSyntaxError(
                f"{store.path} has {len(errors)} line(s) with invalid syntax "
                f"(first at line {errors[0].line_number}); fix it before editing "
                f"(welcome-art config validate {store.path})",
                errors,
                store.path,
            )
        return doc, False

    # validating -> writing -> saved
    def _write(
        self,
        scope_paths: ScopePaths,
        section: str,
        key: str,
        value: str,
        warnings: Optional[List[str]] = None,
    ) -> EditResult:
        store = ConfigStore(scope_paths.config_file, self._now)
        doc, created = self._load(store)

        self._transition(EditState.WRITING)
        doc.set_key(section, key, value)
        backup_path = store.save(doc)
        self._transition(EditState.SAVED, str(store.path))

        return EditResult(
            scope=scope_paths.scope,
            path=store.path,
            section=section,
            key=key,
            value=value,
            created=created,
            backup_path=backup_path,
            warnings=list(warnings or []),
        )


def _check_token(kind: str, text: str, forbidden: str) -> None:
    if not text.strip() or any(ch in text for ch in forbidden):
        raise InvalidValueError(
            f"Invalid {kind}: {text!r}", kind, text
        )


# * Generic setting writer used for welcome-text, color & arbitrary keys
class SettingMutator(ScopedEditor):
    operation = "set"

    def set_setting(
        self,
        scope: Scope,
        section: str,
        key: str,
        value: str,
        normalize: Optional[Callable[[str], str]] = None,
    ) -> EditResult:
        with self._tracking():
            if normalize is not None:
                value = normalize(value)
            _check_token("section", section, "[]\r\n")
            _check_token("key", key, "=#\r\n")
            if "\n" in value or "\r" in value:
                raise InvalidValueError(
                    f"Value for {key} must be a single line", key, value
                )
            scope_paths = self._check_permission(scope)
            result = self._write(scope_paths, section, key.strip(), value)

        record("INFO", f"{scope.value.capitalize()} {key} set: {value}", "SET")
        return result

    # accepted literals: on/true/yes/1 & off/false/no/0
    def set_color(self, scope: Scope, literal: str) -> EditResult:
        return self.set_setting(
            scope,
            DISPLAY_SECTION,
            "color_enabled",
            literal,
            normalize=lambda raw: normalize_bool(raw, "color_enabled"),
        )

    # placeholders such as {{HOSTNAME}} are stored verbatim
    def set_welcome_text(self, scope: Scope, text: str) -> EditResult:
        return self.set_setting(scope, DISPLAY_SECTION, "welcome_text", text)


# * Validates a template & persists `[display] template=<name>` in the target scope
class TemplateActivator(ScopedEditor):
    operation = "activate"

    def __init__(
        self,
        paths: WelcomeArtPaths,
        registry: Optional["TemplateRegistry"] = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(paths, now)
        if registry is None:
            from ..art_io.templates import TemplateRegistry

            registry = TemplateRegistry(
                paths.system_templates_dir, paths.user_templates_dir
            )
        self.registry = registry

    def activate(self, name: str, scope: Scope = DEFAULT_SCOPE) -> EditResult:
        with self._tracking():
            scope_paths = self._check_permission(scope)
            # lookup is scope-agnostic: any discoverable template may go into either file
            resolved = self.registry.get(name)
            warnings = self.registry.validate(resolved.template)
            for message in warnings:
                warn(message, "SET")
            result = self._write(scope_paths, DISPLAY_SECTION, "template", name, warnings)

        record("INFO", f"{scope.value.capitalize()} template set to: {name}", "SET")
        return result
