# welcome_art/config/store.py
# Config Store: load, validate & crash-safe save of a single INI-like config file

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from ..art_io.generics import backup_file, read_text_safe, write_text_atomic
from ..core.exceptions import (
    ConfigNotFoundError,
    InvalidSyntaxError,
    LineError,
)
from ..core.verbose import vlog_validation
from .document import ConfigDocument, parse_document, validate_document


# * Load & parse a config file; raises ConfigNotFoundError when absent
def load_document(path: Path) -> ConfigDocument:
    path = Path(path)
    doc = parse_document(read_text_safe(path), path)
    errors = doc.errors
    if errors:
        vlog_validation(
            f"{path}: {len(errors)} malformed line(s)", [str(e) for e in errors]
        )
    return doc


# * Save document atomically; refuses invalid documents, backs up the previous file
def save_document(
    doc: ConfigDocument,
    path: Optional[Path] = None,
    backup: bool = True,
    now: Callable[[], datetime] = datetime.now,
) -> Optional[Path]:
    target = Path(path) if path is not None else doc.path
    if target is None:
        raise ValueError("save_document requires a path for unsaved documents")

    errors = validate_document(doc)
    if errors:
        raise InvalidSyntaxError(
            f"Refusing to save {target}: {len(errors)} line(s) with invalid syntax "
            f"(first at line {errors[0].line_number})",
            errors,
            target,
        )

    backup_path = backup_file(target, now) if backup else None
    write_text_atomic(target, doc.render())
    doc.path = target
    return backup_path


# * Validate a config file on disk; raises ConfigNotFoundError when absent
def validate_file(path: Path) -> List[LineError]:
    return validate_document(load_document(path))


# * Check write access for a config file (or where it would be created)
def is_writable(path: Path) -> bool:
    path = Path(path)
    if path.exists():
        # temp file + rename needs the directory as well as the file
        return os.access(path, os.W_OK) and os.access(path.parent, os.W_OK)
    for ancestor in path.parents:
        if ancestor.exists():
            return os.access(ancestor, os.W_OK)
    return False


# * Store bound to one config file path
class ConfigStore:
    def __init__(
        self, path: Path, now: Callable[[], datetime] = datetime.now
    ) -> None:
        self.path = Path(path)
        self._now = now

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> ConfigDocument:
        return load_document(self.path)

    # load, or start a fresh document w/ the standard header when the file is absent
    def load_or_new(self) -> ConfigDocument:
        try:
            return self.load()
        except ConfigNotFoundError:
            return ConfigDocument.new(self.path)

    def save(self, doc: ConfigDocument, backup: bool = True) -> Optional[Path]:
        return save_document(doc, self.path, backup=backup, now=self._now)

    def validate(self) -> List[LineError]:
        return validate_file(self.path)

    def is_writable(self) -> bool:
        return is_writable(self.path)
