# welcome_art/art_io/generics.py
# Generic filesystem helpers: safe reads, atomic writes & timestamped backups

from __future__ import annotations

import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from ..core.exceptions import ConfigNotFoundError, ConfigWriteError
from ..core.verbose import vlog, vlog_file_read, vlog_file_write

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# read UTF-8 text; absence is reported as ConfigNotFoundError so callers can fall back
def read_text_safe(path: Path) -> str:
    try:
        # newline="" keeps \r\n endings intact for byte-exact rewrites
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        raise ConfigNotFoundError(f"File not found: {path}", path)
    vlog_file_read(path, len(text))
    return text


# * Write text via sibling temp file + rename so readers never see a partial file
def write_text_atomic(path: Path, text: str) -> None:
    path = Path(path)
    try:
        ensure_parent(path)
    except OSError as e:
        raise ConfigWriteError(f"Cannot create directory for {path}: {e}", path) from e

    tmp_name: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ConfigWriteError(f"Failed to write {path}: {e}", path) from e

    vlog_file_write(path, len(text.encode("utf-8")))


# * Copy file to `<path>.backup.<timestamp>`; best-effort, returns None on failure
def backup_file(
    path: Path, now: Callable[[], datetime] = datetime.now
) -> Optional[Path]:
    path = Path(path)
    if not path.is_file():
        return None

    stamp = now().strftime(BACKUP_TIMESTAMP_FORMAT)
    backup = path.with_name(f"{path.name}.backup.{stamp}")
    counter = 1
    # same-second saves keep every snapshot
    while backup.exists():
        backup = path.with_name(f"{path.name}.backup.{stamp}_{counter}")
        counter += 1

    try:
        shutil.copy2(path, backup)
    except OSError as e:
        vlog("FILE", f"Backup of {path} failed", str(e))
        return None

    vlog("FILE", f"Backup created: {backup}")
    return backup


# * Human-readable size using whole B/KB/MB units
def format_size(size: int) -> str:
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size // 1024}KB"
    return f"{size // (1024 * 1024)}MB"
