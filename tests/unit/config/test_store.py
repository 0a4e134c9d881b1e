# tests/unit/config/test_store.py
# Tests for config store load/save/validate, atomic writes & backups

import os
from datetime import datetime
from pathlib import Path

import pytest

from welcome_art.art_io.generics import backup_file, format_size, write_text_atomic
from welcome_art.config.document import parse_document
from welcome_art.config.store import (
    ConfigStore,
    is_writable,
    load_document,
    save_document,
    validate_file,
)
from welcome_art.core.exceptions import (
    ConfigNotFoundError,
    ConfigWriteError,
    InvalidSyntaxError,
)

FIXED_NOW = datetime(2024, 5, 17, 9, 30, 15)


def _now():
    return FIXED_NOW


class TestLoadSave:

    # * Missing file is NotFound
    def test_load_missing_raises(self, tmp_path):
        with pytest.raises(ConfigNotFoundError) as exc:
            load_document(tmp_path / "absent")
        assert exc.value.path == tmp_path / "absent"

    # * Load then save w/o mutation is byte-identical (CRLF included)
    def test_save_load_round_trip_bytes(self, tmp_path):
        path = tmp_path / "config"
        raw = b"# top\r\n[display]\r\ntemplate = 'x'  \r\n\r\nlast=1"
        path.write_bytes(raw)
        doc = load_document(path)
        save_document(doc, backup=False)
        assert path.read_bytes() == raw

    # * Save refuses a document w/ malformed lines & leaves the file alone
    def test_save_rejects_invalid(self, tmp_path):
        path = tmp_path / "config"
        path.write_text("[display]\nfoo\n")
        doc = load_document(path)
        doc.set_key("display", "template", "x")
        with pytest.raises(InvalidSyntaxError) as exc:
            save_document(doc)
        assert exc.value.errors[0].line_number == 2
        assert path.read_text() == "[display]\nfoo\n"

    # * Save creates missing parent directories
    def test_save_new_file_creates_parents(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "config"
        doc = parse_document("")
        doc.set_key("display", "template", "x")
        assert save_document(doc, path) is None
        assert path.read_text() == "[display]\ntemplate=x\n"
        assert doc.path == path

    # * Unsaved document w/o a path is a programming error
    def test_save_requires_path(self):
        with pytest.raises(ValueError):
            save_document(parse_document("a=1\n"))


class TestBackups:

    # * Backup copy uses the timestamped name & holds the pre-edit bytes
    def test_backup_taken_before_save(self, tmp_path):
        path = tmp_path / "config"
        path.write_text("[display]\ntemplate=old\n")
        doc = load_document(path)
        doc.set_key("display", "template", "new")
        backup = save_document(doc, now=_now)
        assert backup == tmp_path / "config.backup.20240517_093015"
        assert backup.read_text() == "[display]\ntemplate=old\n"
        assert path.read_text() == "[display]\ntemplate=new\n"

    # * Same-second backups never overwrite each other
    def test_same_second_backups_get_suffix(self, tmp_path):
        path = tmp_path / "config"
        path.write_text("v1\n")
        first = backup_file(path, _now)
        path.write_text("v2\n")
        second = backup_file(path, _now)
        assert first.name == "config.backup.20240517_093015"
        assert second.name == "config.backup.20240517_093015_1"
        assert first.read_text() == "v1\n"
        assert second.read_text() == "v2\n"

    # * No file, no backup
    def test_backup_of_missing_file(self, tmp_path):
        assert backup_file(tmp_path / "none") is None

    # * Backup failure is best-effort
    def test_backup_failure_returns_none(self, tmp_path, monkeypatch):
        path = tmp_path / "config"
        path.write_text("x=1\n")

        def _fail(*args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr("welcome_art.art_io.generics.shutil.copy2", _fail)
        assert backup_file(path) is None


class TestAtomicWrite:

    # * Failed rename leaves the original untouched & no temp files behind
    def test_replace_failure_keeps_original(self, tmp_path, monkeypatch):
        path = tmp_path / "config"
        path.write_text("original\n")

        def _fail(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", _fail)
        with pytest.raises(ConfigWriteError) as exc:
            write_text_atomic(path, "new\n")
        assert exc.value.path == path
        assert path.read_text() == "original\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["config"]

    # * Existing file mode is kept across the rename
    def test_mode_preserved(self, tmp_path):
        path = tmp_path / "config"
        path.write_text("a=1\n")
        os.chmod(path, 0o640)
        write_text_atomic(path, "a=2\n")
        assert (path.stat().st_mode & 0o777) == 0o640
        assert path.read_text() == "a=2\n"


class TestValidateAndAccess:

    # * validate_file reports line numbers
    def test_validate_file(self, tmp_path):
        path = tmp_path / "config"
        path.write_text("foo\n# ok\n")
        errors = validate_file(path)
        assert [(e.line_number, e.text) for e in errors] == [(1, "foo")]

    # * Writability checks the file & its directory
    def test_is_writable_existing(self, tmp_path, monkeypatch):
        path = tmp_path / "config"
        path.write_text("")
        assert is_writable(path)

        def _access(target, mode):
            return Path(target) != tmp_path

        monkeypatch.setattr(os, "access", _access)
        assert not is_writable(path)

    # * A not-yet-created file checks its nearest existing ancestor
    def test_is_writable_missing_file(self, tmp_path, monkeypatch):
        target = tmp_path / "a" / "b" / "config"
        seen = []

        def _access(path, mode):
            seen.append(Path(path))
            return True

        monkeypatch.setattr(os, "access", _access)
        assert is_writable(target)
        assert seen == [tmp_path]

    # * ConfigStore wraps the module functions for one path
    def test_config_store(self, tmp_path):
        store = ConfigStore(tmp_path / "config", now=_now)
        assert not store.exists()
        doc = store.load_or_new()
        doc.set_key("display", "template", "modern")
        assert store.save(doc) is None
        assert store.exists()
        assert store.load().get("display", "template") == "modern"
        assert store.validate() == []
        assert store.save(store.load()).name == "config.backup.20240517_093015"


# * Human readable sizes
def test_format_size():
    assert format_size(512) == "512B"
    assert format_size(2048) == "2KB"
    assert format_size(3 * 1024 * 1024) == "3MB"
