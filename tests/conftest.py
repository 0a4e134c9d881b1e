# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import subprocess
from pathlib import Path

import pytest

from welcome_art.config.settings import (
    ENV_LOG_FILE,
    ENV_SYSTEM_DIR,
    ENV_USER_CONFIG,
    ENV_USER_DIR,
    WelcomeArtPaths,
)


SAMPLE_SYSTEM_CONFIG = """\
# Welcome-Art System Configuration

[display]
template=default
welcome_text="Welcome to {{HOSTNAME}}!"
color_enabled=true

[system]
auto_execute=true
"""

USER_TEMPLATE_TEXT = """\
# Welcome-Art User Configuration

[display]
# template=modern
"""


# * Build a .art template body w/ metadata markers
def make_template_text(
    title: str = "Sample",
    font: str | None = "standard",
    alignment: str | None = "center",
    body: str = "  *** ART ***\n",
    **extra: str,
) -> str:
    lines = [f"# Title: {title}"]
    for name in ("Description", "Author", "Version"):
        if name.lower() in extra:
            lines.append(f"# {name}: {extra[name.lower()]}")
    if font is not None:
        lines.append(f"# Font: {font}")
    if alignment is not None:
        lines.append(f"# Alignment: {alignment}")
    return "\n".join(lines) + "\n\n" + body


@pytest.fixture(autouse=True)
def isolate_paths(tmp_path_factory, monkeypatch):
    # isolated tree lives outside the test's own tmp_path so tests can inspect tmp_path freely
    tmp_path = tmp_path_factory.mktemp("isolated")
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: fake_home)

    system_dir = tmp_path / "etc" / "welcome-art"
    (system_dir / "art").mkdir(parents=True)
    log_dir = tmp_path / "log"
    log_dir.mkdir()

    # keep the developer's environment & .env out of path resolution
    for name in (ENV_SYSTEM_DIR, ENV_USER_CONFIG, ENV_USER_DIR, ENV_LOG_FILE):
        monkeypatch.delenv(name, raising=False)

    paths = WelcomeArtPaths(
        system_dir=system_dir,
        user_config=fake_home / ".welcome-artrc",
        user_dir=fake_home / ".welcome-art",
        log_file=log_dir / "welcome-art.log",
    )

    # ! reset global paths_manager state & point it at the isolated tree
    from welcome_art.config.settings import paths_manager

    paths_manager.override(paths)

    # ! reset output manager to NullOutputManager for test isolation
    from welcome_art.core.output import reset_output_manager

    reset_output_manager()

    # ! fresh console so recorded output & pushed themes never leak between tests
    # wide, colourless console keeps long tmp paths on one line
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    from welcome_art.art_io.console import reset_console

    reset_console()

    yield paths

    from welcome_art.core.output import get_output_manager

    get_output_manager().end_session()
    reset_output_manager()
    paths_manager.reset()


@pytest.fixture(autouse=True)
def no_external_tools(monkeypatch):
    # figlet & lolcat behave as "not installed" unless a test patches subprocess.run itself
    def _missing(args, *a, **kw):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(subprocess, "run", _missing)


@pytest.fixture
def paths(isolate_paths):
    return isolate_paths


@pytest.fixture
def system_config(paths):
    paths.system_config.write_text(SAMPLE_SYSTEM_CONFIG, encoding="utf-8")
    return paths.system_config


@pytest.fixture
def write_template(paths):
    # write <name>.art into the system (default) or user template root
    def _write(name: str, scope: str = "system", text: str | None = None, **meta) -> Path:
        root = paths.user_templates_dir if scope == "user" else paths.system_templates_dir
        root.mkdir(parents=True, exist_ok=True)
        path = root / f"{name}.art"
        path.write_text(text if text is not None else make_template_text(**meta), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def user_config_template(paths):
    paths.user_config_template.write_text(USER_TEMPLATE_TEXT, encoding="utf-8")
    return paths.user_config_template


@pytest.fixture
def cli_env():
    return {"NO_COLOR": "1", "TERM": "dumb"}
