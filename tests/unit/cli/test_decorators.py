# tests/unit/cli/test_decorators.py
# Tests for the CLI error decorator: diagnostics, activity log & exit codes

import pytest
import typer

from welcome_art.art_io.console import configure_console
from welcome_art.cli.decorators import classify_error, handle_welcome_art_error
from welcome_art.core.constants import ExitCode
from welcome_art.core.exceptions import (
    ConfigNotFoundError,
    ConfigWriteError,
    InvalidSyntaxError,
    InvalidValueError,
    LineError,
    PermissionDeniedError,
    RenderError,
    TemplateNotFoundError,
    WelcomeArtError,
)
from welcome_art.core.verbose import init_verbose


# * Each error kind maps to its exit code
@pytest.mark.parametrize(
    "error,code",
    [
        (PermissionDeniedError("denied", "/etc/welcome-art/config"), ExitCode.PERMISSION_DENIED),
        (InvalidSyntaxError("bad", [LineError(1, "foo")]), ExitCode.CONFIG_ERROR),
        (ConfigNotFoundError("missing", "/x"), ExitCode.CONFIG_ERROR),
        (ConfigWriteError("disk", "/x"), ExitCode.CONFIG_ERROR),
        (TemplateNotFoundError("nope", "ghost"), ExitCode.TEMPLATE_ERROR),
        (InvalidValueError("maybe?", "color_enabled", "maybe"), ExitCode.GENERAL_ERROR),
        (RenderError("figlet", "figlet"), ExitCode.GENERAL_ERROR),
        (WelcomeArtError("generic"), ExitCode.GENERAL_ERROR),
        (RuntimeError("boom"), ExitCode.GENERAL_ERROR),
    ],
)
def test_exit_codes(error, code):
    @handle_welcome_art_error
    def command():
        raise error

    with pytest.raises(SystemExit) as exc:
        command()
    assert exc.value.code == int(code)
    assert classify_error(error)[2] is code


# * Diagnostic printed once, line errors listed, activity log appended
def test_diagnostic_and_activity_log(paths):
    console = configure_console(width=200, record=True)
    init_verbose(activity_log=paths.log_file)

    @handle_welcome_art_error
    def command():
        raise InvalidSyntaxError("2 syntax error(s) in cfg", [LineError(1, "foo"), LineError(4, "[x")])

    with pytest.raises(SystemExit):
        command()
    text = console.export_text()
    assert "Syntax Error: 2 syntax error(s) in cfg" in text
    assert "Invalid syntax at line 4: [x" in text
    log = paths.log_file.read_text()
    assert "[ERROR] [CONFIG] 2 syntax error(s) in cfg" in log


# * Return values pass through untouched
def test_passthrough():
    @handle_welcome_art_error
    def command(x):
        return x * 2

    assert command(21) == 42


# * Click control flow is re-raised; anything else becomes a diagnostic
def test_control_flow_and_unexpected_errors():
    console = configure_console(width=200, record=True)

    @handle_welcome_art_error
    def leave():
        raise typer.Exit(code=7)

    with pytest.raises(typer.Exit):
        leave()

    @handle_welcome_art_error
    def crash():
        raise KeyError("slot")

    with pytest.raises(SystemExit) as exc:
        crash()
    assert exc.value.code == int(ExitCode.GENERAL_ERROR)
    assert "Unexpected Error: 'slot'" in console.export_text()
