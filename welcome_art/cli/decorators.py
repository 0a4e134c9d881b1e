# welcome_art/cli/decorators.py
# CLI decorator mapping welcome-art errors to one-line diagnostics & exit codes

import functools
from typing import Any, Callable, TypeVar, cast

import typer
from rich.markup import escape

from ..core.constants import ExitCode
from ..core.exceptions import (
    ConfigError,
    InvalidSyntaxError,
    InvalidValueError,
    PermissionDeniedError,
    RenderError,
    TemplateError,
    WelcomeArtError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# ! order matters: subclasses before their bases
ERROR_TABLE: tuple[tuple[type[BaseException], str, str, ExitCode], ...] = (
    (PermissionDeniedError, "Permission Denied", "PERMISSION", ExitCode.PERMISSION_DENIED),
    (InvalidSyntaxError, "Syntax Error", "CONFIG", ExitCode.CONFIG_ERROR),
    (ConfigError, "Configuration Error", "CONFIG", ExitCode.CONFIG_ERROR),
    (TemplateError, "Template Error", "TEMPLATE", ExitCode.TEMPLATE_ERROR),
    (InvalidValueError, "Invalid Value", "SET", ExitCode.GENERAL_ERROR),
    (RenderError, "Render Error", "RENDER", ExitCode.GENERAL_ERROR),
    (WelcomeArtError, "Error", "GENERAL", ExitCode.GENERAL_ERROR),
)


# * Look up label, activity-log category & exit code for an exception
def classify_error(error: BaseException) -> tuple[str, str, ExitCode]:
    for error_type, label, category, code in ERROR_TABLE:
        if isinstance(error, error_type):
            return label, category, code
    return "Unexpected Error", "GENERAL", ExitCode.GENERAL_ERROR


def _report(error: BaseException) -> ExitCode:
    # ! Lazy import to avoid circular dependencies
    from ..art_io.console import console
    from ..core.verbose import record

    label, category, code = classify_error(error)
    console.print(format_error_message(label, escape(str(error))), highlight=False)
    if isinstance(error, InvalidSyntaxError):
        for line_error in error.errors:
            console.print(f"  {line_error}", markup=False, highlight=False)
    record("ERROR", str(error), category)
    return code


# * Decorator for handling welcome-art errors in CLI commands w/ Rich output
def handle_welcome_art_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.Abort, typer.BadParameter):
            # click control flow, not failures
            raise
        except Exception as e:
            raise SystemExit(int(_report(e)))

    return cast(F, wrapper)
