# welcome_art/core/exceptions.py
# Custom exception hierarchy for welcome-art (pure - no I/O operations)

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# single offending line reported by config validation (1-based line number)
@dataclass(frozen=True)
class LineError:
    line_number: int
    text: str

    def __str__(self) -> str:
        return f"Invalid syntax at line {self.line_number}: {self.text}"


# * Base exception for welcome-art
class WelcomeArtError(Exception):
    pass


# * Configuration errors
class ConfigError(WelcomeArtError):
    pass


# * Config file absent (callers decide whether to fall back to defaults)
class ConfigNotFoundError(ConfigError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Config file contains lines outside the line grammar; blocks saves
class InvalidSyntaxError(ConfigError):
    def __init__(
        self, message: str, errors: Sequence[LineError], path: Path | str | None = None
    ):
        super().__init__(message)
        self.errors = list(errors)
        self.path = Path(path) if path is not None else None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"errors={self.errors!r}, path={self.path!r})"
        )


# alias matching the parse-time name used in diagnostics
MalformedLineError = InvalidSyntaxError


# * Disk or rename failure while saving; original file left untouched
class ConfigWriteError(ConfigError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * No write access to a scope's config file
class PermissionDeniedError(WelcomeArtError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Base error for template discovery & loading
class TemplateError(WelcomeArtError):
    pass


# * Template absent from both search roots
class TemplateNotFoundError(TemplateError):
    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, name={self.name!r})"


# * Bad literal for a typed setting
class InvalidValueError(WelcomeArtError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * External renderer or colour filter failed; callers fall back to plain text
class RenderError(WelcomeArtError):
    def __init__(self, message: str, tool: str):
        super().__init__(message)
        self.tool = tool

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, tool={self.tool!r})"
