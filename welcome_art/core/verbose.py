# welcome_art/core/verbose.py
# Verbose logging utilities - delegates to unified OutputManager w/ structured logging for file I/O, config edits & rendering

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize output for a CLI session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    quiet: bool = False,
    activity_log: Path | None = None,
) -> None:
    requested_level = OutputLevel.VERBOSE if enabled else OutputLevel.NORMAL

    try:
        from ..cli.output_manager import OutputManager

        manager = OutputManager()
        manager.initialize(
            requested_level=requested_level,
            quiet=quiet,
            log_file=log_file,
            activity_log=activity_log,
        )
        set_output_manager(manager)
    except ImportError:
        pass


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


# * Log file write operation
def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log edit state machine transition
def vlog_state(operation: str, state: str, detail: str | None = None) -> None:
    get_output_manager().verbose(f"{operation} -> {state}", "STATE", detail)


# * Log validation result
def vlog_validation(result: str, warnings: list[str] | None = None) -> None:
    if warnings:
        detail = "\n".join(f"- {w}" for w in warnings)
        get_output_manager().verbose(result, "VALIDATE", detail)
    else:
        get_output_manager().verbose(result, "VALIDATE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Log external tool invocation
def vlog_render(tool: str, args: list[str], outcome: str) -> None:
    get_output_manager().verbose(f"{tool}: {outcome}", "RENDER", " ".join(args))


# * Surface a non-fatal warning (console + activity log)
def warn(message: str, category: str = "GENERAL") -> None:
    get_output_manager().warning(message, category)


# * Append an entry to the activity log only
def record(level: str, message: str, category: str = "GENERAL") -> None:
    get_output_manager().record(level, message, category)


# * Cleanup verbose logging
def cleanup_verbose() -> None:
    get_output_manager().end_session()
