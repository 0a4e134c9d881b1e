# welcome_art/cli/output_manager.py
# Console output by level plus the verbose trace file & the append-only activity log

# * Registered via set_output_manager() at CLI startup (see core/verbose.init_verbose)
# * Lives in cli/ so config & template code only ever talks to the core registry

from __future__ import annotations

import os
import time
from datetime import datetime
from pathlib import Path
from typing import IO, Any, Optional

from rich.markup import escape

from ..core.output import OutputLevel

ACTIVITY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

SESSION_RULE = "=" * 60


# * --log-file target: plain-text copy of every verbose line, framed by session markers
class TraceFile:
    def __init__(self, path: Path) -> None:
        self.path = path
        self._handle: Optional[IO[str]] = None

    # False when the file cannot be opened; verbose output still reaches the console
    def open(self, level: OutputLevel) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = open(self.path, "a", encoding="utf-8")
        except OSError:
            self._handle = None
            return False
        self._banner(f"Session Started: {datetime.now().isoformat()}", f"Level: {level.name}")
        return True

    def _banner(self, *lines: str) -> None:
        self.write(f"\n{SESSION_RULE}")
        for line in lines:
            self.write(line)
        self.write(f"{SESSION_RULE}\n")

    def write(self, line: str) -> None:
        if self._handle is None:
            return
        try:
            self._handle.write(f"{line}\n")
            self._handle.flush()
        except OSError:
            pass

    def close(self) -> None:
        if self._handle is None:
            return
        self._banner(f"Session Ended: {datetime.now().isoformat()}")
        try:
            self._handle.close()
        except OSError:
            pass
        self._handle = None


# * Append-only `[timestamp] [LEVEL] [CATEGORY] message` log of edits & failures
class ActivityLog:
    def __init__(self, path: Path) -> None:
        self.path = path

    # skipped when the log directory is not writable (non-root users & /var/log)
    def append(self, level: str, msg: str, category: str) -> None:
        if not os.access(self.path.parent, os.W_OK):
            return
        stamp = datetime.now().strftime(ACTIVITY_TIMESTAMP_FORMAT)
        try:
            with open(self.path, "a", encoding="utf-8") as handle:
                handle.write(f"[{stamp}] [{level}] [{category}] {msg}\n")
        except OSError:
            # activity logging never blocks the operation being logged
            pass


class OutputManager:
    # Implements OutputInterface for the core registry

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._started: Optional[float] = None
        self._trace: Optional[TraceFile] = None
        self._activity: Optional[ActivityLog] = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        quiet: bool = False,
        log_file: Optional[Path] = None,
        activity_log: Optional[Path] = None,
    ) -> None:
        # --quiet wins; DEBUG has no extra output so it is capped at VERBOSE
        self._level = OutputLevel.QUIET if quiet else min(requested_level, OutputLevel.VERBOSE)
        self._started = time.time()
        self.cleanup()
        if log_file is not None:
            trace = TraceFile(log_file)
            self._trace = trace if trace.open(self._level) else None
        self._activity = ActivityLog(activity_log) if activity_log is not None else None

    def get_level(self) -> OutputLevel:
        return self._level

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def _print(self, *objects: Any, **kwargs: Any) -> None:
        from ..art_io.console import console

        console.print(*objects, **kwargs)

    def _stamp(self) -> str:
        if self._started is None:
            return "0.00s"
        return f"{time.time() - self._started:.2f}s"

    def _trace_line(self, line: str) -> None:
        if self._trace is not None:
            self._trace.write(line)

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if not self.is_verbose_enabled():
            return
        stamp = self._stamp()
        self._print(
            f"[dim][{stamp}][/] [bold cyan]\\[{category}][/] {escape(msg)}",
            highlight=False,
            **kwargs,
        )
        self._trace_line(f"[{stamp}] [{category}] {msg}")
        for line in (detail or "").splitlines():
            self._print(f"  {line}", style="dim", markup=False)
            self._trace_line(f"  {line}")

    def info(self, msg: str, **kwargs: Any) -> None:
        if self._level >= OutputLevel.NORMAL:
            self._print(msg, **kwargs)

    # one-line diagnostic prefixed by severity; always appended to the activity log
    def warning(self, msg: str, category: str = "GENERAL") -> None:
        if self._level >= OutputLevel.NORMAL:
            self._print(f"[warning]Warning:[/] {escape(msg)}", highlight=False)
        self.record("WARN", msg, category)

    # errors are shown even in quiet mode
    def error(self, msg: str, category: str = "GENERAL") -> None:
        self._print(f"[error]Error:[/] {escape(msg)}", highlight=False)
        self.record("ERROR", msg, category)

    def record(self, level: str, msg: str, category: str = "GENERAL") -> None:
        self._trace_line(f"[{self._stamp()}] [{level}] [{category}] {msg}")
        if self._activity is not None:
            self._activity.append(level, msg, category)

    def end_session(self) -> None:
        self.cleanup()

    def cleanup(self) -> None:
        if self._trace is not None:
            self._trace.close()
            self._trace = None
