# welcome_art/art_io/render.py
# External text-art renderer (figlet) & colour filter (lolcat) w/ bounded timeouts

from __future__ import annotations

import subprocess
from typing import Optional, Protocol, runtime_checkable

from ..core.exceptions import RenderError
from ..core.verbose import vlog_render

# child processes never block a login for longer than this
DEFAULT_TIMEOUT = 2.0

ALIGNMENT_FLAGS = {"left": "-l", "center": "-c", "right": "-r"}

UNKNOWN = "unknown"


@runtime_checkable
class Renderer(Protocol):
    def render(
        self, text: str, font: Optional[str] = None, alignment: Optional[str] = None
    ) -> str: ...


@runtime_checkable
class Colorizer(Protocol):
    def colorize(self, text: str) -> str: ...


# * Run an external tool; every failure mode becomes RenderError
def run_tool(
    args: list[str],
    tool: str,
    input_text: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    try:
        proc = subprocess.run(
            args,
            input=input_text,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        vlog_render(tool, args, "not installed")
        raise RenderError(f"'{tool}' not found", tool)
    except subprocess.TimeoutExpired:
        vlog_render(tool, args, f"timed out after {timeout}s")
        raise RenderError(f"'{tool}' timed out after {timeout}s", tool)
    except OSError as e:
        vlog_render(tool, args, f"failed to start: {e}")
        raise RenderError(f"'{tool}' failed to start: {e}", tool) from e

    if proc.returncode != 0:
        detail = (proc.stderr or "").strip() or "no output"
        vlog_render(tool, args, f"exit code {proc.returncode}")
        raise RenderError(
            f"'{tool}' exited with code {proc.returncode}: {detail}", tool
        )

    vlog_render(tool, args, f"ok ({len(proc.stdout):,} chars)")
    return proc.stdout


# * figlet-backed renderer; unknown font/alignment fall back to figlet defaults
class FigletRenderer:
    def __init__(
        self,
        executable: str = "figlet",
        timeout: float = DEFAULT_TIMEOUT,
        width: Optional[int] = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self.width = width

    def build_args(
        self, text: str, font: Optional[str] = None, alignment: Optional[str] = None
    ) -> list[str]:
        args = [self.executable]
        if font and font != UNKNOWN:
            args += ["-f", font]
        flag = ALIGNMENT_FLAGS.get((alignment or "").strip().lower())
        if flag:
            args.append(flag)
        if self.width:
            args += ["-w", str(self.width)]
        args.append(text)
        return args

    def render(
        self, text: str, font: Optional[str] = None, alignment: Optional[str] = None
    ) -> str:
        return run_tool(
            self.build_args(text, font, alignment), "figlet", timeout=self.timeout
        )


# * lolcat-backed colour filter (text piped through stdin)
class LolcatColorizer:
    def __init__(self, executable: str = "lolcat", timeout: float = DEFAULT_TIMEOUT):
        self.executable = executable
        self.timeout = timeout

    def colorize(self, text: str) -> str:
        # -f forces colour codes even though stdout is a pipe
        return run_tool(
            [self.executable, "-f"], "lolcat", input_text=text, timeout=self.timeout
        )


# * Render text or return it unchanged when the renderer fails
def render_or_plain(
    renderer: Renderer,
    text: str,
    font: Optional[str] = None,
    alignment: Optional[str] = None,
) -> tuple[str, bool]:
    try:
        return renderer.render(text, font, alignment), True
    except RenderError:
        return text if text.endswith("\n") else f"{text}\n", False
