# welcome_art/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables (WELCOME_ART_* path overrides) once at startup
load_dotenv()

from ..config.settings import WelcomeArtPaths, paths_manager
from .decorators import handle_welcome_art_error
from .params import LogFileOpt


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["--help", "-h"]},
    help="Display ASCII-art welcome banners & manage their templates and settings.",
)


# * Render the effective banner to the shared console
def render_banner(paths: WelcomeArtPaths) -> None:
    from ..ui.display.banner import show_banner
    from .logic import build_banner

    show_banner(build_banner(paths))


# * Load paths, set up output & show the banner when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress informational output & warnings"
    ),
    log_file: Optional[Path] = LogFileOpt(),
) -> None:
    # initialize theme at start of each CLI invocation
    from ..ui.theming.console_theme import auto_initialize_theme

    auto_initialize_theme()

    # respect injected ctx.obj from tests/embedding; only load if absent
    if not isinstance(getattr(ctx, "obj", None), WelcomeArtPaths):
        ctx.obj = paths_manager.load()

    from ..core.verbose import cleanup_verbose, init_verbose

    # log_file implies verbose mode
    init_verbose(
        enabled=verbose or log_file is not None,
        log_file=log_file,
        quiet=quiet,
        activity_log=ctx.obj.log_file,
    )
    ctx.call_on_close(cleanup_verbose)

    if ctx.invoked_subcommand is None:
        handle_welcome_art_error(render_banner)(ctx.obj)


# ! import command modules here to avoid circular import w/ app object
from .commands import templates as _templates  # noqa: F401,E402
from .commands import set as _set  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
