# tests/integration/test_cli_help.py
# Integration tests for CLI help output

from typer.testing import CliRunner

from welcome_art.cli.app import app


# * Ensure CLI entrypoint wired & main help shows core commands
def test_main_help_displays_key_commands(cli_env):
    result = CliRunner().invoke(app, ["--help"], env=cli_env)
    assert result.exit_code == 0
    for command in ("list", "preview", "set", "config"):
        assert command in result.output
    assert "--verbose" in result.output


# * Sub-app help lists its subcommands
def test_set_help_lists_subcommands(cli_env):
    result = CliRunner().invoke(app, ["set", "--help"], env=cli_env)
    assert result.exit_code == 0
    for command in ("template", "welcome-text", "color", "key", "show", "test"):
        assert command in result.output


def test_config_help_lists_subcommands(cli_env):
    result = CliRunner().invoke(app, ["config", "-h"], env=cli_env)
    assert result.exit_code == 0
    for command in ("show", "validate", "reset", "edit", "path"):
        assert command in result.output
