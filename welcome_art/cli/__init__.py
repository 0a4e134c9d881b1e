# welcome_art/cli/__init__.py
# Typer CLI: root app, subcommands & output management
