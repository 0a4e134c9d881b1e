# welcome_art/cli/commands/__init__.py
# Subcommand modules registered on the root app by welcome_art/cli/app.py
