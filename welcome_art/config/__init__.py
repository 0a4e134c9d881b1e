# welcome_art/config/__init__.py
# Scopes & paths, line-preserving config documents, layered resolution & edits
