# welcome_art/core/__init__.py
# Pure core: exceptions, constants & output registry (no I/O)
