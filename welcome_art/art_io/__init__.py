# welcome_art/art_io/__init__.py
# File & process I/O: atomic writes, console, templates, external renderers & banners
