# welcome_art/__init__.py
# welcome-art: login banners from layered configuration & art templates

__version__ = "0.1.0"
