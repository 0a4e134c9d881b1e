# welcome_art/ui/__init__.py
# Terminal UI: theming, themed Rich components & display helpers
