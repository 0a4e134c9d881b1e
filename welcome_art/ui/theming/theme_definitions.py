# welcome_art/ui/theming/theme_definitions.py
# Colour palette definitions for welcome-art CLI styling

from __future__ import annotations


# accent gradient used for headings & table borders
ACCENT_PALETTE = [
    "#4a90e2",  # sky blue
    "#357abd",  # medium blue
    "#2563eb",  # royal blue
    "#1d4ed8",  # deep blue
    "#0891b2",  # teal
]

# rainbow stops used to style the banner when the lolcat filter is unavailable
RAINBOW_PALETTE = [
    "#ff4d4d",  # red
    "#ffa64d",  # orange
    "#ffe14d",  # yellow
    "#4dff88",  # green
    "#4dc3ff",  # sky
    "#8a4dff",  # violet
    "#ff4dd2",  # magenta
]
