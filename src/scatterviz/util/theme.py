"""Neon-on-black palette and typography shared by the SVG and Vega-Lite renderers."""

BACKGROUND = "black"
NEON = "#66fcf1"
TEXT_COLOR = "#c5c6c7"
TOOLTIP_BACKGROUND = "#1f2833"
FONT_FAMILY = "'Press Start 2P', cursive"
FONT_SIZE = 10
