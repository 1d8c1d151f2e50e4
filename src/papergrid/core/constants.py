"""Shared constants for grid rendering."""

# Default border glyphs
BORDER_TOP = "-"
BORDER_BOTTOM = "-"
BORDER_LEFT = "|"
BORDER_RIGHT = "|"
BORDER_CORNER = "+"

# Cells are separated by exactly one border column
SEPARATOR_WIDTH = 1
