"""
papergrid: render text cells as bordered ASCII grids

Quick Start:
    >>> import papergrid
    >>> grid = papergrid.Grid(2, 2)
    >>> _ = grid.cell(0, 0).set_content("0-0").set_span(1)
    >>> _ = grid.cell(1, 0).set_content("1-0")
    >>> _ = grid.cell(1, 1).set_content("1-1")
    >>> print(grid, end="")
    +-------+
    |  0-0  |
    +-------+
    |1-0|1-1|
    +---+---+

Features:
    - Cells spanning several columns within a row
    - Multi-line content with left, center or right alignment
    - Independent padding and border glyphs per cell
    - Borders shared between neighbours, never doubled
"""

__version__ = "0.1.0"

# Core types
from papergrid.core.cell import Alignment, Border, Cell, Padding
from papergrid.core.grid import Grid

# Rendering
from papergrid.render.cell import CellFormatter
from papergrid.render.options import RenderOptions
from papergrid.render.text import GridRenderer, render_grid

# I/O
from papergrid.io.reader import load_grid, load_text

# Errors
from papergrid.exceptions import (
    CoordinateOutOfRange,
    LayoutInvariantViolation,
    PapergridError,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "Alignment",
    "Border",
    "Cell",
    "Padding",
    "Grid",
    # Rendering
    "CellFormatter",
    "RenderOptions",
    "GridRenderer",
    "render_grid",
    # I/O
    "load_grid",
    "load_text",
    # Errors
    "PapergridError",
    "CoordinateOutOfRange",
    "LayoutInvariantViolation",
]
