"""Core data structures: cells and the grid that owns them."""

from papergrid.core.cell import Alignment, Border, Cell, Padding
from papergrid.core.grid import Grid

__all__ = ["Alignment", "Border", "Cell", "Padding", "Grid"]
