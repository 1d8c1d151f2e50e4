"""File input for grids."""

from papergrid.io.reader import load_grid, load_text

__all__ = ["load_grid", "load_text"]
