"""Renderers turning a Grid into text."""

from papergrid.render.cell import CellFormatter
from papergrid.render.options import RenderOptions
from papergrid.render.text import GridRenderer, concat_row, render_grid

__all__ = ["CellFormatter", "RenderOptions", "GridRenderer", "concat_row", "render_grid"]
