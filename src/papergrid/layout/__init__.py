"""Layout: partition rows into blocks, compute portions, solve cell sizes."""

from papergrid.layout.blocks import Block, partition, split_rows, visible_cells
from papergrid.layout.portions import Portions, block_portions, row_portions
from papergrid.layout.solver import Layout, solve

__all__ = [
    "Block",
    "partition",
    "split_rows",
    "visible_cells",
    "Portions",
    "block_portions",
    "row_portions",
    "Layout",
    "solve",
]
