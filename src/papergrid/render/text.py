"""Render a Grid to bordered plain text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from papergrid.core.constants import SEPARATOR_WIDTH
from papergrid.exceptions import RowHeightMismatchError
from papergrid.layout.blocks import partition, split_rows, visible_cells
from papergrid.layout.portions import row_portions
from papergrid.layout.solver import Layout, solve
from papergrid.render.cell import CellFormatter
from papergrid.render.options import RenderOptions

if TYPE_CHECKING:
    from papergrid.core.cell import Cell
    from papergrid.core.grid import Grid

logger = logging.getLogger(__name__)


def concat_row(blocks: Sequence[str]) -> str:
    """
    Join formatted cell blocks side by side, line by line.

    Raises:
        RowHeightMismatchError: if the blocks have different line counts.
    """
    if not blocks:
        return ""
    split = [block.split("\n") for block in blocks]
    heights = [len(lines) for lines in split]
    if len(set(heights)) > 1:
        raise RowHeightMismatchError(heights)
    return "\n".join("".join(parts) for parts in zip(*split))


def row_width(row: Sequence[CellFormatter]) -> int:
    """Width of a row between its outer borders."""
    return sum(f.full_width() for f in row) + SEPARATOR_WIDTH * (len(row) - 1)


def adjust(rows: Sequence[Sequence[CellFormatter]]) -> None:
    """
    Widen cells so every row reaches the widest row's width.

    The shortfall of a row is shared evenly between its cells; what
    integer division leaves over goes one character each to the
    leftmost cells.
    """
    target = max((row_width(row) for row in rows if row), default=0)
    for index, row in enumerate(rows):
        if not row:
            continue
        shortfall = target - row_width(row)
        if shortfall == 0:
            continue
        share, rest = divmod(shortfall, len(row))
        logger.debug("row %d: widening by %d (%d per cell, %d left over)",
                     index, shortfall, share, rest)
        for position, formatter in enumerate(row):
            extra = share + (1 if position < rest else 0)
            formatter.width(formatter.content_width() + extra)


class GridRenderer:
    """
    Render a Grid to plain text.

    Each row is drawn with its bottom border; only the first row draws
    a top border and only the first drawn cell of a row draws a left
    border, so shared edges are never doubled.
    """

    def __init__(self, options: RenderOptions | None = None):
        self.options = options or RenderOptions()

    def render(self, grid: Grid) -> str:
        """Render grid to text with a trailing newline after every row."""
        if grid.count_rows() == 0 or grid.count_columns() == 0:
            return ""

        rows = split_rows(grid.cells(), grid.count_rows(), grid.count_columns())
        visible = [
            [cell for _, cell in visible_cells(row, index)]
            for index, row in enumerate(rows)
        ]
        portions = row_portions(partition(rows))
        layout = solve(
            visible,
            portions,
            max_steps=self.options.max_search_steps,
            strict=self.options.strict,
        )

        formatters = self.build_formatters(visible, layout)
        adjust(formatters)

        return "".join(
            concat_row([f.format() for f in row]) + "\n"
            for row in formatters
        )

    def build_formatters(
        self,
        rows: Sequence[Sequence[Cell]],
        layout: Layout,
    ) -> list[list[CellFormatter]]:
        """
        Box every drawn cell to its solved size.

        Cells sized to 0 are skipped, so the first drawn cell of a row
        carries the left border. A row whose cells are all sized to 0
        keeps its first cell so its borders still close.
        """
        grid: list[list[CellFormatter]] = []
        for row_index, row in enumerate(rows):
            height = layout.heights[row_index]
            sized = list(zip(row, layout.widths[row_index]))
            drawn = [(cell, width) for cell, width in sized if width > 0] or sized[:1]
            formatters = []
            for position, (cell, width) in enumerate(drawn):
                formatter = (
                    CellFormatter(cell)
                    .width(width)
                    .height(height - cell.padding.vertical)
                    .boxed()
                )
                if position != 0:
                    formatter.un_left().un_left_connection()
                if row_index != 0:
                    formatter.un_top()
                formatters.append(formatter)
            grid.append(formatters)
        return grid


def render_grid(grid: Grid, options: RenderOptions | None = None) -> str:
    """Render a grid to text."""
    return GridRenderer(options).render(grid)
