"""Split a grid into rows and group rows sharing a span pattern into blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from papergrid.core.cell import Cell
from papergrid.exceptions import SpanOverflowError


@dataclass
class Block:
    """
    A maximal run of consecutive rows with identical span patterns.

    Rows in a block have the same visible-cell positions, so they can
    share one portion vector.
    """
    start: int
    pattern: tuple[int, ...]
    rows: list[list[Cell]] = field(default_factory=list)

    @property
    def indices(self) -> range:
        """Grid row indices covered by this block."""
        return range(self.start, self.start + len(self.rows))

    def __len__(self) -> int:
        return len(self.rows)


def split_rows(cells: Sequence[Cell], count_rows: int, count_columns: int) -> list[list[Cell]]:
    """Slice a row-major cell sequence into rows."""
    return [
        list(cells[row * count_columns:(row + 1) * count_columns])
        for row in range(count_rows)
    ]


def span_pattern(row: Sequence[Cell]) -> tuple[int, ...]:
    """Raw span value of every column, covered positions included."""
    return tuple(cell.span for cell in row)


def visible_cells(row: Sequence[Cell], row_index: int = 0) -> list[tuple[int, Cell]]:
    """
    Return (column, cell) for every cell not covered by a span to its left.

    Raises:
        SpanOverflowError: if a visible cell spans past the last column.
    """
    visible: list[tuple[int, Cell]] = []
    skip = 0
    for column, cell in enumerate(row):
        if skip > 0:
            skip -= 1
            continue
        if column + cell.span >= len(row):
            raise SpanOverflowError(row_index, column, cell.span, len(row))
        visible.append((column, cell))
        skip = cell.span
    return visible


def partition(rows: Sequence[Sequence[Cell]]) -> list[Block]:
    """Group consecutive rows with identical span patterns, preserving order."""
    blocks: list[Block] = []
    for index, row in enumerate(rows):
        pattern = span_pattern(row)
        if blocks and blocks[-1].pattern == pattern:
            blocks[-1].rows.append(list(row))
        else:
            blocks.append(Block(start=index, pattern=pattern, rows=[list(row)]))
    return blocks
