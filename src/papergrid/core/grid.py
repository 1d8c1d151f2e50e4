"""Grid - row-major matrix of cells."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Sequence

from papergrid.core.cell import Cell
from papergrid.exceptions import CoordinateOutOfRange

if TYPE_CHECKING:
    from papergrid.render.options import RenderOptions


class Grid:
    """
    A fixed-size matrix of Cells, stored row-major.

    Every cell is created with default styling when the grid is built
    and is only changed through its setters. Converting the grid to a
    string renders it:

        >>> grid = Grid.from_rows([["hello", "world"]])
        >>> print(grid, end="")
        +-----+-----+
        |hello|world|
        +-----+-----+
    """

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError(f"Grid size must be non-negative, got {rows}x{columns}")
        self.size = (rows, columns)
        self._cells = [Cell() for _ in range(rows * columns)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> Grid:
        """Build a grid from rows of text. Short rows are padded with empty cells."""
        columns = max((len(row) for row in rows), default=0)
        grid = cls(len(rows), columns)
        for i, row in enumerate(rows):
            for j, text in enumerate(row):
                grid.cell(i, j).set_content(text)
        return grid

    def count_rows(self) -> int:
        return self.size[0]

    def count_columns(self) -> int:
        return self.size[1]

    def cell(self, row: int, column: int) -> Cell:
        """Get the cell at (row, column) for reading or chained mutation."""
        rows, columns = self.size
        if not (0 <= row < rows and 0 <= column < columns):
            raise CoordinateOutOfRange(row, column, self.size)
        return self._cells[row * columns + column]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[row, column]."""
        row, column = pos
        return self.cell(row, column)

    def cells(self) -> list[Cell]:
        """All cells in row-major order."""
        return list(self._cells)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        columns = self.count_columns()
        for row in range(self.count_rows()):
            yield self._cells[row * columns:(row + 1) * columns]

    def copy(self) -> Grid:
        """Create a deep copy of this grid."""
        grid = Grid(*self.size)
        grid._cells = [cell.copy() for cell in self._cells]
        return grid

    def render(self, options: RenderOptions | None = None) -> str:
        """Render the grid to text, one trailing newline per row."""
        from papergrid.render.text import GridRenderer
        return GridRenderer(options).render(self)

    def __str__(self) -> str:
        return self.render()
