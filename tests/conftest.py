"""Shared grid fixtures."""

import pytest

from papergrid import Grid


@pytest.fixture
def simple_grid() -> Grid:
    """2x2 grid with coordinates as content."""
    return Grid.from_rows([["0-0", "0-1"], ["1-0", "1-1"]])


@pytest.fixture
def span_grid() -> Grid:
    """2x2 grid whose first row is one cell spanning both columns."""
    grid = Grid(2, 2)
    grid.cell(0, 0).set_content("0-0").set_span(1)
    grid.cell(1, 0).set_content("1-0")
    grid.cell(1, 1).set_content("1-1")
    return grid


@pytest.fixture
def mixed_span_grid() -> Grid:
    """4x3 grid mixing spanning and plain rows."""
    grid = Grid(4, 3)
    grid.cell(0, 0).set_content("first line").set_span(1)
    grid.cell(0, 2).set_content("e.g.")
    for i in (1, 2):
        for j in range(3):
            grid.cell(i, j).set_content(str(j))
    grid.cell(3, 0).set_content("full last line").set_span(2)
    return grid


@pytest.fixture
def crossed_grid() -> Grid:
    """Grid whose rows can never be aligned exactly by the width search."""
    grid = Grid.from_rows([["a" * 10, "b"], ["c", "d" * 10], ["x", ""]])
    grid.cell(2, 0).set_span(1)
    return grid
