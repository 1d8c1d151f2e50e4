"""Tests for row partitioning, portions and the width solver."""

from fractions import Fraction

import pytest

from papergrid.core.cell import Cell
from papergrid.core.grid import Grid
from papergrid.exceptions import SolverConvergenceError, SpanOverflowError
from papergrid.layout.blocks import partition, span_pattern, split_rows, visible_cells
from papergrid.layout.portions import Portions, block_portions, row_portions
from papergrid.layout.solver import initial_width, is_aligned, row_total, search_limit, solve


def rows_of(grid: Grid) -> list[list[Cell]]:
    return split_rows(grid.cells(), grid.count_rows(), grid.count_columns())


def visible_rows(grid: Grid) -> list[list[Cell]]:
    return [[c for _, c in visible_cells(row, i)] for i, row in enumerate(rows_of(grid))]


class TestPartition:
    """Tests for splitting rows and grouping them into blocks."""

    def test_split_rows(self) -> None:
        grid = Grid.from_rows([["a", "b"], ["c", "d"], ["e", "f"]])
        rows = rows_of(grid)
        assert [[c.content for c in row] for row in rows] == [["a", "b"], ["c", "d"], ["e", "f"]]

    def test_span_pattern_includes_covered(self) -> None:
        row = [Cell(span=1), Cell(span=4), Cell()]
        assert span_pattern(row) == (1, 4, 0)

    def test_visible_cells_skip_covered(self) -> None:
        row = [Cell(content="a", span=1), Cell(content="hidden"), Cell(content="c")]
        assert [(j, c.content) for j, c in visible_cells(row)] == [(0, "a"), (2, "c")]

    def test_covered_span_is_ignored(self) -> None:
        row = [Cell(span=1), Cell(span=5), Cell()]
        assert [j for j, _ in visible_cells(row)] == [0, 2]

    def test_span_past_last_column(self) -> None:
        with pytest.raises(SpanOverflowError) as info:
            visible_cells([Cell(), Cell(span=1)], row_index=3)
        assert info.value.row == 3
        assert info.value.column == 1

    def test_blocks_group_consecutive_rows(self, mixed_span_grid: Grid) -> None:
        blocks = partition(rows_of(mixed_span_grid))
        assert [list(b.indices) for b in blocks] == [[0], [1, 2], [3]]
        assert [b.pattern for b in blocks] == [(1, 0, 0), (0, 0, 0), (2, 0, 0)]

    def test_equal_patterns_apart_are_separate_blocks(self) -> None:
        grid = Grid(3, 2)
        grid.cell(1, 0).set_span(1)
        blocks = partition(rows_of(grid))
        assert [list(b.indices) for b in blocks] == [[0], [1], [2]]

    def test_single_block(self, simple_grid: Grid) -> None:
        blocks = partition(rows_of(simple_grid))
        assert len(blocks) == 1
        assert len(blocks[0]) == 2

    def test_empty(self) -> None:
        assert partition([]) == []


class TestPortions:
    """Tests for the portion calculator."""

    def test_shared_max_portions(self) -> None:
        grid = Grid.from_rows([
            ["left\ncell", "right one"],
            ["the second column got the beginning here", "and here\nwe"],
        ])
        (block,) = partition(rows_of(grid))
        assert block_portions(block) == Portions((40, 9), 48)

    def test_empty_cell_takes_sibling_portion(self, simple_grid: Grid) -> None:
        simple_grid.cell(0, 1).set_content("")
        (block,) = partition(rows_of(simple_grid))
        assert block_portions(block) == Portions((3, 3), 6)

    def test_all_empty_block(self) -> None:
        (block,) = partition(rows_of(Grid(2, 3)))
        assert block_portions(block) == Portions((0, 0, 0), 0)

    def test_covered_cells_excluded(self) -> None:
        grid = Grid(1, 3)
        grid.cell(0, 0).set_content("ab").set_span(1)
        grid.cell(0, 1).set_content("very long hidden text")
        grid.cell(0, 2).set_content("cd")
        (block,) = partition(rows_of(grid))
        assert block_portions(block) == Portions((2, 2), 4)

    def test_row_portions_per_row(self, mixed_span_grid: Grid) -> None:
        portions = row_portions(partition(rows_of(mixed_span_grid)))
        assert portions == [
            Portions((10, 4), 14),
            Portions((1, 1, 1), 3),
            Portions((1, 1, 1), 3),
            Portions((14,), 14),
        ]

    def test_widths_floor_exactly(self) -> None:
        assert Portions((40, 9), 48).widths(48) == [40, 9]
        assert Portions((1, 1, 1), 3).widths(17) == [5, 5, 5]

    def test_slope_and_drawn(self) -> None:
        portions = Portions((10, 0, 4), 12)
        assert portions.slope == Fraction(7, 6)
        assert portions.drawn == 2
        assert Portions((0, 0), 0).slope == 0


class TestSolver:
    """Tests for the row-weight solver."""

    def test_row_total_counts_separators(self) -> None:
        assert row_total(Portions((1, 1), 2), 7) == 3 + 3 + 1
        assert row_total(Portions((1,), 1), 7) == 7

    def test_row_total_skips_zero_width_cells(self) -> None:
        assert row_total(Portions((1, 0), 1), 5) == 5
        assert row_total(Portions((0, 1, 0), 1), 5) == 5
        assert row_total(Portions((0, 0), 0), 5) == 0

    def test_initial_width(self, mixed_span_grid: Grid) -> None:
        assert initial_width(visible_rows(mixed_span_grid)) == 14

    def test_is_aligned(self) -> None:
        portions = [Portions((1,), 1), Portions((1, 1), 2)]
        assert not is_aligned(portions, 6)
        assert is_aligned(portions, 7)

    def test_search_limit(self) -> None:
        assert search_limit({Portions((10, 10), 11), Portions((1,), 1)}) == 3
        assert search_limit({Portions((1,), 1), Portions((1, 1), 2)}) is None
        assert search_limit(set()) is None

    def test_span_grid(self, span_grid: Grid) -> None:
        rows = visible_rows(span_grid)
        layout = solve(rows, row_portions(partition(rows_of(span_grid))))
        assert layout.width == 7
        assert layout.widths == [[7], [3, 3]]
        assert layout.heights == [1, 1]
        assert layout.converged

    def test_mixed_spans(self, mixed_span_grid: Grid) -> None:
        rows = visible_rows(mixed_span_grid)
        layout = solve(rows, row_portions(partition(rows_of(mixed_span_grid))))
        assert layout.width == 17
        assert layout.widths == [[12, 4], [5, 5, 5], [5, 5, 5], [17]]

    def test_heights_include_vertical_padding(self) -> None:
        grid = Grid.from_rows([["a\nb", "c"]])
        grid.cell(0, 1).set_vertical_padding(1)
        rows = visible_rows(grid)
        layout = solve(rows, row_portions(partition(rows_of(grid))))
        assert layout.heights == [3]

    def test_width_never_below_content(self, mixed_span_grid: Grid) -> None:
        rows = visible_rows(mixed_span_grid)
        layout = solve(rows, row_portions(partition(rows_of(mixed_span_grid))))
        for row, widths in zip(rows, layout.widths):
            for cell, width in zip(row, widths):
                assert width >= cell.weight()

    def test_bounded_search_falls_back(self, crossed_grid: Grid) -> None:
        rows = visible_rows(crossed_grid)
        portions = row_portions(partition(rows_of(crossed_grid)))
        layout = solve(rows, portions, max_steps=50)
        assert not layout.converged
        assert layout.width == 11
        assert layout.widths == [[10, 10], [10, 10], [11]]

    def test_bounded_search_strict(self, crossed_grid: Grid) -> None:
        rows = visible_rows(crossed_grid)
        portions = row_portions(partition(rows_of(crossed_grid)))
        with pytest.raises(SolverConvergenceError):
            solve(rows, portions, max_steps=50, strict=True)

    def test_rows_that_never_meet_stop_early(self, crossed_grid: Grid) -> None:
        rows = visible_rows(crossed_grid)
        portions = row_portions(partition(rows_of(crossed_grid)))
        layout = solve(rows, portions)
        assert not layout.converged
        assert layout.width == 11
        with pytest.raises(SolverConvergenceError) as info:
            solve(rows, portions, strict=True)
        assert info.value.steps == 0

    def test_zero_width_cell_leaves_row_total(self) -> None:
        grid = Grid.from_rows([["Title", ""], ["a", ""]])
        grid.cell(0, 0).set_span(1)
        rows = visible_rows(grid)
        layout = solve(rows, row_portions(partition(rows_of(grid))))
        assert layout.converged
        assert layout.width == 5
        assert layout.widths == [[5], [5, 0]]
