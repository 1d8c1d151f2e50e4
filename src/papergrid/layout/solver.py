"""
Solve the common grid width.

Every row is sized from its block's portions as
``floor(W * weight / reference)`` per visible cell. The solver searches
for the smallest total width ``W`` at which all rows, separators
included, come out equally wide. Cells sized to 0 are not drawn and
take no separator. This linear search is the hot loop of a render and
is bounded by ``RenderOptions.max_search_steps`` and by the width past
which the rows can no longer meet.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Collection, Iterable, Sequence

from papergrid.core.cell import Cell
from papergrid.core.constants import SEPARATOR_WIDTH
from papergrid.exceptions import SolverConvergenceError
from papergrid.layout.portions import Portions

logger = logging.getLogger(__name__)

DEFAULT_MAX_SEARCH_STEPS = 10_000


@dataclass
class Layout:
    """Size assignment for one render: widths and heights of visible cells."""
    width: int
    widths: list[list[int]]
    heights: list[int]
    converged: bool = True


def row_total(portions: Portions, width: int) -> int:
    """Rendered width of a row's drawn cells plus one separator between them."""
    drawn = [size for size in portions.widths(width) if size > 0]
    return sum(drawn) + SEPARATOR_WIDTH * max(len(drawn) - 1, 0)


def is_aligned(portions: Iterable[Portions], width: int) -> bool:
    totals = {row_total(row, width) for row in portions}
    return len(totals) <= 1


def search_limit(portions: Collection[Portions]) -> int | None:
    """
    Largest width at which the rows could still come out equally wide.

    A row's total is ``W*S - e + n - 1`` where ``S`` is its portion sum,
    ``n`` its drawn cells and ``0 <= e < n`` the floor loss. Two rows
    whose sums differ by ``D`` differ by more than their floor loss once
    ``W > (n_r + n_s) / D``. Returns None when all sums are equal.
    """
    if not portions:
        return None
    steepest = max(portions, key=lambda p: p.slope)
    flattest = min(portions, key=lambda p: p.slope)
    gap = steepest.slope - flattest.slope
    if gap == 0:
        return None
    return math.floor((steepest.drawn + flattest.drawn) / gap)


def initial_width(rows: Sequence[Sequence[Cell]]) -> int:
    """Widest row's summed natural weight."""
    return max((sum(cell.weight() for cell in row) for row in rows), default=0)


def row_height(row: Sequence[Cell]) -> int:
    """Lines a row occupies between its borders, vertical padding included."""
    return max((cell.height() + cell.padding.vertical for cell in row), default=0)


def solve(
    rows: Sequence[Sequence[Cell]],
    portions: Sequence[Portions],
    max_steps: int = DEFAULT_MAX_SEARCH_STEPS,
    strict: bool = False,
) -> Layout:
    """
    Find the common width and size every visible cell.

    Args:
        rows: Visible cells of each row
        portions: Portions of each row, aligned with ``rows``
        max_steps: Maximum number of width increments to try
        strict: Raise instead of falling back when no width is found

    Returns:
        Layout with the solved width, per-cell widths and per-row heights.
        When no common width exists within the bounds the layout uses the
        initial width and ``converged`` is False; rows are then equalised
        by the renderer's adjust pass.

    Raises:
        SolverConvergenceError: in strict mode, if no common width is found.
    """
    distinct = set(portions)
    start = width = initial_width(rows)
    last = start + max_steps
    limit = search_limit(distinct)
    if limit is not None:
        last = min(last, limit)

    converged = True
    while not is_aligned(distinct, width):
        if width >= last:
            if strict:
                raise SolverConvergenceError(start, width - start)
            logger.debug(
                "no common row width between %d and %d, falling back", start, width
            )
            width = start
            converged = False
            break
        width += 1

    layout = Layout(
        width=width,
        widths=[row.widths(width) for row in portions],
        heights=[row_height(row) for row in rows],
        converged=converged,
    )
    logger.debug("solved width %d after %d steps (initial %d)",
                 width, width - start, start)
    logger.debug("sizes %s heights %s", layout.widths, layout.heights)
    return layout
