"""Per-block width portions for visible cells."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

from papergrid.layout.blocks import Block, visible_cells

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Portions:
    """
    Width shares of a block's visible cells.

    Cell ``i`` of a row gets ``floor(W * weights[i] / reference)``
    characters at grid width ``W``. All rows of a block share one
    instance. An all-empty block has reference 0 and sizes every cell
    to 0.
    """
    weights: tuple[int, ...]
    reference: int

    def widths(self, width: int) -> list[int]:
        if self.reference == 0:
            return [0] * len(self.weights)
        return [width * weight // self.reference for weight in self.weights]

    @property
    def slope(self) -> Fraction:
        """Growth of the row's summed cell widths per unit of grid width."""
        if self.reference == 0:
            return Fraction(0)
        return Fraction(sum(self.weights), self.reference)

    @property
    def drawn(self) -> int:
        """Number of cells that come out wider than 0."""
        return sum(1 for weight in self.weights if weight > 0)


def block_weights(block: Block) -> list[list[int]]:
    """Natural weight of every visible cell, per row of the block."""
    return [
        [cell.weight() for _, cell in visible_cells(row, index)]
        for index, row in zip(block.indices, block.rows)
    ]


def block_portions(block: Block) -> Portions:
    """
    Compute the portions shared by all rows of a block.

    Each visible cell's portion is its natural weight divided by the
    widest row's total weight in the block. The shared vector takes the
    largest weight seen at each position, so rows of the same block
    scale to the same column boundaries.
    """
    weights = block_weights(block)
    reference = max(sum(row) for row in weights)
    shared = Portions(tuple(max(column) for column in zip(*weights)), reference)
    logger.debug("block at row %d: reference weight %d, weights %s",
                 block.start, reference, list(shared.weights))
    return shared


def row_portions(blocks: Sequence[Block]) -> list[Portions]:
    """Portions of every grid row, each row using its block's instance."""
    portions: list[Portions] = []
    for block in blocks:
        shared = block_portions(block)
        portions.extend(shared for _ in block.rows)
    return portions
