"""Cell - one addressable slot of a grid, with its content and styling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from papergrid.core.constants import (
    BORDER_BOTTOM,
    BORDER_CORNER,
    BORDER_LEFT,
    BORDER_RIGHT,
    BORDER_TOP,
)


class Alignment(Enum):
    """Horizontal alignment of a cell's lines within its width."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(slots=True)
class Border:
    """Border glyphs of a cell. Any glyph may be empty or multi-character."""
    top: str = BORDER_TOP
    bottom: str = BORDER_BOTTOM
    left: str = BORDER_LEFT
    right: str = BORDER_RIGHT
    corner: str = BORDER_CORNER


@dataclass(slots=True)
class Padding:
    """Blank space around the content, in lines (top/bottom) or characters."""
    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


def _check_size(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


@dataclass(slots=True)
class Cell:
    """
    A single grid cell with text content and styling attributes.

    ``span`` is the number of additional columns to the right that this
    cell absorbs within its own row. Cells absorbed this way are covered:
    layout ignores their content and styling.

    All setters return the cell so calls can be chained:

        >>> grid.cell(0, 0).set_content("title").set_span(2)
    """
    content: str = ""
    alignment: Alignment = Alignment.CENTER
    border: Border = field(default_factory=Border)
    padding: Padding = field(default_factory=Padding)
    span: int = 0

    def set_content(self, text: str) -> Cell:
        """Set the cell text. Embedded newlines produce multiple lines."""
        self.content = text
        return self

    def set_alignment(self, alignment: Alignment | str) -> Cell:
        """Set alignment from an Alignment or one of 'left', 'center', 'right'."""
        self.alignment = Alignment(alignment)
        return self

    def set_corner(self, glyph: str) -> Cell:
        """Set the corner glyph used at both ends of top and bottom lines."""
        self.border.corner = glyph
        return self

    def set_border(
        self,
        top: str | None = None,
        bottom: str | None = None,
        left: str | None = None,
        right: str | None = None,
        corner: str | None = None,
    ) -> Cell:
        """Set any subset of the border glyphs."""
        if top is not None:
            self.border.top = top
        if bottom is not None:
            self.border.bottom = bottom
        if left is not None:
            self.border.left = left
        if right is not None:
            self.border.right = right
        if corner is not None:
            self.border.corner = corner
        return self

    def set_vertical_padding(self, size: int) -> Cell:
        """Set top and bottom padding (blank lines)."""
        self.padding.top = self.padding.bottom = _check_size("padding", size)
        return self

    def set_horizontal_padding(self, size: int) -> Cell:
        """Set left and right padding (spaces)."""
        self.padding.left = self.padding.right = _check_size("padding", size)
        return self

    def set_padding(self, top: int, bottom: int, left: int, right: int) -> Cell:
        """Set all four padding sides independently."""
        self.padding = Padding(
            top=_check_size("top padding", top),
            bottom=_check_size("bottom padding", bottom),
            left=_check_size("left padding", left),
            right=_check_size("right padding", right),
        )
        return self

    def set_span(self, columns: int) -> Cell:
        """Absorb this many additional columns to the right (0 = no span)."""
        self.span = _check_size("span", columns)
        return self

    def lines(self) -> list[str]:
        """Content split into lines. Empty content has no lines."""
        return self.content.splitlines()

    def weight(self) -> int:
        """Natural width: character count of the widest line."""
        return max((len(line) for line in self.lines()), default=0)

    def height(self) -> int:
        """Natural height: number of content lines."""
        return len(self.lines())

    def copy(self) -> Cell:
        """Create a copy of this cell."""
        return Cell(
            content=self.content,
            alignment=self.alignment,
            border=Border(
                top=self.border.top,
                bottom=self.border.bottom,
                left=self.border.left,
                right=self.border.right,
                corner=self.border.corner,
            ),
            padding=Padding(
                top=self.padding.top,
                bottom=self.padding.bottom,
                left=self.padding.left,
                right=self.padding.right,
            ),
            span=self.span,
        )
