"""Format one sized cell into a bordered block of text."""

from __future__ import annotations

from papergrid.core.cell import Alignment, Cell


def align(text: str, alignment: Alignment, width: int) -> str:
    """Pad text to width. Centering puts the odd extra space on the right."""
    space = width - len(text)
    if space <= 0:
        return text
    if alignment is Alignment.LEFT:
        return text + " " * space
    if alignment is Alignment.RIGHT:
        return " " * space + text
    left = space // 2
    return " " * left + text + " " * (space - left)


class CellFormatter:
    """
    Fluent formatter turning a Cell into a bordered multi-line block.

    Nothing is drawn until ``boxed()`` or the individual flags are set.
    Every line of the result has the same length as long as the border
    glyphs are single characters.

    Example:
        >>> cell = Cell().set_content("hello\\nworld").set_corner("-")
        >>> print(CellFormatter(cell).boxed().format())
        -------
        |hello|
        |world|
        -------
    """

    def __init__(self, cell: Cell):
        self.cell = cell
        self._width: int | None = None
        self._height = 0
        self._top = False
        self._bottom = False
        self._left = False
        self._right = False
        self._left_connection = False
        self._right_connection = False

    def width(self, width: int | None) -> CellFormatter:
        """Set content width in characters (None = natural width)."""
        self._width = width
        return self

    def height(self, height: int) -> CellFormatter:
        """Set the minimum number of content lines, padding excluded."""
        self._height = height
        return self

    def boxed(self) -> CellFormatter:
        """Draw every border and both corners."""
        self._top = self._bottom = True
        self._left = self._right = True
        self._left_connection = self._right_connection = True
        return self

    def un_top(self) -> CellFormatter:
        self._top = False
        return self

    def un_bottom(self) -> CellFormatter:
        self._bottom = False
        return self

    def un_left(self) -> CellFormatter:
        self._left = False
        return self

    def un_right(self) -> CellFormatter:
        self._right = False
        return self

    def un_left_connection(self) -> CellFormatter:
        """Omit the corner glyph at the left end of top and bottom lines."""
        self._left_connection = False
        return self

    def un_right_connection(self) -> CellFormatter:
        """Omit the corner glyph at the right end of top and bottom lines."""
        self._right_connection = False
        return self

    def content_width(self) -> int:
        """Assigned width, or the natural width when none was assigned."""
        if self._width is None:
            return self.cell.weight()
        return self._width

    def full_width(self) -> int:
        """Content width plus horizontal padding."""
        return self.content_width() + self.cell.padding.horizontal

    def format(self) -> str:
        """Render the cell. Lines are joined with newlines, no trailing newline."""
        cell = self.cell
        border = cell.border
        padding = cell.padding
        width = self.content_width()

        lines = cell.lines()
        lines += [""] * (self._height - len(lines))
        lines = [""] * padding.top + lines + [""] * padding.bottom

        left_pad = " " * padding.left
        right_pad = " " * padding.right
        left = border.left if self._left else ""
        right = border.right if self._right else ""

        block = [
            f"{left}{left_pad}{align(line, cell.alignment, width)}{right_pad}{right}"
            for line in lines
        ]

        lhs = border.corner if self._left_connection else ""
        rhs = border.corner if self._right_connection else ""
        fill = width + padding.horizontal

        if self._top:
            block.insert(0, lhs + border.top * fill + rhs)
        if self._bottom:
            block.append(lhs + border.bottom * fill + rhs)

        return "\n".join(block)
