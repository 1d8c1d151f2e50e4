"""Exceptions for papergrid."""


class PapergridError(Exception):
    """
    Base exception for all papergrid errors.

    Callers can catch every library-specific error with a single
    except clause.
    """

    pass


class CoordinateOutOfRange(PapergridError, IndexError):
    """Raised when a cell is addressed outside the grid's dimensions."""

    def __init__(self, row: int, column: int, size: tuple[int, int]) -> None:
        self.row = row
        self.column = column
        self.size = size
        super().__init__(
            f"Cell ({row}, {column}) out of bounds (grid is {size[0]}x{size[1]})"
        )


class LayoutInvariantViolation(PapergridError, RuntimeError):
    """
    Base exception for broken layout contracts.

    These indicate a bug in the layout phase or input that breaks the
    grid's structural constraints. They are not meant to be recovered from.
    """

    pass


class SpanOverflowError(LayoutInvariantViolation):
    """Raised when a cell's span reaches past the last column of its row."""

    def __init__(self, row: int, column: int, span: int, count_columns: int) -> None:
        self.row = row
        self.column = column
        self.span = span
        self.count_columns = count_columns
        super().__init__(
            f"Cell ({row}, {column}) spans {span} column(s) "
            f"but the row only has {count_columns}"
        )


class RowHeightMismatchError(LayoutInvariantViolation):
    """Raised when cell blocks of one row do not have the same line count."""

    def __init__(self, heights: list[int]) -> None:
        self.heights = heights
        super().__init__(f"Cannot concatenate blocks with line counts {heights}")


class SolverConvergenceError(LayoutInvariantViolation):
    """Raised in strict mode when no common grid width is found."""

    def __init__(self, start: int, steps: int) -> None:
        self.start = start
        self.steps = steps
        super().__init__(
            f"No common row width found between {start} and {start + steps}"
        )
