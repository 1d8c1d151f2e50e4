"""Load grids from delimited text."""

import csv
import io
from pathlib import Path

from papergrid.core.grid import Grid


def load_text(text: str, delimiter: str = ",") -> Grid:
    """
    Build a grid from delimited text.

    Quoted fields may contain newlines, which become multi-line cells.
    Rows shorter than the widest row are padded with empty cells.
    """
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    return Grid.from_rows([row for row in reader if row])


def load_grid(path: str | Path, delimiter: str = ",") -> Grid:
    """Load a delimited text file (CSV, TSV, ...) from disk."""
    path = Path(path)
    with open(path, encoding="utf-8", newline="") as f:
        return load_text(f.read(), delimiter=delimiter)
