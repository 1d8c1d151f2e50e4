"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install papergrid[cli]")

    from papergrid.core.cell import Alignment
    from papergrid.core.grid import Grid
    from papergrid.exceptions import PapergridError
    from papergrid.render.options import RenderOptions

    app = typer.Typer(
        name="papergrid",
        help="Render delimited text as a bordered ASCII grid.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def style(grid: Grid, align: Alignment, padding: int, vpadding: int) -> None:
        for row in grid.rows():
            for cell in row:
                (cell.set_alignment(align)
                    .set_horizontal_padding(padding)
                    .set_vertical_padding(vpadding))

    def with_title(grid: Grid, title: str) -> Grid:
        titled = Grid(grid.count_rows() + 1, max(grid.count_columns(), 1))
        titled.cell(0, 0).set_content(title).set_span(titled.count_columns() - 1)
        for i, row in enumerate(grid.rows()):
            for j, cell in enumerate(row):
                titled.cell(i + 1, j).set_content(cell.content)
        return titled

    @app.command()
    def render(
        path: Annotated[Path, typer.Argument(help="Delimited text file to render")],
        delimiter: Annotated[str, typer.Option("--delimiter", "-d", help="Field delimiter")] = ",",
        align: Annotated[Alignment, typer.Option("--align", "-a", help="Cell alignment")] = Alignment.CENTER,
        padding: Annotated[int, typer.Option("--padding", "-p", min=0, help="Spaces left and right of each cell")] = 0,
        vpadding: Annotated[int, typer.Option("--vpadding", min=0, help="Blank lines above and below each cell")] = 0,
        title: Annotated[Optional[str], typer.Option("--title", "-t", help="Add a title row spanning all columns")] = None,
        strict: Annotated[bool, typer.Option("--strict", help="Fail when columns cannot be aligned exactly")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log layout details")] = False,
    ) -> None:
        """Render a CSV/TSV file as a grid."""
        from papergrid.io.reader import load_grid

        _configure_logging(verbose)

        if not path.is_file():
            console.print(f"[red]File not found: {path}[/]")
            raise typer.Exit(1)
        if len(delimiter) != 1:
            console.print(f"[red]Delimiter must be a single character, got {delimiter!r}[/]")
            raise typer.Exit(1)

        grid = load_grid(path, delimiter=delimiter)
        if title is not None:
            grid = with_title(grid, title)
        style(grid, align, padding, vpadding)

        try:
            text = grid.render(RenderOptions(strict=strict))
        except PapergridError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        typer.echo(text, nl=False)

    @app.command()
    def demo() -> None:
        """Print an example grid with spanning cells."""
        grid = Grid(4, 3)
        grid.cell(0, 0).set_content("first line").set_span(1)
        grid.cell(0, 2).set_content("e.g.")
        for i in (1, 2):
            for j in range(3):
                grid.cell(i, j).set_content(str(j))
        grid.cell(3, 0).set_content("full last line").set_span(2)
        typer.echo(str(grid), nl=False)

    return app
