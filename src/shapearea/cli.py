"""Command Line Interface for Shape Area.

This module provides a simple CLI for computing the area (and optionally
the perimeter) of a circle or a rectangle.
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import AREA_DISPLAY_PRECISION, DEFAULT_LOG_LEVEL, VERBOSE_LOG_LEVEL
from .core.model import Circle, Rectangle, Shape
from .geom.areas import shape_area
from .geom.polygon import shape_perimeter

app = typer.Typer(
    name="shape-area",
    help="A CLI tool for circle and rectangle area calculations",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = VERBOSE_LOG_LEVEL if verbose else DEFAULT_LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_shape(shape: Shape, dimensions: dict, perimeter: bool) -> None:
    """Print a table with the shape's dimensions and measures."""
    table = Table()
    table.add_column("Shape", style="cyan")
    for name in dimensions:
        table.add_column(name.capitalize(), justify="right")
    table.add_column("Area", style="green", justify="right")
    if perimeter:
        table.add_column("Perimeter", style="magenta", justify="right")

    row = [str(shape.shape)]
    row.extend(str(value) for value in dimensions.values())
    row.append(f"{shape_area(shape):.{AREA_DISPLAY_PRECISION}f}")
    if perimeter:
        row.append(f"{shape_perimeter(shape):.{AREA_DISPLAY_PRECISION}f}")
    table.add_row(*row)

    console.print(table)


@app.command()
def circle(
    radius: float = typer.Option(..., "--radius", "-r", help="Circle radius"),
    shape: Optional[str] = typer.Option(None, "--shape", help="Descriptive tag"),
    perimeter: bool = typer.Option(False, "--perimeter", "-p", help="Also show the perimeter"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Compute the area of a circle."""
    _configure_logging(verbose)
    obj = Circle(radius=radius) if shape is None else Circle(radius=radius, shape=shape)
    _print_shape(obj, {"radius": radius}, perimeter)


@app.command()
def rectangle(
    height: float = typer.Option(..., "--height", help="Rectangle height"),
    width: float = typer.Option(..., "--width", help="Rectangle width"),
    shape: Optional[str] = typer.Option(None, "--shape", help="Descriptive tag"),
    perimeter: bool = typer.Option(False, "--perimeter", "-p", help="Also show the perimeter"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Compute the area of a rectangle."""
    _configure_logging(verbose)
    if shape is None:
        obj = Rectangle(height=height, width=width)
    else:
        obj = Rectangle(height=height, width=width, shape=shape)
    _print_shape(obj, {"height": height, "width": width}, perimeter)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
