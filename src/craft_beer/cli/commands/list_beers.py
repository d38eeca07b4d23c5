from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from craft_beer.cli.utils import load_beers

console = Console()


def list_command(
    resource: Optional[str] = typer.Argument(
        None,
        help="Bundled resource name or path (default: configured resource)",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print one record per line instead of a table",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report parse timing",
    ),
):
    """
    Print every beer in a beer data file.
    """
    beers = load_beers(resource, verbose=verbose)

    if plain:
        for beer in beers:
            print(beer)
        return

    table = Table(title="Craft Beers")
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Brewery")
    table.add_column("Style")
    table.add_column("ABV", justify="right")
    table.add_column("Ratings", justify="right")
    table.add_column("Avg", justify="right")

    for beer in beers:
        table.add_row(
            str(beer.ordinal),
            beer.name,
            beer.brewery,
            beer.type,
            f"{beer.abv}%",
            f"{beer.num_ratings:,}",
            str(beer.average_rating),
        )

    console.print(table)
