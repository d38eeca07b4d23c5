from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from craft_beer.cli.utils import load_beers
from craft_beer.models import BeerRecord

console = Console()


def summarize(beers: List[BeerRecord]) -> Dict[str, Any]:
    """Summary figures for a list of beers; empty input gives None averages."""
    summary: Dict[str, Any] = {
        "beers": len(beers),
        "breweries": len({b.brewery for b in beers}),
        "styles": len({b.type for b in beers}),
        "mean_abv": None,
        "total_ratings": sum(b.num_ratings for b in beers),
        "best_rated": None,
    }

    if beers:
        mean = sum((b.abv for b in beers), Decimal(0)) / len(beers)
        summary["mean_abv"] = mean.quantize(Decimal("0.01"))
        # ties keep the first beer in file order
        summary["best_rated"] = max(beers, key=lambda b: b.average_rating)

    return summary


def stats_command(
    resource: Optional[str] = typer.Argument(
        None,
        help="Bundled resource name or path (default: configured resource)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report parse timing",
    ),
):
    """
    Show summary statistics for a beer data file.
    """
    summary = summarize(load_beers(resource, verbose=verbose))

    table = Table(title="Beer Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Beers", str(summary["beers"]))
    table.add_row("Breweries", str(summary["breweries"]))
    table.add_row("Styles", str(summary["styles"]))
    table.add_row("Total ratings", f"{summary['total_ratings']:,}")

    if summary["mean_abv"] is not None:
        best = summary["best_rated"]
        table.add_row("Mean ABV", f"{summary['mean_abv']}%")
        table.add_row("Best rated", f"{best.name} ({best.average_rating})")

    console.print(table)
