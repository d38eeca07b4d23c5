from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from craft_beer.cli.utils import load_beers, write_json

console = Console(stderr=True)


def export_command(
    resource: Optional[str] = typer.Argument(
        None,
        help="Bundled resource name or path (default: configured resource)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export parsed beers to JSON (stdout by default).
    """
    beers = load_beers(resource, verbose=verbose)

    data = {
        "count": len(beers),
        "beers": [beer.to_dict() for beer in beers],
    }

    write_json(data, out=out, pretty=pretty)

    if verbose:
        console.log(f"Exported {len(beers)} beers to {out or 'stdout'}")
