
from __future__ import annotations

import json
import time
from typing import Any, List, Optional
from pathlib import Path

import typer
from rich.console import Console

from craft_beer.core.exceptions import CraftBeerError
from craft_beer.models import BeerRecord
from craft_beer.parser_core import parse_beer_file

err_console = Console(stderr=True)


def load_beers(resource: Optional[str], *, verbose: bool = False) -> List[BeerRecord]:
    """
    Parse a beer data resource for a CLI command.

    Parse failures are reported on stderr and end the command with exit code 1.
    """
    t0 = time.perf_counter()

    try:
        beers = parse_beer_file(resource)
    except CraftBeerError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(f"Parsed {len(beers)} beers in {elapsed:.3f}s")

    return beers


def write_json(
    data: Any,
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
