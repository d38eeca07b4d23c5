
"""
CLI command modules for craft_beer.

Each command module defines a single Typer-compatible command function.
"""

from craft_beer.cli.commands.export import export_command
from craft_beer.cli.commands.list_beers import list_command
from craft_beer.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "list_command",
    "stats_command",
]
