
from __future__ import annotations

import typer

from craft_beer.cli.commands.export import export_command
from craft_beer.cli.commands.list_beers import list_command
from craft_beer.cli.commands.stats import stats_command

app = typer.Typer(
    name="craft-beer",
    help="Craft beer data file parser and exporter",
    add_completion=False,
)

app.command("list")(list_command)
app.command("export")(export_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
