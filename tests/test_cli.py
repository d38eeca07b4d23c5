# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from craft_beer.cli import app
from craft_beer.cli.commands.stats import summarize
from craft_beer.parser_core import parse_beer_file
from craft_beer.utils import tests_data_path

runner = CliRunner()


def test_list_plain_prints_one_record_per_line() -> None:
    result = runner.invoke(app, ["list", str(tests_data_path("two_beers.txt")), "--plain"])

    assert result.exit_code == 0
    lines = [line for line in result.stdout.splitlines() if line.strip()]
    assert len(lines) == 2
    assert lines[0].startswith("BeerRecord(ordinal=1, name='Kentucky Brunch Brand Stout'")


def test_list_table_default_resource() -> None:
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "Craft Beers" in result.stdout


def test_export_json_to_stdout() -> None:
    result = runner.invoke(app, ["export", str(tests_data_path("two_beers.txt"))])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["count"] == 2
    assert data["beers"][0]["numRatings"] == 4692
    assert data["beers"][1]["abv"] == "8.00"


def test_export_json_to_file(tmp_path) -> None:
    out = tmp_path / "beers.json"
    result = runner.invoke(app, ["export", "--out", str(out), "--pretty"])

    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["count"] == 8


def test_malformed_file_exits_with_error() -> None:
    result = runner.invoke(app, ["export", str(tests_data_path("missing_percent.txt"))])
    assert result.exit_code == 1


def test_missing_resource_exits_with_error() -> None:
    result = runner.invoke(app, ["stats", "missing-beers.txt"])
    assert result.exit_code == 1


def test_stats_command_runs() -> None:
    result = runner.invoke(app, ["stats"])

    assert result.exit_code == 0
    assert "Beer Statistics" in result.stdout


def test_summarize_figures() -> None:
    summary = summarize(parse_beer_file(tests_data_path("two_beers.txt")))

    assert summary["beers"] == 2
    assert summary["breweries"] == 2
    assert summary["styles"] == 2
    assert summary["total_ratings"] == 4692 + 19380
    assert str(summary["mean_abv"]) == "10.00"
    assert summary["best_rated"].name == "Kentucky Brunch Brand Stout"


def test_summarize_empty() -> None:
    summary = summarize([])
    assert summary["beers"] == 0
    assert summary["mean_abv"] is None
    assert summary["best_rated"] is None
