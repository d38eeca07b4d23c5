# tests/test_file_loader.py

from __future__ import annotations

import pytest

from craft_beer.core.exceptions import ReadFailure, ResourceNotFound
from craft_beer.loader import data_dir, load_lines, resolve_resource
from craft_beer.utils import tests_data_path


def test_bundled_resource_exists() -> None:
    assert (data_dir() / "beer-data.txt").is_file()


def test_resolve_bundled_resource_by_name() -> None:
    path = resolve_resource("beer-data.txt")
    assert path.is_absolute()
    assert path.name == "beer-data.txt"


def test_resolve_missing_resource_raises() -> None:
    with pytest.raises(ResourceNotFound):
        resolve_resource("no-such-beers.txt")


def test_resource_not_found_is_a_file_not_found_error() -> None:
    with pytest.raises(FileNotFoundError):
        load_lines("no-such-beers.txt")


def test_load_lines_in_file_order() -> None:
    lines = load_lines(tests_data_path("two_beers.txt"))

    assert len(lines) == 6
    assert lines[0] == "1 Kentucky Brunch Brand Stout"
    assert lines[3] == "2 Heady Topper"


def test_load_lines_preserves_whitespace(tmp_path) -> None:
    path = tmp_path / "spaces.txt"
    path.write_bytes(b"  padded  \r\nnext\n\n")

    assert load_lines(path) == ["  padded  ", "next", ""]


def test_load_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert load_lines(path) == []


def test_undecodable_file_raises_read_failure() -> None:
    with pytest.raises(ReadFailure):
        load_lines(tests_data_path("latin1.txt"))


def test_explicit_encoding_is_honoured() -> None:
    lines = load_lines(tests_data_path("latin1.txt"), encoding="latin-1")
    assert lines[0] == "1 Café Stout"


def test_directory_is_not_a_resource(tmp_path) -> None:
    with pytest.raises(ResourceNotFound):
        load_lines(tmp_path)
