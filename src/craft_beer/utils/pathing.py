# src/craft_beer/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at <project_root>/src/craft_beer/utils/pathing.py:
#   parents[1] -> src/craft_beer
#   parents[3] -> project root
_PACKAGE_ROOT = Path(__file__).resolve().parents[1]
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory
    (the directory holding src/, tests/ and config/).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Absolute paths are returned unchanged.
    """
    path = Path(relative)
    if path.is_absolute():
        return path
    return project_root() / path


def package_data_dir() -> Path:
    """Directory holding the text resources bundled with the package."""
    return _PACKAGE_ROOT / "data"


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Examples:
        tests_data_path("two_beers.txt")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
