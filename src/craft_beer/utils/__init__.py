# src/craft_beer/utils/__init__.py

from .pathing import (
    project_root,
    resolve_project_path,
    package_data_dir,
    tests_data_path,
)

__all__ = [
    "project_root",
    "resolve_project_path",
    "package_data_dir",
    "tests_data_path",
]
