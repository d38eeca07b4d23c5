"""
File Locator

Resolves a beer data resource name to an absolute, validated path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from craft_beer.config import get_config
from craft_beer.core.exceptions import ResourceNotFound
from craft_beer.logging import get_logger
from craft_beer.utils import package_data_dir, resolve_project_path

log = get_logger(__name__)


def data_dir() -> Path:
    """Directory that bundled resource names are resolved against."""
    configured = get_config().paths.get("data_dir")
    if configured:
        return resolve_project_path(configured)
    return package_data_dir()


def resolve_resource(name: Union[str, Path]) -> Path:
    """
    Turn a resource name into an absolute path to an existing file.

    A name that already points at an existing file is used as-is; anything
    else is looked up in the data directory.

    Raises:
        ResourceNotFound: if neither location holds a regular file.
    """
    direct = Path(name)
    if direct.is_file():
        log.debug(f"Using resource path as given: {direct.resolve()}")
        return direct.resolve()

    bundled = data_dir() / direct
    if bundled.is_file():
        log.debug(f"Resolved resource {str(name)!r} to {bundled}")
        return bundled.resolve()

    log.error(f"Beer data resource not found: {name}")
    raise ResourceNotFound(f"Beer data resource not found: {name}")
