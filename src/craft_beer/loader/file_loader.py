"""
Loads a beer data resource into raw text lines.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from craft_beer.config import get_config
from craft_beer.core.exceptions import ReadFailure
from craft_beer.logging import get_logger

from .file_locator import resolve_resource

log = get_logger(__name__)


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def load_lines(resource: Union[str, Path], encoding: Optional[str] = None) -> List[str]:
    """
    Read every line of a beer data resource, in file order.

    Args:
        resource: Bundled resource name or path to a file.
        encoding: Text encoding; defaults to ``data.encoding`` from config.

    Returns:
        The lines without their line terminators. Leading and trailing
        spaces are kept; trimming is the tokenizer's job.

    Raises:
        ResourceNotFound: if the resource does not exist.
        ReadFailure: if the file cannot be opened or decoded.
    """
    path = resolve_resource(resource)
    encoding = encoding or get_config().encoding

    try:
        with path.open("r", encoding=encoding, newline="") as f:
            lines = [_strip_eol(raw) for raw in f]
    except UnicodeDecodeError as exc:
        log.error(f"Cannot decode {path} as {encoding}: {exc}")
        raise ReadFailure(f"Cannot decode {path} as {encoding}") from exc
    except OSError as exc:
        log.error(f"Cannot read {path}: {exc}")
        raise ReadFailure(f"Cannot read {path}: {exc}") from exc

    log.info(f"Loaded {len(lines)} lines from {path}")
    return lines
