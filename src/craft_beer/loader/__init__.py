# src/craft_beer/loader/__init__.py

"""
Public interface for the beer data loader stack.

    from craft_beer.loader import (
        load_lines,
        resolve_resource,
        group_lines,
        parse_record,
        LineCursor,
    )
"""

from __future__ import annotations

from .file_locator import data_dir, resolve_resource
from .file_loader import load_lines
from .grouper import JOIN_SEPARATOR, LINES_PER_RECORD, group_lines
from .tokenizer import LineCursor, parse_record


__all__ = [
    "data_dir",
    "resolve_resource",
    "load_lines",
    "JOIN_SEPARATOR",
    "LINES_PER_RECORD",
    "group_lines",
    "LineCursor",
    "parse_record",
]
