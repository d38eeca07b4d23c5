# src/craft_beer/loader/grouper.py

from __future__ import annotations

from typing import List, Sequence

from craft_beer.logging import get_logger

log = get_logger(__name__)

LINES_PER_RECORD = 3
JOIN_SEPARATOR = " | "


def group_lines(lines: Sequence[str]) -> List[str]:
    """
    Merge each record triple into one composite line.

        1 Kentucky Brunch Brand Stout
        Toppling Goliath Brewing Company
        American Double / Imperial Stout | 12.00% 4,692 4.69

    becomes

        1 Kentucky Brunch Brand Stout | Toppling Goliath Brewing Company | American Double / Imperial Stout | 12.00% 4,692 4.69

    A trailing group shorter than three lines is dropped without error.
    The input sequence is left untouched.
    """
    complete = len(lines) - len(lines) % LINES_PER_RECORD

    grouped = [
        JOIN_SEPARATOR.join(lines[start : start + LINES_PER_RECORD])
        for start in range(0, complete, LINES_PER_RECORD)
    ]

    leftover = len(lines) - complete
    if leftover:
        log.debug(f"Dropping {leftover} trailing line(s) that do not form a full record")

    return grouped
