"""
parser_core.py
Load -> group -> tokenize pipeline for beer data files.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from craft_beer.config import get_config
from craft_beer.logging import get_logger
from craft_beer.loader import group_lines, load_lines, parse_record
from craft_beer.models import BeerRecord


class CraftBeerParser:
    """
    High-level parser:
      - loads the resource into raw lines
      - merges each record triple into one composite line
      - tokenizes every composite line into a BeerRecord

    Parsing is fail-fast: the first malformed record aborts the run and no
    partial list is returned. An instance keeps the intermediate results of
    its last run; use one instance per thread.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger(__name__)

        self.raw_lines: List[str] = []
        self.lines: List[str] = []
        self.records: List[BeerRecord] = []

    # ---------------------------------------------------------
    # Stages
    # ---------------------------------------------------------
    def load(self, resource: Union[str, Path, None] = None) -> List[str]:
        resource = resource if resource is not None else self.cfg.resource
        self.log.info(f"Loading beer data: {resource}")
        self.raw_lines = load_lines(resource, encoding=self.cfg.encoding)
        return self.raw_lines

    def group(self) -> List[str]:
        self.lines = group_lines(self.raw_lines)
        if self.cfg.debug:
            self.log.debug(f"Composite line count = {len(self.lines)}")
        return self.lines

    def parse_lines(self) -> List[BeerRecord]:
        self.records = [
            parse_record(line, record_number=number)
            for number, line in enumerate(self.lines, start=1)
        ]
        return self.records

    # ---------------------------------------------------------
    # Full run
    # ---------------------------------------------------------
    def run(self, resource: Union[str, Path, None] = None) -> List[BeerRecord]:
        """
        Full parse sequence.
        Returns: list of BeerRecord in file order.
        """
        self.load(resource)

        try:
            self.group()
            records = self.parse_lines()
        except Exception:
            self.log.exception("Beer data parse failed.")
            raise

        self.log.info(f"Parsed {len(records)} beer records.")
        return records


def parse_beer_file(resource_name: Union[str, Path, None] = None) -> List[BeerRecord]:
    """
    Parse a beer data resource into BeerRecord objects.

    Args:
        resource_name: Bundled resource name or file path. Defaults to the
            ``data.resource`` entry of the config (``beer-data.txt``).

    Raises:
        ResourceNotFound, ReadFailure: the resource cannot be loaded.
        MalformedRecord: a record triple does not parse.
    """
    return CraftBeerParser().run(resource_name)
