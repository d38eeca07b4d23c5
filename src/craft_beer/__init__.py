"""
craft_beer: parser for three-line craft beer listings.

    from craft_beer import parse_beer_file

    for beer in parse_beer_file():
        print(beer)
"""

from craft_beer.core.exceptions import (
    CraftBeerError,
    MalformedRecord,
    ReadFailure,
    ResourceNotFound,
)
from craft_beer.models import BeerRecord
from craft_beer.parser_core import CraftBeerParser, parse_beer_file

__version__ = "0.1.0"

__all__ = [
    "BeerRecord",
    "CraftBeerError",
    "CraftBeerParser",
    "MalformedRecord",
    "ReadFailure",
    "ResourceNotFound",
    "parse_beer_file",
]
