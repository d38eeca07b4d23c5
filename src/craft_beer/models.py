"""
Structured beer records produced by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict


@dataclass(frozen=True)
class BeerRecord:
    """
    One beer parsed from a record triple.

    Attributes:
        ordinal: Rank of the beer as stated in the source data.
        name: Beer name.
        brewery: Brewery name.
        type: Beer style, e.g. "American Double / Imperial Stout".
        abv: Alcohol by volume in percent, always with two fraction digits.
        num_ratings: Number of reviews (thousands separators removed).
        average_rating: Average review score.
    """
    ordinal: int
    name: str
    brewery: str
    type: str
    abv: Decimal
    num_ratings: int
    average_rating: Decimal

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping; decimals are strings so their scale survives."""
        return {
            "ordinal": self.ordinal,
            "name": self.name,
            "brewery": self.brewery,
            "type": self.type,
            "abv": str(self.abv),
            "numRatings": self.num_ratings,
            "averageRating": str(self.average_rating),
        }
