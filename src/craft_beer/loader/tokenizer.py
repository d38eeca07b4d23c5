# src/craft_beer/loader/tokenizer.py

from __future__ import annotations

import re
from decimal import Decimal, DecimalException, localcontext
from typing import Optional

from craft_beer.core.exceptions import MalformedRecord
from craft_beer.models import BeerRecord

SPACE = " "
FIELD_SEPARATOR = "|"
PERCENT = "%"

_INTEGER_RE = re.compile(r"[+-]?\d+")
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_NON_DIGIT_RE = re.compile(r"\D")
_TWO_PLACES = Decimal("0.01")
_MAX_DIGITS = 1000


class LineCursor:
    """
    The unconsumed remainder of one composite line.

    Each ``take`` cuts off everything before the first occurrence of a
    separator, drops the separator itself and trims spaces from both the
    token and what is left. The line itself is not trimmed up front, so a
    leading space leaves the ordinal empty. The remainder only ever shrinks;
    there is no backtracking.
    """

    def __init__(self, line: str):
        self.line = line
        self.remaining = line

    def take(self, separator: str, field: str) -> str:
        pos = self.remaining.find(separator)
        if pos == -1:
            raise MalformedRecord(
                f"Separator {separator!r} not found while reading {field}",
                field=field,
                separator=separator,
                line=self.line,
            )

        token = self.remaining[:pos].strip(SPACE)
        self.remaining = self.remaining[pos + len(separator) :].strip(SPACE)
        return _require(token, field, self.line)

    def rest(self, field: str) -> str:
        """Consume and return everything that is left."""
        token, self.remaining = self.remaining, ""
        return _require(token, field, self.line)


def _require(token: str, field: str, line: str) -> str:
    if not token:
        raise MalformedRecord(f"Empty {field}", field=field, line=line)
    return token


def _parse_int(text: str, field: str, line: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise MalformedRecord(f"Invalid {field}: {text!r}", field=field, line=line)
    return int(text)


def _parse_decimal(text: str, field: str, line: str) -> Decimal:
    # Decimal() alone would also take "4_69", "NaN" and padded text.
    if not _DECIMAL_RE.fullmatch(text):
        raise MalformedRecord(f"Invalid {field}: {text!r}", field=field, line=line)
    try:
        return Decimal(text)
    except DecimalException:
        raise MalformedRecord(f"Invalid {field}: {text!r}", field=field, line=line) from None


def _parse_abv(text: str, line: str) -> Decimal:
    value = _parse_decimal(text, "abv", line)
    parts = value.as_tuple()

    # Enough precision for an exact rescale of large values such as 1E+30.
    with localcontext() as ctx:
        ctx.prec = min(len(parts.digits) + max(parts.exponent, 0) + 3, _MAX_DIGITS)
        try:
            scaled = value.quantize(_TWO_PLACES)
        except DecimalException:
            raise MalformedRecord(f"Invalid abv: {text!r}", field="abv", line=line) from None

    # Rescaling must be exact: 12 -> 12.00 is fine, 12.345 is not.
    if scaled != value:
        raise MalformedRecord(
            f"abv {text!r} has more than two fraction digits", field="abv", line=line
        )
    return scaled


def _parse_num_ratings(text: str, line: str) -> int:
    digits = _NON_DIGIT_RE.sub("", text)
    if not digits:
        raise MalformedRecord(
            f"Invalid num_ratings: {text!r}", field="num_ratings", line=line
        )
    return int(digits)


def parse_record(line: str, record_number: Optional[int] = None) -> BeerRecord:
    """
    Parse one composite line into a BeerRecord.

    Expected layout (see ``grouper.group_lines``):

        <ordinal> <name> | <brewery> | <type> | <abv>% <num_ratings> <average_rating>

    Fields are extracted strictly left to right:
        1. ordinal          up to the first space
        2. name             up to the first "|"
        3. brewery          up to the next "|"
        4. type             up to the next "|"
        5. abv              up to "%", rescaled to two fraction digits
        6. num_ratings      up to the next space, non-digits removed ("4,692" -> 4692)
        7. average_rating   whatever is left

    Raises:
        MalformedRecord: if a separator is missing, a field is empty or a
            number does not parse. Nothing is returned for a partial record.
    """
    try:
        cursor = LineCursor(line)

        ordinal = _parse_int(cursor.take(SPACE, "ordinal"), "ordinal", line)
        name = cursor.take(FIELD_SEPARATOR, "name")
        brewery = cursor.take(FIELD_SEPARATOR, "brewery")
        beer_type = cursor.take(FIELD_SEPARATOR, "type")
        abv = _parse_abv(cursor.take(PERCENT, "abv"), line)
        num_ratings = _parse_num_ratings(cursor.take(SPACE, "num_ratings"), line)
        average_rating = _parse_decimal(
            cursor.rest("average_rating"), "average_rating", line
        )
    except MalformedRecord as exc:
        exc.record_number = record_number
        raise

    return BeerRecord(
        ordinal=ordinal,
        name=name,
        brewery=brewery,
        type=beer_type,
        abv=abv,
        num_ratings=num_ratings,
        average_rating=average_rating,
    )
