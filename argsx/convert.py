import math
import re

from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Callable, TypeVar

from argsx.errors import (
    IntegerOverflowError,
    InvalidBooleanError,
    InvalidSyntaxError,
    ParseError,
)

T = TypeVar("T")

Parser = Callable[[str], T]

# Standard layouts for `parseTime`, named after the formats they describe.
KITCHEN = "%I:%M%p"
DATE = "%Y-%m-%d"
DATETIME = "%Y-%m-%d %H:%M:%S"
RFC3339 = "%Y-%m-%dT%H:%M:%S%z"

TRUE_TOKENS = ("1", "t", "true")
FALSE_TOKENS = ("0", "f", "false")

_INFINITIES = ("inf", "infinity")


def _isPlain(text: str) -> bool:
    """Checks that a numeric literal is ASCII with no surrounding whitespace."""
    return text.isascii() and text == text.strip()


def parseString(text: str) -> str:
    return text


def parseBool(text: str) -> bool:
    """Parses a boolean, accepting the usual spellings in any case."""
    token = text.lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    raise InvalidBooleanError(text)


def intParser(bits: int) -> Parser[int]:
    """
    Builds a parser for signed integers that must fit in `bits` bits.

    Decimal and 0x/0o/0b prefixed literals are accepted, with an optional
    sign and `_` separators.
    """
    target = f"int{bits}"
    lo = -(1 << (bits - 1))
    hi = (1 << (bits - 1)) - 1

    def parse(text: str) -> int:
        if not _isPlain(text):
            raise InvalidSyntaxError(text, target)

        try:
            value = int(text, 0)
        except ValueError:
            raise InvalidSyntaxError(text, target) from None

        if value < lo or value > hi:
            raise IntegerOverflowError(text, target, bits)
        return value

    parse.__name__ = f"parseInt{bits}"
    return parse


parseInt8 = intParser(8)
parseInt16 = intParser(16)
parseInt32 = intParser(32)
parseInt64 = intParser(64)
parseInt = parseInt64


def parseFloat(text: str) -> float:
    """Parses a float, "inf" and "nan" included; too large values are an error."""
    if not _isPlain(text) or "_" in text:
        raise InvalidSyntaxError(text, "float64")
    try:
        value = float(text)
    except ValueError:
        raise InvalidSyntaxError(text, "float64") from None

    if math.isinf(value) and text.lstrip("+-").lower() not in _INFINITIES:
        raise ParseError(text, "float64", "value out of range")
    return value


# --- Durations ---------------------------------------------------------- #

_DURATION_UNITS: dict[str, Decimal] = {
    "ns": Decimal(1),
    "us": Decimal(1_000),
    "µs": Decimal(1_000),  # U+00B5 micro sign
    "μs": Decimal(1_000),  # U+03BC greek mu
    "ms": Decimal(1_000_000),
    "s": Decimal(1_000_000_000),
    "m": Decimal(60_000_000_000),
    "h": Decimal(3_600_000_000_000),
}

_DURATION_PART = r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)"
_DURATION_RE = re.compile(rf"([-+]?)((?:{_DURATION_PART})+)", re.ASCII)
_DURATION_PART_RE = re.compile(_DURATION_PART, re.ASCII)


def parseDuration(text: str) -> timedelta:
    """
    Parses a duration such as "300ms", "-1.5h" or "2h45m".

    Each part is a decimal number followed by a unit, one of "ns", "us"
    (or "µs"), "ms", "s", "m", "h". A lone "0" is also accepted.
    Sub-microsecond precision is rounded away.
    """
    if text in ("0", "+0", "-0"):
        return timedelta(0)

    match = _DURATION_RE.fullmatch(text)
    if match is None:
        raise InvalidSyntaxError(text, "duration")

    sign, body = match.group(1), match.group(2)
    nanos = Decimal(0)
    try:
        for number, unit in _DURATION_PART_RE.findall(body):
            nanos += Decimal(number) * _DURATION_UNITS[unit]
    except InvalidOperation:
        raise InvalidSyntaxError(text, "duration") from None

    if sign == "-":
        nanos = -nanos

    try:
        return timedelta(microseconds=int((nanos / 1000).to_integral_value()))
    except OverflowError:
        raise ParseError(text, "duration", "value out of range") from None


# --- Times -------------------------------------------------------------- #


def timeParser(layout: str) -> Parser[datetime]:
    """Builds a parser reading timestamps with a `strptime` layout."""

    def parse(text: str) -> datetime:
        try:
            return datetime.strptime(text, layout)
        except ValueError:
            raise InvalidSyntaxError(text, f"time ({layout})") from None

    return parse
