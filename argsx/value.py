import dataclasses as dt
import logging

from datetime import datetime, timedelta
from typing import Callable, Optional, TypeVar

from argsx import convert
from argsx.convert import Parser
from argsx.errors import ArgsError, EmptyValueError, MissingValueError
from argsx.options import Options
from argsx.parser import FlagRecord

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def must(fn: Callable[[], T], zero: T) -> T:
    """Calls `fn` and returns `zero` instead if it raised an `ArgsError`."""
    try:
        return fn()
    except ArgsError as e:
        _logger.debug(f"Ignoring error: {e}")
        return zero


def toSlice(
    payload: str,
    delimiter: str,
    parse: Parser[T],
    element: Optional[T] = None,
) -> list[T]:
    """
    Splits a payload and parses every element.

    Empty elements are replaced by `element` when given, dropped otherwise.
    The first element failing to parse aborts the whole conversion.
    """
    result: list[T] = []
    for s in payload.split(delimiter):
        if not s:
            if element is not None:
                result.append(element)
            continue
        result.append(parse(s))
    return result


def _options(
    opts: Optional[Options[T]],
    delimiter: Optional[str],
    default: Optional[list[T]],
) -> Options[T]:
    return (opts or Options()).override(delimiter, default)


@dt.dataclass(frozen=True)
class Value:
    """
    A read-only view over the payload of one flag.

    Attributes:
        key: The flag name without dashes, empty when built with `Value.of`.
        rawKey: The flag as written on the command line, empty if absent.
        payload: The text attached to the flag, possibly empty.

    Every accessor comes in two forms: one raising an `ArgsError` when the
    payload is missing or malformed, and a `must*` one returning the zero
    value of its type instead. A `must*` caller can't tell a malformed
    payload from an absent flag.
    """

    key: str = ""
    rawKey: str = ""
    payload: str = ""

    @staticmethod
    def of(payload: str) -> "Value":
        """
        Builds a value from a literal payload.

            Value.of("12").integer() # 12
        """
        return Value(payload=payload)

    @staticmethod
    def fromRecord(key: str, record: Optional[FlagRecord]) -> "Value":
        """Builds the value for `key`, `record` being None if the flag is absent."""
        if record is None:
            return Value(key=key)
        return Value(key, record.rawKey, record.payload)

    @property
    def present(self) -> bool:
        """True if the flag appeared on the command line."""
        return bool(self.rawKey)

    def _missing(self) -> ArgsError:
        if not self.key:
            return EmptyValueError()
        return MissingValueError(self.key)

    def get(self, parse: Parser[T], default: Optional[T] = None) -> T:
        """
        Converts the payload with `parse`.

        Args:
            parse: Converts a non-empty payload, raising a `ParseError` on failure.
            default: Returned when the payload is empty.

        Raises:
            MissingValueError: The payload is empty, there is no default.
            EmptyValueError: Same, for a value built with `Value.of`.
            ParseError: `parse` rejected the payload.
        """
        if not self.payload:
            if default is not None:
                return default
            raise self._missing()
        return parse(self.payload)

    def getSlice(
        self,
        parse: Parser[T],
        opts: Optional[Options[T]] = None,
        element: Optional[T] = None,
    ) -> list[T]:
        """
        Splits the payload and converts each element with `parse`.

        Args:
            parse: Converts a single non-empty element.
            opts: The delimiter and the sequence returned for an empty payload.
            element: Stands in for empty elements, which are dropped if None.
        """
        opts = opts or Options()
        if not self.payload:
            default = opts.defaultValue()
            if default is not None:
                return default
            raise self._missing()
        return toSlice(self.payload, opts.delimiter, parse, element)

    # --- String ------------------------------------------------------------- #

    def string(self, default: Optional[str] = None) -> str:
        """
        Returns the payload as-is.

            Value.of("abc").string() # "abc"
            Value.of("").string("default") # "default"
        """
        return self.get(convert.parseString, default)

    def mustString(self, default: Optional[str] = None) -> str:
        return must(lambda: self.string(default), "")

    def stringSlice(
        self,
        opts: Optional[Options[str]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[str]] = None,
    ) -> list[str]:
        """
        Returns the payload split on the delimiter, empty elements included.

            Value.of("A,B,C").stringSlice() # ["A", "B", "C"]
            Value.of("G/H/I").stringSlice(delimiter="/") # ["G", "H", "I"]
        """
        opts = _options(opts, delimiter, default)
        if not self.payload:
            return self.getSlice(convert.parseString, opts)
        return self.payload.split(opts.delimiter)

    def mustStringSlice(
        self,
        opts: Optional[Options[str]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[str]] = None,
    ) -> Optional[list[str]]:
        return must(lambda: self.stringSlice(opts, delimiter=delimiter, default=default), None)

    # --- Bool --------------------------------------------------------------- #

    def boolean(self, default: Optional[bool] = None) -> bool:
        """
        Returns the payload as a boolean, a bare flag meaning True.

            Value.of("false").boolean() # False
            Value.of("").boolean() # True
            Value.of("").boolean(False) # False
        """
        return self.get(convert.parseBool, True if default is None else default)

    def mustBoolean(self, default: Optional[bool] = None) -> bool:
        return must(lambda: self.boolean(default), False)

    def booleanSlice(
        self,
        opts: Optional[Options[bool]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[bool]] = None,
    ) -> list[bool]:
        """
        Returns a list of booleans, empty elements counting as True.

            Value.of("true,,0").booleanSlice() # [True, True, False]
        """
        opts = _options(opts, delimiter, default)
        return self.getSlice(convert.parseBool, opts, True)

    def mustBooleanSlice(
        self,
        opts: Optional[Options[bool]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[bool]] = None,
    ) -> Optional[list[bool]]:
        return must(lambda: self.booleanSlice(opts, delimiter=delimiter, default=default), None)

    # --- Integers ----------------------------------------------------------- #

    def integer(self, default: Optional[int] = None) -> int:
        """
        Returns the payload as a 64-bit signed integer.

            Value.of("5").integer() # 5
            Value.of("0x10").integer() # 16
            Value.of("").integer(7) # 7
        """
        return self.get(convert.parseInt, default)

    def mustInteger(self, default: Optional[int] = None) -> int:
        return must(lambda: self.integer(default), 0)

    def integerSlice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> list[int]:
        """
        Returns a list of 64-bit signed integers.

            Value.of("1,2,3").integerSlice() # [1, 2, 3]
            Value.of("7;8;9").integerSlice(delimiter=";") # [7, 8, 9]
        """
        return self.getSlice(convert.parseInt, _options(opts, delimiter, default))

    def mustIntegerSlice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> Optional[list[int]]:
        return must(lambda: self.integerSlice(opts, delimiter=delimiter, default=default), None)

    def int8(self, default: Optional[int] = None) -> int:
        return self.get(convert.parseInt8, default)

    def mustInt8(self, default: Optional[int] = None) -> int:
        return must(lambda: self.int8(default), 0)

    def int8Slice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> list[int]:
        return self.getSlice(convert.parseInt8, _options(opts, delimiter, default))

    def mustInt8Slice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> Optional[list[int]]:
        return must(lambda: self.int8Slice(opts, delimiter=delimiter, default=default), None)

    def int16(self, default: Optional[int] = None) -> int:
        return self.get(convert.parseInt16, default)

    def mustInt16(self, default: Optional[int] = None) -> int:
        return must(lambda: self.int16(default), 0)

    def int16Slice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> list[int]:
        return self.getSlice(convert.parseInt16, _options(opts, delimiter, default))

    def mustInt16Slice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> Optional[list[int]]:
        return must(lambda: self.int16Slice(opts, delimiter=delimiter, default=default), None)

    def int32(self, default: Optional[int] = None) -> int:
        return self.get(convert.parseInt32, default)

    def mustInt32(self, default: Optional[int] = None) -> int:
        return must(lambda: self.int32(default), 0)

    def int32Slice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> list[int]:
        return self.getSlice(convert.parseInt32, _options(opts, delimiter, default))

    def mustInt32Slice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> Optional[list[int]]:
        return must(lambda: self.int32Slice(opts, delimiter=delimiter, default=default), None)

    def int64(self, default: Optional[int] = None) -> int:
        return self.get(convert.parseInt64, default)

    def mustInt64(self, default: Optional[int] = None) -> int:
        return must(lambda: self.int64(default), 0)

    def int64Slice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> list[int]:
        return self.getSlice(convert.parseInt64, _options(opts, delimiter, default))

    def mustInt64Slice(
        self,
        opts: Optional[Options[int]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[int]] = None,
    ) -> Optional[list[int]]:
        return must(lambda: self.int64Slice(opts, delimiter=delimiter, default=default), None)

    # --- Float -------------------------------------------------------------- #

    def float64(self, default: Optional[float] = None) -> float:
        """
        Returns the payload as a float.

            Value.of("1.5").float64() # 1.5
        """
        return self.get(convert.parseFloat, default)

    def mustFloat64(self, default: Optional[float] = None) -> float:
        return must(lambda: self.float64(default), 0.0)

    def float64Slice(
        self,
        opts: Optional[Options[float]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[float]] = None,
    ) -> list[float]:
        return self.getSlice(convert.parseFloat, _options(opts, delimiter, default))

    def mustFloat64Slice(
        self,
        opts: Optional[Options[float]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[float]] = None,
    ) -> Optional[list[float]]:
        return must(lambda: self.float64Slice(opts, delimiter=delimiter, default=default), None)

    # --- Duration ----------------------------------------------------------- #

    def duration(self, default: Optional[timedelta] = None) -> timedelta:
        """
        Returns the payload as a duration.

            Value.of("3s").duration() # timedelta(seconds=3)
            Value.of("").duration(timedelta(seconds=1)) # timedelta(seconds=1)
        """
        return self.get(convert.parseDuration, default)

    def mustDuration(self, default: Optional[timedelta] = None) -> timedelta:
        return must(lambda: self.duration(default), timedelta(0))

    def durationSlice(
        self,
        opts: Optional[Options[timedelta]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[timedelta]] = None,
    ) -> list[timedelta]:
        """
        Returns a list of durations.

            Value.of("1m,2s").durationSlice() # [timedelta(minutes=1), timedelta(seconds=2)]
        """
        return self.getSlice(convert.parseDuration, _options(opts, delimiter, default))

    def mustDurationSlice(
        self,
        opts: Optional[Options[timedelta]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[timedelta]] = None,
    ) -> Optional[list[timedelta]]:
        return must(lambda: self.durationSlice(opts, delimiter=delimiter, default=default), None)

    # --- Time --------------------------------------------------------------- #

    def time(self, layout: str, default: Optional[datetime] = None) -> datetime:
        """
        Returns the payload as a timestamp read with a `strptime` layout.

            Value.of("3:04PM").time(convert.KITCHEN) # datetime(1900, 1, 1, 15, 4)
        """
        return self.get(convert.timeParser(layout), default)

    def mustTime(self, layout: str, default: Optional[datetime] = None) -> datetime:
        return must(lambda: self.time(layout, default), datetime.min)

    def timeSlice(
        self,
        layout: str,
        opts: Optional[Options[datetime]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[datetime]] = None,
    ) -> list[datetime]:
        return self.getSlice(convert.timeParser(layout), _options(opts, delimiter, default))

    def mustTimeSlice(
        self,
        layout: str,
        opts: Optional[Options[datetime]] = None,
        *,
        delimiter: Optional[str] = None,
        default: Optional[list[datetime]] = None,
    ) -> Optional[list[datetime]]:
        return must(
            lambda: self.timeSlice(layout, opts, delimiter=delimiter, default=default),
            None,
        )
