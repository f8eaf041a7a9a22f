import dataclasses as dt

from typing import Generic, Optional, TypeVar
from argsx import const

T = TypeVar("T")


@dt.dataclass(frozen=True)
class Options(Generic[T]):
    """
    Controls how a payload is split into a sequence.

    Attributes:
        delimiter: The string separating elements (e.g., "," for "A,B,C").
        default: The sequence returned as-is when the payload is empty.
    """

    delimiter: str = const.DEFAULT_DELIMITER
    default: Optional[list[T]] = None

    def __post_init__(self):
        if not self.delimiter:
            raise ValueError("Delimiter can't be empty")

    def defaultValue(self) -> Optional[list[T]]:
        """Returns a copy of the default sequence, or None if there is none."""
        if self.default is None:
            return None
        return list(self.default)

    def override(
        self,
        delimiter: Optional[str] = None,
        default: Optional[list[T]] = None,
    ) -> "Options[T]":
        """Returns new options with the given fields replaced."""
        changes = {}
        if delimiter is not None:
            changes["delimiter"] = delimiter
        if default is not None:
            changes["default"] = default
        if not changes:
            return self
        return dt.replace(self, **changes)


def withDelimiter(delimiter: str) -> Options:
    """
    Shorthand for options using a custom delimiter.

        withDelimiter("-")
        withDelimiter(";")
    """
    return Options(delimiter=delimiter)


def withDefault(*values: T) -> Options[T]:
    """
    Shorthand for options providing a default sequence.

        withDefault("First", "Second")
        withDefault(1.2, 3.4)
    """
    return Options(default=list(values))
