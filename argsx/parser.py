import dataclasses as dt
import logging

from typing import Optional
from argsx import const

_logger = logging.getLogger(__name__)

# --- Cursor ------------------------------------------------------------ #


class Cursor:
    """
    A simple cursor for walking over a list of command-line arguments.
    """

    _args: list[str]
    _off: int

    def __init__(self, args: list[str], off: int = 1):
        """
        Initializes a new `Cursor` object.

        Args:
            args: The arguments to walk, index 0 being the program name.
            off: The starting index within the list.
        """
        self._args = args
        self._off = off

    def eof(self) -> bool:
        """
        Checks if the cursor ran past the last argument.

        Returns:
            True if there is nothing left to read, False otherwise.
        """
        return self._off >= len(self._args)

    def curr(self) -> Optional[str]:
        """
        Returns the argument under the cursor.

        Returns:
            The current argument, or None if at the end of the list.
        """
        if self.eof():
            return None
        return self._args[self._off]

    def next(self) -> Optional[str]:
        """
        Returns the argument under the cursor and advances past it.

        Returns:
            The consumed argument, or None if at the end of the list.
        """
        if self.eof():
            return None

        arg = self._args[self._off]
        self._off += 1
        return arg

    def isFlag(self) -> bool:
        """
        Checks if the argument under the cursor looks like a flag, without advancing.

        Returns:
            True if the current argument starts with a dash, False otherwise.
        """
        curr = self.curr()
        return curr is not None and isFlag(curr)

    def skipOperands(self) -> None:
        """Advances until the cursor sits on a flag or runs past the end."""
        while not self.eof() and not self.isFlag():
            self._off += 1


# --- Parser ------------------------------------------------------------ #


@dt.dataclass(frozen=True)
class FlagRecord:
    """
    A flag as it was found on the command line.

    Attributes:
        rawKey: The key including its leading dash(es) (e.g., "--file").
        payload: The text attached to the flag, empty for a bare flag.
    """

    rawKey: str
    payload: str = ""


def isFlag(arg: str) -> bool:
    return arg.startswith(const.FLAG_PREFIX)


def normalizeKey(key: str) -> str:
    """Strips every leading dash from a key."""
    return key.lstrip(const.FLAG_PREFIX)


def _parseFlag(c: Cursor) -> FlagRecord:
    """Reads the flag under the cursor and its payload, if any."""
    arg = c.next()
    assert arg is not None

    if const.PAYLOAD_SEP in arg:
        key, payload = arg.split(const.PAYLOAD_SEP, 1)
        return FlagRecord(key, payload)

    if c.eof() or c.isFlag():
        # the next flag stays in place, it is not a value
        return FlagRecord(arg)

    payload = c.next()
    assert payload is not None
    return FlagRecord(arg, payload)


def parseArgs(args: list[str]) -> dict[str, FlagRecord]:
    """
    Scans a list of command-line arguments into a table of flags.

    Operands that don't follow a flag are dropped, and a flag seen twice
    keeps its last payload. This never fails, whatever the input.

    Args:
        args: The arguments, index 0 being the program name.

    Returns:
        The flags keyed by their name without leading dashes.
    """
    table: dict[str, FlagRecord] = {}
    c = Cursor(args)

    while True:
        c.skipOperands()
        if c.eof():
            break

        record = _parseFlag(c)
        key = normalizeKey(record.rawKey)
        if not key:
            _logger.debug(f"Ignoring dash-only flag '{record.rawKey}'")
            continue

        table[key] = record

    _logger.debug(f"Parsed {len(table)} flag(s) out of {len(args)} argument(s)")
    return table
