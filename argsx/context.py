import os
import sys
import threading
import logging

from typing import Optional
from argsx import const
from argsx.parser import FlagRecord, normalizeKey, parseArgs
from argsx.value import Value

_logger = logging.getLogger(__name__)


def processArgs() -> list[str]:
    """
    Returns the arguments of the running process.

    Tokens from the ARGSX_EXTRA_ARGS environment variable are inserted
    right after the program name.
    """
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    return sys.argv[:1] + (extra.split(" ") if extra else []) + sys.argv[1:]


class Argsx:
    """
    Gives typed access to the flags of one argument list.

    The list is scanned once, the first time a flag is looked up. Concurrent
    first lookups wait for that single scan instead of repeating it.
    """

    _args: Optional[list[str]]
    _table: Optional[dict[str, FlagRecord]]
    _lock: threading.Lock

    def __init__(self, args: Optional[list[str]] = None):
        """
        Initializes a new `Argsx` object.

        Args:
            args: The arguments to scan, index 0 being the program name.
                Defaults to the arguments of the running process.
        """
        self._args = list(args) if args is not None else None
        self._table = None
        self._lock = threading.Lock()

    @property
    def args(self) -> list[str]:
        if self._args is None:
            return processArgs()
        return list(self._args)

    def setArgs(self, args: Optional[list[str]]):
        """Replaces the argument list, the next lookup scans it again."""
        with self._lock:
            self._args = list(args) if args is not None else None
            self._table = None
        _logger.debug("Argument list replaced, flags will be parsed again")

    def _build(self) -> dict[str, FlagRecord]:
        # a table is only ever stored complete, None means not built yet
        table = self._table
        if table is not None:
            return table

        with self._lock:
            if self._table is None:
                args = self.args
                _logger.debug(f"Parsing flags of {args}")
                self._table = parseArgs(args)
            return self._table

    def fetch(self, key: str) -> Value:
        """
        Looks up a flag by name.

            Argsx(["prog", "--config", "~/config.yaml"]).fetch("config").string() # "~/config.yaml"

        Args:
            key: The flag name, leading dashes are ignored.

        Returns:
            The value of the flag, which may be absent.
        """
        key = normalizeKey(key)
        return Value.fromRecord(key, self._build().get(key))

    def has(self, key: str) -> bool:
        return normalizeKey(key) in self._build()

    def keys(self) -> list[str]:
        return list(self._build().keys())

    def table(self) -> dict[str, FlagRecord]:
        return dict(self._build())
