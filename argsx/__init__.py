import logging
import threading

from typing import Optional

from . import const, vt100
from .context import Argsx, processArgs
from .convert import DATE, DATETIME, KITCHEN, RFC3339
from .errors import (
    ArgsError,
    EmptyValueError,
    IntegerOverflowError,
    InvalidBooleanError,
    InvalidSyntaxError,
    MissingValueError,
    ParseError,
)
from .options import Options, withDefault, withDelimiter
from .parser import FlagRecord, parseArgs
from .value import Value

__all__ = [
    "Argsx",
    "ArgsError",
    "DATE",
    "DATETIME",
    "EmptyValueError",
    "FlagRecord",
    "IntegerOverflowError",
    "InvalidBooleanError",
    "InvalidSyntaxError",
    "KITCHEN",
    "MissingValueError",
    "Options",
    "ParseError",
    "RFC3339",
    "Value",
    "default",
    "fetch",
    "main",
    "parseArgs",
    "setArgs",
    "withDefault",
    "withDelimiter",
]

_default: Optional[Argsx] = None
_defaultLock = threading.Lock()


def default() -> Argsx:
    """Returns the instance reading the arguments of the running process."""
    global _default
    if _default is None:
        with _defaultLock:
            if _default is None:
                _default = Argsx()
    return _default


def fetch(key: str) -> Value:
    """
    Looks up a flag of the running process by name.

        # python app.py --config ~/config/file/path.yaml
        fetch("config").string() # "~/config/file/path.yaml"
    """
    return default().fetch(key)


def setArgs(args: Optional[list[str]]):
    """Replaces the arguments seen by `fetch`, None going back to `sys.argv`."""
    default().setArgs(args)


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def inspect(args: list[str]):
    """Prints how `args` are scanned into flags."""
    table = parseArgs([const.ARGV0] + args)
    vt100.title(f"{len(table)} flag(s)")
    for key, record in table.items():
        print(vt100.indent(vt100.flag(key, record.rawKey, record.payload)))


def main(argv: Optional[list[str]] = None) -> int:
    args = processArgs()[1:] if argv is None else argv
    flags = Argsx([const.ARGV0] + args)

    try:
        logger.setup(flags.has("verbose") and flags.fetch("verbose").mustBoolean())

        if flags.has("version") and flags.fetch("version").mustBoolean():
            print(f"argsx v{const.VERSION_STR}")
            return 0

        inspect(args)
        return 0

    except (ArgsError, RuntimeError) as e:
        logging.exception(e)
        vt100.error(str(e))
        return 1

    except KeyboardInterrupt:
        print()
        return 1
