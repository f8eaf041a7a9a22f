VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"
DESCRIPTION = "Typed access to command-line flags without declaring them first"

ARGV0 = "argsx"
FLAG_PREFIX = "-"
PAYLOAD_SEP = "="
DEFAULT_DELIMITER = ","
EXTRA_ARGS_ENV = "ARGSX_EXTRA_ARGS"
