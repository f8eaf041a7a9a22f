class ArgsError(ValueError):
    """
    Base class for every error raised while extracting a flag value.
    """

    pass


class MissingValueError(ArgsError):
    """Raised when a flag has no payload and no default was given."""

    key: str

    def __init__(self, key: str):
        super().__init__(f"No value specified for flag '{key}'")
        self.key = key


class EmptyValueError(ArgsError):
    """Raised when a value built from a literal payload is empty."""

    def __init__(self):
        super().__init__("Invalid value: empty")


class ParseError(ArgsError):
    """
    Raised when a payload is present but can't be converted.

    Attributes:
        text: The offending text.
        target: The name of the type we tried to convert to.
    """

    text: str
    target: str

    def __init__(self, text: str, target: str, reason: str = "invalid syntax"):
        super().__init__(f"Cannot parse '{text}' as {target}: {reason}")
        self.text = text
        self.target = target


class InvalidSyntaxError(ParseError):
    pass


class IntegerOverflowError(ParseError):
    bits: int

    def __init__(self, text: str, target: str, bits: int):
        super().__init__(text, target, f"value out of range for {bits} bits")
        self.bits = bits


class InvalidBooleanError(ParseError):
    def __init__(self, text: str):
        super().__init__(text, "bool", "unrecognized boolean token")
