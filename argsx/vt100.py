import sys


RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BRIGHT_BLACK = "\033[90m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str):
    print(f"{BOLD+WHITE+UNDERLINE}{text}{RESET}")


def flag(key: str, rawKey: str, payload: str) -> str:
    """Formats one parsed flag for display."""
    shown = payload if payload else f"{BRIGHT_BLACK}(empty){RESET}"
    return f"{GREEN}{key}{RESET} {BRIGHT_BLACK}{rawKey}{RESET} = {shown}"


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)
