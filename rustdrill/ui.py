"""Terminal styling and status messages."""

import os

_COLORS = {
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
}
_RESET = "\x1b[0m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def colored(text: object, color: str) -> str:
    """Wrap ``text`` in the ANSI escape sequence for ``color``."""
    try:
        code = _COLORS[color]
    except KeyError:
        raise ValueError(f"unknown color: {color!r}") from None
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Wrap ``text`` in the ANSI escape sequence for bold output."""
    return f"\x1b[1m{text}{_RESET}"


def _announce(symbol: str, fallback: str, color: str, message: str) -> None:
    mark = fallback if no_emoji() else symbol
    print(f"{colored(mark, color)} {colored(message, color)}")


def warn(message: str) -> None:
    """Print a red warning line."""
    _announce("⚠️ ", "!", "red", message)


def success(message: str) -> None:
    """Print a green success line."""
    _announce("✅", "✓", "green", message)