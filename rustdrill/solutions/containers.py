"""Worked answers for boxed lists, clone-on-write, shared data, options and enums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

_U8 = range(0, 256)
_U16_MAX = 2**16 - 1
PLANET_NAMES = (
    "Mercury",
    "Venus",
    "Earth",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
)


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; a tail of None ends the list."""

    head: int
    tail: Cons | None = None


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding the single value 1."""
    return Cons(1, None)


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values, copying only when something has to change.

    The input is returned as it is when it holds no negative number;
    otherwise a new list is returned and the input is left untouched.
    """
    if all(v >= 0 for v in values):
        return values
    return [abs(v) for v in values]


def _sum_for_offset(numbers: Sequence[int], workers: int, offset: int) -> int:
    return sum(n for n in numbers if n % workers == offset)


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum the numbers congruent to each offset, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(_sum_for_offset, shared, workers, offset)
            for offset in range(workers)
        ]
        return [future.result() for future in futures]


@dataclass(frozen=True)
class Planet:
    """A planet that shares ownership of the sun it orbits."""

    name: str
    sun: Any = field(repr=False, compare=False)

    def __str__(self) -> str:
        return f"Hi from {self.name}!"


def orbiting_planets(sun: Any) -> list[Planet]:
    """The eight planets in order, all holding the same sun."""
    return [Planet(name, sun) for name in PLANET_NAMES]


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at a given hour: 5 before 22, 0 until 24, None after."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"{time_of_day} is not an unsigned 16-bit integer")
    if time_of_day > 24:
        return None
    if time_of_day < 22:
        return 5
    return 0


@dataclass(frozen=True)
class Point:
    """A position with 8-bit coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x not in _U8 or self.y not in _U8:
            raise ValueError("point coordinates must lie in 0..=255")


class MessageKind(Enum):
    MOVE = auto()
    ECHO = auto()
    CHANGE_COLOR = auto()
    QUIT = auto()


@dataclass(frozen=True)
class Message:
    """A message for MachineState; ``value`` depends on the kind."""

    kind: MessageKind
    value: Any = None

    @classmethod
    def move(cls, point: Point) -> Message:
        return cls(MessageKind.MOVE, point)

    @classmethod
    def echo(cls, text: str) -> Message:
        return cls(MessageKind.ECHO, text)

    @classmethod
    def change_color(cls, red: int, green: int, blue: int) -> Message:
        color = (red, green, blue)
        if not all(channel in _U8 for channel in color):
            raise ValueError("colour channels must lie in 0..=255")
        return cls(MessageKind.CHANGE_COLOR, color)

    @classmethod
    def quit(cls) -> Message:
        return cls(MessageKind.QUIT)


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        match message.kind:
            case MessageKind.MOVE:
                self.position = message.value
            case MessageKind.ECHO:
                print(message.value)
            case MessageKind.CHANGE_COLOR:
                self.color = message.value
            case MessageKind.QUIT:
                self.quit = True