"""Worked answers for the three quizzes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(num_apples: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return num_apples * 2 if num_apples <= 40 else num_apples


class CommandKind(Enum):
    UPPERCASE = auto()
    TRIM = auto()
    APPEND = auto()


@dataclass(frozen=True)
class Command:
    """A string transformation; ``times`` is used by APPEND only."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")

    @classmethod
    def uppercase(cls) -> Command:
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        return cls(CommandKind.APPEND, times)


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.times


def transformer(items) -> list[str]:
    """Apply each (string, command) pair and collect the results."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard(Generic[T]):
    """A report card whose grade may be any printable value."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )

    def __str__(self) -> str:
        return self.render()