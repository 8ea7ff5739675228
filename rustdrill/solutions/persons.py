"""Worked answers for building a Person from "name,age" text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Person:
    """A named person; the defaults are the fallback person."""

    name: str = "John"
    age: int = 30


class PersonErrorKind(Enum):
    EMPTY = auto()
    BAD_LEN = auto()
    NO_NAME = auto()
    PARSE_INT = auto()


class ParsePersonError(ValueError):
    """Why a text could not be turned into a Person."""

    def __init__(self, kind: PersonErrorKind, detail: str = ""):
        super().__init__(detail or kind.name.lower())
        self.kind = kind
        self.detail = detail


def _parse_age(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def parse_person(text: str) -> Person:
    """Parse exactly "name,age"; raise ParsePersonError otherwise."""
    if not text:
        raise ParsePersonError(PersonErrorKind.EMPTY)
    parts = text.split(",")
    if len(parts) != 2:
        raise ParsePersonError(PersonErrorKind.BAD_LEN)
    name, age_text = parts
    if not name:
        raise ParsePersonError(PersonErrorKind.NO_NAME)
    try:
        age = _parse_age(age_text)
    except ValueError as err:
        raise ParsePersonError(PersonErrorKind.PARSE_INT, str(err)) from err
    return Person(name=name, age=age)


def person_from(text: str) -> Person:
    """Parse like parse_person, falling back to the default Person."""
    try:
        return parse_person(text)
    except ParsePersonError:
        return Person()