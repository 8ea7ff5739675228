"""Worked answers for the error-handling exercises."""

from __future__ import annotations

from dataclasses import dataclass

_EMPTY = "cannot parse integer from empty string"
_INVALID = "invalid digit found in string"
_TOO_LARGE = "number too large to fit in target type"
_TOO_SMALL = "number too small to fit in target type"
_DIGITS = frozenset("0123456789")

_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed decimal integer within ``bounds``, with strict syntax."""
    if not text:
        raise ValueError(_EMPTY)
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits:
        raise ValueError(_INVALID)
    prefix_len = next(
        (i for i, ch in enumerate(digits) if ch not in _DIGITS), len(digits)
    )
    low, high = bounds
    value = 0
    if prefix_len:
        value = int(digits[:prefix_len])
        if negative:
            value = -value
        # Overflow is noticed while reading digits, before any bad character.
        if value > high:
            raise ValueError(_TOO_LARGE)
        if value < low:
            raise ValueError(_TOO_SMALL)
    if prefix_len < len(digits):
        raise ValueError(_INVALID)
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; an empty name raises ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a fee of one; bad input raises ValueError."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, _I32)
    cost = qty * cost_per_item + processing_fee
    if not _I32[0] <= cost <= _I32[1]:
        raise OverflowError("attempt to compute the cost with overflow")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int | None:
    """Tokens left after buying, or None when the purchase is unaffordable."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return None
    return tokens - cost


class CreationError(ValueError):
    """A value that is not a positive, non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"

    _MESSAGES = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str):
        if kind not in self._MESSAGES:
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Either the text was not an integer or the integer was not positive."""

    CREATION = "creation"
    PARSE_INT = "parse_int"

    def __init__(self, kind: str, source: ValueError):
        if kind not in (self.CREATION, self.PARSE_INT):
            raise ValueError(f"unknown parse error kind: {kind!r}")
        super().__init__(str(source))
        self.kind = kind
        self.source = source


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit signed integer and require it to be positive."""
    try:
        value = _parse_int(text, _I64)
    except ValueError as err:
        raise ParsePosNonzeroError(ParsePosNonzeroError.PARSE_INT, err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(ParsePosNonzeroError.CREATION, err) from err