import pytest

from rustdrill.solutions.errors import (
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_pos_nonzero,
    remaining_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "cannot parse integer from empty string"),
        ("-", "invalid digit found in string"),
        (" 3", "invalid digit found in string"),
        ("99999999999", "number too large to fit in target type"),
        ("-99999999999", "number too small to fit in target type"),
    ],
)
def test_total_cost_parse_errors(text, message):
    with pytest.raises(ValueError) as info:
        total_cost(text)
    assert str(info.value) == message


def test_total_cost_accepts_signs():
    assert total_cost("+2") == 11
    assert total_cost("-2") == -9


def test_total_cost_overflow():
    with pytest.raises(OverflowError):
        total_cost("429496730")


def test_remaining_tokens_affordable():
    assert remaining_tokens(100, "8") == 59


def test_remaining_tokens_unaffordable():
    assert remaining_tokens(10, "8") is None


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.kind == CreationError.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.kind == CreationError.ZERO


def test_creation_error_messages():
    assert str(CreationError(CreationError.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationError.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert info.value.kind == ParsePosNonzeroError.PARSE_INT


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.kind == ParsePosNonzeroError.CREATION
    assert info.value.source.kind == CreationError.NEGATIVE


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.kind == ParsePosNonzeroError.CREATION
    assert info.value.source.kind == CreationError.ZERO


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)


def test_parse_accepts_64_bit_values():
    assert parse_pos_nonzero("9223372036854775807").value == 2**63 - 1


def test_parse_rejects_beyond_64_bits():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("9223372036854775808")
    assert info.value.kind == ParsePosNonzeroError.PARSE_INT
    assert str(info.value) == "number too large to fit in target type"