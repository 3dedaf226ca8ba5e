"""Amount parsing and validation for the input field."""

from __future__ import annotations

from enum import Enum
from typing import Final, Union

from kitchen_converter.core.engine.number_format import NumberFormat


class _NoInput(Enum):
    NO_INPUT = "no-input"

    def __repr__(self) -> str:
        return "NO_INPUT"


# Result of parsing empty or whitespace-only text. Not an error.
NO_INPUT: Final = _NoInput.NO_INPUT

ParsedAmount = Union[float, _NoInput]


class InputStatus(str, Enum):
    EMPTY = "empty"
    INVALID = "invalid"
    VALID = "valid"


class ConversionInputError(ValueError):
    """An input-field error shown inline next to the amount."""

    code: str = ""
    message: str = ""

    def __init__(self, text: str):
        self.text = text
        super().__init__(self.message)


class ParseError(ConversionInputError):
    code = "InvalidFormat"
    message = "Enter a valid number"


class ValidationError(ConversionInputError):
    code = "Negative"
    message = "Enter a non-negative amount"


def parse_amount(text: str, number_format: NumberFormat) -> ParsedAmount:
    """Parse the whole input text as a decimal in the given locale.

    Returns NO_INPUT for blank text, raises ParseError otherwise when the
    text is not a number. Every call starts from scratch on the full string.
    """
    if not text.strip():
        return NO_INPUT
    value = number_format.parse(text)
    if value is None:
        raise ParseError(text)
    return value


def validate(value: float) -> None:
    """Reject negative amounts. There is no upper bound."""
    if value < 0:
        raise ValidationError(str(value))


def check_input(text: str, number_format: NumberFormat) -> tuple[InputStatus, ParsedAmount, ConversionInputError | None]:
    """Run parse then validate, mapping the outcome onto the field's three states."""
    try:
        value = parse_amount(text, number_format)
        if value is NO_INPUT:
            return InputStatus.EMPTY, NO_INPUT, None
        validate(value)
    except ConversionInputError as exc:
        return InputStatus.INVALID, NO_INPUT, exc
    return InputStatus.VALID, value, None
