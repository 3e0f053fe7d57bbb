"""Typed parse functions for the values a prompter can read.

Every function takes one line of text and either returns the parsed value or
raises :class:`~prompter.errors.ParseFailure`. None of them strip whitespace:
``" 42"`` is not an integer.

Only ASCII digits are accepted. Java's number parsers also take other
Unicode decimal digits (``"٣"``); here those lines are parse failures.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Dict

from .errors import ParseFailure
from .models import ValueType

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:NaN|Infinity)")

# int() refuses strings longer than sys.get_int_max_str_digits()
_DIGIT_CHUNK = 1000

_FLOAT32_MANTISSA_BITS = 23
_FLOAT32_MIN_EXPONENT = -126
_FLOAT32_MAX = (2 - Fraction(1, 1 << _FLOAT32_MANTISSA_BITS)) * 2**127


def parse_string(text: str) -> str:
    return text


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _parse_integer(text: str, type_name: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ParseFailure(text, type_name)
    value = _digits_to_int(text.lstrip("+-"))
    return -value if text.startswith("-") else value


def _parse_fixed_width(text: str, type_name: str, bits: int) -> int:
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not _INTEGER_RE.fullmatch(text):
        raise ParseFailure(text, type_name)
    significant = text.lstrip("+-").lstrip("0")
    if len(significant) > len(str(-low)):
        raise ParseFailure(text, type_name, f"out of range [{low}, {high}]")
    value = int(significant or "0")
    if text.startswith("-"):
        value = -value
    if not low <= value <= high:
        raise ParseFailure(text, type_name, f"out of range [{low}, {high}]")
    return value


def parse_byte(text: str) -> int:
    return _parse_fixed_width(text, "byte", 8)


def parse_short(text: str) -> int:
    return _parse_fixed_width(text, "short", 16)


def parse_int(text: str) -> int:
    return _parse_fixed_width(text, "int", 32)


def parse_long(text: str) -> int:
    return _parse_fixed_width(text, "long", 64)


def parse_big_integer(text: str) -> int:
    return _parse_integer(text, "big_integer")


def parse_double(text: str) -> float:
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    if not _DECIMAL_RE.fullmatch(text):
        raise ParseFailure(text, "double")
    return float(text)


def parse_float(text: str) -> float:
    """Parse a 32-bit float.

    The decimal text is rounded once, straight to the nearest binary32 value
    (ties to even), so the result matches a native single-precision parse
    rather than a double rounded a second time.
    """
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    if not _DECIMAL_RE.fullmatch(text):
        raise ParseFailure(text, "float")
    return _round_to_float32(Decimal(text))


def _round_to_float32(number: Decimal) -> float:
    sign = -1.0 if number.is_signed() else 1.0
    if number.is_zero() or number.adjusted() < -46:
        return math.copysign(0.0, sign)
    if number.adjusted() > 38:
        return math.copysign(math.inf, sign)

    value = abs(Fraction(number))
    exponent = value.numerator.bit_length() - value.denominator.bit_length()
    if value < Fraction(2) ** exponent:
        exponent -= 1
    exponent = max(exponent, _FLOAT32_MIN_EXPONENT)

    quantum = Fraction(2) ** (exponent - _FLOAT32_MANTISSA_BITS)
    rounded = round(value / quantum) * quantum
    if rounded > _FLOAT32_MAX:
        return math.copysign(math.inf, sign)
    return math.copysign(float(rounded), sign)


def parse_big_decimal(text: str) -> Decimal:
    if not _DECIMAL_RE.fullmatch(text):
        raise ParseFailure(text, "big_decimal")
    try:
        return Decimal(text)
    except InvalidOperation:  # pragma: no cover - the regex admits only valid literals
        raise ParseFailure(text, "big_decimal") from None


VALUE_TYPES: Dict[str, ValueType] = {
    value_type.name: value_type
    for value_type in (
        ValueType("string", parse_string, "any line of text, including an empty one"),
        ValueType("byte", parse_byte, "8-bit signed integer"),
        ValueType("short", parse_short, "16-bit signed integer"),
        ValueType("int", parse_int, "32-bit signed integer"),
        ValueType("long", parse_long, "64-bit signed integer"),
        ValueType("float", parse_float, "32-bit floating point number"),
        ValueType("double", parse_double, "64-bit floating point number"),
        ValueType("big_integer", parse_big_integer, "integer of any size"),
        ValueType("big_decimal", parse_big_decimal, "exact decimal number of any size"),
    )
}


def get_value_type(name: str) -> ValueType:
    try:
        return VALUE_TYPES[name]
    except KeyError:
        raise KeyError(f"Unknown value type: {name}") from None
