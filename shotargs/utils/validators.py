"""Numeric parsing and range helpers for option values."""

from __future__ import annotations

import logging
import re
from typing import Optional

from ..core.errors import ErrorKind, OptionError

logger = logging.getLogger(__name__)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
# Anything longer cannot fit in 32 bits in any supported base.
MAX_SIGNIFICANT_DIGITS = 12

_DECIMAL_PREFIX = re.compile(r"\s*([+-]?)([0-9]+)")
# Base 0: 0x/0X hex, leading 0 octal, anything else decimal.
_AUTO_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def parse_required_number(text: str, base: int = 0, option: Optional[str] = None) -> int:
    """Parse the leading integer of ``text`` the way strtol does.

    Characters after the numeric prefix are ignored, so ``"10abc"`` is 10.
    Raises OptionError when there is no number or it does not fit in a
    signed 32-bit int.
    """

    if text is None:
        raise TypeError("parse_required_number() needs a string, not None")
    if base not in (0, 10):
        raise ValueError(f"Unsupported base: {base}")

    match = (_DECIMAL_PREFIX if base == 10 else _AUTO_PREFIX).match(text)
    if match is None:
        raise OptionError(
            f"the option is not a number: {text}",
            ErrorKind.NOT_A_NUMBER,
            option=option,
            argument=text,
        )

    sign, digits = match.group(1), match.group(2)
    digits, radix = _split_radix(digits) if base == 0 else (digits, 10)
    digits = digits.lstrip("0") or "0"
    value = None
    if len(digits) <= MAX_SIGNIFICANT_DIGITS:
        value = int(digits, radix)
        if sign == "-":
            value = -value
    if value is None or value < INT_MIN or value > INT_MAX:
        raise OptionError(
            f"number out of range: {text[:40]}",
            ErrorKind.NUMBER_OUT_OF_RANGE,
            option=option,
            argument=text,
        )
    if match.end() != len(text):
        logger.debug("Ignoring trailing characters after %d in %r", value, text)
    return value


def _split_radix(digits: str) -> tuple[str, int]:
    if digits[:2].lower() == "0x":
        return digits[2:], 16
    if digits.startswith("0"):
        return digits, 8
    return digits, 10


def parse_required_decimal(text: str, option: Optional[str] = None) -> int:
    """Parse a base-10 integer."""

    return parse_required_number(text, 10, option=option)


def non_negative(number: int) -> int:
    return 0 if number < 0 else number


def require_range(number: int, low: int, high: int) -> int:
    """Clamp ``number`` into ``[low, high]``."""

    if number < low:
        return low
    if number > high:
        return high
    return number


def is_string(value: Optional[str]) -> bool:
    """True for a non-empty string."""

    return bool(value)
