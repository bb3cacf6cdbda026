"""Conversions between stored text and typed values.

Parsers return ``None`` when the text does not hold a value of the requested
type; callers decide what a miss means.
"""
from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1

_INT_RX = re.compile(r"[+-]?[0-9]+")
_UINT_RX = re.compile(r"\+?[0-9]+")
_DOUBLE_RX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_TRUE = {"true", "1"}
_FALSE = {"false", "0"}


def parse_int(text: str) -> int | None:
    raw = text.strip()
    if not _INT_RX.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_uint(text: str) -> int | None:
    raw = text.strip()
    if not _UINT_RX.fullmatch(raw):
        return None
    value = int(raw)
    if value > UINT_MAX:
        return None
    return value


def parse_bool(text: str) -> bool | None:
    lower = text.strip().lower()
    if lower in _TRUE:
        return True
    if lower in _FALSE:
        return False
    return None


def parse_double(text: str) -> float | None:
    raw = text.strip()
    if not _DOUBLE_RX.fullmatch(raw):
        return None
    # overflow gives inf, which is not a usable setting
    value = float(raw)
    if value in (float("inf"), float("-inf")):
        return None
    return value


def check_text(text: str) -> str:
    """Validate *text* as a value that reads back unchanged from a file.

    Continuation lines are stripped on read, end the value when blank and
    are dropped as comments when they start with ``#`` or ``;``.
    """
    if "\r" in text:
        raise ValueError(f"value {text!r} contains a carriage return")
    first, *rest = text.split("\n")
    if first != first.strip():
        raise ValueError(f"value {text!r} has surrounding whitespace")
    for line in rest:
        if line == "" or line != line.strip() or line.startswith(("#", ";")):
            raise ValueError(f"value {text!r} has a continuation line that cannot be stored")
    return text


def format_int(value: int) -> str:
    return str(int(value))


def format_uint(value: int) -> str:
    value = int(value)
    if value < 0 or value > UINT_MAX:
        raise ValueError(f"unsigned value out of range: {value}")
    return str(value)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_double(value: float) -> str:
    return repr(float(value))
