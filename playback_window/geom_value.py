"""Numeric geometry values: absolute pixels or a fraction of a screen extent."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_TOKEN_RE = re.compile(r"\s*([+-]?\d*)")


@dataclass(frozen=True)
class Pixels:
    value: int


@dataclass(frozen=True)
class Fraction:
    """Share of a base extent; ``50%`` is stored as ``0.5``."""

    value: float


GeomValue = Union[Pixels, Fraction]


def to_pixels(value: GeomValue, base: int) -> int:
    if isinstance(value, Fraction):
        return int(value.value * base)
    return int(value.value)


def parse_geom_token(text: str, pos: int = 0) -> Tuple[Optional[GeomValue], int]:
    """Parse one integer token starting at ``pos``.

    Returns ``(value, new_pos)``. A trailing ``%`` turns the integer into a
    fraction and is consumed. When nothing is consumed the value is ``None``
    and ``pos`` is returned unchanged. A bare ``%`` reads as ``0%``.
    """
    match = _TOKEN_RE.match(text, pos)
    digits = match.group(1) if match else ""
    end = match.end() if match else pos
    has_digits = any(ch.isdigit() for ch in digits)
    number = int(digits) if has_digits else 0
    if not has_digits:
        # strtoll-style: a lone sign or whitespace is not consumed
        end = pos
    if number < INT64_MIN or number > INT64_MAX:
        return None, pos
    if end < len(text) and text[end] == "%":
        return Fraction(number / 100.0), end + 1
    if not has_digits:
        return None, pos
    return Pixels(number), end
