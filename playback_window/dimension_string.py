"""Parse ``WIDTHxHEIGHT`` dimension directives against the current screen."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from playback_window.geom_value import INT64_MAX, INT64_MIN, Fraction, GeomValue, Pixels, to_pixels

_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+")
_SEPARATOR_RE = re.compile(r"[xX]")


@dataclass(frozen=True)
class ScreenExtent:
    width: int
    height: int


@dataclass(frozen=True)
class ResolvedDimensions:
    width: int
    height: int


@dataclass(frozen=True)
class SizeSpec:
    width: Optional[int] = None
    height: Optional[int] = None

    def resolved(self) -> Optional[ResolvedDimensions]:
        if self.width is None or self.height is None:
            return None
        if self.width <= 0 or self.height <= 0:
            return None
        return ResolvedDimensions(self.width, self.height)



def _segment_value(segment: str) -> Optional[GeomValue]:
    """Leading integer of ``segment`` (0 when none), as a fraction if it ends in ``%``."""
    match = _LEADING_INT_RE.match(segment)
    number = int(match.group(0)) if match is not None else 0
    if number < INT64_MIN or number > INT64_MAX:
        return None
    if segment.endswith("%"):
        return Fraction(number / 100.0)
    return Pixels(number)


def _bounded(value: int) -> Optional[int]:
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_dimension_string(text: str, screen: ScreenExtent) -> SizeSpec:
    """Parse ``W[%][xH[%]]`` into pixel dimensions.

    A percentage width sets the fraction used for the height whenever the
    height segment carries no ``%`` of its own, so ``50%x`` is half the
    screen in both directions. Width must be positive to count at all; the
    height is left unset when there is no separator. Values outside the
    signed 64-bit range leave their side unset.
    """
    segments = _SEPARATOR_RE.split(text, maxsplit=1)
    width: Optional[int] = None
    height: Optional[int] = None
    width_fraction: Optional[Fraction] = None

    width_value = _segment_value(segments[0])
    if width_value is not None and width_value.value > 0:
        if isinstance(width_value, Fraction):
            width_fraction = width_value
        width = _bounded(to_pixels(width_value, screen.width))

    if len(segments) > 1:
        height_value = _segment_value(segments[1])
        if isinstance(height_value, Pixels) and width_fraction is not None:
            height_value = width_fraction
        if height_value is not None:
            height = _bounded(to_pixels(height_value, screen.height))

    return SizeSpec(width=width, height=height)
