"""Sizes, margins and gutters used when laying out windows."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Union

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Pixel:
    """An absolute size in pixels."""

    value: int

    def into_absolute(self, whole: int) -> int:
        return self.value


@dataclass(frozen=True)
class Ratio:
    """A size relative to a whole, 0.5 meaning half of it."""

    value: float

    def into_absolute(self, whole: int) -> int:
        product = _f32(_f32(float(whole)) * _f32(self.value))
        if math.isnan(product):
            return 0
        if math.isinf(product):
            return _I32_MAX if product > 0 else _I32_MIN
        return max(_I32_MIN, min(_I32_MAX, math.floor(product)))


Size = Union[Pixel, Ratio]


@dataclass(frozen=True)
class Margins:
    """Non-negative spacing on each side of an area."""

    top: int
    right: int
    bottom: int
    left: int

    def __post_init__(self) -> None:
        for name in ("top", "right", "bottom", "left"):
            if getattr(self, name) < 0:
                raise ValueError(f"margin {name} must not be negative")

    @classmethod
    def uniform(cls, size: int) -> Margins:
        return cls(top=size, right=size, bottom=size, left=size)

    @classmethod
    def from_pair(cls, top_and_bottom: int, left_and_right: int) -> Margins:
        return cls(
            top=top_and_bottom,
            right=left_and_right,
            bottom=top_and_bottom,
            left=left_and_right,
        )

    @classmethod
    def from_triple(cls, top: int, left_and_right: int, bottom: int) -> Margins:
        return cls(top=top, right=left_and_right, bottom=bottom, left=left_and_right)


@total_ordering
class Side(Enum):
    """Edge of an area, ordered top, bottom, left, right."""

    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"

    def _rank(self) -> int:
        return list(Side).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Side):
            return NotImplemented
        return self._rank() < other._rank()


@total_ordering
@dataclass(frozen=True)
class Gutter:
    """Extra space reserved on one side, for one workspace or for all."""

    side: Side = Side.TOP
    value: int = 0
    id: Optional[int] = None

    def _key(self) -> tuple:
        return (self.side._rank(), self.value, self.id is not None, self.id or 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Gutter):
            return NotImplemented
        return self._key() < other._key()