"""Rectangles with size limits, and partial updates to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

MIN_LIMIT = -999_999_999
MAX_LIMIT = 999_999_999

_U64_MASK = (1 << 64) - 1


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Xyhw:
    """A placement (x, y from the top left) with width/height limits.

    Setting any attribute through its property clamps width and height
    into the configured min/max range. The constructor stores the values
    as given; use :meth:`build` to get a clamped value.
    """

    __slots__ = ("_x", "_y", "_h", "_w", "_minw", "_maxw", "_minh", "_maxh")

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        h: int = 0,
        w: int = 0,
        minw: int = MIN_LIMIT,
        maxw: int = MAX_LIMIT,
        minh: int = MIN_LIMIT,
        maxh: int = MAX_LIMIT,
    ) -> None:
        self._x = x
        self._y = y
        self._h = h
        self._w = w
        self._minw = minw
        self._maxw = maxw
        self._minh = minh
        self._maxh = maxh

    @classmethod
    def build(
        cls,
        x: int = 0,
        y: int = 0,
        h: int = 0,
        w: int = 0,
        minw: int = MIN_LIMIT,
        maxw: int = MAX_LIMIT,
        minh: int = MIN_LIMIT,
        maxh: int = MAX_LIMIT,
    ) -> Xyhw:
        """Create a value whose width and height respect the limits."""
        result = cls(x, y, h, w, minw, maxw, minh, maxh)
        result._update_limits()
        return result

    def _update_limits(self) -> None:
        if self._h > self._maxh:
            self._h = self._maxh
        if self._w > self._maxw:
            self._w = self._maxw
        if self._h < self._minh:
            self._h = self._minh
        if self._w < self._minw:
            self._w = self._minw

    def _set(self, name: str, value: int) -> None:
        setattr(self, name, value)
        self._update_limits()

    x = property(lambda self: self._x, lambda self, v: self._set("_x", v))
    y = property(lambda self: self._y, lambda self, v: self._set("_y", v))
    h = property(lambda self: self._h, lambda self, v: self._set("_h", v))
    w = property(lambda self: self._w, lambda self, v: self._set("_w", v))
    minw = property(lambda self: self._minw, lambda self, v: self._set("_minw", v))
    maxw = property(lambda self: self._maxw, lambda self, v: self._set("_maxw", v))
    minh = property(lambda self: self._minh, lambda self, v: self._set("_minh", v))
    maxh = property(lambda self: self._maxh, lambda self, v: self._set("_maxh", v))

    def _fields(self) -> tuple[int, ...]:
        return (
            self._x,
            self._y,
            self._h,
            self._w,
            self._minw,
            self._maxw,
            self._minh,
            self._maxh,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Xyhw(x={self._x}, y={self._y}, h={self._h}, w={self._w}, "
            f"minw={self._minw}, maxw={self._maxw}, "
            f"minh={self._minh}, maxh={self._maxh})"
        )

    def copy(self) -> Xyhw:
        """Return an independent copy."""
        return Xyhw(*self._fields())

    def __add__(self, other: Xyhw) -> Xyhw:
        return Xyhw(
            x=self._x + other._x,
            y=self._y + other._y,
            h=self._h + other._h,
            w=self._w + other._w,
            minw=max(self._minw, other._minw),
            maxw=min(self._maxw, other._maxw),
            minh=max(self._minh, other._minh),
            maxh=min(self._maxh, other._maxh),
        )

    def __sub__(self, other: Xyhw) -> Xyhw:
        return Xyhw(
            x=self._x - other._x,
            y=self._y - other._y,
            h=self._h - other._h,
            w=self._w - other._w,
            minw=max(self._minw, other._minw),
            maxw=min(self._maxw, other._maxw),
            minh=max(self._minh, other._minh),
            maxh=min(self._maxh, other._maxh),
        )

    def clear_minmax(self) -> None:
        """Reset the limits to their unbounded defaults."""
        self._minw = MIN_LIMIT
        self._maxw = MAX_LIMIT
        self._minh = MIN_LIMIT
        self._maxh = MAX_LIMIT
        self._update_limits()

    def contains_point(self, x: int, y: int) -> bool:
        max_x = self._x + self._w
        max_y = self._y + self._h
        return self._x <= x <= max_x and self._y <= y <= max_y

    def contains_xyhw(self, other: Xyhw) -> bool:
        return self.contains_point(other._x, other._y) and self.contains_point(
            other._x + other._w, other._y + other._h
        )

    def volume(self) -> int:
        """Area as an unsigned 64-bit quantity."""
        return ((self._h & _U64_MASK) * (self._w & _U64_MASK)) & _U64_MASK

    def without(self, other: Xyhw) -> Xyhw:
        """Trim ``other`` out of this area so that they don't overlap."""
        result = self.copy()
        if other._w > other._h:
            # horizontal trim
            if other._y > self._y + _div(self._h, 2):
                bottom_over = (result._y + result._h) - other._y
                if bottom_over > 0:
                    result._h -= bottom_over
            else:
                top_over = (other._y + other._h) - result._y
                if top_over > 0:
                    result._y += top_over
                    result._h -= top_over
        else:
            # vertical trim
            left_over = (other._x + other._w) - result._x
            if other._x > self._x + _div(self._w, 2):
                right_over = (result._x + result._w) - other._x
                if right_over > 0:
                    result._w -= right_over
            elif left_over > 0:
                result._x += left_over
                result._w -= left_over
        return result

    def center_halfed(self) -> Xyhw:
        """A rectangle of half the size, centred in this one."""
        return Xyhw.build(
            x=self._x + _div(self._w, 2) - _div(self._w, 4),
            y=self._y + _div(self._h, 2) - _div(self._h, 4),
            h=_div(self._h, 2),
            w=_div(self._w, 2),
        )

    def center_relative(self, outer: Xyhw, border: int) -> None:
        """Move this rectangle so it is centred within ``outer``."""
        self._x = outer._x + _div(outer._w, 2) - _div(self._w, 2) - border
        self._y = outer._y + _div(outer._h, 2) - _div(self._h, 2) - border

    def center(self) -> tuple[int, int]:
        return (self._x + _div(self._w, 2), self._y + _div(self._h, 2))


@dataclass
class XyhwChange:
    """A partial update: every field that is set replaces the target's."""

    x: Optional[int] = None
    y: Optional[int] = None
    h: Optional[int] = None
    w: Optional[int] = None
    minw: Optional[int] = None
    maxw: Optional[int] = None
    minh: Optional[int] = None
    maxh: Optional[int] = None

    _ORDER = ("x", "y", "w", "h", "minw", "maxw", "minh", "maxh")

    @classmethod
    def from_xyhw(cls, xyhw: Xyhw) -> XyhwChange:
        return cls(
            x=xyhw.x,
            y=xyhw.y,
            h=xyhw.h,
            w=xyhw.w,
            minw=xyhw.minw,
            maxw=xyhw.maxw,
            minh=xyhw.minh,
            maxh=xyhw.maxh,
        )

    def update(self, xyhw: Xyhw) -> bool:
        """Apply the change in place; return whether anything differed."""
        changed = False
        for name in self._ORDER:
            value = getattr(self, name)
            if value is not None and getattr(xyhw, name) != value:
                setattr(xyhw, name, value)
                changed = True
        return changed

    def update_window_floating(self, window: Any) -> bool:
        """Apply the change to a floating window's exact placement."""
        if not window.floating():
            return False
        current = window.calculated_xyhw()
        changed = self.update(current)
        window.set_floating_exact(current)
        return changed

    def update_window_strut(self, window: Any) -> bool:
        """Apply the change to a window's strut, creating one if absent."""
        changed = False
        if window.strut is None:
            window.strut = Xyhw()
            changed = True
        strut = window.strut.copy()
        changed = self.update(strut) or changed
        window.strut = strut
        return changed