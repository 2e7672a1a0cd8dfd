"""Scratchpads: windows summoned onto a workspace on demand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .geometry import Xyhw
from .spacing import Pixel, Ratio, Size


def _sane_dimension(value: Optional[Size], default_ratio: float, max_pixel: int) -> int:
    if isinstance(value, Ratio) and 0.0 <= value.value <= 1.0:
        return value.into_absolute(max_pixel)
    if isinstance(value, Pixel) and 0 <= value.value <= max_pixel:
        return value.value
    return Ratio(default_ratio).into_absolute(max_pixel)


@dataclass
class ScratchPad:
    """A named scratchpad command and its placement relative to a workspace.

    Position defaults to a quarter of the workspace, size to a half;
    out-of-range values fall back to those defaults.
    """

    name: str
    value: str
    x: Optional[Size] = None
    y: Optional[Size] = None
    height: Optional[Size] = None
    width: Optional[Size] = None

    def xyhw(self, xyhw: Xyhw) -> Xyhw:
        """Placement of the scratchpad within the area ``xyhw``."""
        return Xyhw.build(
            x=xyhw.x + _sane_dimension(self.x, 0.25, xyhw.w),
            y=xyhw.y + _sane_dimension(self.y, 0.25, xyhw.h),
            h=_sane_dimension(self.height, 0.50, xyhw.h),
            w=_sane_dimension(self.width, 0.50, xyhw.w),
        )