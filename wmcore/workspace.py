"""Workspaces: the divisions of the screens on which tags are shown."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .geometry import Xyhw
from .screen import BBox
from .spacing import Gutter, Margins, Side
from .window import Window


@dataclass(eq=False)
class Workspace:
    """An area of the screen showing one tag. Equality is by id."""

    id: int
    xyhw: Xyhw = field(default_factory=Xyhw)
    xyhw_avoided: Xyhw = field(default_factory=Xyhw)
    tag: Optional[int] = None
    margin: Margins = field(default_factory=lambda: Margins.uniform(10))
    margin_multiplier: float = 1.0
    gutters: list[Gutter] = field(default_factory=list)
    avoid: list[Xyhw] = field(default_factory=list)

    @classmethod
    def from_bbox(cls, bbox: BBox, id: int) -> Workspace:
        def area() -> Xyhw:
            return Xyhw.build(h=bbox.height, w=bbox.width, x=bbox.x, y=bbox.y)

        return cls(id=id, xyhw=area(), xyhw_avoided=area())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Workspace):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Workspace {{ id: {self.id}, tags: {self.tag!r}, x: {self.xyhw.x}, y: {self.xyhw.y} }}"

    def gutters_for(self, gutters: Iterable[Gutter]) -> list[Gutter]:
        """Pick the gutters that apply here, one per side.

        A gutter for this workspace replaces a global one on the same side.
        """
        result: list[Gutter] = []
        for gutter in gutters:
            if gutter.id is not None and gutter.id != self.id:
                continue
            index = next((i for i, g in enumerate(result) if g.side == gutter.side), None)
            if index is None:
                result.append(gutter)
            elif result[index].id is None:
                result[index] = gutter
        return result

    def show_tag(self, tag: int) -> None:
        self.tag = tag

    def contains_point(self, x: int, y: int) -> bool:
        return self.xyhw.contains_point(x, y)

    def has_tag(self, tag: int) -> bool:
        return self.tag == tag

    def is_displaying(self, window: Window) -> bool:
        """Whether the window's tag is shown here."""
        return window.tag is not None and self.has_tag(window.tag)

    def is_managed(self, window: Window) -> bool:
        """Whether this workspace places the window."""
        return self.is_displaying(window) and window.is_managed()

    def _gutter(self, side: Side) -> int:
        return next((g.value for g in self.gutters if g.side == side), 0)

    def x(self) -> int:
        return (
            self.xyhw_avoided.x
            + int(self.margin_multiplier * self.margin.left)
            + self._gutter(Side.LEFT)
        )

    def y(self) -> int:
        return (
            self.xyhw_avoided.y
            + int(self.margin_multiplier * self.margin.top)
            + self._gutter(Side.TOP)
        )

    def height(self) -> int:
        gutter = self._gutter(Side.TOP) + self._gutter(Side.BOTTOM)
        margins = int(self.margin_multiplier * (self.margin.top + self.margin.bottom))
        return self.xyhw_avoided.h - margins - gutter

    def width(self) -> int:
        gutter = self._gutter(Side.LEFT) + self._gutter(Side.RIGHT)
        margins = int(self.margin_multiplier * (self.margin.left + self.margin.right))
        return self.xyhw_avoided.w - margins - gutter

    def center_halfed(self) -> Xyhw:
        return self.xyhw_avoided.center_halfed()

    def update_avoided_areas(self) -> None:
        """Recompute the usable area by trimming every avoided rectangle."""
        area = self.xyhw.copy()
        for avoided in self.avoid:
            area = area.without(avoided)
        self.xyhw_avoided = area

    def rect(self) -> Xyhw:
        """The usable area after margins and gutters, with non-negative size."""
        return Xyhw(x=self.x(), y=self.y(), h=abs(self.height()), w=abs(self.width()))