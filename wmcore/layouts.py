"""Layouts, and the manager that remembers them per workspace or per tag."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT = "Default"
MONOCLE = "Monocle"
MAIN_AND_DECK = "MainAndDeck"
LEFT_WIDER_RIGHT_STACK = "LeftWiderRightStack"
RIGHT_WIDER_LEFT_STACK = "RightWiderLeftStack"
MAIN_AND_VERT_STACK = "MainAndVertStack"
MAIN_AND_HORIZONTAL_STACK = "MainAndHorizontalStack"
GRID_HORIZONTAL = "GridHorizontal"
EVEN_HORIZONTAL = "EvenHorizontal"
EVEN_VERTICAL = "EvenVertical"
FIBONACCI = "Fibonacci"
LEFT_MAIN = "LeftMain"
CENTER_MAIN = "CenterMain"
CENTER_MAIN_BALANCED = "CenterMainBalanced"
CENTER_MAIN_FLUID = "CenterMainFluid"


class ParseLayoutError(ValueError):
    """Raised when a layout cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Could not parse layout: {value}")
        self.value = value


class LayoutMode(Enum):
    """Whether layouts are remembered per tag or per workspace."""

    TAG = "Tag"
    WORKSPACE = "Workspace"


@dataclass(frozen=True)
class Layout:
    """A layout definition, identified by its name."""

    name: str = DEFAULT

    def is_monocle(self) -> bool:
        return self.name == MONOCLE


def _rotate(items: list, shift: int) -> None:
    """Rotate in place: a negative shift moves elements toward the front."""
    if not items:
        return
    k = (-shift) % len(items)
    items[:] = items[k:] + items[:k]


@dataclass
class LayoutManager:
    """Holds the available layouts and the current order for each context."""

    mode: LayoutMode = LayoutMode.TAG
    available_layouts: list[Layout] = field(default_factory=lambda: [Layout()])
    available_layouts_per_ws: dict[int, list[Layout]] = field(default_factory=dict)
    _layouts: dict[int, list[Layout]] = field(default_factory=dict, repr=False)

    @classmethod
    def from_config(
        cls,
        layout_names: Iterable[str],
        definitions: Sequence[Layout],
        workspace_layouts: Optional[Sequence[Optional[Sequence[str]]]] = None,
        mode: LayoutMode = LayoutMode.TAG,
    ) -> LayoutManager:
        """Pick the named layouts out of ``definitions``.

        ``workspace_layouts`` holds, for each workspace in order (ids from 1),
        the names of its own layouts or None to use the global list.
        """
        by_name = lambda name: next((d for d in definitions if d.name == name), None)  # noqa: E731

        available: list[Layout] = []
        for name in layout_names:
            definition = by_name(name)
            if definition is None:
                logger.warning("There is no Layout with the name %r", name)
            else:
                available.append(definition)

        per_ws: dict[int, list[Layout]] = {}
        for wsid, names in enumerate(workspace_layouts or [], start=1):
            if names is None:
                continue
            for name in names:
                definition = by_name(name)
                if definition is None:
                    logger.warning(
                        "There is no Layout with the name %r, but was configured on workspace %r",
                        name,
                        wsid,
                    )
                else:
                    per_ws.setdefault(wsid, []).append(definition)

        if not available:
            logger.warning(
                "No Layouts were loaded from config - defaulting to a single default Layout"
            )
            available.append(Layout())

        return cls(mode=mode, available_layouts=available, available_layouts_per_ws=per_ws)

    def restore(self, old: LayoutManager) -> None:
        """Take over the layouts of ``old`` if the configuration is unchanged."""
        if self.mode != old.mode:
            logger.debug("The LayoutMode has changed, layouts will not be restored")
            return
        if self.available_layouts != old.available_layouts:
            logger.debug("The available Layouts have changed, layouts will not be restored")
            return
        if self.available_layouts_per_ws != old.available_layouts_per_ws:
            logger.debug(
                "The available Layouts per Workspace have changed, layouts will not be restored"
            )
            return
        self._layouts = {key: list(value) for key, value in old._layouts.items()}

    def context_id(self, wsid: int, tagid: int) -> int:
        """The workspace id or the tag id, depending on the mode."""
        return tagid if self.mode is LayoutMode.TAG else wsid

    def _layouts_for(self, wsid: int, tagid: int) -> list[Layout]:
        key = self.context_id(wsid, tagid)
        if key not in self._layouts:
            if self.mode is LayoutMode.TAG:
                source = self.available_layouts
            else:
                source = self.available_layouts_per_ws.get(wsid, self.available_layouts)
            self._layouts[key] = list(source)
        return self._layouts[key]

    def layout_maybe(self, wsid: int, tagid: int) -> Optional[Layout]:
        """The current layout, or None if the context was never set up."""
        layouts = self._layouts.get(self.context_id(wsid, tagid))
        return layouts[0] if layouts else None

    def layout(self, wsid: int, tagid: int) -> Layout:
        """The current layout, setting the context up if needed."""
        layouts = self._layouts_for(wsid, tagid)
        if not layouts:
            raise RuntimeError(
                "there should be always at least one layout, "
                "because a default must be used if none is configured"
            )
        return layouts[0]

    def cycle_next_layout(self, wsid: int, tagid: int) -> None:
        _rotate(self._layouts_for(wsid, tagid), -1)

    def cycle_previous_layout(self, wsid: int, tagid: int) -> None:
        _rotate(self._layouts_for(wsid, tagid), 1)

    def set_layout(self, wsid: int, tagid: int, name: str) -> None:
        """Make the layout called ``name`` current; unknown names are ignored."""
        layouts = self._layouts_for(wsid, tagid)
        index = next((i for i, layout in enumerate(layouts) if layout.name == name), None)
        if index is not None:
            _rotate(layouts, -index)