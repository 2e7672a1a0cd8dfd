"""Partial updates to a window reported by the display server."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

from .geometry import Xyhw, XyhwChange
from .spacing import Margins
from .window import Window, WindowHandle, WindowState, WindowType


class _Unset:
    """Marks a field that the change leaves alone."""

    _instance: Optional[_Unset] = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class WindowChange:
    """Fields to change on a window; ``None``/``UNSET`` fields are left alone.

    ``transient`` and ``name`` may be set to None explicitly, so they use
    ``UNSET`` to mean "no change".
    """

    handle: WindowHandle
    transient: Any = UNSET
    never_focus: Optional[bool] = None
    urgent: Optional[bool] = None
    name: Any = UNSET
    window_type: Optional[WindowType] = None
    floating: Optional[XyhwChange] = None
    strut: Optional[XyhwChange] = None
    requested: Optional[Xyhw] = None
    states: Optional[list[WindowState]] = None

    def update(self, window: Window, container: Optional[Xyhw] = None) -> bool:
        """Apply the change to ``window``; return whether it changed."""
        changed = False
        if self.transient is not UNSET:
            changed = changed or window.transient is None or window.transient != self.transient
            window.transient = self.transient
        if self.name is not UNSET:
            changed = changed or window.name is None or window.name != self.name
            window.name = self.name
        if self.never_focus is not None:
            changed = changed or window.never_focus != self.never_focus
            window.never_focus = self.never_focus
        if self.urgent is not None:
            changed = changed or window.urgent != self.urgent
            window.urgent = self.urgent
        if self.floating is not None:
            floating_change = dataclasses.replace(self.floating)
            # Reposition dialogs and modals within their container.
            if container is not None:
                xyhw = Xyhw()
                floating_change.update(xyhw)
                xyhw.center_relative(container, window.border)
                floating_change.x = xyhw.x
                floating_change.y = xyhw.y
            changed = floating_change.update_window_floating(window) or changed
        if self.strut is not None:
            changed = self.strut.update_window_strut(window) or changed
        if self.requested is not None:
            window.requested = self.requested.copy()
        if self.window_type is not None:
            changed = changed or window.window_type != self.window_type
            window.window_type = self.window_type
            if not window.is_managed():
                window.border = 0
                window.margin = Margins.uniform(0)
        if self.states is not None:
            changed = True
            window.states = list(self.states)
        return changed