"""Windows managed by the window manager, their states, types and modes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .geometry import Xyhw
from .spacing import Margins

logger = logging.getLogger(__name__)

_DEFAULT_MIN_SIZE = 100


@dataclass(frozen=True)
class WindowHandle:
    """Identifies a window, either a test handle or a display-server one."""

    value: int
    is_xlib: bool = False

    @classmethod
    def mock(cls, value: int) -> WindowHandle:
        return cls(value, False)

    @classmethod
    def xlib(cls, value: int) -> WindowHandle:
        return cls(value, True)

    def xlib_handle(self) -> Optional[int]:
        """The display-server window id, or None for a test handle."""
        return self.value if self.is_xlib else None


class WindowState(Enum):
    MODAL = "Modal"
    STICKY = "Sticky"
    MAXIMIZED_VERT = "MaximizedVert"
    MAXIMIZED_HORZ = "MaximizedHorz"
    MAXIMIZED = "Maximized"
    SHADED = "Shaded"
    SKIP_TASKBAR = "SkipTaskbar"
    SKIP_PAGER = "SkipPager"
    HIDDEN = "Hidden"
    FULLSCREEN = "Fullscreen"
    ABOVE = "Above"
    BELOW = "Below"


class WindowType(Enum):
    DESKTOP = "Desktop"
    DOCK = "Dock"
    TOOLBAR = "Toolbar"
    MENU = "Menu"
    UTILITY = "Utility"
    SPLASH = "Splash"
    DIALOG = "Dialog"
    NORMAL = "Normal"


class ModeKind(Enum):
    READY_TO_RESIZE = "ReadyToResize"
    READY_TO_MOVE = "ReadyToMove"
    RESIZING_WINDOW = "ResizingWindow"
    MOVING_WINDOW = "MovingWindow"
    NORMAL = "Normal"


@dataclass(frozen=True)
class Mode:
    """The interaction mode; every kind but NORMAL refers to a window."""

    kind: ModeKind = ModeKind.NORMAL
    handle: Optional[WindowHandle] = None

    def __post_init__(self) -> None:
        if self.kind is ModeKind.NORMAL and self.handle is not None:
            raise ValueError("normal mode takes no window handle")
        if self.kind is not ModeKind.NORMAL and self.handle is None:
            raise ValueError(f"mode {self.kind.value} needs a window handle")

    @classmethod
    def normal(cls) -> Mode:
        return cls(ModeKind.NORMAL)


@dataclass
class Window:
    """A window and everything the manager knows about its placement."""

    handle: WindowHandle
    name: Optional[str] = None
    pid: Optional[int] = None
    transient: Optional[WindowHandle] = None
    resizable: bool = True
    always_float: bool = False
    never_focus: bool = False
    urgent: bool = False
    debugging: bool = False
    legacy_name: Optional[str] = None
    window_type: WindowType = WindowType.NORMAL
    tag: Optional[int] = None
    border: int = 1
    margin: Margins = field(default_factory=lambda: Margins.uniform(10))
    margin_multiplier: float = 1.0
    states: list[WindowState] = field(default_factory=list)
    requested: Optional[Xyhw] = None
    normal: Xyhw = field(default_factory=Xyhw)
    start_loc: Optional[Xyhw] = None
    container_size: Optional[Xyhw] = None
    strut: Optional[Xyhw] = None
    res_name: Optional[str] = None
    res_class: Optional[str] = None
    _visible: bool = field(default=False, init=False)
    _is_floating: bool = field(default=False, init=False)
    _floating: Optional[Xyhw] = field(default=None, init=False)

    def set_visible(self, value: bool) -> None:
        self._visible = value

    def visible(self) -> bool:
        return self._visible or self.window_type in (
            WindowType.MENU,
            WindowType.SPLASH,
            WindowType.TOOLBAR,
        )

    def set_floating(self, value: bool) -> None:
        if not self._is_floating and value and self._floating is None:
            # Floating is relative to the normal position.
            self.reset_float_offset()
        self._is_floating = value

    def floating(self) -> bool:
        return self._is_floating or self.must_float()

    def get_floating_offsets(self) -> Optional[Xyhw]:
        return None if self._floating is None else self._floating.copy()

    def reset_float_offset(self) -> None:
        offsets = Xyhw()
        offsets.clear_minmax()
        self._floating = offsets

    def set_floating_offsets(self, value: Optional[Xyhw]) -> None:
        if value is None:
            self._floating = None
            return
        offsets = value.copy()
        offsets.clear_minmax()
        self._floating = offsets

    def set_floating_exact(self, value: Xyhw) -> None:
        offsets = value - self.normal
        offsets.clear_minmax()
        self._floating = offsets

    def is_fullscreen(self) -> bool:
        return WindowState.FULLSCREEN in self.states

    def is_maximized(self) -> bool:
        return WindowState.MAXIMIZED in self.states

    def is_sticky(self) -> bool:
        return WindowState.STICKY in self.states

    def must_float(self) -> bool:
        return (
            self.always_float
            or self.transient is not None
            or not self.is_managed()
            or self.window_type is WindowType.SPLASH
        )

    def can_move(self) -> bool:
        return self.is_managed()

    def can_resize(self) -> bool:
        return self.resizable and self.is_managed()

    def can_focus(self) -> bool:
        return not self.never_focus and self.is_managed() and self.visible()

    def set_width(self, width: int) -> None:
        self.normal.w = width

    def set_height(self, height: int) -> None:
        self.normal.h = height

    def apply_margin_multiplier(self, value: float) -> None:
        self.margin_multiplier = abs(value)
        if value < 0:
            logger.warning(
                "Negative margin multiplier detected. Will be applied as absolute: %s",
                self.margin_multiplier,
            )

    def _uses_floating_offsets(self) -> bool:
        return self.floating() and self._floating is not None and not self.is_maximized()

    def _relative(self) -> Xyhw:
        return self.normal + (self._floating or Xyhw())

    def _limit(self, requested_min: Optional[int]) -> int:
        if requested_min is not None and requested_min > 0 and self.floating():
            return requested_min
        return _DEFAULT_MIN_SIZE

    def width(self) -> int:
        if self.is_fullscreen():
            value = self.normal.w
        elif self._uses_floating_offsets():
            value = self._relative().w - self.border * 2
        else:
            margins = int((self.margin.left + self.margin.right) * self.margin_multiplier)
            value = self.normal.w - margins - self.border * 2
        limit = self._limit(self.requested.minw if self.requested else None)
        if value < limit and self.is_managed():
            value = limit
        return value

    def height(self) -> int:
        if self.is_fullscreen():
            value = self.normal.h
        elif self._uses_floating_offsets():
            value = self._relative().h - self.border * 2
        else:
            margins = int((self.margin.top + self.margin.bottom) * self.margin_multiplier)
            value = self.normal.h - margins - self.border * 2
        limit = self._limit(self.requested.minh if self.requested else None)
        if value < limit and self.is_managed():
            value = limit
        return value

    def set_x(self, x: int) -> None:
        self.normal.x = x

    def set_y(self, y: int) -> None:
        self.normal.y = y

    def border_width(self) -> int:
        """The border to draw: none while fullscreen."""
        return 0 if self.is_fullscreen() else self.border

    def x(self) -> int:
        if self.is_fullscreen():
            return self.normal.x
        if self._uses_floating_offsets():
            return self._relative().x
        return self.normal.x + int(self.margin.left * self.margin_multiplier)

    def y(self) -> int:
        if self.is_fullscreen():
            return self.normal.y
        if self._uses_floating_offsets():
            return self._relative().y
        return self.normal.y + int(self.margin.top * self.margin_multiplier)

    def calculated_xyhw(self) -> Xyhw:
        return Xyhw.build(x=self.x(), y=self.y(), h=self.height(), w=self.width())

    def exact_xyhw(self) -> Xyhw:
        if self.floating() and self._floating is not None:
            return self.normal + self._floating
        return self.normal.copy()

    def contains_point(self, x: int, y: int) -> bool:
        return self.calculated_xyhw().contains_point(x, y)

    def tag_with(self, tag: int) -> None:
        self.tag = tag

    def has_tag(self, tag: int) -> bool:
        return self.tag == tag

    def untag(self) -> None:
        self.tag = None

    def is_managed(self) -> bool:
        return self.window_type not in (WindowType.DESKTOP, WindowType.DOCK)

    def is_normal(self) -> bool:
        return self.window_type is WindowType.NORMAL

    def snap_to_workspace(self, workspace: Any) -> bool:
        """Tile the window on ``workspace``, moving it there if needed."""
        self.set_floating(False)

        if self.tag != workspace.tag:
            self.tag = workspace.tag
            ws_x = workspace.xyhw.x
            ws_y = workspace.xyhw.y

            offset = self.get_floating_offsets() or Xyhw()
            offset.x = offset.x + self.normal.x - ws_x
            offset.y = offset.y + self.normal.y - ws_y
            self.set_floating_offsets(offset)

            start_loc = self.start_loc.copy() if self.start_loc else Xyhw()
            start_loc.x = start_loc.x + self.normal.x - ws_x
            start_loc.y = start_loc.y + self.normal.y - ws_y
            self.start_loc = start_loc
        return True