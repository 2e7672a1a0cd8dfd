"""The manager's state, plus window ordering, borders, moving and resizing."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from .focus import FocusManager
from .geometry import Xyhw
from .layouts import Layout, LayoutManager
from .scratchpad import ScratchPad
from .screen import Screen
from .tags import Tags
from .window import Mode, Window, WindowHandle, WindowState, WindowType
from .workspace import Workspace

_SNAP_DISTANCE = 10
_SCRATCHPAD_TAG = "NSP"

_DIALOG_TYPES = (
    WindowType.DIALOG,
    WindowType.SPLASH,
    WindowType.UTILITY,
    WindowType.MENU,
)


@dataclass(frozen=True)
class SetWindowOrder:
    """Ask the display server to stack windows in this order, topmost first."""

    handles: tuple[WindowHandle, ...]


DisplayAction = Union[SetWindowOrder]


def _default_tags() -> Tags:
    tags = Tags()
    tags.add_new_hidden(_SCRATCHPAD_TAG)
    return tags


@dataclass
class State:
    """Everything the manager knows about screens, windows and focus."""

    screens: list[Screen] = field(default_factory=list)
    windows: list[Window] = field(default_factory=list)
    workspaces: list[Workspace] = field(default_factory=list)
    focus_manager: FocusManager = field(default_factory=FocusManager)
    layout_manager: LayoutManager = field(default_factory=LayoutManager)
    mode: Mode = field(default_factory=Mode.normal)
    active_scratchpads: dict[str, deque[int]] = field(default_factory=dict)
    actions: deque[DisplayAction] = field(default_factory=deque)
    # All known tags plus the hidden scratchpad tag.
    tags: Tags = field(default_factory=_default_tags)
    # Loaded from the configuration and never changed afterwards.
    scratchpads: list[ScratchPad] = field(default_factory=list)
    layout_definitions: list[Layout] = field(default_factory=list)
    mousekey: list[str] = field(default_factory=list)
    default_width: int = 0
    default_height: int = 0
    disable_tile_drag: bool = False
    reposition_cursor_on_resize: bool = False
    single_window_border: bool = True

    def sort_windows(self) -> None:
        """Queue a stacking order that puts windows in order of importance."""
        over_full_parent = {
            w.handle for w in self.windows if w.is_fullscreen() or w.is_maximized()
        }
        tiers: tuple[Callable[[Window], bool], ...] = (
            # Explicitly kept on top.
            lambda w: WindowState.ABOVE in w.states and w.floating(),
            # Transients above a fullscreen or maximized parent.
            lambda w: w.transient is not None and w.transient in over_full_parent,
            Window.is_fullscreen,
            lambda w: w.window_type in _DIALOG_TYPES,
            lambda w: w.window_type is WindowType.NORMAL and w.floating(),
            lambda w: w.window_type is WindowType.NORMAL and w.is_maximized(),
            lambda w: w.window_type is WindowType.NORMAL,
            lambda w: w.window_type is WindowType.DOCK,
        )
        stack: list[Window] = []
        unsorted = list(self.windows)
        for belongs in tiers:
            stack.extend(w for w in unsorted if belongs(w))
            unsorted = [w for w in unsorted if not belongs(w)]
        stack.extend(unsorted)
        self.actions.append(SetWindowOrder(tuple(w.handle for w in stack)))

    def handle_single_border(self, border_width: int) -> None:
        """Drop the border of a lone window on a tag, unless borders are always kept."""
        if self.single_window_border:
            return

        for tag in self.tags.normal():
            on_tag = [
                w
                for w in self.windows
                if (w.tag if w.tag is not None else 0) == tag.id
                and w.window_type is WindowType.NORMAL
            ]
            wsid = next((ws.id for ws in self.workspaces if ws.has_tag(tag.id)), 1)
            layout = self.layout_manager.layout(wsid, tag.id)

            if layout.is_monocle() or len(on_tag) == 1:
                width = 0
            else:
                width = border_width
            for window in on_tag:
                window.border = width

    def move_to_top(self, handle: WindowHandle) -> bool:
        """Move a window in front of others of equal importance.

        Returns False if the window is unknown.
        """
        index = next((i for i, w in enumerate(self.windows) if w.handle == handle), None)
        if index is None:
            return False
        self.windows.insert(0, self.windows.pop(index))
        self.sort_windows()
        return True

    def update_static(self) -> None:
        """Give docks and sticky windows the tag of the workspace they sit on."""
        for window in self.windows:
            if window.strut is None and not window.is_sticky():
                continue
            area = window.strut if window.strut is not None else window.calculated_xyhw()
            x, y = area.center()
            workspace = next((ws for ws in self.workspaces if ws.contains_point(x, y)), None)
            if workspace is not None:
                window.tag = workspace.tag

    def _find(self, handle: WindowHandle) -> Optional[Window]:
        return next((w for w in self.windows if w.handle == handle), None)

    def window_move_handler(
        self,
        handle: WindowHandle,
        offset_x: int,
        offset_y: int,
        disable_snap: bool = False,
    ) -> bool:
        """Move a window by an offset from where the drag started.

        Returns whether the window is known and needs rendering.
        """
        window = self._find(handle)
        if window is None:
            return False
        offset = window.get_floating_offsets() or Xyhw()
        start = window.start_loc or Xyhw()
        offset.x = start.x + offset_x
        offset.y = start.y + offset_y
        window.set_floating_offsets(offset)
        if not disable_snap and _snap_to_workspace(window, self.workspaces):
            self.sort_windows()
        return True

    def window_resize_handler(self, handle: WindowHandle, offset_w: int, offset_h: int) -> bool:
        """Float a window and resize it by an offset from where the drag started.

        Returns whether the window is known and needs rendering.
        """
        window = self._find(handle)
        if window is None:
            return False
        window.set_floating(True)
        offset = window.get_floating_offsets() or Xyhw()
        start = window.start_loc or Xyhw()
        offset.w = start.w + offset_w
        offset.h = start.h + offset_h
        window.set_floating_offsets(offset)
        return True


def _snap_to_workspace(window: Window, workspaces: list[Workspace]) -> bool:
    loc = window.calculated_xyhw()
    x, y = loc.center()
    workspace = next((ws for ws in workspaces if ws.contains_point(x, y)), None)
    if workspace is None:
        return False
    return _should_snap(window, workspace, loc)


def _should_snap(window: Window, workspace: Workspace, loc: Xyhw) -> bool:
    """Snap when the window lies in the workspace with an edge close to its edge."""
    if window.must_float():
        return False
    win_left = loc.x
    win_right = win_left + window.width()
    win_top = loc.y
    win_bottom = win_top + window.height()
    ws_left = workspace.x()
    ws_right = ws_left + workspace.width()
    ws_top = workspace.y()
    ws_bottom = ws_top + workspace.height()
    distances = (
        win_top - ws_top,
        win_bottom - ws_bottom,
        win_left - ws_left,
        win_right - ws_right,
    )
    if any(abs(d) < _SNAP_DISTANCE for d in distances):
        return window.snap_to_workspace(workspace)
    return False