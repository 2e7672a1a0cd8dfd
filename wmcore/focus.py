"""Focus behaviour and the history of what had focus."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from .window import Window, WindowHandle
from .workspace import Workspace


class FocusBehaviour(Enum):
    """How focus follows the user."""

    SLOPPY = "Sloppy"
    CLICK_TO = "ClickTo"
    DRIVEN = "Driven"

    def is_sloppy(self) -> bool:
        return self is FocusBehaviour.SLOPPY

    def is_clickto(self) -> bool:
        return self is FocusBehaviour.CLICK_TO

    def is_driven(self) -> bool:
        return self is FocusBehaviour.DRIVEN


@dataclass
class FocusManager:
    """History of focused workspaces, tags and windows, newest first."""

    workspace_history: deque[int] = field(default_factory=deque)
    window_history: deque[Optional[WindowHandle]] = field(default_factory=deque)
    tag_history: deque[int] = field(default_factory=deque)
    tags_last_window: dict[int, WindowHandle] = field(default_factory=dict)
    last_mouse_position: Optional[tuple[int, int]] = None
    behaviour: FocusBehaviour = FocusBehaviour.SLOPPY
    focus_new_windows: bool = True
    sloppy_mouse_follows_focus: bool = True
    create_follows_cursor: bool = False

    def workspace(self, workspaces: Sequence[Workspace]) -> Optional[Workspace]:
        """The focused workspace, looked up by its index in ``workspaces``."""
        if not self.workspace_history:
            return None
        index = self.workspace_history[0]
        if 0 <= index < len(workspaces):
            return workspaces[index]
        return None

    def tag(self, offset: int) -> Optional[int]:
        """The focused tag at ``offset`` steps back in history (0 is current)."""
        if 0 <= offset < len(self.tag_history):
            return self.tag_history[offset]
        return None

    def window(self, windows: Sequence[Window]) -> Optional[Window]:
        """The focused window, if one is focused and still known."""
        if not self.window_history:
            return None
        handle = self.window_history[0]
        if handle is None:
            return None
        return next((w for w in windows if w.handle == handle), None)