from collections import deque

from wmcore.focus import FocusBehaviour, FocusManager
from wmcore.window import Window, WindowHandle
from wmcore.workspace import Workspace


def test_behaviour_predicates():
    assert FocusBehaviour.SLOPPY.is_sloppy()
    assert not FocusBehaviour.SLOPPY.is_clickto()
    assert FocusBehaviour.CLICK_TO.is_clickto()
    assert not FocusBehaviour.CLICK_TO.is_driven()
    assert FocusBehaviour.DRIVEN.is_driven()
    assert not FocusBehaviour.DRIVEN.is_sloppy()


def test_default_behaviour_is_sloppy():
    assert FocusManager().behaviour is FocusBehaviour.SLOPPY


def test_workspace_without_history():
    workspaces = [Workspace(id=1), Workspace(id=2)]
    assert FocusManager().workspace(workspaces) is None


def test_workspace_uses_front_of_history():
    workspaces = [Workspace(id=1), Workspace(id=2)]
    manager = FocusManager(workspace_history=deque([1, 0]))
    assert manager.workspace(workspaces) is workspaces[1]


def test_workspace_out_of_range():
    manager = FocusManager(workspace_history=deque([5]))
    assert manager.workspace([Workspace(id=1)]) is None


def test_tag_history_offsets():
    manager = FocusManager(tag_history=deque([3, 1]))
    assert manager.tag(0) == 3
    assert manager.tag(1) == 1
    assert manager.tag(2) is None


def test_window_lookup():
    first = Window(WindowHandle.mock(1))
    second = Window(WindowHandle.mock(2))
    manager = FocusManager(window_history=deque([WindowHandle.mock(2)]))
    assert manager.window([first, second]) is second


def test_window_unfocused_entry():
    manager = FocusManager(window_history=deque([None, WindowHandle.mock(1)]))
    assert manager.window([Window(WindowHandle.mock(1))]) is None


def test_window_unknown_handle_or_empty_history():
    windows = [Window(WindowHandle.mock(1))]
    assert FocusManager().window(windows) is None
    manager = FocusManager(window_history=deque([WindowHandle.mock(9)]))
    assert manager.window(windows) is None