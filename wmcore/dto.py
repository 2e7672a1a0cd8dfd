"""Snapshots of the manager state handed to status bars and other clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .state import State

_U32_MASK = 0xFFFFFFFF


@dataclass
class Viewport:
    id: int
    output: str
    tag: str
    h: int
    w: int
    x: int
    y: int
    layout: str


@dataclass
class TagsForWorkspace:
    name: str
    index: int
    mine: bool
    visible: bool
    focused: bool
    urgent: bool
    busy: bool


@dataclass
class DisplayWorkspace:
    id: int
    output: str
    h: int
    w: int
    x: int
    y: int
    layout: str
    index: int
    tags: list[TagsForWorkspace] = field(default_factory=list)


@dataclass
class ManagerState:
    window_title: Optional[str]
    desktop_names: list[str]
    viewports: list[Viewport]
    active_desktop: list[str]
    working_tags: list[str]
    urgent_tags: list[str]

    @classmethod
    def from_state(cls, state: State) -> ManagerState:
        """Summarise ``state``; raises ValueError if a workspace shows no known tag."""
        all_tags = state.tags.all()
        working_tags = [
            t.label for t in all_tags if any(w.has_tag(t.id) for w in state.windows)
        ]
        urgent_tags = [
            t.label
            for t in all_tags
            if any(w.has_tag(t.id) and w.urgent for w in state.windows)
        ]

        viewports = []
        for ws in state.workspaces:
            tag = state.tags.get(ws.tag) if ws.tag is not None else None
            if tag is None:
                raise ValueError(f"workspace {ws.id} does not show a known tag")
            layout = (
                state.layout_manager.layout_maybe(ws.id, ws.tag) if ws.tag is not None else None
            )
            screen = next((s for s in state.screens if s.id == ws.id), None)
            viewports.append(
                Viewport(
                    id=ws.id,
                    output=screen.output if screen is not None else "Not found (unreachable)",
                    tag=tag.label,
                    x=ws.xyhw.x,
                    y=ws.xyhw.y,
                    h=ws.xyhw.h & _U32_MASK,
                    w=ws.xyhw.w & _U32_MASK,
                    layout=layout.name if layout is not None else "N/A",
                )
            )

        active_desktop: list[str] = []
        focused_ws = state.focus_manager.workspace(state.workspaces)
        if focused_ws is not None and focused_ws.tag is not None:
            tag = state.tags.get(focused_ws.tag)
            if tag is None:
                raise ValueError(f"focused workspace shows unknown tag {focused_ws.tag}")
            active_desktop.append(tag.label)

        focused_window = state.focus_manager.window(state.windows)
        return cls(
            window_title=focused_window.name if focused_window is not None else None,
            desktop_names=[t.label for t in state.tags.normal()],
            viewports=viewports,
            active_desktop=active_desktop,
            working_tags=working_tags,
            urgent_tags=urgent_tags,
        )


@dataclass
class DisplayState:
    window_title: str
    workspaces: list[DisplayWorkspace]

    @classmethod
    def from_manager_state(cls, manager_state: ManagerState) -> DisplayState:
        m = manager_state
        visible = [vp.tag for vp in m.viewports]
        workspaces = [
            DisplayWorkspace(
                id=vp.id,
                output=vp.output,
                h=vp.h,
                w=vp.w,
                x=vp.x,
                y=vp.y,
                layout=vp.layout,
                index=ws_index,
                tags=[
                    TagsForWorkspace(
                        name=name,
                        index=index,
                        mine=vp.tag == name,
                        visible=name in visible,
                        focused=name in m.active_desktop,
                        urgent=name in m.urgent_tags,
                        busy=name in m.working_tags,
                    )
                    for index, name in enumerate(m.desktop_names)
                ],
            )
            for ws_index, vp in enumerate(m.viewports)
        ]
        return cls(window_title=m.window_title or "", workspaces=workspaces)