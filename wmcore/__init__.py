"""Window, workspace, tag, layout, focus and state models for a tiling window manager."""

__version__ = "0.1.0"

__all__ = [
    "dto",
    "focus",
    "geometry",
    "layouts",
    "scratchpad",
    "screen",
    "spacing",
    "state",
    "tags",
    "window",
    "window_change",
    "workspace",
]