# wmcore

The state model of a tiling window manager, in plain Python: window and
workspace geometry, tags, layout selection, focus history, window
stacking order, and the status snapshot that bars and panels read.

It has no dependencies outside the standard library.

## Install

```
pip install wmcore
```

For the tests:

```
pip install "wmcore[test]"
pytest
```

## What is in it

- `wmcore.geometry`: `Xyhw`, a rectangle (x, y from the top left, height,
  width) with minimum and maximum sizes. Setting a property clamps width
  and height into the limits; `Xyhw.build` returns a clamped value. It
  supports `+` and `-`, `contains_point`, `contains_xyhw`, `volume`,
  `without` (trim another rectangle out of it), `center`,
  `center_halfed` and `center_relative`. `XyhwChange` is a partial
  update, applied with `update` to an `Xyhw`, or with
  `update_window_floating` and `update_window_strut` to a window.
- `wmcore.spacing`: sizes given as `Pixel` or `Ratio` (both with
  `into_absolute`), `Margins` (`uniform`, `from_pair`, `from_triple`;
  negative values raise `ValueError`), `Side` and `Gutter`.
- `wmcore.window`: `Window`, `WindowHandle` (`mock` or `xlib`),
  `WindowState`, `WindowType`, and the interaction `Mode` with its
  `ModeKind`. A `Window` computes its on-screen `x`, `y`, `width` and
  `height` from its normal placement, margins, border and floating
  offsets, and can `snap_to_workspace`.
- `wmcore.window_change`: `WindowChange`, the property updates the
  display server reports for one window; `update` applies them and tells
  whether anything changed. `UNSET` marks `transient` or `name` as left
  alone, since both may be set to `None`.
- `wmcore.scratchpad`: `ScratchPad` and its placement on a workspace
  (`xyhw`); out-of-range sizes fall back to a quarter for the position
  and a half for the size.
- `wmcore.screen`: `Screen`, `BBox` and `DockArea`, built from the twelve
  values of a dock strut with `DockArea.from_sequence`.
- `wmcore.workspace`: `Workspace`, a screen area that shows one tag, with
  its margins, gutters (`gutters_for`) and the areas kept clear for docks
  (`update_avoided_areas`).
- `wmcore.tags`: `Tags` and `Tag`. Normal tags are numbered from 1.
  Hidden tags, such as the scratchpad tag, are numbered down from
  `HIDDEN_TAG_BASE_ID`, and their labels must be unique.
- `wmcore.layouts`: `Layout`, `LayoutMode`, `ParseLayoutError`, the
  layout name constants (`MONOCLE`, `MAIN_AND_DECK`, ...) and
  `LayoutManager`, which keeps the order of layouts per tag or per
  workspace: `layout`, `layout_maybe`, `set_layout`,
  `cycle_next_layout`, `cycle_previous_layout` and `restore`.
- `wmcore.focus`: `FocusBehaviour` and `FocusManager`, the history of
  focused workspaces, tags and windows, newest first.
- `wmcore.state`: `State`. `sort_windows` and `move_to_top` queue a
  `SetWindowOrder` action in `State.actions`; `handle_single_border`
  removes the border of a lone window on a tag (or of every window under
  the monocle layout) when `single_window_border` is off;
  `update_static` gives docks and sticky windows the tag of the
  workspace under them; `window_move_handler` and
  `window_resize_handler` apply drag offsets, snapping a moved window
  back to tiling when it is dropped near a workspace edge.
- `wmcore.dto`: `ManagerState.from_state` and
  `DisplayState.from_manager_state`, snapshots of a `State` for status
  bars.

## Example

```python
from wmcore.geometry import Xyhw

screen = Xyhw.build(x=0, y=0, h=1000, w=1000)
bar = Xyhw.build(x=0, y=0, h=10, w=100)

usable = screen.without(bar)
print(usable.y, usable.h)   # 10 990
```

```python
from wmcore.tags import Tags

tags = Tags()
tags.add_new("home")                  # 1
tags.add_new("code")                  # 2
tags.add_new_hidden("NSP")            # hidden, numbered from the top
print([t.label for t in tags.all()])  # ['home', 'code', 'NSP']
```

```python
from wmcore.layouts import Layout, LayoutManager, MONOCLE, EVEN_VERTICAL

manager = LayoutManager.from_config(
    [MONOCLE, EVEN_VERTICAL],
    [Layout(MONOCLE), Layout(EVEN_VERTICAL)],
)
manager.set_layout(1, 1, EVEN_VERTICAL)
print(manager.layout(1, 1).name)      # EvenVertical
```

## What it does not do

- It does not talk to a display server, run an event loop, or start
  programs. A front end feeds it events and applies the queued actions
  and computed window positions itself.
- It reads no configuration file; values are passed in directly.
- A `Layout` is only a name. The package does not compute tiled window
  rectangles for a layout, and has no handlers for creating or
  destroying windows.
- There is no command-line program.