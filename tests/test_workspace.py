from wmcore.geometry import Xyhw
from wmcore.screen import BBox
from wmcore.spacing import Gutter, Margins, Side
from wmcore.tags import Tag
from wmcore.window import Window, WindowHandle, WindowType
from wmcore.workspace import Workspace


def _workspace(width=1000, height=800, id=1):
    return Workspace.from_bbox(BBox(x=0, y=0, width=width, height=height), id)


def test_empty_ws_should_not_contain_window():
    subject = Workspace.from_bbox(BBox(width=600, height=800, x=0, y=0), 0)
    w = Window(WindowHandle.mock(1))
    assert not subject.is_displaying(w)


def test_tagging_a_workspace_with_the_same_tag_as_a_window_should_cause_it_to_display():
    tag_id = 1
    subject = Workspace.from_bbox(BBox(width=600, height=800, x=0, y=0), 0)
    tag = Tag(tag_id, "test")
    subject.show_tag(tag.id)
    w = Window(WindowHandle.mock(1))
    w.tag_with(tag_id)
    assert subject.is_displaying(w)


def test_is_managed_excludes_docks():
    ws = _workspace()
    ws.show_tag(1)
    dock = Window(WindowHandle.mock(2), window_type=WindowType.DOCK)
    dock.tag_with(1)
    normal = Window(WindowHandle.mock(3))
    normal.tag_with(1)
    assert not ws.is_managed(dock)
    assert ws.is_managed(normal)


def test_from_bbox_sets_both_areas():
    ws = _workspace()
    expected = Xyhw.build(x=0, y=0, h=800, w=1000)
    assert ws.xyhw == expected
    assert ws.xyhw_avoided == expected
    assert ws.tag is None
    assert ws.margin == Margins.uniform(10)


def test_dimensions_respect_margins():
    ws = _workspace()
    assert (ws.x(), ws.y(), ws.width(), ws.height()) == (10, 10, 980, 780)


def test_dimensions_respect_margin_multiplier():
    ws = _workspace()
    ws.margin_multiplier = 2.0
    assert (ws.x(), ws.y(), ws.width(), ws.height()) == (20, 20, 960, 760)


def test_dimensions_respect_gutters():
    ws = _workspace()
    ws.gutters = [Gutter(Side.LEFT, 5), Gutter(Side.BOTTOM, 7)]
    assert ws.x() == 15
    assert ws.width() == 975
    assert ws.y() == 10
    assert ws.height() == 773


def test_gutters_for_prefers_workspace_specific():
    ws = _workspace(id=2)
    gutters = [
        Gutter(Side.TOP, 1),
        Gutter(Side.TOP, 2, 2),
        Gutter(Side.TOP, 3),
        Gutter(Side.LEFT, 4, 3),
        Gutter(Side.RIGHT, 5),
    ]
    assert ws.gutters_for(gutters) == [Gutter(Side.TOP, 2, 2), Gutter(Side.RIGHT, 5)]


def test_gutters_for_global_replaces_global():
    ws = _workspace(id=1)
    assert ws.gutters_for([Gutter(Side.TOP, 1), Gutter(Side.TOP, 3)]) == [Gutter(Side.TOP, 3)]


def test_contains_point_and_has_tag():
    ws = _workspace()
    ws.show_tag(3)
    assert ws.has_tag(3)
    assert not ws.has_tag(1)
    assert ws.contains_point(1000, 800)
    assert not ws.contains_point(1001, 0)


def test_update_avoided_areas_trims_top_strut():
    ws = _workspace()
    ws.avoid = [Xyhw(h=10, w=100)]
    ws.update_avoided_areas()
    assert ws.xyhw_avoided == Xyhw.build(x=0, y=10, h=790, w=1000)
    assert ws.xyhw == Xyhw.build(x=0, y=0, h=800, w=1000)


def test_center_halfed():
    ws = _workspace()
    assert ws.center_halfed() == Xyhw.build(x=250, y=200, h=400, w=500)


def test_rect():
    ws = _workspace()
    rect = ws.rect()
    assert (rect.x, rect.y, rect.w, rect.h) == (10, 10, 980, 780)


def test_equality_is_by_id():
    a = _workspace(id=4)
    b = _workspace(width=10, height=10, id=4)
    c = _workspace(id=5)
    assert a == b
    assert a != c


def test_repr():
    ws = _workspace(id=2)
    ws.show_tag(1)
    assert repr(ws) == "Workspace { id: 2, tags: 1, x: 0, y: 0 }"