import pytest

from wmcore.geometry import MAX_LIMIT, MIN_LIMIT, Xyhw, XyhwChange


def test_center_halfed():
    a = Xyhw(x=10, y=10, w=2000, h=1000)
    correct = Xyhw(x=510, y=260, w=1000, h=500)
    assert a.center_halfed() == correct


def test_without_should_trim_from_the_top():
    a = Xyhw(y=5, h=1000, w=1000)
    b = Xyhw(h=10, w=100)
    assert a.without(b) == Xyhw(x=0, y=10, h=995, w=1000)


def test_without_should_trim_from_the_left():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(h=100, w=10)
    assert a.without(b) == Xyhw(x=10, y=0, w=990, h=1000)


def test_without_should_trim_from_the_bottom():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(y=990, x=0, h=10, w=100)
    assert a.without(b) == Xyhw(x=0, y=0, h=990, w=1000)


def test_without_should_trim_from_the_right():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(x=990, y=0, h=100, w=10)
    assert a.without(b) == Xyhw(x=0, y=0, w=990, h=1000)


def test_without_does_not_modify_original():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    a.without(Xyhw(h=100, w=10))
    assert a == Xyhw(x=0, y=0, h=1000, w=1000)


def test_contains_xyhw_should_detect_a_inner_window():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(x=100, y=100, h=800, w=800)
    assert a.contains_xyhw(b)


def test_contains_xyhw_should_detect_a_upper_left_corner_outside():
    a = Xyhw(x=100, y=100, h=800, w=800)
    b = Xyhw(x=0, y=0, h=200, w=200)
    assert not a.contains_xyhw(b)


def test_contains_xyhw_should_detect_a_lower_right_corner_outside():
    a = Xyhw(x=100, y=100, h=800, w=800)
    b = Xyhw(x=800, y=800, h=200, w=200)
    assert not a.contains_xyhw(b)


def test_contains_point_includes_edges():
    a = Xyhw(x=100, y=100, h=800, w=800)
    assert a.contains_point(100, 100)
    assert a.contains_point(900, 900)
    assert not a.contains_point(901, 500)
    assert not a.contains_point(500, 99)


def test_default_limits():
    a = Xyhw()
    assert (a.minw, a.maxw, a.minh, a.maxh) == (MIN_LIMIT, MAX_LIMIT, MIN_LIMIT, MAX_LIMIT)
    assert (a.x, a.y, a.h, a.w) == (0, 0, 0, 0)


def test_build_clamps_to_limits():
    a = Xyhw.build(w=500, h=20, maxw=300, minh=50)
    assert a.w == 300
    assert a.h == 50


def test_setter_clamps_to_limits():
    a = Xyhw(w=100, h=100)
    a.maxw = 50
    assert a.w == 50
    a.minh = 200
    assert a.h == 200


def test_add_then_sub_restores_position_and_size():
    a = Xyhw(x=3, y=4, h=50, w=60)
    b = Xyhw(x=10, y=20, h=5, w=6)
    back = (a + b) - b
    assert (back.x, back.y, back.h, back.w) == (a.x, a.y, a.h, a.w)


def test_add_combines_limits_restrictively():
    a = Xyhw(minw=10, maxw=100)
    b = Xyhw(minw=20, maxw=80, minh=5, maxh=7)
    result = a + b
    assert (result.minw, result.maxw, result.minh, result.maxh) == (20, 80, 5, 7)


def test_center_relative():
    inner = Xyhw(w=100, h=50)
    outer = Xyhw(x=0, y=0, w=1000, h=500)
    inner.center_relative(outer, 0)
    assert inner.center() == outer.center()


def test_center_relative_subtracts_border():
    inner = Xyhw(w=100, h=50)
    plain = inner.copy()
    outer = Xyhw(x=0, y=0, w=1000, h=500)
    plain.center_relative(outer, 0)
    inner.center_relative(outer, 2)
    assert (inner.x, inner.y) == (plain.x - 2, plain.y - 2)


def test_center_truncates_negative_toward_zero():
    assert Xyhw(w=-3, h=-3).center() == (-1, -1)


def test_volume():
    assert Xyhw(h=3, w=4).volume() == 12


def test_copy_is_independent():
    a = Xyhw(x=1, y=2, h=3, w=4)
    b = a.copy()
    b.x = 99
    assert a.x == 1
    assert b.x == 99


def test_equality_compares_all_fields():
    assert Xyhw(x=1) == Xyhw(x=1)
    assert not Xyhw(x=1) == Xyhw(x=1, maxw=5)


class _FakeWindow:
    def __init__(self, floating, placement, strut=None):
        self._floating = floating
        self._placement = placement
        self.exact = None
        self.strut = strut

    def floating(self):
        return self._floating

    def calculated_xyhw(self):
        return self._placement.copy()

    def set_floating_exact(self, value):
        self.exact = value


def test_change_from_xyhw_round_trip():
    source = Xyhw.build(x=5, y=6, h=70, w=80, minw=1, maxw=900, minh=2, maxh=800)
    target = Xyhw()
    assert XyhwChange.from_xyhw(source).update(target)
    assert target == source


def test_change_reports_no_change_when_equal():
    target = Xyhw(x=5, y=6)
    assert not XyhwChange(x=5, y=6).update(target)
    assert target == Xyhw(x=5, y=6)


def test_change_only_touches_set_fields():
    target = Xyhw(x=5, y=6, h=7, w=8)
    assert XyhwChange(w=20).update(target)
    assert target == Xyhw(x=5, y=6, h=7, w=20)


def test_update_window_floating_ignores_tiled_window():
    window = _FakeWindow(False, Xyhw(x=1))
    assert not XyhwChange(x=5).update_window_floating(window)
    assert window.exact is None


def test_update_window_floating_sets_exact():
    window = _FakeWindow(True, Xyhw(x=1, y=2))
    assert XyhwChange(x=5).update_window_floating(window)
    assert window.exact == Xyhw(x=5, y=2)


def test_update_window_strut_creates_missing_strut():
    window = _FakeWindow(False, Xyhw())
    assert XyhwChange().update_window_strut(window)
    assert window.strut == Xyhw()


def test_update_window_strut_updates_existing():
    window = _FakeWindow(False, Xyhw(), strut=Xyhw(h=10))
    assert XyhwChange(h=30).update_window_strut(window)
    assert window.strut == Xyhw(h=30)
    assert not XyhwChange(h=30).update_window_strut(window)


@pytest.mark.parametrize("name", ["x", "y", "h", "w"])
def test_change_each_position_field(name):
    target = Xyhw()
    assert XyhwChange(**{name: 42}).update(target)
    assert getattr(target, name) == 42