import pytest

from novakit.geometry import Axis, Grid, Vec2, Vec3, Vec4


def _triples():
    return [
        (Vec2(1.0, 2.0), Vec2(4.0, 8.0)),
        (Vec3(1.0, 2.0, 4.0), Vec3(8.0, 0.5, 2.0)),
        (Vec4(1.0, 2.0, 4.0, 0.5), Vec4(8.0, 0.5, 2.0, 4.0)),
    ]


def test_add_is_commutative_and_matches_inplace():
    cases = [
        (Vec2(1.0, 2.0), Vec2(4.0, 8.0), Vec2(1.0, 2.0)),
        (Vec3(1.0, 2.0, 4.0), Vec3(8.0, 0.5, 2.0), Vec3(1.0, 2.0, 4.0)),
        (Vec4(1.0, 2.0, 4.0, 0.5), Vec4(8.0, 0.5, 2.0, 4.0), Vec4(1.0, 2.0, 4.0, 0.5)),
    ]
    for a, b, c in cases:
        c += b
        assert a + b == b + a
        assert a + b == c


def test_mul_is_commutative_and_matches_inplace():
    cases = [
        (Vec2(1.0, 2.0), Vec2(4.0, 8.0), Vec2(1.0, 2.0)),
        (Vec3(1.0, 2.0, 4.0), Vec3(8.0, 0.5, 2.0), Vec3(1.0, 2.0, 4.0)),
        (Vec4(1.0, 2.0, 4.0, 0.5), Vec4(8.0, 0.5, 2.0, 4.0), Vec4(1.0, 2.0, 4.0, 0.5)),
    ]
    for a, b, c in cases:
        c *= b
        assert a * b == b * a
        assert a * b == c


def test_sub_takes_right_operand_first():
    cases = [
        (Vec2(1.0, 2.0), Vec2(4.0, 8.0), Vec2(4.0, 8.0)),
        (Vec3(1.0, 2.0, 4.0), Vec3(8.0, 0.5, 2.0), Vec3(8.0, 0.5, 2.0)),
        (Vec4(1.0, 2.0, 4.0, 0.5), Vec4(8.0, 0.5, 2.0, 4.0), Vec4(8.0, 0.5, 2.0, 4.0)),
    ]
    for a, b, c in cases:
        c -= a
        assert a - b == c


def test_div_takes_right_operand_first():
    cases = [
        (Vec2(1.0, 2.0), Vec2(4.0, 8.0), Vec2(4.0, 8.0)),
        (Vec3(1.0, 2.0, 4.0), Vec3(8.0, 0.5, 2.0), Vec3(8.0, 0.5, 2.0)),
        (Vec4(1.0, 2.0, 4.0, 0.5), Vec4(8.0, 0.5, 2.0, 4.0), Vec4(8.0, 0.5, 2.0, 4.0)),
    ]
    for a, b, c in cases:
        c /= a
        assert a / b == c


def test_inplace_returns_same_object():
    cases = [
        (Vec2(1.0, 2.0), Vec2(4.0, 8.0), Vec2(1.0, 2.0)),
        (Vec3(1.0, 2.0, 4.0), Vec3(8.0, 0.5, 2.0), Vec3(1.0, 2.0, 4.0)),
        (Vec4(1.0, 2.0, 4.0, 0.5), Vec4(8.0, 0.5, 2.0, 4.0), Vec4(1.0, 2.0, 4.0, 0.5)),
    ]
    for target, b, original in cases:
        before = target
        target += b
        target -= b
        assert target is before
        assert target == original


def test_binary_does_not_mutate_operands():
    a, b = Vec2(1.0, 2.0), Vec2(4.0, 8.0)
    _ = a + b
    assert a == Vec2(1.0, 2.0)
    assert b == Vec2(4.0, 8.0)


def test_pinned_addition():
    assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)


def test_pinned_subtraction_order():
    assert Vec2(1.0, 2.0) - Vec2(5.0, 3.0) == Vec2(4.0, 1.0)


def test_division_by_zero_component_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(0.0, 1.0) / Vec2(1.0, 1.0)


def test_mixed_types_rejected():
    with pytest.raises(TypeError):
        Vec2(1.0, 2.0) + Vec3(1.0, 2.0, 3.0)


def test_axis_overflow():
    axis = Axis(640, 480)
    assert axis.overflow_x(-1)
    assert axis.overflow_x(641)
    assert not axis.overflow_x(640)
    assert not axis.overflow_y(480)
    assert axis.overflow_y(481)
    assert axis.overflow(10, -5)
    assert not axis.overflow(10, 10)


def test_axis_edges():
    axis = Axis(640, 480)
    assert axis.at_top(-0.5)
    assert not axis.at_top(0)
    assert axis.at_bottom(481)
    assert axis.at_left(-1)
    assert axis.at_right(641)
    assert not axis.at_right(640)


def test_axis_middle_truncates():
    axis = Axis(640, 480)
    assert axis.at_middle(320.7)
    assert not axis.at_middle(321)
    assert axis.at_middle_y(240)
    assert not axis.at_middle_y(239.9)


def test_grid_snap_pinned():
    grid = Grid(Vec2(16.0, 16.0))
    result = grid.snap(0.0, 0.0)
    assert result.x == pytest.approx(8.0)
    assert result.y == pytest.approx(8.0)


def test_grid_snap_shifts_by_whole_cells():
    grid = Grid(Vec2(16.0, 32.0))
    a = grid.snap(5.0, 7.0)
    b = grid.snap(21.0, 39.0)
    assert b.x - a.x == pytest.approx(16.0)
    assert b.y - a.y == pytest.approx(32.0)