import math

import pytest

from collidelab.arrow import Arrow
from collidelab.geometry import Color, Vec2
from collidelab.parry import Parry, ParryShape, deg_to_rad, forward_vector

CENTER = Vec2(100, 100)


def _arrow(start, end):
    arrow = Arrow()
    arrow.set_start_location(start)
    arrow.set_end_location(end)
    return arrow


def test_deg_to_rad_half_turn():
    assert deg_to_rad(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("degrees", [0.0, 30.0, 90.0, 225.0])
def test_forward_vector_is_unit_and_matches_angle(degrees):
    vec = forward_vector(degrees)
    assert vec.length() == pytest.approx(1.0)
    assert math.atan2(vec.y, vec.x) % (2 * math.pi) == pytest.approx(
        deg_to_rad(degrees) % (2 * math.pi), abs=1e-6
    )


def test_parry_shape_geometry():
    shape = ParryShape(CENTER, 50.0, 0.0)
    assert shape.point_count == 32
    assert shape.point(0) == Vec2()
    assert shape.position == CENTER
    for point in shape.points()[1:]:
        assert point.length() == pytest.approx(50.0)
    first = shape.point(1)
    assert math.degrees(math.atan2(first.y, first.x)) == pytest.approx(-45.0, abs=1e-4)


def test_parry_shape_colours():
    shape = ParryShape(CENTER, 50.0, 0.0)
    assert shape.fill_color == Color(231, 76, 60, 100)
    assert shape.outline_color == Color(192, 57, 43, 255)


def test_tip_inside_sector():
    parry = Parry(CENTER, 50.0, 0.0)
    assert parry.in_parry(_arrow((200, 100), (110, 100)))


def test_tip_beyond_radius_is_outside():
    parry = Parry(CENTER, 50.0, 0.0)
    assert not parry.in_parry(_arrow((300, 100), (160, 100)))


def test_tip_behind_is_outside():
    parry = Parry(CENTER, 50.0, 0.0)
    assert not parry.in_parry(_arrow((0, 100), (90, 100)))


def test_head_on_arrow_is_parried_red():
    parry = Parry(CENTER, 50.0, 0.0)
    arrow = _arrow((200, 100), (110, 100))
    assert parry.try_parry(arrow) is True
    assert arrow.color == Color.RED


def test_arrow_moving_with_facing_is_not_parried():
    parry = Parry(CENTER, 50.0, 0.0)
    arrow = _arrow((100, 100), (110, 100))
    assert parry.try_parry(arrow) is False
    assert arrow.color == Color.GREEN


def test_arrow_outside_sector_is_reset_to_green():
    parry = Parry(CENTER, 50.0, 0.0)
    arrow = _arrow((0, 100), (90, 100))
    arrow.set_color(Color.RED)
    assert parry.try_parry(arrow) is False
    assert arrow.color == Color.GREEN