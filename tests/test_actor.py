import math
import random

import pytest

from collidelab.actor import Attack, BoxActor, CircleActor, ShapeType
from collidelab.geometry import Color, Rect, Vec2


class _Outer:
    def window_size(self):
        return Vec2(200.0, 100.0)


def _circle(location=Vec2(50.0, 50.0), radius=3.0, seed=1):
    return CircleActor(7, _Outer(), radius, location, rng=random.Random(seed))


def _box(location=Vec2(50.0, 50.0), size=4.0, seed=1):
    return BoxActor(8, _Outer(), size, location, rng=random.Random(seed))


def test_circle_initial_state():
    actor = _circle()
    assert actor.actor_id == 7
    assert actor.shape_type is ShapeType.CIRCLE
    assert actor.location == Vec2(50.0, 50.0)
    assert actor.local_radius() == 3.0
    assert actor.shape.outline_color == Color.GREEN
    assert actor.shape.fill_color == Color.BLACK
    assert actor.is_overlap is False


@pytest.mark.parametrize("seed", range(20))
def test_speed_is_whole_number_in_range(seed):
    actor = _circle(seed=seed)
    assert 10.0 <= actor.speed <= 50.0
    assert actor.speed.is_integer()


@pytest.mark.parametrize("seed", range(10))
def test_initial_goal_clamped_and_near(seed):
    actor = _circle(location=Vec2(190.0, 5.0), seed=seed)
    goal = actor.goal_location
    assert 0.0 <= goal.x <= 200.0
    assert 0.0 <= goal.y <= 100.0
    assert abs(goal.x - 190.0) <= 100.0
    assert abs(goal.y - 5.0) <= 100.0


def test_overlap_flags_and_colors():
    actor = _circle()
    actor.enter_overlap()
    assert actor.is_overlap is True
    assert actor.shape.outline_color == Color.RED
    actor.leave_overlap()
    assert actor.is_overlap is False
    assert actor.shape.outline_color == Color.GREEN


def test_tick_moves_toward_goal_and_clears_overlap():
    actor = _circle()
    actor.goal_location = Vec2(50.0, 90.0)
    actor.enter_overlap()
    actor.tick(0.1)
    assert actor.is_overlap is False
    assert actor.location.x == pytest.approx(50.0)
    assert actor.location.y == pytest.approx(50.0 + actor.speed * 0.1)


def test_tick_at_goal_picks_new_goal_without_moving():
    actor = _circle()
    actor.goal_location = actor.location
    actor.tick(0.5)
    assert actor.location == Vec2(50.0, 50.0)
    goal = actor.goal_location
    assert 0.0 <= goal.x <= 200.0 and 0.0 <= goal.y <= 100.0
    assert abs(goal.x - 50.0) <= 100.0 and abs(goal.y - 50.0) <= 100.0


def test_circle_vertex_render_ring():
    actor = _circle(radius=3.0)
    vertices = []
    actor.vertex_render(vertices)
    assert len(vertices) == 10
    distances = [(vertex.position - actor.location).length() for vertex in vertices]
    assert distances == pytest.approx([3.0] * 10)
    assert {vertex.color for vertex in vertices} == {Color.GREEN}


def test_box_corners():
    actor = _box(location=Vec2(50.0, 50.0), size=4.0)
    assert actor.shape_type is ShapeType.BOX
    corners = [actor.point(i) for i in range(4)]
    assert corners[0].x < corners[1].x
    assert corners[0].y == corners[1].y
    assert corners[2].x == corners[1].x and corners[2].y > corners[1].y
    assert corners[3].x == corners[0].x and corners[3].y == corners[2].y
    assert (corners[0] + corners[2]) / 2.0 == actor.location
    assert corners[2] - corners[0] == Vec2(4.0, 4.0)


def test_box_point_out_of_range():
    with pytest.raises(IndexError):
        _box().point(4)


def test_box_local_bound_matches_corners():
    actor = _box(size=4.0)
    assert actor.local_bound() == Rect(actor.point(0), Vec2(4.0, 4.0))


def test_box_local_radius():
    assert _box(size=2.0).local_radius() == pytest.approx(math.sqrt(2.0))


def test_box_center_uses_unshifted_points():
    actor = _box(location=Vec2(50.0, 50.0), size=4.0)
    assert actor.center() == Vec2(50.0, 52.0)


def test_box_vertex_render_segments():
    actor = _box()
    vertices = []
    actor.vertex_render(vertices)
    assert len(vertices) == 8
    assert vertices[0].position == actor.location
    assert vertices[1].position == vertices[2].position
    assert vertices[7].position == actor.location
    assert all(v.color == Color.GREEN for v in vertices)


def test_base_actor_defaults():
    actor = _circle()
    assert super(CircleActor, actor).local_radius() == 0.0
    assert super(CircleActor, actor).local_bound() == Rect()


def test_attack_initial_state():
    attack = Attack(_Outer(), 100.0, Vec2(), rng=random.Random(3))
    assert attack.actor_id == 0
    assert attack.shape_type is ShapeType.BOX
    assert attack.shape.outline_color == Color.MAGENTA
    assert attack.shape.fill_color == Color.TRANSPARENT


def test_attack_set_location():
    attack = Attack(_Outer(), 100.0, Vec2(), rng=random.Random(3))
    attack.set_attack_location((5, 7))
    assert attack.location == Vec2(5.0, 7.0)
    assert attack.shape.origin == Vec2(50.0, 50.0)
    assert attack.local_bound().center() == Vec2(5.0, 7.0)


def test_attack_range_grows_and_clamps():
    attack = Attack(_Outer(), 100.0, Vec2(), rng=random.Random(3))
    attack.add_attack_range(10)
    assert attack.size == 110.0
    assert attack.shape.size == Vec2(110.0, 110.0)
    assert attack.shape.origin == Vec2(55.0, 55.0)
    attack.add_attack_range(-1000)
    assert attack.size == 10.0
    assert attack.shape.size == Vec2(10.0, 10.0)


def test_attack_circumscriber():
    attack = Attack(_Outer(), 20.0, Vec2(30.0, 40.0), rng=random.Random(3))
    vertices = []
    attack.attack_circumscriber(vertices)
    assert len(vertices) == 30
    distances = [(vertex.position - attack.location).length() for vertex in vertices]
    assert distances == pytest.approx([attack.local_radius()] * 30)
    assert {vertex.color for vertex in vertices} == {Color.MAGENTA}