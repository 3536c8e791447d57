import random

import pytest

from collidelab.actor import BoxActor, CircleActor
from collidelab.app import CollisionConfig, SearchType, ThreadMode, main
from collidelab.geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Vec2
from collidelab.widget import WidgetType


def make_config(max_object=1000, search_type=SearchType.ARRAY, seed=7):
    return CollisionConfig(max_object, search_type, ThreadMode.SINGLE, rng=random.Random(seed))


def test_window_size_matches_window_constants():
    config = make_config()
    assert config.window_size() == Vec2(float(WINDOW_WIDTH), float(WINDOW_HEIGHT))


def test_spawn_count_is_hundredth_of_maximum():
    config = make_config(max_object=5000)
    assert config.spawn_count == 5000 // 100


def test_spawn_actor_adds_half_circles_half_boxes():
    config = make_config()
    config.spawn_actor(100)
    circles = [a for a in config.actors if isinstance(a, CircleActor)]
    boxes = [a for a in config.actors if isinstance(a, BoxActor)]
    assert len(circles) == 50
    assert len(boxes) == 50
    assert config.cur_object == 100
    assert sorted(a.actor_id for a in config.actors) == list(range(100))


def test_spawn_actor_places_actors_inside_window():
    config = make_config()
    config.spawn_actor(60)
    for actor in config.actors:
        assert 0.0 <= actor.location.x <= WINDOW_WIDTH
        assert 0.0 <= actor.location.y <= WINDOW_HEIGHT


def test_spawn_actor_updates_object_count_label():
    config = make_config()
    config.spawn_actor(100)
    assert config.widget.text(WidgetType.OBJECT_COUNT) == "Object Count: 100.00"


def test_spawn_actor_registers_actors_with_system():
    config = make_config()
    config.spawn_actor(40)
    assert set(map(id, config.collision_system.actors)) == set(map(id, config.actors))


def test_spawn_odd_count_rounds_each_kind_up():
    config = make_config()
    config.spawn_actor(3)
    circles = [a for a in config.actors if isinstance(a, CircleActor)]
    boxes = [a for a in config.actors if isinstance(a, BoxActor)]
    assert len(circles) == len(boxes) == 2
    assert config.cur_object == len(config.actors)


def test_spawn_beyond_maximum_is_ignored():
    config = make_config(max_object=100)
    config.spawn_actor(60)
    before = list(config.actors)
    config.spawn_actor(60)
    assert config.actors == before
    assert config.cur_object == 60


def test_destroy_actor_removes_oldest():
    config = make_config()
    config.spawn_actor(100)
    survivors = config.actors[30:]
    config.destroy_actor(30)
    assert config.actors == survivors
    assert config.cur_object == 70
    assert set(map(id, config.collision_system.actors)) == set(map(id, survivors))


def test_destroy_more_than_present_is_ignored():
    config = make_config()
    config.spawn_actor(20)
    before = list(config.actors)
    config.destroy_actor(50)
    assert config.actors == before
    assert config.cur_object == 20


def test_spawn_then_destroy_all_round_trip():
    config = make_config()
    config.spawn_actor(100)
    config.destroy_actor(100)
    assert config.actors == []
    assert config.cur_object == 0
    assert config.widget.text(WidgetType.OBJECT_COUNT) == "Object Count: 0.00"


def test_close_drops_every_actor():
    config = make_config()
    config.spawn_actor(50)
    config.close()
    assert config.actors == []
    assert config.collision_system.actors == []


@pytest.mark.parametrize(
    "search_type", [SearchType.ARRAY, SearchType.KD_TREE, SearchType.QUAD_TREE]
)
def test_attack_on_actor_location_hits_it(search_type):
    config = make_config(search_type=search_type)
    config.spawn_actor(20)
    target = config.actors[0]
    config.attack.set_attack_location((target.location.x, target.location.y))
    config.collision_system.build()
    hits = config.collision_system.search(config.attack)
    assert any(hit is target for hit in hits)
    assert target.is_overlap


def test_main_rejects_unknown_search_type():
    with pytest.raises(SystemExit):
        main(["--search", "octree"])