# collidelab

A small interactive sandbox for experimenting with 2D collision detection.
Circles and boxes wander around a 1000 x 1000 window, and a square "attack"
area can be moved with the mouse to find which of them it overlaps. Three
broad-phase strategies are available:

- `ArraySystem` (`collidelab.array_system`): checks every actor directly
- `KDTree` (`collidelab.kdtree`): a 2D k-d tree rebuilt every frame
- `QuadtreeManager` (`collidelab.quadtree`): a quadtree, maximum depth 8, rebuilt every frame

An on-screen widget shows event, tick, draw, build and search times in
milliseconds. Build and search times are averaged over the last 100 frames.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
collidelab
```

Options:

| Option | Default | Meaning |
|--------|---------|---------|
| `--max-objects N` | `100000` | Largest number of actors allowed; each spawn/remove batch is `N // 100` |
| `--search {array,kd-tree,quad-tree}` | `array` | Which collision system to use |
| `--threads {single,multi,mixed}` | `single` | Stored on the configuration; see below |

The window text uses the font file `DNFBitBitTTF.ttf` from the current
directory if present, and pygame's default font otherwise.

### Controls

| Key / button | Action |
|--------------|--------|
| `1` | Spawn a batch of actors (half circles of radius 1, half boxes of size 2), unless that would pass the maximum |
| `2` | Remove the oldest batch of actors |
| `3` | Toggle debug drawing (tree partitions, attack circumcircle) |
| `Q` / `W` | Grow / shrink the attack square by 10 pixels (minimum 10) |
| Left mouse | Move the attack square; while held, search for overlaps |
| `Esc` | Quit |

Actors hit by the attack are outlined in red until their next tick, when they
turn green again.

## Library use

The pieces work without a window:

```python
from collidelab.app import CollisionConfig, SearchType, ThreadMode
from collidelab.actor import Attack, BoxActor, CircleActor
from collidelab.detection import aabb, check_collision
from collidelab.sat import check_collision as sat_collision
from collidelab.geometry import Vec2, Rect

config = CollisionConfig(1000, SearchType.KD_TREE, ThreadMode.SINGLE)
config.spawn_actor(10)
config.collision_system.build()
hits = config.collision_system.search(config.attack)
```

- `collidelab.detection.check_collision(a, b)` handles box–box (AABB),
  circle–circle and circle–box tests between actors; `aabb(a, b)` tests two
  `Rect`s, with touching edges not counting as overlap.
- `collidelab.sat.check_collision(lhs, rhs)` runs a separating-axis test on
  two shapes and returns a `SATResult` with `colliding`, the axis of least
  penetration and the penetration depth.
- Every collision system implements `CollisionSystem`: `insert`, `remove`,
  `build`, `search(attack)`, `all_search()` and `draw(vertices)`, which
  appends debug line vertices.
- `collidelab.parry.Parry` checks whether an `Arrow`'s tip lands inside a
  90° sector (`in_parry`) and, via `try_parry`, whether it arrives from the
  front, colouring the arrow red when parried.
- `collidelab.task_timer.TaskTimer.measure_task(task)` returns a callable's
  run time in milliseconds.

## Limitations

- The thread mode is only recorded; all work runs on a single thread.
- The running sandbox only searches against the attack; `all_search()` is
  available to callers but is not used by the main loop.
- Collision tests use the shape-aware checks in `collidelab.detection`; the
  separating-axis test is provided as a library function only.
- Nothing is saved: actor counts, positions and timings exist only while the
  window is open.