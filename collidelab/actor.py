"""Moving actors (circles and boxes) and the player's box-shaped attack."""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import Iterator, Protocol

from collidelab.geometry import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    CircleShape,
    Color,
    Rect,
    RectangleShape,
    Shape,
    Vec2,
    Vertex,
)

_PI = 3.14159265359
_MOVE_RANGE = 100.0
_ARRIVAL_DISTANCE = 1.0
_CIRCLE_OUTLINE_POINTS = 10
_ATTACK_CIRCLE_POINTS = 30
_MIN_ATTACK_SIZE = 10.0


class WorldBounds(Protocol):
    """Anything that reports the size of the world actors wander in."""

    def window_size(self) -> Vec2: ...


class ShapeType(Enum):
    BOX = "box"
    CIRCLE = "circle"


def _ring(center: Vec2, radius: float, count: int, color: Color) -> Iterator[Vertex]:
    for i in range(count):
        angle = i * 2 * _PI / count
        yield Vertex(
            Vec2(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle)),
            color,
        )


class Actor:
    """An object that wanders towards random goals and can be flagged as overlapping."""

    def __init__(
        self,
        actor_id: int,
        outer: WorldBounds | None,
        shape_type: ShapeType,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.actor_id = actor_id
        self.outer = outer
        self.shape_type = shape_type
        self.shape: Shape | None = None
        self.goal_location = Vec2()
        self.is_overlap = False
        self._rng = rng if rng is not None else random.Random()
        self.speed = float(self._rng.randint(10, 50))

    @property
    def location(self) -> Vec2:
        return self.shape.position

    def tick(self, delta_time: float) -> None:
        """Clear the overlap flag and step towards the goal, picking a new one on arrival."""
        self.leave_overlap()
        current = self.location
        offset = self.goal_location - current
        distance = offset.length()
        if distance <= _ARRIVAL_DISTANCE:
            self._set_new_goal()
        else:
            self.shape.position = current + offset / distance * (delta_time * self.speed)

    def vertex_render(self, vertices: list) -> None:
        """Append this actor's outline as line vertices; the base actor draws nothing."""

    def set_color(self, color: Color) -> None:
        self.shape.outline_color = color

    def enter_overlap(self) -> None:
        self.set_color(Color.RED)
        self.is_overlap = True

    def leave_overlap(self) -> None:
        self.set_color(Color.GREEN)
        self.is_overlap = False

    def local_radius(self) -> float:
        return 0.0

    def local_bound(self) -> Rect:
        return Rect()

    def _window_size(self) -> Vec2:
        if self.outer is None:
            return Vec2(float(WINDOW_WIDTH), float(WINDOW_HEIGHT))
        return self.outer.window_size()

    def _set_new_goal(self) -> None:
        if self.shape is None:
            return
        location = self.location
        window = self._window_size()
        new_x = location.x + self._rng.uniform(-_MOVE_RANGE, _MOVE_RANGE)
        new_y = location.y + self._rng.uniform(-_MOVE_RANGE, _MOVE_RANGE)
        self.goal_location = Vec2(
            min(max(new_x, 0.0), window.x),
            min(max(new_y, 0.0), window.y),
        )


class CircleActor(Actor):
    """A circular actor centred on its location."""

    def __init__(
        self,
        actor_id: int,
        outer: WorldBounds | None,
        radius: float,
        location: Vec2,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(actor_id, outer, ShapeType.CIRCLE, rng=rng)
        self.radius = radius
        circle = CircleShape(radius)
        circle.position = location
        circle.origin = circle.geometric_center()
        circle.fill_color = Color.BLACK
        circle.outline_color = Color.GREEN
        circle.outline_thickness = -2.0
        self.shape = circle
        self._set_new_goal()

    def vertex_render(self, vertices: list) -> None:
        vertices.extend(
            _ring(self.location, self.radius, _CIRCLE_OUTLINE_POINTS, self.shape.outline_color)
        )

    def local_radius(self) -> float:
        return self.radius

    def local_bound(self) -> Rect:
        return self.shape.global_bounds()


class BoxActor(Actor):
    """A square actor centred on its location."""

    def __init__(
        self,
        actor_id: int,
        outer: WorldBounds | None,
        size: float,
        location: Vec2,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(actor_id, outer, ShapeType.BOX, rng=rng)
        self.size = size
        rectangle = RectangleShape(Vec2(size, size))
        rectangle.position = location
        rectangle.origin = rectangle.geometric_center()
        rectangle.fill_color = Color.BLACK
        rectangle.outline_color = Color.GREEN
        rectangle.outline_thickness = -2.0
        self.shape = rectangle
        self._set_new_goal()

    def vertex_render(self, vertices: list) -> None:
        position = self.shape.position
        color = self.shape.outline_color
        for index in range(4):
            vertices.append(Vertex(position + self.shape.point(index), color))
            vertices.append(Vertex(position + self.shape.point(index + 1), color))

    def local_radius(self) -> float:
        return math.sqrt(self.size**2 + self.size**2) / 2.0

    def local_bound(self) -> Rect:
        return self.shape.global_bounds()

    def center(self) -> Vec2:
        position = self.shape.position
        low = position + self.shape.point(0)
        high = position + self.shape.point(3)
        return (low + high) / 2.0

    def point(self, index: int) -> Vec2:
        """Return a corner in world coordinates: 0 top-left, then clockwise."""
        half = self.size / 2.0
        location = self.location
        offsets = {
            0: (-half, -half),
            1: (half, -half),
            2: (half, half),
            3: (-half, half),
        }
        if index not in offsets:
            raise IndexError(f"box corner index {index} out of range")
        dx, dy = offsets[index]
        return Vec2(location.x + dx, location.y + dy)


class Attack(BoxActor):
    """The player's square attack area, moved and resized by input."""

    def __init__(
        self,
        outer: WorldBounds | None,
        size: float,
        location: Vec2,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(0, outer, size, location, rng=rng)
        self.shape.fill_color = Color.TRANSPARENT
        self.shape.outline_color = Color.MAGENTA

    def set_attack_location(self, location) -> None:
        x, y = location
        self.shape.position = Vec2(float(x), float(y))
        self.shape.origin = self.shape.geometric_center()

    def add_attack_range(self, amount: float) -> None:
        """Grow or shrink the square, never below its minimum size."""
        self.size = max(self.shape.size.x + amount, _MIN_ATTACK_SIZE)
        self.shape.size = Vec2(self.size, self.size)
        self.shape.origin = self.shape.geometric_center()

    def attack_circumscriber(self, vertices: list) -> None:
        """Append points of the circle circumscribing the attack square."""
        vertices.extend(
            _ring(
                self.shape.position,
                self.local_radius(),
                _ATTACK_CIRCLE_POINTS,
                self.shape.outline_color,
            )
        )