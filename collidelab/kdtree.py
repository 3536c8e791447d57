"""Collision system backed by a 2D k-d tree rebuilt from actor positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from collidelab import detection, sat
from collidelab.actor import Actor, Attack
from collidelab.collision_system import CollisionSystem
from collidelab.geometry import USE_SAT, WINDOW_HEIGHT, WINDOW_WIDTH, Color, Vec2, Vertex

_INIT_DEPTH = 0
_DIMENSIONS = 2
_AXIS_X = 0
_AXIS_Y = 1


@dataclass(eq=False)
class KDNode:
    """One actor in the tree, splitting space along the axis given by its depth."""

    actor: Actor | None
    depth: int
    left: KDNode | None = None
    right: KDNode | None = None

    def is_valid(self) -> bool:
        return self.actor is not None

    def clear(self) -> None:
        self.actor = None
        self.left = None
        self.right = None
        self.depth = 0


def _coordinate(actor: Actor, axis: int) -> float:
    location = actor.location
    return location.x if axis == _AXIS_X else location.y


class KDTree(CollisionSystem):
    """Splits actors by median x, then median y, alternating with depth."""

    def __init__(self) -> None:
        self.root: KDNode | None = None
        self.actors: list[Actor] = []

    def init(self) -> None:
        """A k-d tree needs no preparation; it is built on demand."""

    def destroy(self) -> None:
        self.root = None
        self.actors.clear()

    def insert(self, actor: Actor) -> None:
        self.actors.append(actor)

    def remove(self, actor: Actor) -> None:
        """Remove the first occurrence by moving the last actor into its slot."""
        for index, candidate in enumerate(self.actors):
            if candidate is actor:
                self.actors[index] = self.actors[-1]
                self.actors.pop()
                break

    def build(self) -> None:
        """Discard the old tree and build a fresh one, since actors keep moving."""
        self.root = self._insert_node(self.actors, _INIT_DEPTH) if self.actors else None

    def search(self, attack: Attack) -> list[Actor]:
        overlap: list[Actor] = []
        if self.root is None:
            return overlap
        for node in self._range_search(
            attack.location, attack.local_radius(), self.root, _INIT_DEPTH
        ):
            other = node.actor
            if USE_SAT:
                hit = sat.check_collision(attack.shape, other.shape).colliding
            else:
                hit = detection.check_collision(attack, other)
            if hit:
                overlap.append(other)
                other.enter_overlap()
        return overlap

    def all_search(self) -> list[Actor]:
        overlap: list[Actor] = []
        if self.root is None:
            return overlap
        for actor in self.actors:
            for node in self._range_search(
                actor.location, actor.local_radius(), self.root, _INIT_DEPTH
            ):
                other = node.actor
                if other is actor:
                    continue
                if USE_SAT:
                    hit = sat.check_collision(actor.shape, other.shape).colliding
                else:
                    hit = detection.check_collision(actor, other)
                if hit:
                    overlap.append(actor)
                    actor.enter_overlap()
        return overlap

    def draw(self, vertices: list) -> None:
        """Append the splitting lines of every node, clipped to their regions."""
        if self.root is not None:
            self._draw_node(
                vertices, self.root, 0.0, float(WINDOW_WIDTH), 0.0, float(WINDOW_HEIGHT)
            )

    def _insert_node(self, actors: list[Actor], depth: int) -> KDNode | None:
        if not actors:
            return None
        axis = depth % _DIMENSIONS
        ordered = sorted(actors, key=lambda actor: _coordinate(actor, axis))
        middle = len(ordered) // 2
        node = KDNode(ordered[middle], axis)
        node.left = self._insert_node(ordered[:middle], axis + 1)
        node.right = self._insert_node(ordered[middle + 1 :], axis + 1)
        return node

    def _range_search(
        self, center: Vec2, radius: float, node: KDNode | None, depth: int
    ) -> Iterator[KDNode]:
        if node is None:
            return
        location = node.actor.location
        dx = center.x - location.x
        dy = center.y - location.y
        if dx * dx + dy * dy <= (radius + node.actor.local_radius()) ** 2:
            yield node

        if depth % _DIMENSIONS == _AXIS_X:
            probe, split = center.x, location.x
        else:
            probe, split = center.y, location.y
        if probe - radius <= split:
            yield from self._range_search(center, radius, node.left, depth + 1)
        if probe + radius >= split:
            yield from self._range_search(center, radius, node.right, depth + 1)

    def _draw_node(
        self,
        vertices: list,
        node: KDNode | None,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float,
    ) -> None:
        if node is None:
            return
        location = node.actor.location
        color = Color.YELLOW if node.actor.is_overlap else Color.WHITE
        axis = node.depth % _DIMENSIONS
        if axis == _AXIS_X:
            vertices.append(Vertex(Vec2(location.x, y_min), color))
            vertices.append(Vertex(Vec2(location.x, y_max), color))
            self._draw_node(vertices, node.left, x_min, location.x, y_min, y_max)
            self._draw_node(vertices, node.right, location.x, x_max, y_min, y_max)
        elif axis == _AXIS_Y:
            vertices.append(Vertex(Vec2(x_min, location.y), color))
            vertices.append(Vertex(Vec2(x_max, location.y), color))
            self._draw_node(vertices, node.left, x_min, x_max, y_min, location.y)
            self._draw_node(vertices, node.right, x_min, x_max, location.y, y_max)