"""Collision system backed by a region quadtree rebuilt each frame."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Iterator

from collidelab import detection, sat
from collidelab.actor import Actor, Attack
from collidelab.collision_system import CollisionSystem
from collidelab.geometry import USE_SAT, WINDOW_HEIGHT, WINDOW_WIDTH, Color, Rect, Vec2, Vertex

logger = logging.getLogger(__name__)

_SPLIT_THRESHOLD = 10
_MANAGER_MAX_DEPTH = 8


class QNodeIndex(IntEnum):
    UPPERLEFT = 0
    UPPERRIGHT = 1
    LOWERLEFT = 2
    LOWERRIGHT = 3
    STRADDLING = 4
    OUTOFAREA = 5


class QNode:
    """A square region holding the actors that fit no single child."""

    def __init__(self, tree: Quadtree, parent: QNode | None, bounds: Rect, depth: int) -> None:
        self.tree = tree
        self.parent = parent
        self.bounds = bounds
        self.depth = depth
        self.children: list[QNode] = []
        self.items: list[Actor] = []

    def insert(self, item: Actor) -> None:
        region = self.test_region(item.local_bound())
        if region is QNodeIndex.STRADDLING:
            self.items.append(item)
        elif region is not QNodeIndex.OUTOFAREA:
            if self.is_split():
                self.children[region].insert(item)
            elif len(self.items) >= _SPLIT_THRESHOLD and self._split():
                self.children[region].insert(item)
            else:
                self.items.append(item)

    def test_region(self, bounds: Rect) -> QNodeIndex:
        """Name the one quadrant the rectangle falls in, or say it straddles or misses."""
        quads = self._get_quads(bounds)
        if not quads:
            return QNodeIndex.OUTOFAREA
        if len(quads) == 1:
            return quads[0]
        return QNodeIndex.STRADDLING

    def query(self, item: Actor) -> list[QNode]:
        """Return this node and every descendant whose quadrant the item touches."""
        nodes = [self]
        if self.is_split():
            for index in self._get_quads(item.local_bound()):
                nodes.extend(self.children[index].query(item))
        return nodes

    def clear(self) -> None:
        for child in self.children:
            child.clear()
        self.items.clear()
        self.children.clear()

    def iter_nodes(self) -> Iterator[QNode]:
        """Yield this node and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def draw_bounds(self, vertices: list) -> None:
        """Append this node's outline and those of its descendants as line vertices."""
        left, top = self.bounds.left, self.bounds.top
        right, bottom = self.bounds.right, self.bounds.bottom
        corners = [Vec2(left, top), Vec2(right, top), Vec2(right, bottom), Vec2(left, bottom)]
        for start, end in zip(corners, corners[1:] + corners[:1]):
            vertices.append(Vertex(start, Color.WHITE))
            vertices.append(Vertex(end, Color.WHITE))
        for child in self.children:
            child.draw_bounds(vertices)

    def is_split(self) -> bool:
        return bool(self.children)

    def _get_quads(self, bounds: Rect) -> list[QNodeIndex]:
        center = self.bounds.center()
        quads = []
        if bounds.left < center.x and bounds.top < center.y:
            quads.append(QNodeIndex.UPPERLEFT)
        if bounds.right > center.x and bounds.top < center.y:
            quads.append(QNodeIndex.UPPERRIGHT)
        if bounds.left < center.x and bounds.bottom > center.y:
            quads.append(QNodeIndex.LOWERLEFT)
        if bounds.right > center.x and bounds.bottom > center.y:
            quads.append(QNodeIndex.LOWERRIGHT)
        return quads

    def _split(self) -> bool:
        if self.is_split() or self.depth >= self.tree.max_depth:
            return False
        half = self.bounds.size * 0.5
        origin = self.bounds.position
        offsets = [Vec2(0.0, 0.0), Vec2(half.x, 0.0), Vec2(0.0, half.y), Vec2(half.x, half.y)]
        self.children = [
            QNode(self.tree, self, Rect(origin + offset, half), self.depth + 1)
            for offset in offsets
        ]
        return True


class Quadtree:
    """A quadtree over a rectangle anchored at the origin."""

    def __init__(self, size: Vec2, max_depth: int = 5) -> None:
        self.max_depth = max_depth
        self.root = QNode(self, None, Rect(Vec2(0.0, 0.0), size), 0)

    def insert(self, item: Actor | None) -> None:
        if item is not None:
            self.root.insert(item)

    def remove(self, item: Actor | None) -> None:
        """Drop the item from whichever node holds it."""
        if item is None:
            return
        for node in self.root.iter_nodes():
            for index, held in enumerate(node.items):
                if held is item:
                    del node.items[index]
                    return

    def query(self, item: Actor) -> list[Actor]:
        """Return stored actors whose bounds overlap the item's bounds."""
        bound = item.local_bound()
        return [
            other
            for node in self.root.query(item)
            for other in node.items
            if detection.aabb(bound, other.local_bound())
        ]

    def clear(self) -> None:
        self.root.clear()

    def all_nodes(self) -> dict[int, list[QNode]]:
        """Group every node by its depth."""
        grouped: dict[int, list[QNode]] = {}
        for node in self.root.iter_nodes():
            grouped.setdefault(node.depth, []).append(node)
        return grouped

    def draw_bounds(self, vertices: list) -> None:
        self.root.draw_bounds(vertices)


class QuadtreeManager(CollisionSystem):
    """Keeps the actor list and rebuilds a window-sized quadtree from it."""

    def __init__(self) -> None:
        self.total_area = Vec2(float(WINDOW_WIDTH), float(WINDOW_HEIGHT))
        self.tree: Quadtree | None = None
        self.actors: list[Actor] = []

    def init(self) -> None:
        if self.tree is None:
            self.tree = Quadtree(self.total_area, _MANAGER_MAX_DEPTH)
        else:
            self.tree.clear()

    def destroy(self) -> None:
        if self.tree is not None:
            self.tree.clear()
        self.actors.clear()

    def insert(self, actor: Actor | None) -> None:
        if actor is not None:
            self.actors.append(actor)

    def remove(self, actor: Actor | None) -> None:
        """Remove the first occurrence by moving the last actor into its slot."""
        if actor is None:
            return
        for index, candidate in enumerate(self.actors):
            if candidate is actor:
                self.actors[index] = self.actors[-1]
                self.actors.pop()
                break

    def build(self) -> None:
        if self.tree is None:
            return
        self.tree.clear()
        for actor in self.actors:
            self.tree.insert(actor)

    def search(self, attack: Attack) -> list[Actor]:
        overlap: list[Actor] = []
        if self.tree is None:
            return overlap
        for other in self.tree.query(attack):
            if USE_SAT:
                hit = sat.check_collision(attack.shape, other.shape).colliding
            else:
                hit = detection.check_collision(attack, other)
            if hit:
                overlap.append(other)
                other.enter_overlap()
        return overlap

    def all_search(self) -> list[Actor]:
        if self.tree is None:
            return []
        overlap: list[Actor] = []
        for actor in self.actors:
            for other in self.tree.query(actor):
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
        if self.tree is None:
            return
        self.tree.draw_bounds(vertices)
        for depth, nodes in self.tree.all_nodes().items():
            for node in nodes:
                logger.debug("ID : %s ITEM : %s", depth, len(node.items))