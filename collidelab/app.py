"""The interactive collision-detection sandbox and its command-line entry point."""

from __future__ import annotations

import argparse
import logging
import math
import random
from collections import deque
from enum import Enum

from collidelab.actor import Actor, Attack, BoxActor, CircleActor
from collidelab.array_system import ArraySystem
from collidelab.collision_system import CollisionSystem
from collidelab.geometry import FRAME, WINDOW_HEIGHT, WINDOW_WIDTH, Color, Vec2
from collidelab.kdtree import KDTree
from collidelab.quadtree import QuadtreeManager
from collidelab.task_timer import TaskTimer
from collidelab.widget import Widget

logger = logging.getLogger(__name__)

FONT_PATH = "DNFBitBitTTF.ttf"
_FONT_SIZE = 20
_TIMING_WINDOW = 100
_CIRCLE_RADIUS = 1.0
_BOX_SIZE = 2.0
_ATTACK_SIZE = 100.0
_ATTACK_STEP = 10.0
_OUTLINE_WIDTH = 2


class SearchType(Enum):
    """Which broad-phase structure finds candidate collisions."""

    ARRAY = "array"
    KD_TREE = "kd-tree"
    QUAD_TREE = "quad-tree"


class ThreadMode(Enum):
    """How work is spread over threads."""

    SINGLE = "single"
    MULTI = "multi"
    MIXED = "mixed"


def _make_system(search_type: SearchType) -> CollisionSystem:
    if search_type is SearchType.ARRAY:
        return ArraySystem()
    if search_type is SearchType.KD_TREE:
        return KDTree()
    if search_type is SearchType.QUAD_TREE:
        return QuadtreeManager()
    raise ValueError(f"unknown search type: {search_type!r}")


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (color.r, color.g, color.b, color.a)


class CollisionConfig:
    """Owns the actors, the attack, the collision system and the main loop."""

    def __init__(
        self,
        max_object: int,
        search_type: SearchType,
        thread_mode: ThreadMode,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.is_debug = False
        self.max_object = max_object
        self.cur_object = 0
        self.spawn_count = max_object // 100
        self.search_type = search_type
        self.thread_mode = thread_mode
        self.actors: list[Actor] = []
        self._rng = rng if rng is not None else random.Random()
        self.attack = Attack(self, _ATTACK_SIZE, Vec2(), rng=self._rng)
        self.task_timer = TaskTimer()
        self.widget = Widget()
        self.collision_system = _make_system(search_type)
        self.collision_system.init()
        self._build_times: deque[float] = deque([0.0] * _TIMING_WINDOW, maxlen=_TIMING_WINDOW)
        self._search_times: deque[float] = deque([0.0] * _TIMING_WINDOW, maxlen=_TIMING_WINDOW)
        self._window = None
        self._running = False

    def window_size(self) -> Vec2:
        return Vec2(float(WINDOW_WIDTH), float(WINDOW_HEIGHT))

    def spawn_actor(self, count: int) -> None:
        """Add half the count as circles and half as boxes, unless that passes the maximum."""
        if count + self.cur_object > self.max_object:
            return
        per_kind = math.ceil(count / 2.0)
        for factory, size in ((CircleActor, _CIRCLE_RADIUS), (BoxActor, _BOX_SIZE)):
            for _ in range(per_kind):
                location = Vec2(
                    float(self._rng.randint(0, WINDOW_WIDTH)),
                    float(self._rng.randint(0, WINDOW_HEIGHT)),
                )
                actor = factory(self.cur_object, self, size, location, rng=self._rng)
                self.cur_object += 1
                self.actors.append(actor)
                self.collision_system.insert(actor)
        self.widget.update_object_count(self.cur_object)

    def destroy_actor(self, count: int) -> None:
        """Remove the oldest actors, unless fewer than the count exist."""
        if count > self.cur_object or count > len(self.actors):
            return
        for actor in self.actors[:count]:
            self.collision_system.remove(actor)
        del self.actors[:count]
        self.cur_object -= count
        self.widget.update_object_count(self.cur_object)

    def close(self) -> None:
        """Drop every actor, close the window and stop the loop."""
        for actor in self.actors:
            self.collision_system.remove(actor)
        self.actors.clear()
        self._running = False
        if self._window is not None:
            import pygame

            pygame.display.quit()
            pygame.quit()
            self._window = None

    def run(self) -> None:
        """Open the window and run frames until it is closed."""
        import pygame

        pygame.init()
        self._window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("CollisionDetection")
        font = self._load_font(pygame)
        clock = pygame.time.Clock()
        self._running = True

        while self._running:
            delta_time = clock.tick(FRAME) / 1000.0

            self.widget.update_event_time(
                self.task_timer.measure_task(lambda: self._handle_events(pygame))
            )
            if not self._running:
                break

            self.widget.update_tick_time(
                self.task_timer.measure_task(lambda: self._tick(delta_time))
            )

            self._build_times.append(self.task_timer.measure_task(self.collision_system.build))
            self.widget.update_build_time(sum(self._build_times) / _TIMING_WINDOW)

            attacking = pygame.mouse.get_pressed()[0]
            self._search_times.append(
                self.task_timer.measure_task(lambda: self._search(attacking))
            )
            self.widget.update_search_time(sum(self._search_times) / _TIMING_WINDOW)

            self.widget.update_draw_time(
                self.task_timer.measure_task(lambda: self._draw(pygame, font))
            )

    def _load_font(self, pygame):
        try:
            return pygame.font.Font(FONT_PATH, _FONT_SIZE)
        except (FileNotFoundError, OSError):
            logger.error("cannot load font %s", FONT_PATH)
            return pygame.font.Font(None, _FONT_SIZE)

    def _handle_events(self, pygame) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or pygame.key.get_pressed()[pygame.K_ESCAPE]:
                self.close()
                return
            if event.type == pygame.KEYUP:
                self._handle_key(pygame, event.key)
            if pygame.mouse.get_pressed()[0]:
                self.attack.set_attack_location(pygame.mouse.get_pos())

    def _handle_key(self, pygame, key: int) -> None:
        if key == pygame.K_1:
            self.spawn_actor(self.spawn_count)
        elif key == pygame.K_2:
            self.destroy_actor(self.spawn_count)
        elif key == pygame.K_3:
            self.is_debug = not self.is_debug
        elif key == pygame.K_q:
            self.attack.add_attack_range(_ATTACK_STEP)
        elif key == pygame.K_w:
            self.attack.add_attack_range(-_ATTACK_STEP)

    def _tick(self, delta_time: float) -> None:
        for actor in self.actors:
            actor.tick(delta_time)
        self.widget.tick(delta_time)

    def _search(self, attacking: bool) -> None:
        if attacking:
            self.collision_system.search(self.attack)

    def _draw(self, pygame, font) -> None:
        window = self._window
        window.fill(_rgba(Color.BLACK))

        if self.is_debug:
            debug: list = []
            self.collision_system.draw(debug)
            self.attack.attack_circumscriber(debug)
            self._draw_lines(pygame, debug)

        outlines: list = []
        for actor in self.actors:
            actor.vertex_render(outlines)
        self._draw_lines(pygame, outlines)

        bound = self.attack.local_bound()
        pygame.draw.rect(
            window,
            _rgba(self.attack.shape.outline_color),
            pygame.Rect(bound.left, bound.top, bound.size.x, bound.size.y),
            width=_OUTLINE_WIDTH,
        )

        for label in self.widget.labels:
            surface = font.render(label.text, True, _rgba(label.color))
            window.blit(surface, (label.position.x, label.position.y))

        pygame.display.flip()

    def _draw_lines(self, pygame, vertices: list) -> None:
        for start, end in zip(vertices[0::2], vertices[1::2]):
            pygame.draw.line(
                self._window,
                _rgba(start.color),
                (start.position.x, start.position.y),
                (end.position.x, end.position.y),
            )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive collision-detection sandbox.")
    parser.add_argument("--max-objects", type=int, default=100000)
    parser.add_argument(
        "--search",
        choices=[kind.value for kind in SearchType],
        default=SearchType.ARRAY.value,
    )
    parser.add_argument(
        "--threads",
        choices=[mode.value for mode in ThreadMode],
        default=ThreadMode.SINGLE.value,
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Start the sandbox and run it until the window closes."""
    args = _parse_args(argv)
    config = CollisionConfig(args.max_objects, SearchType(args.search), ThreadMode(args.threads))
    config.run()
    return 0