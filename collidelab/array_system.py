"""Brute-force collision system that checks every actor."""

from __future__ import annotations

from collidelab import detection, sat
from collidelab.actor import Actor, Attack
from collidelab.collision_system import CollisionSystem
from collidelab.geometry import USE_SAT


class ArraySystem(CollisionSystem):
    """Keeps actors in a flat list and tests each one directly."""

    def __init__(self) -> None:
        self.actors: list[Actor] = []

    def init(self) -> None:
        """Nothing to prepare for a flat list."""

    def destroy(self) -> None:
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
        """A flat list needs no rebuilding."""

    def search(self, attack: Attack) -> list[Actor]:
        overlap: list[Actor] = []
        for actor in self.actors:
            if USE_SAT:
                if sat.check_collision(actor.shape, attack.shape).colliding:
                    actor.enter_overlap()
            elif detection.check_collision(actor, attack):
                overlap.append(actor)
                actor.enter_overlap()
        return overlap

    def all_search(self) -> list[Actor]:
        overlap: list[Actor] = []
        for i, actor in enumerate(self.actors):
            for other in self.actors[i + 1 :]:
                if actor is other:
                    continue
                if USE_SAT:
                    if sat.check_collision(actor.shape, other.shape).colliding:
                        actor.enter_overlap()
                        other.enter_overlap()
                elif detection.check_collision(actor, other):
                    overlap.append(actor)
                    actor.enter_overlap()
        return overlap

    def draw(self, vertices: list) -> None:
        """A flat list has no structure to draw."""