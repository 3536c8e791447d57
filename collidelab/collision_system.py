"""The interface every broad-phase collision system provides."""

from __future__ import annotations

from abc import ABC, abstractmethod

from collidelab.actor import Actor, Attack


class CollisionSystem(ABC):
    """Holds actors and answers which of them overlap an attack or each other."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the system for use."""

    @abstractmethod
    def destroy(self) -> None:
        """Drop every actor and any built structure."""

    @abstractmethod
    def insert(self, actor: Actor) -> None:
        """Start tracking an actor."""

    @abstractmethod
    def remove(self, actor: Actor) -> None:
        """Stop tracking an actor."""

    @abstractmethod
    def build(self) -> None:
        """Rebuild the search structure from current actor positions."""

    @abstractmethod
    def search(self, attack: Attack) -> list[Actor]:
        """Return actors hit by the attack, marking them as overlapping."""

    @abstractmethod
    def all_search(self) -> list[Actor]:
        """Find actors that overlap other actors, marking them as overlapping."""

    @abstractmethod
    def draw(self, vertices: list) -> None:
        """Append debug line vertices describing the structure."""