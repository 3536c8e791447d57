"""On-screen statistics labels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from collidelab.geometry import WINDOW_WIDTH, Color, Vec2


class WidgetType(IntEnum):
    EVENT = 0
    TICK = 1
    DRAW = 2
    OBJECT_COUNT = 3
    BUILD_TIME = 4
    SEARCH_TIME = 5


@dataclass
class Label:
    """A line of text placed on screen."""

    text: str
    position: Vec2
    size: int = 20
    color: Color = Color.WHITE


class Widget:
    """Holds the timing and object-count labels shown over the scene."""

    def __init__(self) -> None:
        right = float(WINDOW_WIDTH - 180)
        self.labels = [
            Label("Event Time", Vec2(right, 10.0)),
            Label("Tick Time", Vec2(right, 30.0)),
            Label("Draw Time", Vec2(right, 50.0)),
            Label("Object", Vec2(10.0, 10.0)),
            Label("Build Time", Vec2(10.0, 30.0)),
            Label("Search Time", Vec2(10.0, 50.0)),
        ]
        self.elapsed = 0.0

    def text(self, kind: WidgetType) -> str:
        return self.labels[kind].text

    def tick(self, delta_time: float) -> None:
        """Advance the widget clock."""
        self.elapsed += delta_time

    def _set_time(self, kind: WidgetType, caption: str, time: float) -> None:
        self.labels[kind].text = f"{caption}: {time:.2f}ms"

    def update_event_time(self, time: float) -> None:
        self._set_time(WidgetType.EVENT, "Event Time", time)

    def update_tick_time(self, time: float) -> None:
        self._set_time(WidgetType.TICK, "Tick Time", time)

    def update_draw_time(self, time: float) -> None:
        self._set_time(WidgetType.DRAW, "Draw Time", time)

    def update_object_count(self, count: float) -> None:
        self.labels[WidgetType.OBJECT_COUNT].text = f"Object Count: {float(count):.2f}"

    def update_build_time(self, time: float) -> None:
        self._set_time(WidgetType.BUILD_TIME, "Build Time", time)

    def update_search_time(self, time: float) -> None:
        self._set_time(WidgetType.SEARCH_TIME, "Search Time", time)