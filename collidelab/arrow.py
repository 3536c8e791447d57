"""A coloured line segment with a direction, used as an incoming attack."""

from __future__ import annotations

from collidelab.geometry import Color, Vec2, Vertex


class Arrow:
    """A segment from a start point to an end point."""

    def __init__(self) -> None:
        self.start_point = Vec2()
        self.end_point = Vec2()
        self.color = Color.GREEN

    def set_start_location(self, location) -> None:
        x, y = location
        self.start_point = Vec2(float(x), float(y))

    def set_end_location(self, location) -> None:
        x, y = location
        self.end_point = Vec2(float(x), float(y))

    def set_color(self, color: Color) -> None:
        self.color = color

    def render(self, vertices: list) -> None:
        """Append the segment's two vertices to a line batch."""
        vertices.append(Vertex(self.start_point, self.color))
        vertices.append(Vertex(self.end_point, self.color))

    def forward(self) -> Vec2:
        """Return the unit direction from start to end."""
        return (self.end_point - self.start_point).normalized()