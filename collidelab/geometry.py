"""Small 2D geometry primitives: vectors, rectangles, colours, vertices and shapes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 1000
FRAME = 60
USE_SAT = False


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Return the unit vector in this direction; a zero vector has none."""
        size = self.length()
        if size == 0:
            raise ValueError("cannot normalize a zero vector")
        return self / size

    def perpendicular(self) -> Vec2:
        """Return this vector rotated by +90 degrees."""
        return Vec2(-self.y, self.x)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    position: Vec2 = Vec2()
    size: Vec2 = Vec2()

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def right(self) -> float:
        return self.position.x + self.size.x

    @property
    def bottom(self) -> float:
        return self.position.y + self.size.y

    def center(self) -> Vec2:
        return self.position + self.size / 2.0


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.MAGENTA = Color(255, 0, 255)
Color.CYAN = Color(0, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class Vertex:
    """A coloured point, the unit of line batches handed to the renderer."""

    position: Vec2 = Vec2()
    color: Color = Color.WHITE


class Shape(ABC):
    """A polygon placed in the world by a position and a local origin."""

    def __init__(self) -> None:
        self.position = Vec2()
        self.origin = Vec2()
        self.fill_color = Color.WHITE
        self.outline_color = Color.WHITE
        self.outline_thickness = 0.0

    @property
    @abstractmethod
    def point_count(self) -> int:
        """Number of polygon points."""

    @abstractmethod
    def point(self, index: int) -> Vec2:
        """Return a point in local coordinates."""

    def points(self) -> list[Vec2]:
        return [self.point(index) for index in range(self.point_count)]

    def geometric_center(self) -> Vec2:
        """Return the area centroid of the polygon in local coordinates."""
        pts = self.points()
        if not pts:
            raise ValueError("shape has no points")
        if len(pts) == 1:
            return pts[0]
        if len(pts) == 2:
            return (pts[0] + pts[1]) / 2.0

        twice_area = 0.0
        centroid = Vec2()
        for previous, current in zip(pts[-1:] + pts[:-1], pts):
            product = previous.cross(current)
            twice_area += product
            centroid = centroid + (current + previous) * product
        if twice_area != 0.0:
            return centroid / 3.0 / twice_area

        low = Vec2(min(p.x for p in pts), min(p.y for p in pts))
        high = Vec2(max(p.x for p in pts), max(p.y for p in pts))
        return (low + high) / 2.0

    def local_bounds(self) -> Rect:
        pts = self.points()
        if not pts:
            return Rect()
        low = Vec2(min(p.x for p in pts), min(p.y for p in pts))
        high = Vec2(max(p.x for p in pts), max(p.y for p in pts))
        return Rect(low, high - low)

    def global_bounds(self) -> Rect:
        """Return the bounding box in world coordinates."""
        local = self.local_bounds()
        return Rect(local.position + self.position - self.origin, local.size)


class CircleShape(Shape):
    """A circle approximated by a regular polygon."""

    def __init__(self, radius: float = 0.0, point_count: int = 30) -> None:
        super().__init__()
        self.radius = radius
        self._point_count = point_count

    @property
    def point_count(self) -> int:
        return self._point_count

    def point(self, index: int) -> Vec2:
        angle = index * 2.0 * math.pi / self._point_count - math.pi / 2.0
        return Vec2(
            self.radius + math.cos(angle) * self.radius,
            self.radius + math.sin(angle) * self.radius,
        )

    def geometric_center(self) -> Vec2:
        return Vec2(self.radius, self.radius)


class RectangleShape(Shape):
    """An axis-aligned rectangle with its local corner at (0, 0)."""

    def __init__(self, size: Vec2 = Vec2()) -> None:
        super().__init__()
        self.size = size

    @property
    def point_count(self) -> int:
        return 4

    def point(self, index: int) -> Vec2:
        if index == 1:
            return Vec2(self.size.x, 0.0)
        if index == 2:
            return Vec2(self.size.x, self.size.y)
        if index == 3:
            return Vec2(0.0, self.size.y)
        return Vec2()

    def geometric_center(self) -> Vec2:
        return self.size / 2.0


class ConvexShape(Shape):
    """A polygon with freely set points."""

    def __init__(self, point_count: int = 0) -> None:
        super().__init__()
        self._points = [Vec2()] * point_count

    @property
    def point_count(self) -> int:
        return len(self._points)

    def set_point_count(self, count: int) -> None:
        if count < len(self._points):
            del self._points[count:]
        else:
            self._points.extend([Vec2()] * (count - len(self._points)))

    def set_point(self, index: int, point: Vec2) -> None:
        self._points[index] = point

    def point(self, index: int) -> Vec2:
        if not 0 <= index < len(self._points):
            raise IndexError(f"point index {index} out of range")
        return self._points[index]