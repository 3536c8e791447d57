"""A 90-degree parry sector that judges incoming arrows."""

from __future__ import annotations

import logging
import math

from collidelab.arrow import Arrow
from collidelab.geometry import Color, ConvexShape, Vec2

PI = 3.14159265359
_HALF_ARC = 45.0
_ARC_POINTS = 30

logger = logging.getLogger(__name__)


def deg_to_rad(degrees: float) -> float:
    return degrees * PI / 180.0


def forward_vector(rotation_degrees: float) -> Vec2:
    """Return the unit vector pointing along the given rotation."""
    radians = rotation_degrees * (PI / 180.0)
    return Vec2(math.cos(radians), math.sin(radians)).normalized()


class ParryShape(ConvexShape):
    """A circular sector spanning 45 degrees either side of its facing angle."""

    def __init__(self, location: Vec2, radius: float, angle: float) -> None:
        super().__init__(_ARC_POINTS + 2)
        self.location = location
        self.radius = radius
        self.angle = angle

        start_angle = angle - _HALF_ARC
        end_angle = angle + _HALF_ARC
        step = (end_angle - start_angle) / _ARC_POINTS
        self.set_point(0, Vec2())
        for i in range(_ARC_POINTS + 1):
            theta = deg_to_rad(start_angle + i * step)
            self.set_point(i + 1, Vec2(radius * math.cos(theta), radius * math.sin(theta)))

        self.position = location
        self.fill_color = Color(231, 76, 60, 100)
        self.outline_color = Color(192, 57, 43, 255)
        self.outline_thickness = -2.0


class Parry:
    """Decides whether an arrow is deflected by a parry sector."""

    def __init__(self, location: Vec2, radius: float, angle: float) -> None:
        self.shape = ParryShape(location, radius, angle)

    def try_parry(self, arrow: Arrow) -> bool:
        """Colour the arrow red if it is parried, green otherwise; return whether it was."""
        arrow.set_color(Color.GREEN)
        if not self.in_parry(arrow):
            return False

        facing = forward_vector(self.shape.angle)
        incoming = arrow.forward()
        dot = max(-1.0, min(1.0, facing.dot(incoming)))
        angle_degrees = math.acos(dot) * 180.0 / PI
        threshold = 180.0 - _HALF_ARC
        logger.debug("%s >= %s", angle_degrees, threshold)

        parried = angle_degrees >= threshold
        arrow.set_color(Color.RED if parried else Color.GREEN)
        return parried

    def in_parry(self, arrow: Arrow) -> bool:
        """Return whether the arrow's tip lies inside the sector."""
        dx = arrow.end_point.x - self.shape.location.x
        dy = arrow.end_point.y - self.shape.location.y
        if math.sqrt(dx * dx + dy * dy) > self.shape.radius:
            return False

        angle_degrees = math.atan2(dy, dx) * 180.0 / PI
        if angle_degrees < 0:
            angle_degrees += 360.0

        start = self.shape.angle - _HALF_ARC
        end = self.shape.angle + _HALF_ARC
        if start > end:
            return angle_degrees >= start or angle_degrees <= end
        return start <= angle_degrees <= end