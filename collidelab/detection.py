"""Shape-aware overlap tests between actors."""

from __future__ import annotations

from collidelab.actor import Actor, BoxActor, ShapeType
from collidelab.geometry import Rect


def aabb(a: Rect, b: Rect) -> bool:
    """Return whether two rectangles overlap; touching edges do not count."""
    return not (
        a.right <= b.left
        or b.right <= a.left
        or a.bottom <= b.top
        or b.bottom <= a.top
    )


def _circle_hits_box(circle: Actor, box: BoxActor) -> bool:
    radius = circle.local_radius()
    low = box.point(0)
    high = box.point(2)
    center = circle.location
    closest_x = min(max(center.x, low.x), high.x)
    closest_y = min(max(center.y, low.y), high.y)
    dx = center.x - closest_x
    dy = center.y - closest_y
    return dx * dx + dy * dy <= radius * radius


def check_collision(a: Actor, b: Actor) -> bool:
    """Return whether two actors overlap, using the test suited to their shapes."""
    if a.shape_type is ShapeType.BOX and b.shape_type is ShapeType.BOX:
        return aabb(a.local_bound(), b.local_bound())
    if a.shape_type is ShapeType.CIRCLE and b.shape_type is ShapeType.CIRCLE:
        dx = b.location.x - a.location.x
        dy = b.location.y - a.location.y
        return dx * dx + dy * dy <= (a.local_radius() + b.local_radius()) ** 2
    if a.shape_type is ShapeType.CIRCLE and b.shape_type is ShapeType.BOX:
        return _circle_hits_box(a, b)
    if a.shape_type is ShapeType.BOX and b.shape_type is ShapeType.CIRCLE:
        return _circle_hits_box(b, a)
    return False