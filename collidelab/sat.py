"""Separating-axis collision test between two shapes."""

from __future__ import annotations

from dataclasses import dataclass

from collidelab.geometry import Shape, Vec2

_FLOAT_MAX = 3.4028234663852886e38


@dataclass(frozen=True)
class Projection:
    """The interval a shape covers when projected onto an axis."""

    min: float
    max: float


@dataclass
class SATResult:
    """Outcome of a separating-axis test."""

    colliding: bool = True
    axis: Vec2 = Vec2()
    penetration_depth: float = _FLOAT_MAX


def _nonzero_points(shape: Shape) -> list[Vec2]:
    return [p for p in shape.points() if not (p.x == 0 and p.y == 0)]


def project_polygon(shape: Shape, axis: Vec2) -> Projection:
    """Project the shape's non-zero points, placed in the world, onto the axis."""
    offset = shape.position - shape.origin
    vertices = [offset + p for p in _nonzero_points(shape)]
    if not vertices:
        raise ValueError("shape has no non-zero points to project")
    values = [axis.dot(v) for v in vertices]
    return Projection(min(values), max(values))


def overlaps(proj_a: Projection, proj_b: Projection) -> bool:
    return not (proj_a.max < proj_b.min or proj_b.max < proj_a.min)


def get_overlap(proj_a: Projection, proj_b: Projection) -> float:
    return min(proj_a.max, proj_b.max) - max(proj_a.min, proj_b.min)


def check_collision(lhs: Shape, rhs: Shape) -> SATResult:
    """Test two shapes for overlap, reporting the axis of least penetration."""
    result = SATResult()
    axes = [p.perpendicular().normalized() for p in _nonzero_points(lhs)]
    axes += [p.perpendicular().normalized() for p in _nonzero_points(rhs)]

    for axis in axes:
        proj_a = project_polygon(lhs, axis)
        proj_b = project_polygon(rhs, axis)
        if not overlaps(proj_a, proj_b):
            result.colliding = False
            return result
        depth = get_overlap(proj_a, proj_b)
        if depth < result.penetration_depth:
            result.penetration_depth = depth
            result.axis = axis
    return result