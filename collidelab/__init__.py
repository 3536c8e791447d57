"""Interactive 2D collision-detection sandbox with array, k-d tree and quadtree search."""

__version__ = "0.1.0"

__all__ = [
    "actor",
    "app",
    "array_system",
    "arrow",
    "collision_system",
    "detection",
    "geometry",
    "kdtree",
    "parry",
    "quadtree",
    "sat",
    "task_timer",
    "widget",
]