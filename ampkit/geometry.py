"""Planar obstacles, workspace problems and the point/segment geometry used by planners."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

Point2D = tuple[float, float]


def distance(p: Sequence[float], q: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.dist(p, q)


@dataclass(frozen=True)
class Obstacle:
    """A polygonal obstacle given by its vertices in counter-clockwise order."""

    vertices: tuple[Point2D, ...]

    def __init__(self, vertices: Iterable[Sequence[float]]) -> None:
        points = tuple((float(x), float(y)) for x, y in vertices)
        if not points:
            raise ValueError("an obstacle needs at least one vertex")
        object.__setattr__(self, "vertices", points)

    def edges(self) -> Iterator[tuple[Point2D, Point2D]]:
        """Consecutive vertex pairs, including the edge closing the polygon."""
        verts = self.vertices
        for k, start in enumerate(verts):
            yield start, verts[(k + 1) % len(verts)]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """``(min_x, max_x, min_y, max_y)`` of the vertices."""
        xs = [x for x, _ in self.vertices]
        ys = [y for _, y in self.vertices]
        return min(xs), max(xs), min(ys), max(ys)


@dataclass
class Problem:
    """A 2-D workspace with obstacles, a start, a goal and rectangular bounds."""

    q_init: Point2D
    q_goal: Point2D
    obstacles: list[Obstacle] = field(default_factory=list)
    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0


def closest_point_on_segment(
    vert_1: Sequence[float], vert_2: Sequence[float], point: Sequence[float]
) -> tuple[Point2D, float]:
    """The point of segment ``vert_1``-``vert_2`` nearest to ``point`` and its distance."""
    dx, dy = vert_2[0] - vert_1[0], vert_2[1] - vert_1[1]
    px, py = point[0] - vert_1[0], point[1] - vert_1[1]
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        closest = (float(vert_1[0]), float(vert_1[1]))
    else:
        t = (dx * px + dy * py) / length_sq
        if t >= 1:
            closest = (float(vert_2[0]), float(vert_2[1]))
        elif t <= 0:
            closest = (float(vert_1[0]), float(vert_1[1]))
        else:
            closest = (vert_1[0] + dx * t, vert_1[1] + dy * t)
    return closest, distance(point[:2], closest)


def point_in_obstacle(obstacle: Obstacle, x: float, y: float) -> bool:
    """Whether ``(x, y)`` lies inside or on the boundary of a convex obstacle."""
    min_x, max_x, min_y, max_y = obstacle.bounding_box()
    if not (min_x <= x <= max_x and min_y <= y <= max_y):
        return False
    cw = ccw = 0
    for (x1, y1), (x2, y2) in obstacle.edges():
        cross = (x - x1) * (y2 - y1) - (y - y1) * (x2 - x1)
        if cross > 0:
            ccw += 1
        elif cross < 0:
            cw += 1
        elif min(x1, x2) <= x <= max(x1, x2) and min(y1, y2) <= y <= max(y1, y2):
            return True
    return not (ccw > 0 and cw > 0)


def point_collides(obstacles: Iterable[Obstacle], x: float, y: float) -> bool:
    """Whether ``(x, y)`` lies in any of the obstacles."""
    return any(point_in_obstacle(obstacle, x, y) for obstacle in obstacles)