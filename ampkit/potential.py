"""Attractive/repulsive potential fields and a gradient-descent planner."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from ampkit.geometry import Obstacle, Problem, closest_point_on_segment, distance
from ampkit.path import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Force:
    """A gradient vector together with the potential's value."""

    x: float
    y: float
    magnitude: float


def repulsive_forces(
    point: Sequence[float], obstacles: Iterable[Obstacle], nu: float, q_star: float
) -> list[Force]:
    """One repulsive gradient for each obstacle closer than ``q_star``."""
    forces = []
    for obstacle in obstacles:
        min_dist = q_star + 0.5
        closest = (0.0, 0.0)
        for start, end in obstacle.edges():
            candidate, dist = closest_point_on_segment(start, end, point)
            if dist < min_dist:
                min_dist, closest = dist, candidate
        if min_dist <= q_star:
            scale = nu * (1 / q_star - 1 / min_dist) / min_dist**2
            forces.append(
                Force(
                    scale * (point[0] - closest[0]),
                    scale * (point[1] - closest[1]),
                    0.5 * nu * (1 / min_dist - 1 / q_star) ** 2,
                )
            )
    return forces


def attractive_force(
    goal: Sequence[float], point: Sequence[float], weight: float, d_star: float
) -> Force:
    """Quadratic attraction near the goal, conic attraction beyond ``d_star``."""
    dx, dy = point[0] - goal[0], point[1] - goal[1]
    dist = math.hypot(dx, dy)
    if dist <= d_star:
        return Force(weight * dx, weight * dy, 0.5 * weight * dist**2)
    return Force(
        d_star * weight * dx / dist,
        d_star * weight * dy / dist,
        d_star * weight * dist - 0.5 * weight * d_star**2,
    )


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


@dataclass
class GradientDescentPlanner:
    """Follows the negative gradient of the combined potential toward the goal."""

    epsilon: float = 0.25
    att_force_weight: float = 1.1
    d_star: float = 1.0
    nu: float = 1.2
    q_star: float = 0.198
    iter_max: int = 10000
    alpha: float = 0.054

    def plan(self, problem: Problem) -> Path:
        """A path from ``q_init`` that descends the potential, ending at ``q_goal``."""
        current = tuple(problem.q_init)
        waypoints = [current]
        goal = problem.q_goal
        dist_to_goal = distance(current, goal)
        gradient = 100.0
        iterations = 0

        while (dist_to_goal > self.d_star or gradient > self.epsilon) and iterations < self.iter_max:
            rep = repulsive_forces(current, problem.obstacles, self.nu, self.q_star)
            att = attractive_force(goal, current, self.att_force_weight, self.d_star)
            x_rep = sum(f.x for f in rep)
            y_rep = sum(f.y for f in rep)

            # Escape a local minimum where repulsion cancels attraction along x.
            if (
                _round_half_away(x_rep * 10) / 10 == _round_half_away(-att.x * 10) / 10
                and math.trunc(y_rep) == 0
                and math.trunc(att.y) == 0
            ):
                wide = repulsive_forces(current, problem.obstacles, self.nu, 1000)
                y_rep += sum(f.y for f in wide)
                y_rep = 10.0 if y_rep > 0 else -20.0
                x_rep = 0.0

            logger.debug(
                "repulsion (%s, %s), attraction (%s, %s)", x_rep, y_rep, att.x, att.y
            )
            gx, gy = x_rep + att.x, y_rep + att.y
            current = (current[0] - self.alpha * gx, current[1] - self.alpha * gy)
            waypoints.append(current)
            iterations += 1
            gradient = math.hypot(gx, gy)
            dist_to_goal = distance(current, goal)

        logger.debug("gradient descent took %d iterations", iterations)
        waypoints.append(tuple(goal))
        return Path(waypoints)