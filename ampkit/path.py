"""Waypoint paths and unwrapping of paths through periodic dimensions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Sequence

logger = logging.getLogger(__name__)

Point = tuple[float, ...]


@dataclass
class Path:
    """An ordered sequence of waypoints."""

    waypoints: list[Point] = field(default_factory=list)
    valid: bool = True

    def length(self) -> float:
        """Sum of the straight-line distances between consecutive waypoints."""
        return sum(math.dist(a, b) for a, b in zip(self.waypoints, self.waypoints[1:]))


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def unwrap_waypoints(
    waypoints: Sequence[Sequence[float]],
    lower: Sequence[float],
    upper: Sequence[float],
) -> list[Point]:
    """Shift each waypoint by whole periods so it lies nearest its predecessor."""
    if not waypoints:
        return []
    scale = [hi - lo for lo, hi in zip(lower, upper)]
    result: list[Point] = [tuple(waypoints[0])]
    for dst in waypoints[1:]:
        src = result[-1]
        unwrapped = []
        for dim, (s, d, lo, hi, period) in enumerate(zip(src, dst, lower, upper, scale)):
            if d < lo or d > hi:
                logger.warning(
                    "Value: %s is outside the bounds [%s, %s] for dimension %d",
                    d, lo, hi, dim,
                )
            n = _round_half_away((s - d) / period)
            unwrapped.append(d + n * period)
        result.append(tuple(unwrapped))
    return result


def unwrap_path(path: Path, lower: Sequence[float], upper: Sequence[float]) -> Path:
    """A copy of ``path`` with its waypoints unwrapped."""
    return replace(path, waypoints=unwrap_waypoints(path.waypoints, lower, upper))