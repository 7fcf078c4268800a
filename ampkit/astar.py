"""A* shortest-path search over weighted graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

from ampkit.graph import Graph

Heuristic = Callable[[int], float]


def zero_heuristic(node: int) -> float:
    """The trivial heuristic, which turns A* into Dijkstra's algorithm.

    Raises ``ValueError`` for a negative node index.
    """
    if node < 0:
        raise ValueError(f"node index must be non-negative, got {node}")
    return 0.0


@dataclass
class ShortestPathProblem:
    """A graph whose edges are costs, with the nodes to travel between."""

    graph: Graph
    init_node: int
    goal_node: int


@dataclass
class SearchResult:
    """Outcome of a graph search: the node sequence found and its cost."""

    success: bool = False
    node_path: list[int] = field(default_factory=list)
    path_cost: float = math.inf


class AStar:
    """A* search with an open list scanned for the lowest f-score."""

    def search(
        self, problem: ShortestPathProblem, heuristic: Heuristic = zero_heuristic
    ) -> SearchResult:
        """Find a cheapest path from ``init_node`` to ``goal_node``."""
        graph = problem.graph
        init, goal = problem.init_node, problem.goal_node

        g_score: dict[int, float] = {init: 0.0}
        f_score: dict[int, float] = {init: heuristic(init)}
        came_from: dict[int, int] = {}
        open_set: list[int] = [init]

        while open_set:
            # Ties go to the node that entered the open list first.
            current = min(open_set, key=lambda n: f_score.get(n, math.inf))
            if current == goal:
                path = [goal]
                while path[-1] != init:
                    path.append(came_from[path[-1]])
                path.reverse()
                return SearchResult(True, path, g_score[goal])

            open_set.remove(current)
            if current >= len(graph):
                continue
            for child, cost in zip(graph.children(current), graph.outgoing_edges(current)):
                tentative = g_score[current] + cost
                if tentative < g_score.get(child, math.inf):
                    came_from[child] = current
                    g_score[child] = tentative
                    f_score[child] = tentative + heuristic(child)
                    if child not in open_set:
                        open_set.append(child)

        return SearchResult(success=False)