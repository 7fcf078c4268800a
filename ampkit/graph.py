"""Directed graphs over integer nodes with per-edge payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

_ANY_EDGE = object()


@dataclass
class AdjacencyList:
    """Parallel lists of neighbour nodes and the edges leading to them."""

    nodes: list[int] = field(default_factory=list)
    edges: list[Any] = field(default_factory=list)

    def connect(self, dst_node: int, edge: Any) -> int:
        """Add a connection and return the new number of connections."""
        self.nodes.append(dst_node)
        self.edges.append(edge)
        return len(self.nodes)

    def disconnect(self, dst_node: int, edge: Any = _ANY_EDGE) -> int:
        """Remove connections to ``dst_node`` (optionally only with ``edge``)."""
        if edge is _ANY_EDGE:
            return self.disconnect_if(lambda n, e: n == dst_node)
        return self.disconnect_if(lambda n, e: n == dst_node and e == edge)

    def disconnect_if(self, predicate: Callable[[int, Any], bool]) -> int:
        """Remove every connection for which ``predicate(node, edge)`` holds."""
        kept = [(n, e) for n, e in zip(self.nodes, self.edges) if not predicate(n, e)]
        removed = len(self.nodes) - len(kept)
        self.nodes = [n for n, _ in kept]
        self.edges = [e for _, e in kept]
        return removed

    def __len__(self) -> int:
        return len(self.edges)


@dataclass
class _Connections:
    forward: AdjacencyList = field(default_factory=AdjacencyList)
    backward: AdjacencyList = field(default_factory=AdjacencyList)


class Graph:
    """A directed multigraph; reversible graphs also track incoming edges."""

    def __init__(self, reversible: bool = True) -> None:
        self._reversible = reversible
        self._graph: list[_Connections] = []

    @property
    def reversible(self) -> bool:
        return self._reversible

    def __len__(self) -> int:
        return len(self._graph)

    def _require_reversible(self) -> None:
        if not self._reversible:
            raise ValueError("Graph must be reversible")

    def nodes(self) -> list[int]:
        """Nodes that have at least one recorded connection."""
        return [
            n
            for n, conn in enumerate(self._graph)
            if len(conn.forward) or len(conn.backward)
        ]

    def connect(self, src: int, dst: int, edge: Any) -> None:
        if src < 0 or dst < 0:
            raise ValueError("node indices must be non-negative")
        needed = max(src, dst) + 1
        if needed > len(self._graph):
            self._graph.extend(_Connections() for _ in range(needed - len(self._graph)))
        self._graph[src].forward.connect(dst, edge)
        if self._reversible:
            self._graph[dst].backward.connect(src, edge)

    def _slot(self, node: int) -> _Connections:
        if not 0 <= node < len(self._graph):
            raise IndexError(f"node {node} is not in the graph")
        return self._graph[node]

    def outgoing_edges(self, node: int) -> list[Any]:
        return list(self._slot(node).forward.edges)

    def children(self, node: int) -> list[int]:
        return list(self._slot(node).forward.nodes)

    def incoming_edges(self, node: int) -> list[Any]:
        self._require_reversible()
        return list(self._slot(node).backward.edges)

    def parents(self, node: int) -> list[int]:
        self._require_reversible()
        return list(self._slot(node).backward.nodes)

    def disconnect(self, src: int, dst: int, edge: Any = _ANY_EDGE) -> bool:
        """Remove ``src -> dst`` connections; return whether any existed."""
        if not (0 <= src < len(self._graph) and 0 <= dst < len(self._graph)):
            raise ValueError("Disconnection nodes not found")
        if not self._graph[src].forward.disconnect(dst, edge):
            return False
        if self._reversible:
            if not self._graph[dst].backward.disconnect(src, edge):
                raise RuntimeError("Disconnection found in forward, but not backward")
        return True

    def reverse(self) -> None:
        """Flip the direction of every edge."""
        self._require_reversible()
        for conn in self._graph:
            conn.forward, conn.backward = conn.backward, conn.forward

    def format(self, heading: str = "") -> str:
        """A human-readable listing of every outgoing connection."""
        lines = []
        if heading:
            lines.append(f"{heading}:")
        for node, conn in enumerate(self._graph):
            for i, (child, edge) in enumerate(zip(conn.forward.nodes, conn.forward.edges)):
                if i == 0:
                    lines.append(f"Node {node} is connected to:")
                lines.append(f"    - child node {child} with edge: {edge}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

    def clear(self) -> None:
        self._graph.clear()