"""Motion planning toolkit: graphs, grid configuration spaces, A*, potential fields and wavefront planners."""

__version__ = "0.1.0"

__all__ = ["astar", "geometry", "graph", "grid", "path", "potential", "wavefront"]