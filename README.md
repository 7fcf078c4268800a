# ampkit

Building blocks for planning the motion of a point robot, or of a two-link
manipulator in joint-angle space, in the plane. Pure Python with no
dependencies beyond the standard library.

## Modules

- `ampkit.grid` – `DenseArray2D`, a fixed-size two-dimensional array indexed
  as `array[i, j]`, with `size()` and `data()` (a copy of the flat storage,
  `i` varying fastest). Out-of-range cells raise `IndexError`.
- `ampkit.graph` – `Graph`, a directed multigraph over non-negative integer
  nodes with an arbitrary payload on each edge. `connect`, `disconnect`,
  `children`, `outgoing_edges`, `nodes`, `format`, `clear`. A reversible graph
  (the default) also offers `parents`, `incoming_edges` and `reverse`; on a
  graph built with `Graph(reversible=False)` these raise `ValueError`. Each
  node's connections are kept in `AdjacencyList` rows.
- `ampkit.path` – `Path` (a list of waypoints plus a `valid` flag) with
  `length()`, and `unwrap_waypoints` / `unwrap_path`, which shift each
  waypoint by whole periods so that paths through wrapped coordinates such as
  angles become continuous. `unwrap_path` returns a new `Path`.
- `ampkit.geometry` – `Obstacle` (a polygon with counter-clockwise vertices),
  `Problem` (start, goal, obstacles and rectangular bounds), `distance`,
  `closest_point_on_segment`, `point_in_obstacle` and `point_collides`.
- `ampkit.astar` – `AStar.search` over a `ShortestPathProblem`, returning a
  `SearchResult` with `success`, `node_path` and `path_cost`.
  `zero_heuristic` turns the search into Dijkstra's algorithm.
- `ampkit.potential` – `attractive_force`, `repulsive_forces` (both giving
  `Force` values) and `GradientDescentPlanner`, which follows the negative
  gradient of the combined potential and always ends its path at the goal.
- `ampkit.wavefront` – `GridCSpace2D`, an occupancy grid with
  `cell_from_point`; `PointWaveFront`, which discretizes a `Problem` and plans
  through free cell centres; and `ManipulatorWaveFront`, which plans over a
  joint-angle grid indexed in degrees where both joints wrap around. Both
  planners raise `ValueError` when the two cells are not connected.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example: shortest path in a graph

```python
from ampkit.graph import Graph
from ampkit.astar import AStar, ShortestPathProblem, zero_heuristic

graph = Graph()
graph.connect(0, 1, 3.0)
graph.connect(0, 2, 1.0)
graph.connect(2, 1, 0.0)

result = AStar().search(ShortestPathProblem(graph, 0, 1), zero_heuristic)
print(result.success, result.node_path, result.path_cost)  # True [0, 2, 1] 1.0
```

## Example: planning for a point robot

```python
from ampkit.geometry import Obstacle, Problem
from ampkit.potential import GradientDescentPlanner
from ampkit.wavefront import PointWaveFront

problem = Problem(
    q_init=(0.0, 0.0),
    q_goal=(10.0, 0.0),
    obstacles=[Obstacle([(3.5, 0.5), (4.5, 0.5), (4.5, 1.5), (3.5, 1.5)])],
    x_min=-5.0, x_max=15.0, y_min=-10.0, y_max=10.0,
)

wave_path = PointWaveFront(cell_size=0.25).plan(problem)
gd_path = GradientDescentPlanner().plan(problem)
print(wave_path.length(), gd_path.length())
```

## Example: unwrapping an angular path

```python
import math
from ampkit.path import Path, unwrap_path

path = Path([(6.2, 0.0), (0.1, 0.0)])
unwrapped = unwrap_path(path, (0.0, 0.0), (2 * math.pi, 2 * math.pi))
print(unwrapped.waypoints[-1])  # second waypoint moved up by one full turn
print(unwrapped.length())
```

## What the package does not do

- There is no command-line program; everything is used as a library.
- Nothing is drawn or plotted; paths, graphs and grids are returned as plain
  Python values (`Graph.format` gives a text listing).
- `ManipulatorWaveFront` does not build the joint-angle occupancy grid from a
  manipulator and its workspace: there is no forward kinematics or link
  collision checking here, so the caller fills in the `GridCSpace2D` itself.
- There are no sampling-based planners and no multi-agent planning.