from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import (
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)


Node = Hashable
Adjacency = Mapping[Node, Mapping[Node, int]]


class ShortestPathError(ValueError):
    """Base class for every way a shortest-path query can fail."""


class UnknownStartError(ShortestPathError):
    def __init__(self, start: Node) -> None:
        super().__init__(f"Start node {start!r} is not present in graph.")
        self.start = start


class MalformedGraphError(ShortestPathError):
    def __init__(self, node: Node) -> None:
        super().__init__(f"Node {node!r} has no adjacency entry in graph.")
        self.node = node


class UnreachableError(ShortestPathError):
    def __init__(self, start: Node, finish: Node) -> None:
        super().__init__(f"No path between {start!r} and {finish!r}.")
        self.start = start
        self.finish = finish


class NegativeWeightError(ShortestPathError):
    def __init__(self, origin: Node, target: Node, weight: int) -> None:
        super().__init__(
            f"Edge {origin!r}->{target!r} has negative weight {weight}; "
            "Dijkstra requires non-negative weights."
        )
        self.origin = origin
        self.target = target
        self.weight = weight


def _check_weight(origin: Node, target: Node, weight: int) -> None:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(
            f"Edge {origin!r}->{target!r} weight must be an integer, got {weight!r}."
        )
    if weight < 0:
        raise NegativeWeightError(origin, target, weight)


class Graph:
    """Immutable directed graph with non-negative integer edge weights.

    Every node that appears as an edge target must also be a key of the
    adjacency map; a dead end is stored with an empty neighbour map.
    """

    def __init__(self, adjacency: Adjacency) -> None:
        self._adjacency: Dict[Node, Dict[Node, int]] = {}
        for origin, neighbors in adjacency.items():
            row: Dict[Node, int] = {}
            for target, weight in neighbors.items():
                if target not in adjacency:
                    raise MalformedGraphError(target)
                _check_weight(origin, target, weight)
                row[target] = weight
            self._adjacency[origin] = row

    @classmethod
    def from_edges(
        cls,
        nodes: Iterable[Node],
        edges: Iterable[Sequence],
    ) -> "Graph":
        """Build a graph from a node list and ``(origin, target, weight)`` triples."""
        adjacency: Dict[Node, Dict[Node, int]] = {node: {} for node in nodes}
        for origin, target, weight in edges:
            for node in (origin, target):
                if node not in adjacency:
                    raise MalformedGraphError(node)
            adjacency[origin][target] = weight
        return cls(adjacency)

    @property
    def nodes(self) -> List[Node]:
        return list(self._adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph({self._adjacency!r})"

    def neighbors(self, node: Node) -> Dict[Node, int]:
        try:
            return dict(self._adjacency[node])
        except KeyError:
            raise MalformedGraphError(node) from None

    def edges(self) -> Iterator[Tuple[Node, Node, int]]:
        for origin, neighbors in self._adjacency.items():
            for target, weight in neighbors.items():
                yield origin, target, weight

    def as_dict(self) -> Dict[Node, Dict[Node, int]]:
        return {node: dict(neighbors) for node, neighbors in self._adjacency.items()}

    def with_edge(self, origin: Node, target: Node, weight: int) -> "Graph":
        """Return a copy of the graph with one new edge added.

        Existing edges are never reweighted, so the shortest cost between
        any two nodes can only stay the same or drop.
        """
        if target in self._adjacency.get(origin, {}):
            raise ValueError(f"Edge {origin!r}->{target!r} already present in graph.")
        adjacency = self.as_dict()
        for node in (origin, target):
            adjacency.setdefault(node, {})
        adjacency[origin][target] = weight
        return Graph(adjacency)

    def dijkstra(self, start: Node) -> Tuple[Dict[Node, int], Dict[Node, Node]]:
        return dijkstra(self, start)

    def shortest_path_cost(self, start: Node, finish: Node) -> int:
        return shortest_path_cost(self, start, finish)

    def shortest_path(self, start: Node, finish: Node) -> Tuple[int, List[Node]]:
        return shortest_path(self, start, finish)

    def path_cost(self, path: Sequence[Node]) -> int:
        """Return the total cost of walking along the given node sequence."""
        if len(path) < 2:
            return 0

        total_cost = 0
        for u, v in zip(path[:-1], path[1:]):
            edge_cost = self._adjacency.get(u, {}).get(v)
            if edge_cost is None:
                raise ValueError(f"Edge {u}-{v} not present in graph.")
            total_cost += edge_cost
        return total_cost

    def simple_paths(self, start: Node, finish: Node) -> Iterator[List[Node]]:
        """Enumerate every simple path from start to finish (exponential)."""
        if start not in self._adjacency:
            return
        stack: List[Tuple[Node, List[Node]]] = [(start, [start])]
        while stack:
            node, path = stack.pop()
            if node == finish:
                yield path
                continue
            for neighbor in self._adjacency.get(node, {}):
                if neighbor not in path:
                    stack.append((neighbor, path + [neighbor]))


GraphLike = Union[Graph, Adjacency]


def _adjacency_of(graph: GraphLike) -> Tuple[Adjacency, bool]:
    """Return the adjacency map and whether its weights are already checked."""
    if isinstance(graph, Graph):
        return graph._adjacency, True
    return graph, False


def dijkstra(
    graph: GraphLike,
    start: Node,
) -> Tuple[Dict[Node, int], Dict[Node, Node]]:
    """Compute single-source shortest path costs from start.

    costs[v] stores the finalised distance from start to v and parents[v]
    remembers the previous node along that path. The start node never
    appears in costs; its cost is implicitly zero. Every reachable node is
    expanded, so a reachable node without an adjacency entry raises
    MalformedGraphError even when it lies beyond the node of interest.
    """
    adjacency, validated = _adjacency_of(graph)
    if start not in adjacency:
        raise UnknownStartError(start)

    costs: Dict[Node, int] = {}
    parents: Dict[Node, Node] = {}
    processed = {start}

    # Ties on cost are broken by discovery order, never by comparing nodes.
    order = count()
    queue: List[Tuple[int, int, Node]] = []

    def relax(node: Node, node_cost: int) -> None:
        try:
            neighbors = adjacency[node]
        except KeyError:
            raise MalformedGraphError(node) from None

        for neighbor, weight in neighbors.items():
            if not validated:
                _check_weight(node, neighbor, weight)
            if neighbor in processed:
                continue
            candidate = node_cost + weight
            known = costs.get(neighbor)
            if known is None or candidate < known:
                costs[neighbor] = candidate
                parents[neighbor] = node
                heappush(queue, (candidate, next(order), neighbor))

    relax(start, 0)
    while queue:
        node_cost, _, node = heappop(queue)
        if node in processed or node_cost > costs[node]:
            continue
        relax(node, node_cost)
        processed.add(node)

    return costs, parents


def shortest_path_cost(graph: GraphLike, start: Node, finish: Node) -> int:
    """Return the minimal total weight from start to finish.

    Raises UnknownStartError, MalformedGraphError, UnreachableError or
    NegativeWeightError, all subclasses of ShortestPathError.
    """
    costs, _ = dijkstra(graph, start)
    if finish == start:
        return 0
    if finish not in costs:
        raise UnreachableError(start, finish)
    return costs[finish]


def shortest_path(graph: GraphLike, start: Node, finish: Node) -> Tuple[int, List[Node]]:
    """Recover both length and explicit path between start and finish."""
    costs, parents = dijkstra(graph, start)
    if finish == start:
        return 0, [start]
    if finish not in costs:
        raise UnreachableError(start, finish)

    path: List[Node] = [finish]
    while path[-1] != start:
        path.append(parents[path[-1]])
    path.reverse()
    return costs[finish], path


def find_shortest_path(graph: GraphLike, start: Node, finish: Node) -> Optional[int]:
    """Return the shortest path cost, or None when no cost can be produced.

    Unknown start, a malformed graph and an unreachable finish all collapse
    to None here; use shortest_path_cost to tell them apart. The start node
    has no entry in the costs table, so asking for start itself gives None.
    Negative weights still raise NegativeWeightError.
    """
    try:
        costs, _ = dijkstra(graph, start)
    except (UnknownStartError, MalformedGraphError):
        return None
    return costs.get(finish)
