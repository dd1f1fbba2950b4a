from enum import Enum
from typing import Iterator, List, NamedTuple


class EdgeKind(str, Enum):
    # target is a prerequisite of the source vertex
    PREREQUISITE_TO_THIS = "prerequisite_to_this"
    # source vertex is a prerequisite of the target
    PREREQUISITE_FOR_ANOTHER = "prerequisite_for_another"


class Edge(NamedTuple):
    vertex: int
    kind: EdgeKind


class AdjList:
    """Directed multi-graph over the vertices 0..node_count-1.

    Each vertex keeps a list of outgoing edges. Duplicate edges are kept.
    """

    def __init__(self, node_count: int):
        if node_count < 0:
            raise ValueError(f"node_count must be non-negative, got: {node_count}")
        self.node_count = node_count
        self._edges: List[List[Edge]] = [[] for _ in range(node_count)]

    def __len__(self) -> int:
        return self.node_count

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.node_count:
            raise IndexError(
                f"Vertex {vertex} out of range for graph with {self.node_count} vertices"
            )

    def add_edge(self, from_vertex: int, to_vertex: int, kind: EdgeKind) -> None:
        self._check_vertex(from_vertex)
        self._check_vertex(to_vertex)
        self._edges[from_vertex].append(Edge(to_vertex, kind))

    def remove_edge(self, from_vertex: int, to_vertex: int) -> bool:
        """Remove the first edge from `from_vertex` to `to_vertex`.

        Returns False (and leaves the graph untouched) if there is no such edge.
        """
        self._check_vertex(from_vertex)
        edges = self._edges[from_vertex]
        for position, edge in enumerate(edges):
            if edge.vertex == to_vertex:
                del edges[position]
                return True
        return False

    def neighbors(self, vertex: int) -> Iterator[Edge]:
        # Iterate over a snapshot so callers may mutate the graph mid-traversal
        self._check_vertex(vertex)
        return iter(tuple(self._edges[vertex]))

    def out_degree(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return len(self._edges[vertex])

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._edges)
