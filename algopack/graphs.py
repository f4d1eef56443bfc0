"""Directed graphs as vertex and edge lists, with reachability searches."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Vertex:
    """A vertex identified by a non-negative integer."""

    value: int

    def neighbors(self, graph: Graph) -> list[Vertex]:
        """Return the targets of every edge leaving this vertex, in edge order."""
        return [Vertex(edge.target) for edge in graph.edges if edge.source == self.value]


@dataclass(frozen=True)
class Edge:
    """A directed edge from ``source`` to ``target``."""

    source: int
    target: int


VertexLike = Union[Vertex, int]
EdgeLike = Union[Edge, tuple[int, int]]


def _vertex(item: VertexLike) -> Vertex:
    return item if isinstance(item, Vertex) else Vertex(item)


def _edge(item: EdgeLike) -> Edge:
    if isinstance(item, Edge):
        return item
    source, target = item
    return Edge(source, target)


@dataclass
class Graph:
    """A directed graph. Plain integers and pairs are accepted for vertices and edges."""

    vertices: list[Vertex] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.vertices = [_vertex(v) for v in self.vertices]
        self.edges = [_edge(e) for e in self.edges]

    @classmethod
    def build(cls, vertices: Iterable[VertexLike], edges: Iterable[EdgeLike]) -> Graph:
        """Create a graph from any iterables of vertices and edges."""
        return cls(list(vertices), list(edges))


def breadth_first_search(graph: Graph, start: VertexLike, end: VertexLike) -> bool:
    """True when ``end`` can be reached from ``start``, searching breadth first."""
    goal = _vertex(end)
    visited: set[Vertex] = set()
    queue = deque([_vertex(start)])
    while queue:
        vertex = queue.popleft()
        if vertex == goal:
            return True
        for neighbor in vertex.neighbors(graph):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return False


def depth_first_search(graph: Graph, start: VertexLike, end: VertexLike) -> bool:
    """True when ``end`` can be reached from ``start``, searching depth first."""
    goal = _vertex(end)
    visited: set[Vertex] = set()
    stack = [_vertex(start)]
    while stack:
        vertex = stack.pop()
        if vertex == goal:
            return True
        for neighbor in vertex.neighbors(graph):
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)
    return False