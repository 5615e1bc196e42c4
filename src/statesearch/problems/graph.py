"""Search problems over an explicit weighted directed graph.

Useful for small hand-built instances: each state is a graph node plus the
path of edges that reached it, and two states are equal when they sit on the
same node.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Optional, Set, Tuple

from statesearch.core.contracts import Action, Heuristic, State


@dataclass(frozen=True)
class Edge(Action):
    """Directed edge used as a search action."""
    source: Hashable
    target: Hashable
    weight: float = 1.0

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {self.weight}")

    def cost(self) -> float:
        return self.weight

    def __str__(self) -> str:
        return f"{self.source}->{self.target}"


class WeightedGraph:
    """Adjacency-list graph with goal nodes and optional heuristic values."""

    def __init__(self,
                 goals: Optional[Iterable[Hashable]] = None,
                 heuristics: Optional[Dict[Hashable, float]] = None):
        self.adjacency: Dict[Hashable, List[Edge]] = {}
        self.goals: Set[Hashable] = set(goals or ())
        self.heuristics: Dict[Hashable, float] = dict(heuristics or {})

    def add_node(self, node: Hashable) -> None:
        self.adjacency.setdefault(node, [])

    def add_edge(self, source: Hashable, target: Hashable, weight: float = 1.0) -> Edge:
        """Add a directed edge; successors keep insertion order."""
        edge = Edge(source, target, weight)
        self.add_node(source)
        self.add_node(target)
        self.adjacency[source].append(edge)
        return edge

    def edges_from(self, node: Hashable) -> List[Edge]:
        return list(self.adjacency.get(node, []))

    def estimate(self, node: Hashable) -> float:
        return self.heuristics.get(node, 0.0)

    def initial_state(self, node: Hashable) -> 'GraphState':
        self.add_node(node)
        return GraphState(self, node)

    @classmethod
    def from_edges(cls,
                   edges: Iterable[Tuple[Hashable, Hashable, float]],
                   goals: Iterable[Hashable],
                   heuristics: Optional[Dict[Hashable, float]] = None) -> 'WeightedGraph':
        """Build a graph from ``(source, target, weight)`` triples."""
        graph = cls(goals, heuristics)
        for source, target, weight in edges:
            graph.add_edge(source, target, weight)
        return graph


class GraphState(State, Heuristic):
    """A position in a WeightedGraph together with the path that reached it."""

    def __init__(self, graph: WeightedGraph, node: Hashable,
                 path: Tuple[Edge, ...] = (), cost: float = 0.0):
        self.graph = graph
        self.node = node
        self.path = path
        self.cost = cost

    def apply_action(self, action: Edge) -> 'GraphState':
        if action.source != self.node:
            raise ValueError(f"Edge {action} does not start at node {self.node}")
        return GraphState(self.graph, action.target, self.path + (action,),
                          self.cost + action.cost())

    def get_partial_solution(self) -> List[Edge]:
        return list(self.path)

    def get_solution_cost(self) -> float:
        return self.cost

    def get_applicable_actions(self) -> List[Edge]:
        return self.graph.edges_from(self.node)

    def is_solution(self) -> bool:
        return self.node in self.graph.goals

    def get_state_level(self) -> int:
        return len(self.path)

    def heuristic(self) -> float:
        return self.graph.estimate(self.node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphState):
            return NotImplemented
        return self.graph is other.graph and self.node == other.node

    def __hash__(self) -> int:
        return hash(self.node)

    def __str__(self) -> str:
        return f"GraphState({self.node}, level={len(self.path)}, cost={self.cost})"

    __repr__ = __str__
