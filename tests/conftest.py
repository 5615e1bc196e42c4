"""Shared fixtures for search tests."""

from collections import Counter
from typing import List, Optional, Tuple

import pytest

from statesearch.core.contracts import Action, State
from statesearch.problems.graph import WeightedGraph


class Increment(Action):
    """Add ``step`` to a counter; costs ``step``."""

    def __init__(self, step: int):
        self.step = step

    def cost(self) -> float:
        return float(self.step)

    def __repr__(self) -> str:
        return f"Increment({self.step})"


class CounterState(State):
    """Unbounded integer line without a heuristic.

    Every state offers ``+1`` and ``+2``. The goal is reaching ``target``
    exactly; with ``target=None`` there is no goal at all.
    """

    def __init__(self, value: int = 0, target: Optional[int] = None,
                 path: Tuple[Increment, ...] = ()):
        self.value = value
        self.target = target
        self.path = path

    def apply_action(self, action: Increment) -> 'CounterState':
        return CounterState(self.value + action.step, self.target, self.path + (action,))

    def get_partial_solution(self) -> List[Increment]:
        return list(self.path)

    def get_solution_cost(self) -> float:
        return sum(action.cost() for action in self.path)

    def get_applicable_actions(self) -> List[Increment]:
        return [Increment(1), Increment(2)]

    def is_solution(self) -> bool:
        return self.target is not None and self.value == self.target

    def get_state_level(self) -> int:
        return len(self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CounterState):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"CounterState({self.value})"


class TrackingGraph(WeightedGraph):
    """WeightedGraph that counts how often each node is expanded."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.expansions = Counter()

    def edges_from(self, node):
        self.expansions[node] += 1
        return super().edges_from(node)


def build_graph(edges, goals, heuristics=None, graph_cls=WeightedGraph) -> WeightedGraph:
    graph = graph_cls(goals, heuristics)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


@pytest.fixture
def counter_state():
    return CounterState


@pytest.fixture
def line_graph():
    """A -(1)-> B -(1)-> C with goal C."""
    return build_graph([("A", "B", 1.0), ("B", "C", 1.0)], goals=["C"])


@pytest.fixture
def diamond_graph():
    """Two paths A->B->D and A->C->D meet at D, then D->E (goal)."""
    return build_graph(
        [("A", "B", 1.0), ("A", "C", 1.0), ("B", "D", 1.0), ("C", "D", 1.0), ("D", "E", 1.0)],
        goals=["E"],
        graph_cls=TrackingGraph
    )


@pytest.fixture
def shortcut_graph():
    """S has a direct 1-step edge to G and a 3-step detour through X and Y.

    The direct edge is added first, so a LIFO frontier takes the detour.
    """
    return build_graph(
        [("S", "G", 5.0), ("S", "X", 1.0), ("X", "Y", 1.0), ("Y", "G", 1.0)],
        goals=["G"]
    )


@pytest.fixture
def weighted_graph():
    """Fewest steps is S->A->G (cost 11); cheapest is S->B->G (cost 6).

    The heuristic table is admissible and consistent.
    """
    return build_graph(
        [("S", "A", 1.0), ("A", "G", 10.0), ("S", "B", 3.0), ("B", "G", 3.0)],
        goals=["G"],
        heuristics={"S": 4.0, "A": 2.0, "B": 3.0, "G": 0.0}
    )


@pytest.fixture
def cyclic_graph_without_goal():
    """A -> B -> C -> A with no goal node."""
    return build_graph([("A", "B", 1.0), ("B", "C", 1.0), ("C", "A", 1.0)], goals=[])


@pytest.fixture
def reconvergent_graph():
    """A reaches X directly and through B; X -> G is the goal edge.

    A LIFO frontier first meets X at depth 2 through B.
    """
    return build_graph(
        [("A", "X", 1.0), ("A", "B", 1.0), ("B", "X", 1.0), ("X", "G", 1.0)],
        goals=["G"]
    )
