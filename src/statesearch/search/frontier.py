"""Frontier disciplines for the core expansion loop.

A frontier holds the states that are waiting to be expanded. The order in
which it releases them decides the exploration strategy:

- FifoFrontier: breadth-first
- LifoFrontier: depth-first
- PriorityFrontier: best-first by an evaluation function (A* uses g + h)
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Callable, Deque, List, Tuple, Union

from statesearch.core.contracts import State, supports_heuristic
from statesearch.core.exceptions import SearchConfigurationError


class Frontier(ABC):
    """Ordered collection of pending states."""

    @abstractmethod
    def push(self, state: State) -> None:
        pass

    @abstractmethod
    def pop(self) -> State:
        """Remove and return the next state; raises IndexError when empty."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0


class FifoFrontier(Frontier):
    """First-in-first-out frontier."""

    def __init__(self):
        self._queue: Deque[State] = deque()

    def push(self, state: State) -> None:
        self._queue.append(state)

    def pop(self) -> State:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class LifoFrontier(Frontier):
    """Last-in-first-out frontier."""

    def __init__(self):
        self._stack: List[State] = []

    def push(self, state: State) -> None:
        self._stack.append(state)

    def pop(self) -> State:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


class PriorityFrontier(Frontier):
    """Min-heap frontier ordered by ``evaluate(state)``.

    States with equal evaluation are released in insertion order, so the
    exploration order is reproducible for identical inputs.
    """

    def __init__(self, evaluate: Callable[[State], float]):
        self.evaluate = evaluate
        self._heap: List[Tuple[float, int, State]] = []
        self._counter = itertools.count()

    def push(self, state: State) -> None:
        heapq.heappush(self._heap, (self.evaluate(state), next(self._counter), state))

    def pop(self) -> State:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


def astar_evaluation(state: State) -> float:
    """f(n) = g(n) + h(n)."""
    if not supports_heuristic(state):
        raise SearchConfigurationError(
            f"State {type(state).__name__} does not implement the Heuristic capability"
        )
    return state.get_solution_cost() + state.heuristic()


class FrontierKind(Enum):
    FIFO = "fifo"
    LIFO = "lifo"


def create_frontier(kind: Union[str, FrontierKind]) -> Frontier:
    """Factory for the uninformed frontier disciplines.

    Args:
        kind: ``"fifo"``, ``"lifo"`` or a FrontierKind member

    Returns:
        An empty frontier of the requested discipline
    """
    try:
        kind = FrontierKind(kind)
    except ValueError:
        raise ValueError(f"Unknown frontier kind: {kind!r}")

    if kind is FrontierKind.FIFO:
        return FifoFrontier()
    return LifoFrontier()
