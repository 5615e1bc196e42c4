"""Capability interfaces every searchable problem must implement.

A problem is searchable when its states implement :class:`State` and its
actions implement :class:`Action`. States that additionally implement
:class:`Heuristic` can be searched with the informed (A*) driver.
"""

from abc import ABC, abstractmethod
from typing import List


class Action(ABC):
    """An edge label in the search graph."""

    @abstractmethod
    def cost(self) -> float:
        """Non-negative cost contributed by applying this action."""
        pass


class State(ABC):
    """A node in the implicit search graph.

    The engine treats states as immutable values: applying an action must
    return a new state. States are kept in hash-based visited sets, so
    ``__hash__`` must be consistent with ``__eq__``.
    """

    @abstractmethod
    def apply_action(self, action: Action) -> 'State':
        """Return the successor state reached by applying ``action``."""
        pass

    @abstractmethod
    def get_partial_solution(self) -> List[Action]:
        """Actions applied from the initial state to reach this state."""
        pass

    @abstractmethod
    def get_solution_cost(self) -> float:
        """Sum of the costs of the actions in the partial solution."""
        pass

    @abstractmethod
    def get_applicable_actions(self) -> List[Action]:
        """Actions that can be applied to this state, in expansion order."""
        pass

    @abstractmethod
    def is_solution(self) -> bool:
        """Whether this state is a goal state."""
        pass

    @abstractmethod
    def get_state_level(self) -> int:
        """Depth of this state in the search tree."""
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass


class Heuristic(ABC):
    """Optional capability: an estimate of the remaining cost to a goal.

    A* only returns cost-optimal solutions when the estimate is admissible
    and consistent. Neither property is verified here.
    """

    @abstractmethod
    def heuristic(self) -> float:
        """Estimated remaining cost from this state to a goal."""
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Heuristic:
            attr = getattr(subclass, 'heuristic', None)
            if attr is not None and callable(attr):
                return True
        return NotImplemented


def supports_heuristic(state: object) -> bool:
    """Check whether ``state`` implements the Heuristic capability."""
    return isinstance(state, Heuristic)
