"""Core expansion loop shared by every search driver.

The loop is generic over the frontier discipline and an optional depth
bound. Breadth-first, depth-first and A* run it once; iterative deepening
runs it repeatedly with a growing bound.
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from statesearch.core.contracts import Action, State
from statesearch.core.exceptions import SearchBudgetExceeded, SearchConfigurationError
from statesearch.core.statistics import SearchStatistics
from statesearch.search.frontier import Frontier

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Optional limits for a search run. ``None`` means unbounded."""
    max_nodes_expanded: Optional[int] = None
    max_depth: Optional[int] = None
    max_computation_time: Optional[float] = None  # seconds

    def __post_init__(self):
        for name in ('max_nodes_expanded', 'max_depth'):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
                raise SearchConfigurationError(f"{name} must be a non-negative integer or None, got {value!r}")
        timeout = self.max_computation_time
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
            raise SearchConfigurationError(
                f"max_computation_time must be a positive number or None, got {timeout!r}"
            )


@dataclass
class SearchOutcome:
    """Result of one run of the expansion loop."""
    actions: List[Action] = field(default_factory=list)
    statistics: SearchStatistics = field(default_factory=SearchStatistics)
    found: bool = False


def find_first_solution(initial_state: State,
                        frontier: Frontier,
                        max_depth: Optional[int] = None,
                        config: Optional[SearchConfig] = None) -> SearchOutcome:
    """Explore from ``initial_state`` until the first goal is popped.

    Args:
        initial_state: State to start from
        frontier: Empty frontier deciding the exploration order
        max_depth: Successors are only generated for states whose level is
            below this bound. ``None`` disables the bound. Under a bound a
            state reached again at a shallower level than its earlier
            expansion is expanded again, so its subtree gets the deeper
            remaining budget.
        config: Optional node and time budget

    Returns:
        SearchOutcome with the partial solution of the first goal found, or an
        empty action list when the frontier is exhausted

    Raises:
        SearchConfigurationError: If the initial state is not hashable
        SearchBudgetExceeded: If the node or time budget runs out first
    """
    config = config or SearchConfig()
    statistics = SearchStatistics()
    # bounded runs remember the shallowest level each state was expanded at
    expanded: Set[State] = set()
    expanded_levels: Dict[State, int] = {}

    if type(initial_state).__hash__ is None:
        raise SearchConfigurationError(
            f"State {type(initial_state).__name__} defines __eq__ without __hash__"
        )

    deadline = None
    if config.max_computation_time is not None:
        deadline = time.perf_counter() + config.max_computation_time

    frontier.push(initial_state)

    while not frontier.is_empty():
        if deadline is not None and time.perf_counter() > deadline:
            logger.warning(f"Search timed out after {config.max_computation_time}s: {statistics}")
            raise SearchBudgetExceeded("timeout", statistics)

        state = frontier.pop()
        level = state.get_state_level()

        # the goal counts as explored but is never expanded
        if state.is_solution():
            statistics.nodes_explored += 1
            statistics.solutions += 1
            statistics.record_depth(level)
            return SearchOutcome(state.get_partial_solution(), statistics, True)

        if max_depth is None:
            duplicate = state in expanded
        else:
            duplicate = level >= expanded_levels.get(state, max_depth + 1)
        if duplicate:
            statistics.nodes_duplicated += 1
            continue

        if (config.max_nodes_expanded is not None and
                statistics.nodes_explored >= config.max_nodes_expanded):
            logger.warning(f"Node budget of {config.max_nodes_expanded} exhausted: {statistics}")
            raise SearchBudgetExceeded("max_nodes_reached", statistics)

        statistics.nodes_explored += 1
        statistics.record_depth(level)
        if max_depth is None:
            expanded.add(state)
        else:
            expanded_levels[state] = level

        if max_depth is None or level < max_depth:
            for action in state.get_applicable_actions():
                frontier.push(state.apply_action(action))

    return SearchOutcome([], statistics, False)


def effective_depth_bound(config: Optional[SearchConfig]) -> Optional[int]:
    return config.max_depth if config is not None else None
