"""A* search.

Runs the core expansion loop over a priority frontier ordered by
f(n) = g(n) + h(n), where g is the state's solution cost and h its
Heuristic estimate.

States are never reopened: reaching an already expanded state again, even
through a cheaper path, counts as a duplicate. The first goal popped is
therefore cost-optimal only when the heuristic is admissible and consistent.
"""

import logging
from typing import List, Optional, Tuple

from statesearch.core.contracts import Action, State, supports_heuristic
from statesearch.core.exceptions import SearchConfigurationError
from statesearch.core.statistics import SearchStatistics
from statesearch.search.engine import SearchConfig, effective_depth_bound, find_first_solution
from statesearch.search.frontier import PriorityFrontier, astar_evaluation

logger = logging.getLogger(__name__)


def search_astar(initial_state: State,
                 config: Optional[SearchConfig] = None) -> Tuple[List[Action], SearchStatistics]:
    """A* search from ``initial_state``.

    Args:
        initial_state: State to start from. Must implement Heuristic.
        config: Optional limits

    Returns:
        Tuple of (solution actions, statistics)

    Raises:
        SearchConfigurationError: If the state does not implement Heuristic
    """
    if not supports_heuristic(initial_state):
        raise SearchConfigurationError(
            f"A* requires states implementing the Heuristic capability, "
            f"got {type(initial_state).__name__}"
        )

    logger.info(f"Starting A* search from {initial_state} (h={initial_state.heuristic()})")
    outcome = find_first_solution(initial_state, PriorityFrontier(astar_evaluation),
                                  effective_depth_bound(config), config)
    if outcome.found:
        logger.info(f"A* found a solution of {len(outcome.actions)} actions: {outcome.statistics}")
    else:
        logger.info(f"A* exhausted the search space without a solution: {outcome.statistics}")
    return outcome.actions, outcome.statistics
