"""Breadth-first and depth-first search.

Both drivers run the core expansion loop once without domain information;
they differ only in the frontier discipline.
"""

import logging
from typing import List, Optional, Tuple

from statesearch.core.contracts import Action, State
from statesearch.core.statistics import SearchStatistics
from statesearch.search.engine import SearchConfig, effective_depth_bound, find_first_solution
from statesearch.search.frontier import FrontierKind, create_frontier

logger = logging.getLogger(__name__)


def search_breadth_first(initial_state: State,
                         config: Optional[SearchConfig] = None) -> Tuple[List[Action], SearchStatistics]:
    """Breadth-first search from ``initial_state``.

    The returned solution has the fewest actions among all solutions.

    Args:
        initial_state: State to start from
        config: Optional limits; ``max_depth`` bounds successor generation

    Returns:
        Tuple of (solution actions, statistics). The action list is empty when
        no goal is reachable.
    """
    logger.info(f"Starting breadth-first search from {initial_state}")
    outcome = find_first_solution(initial_state, create_frontier(FrontierKind.FIFO),
                                  effective_depth_bound(config), config)
    logger.info(f"Breadth-first search finished (found={outcome.found}): {outcome.statistics}")
    return outcome.actions, outcome.statistics


def search_depth_first(initial_state: State,
                       config: Optional[SearchConfig] = None) -> Tuple[List[Action], SearchStatistics]:
    """Depth-first search from ``initial_state``.

    Args:
        initial_state: State to start from
        config: Optional limits; ``max_depth`` bounds successor generation

    Returns:
        Tuple of (solution actions, statistics). The action list is empty when
        no goal is reachable.
    """
    logger.info(f"Starting depth-first search from {initial_state}")
    outcome = find_first_solution(initial_state, create_frontier(FrontierKind.LIFO),
                                  effective_depth_bound(config), config)
    logger.info(f"Depth-first search finished (found={outcome.found}): {outcome.statistics}")
    return outcome.actions, outcome.statistics
