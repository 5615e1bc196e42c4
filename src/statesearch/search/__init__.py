"""Search drivers for the state-space search engine.

This module exposes the four entry operations (breadth-first, depth-first,
iterative deepening and A*) and a name-based dispatcher used by the
configuration layer.
"""

from typing import List, Optional, Tuple

from statesearch.core.contracts import Action, State
from statesearch.core.exceptions import SearchConfigurationError
from statesearch.core.statistics import SearchStatistics

from .frontier import (
    Frontier, FifoFrontier, LifoFrontier, PriorityFrontier,
    FrontierKind, astar_evaluation, create_frontier
)
from .engine import SearchConfig, SearchOutcome, find_first_solution
from .uninformed import search_breadth_first, search_depth_first
from .iterative import search_iterative_depth
from .astar import search_astar

ALGORITHMS = {
    'breadth_first': search_breadth_first,
    'depth_first': search_depth_first,
    'iterative_depth': search_iterative_depth,
    'astar': search_astar,
}


def run_search(initial_state: State,
               algorithm: str = 'breadth_first',
               config: Optional[SearchConfig] = None) -> Tuple[List[Action], SearchStatistics]:
    """Run the search driver registered under ``algorithm``.

    Args:
        initial_state: State to start from
        algorithm: One of ``breadth_first``, ``depth_first``,
            ``iterative_depth`` or ``astar``
        config: Optional limits passed to the driver

    Returns:
        Tuple of (solution actions, statistics)
    """
    try:
        driver = ALGORITHMS[algorithm]
    except KeyError:
        raise SearchConfigurationError(
            f"Unknown search algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}"
        )
    return driver(initial_state, config)


__all__ = [
    'Frontier',
    'FifoFrontier',
    'LifoFrontier',
    'PriorityFrontier',
    'FrontierKind',
    'astar_evaluation',
    'create_frontier',
    'SearchConfig',
    'SearchOutcome',
    'find_first_solution',
    'search_breadth_first',
    'search_depth_first',
    'search_iterative_depth',
    'search_astar',
    'ALGORITHMS',
    'run_search'
]
