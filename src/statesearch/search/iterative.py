"""Iterative deepening depth-first search."""

import logging
from typing import List, Optional, Tuple

from statesearch.core.contracts import Action, State
from statesearch.core.statistics import SearchStatistics
from statesearch.search.engine import SearchConfig, find_first_solution
from statesearch.search.frontier import LifoFrontier

logger = logging.getLogger(__name__)


def search_iterative_depth(initial_state: State,
                           config: Optional[SearchConfig] = None) -> Tuple[List[Action], SearchStatistics]:
    """Repeated depth-bounded depth-first search with a growing bound.

    Each round uses a fresh frontier and visited set with bound 1, 2, 3, ...
    Statistics are summed over rounds, except ``max_depth`` which is the
    deepest level reached in any round. Within a round a state met again at
    a shallower level is expanded again, so the plan found has as few
    actions as the breadth-first one.

    The search gives up once the bound exceeds the deepest level the last
    round could reach, i.e. the reachable graph is exhausted. Graphs with
    unbounded depth never trigger this, so callers must set
    ``config.max_depth`` for them.

    Args:
        initial_state: State to start from
        config: Optional limits; ``max_depth`` caps the deepening bound and
            the node/time budget applies to each round

    Returns:
        Tuple of (solution actions, aggregated statistics)
    """
    config = config or SearchConfig()
    totals = SearchStatistics()
    depth = 1

    logger.info(f"Starting iterative deepening search from {initial_state}")

    while True:
        bound = depth if config.max_depth is None else min(depth, config.max_depth)
        outcome = find_first_solution(initial_state, LifoFrontier(), bound, config)
        round_depth = outcome.statistics.max_depth
        totals.merge(outcome.statistics)

        logger.debug(f"Depth bound {bound}: {outcome.statistics}")

        if outcome.found:
            logger.info(f"Iterative deepening found a solution at bound {bound}: {totals}")
            return outcome.actions, totals

        if depth > round_depth:
            logger.info(f"Iterative deepening exhausted the graph at bound {depth}: {totals}")
            return [], totals

        if config.max_depth is not None and depth >= config.max_depth:
            logger.info(f"Iterative deepening reached the depth limit {config.max_depth}: {totals}")
            return [], totals

        depth += 1
