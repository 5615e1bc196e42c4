"""Domain-agnostic state-space search engine.

Callers implement the State and Action contracts (and optionally
Heuristic) and hand an initial state to one of the search drivers:

    >>> actions, stats = search_breadth_first(initial_state)
"""

__version__ = "0.1.0"

from .core import (
    Action, State, Heuristic, SearchStatistics,
    SearchError, SearchConfigurationError, SearchBudgetExceeded
)
from .search import (
    SearchConfig, search_breadth_first, search_depth_first,
    search_iterative_depth, search_astar, run_search
)

__all__ = [
    'Action',
    'State',
    'Heuristic',
    'SearchStatistics',
    'SearchError',
    'SearchConfigurationError',
    'SearchBudgetExceeded',
    'SearchConfig',
    'search_breadth_first',
    'search_depth_first',
    'search_iterative_depth',
    'search_astar',
    'run_search'
]
