"""Core contracts and records shared by all search drivers."""

from .contracts import Action, State, Heuristic, supports_heuristic
from .statistics import SearchStatistics
from .exceptions import SearchError, SearchConfigurationError, SearchBudgetExceeded

__all__ = [
    'Action',
    'State',
    'Heuristic',
    'supports_heuristic',
    'SearchStatistics',
    'SearchError',
    'SearchConfigurationError',
    'SearchBudgetExceeded'
]
