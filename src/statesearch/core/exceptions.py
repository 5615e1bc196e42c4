"""Exceptions raised by the search engine."""

from typing import Optional

from statesearch.core.statistics import SearchStatistics


class SearchError(Exception):
    """Base class for search engine errors."""
    pass


class SearchConfigurationError(SearchError):
    """Raised when a search is set up with an unusable configuration.

    Examples are running A* on states without the Heuristic capability or
    passing negative limits in a SearchConfig.
    """
    pass


class SearchBudgetExceeded(SearchError):
    """Raised when a node or time budget stops a search before it finishes.

    Attributes:
        statistics: Statistics accumulated up to the point of the cut-off
        reason: ``"max_nodes_reached"`` or ``"timeout"``
    """

    def __init__(self, reason: str, statistics: Optional[SearchStatistics] = None):
        self.reason = reason
        self.statistics = statistics if statistics is not None else SearchStatistics()
        super().__init__(f"Search stopped early ({reason}): {self.statistics}")
