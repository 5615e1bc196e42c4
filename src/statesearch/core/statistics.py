"""Exploration statistics collected by the search drivers."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class SearchStatistics:
    """Counters describing the part of the state space a search explored."""
    nodes_explored: int = 0
    nodes_duplicated: int = 0
    max_depth: int = 0
    solutions: int = 0

    def record_depth(self, level: int) -> None:
        """Track the deepest level seen so far."""
        if level > self.max_depth:
            self.max_depth = level

    def merge(self, other: 'SearchStatistics') -> 'SearchStatistics':
        """Fold the counters of another run into this one.

        Counts are summed and the maximum depth is the larger of the two.

        Args:
            other: Statistics of a finished run

        Returns:
            This statistics object, updated in place
        """
        self.nodes_explored += other.nodes_explored
        self.nodes_duplicated += other.nodes_duplicated
        self.solutions += other.solutions
        self.max_depth = max(self.max_depth, other.max_depth)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_explored': self.nodes_explored,
            'nodes_duplicated': self.nodes_duplicated,
            'max_depth': self.max_depth,
            'solutions': self.solutions
        }

    def __str__(self) -> str:
        return (
            f"[NodesExplored: {self.nodes_explored}, "
            f"NodesDuplicated: {self.nodes_duplicated}, "
            f"MaxDepth: {self.max_depth}, "
            f"Solutions: {self.solutions}]"
        )
