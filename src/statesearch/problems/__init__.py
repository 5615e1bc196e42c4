"""Reference problem definitions built on the search contracts."""

from .graph import Edge, WeightedGraph, GraphState
from .sliding_puzzle import Move, SlidingPuzzleState, goal_board

__all__ = [
    'Edge',
    'WeightedGraph',
    'GraphState',
    'Move',
    'SlidingPuzzleState',
    'goal_board'
]
