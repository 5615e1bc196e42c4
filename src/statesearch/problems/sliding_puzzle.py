"""N x N sliding tile puzzle.

The board is a square numpy array of tiles ``1..N*N-1`` with ``0`` for the
blank. The goal places the tiles in row-major order with the blank last.
Moves are named after the direction the blank travels.
"""

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from statesearch.core.contracts import Action, Heuristic, State


class Move(Enum):
    """Blank moves; every move costs 1."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def cost(self) -> float:
        return 1.0

    def __str__(self) -> str:
        return self.name


Action.register(Move)


def goal_board(size: int) -> np.ndarray:
    board = np.arange(1, size * size + 1, dtype=np.int16).reshape(size, size)
    board[-1, -1] = 0
    return board


class SlidingPuzzleState(State, Heuristic):
    """Sliding puzzle board plus the moves that produced it."""

    def __init__(self, board: np.ndarray, moves: Tuple[Move, ...] = ()):
        board = np.array(board, dtype=np.int16)
        if board.ndim != 2 or board.shape[0] != board.shape[1]:
            raise ValueError(f"Board must be square, got shape {board.shape}")
        expected = np.arange(board.size)
        if not np.array_equal(np.sort(board, axis=None), expected):
            raise ValueError("Board must contain each tile 0..N*N-1 exactly once")

        self.board = board
        self.board.setflags(write=False)
        self.size = board.shape[0]
        self.moves = moves
        self._key = board.tobytes()

    @classmethod
    def goal(cls, size: int = 3) -> 'SlidingPuzzleState':
        return cls(goal_board(size))

    @classmethod
    def scrambled(cls, size: int = 3, moves: int = 20,
                  seed: Optional[int] = None) -> 'SlidingPuzzleState':
        """Random walk of ``moves`` blank moves away from the goal.

        Boards produced this way are always solvable. The returned state has
        an empty move history.
        """
        rng = np.random.default_rng(seed)
        state = cls.goal(size)
        for _ in range(moves):
            actions = state.get_applicable_actions()
            state = state.apply_action(actions[rng.integers(len(actions))])
        return cls(state.board.copy())

    def blank_position(self) -> Tuple[int, int]:
        row, col = np.argwhere(self.board == 0)[0]
        return int(row), int(col)

    def apply_action(self, action: Move) -> 'SlidingPuzzleState':
        row, col = self.blank_position()
        d_row, d_col = action.value
        new_row, new_col = row + d_row, col + d_col
        if not (0 <= new_row < self.size and 0 <= new_col < self.size):
            raise ValueError(f"Move {action} is not applicable to blank at {(row, col)}")

        board = self.board.copy()
        board[row, col], board[new_row, new_col] = board[new_row, new_col], 0
        return SlidingPuzzleState(board, self.moves + (action,))

    def get_partial_solution(self) -> List[Move]:
        return list(self.moves)

    def get_solution_cost(self) -> float:
        return float(sum(move.cost() for move in self.moves))

    def get_applicable_actions(self) -> List[Move]:
        row, col = self.blank_position()
        actions = []
        if row > 0:
            actions.append(Move.UP)
        if row < self.size - 1:
            actions.append(Move.DOWN)
        if col > 0:
            actions.append(Move.LEFT)
        if col < self.size - 1:
            actions.append(Move.RIGHT)
        return actions

    def is_solution(self) -> bool:
        return np.array_equal(self.board, goal_board(self.size))

    def get_state_level(self) -> int:
        return len(self.moves)

    def heuristic(self) -> float:
        """Manhattan distance of every tile to its goal cell."""
        tiles = self.board.ravel()
        mask = tiles != 0
        positions = np.arange(tiles.size)[mask]
        targets = tiles[mask].astype(np.int64) - 1
        rows = np.abs(positions // self.size - targets // self.size)
        cols = np.abs(positions % self.size - targets % self.size)
        return float(np.sum(rows + cols))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlidingPuzzleState):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        rows = [" ".join(f"{tile:2d}" if tile else " ." for tile in row) for row in self.board]
        return "\n".join(rows)
