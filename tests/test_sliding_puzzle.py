"""Tests for the sliding puzzle problem and searches over it."""

import pytest
import numpy as np

from statesearch import search_astar, search_breadth_first, search_iterative_depth
from statesearch.core.contracts import Action
from statesearch.problems.sliding_puzzle import Move, SlidingPuzzleState, goal_board


@pytest.fixture
def two_moves_away():
    """Blank in the bottom-left corner; two RIGHT moves solve it."""
    return SlidingPuzzleState(np.array([[1, 2, 3], [4, 5, 6], [0, 7, 8]]))


class TestSlidingPuzzleState:
    """Test board mechanics."""

    def test_goal_board(self):
        assert np.array_equal(goal_board(3), [[1, 2, 3], [4, 5, 6], [7, 8, 0]])
        assert SlidingPuzzleState.goal(4).is_solution()

    def test_moves_are_actions(self):
        assert isinstance(Move.UP, Action)
        assert Move.LEFT.cost() == 1.0

    def test_applicable_actions(self, two_moves_away):
        assert two_moves_away.get_applicable_actions() == [Move.UP, Move.RIGHT]
        assert SlidingPuzzleState.goal(3).get_applicable_actions() == [Move.UP, Move.LEFT]

    def test_apply_action(self, two_moves_away):
        successor = two_moves_away.apply_action(Move.RIGHT)

        assert successor.blank_position() == (2, 1)
        assert successor.board[2, 0] == 7
        assert successor.get_partial_solution() == [Move.RIGHT]
        assert successor.get_solution_cost() == 1.0
        assert successor.get_state_level() == 1
        # original board untouched
        assert two_moves_away.blank_position() == (2, 0)

    def test_invalid_move(self, two_moves_away):
        with pytest.raises(ValueError):
            two_moves_away.apply_action(Move.DOWN)

    def test_invalid_boards(self):
        with pytest.raises(ValueError):
            SlidingPuzzleState(np.array([[1, 2, 3], [4, 5, 6]]))
        with pytest.raises(ValueError):
            SlidingPuzzleState(np.array([[1, 1], [2, 0]]))

    def test_board_is_read_only(self, two_moves_away):
        with pytest.raises(ValueError):
            two_moves_away.board[0, 0] = 9

    def test_equality_ignores_history(self, two_moves_away):
        there_and_back = two_moves_away.apply_action(Move.RIGHT).apply_action(Move.LEFT)

        assert there_and_back == two_moves_away
        assert hash(there_and_back) == hash(two_moves_away)
        assert there_and_back.get_state_level() == 2

    def test_heuristics(self, two_moves_away):
        assert two_moves_away.heuristic() == 2.0
        assert SlidingPuzzleState.goal(3).heuristic() == 0.0

    def test_string_rendering(self, two_moves_away):
        assert str(two_moves_away).splitlines()[2] == " .  7  8"

    def test_scrambled_is_reproducible(self):
        first = SlidingPuzzleState.scrambled(3, moves=15, seed=11)
        second = SlidingPuzzleState.scrambled(3, moves=15, seed=11)

        assert first == second
        assert first.get_partial_solution() == []


class TestSlidingPuzzleSearch:
    """Search drivers on small puzzle instances."""

    def test_astar_two_moves(self, two_moves_away):
        actions, stats = search_astar(two_moves_away)

        assert actions == [Move.RIGHT, Move.RIGHT]
        assert stats.solutions == 1

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_astar_matches_breadth_first_length(self, seed):
        """Unit costs make the shortest plan the cheapest one."""
        start = SlidingPuzzleState.scrambled(3, moves=8, seed=seed)

        astar_actions, _ = search_astar(start)
        bfs_actions, _ = search_breadth_first(start)

        assert len(astar_actions) == len(bfs_actions)
        assert start.heuristic() <= len(astar_actions)

        final = start
        for move in astar_actions:
            final = final.apply_action(move)
        assert final.is_solution()

    def test_iterative_depth_on_puzzle(self, two_moves_away):
        actions, stats = search_iterative_depth(two_moves_away)

        assert len(actions) == 2
        assert stats.solutions == 1
