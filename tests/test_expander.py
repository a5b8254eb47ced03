"""Tests for hexcolony.planning.expander — greedy footprint growth."""

from collections.abc import Callable

import pytest

from hexcolony.planning.expander import Footprint, expand
from hexcolony.world.board import Board
from hexcolony.world.turn_state import TurnState


class TestExpand:
    """Tests for expand."""

    def test_chain_admits_affordable_path(
        self,
        chain_board: Board,
        state_factory: Callable[..., TurnState],
    ) -> None:
        state = state_factory(chain_board, my_ants={0: 4})
        footprint = expand(chain_board, state, [0])
        assert footprint.cells == [0, 2, 1]
        assert footprint.spent == 4
        assert footprint.free_ants == 0
        assert footprint.rounds == 1

    def test_isolated_base_stays_alone(
        self,
        chain_factory: Callable[..., Board],
        state_factory: Callable[..., TurnState],
    ) -> None:
        board = chain_factory([(0, 0), (0, 0), (1, 5)])
        state = state_factory(board, my_ants={0: 10}, resources={2: 0})
        footprint = expand(board, state, [0])
        assert footprint.cells == [0]
        assert footprint.free_ants == 10
        assert footprint.rounds == 0

    def test_first_path_taken_even_if_unaffordable(
        self,
        chain_board: Board,
        state_factory: Callable[..., TurnState],
    ) -> None:
        state = state_factory(chain_board, my_ants={0: 1})
        footprint = expand(chain_board, state, [0])
        assert footprint.cells == [0, 2, 1]
        # Deduction is clamped to what was available
        assert footprint.spent == 1
        assert footprint.free_ants == 0

    def test_first_path_taken_with_no_ants(
        self,
        chain_board: Board,
        state_factory: Callable[..., TurnState],
    ) -> None:
        state = state_factory(chain_board)
        footprint = expand(chain_board, state, [0])
        assert footprint.cells == [0, 2, 1]
        assert footprint.spent == 0

    def test_stops_when_budget_runs_out(
        self,
        chain_factory: Callable[..., Board],
        state_factory: Callable[..., TurnState],
    ) -> None:
        # base - empty - egg - empty - crystal
        board = chain_factory([(0, 0), (0, 0), (1, 3), (0, 0), (2, 3)])
        state = state_factory(board, my_ants={0: 6})
        footprint = expand(board, state, [0])
        assert footprint.cells == [0, 2, 1]
        assert footprint.free_ants == 2
        assert footprint.rounds == 1

    def test_keeps_growing_while_affordable(
        self,
        chain_factory: Callable[..., Board],
        state_factory: Callable[..., TurnState],
    ) -> None:
        board = chain_factory([(0, 0), (0, 0), (1, 3), (0, 0), (2, 3)])
        state = state_factory(board, my_ants={0: 8})
        footprint = expand(board, state, [0])
        assert footprint.cells == [0, 2, 1, 4, 3]
        assert footprint.free_ants == 0
        assert footprint.rounds == 2

    def test_stops_when_resources_exhausted(
        self,
        chain_factory: Callable[..., Board],
        state_factory: Callable[..., TurnState],
    ) -> None:
        board = chain_factory([(0, 0), (1, 3), (2, 3)])
        state = state_factory(board, my_ants={0: 100})
        footprint = expand(board, state, [0])
        assert footprint.cells == [0, 1, 2]
        assert footprint.free_ants == 96

    def test_custom_ant_cost(
        self,
        chain_board: Board,
        state_factory: Callable[..., TurnState],
    ) -> None:
        state = state_factory(chain_board, my_ants={0: 7})
        footprint = expand(chain_board, state, [0], ant_cost=3)
        assert footprint.spent == 6
        assert footprint.free_ants == 1

    def test_does_not_touch_state(
        self,
        chain_board: Board,
        state_factory: Callable[..., TurnState],
    ) -> None:
        state = state_factory(chain_board, my_ants={0: 4})
        before = state.resources.copy()
        expand(chain_board, state, [0])
        assert (state.resources == before).all()

    def test_mismatched_state_rejected(self, chain_board: Board) -> None:
        with pytest.raises(ValueError, match="turn state covers"):
            expand(chain_board, TurnState.empty(5), [0])

    def test_budget_and_bases_on_random_grids(
        self,
        hex_grid_factory: Callable[..., Board],
        state_factory: Callable[..., TurnState],
    ) -> None:
        for ants in (0, 3, 10, 40):
            board = hex_grid_factory(8, 6, bases=2)
            state = state_factory(board, my_ants={board.my_bases[0]: ants})
            footprint = expand(board, state, board.my_bases)

            assert isinstance(footprint, Footprint)
            assert footprint.cells[:2] == list(board.my_bases)
            assert len(footprint.cells) <= len(board)
            assert len(set(footprint.cells)) == len(footprint.cells)
            assert footprint.free_ants >= 0
            assert footprint.spent + footprint.free_ants == ants
            assert footprint.spent <= ants
