"""Shared fixtures for the hexcolony test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
import pytest
from numpy.random import Generator

from hexcolony.world.board import Board
from hexcolony.world.turn_state import TurnState

# Axial steps per neighbour slot, east first then counter-clockwise
_STEPS = ((1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1))

_CHAIN_FEED = """\
4
0 0 1 -1 -1 -1 -1 -1
0 0 2 -1 -1 0 -1 -1
2 10 3 -1 -1 1 -1 -1
0 0 -1 -1 -1 2 -1 -1
1
0
3
"""


def _make_chain(
    cells: Sequence[tuple[int, int]],
    my_bases: Sequence[int] = (0,),
    opp_bases: Sequence[int] | None = None,
) -> Board:
    """Build a straight east-west chain from ``(type, resources)`` pairs.

    The opponent base defaults to the last cell of the chain.
    """
    last = len(cells) - 1
    if opp_bases is None:
        opp_bases = (last,)
    rows = []
    for i, (type_code, resources) in enumerate(cells):
        east = i + 1 if i < last else -1
        west = i - 1 if i > 0 else -1
        rows.append((type_code, resources, [east, -1, -1, west, -1, -1]))
    return Board.from_rows(rows, my_bases, opp_bases)


def _make_hex_grid(
    width: int,
    height: int,
    rng: Generator,
    *,
    bases: int = 1,
) -> Board:
    """Build a ``width`` x ``height`` axial-parallelogram board with random cells."""
    rows = []
    for r in range(height):
        for q in range(width):
            neighbours = []
            for dq, dr in _STEPS:
                nq, nr = q + dq, r + dr
                inside = 0 <= nq < width and 0 <= nr < height
                neighbours.append(nr * width + nq if inside else -1)
            type_code = int(rng.integers(0, 3))
            resources = int(rng.integers(1, 20)) if type_code else 0
            rows.append((type_code, resources, neighbours))
    picks = rng.choice(width * height, size=2 * bases, replace=False)
    my_bases = [int(i) for i in picks[:bases]]
    opp_bases = [int(i) for i in picks[bases:]]
    return Board.from_rows(rows, my_bases, opp_bases)


def _make_state(
    board: Board,
    *,
    my_ants: dict[int, int] | None = None,
    opp_ants: dict[int, int] | None = None,
    resources: dict[int, int] | None = None,
) -> TurnState:
    """Snapshot with the board's starting resources and sparse ant counts."""
    state = TurnState.empty(len(board))
    state.resources[:] = [c.resources for c in board.cells]
    for index, count in (resources or {}).items():
        state.resources[index] = count
    for index, count in (my_ants or {}).items():
        state.my_ants[index] = count
    for index, count in (opp_ants or {}).items():
        state.opp_ants[index] = count
    return state


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def chain_board() -> Board:
    """Base 0 - empty 1 - crystal(10) 2, opponent base on 2."""
    return _make_chain([(0, 0), (0, 0), (2, 10)])


@pytest.fixture
def hex_grid_factory(rng: Generator) -> Callable[..., Board]:
    """Build seeded random hex grids: ``factory(width, height, bases=1)``."""

    def _factory(width: int, height: int, *, bases: int = 1) -> Board:
        return _make_hex_grid(width, height, rng, bases=bases)

    return _factory


@pytest.fixture
def chain_factory() -> Callable[..., Board]:
    """Build chains: ``factory([(type, resources), ...], my_bases=(0,))``."""
    return _make_chain


@pytest.fixture
def state_factory() -> Callable[..., TurnState]:
    """Build snapshots: ``factory(board, my_ants={...}, opp_ants={...})``."""
    return _make_state


@pytest.fixture
def chain_feed() -> str:
    """Map feed for base 0 - empty 1 - crystal(10) 2 - opponent base 3."""
    return _CHAIN_FEED
