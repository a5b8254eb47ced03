"""Footprint expansion — greedy growth toward the nearest resources.

Starting from the bases, the colony repeatedly annexes the shortest
path to the nearest harvestable cell, paying ``ant_cost`` ants for every
new hop, until the ant pool can no longer afford the next path or no
harvestable cell is reachable.  The first path is always taken so a
colony short on ants still heads somewhere.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hexcolony.planning.search import find_frontier, harvestable

if TYPE_CHECKING:
    from hexcolony.world.board import Board
    from hexcolony.world.turn_state import TurnState

logger = logging.getLogger(__name__)

DEFAULT_ANT_COST = 2


@dataclass
class Footprint:
    """Cells claimed during one turn's planning pass.

    Attributes:
        cells: Controlled cell indices, bases first, then every admitted
            path in admission order (each path target first).
        free_ants: Ants left unspent after expansion.
        spent: Ants debited for admitted paths.
        rounds: Number of paths admitted.
    """

    cells: list[int] = field(default_factory=list)
    free_ants: int = 0
    spent: int = 0
    rounds: int = 0


def expand(
    board: Board,
    state: TurnState,
    bases: Sequence[int],
    ant_cost: int = DEFAULT_ANT_COST,
) -> Footprint:
    """Grow the controlled footprint from ``bases`` under the ant budget.

    Args:
        board: The static hex graph.
        state: This turn's counts; resources are read, never changed.
        bases: Our base cells, which seed the footprint in this order.
        ant_cost: Ants charged per newly annexed cell.

    Returns:
        The final footprint together with the unspent ant balance.

    Raises:
        ValueError: If ``bases`` is empty or ``state`` does not match the
            board size.
    """
    if len(state) != len(board):
        msg = f"turn state covers {len(state)} cells, board has {len(board)}"
        raise ValueError(msg)

    footprint = Footprint(cells=list(bases), free_ants=state.total_my_ants)
    predicate = harvestable(board, state)

    while True:
        path = find_frontier(board, footprint.cells, predicate)
        if path is None:
            logger.debug("no harvestable cell reachable, stopping")
            break

        cost = len(path) * ant_cost
        if cost > footprint.free_ants and footprint.rounds > 0:
            logger.debug(
                "path to %d costs %d, only %d ants free, stopping",
                path[0],
                cost,
                footprint.free_ants,
            )
            break

        debit = min(cost, footprint.free_ants)
        footprint.cells.extend(path)
        footprint.free_ants -= debit
        footprint.spent += debit
        footprint.rounds += 1

    return footprint
