"""Frontier search — nearest qualifying cell from a set of controlled cells.

A breadth-first search seeded from every controlled cell at once.  Each
seed is its own predecessor; every other visited cell records the cell
it was first reached from, so the route back to the footprint can be
rebuilt once a target is dequeued.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexcolony.world.board import Board
    from hexcolony.world.turn_state import TurnState

CellPredicate = Callable[[int], bool]

_UNVISITED = -1


def find_frontier(
    board: Board,
    controlled: Sequence[int],
    predicate: CellPredicate,
) -> list[int] | None:
    """Return the hop path to the nearest uncontrolled cell matching ``predicate``.

    Seeds are queued in ``controlled`` order and neighbours are expanded
    in slot order 0..5, so ties between equally near targets always go
    to the one discovered first.

    Args:
        board: The hex graph to search.
        controlled: Cells already held; at least the bases.
        predicate: Test applied to each dequeued non-seed cell.

    Returns:
        The path ordered target first, ending at the cell adjacent to the
        controlled set (the controlled ancestor itself is excluded), or
        None when no qualifying cell is reachable.

    Raises:
        ValueError: If ``controlled`` is empty.
    """
    if not controlled:
        msg = "frontier search needs at least one controlled cell"
        raise ValueError(msg)

    came_from = [_UNVISITED] * len(board)
    queue: deque[int] = deque()
    for seed in controlled:
        if came_from[seed] == _UNVISITED:
            came_from[seed] = seed
            queue.append(seed)

    while queue:
        index = queue.popleft()
        if came_from[index] != index and predicate(index):
            path = []
            while came_from[index] != index:
                path.append(index)
                index = came_from[index]
            return path
        for n in board.neighbours(index):
            if came_from[n] == _UNVISITED:
                came_from[n] = index
                queue.append(n)
    return None


def harvestable(board: Board, state: TurnState) -> CellPredicate:
    """Build the predicate for cells that still hold eggs or crystals."""
    resources = state.resources

    def _check(index: int) -> bool:
        return board.cells[index].is_resource and bool(resources[index] > 0)

    return _check
