"""Cell — a single hexagon in the board graph.

A cell knows its type, the resources it started the match with, and the
indices of its up to six neighbours.  Live resource counts change every
turn and are kept in ``TurnState`` instead, so the cell itself is fixed
for the whole match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NEIGHBOUR_SLOTS = 6


class CellType(Enum):
    """What a cell yields when harvested."""

    EMPTY = 0
    EGG = 1
    CRYSTAL = 2


@dataclass(frozen=True)
class Cell:
    """A single hexagon on the board.

    Attributes:
        index: Dense position of this cell in ``Board.cells``.
        cell_type: Resource kind, fixed for the match.
        resources: Resource count from the initial map description.
        neighbours: Six neighbour slots in feed order; ``None`` where the
            map edge leaves a slot empty.
    """

    index: int
    cell_type: CellType = CellType.EMPTY
    resources: int = 0
    neighbours: tuple[int | None, ...] = (None,) * NEIGHBOUR_SLOTS

    @property
    def is_resource(self) -> bool:
        """Return True if the cell can ever hold eggs or crystals."""
        return self.cell_type is not CellType.EMPTY
