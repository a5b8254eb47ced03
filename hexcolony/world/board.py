"""Board — the static hex graph a match is played on.

The Board owns every cell, addressed by dense integer index, plus the
ordered base lists of both players.  It is built once from the map
description and only read afterwards, so planning code can share it
freely between turns.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from hexcolony.world.cell import NEIGHBOUR_SLOTS, Cell, CellType

# Axial (q, r) step for each neighbour slot: east first, then
# counter-clockwise, matching the order the feed lists neighbours in.
_AXIAL_STEPS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


@dataclass(frozen=True)
class Board:
    """The immutable hex graph for one match.

    Attributes:
        cells: All cells, ``cells[i].index == i``.
        my_bases: Our base cell indices, in feed order.
        opp_bases: Opponent base cell indices, in feed order.
    """

    cells: tuple[Cell, ...]
    my_bases: tuple[int, ...]
    opp_bases: tuple[int, ...]

    def __post_init__(self) -> None:
        """Check indices and neighbour symmetry.

        Raises:
            ValueError: If a cell is misnumbered, a neighbour or base index
                is out of range, a neighbour link is one-sided, or a base
                list is empty or repeats a cell.
        """
        size = len(self.cells)
        for i, cell in enumerate(self.cells):
            if cell.index != i:
                msg = f"cell at position {i} carries index {cell.index}"
                raise ValueError(msg)
            if len(cell.neighbours) != NEIGHBOUR_SLOTS:
                msg = f"cell {i} has {len(cell.neighbours)} neighbour slots"
                raise ValueError(msg)
            for n in cell.neighbours:
                if n is None:
                    continue
                if not 0 <= n < size:
                    msg = f"cell {i} links to {n}, outside 0..{size - 1}"
                    raise ValueError(msg)
                if i not in self.cells[n].neighbours:
                    msg = f"cell {i} links to {n} but {n} does not link back"
                    raise ValueError(msg)

        for owner, bases in (("my", self.my_bases), ("opponent", self.opp_bases)):
            if not bases:
                msg = f"board needs at least one {owner} base"
                raise ValueError(msg)
            if len(set(bases)) != len(bases):
                msg = f"{owner} bases repeat a cell: {list(bases)}"
                raise ValueError(msg)
            for base in bases:
                if not 0 <= base < size:
                    msg = f"{owner} base {base} outside 0..{size - 1}"
                    raise ValueError(msg)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[tuple[int, int, Sequence[int]]],
        my_bases: Sequence[int],
        opp_bases: Sequence[int],
    ) -> Board:
        """Build a board from ``(type, resources, neighbours)`` rows.

        Neighbour indices use ``-1`` for an absent slot, as in the map feed.

        Raises:
            ValueError: If a type code is unknown or the graph is invalid.
        """
        cells = []
        for i, (type_code, resources, neighbours) in enumerate(rows):
            cells.append(
                Cell(
                    index=i,
                    cell_type=CellType(type_code),
                    resources=resources,
                    neighbours=tuple(n if n >= 0 else None for n in neighbours),
                ),
            )
        return cls(
            cells=tuple(cells),
            my_bases=tuple(my_bases),
            opp_bases=tuple(opp_bases),
        )

    def __len__(self) -> int:
        return len(self.cells)

    def neighbours(self, index: int) -> Iterator[int]:
        """Yield the present neighbours of ``index`` in slot order 0..5."""
        for n in self.cells[index].neighbours:
            if n is not None:
                yield n

    def axial_coordinates(self) -> dict[int, tuple[int, int]]:
        """Lay the graph out on axial hex coordinates.

        Walks each connected component from its lowest index, stepping
        by the slot direction of every link.  Components after the first
        are shifted right past everything placed so far.

        Returns:
            Mapping from cell index to ``(q, r)``.
        """
        coords: dict[int, tuple[int, int]] = {}
        for start in range(len(self.cells)):
            if start in coords:
                continue
            q0 = max((q for q, _ in coords.values()), default=-2) + 2
            coords[start] = (q0, 0)
            queue = deque([start])
            while queue:
                index = queue.popleft()
                q, r = coords[index]
                for slot, n in enumerate(self.cells[index].neighbours):
                    if n is None or n in coords:
                        continue
                    dq, dr = _AXIAL_STEPS[slot]
                    coords[n] = (q + dq, r + dr)
                    queue.append(n)
        return coords
