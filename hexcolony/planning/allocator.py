"""Strength allocation — turn a footprint into weighted beacons.

Every controlled cell gets a garrison of ``ant_cost``.  Cells that still
hold resources and where the opponent outnumbers that garrison are then
topped up to match, first come first served in footprint order, for as
long as the leftover ant balance covers the whole deficit.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hexcolony.planning.expander import DEFAULT_ANT_COST

if TYPE_CHECKING:
    from hexcolony.world.turn_state import TurnState


@dataclass(frozen=True)
class Beacon:
    """A routing hint for the movement layer.

    Attributes:
        cell: Target cell index.
        strength: Relative ant concentration wanted at ``cell`` (>= 1).
        resources: Resources on the cell when the beacon was decided.
        opp_ants: Opponent ants on the cell when the beacon was decided.
    """

    cell: int
    strength: int
    resources: int = 0
    opp_ants: int = 0


def allocate(
    controlled: Sequence[int],
    state: TurnState,
    free_ants: int,
    ant_cost: int = DEFAULT_ANT_COST,
) -> list[Beacon]:
    """Assign a beacon strength to every controlled cell.

    Args:
        controlled: Footprint cells in admission order.
        state: This turn's counts.
        free_ants: Ants left over from expansion, available for
            reinforcing contested cells.
        ant_cost: Default garrison per cell.

    Returns:
        One beacon per controlled cell, in ``controlled`` order.
    """
    beacons = []
    balance = max(free_ants, 0)
    for cell in controlled:
        resources = int(state.resources[cell])
        opp_ants = int(state.opp_ants[cell])
        strength = ant_cost
        if resources > 0 and opp_ants > ant_cost:
            deficit = opp_ants - ant_cost
            if deficit <= balance:
                strength += deficit
                balance -= deficit
        beacons.append(
            Beacon(
                cell=cell,
                strength=strength,
                resources=resources,
                opp_ants=opp_ants,
            ),
        )
    return beacons
