"""TurnState — the per-turn snapshot of counts on every cell.

Resource, friendly-ant and opponent-ant counts are stored as parallel
NumPy integer arrays indexed by cell.  A fresh TurnState replaces the
previous one each turn; planning only ever reads it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(eq=False)
class TurnState:
    """Counts for a single turn.

    Attributes:
        resources: Eggs or crystals left on each cell.
        my_ants: Our ants on each cell.
        opp_ants: Opponent ants on each cell.
        my_score: Our score at the start of the turn.
        opp_score: Opponent score at the start of the turn.
    """

    resources: NDArray[np.int64]
    my_ants: NDArray[np.int64]
    opp_ants: NDArray[np.int64]
    my_score: int = 0
    opp_score: int = 0

    def __post_init__(self) -> None:
        """Coerce arrays to int64 and check shape and sign.

        Raises:
            ValueError: If the arrays differ in length or hold negatives.
        """
        self.resources = np.asarray(self.resources, dtype=np.int64)
        self.my_ants = np.asarray(self.my_ants, dtype=np.int64)
        self.opp_ants = np.asarray(self.opp_ants, dtype=np.int64)

        sizes = {a.shape for a in (self.resources, self.my_ants, self.opp_ants)}
        if len(sizes) != 1 or self.resources.ndim != 1:
            msg = f"count arrays must be 1-D and equal length, got {sizes}"
            raise ValueError(msg)
        for name in ("resources", "my_ants", "opp_ants"):
            if np.any(getattr(self, name) < 0):
                msg = f"{name} holds a negative count"
                raise ValueError(msg)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[tuple[int, int, int]],
        *,
        my_score: int = 0,
        opp_score: int = 0,
    ) -> TurnState:
        """Build a snapshot from ``(resources, my_ants, opp_ants)`` rows."""
        table = np.array(rows, dtype=np.int64).reshape(-1, 3)
        return cls(
            resources=table[:, 0].copy(),
            my_ants=table[:, 1].copy(),
            opp_ants=table[:, 2].copy(),
            my_score=my_score,
            opp_score=opp_score,
        )

    @classmethod
    def empty(cls, size: int) -> TurnState:
        """Return an all-zero snapshot for a board of ``size`` cells."""
        zeros = np.zeros(size, dtype=np.int64)
        return cls(resources=zeros.copy(), my_ants=zeros.copy(), opp_ants=zeros)

    def __len__(self) -> int:
        return int(self.resources.shape[0])

    @property
    def total_my_ants(self) -> int:
        """Return the size of our whole ant pool this turn."""
        return int(self.my_ants.sum())
