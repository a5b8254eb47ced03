"""BotEngine — the read-plan-write turn loop.

Owns the match board and drives each turn in a fixed order:

1. Read the turn's counts into a fresh TurnState
2. Expand the footprint from the bases under the ant budget
3. Allocate beacon strengths, reinforcing contested cells
4. Write the command line and flush

Nothing planned in one turn survives into the next; only the board and
the turn counter persist.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from hexcolony.bot.config import BotConfig
from hexcolony.feed.commands import format_commands
from hexcolony.feed.parser import read_board, read_turn
from hexcolony.planning.allocator import Beacon, allocate
from hexcolony.planning.expander import Footprint, expand

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hexcolony.world.board import Board
    from hexcolony.world.turn_state import TurnState

logger = logging.getLogger(__name__)


@dataclass
class BotEngine:
    """Plans one turn at a time against a fixed board.

    Attributes:
        config: Loaded bot configuration.
        board: The match board, set by ``setup``.
        turn: Number of turns answered so far.
        last_footprint: Footprint of the most recent turn, for inspection.
    """

    config: BotConfig = field(default_factory=BotConfig)
    board: Board | None = None
    turn: int = 0
    last_footprint: Footprint | None = field(default=None, repr=False)

    def setup(self, lines: Iterator[str]) -> Board:
        """Read the map description and keep the resulting board."""
        self.board = read_board(lines)
        logger.info(
            "board ready: %d cells, bases %s vs %s",
            len(self.board),
            list(self.board.my_bases),
            list(self.board.opp_bases),
        )
        return self.board

    def plan(self, state: TurnState) -> list[Beacon]:
        """Compute this turn's beacons.

        Raises:
            RuntimeError: If called before ``setup``.
        """
        if self.board is None:
            msg = "plan() called before setup()"
            raise RuntimeError(msg)

        cost = self.config.ant_cost
        footprint = expand(self.board, state, self.board.my_bases, cost)
        beacons = allocate(footprint.cells, state, footprint.free_ants, cost)
        self.last_footprint = footprint

        logger.debug(
            "turn %d: %d ants, footprint %s, spent %d, %d left",
            self.turn,
            state.total_my_ants,
            footprint.cells,
            footprint.spent,
            footprint.free_ants,
        )
        for beacon in beacons:
            if beacon.strength > cost:
                logger.debug(
                    "turn %d: reinforced cell %d to %d against %d",
                    self.turn,
                    beacon.cell,
                    beacon.strength,
                    beacon.opp_ants,
                )
        return beacons

    def step(self, state: TurnState) -> list[Beacon]:
        """Plan a turn and advance the turn counter."""
        beacons = self.plan(state)
        self.turn += 1
        return beacons

    def respond(self, state: TurnState) -> str:
        """Plan a turn and return the command line for it."""
        return format_commands(self.step(state), self.config.message)

    def play(self, stdin: TextIO, stdout: TextIO) -> int:
        """Run a whole match: setup, then one response per turn until EOF.

        Returns:
            The number of turns played.
        """
        lines = iter(stdin.readline, "")
        board = self.setup(lines)
        while True:
            try:
                state = read_turn(lines, board, with_scores=self.config.with_scores)
            except EOFError:
                logger.info("feed closed after %d turns", self.turn)
                return self.turn
            print(self.respond(state), file=stdout, flush=True)
