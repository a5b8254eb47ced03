"""Pygame replay viewer for recorded match feeds.

Loads a transcript (the exact text the referee sends: map, then turns),
replays the bot's planning turn by turn, and draws the hex board with
the chosen footprint and beacon strengths.  Playback advances at a
configurable turn rate while the display refreshes at the frame rate.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

from hexcolony.feed.parser import read_board, read_turn
from hexcolony.world.cell import CellType

if TYPE_CHECKING:
    from hexcolony.bot.engine import BotEngine
    from hexcolony.planning.allocator import Beacon
    from hexcolony.world.board import Board
    from hexcolony.world.turn_state import TurnState

# Colour palette
_BG = (25, 25, 35)
_EMPTY = (60, 60, 70)
_TEXT = (220, 220, 220)
_FOOTPRINT = (255, 255, 255)
_MY_BASE = (70, 140, 255)
_OPP_BASE = (255, 80, 80)

# Resource colour ranges (depleted -> full)
_EGG_LO = np.array([70, 60, 40], dtype=np.float64)
_EGG_HI = np.array([240, 200, 90], dtype=np.float64)
_CRYSTAL_LO = np.array([40, 60, 80], dtype=np.float64)
_CRYSTAL_HI = np.array([80, 220, 240], dtype=np.float64)

_SQRT3 = math.sqrt(3.0)


def load_transcript(
    path: str | Path,
    *,
    with_scores: bool = True,
) -> tuple[Board, list[TurnState]]:
    """Read a recorded feed into a board and every complete turn.

    Raises:
        FeedError: If the transcript is malformed.
    """
    with Path(path).open("r") as f:
        lines = iter(f.read().splitlines())
    board = read_board(lines)
    turns: list[TurnState] = []
    while True:
        try:
            turns.append(read_turn(lines, board, with_scores=with_scores))
        except EOFError:
            return board, turns


def hex_corners(cx: float, cy: float, size: float) -> list[tuple[float, float]]:
    """Return the six corners of a pointy-top hexagon centred on ``(cx, cy)``."""
    corners = []
    for k in range(6):
        angle = math.radians(60 * k - 30)
        corners.append((cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return corners


class PygameRenderer:
    """Replays recorded turns through a BotEngine in a Pygame window.

    Attributes:
        engine: Bot engine with its board already set up.
        turns: Recorded turn snapshots to replay.
        hex_size: Hexagon radius in pixels.
        screen: The Pygame display surface.
    """

    # Speed presets in turns per second
    _SPEED_STEPS: ClassVar[list[float]] = [0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0]

    def __init__(
        self,
        engine: BotEngine,
        turns: list[TurnState],
        hex_size: int = 18,
        turns_per_second: float = 2.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: Engine whose ``board`` is set.
            turns: Recorded turn snapshots.
            hex_size: Hexagon radius in pixels.
            turns_per_second: Playback rate.

        Raises:
            ValueError: If the engine has no board.
        """
        if engine.board is None:
            msg = "engine has no board; call setup() first"
            raise ValueError(msg)
        self.engine = engine
        self.board = engine.board
        self.turns = turns
        self.hex_size = hex_size
        self.turns_per_second = turns_per_second
        self._speed_index = self._nearest_speed(turns_per_second)
        self._turn_accumulator = 0.0
        self._cursor = -1
        self._state: TurnState | None = None
        self._beacons: list[Beacon] = []

        self._centres = self._layout()
        span_x = max((x for x, _ in self._centres.values()), default=0.0)
        span_y = max((y for _, y in self._centres.values()), default=0.0)
        self._panel_width = 240
        self._win_w = int(span_x + 2 * hex_size) + self._panel_width
        self._win_h = max(int(span_y + 2 * hex_size), 400)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("hexcolony")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.small_font = pygame.font.SysFont("monospace", 10)
        self.running = True
        self.paused = False

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        diffs = [abs(s - tps) for s in self._SPEED_STEPS]
        return diffs.index(min(diffs))

    def _layout(self) -> dict[int, tuple[float, float]]:
        """Convert axial coordinates to pixel centres with a margin."""
        size = self.hex_size
        raw = {
            i: (size * _SQRT3 * (q + r / 2.0), size * 1.5 * r)
            for i, (q, r) in self.board.axial_coordinates().items()
        }
        min_x = min(x for x, _ in raw.values())
        min_y = min(y for _, y in raw.values())
        return {i: (x - min_x + size, y - min_y + size) for i, (x, y) in raw.items()}

    def advance(self) -> bool:
        """Plan the next recorded turn; return False when none are left."""
        if self._cursor + 1 >= len(self.turns):
            return False
        self._cursor += 1
        self._state = self.turns[self._cursor]
        self._beacons = self.engine.step(self._state)
        return True

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step playback, render.

        Args:
            fps: Target frames per second.
        """
        self.advance()
        while self.running:
            dt = self.clock.tick(fps) / 1000.0
            self._handle_events()
            if not self.paused:
                self._turn_accumulator += self.turns_per_second * dt
                steps = int(self._turn_accumulator)
                self._turn_accumulator -= steps
                for _ in range(steps):
                    if not self.advance():
                        self.paused = True
                        break
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_RIGHT:
                    self.advance()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.turns_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.turns_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_cells()
        self._draw_beacons()
        self._draw_info_panel()
        pygame.display.flip()

    def _cell_colour(self, index: int) -> tuple[int, int, int]:
        """Shade a cell by type and by how much of its resource is left."""
        cell = self.board.cells[index]
        if cell.cell_type is CellType.EMPTY:
            return _EMPTY
        left = cell.resources
        if self._state is not None:
            left = int(self._state.resources[index])
        t = min(left / cell.resources, 1.0) if cell.resources > 0 else 0.0
        lo, hi = (
            (_EGG_LO, _EGG_HI)
            if cell.cell_type is CellType.EGG
            else (_CRYSTAL_LO, _CRYSTAL_HI)
        )
        colour = lo + t * (hi - lo)
        return tuple(colour.astype(int).tolist())

    def _draw_cells(self) -> None:
        """Draw every hexagon, base markers, and ant counts."""
        size = self.hex_size
        my_bases = set(self.board.my_bases)
        opp_bases = set(self.board.opp_bases)
        for index, (cx, cy) in self._centres.items():
            corners = hex_corners(cx, cy, size - 1)
            pygame.draw.polygon(self.screen, self._cell_colour(index), corners)
            if index in my_bases:
                pygame.draw.polygon(self.screen, _MY_BASE, corners, width=3)
            elif index in opp_bases:
                pygame.draw.polygon(self.screen, _OPP_BASE, corners, width=3)

            if self._state is None:
                continue
            mine = int(self._state.my_ants[index])
            theirs = int(self._state.opp_ants[index])
            if mine:
                surf = self.small_font.render(str(mine), True, _MY_BASE)
                self.screen.blit(surf, (cx - size / 2, cy - size / 2))
            if theirs:
                surf = self.small_font.render(str(theirs), True, _OPP_BASE)
                self.screen.blit(surf, (cx, cy - size / 2))

    def _draw_beacons(self) -> None:
        """Outline footprint cells and label each with its beacon strength."""
        size = self.hex_size
        for beacon in self._beacons:
            cx, cy = self._centres[beacon.cell]
            pygame.draw.polygon(
                self.screen,
                _FOOTPRINT,
                hex_corners(cx, cy, size - 3),
                width=1,
            )
            surf = self.small_font.render(str(beacon.strength), True, _TEXT)
            self.screen.blit(surf, (cx - 3, cy + 1))

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self._win_w - self._panel_width + 10
        y = 10

        lines = [
            f"Turn: {self._cursor + 1}/{len(self.turns)}",
            f"Speed: {self.turns_per_second:.2f} t/s",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
        ]
        if self._state is not None:
            footprint = self.engine.last_footprint
            reinforced = sum(
                1 for b in self._beacons if b.strength > self.engine.config.ant_cost
            )
            lines += [
                f"Score: {self._state.my_score} - {self._state.opp_score}",
                f"Ants: {self._state.total_my_ants}",
                f"Opp ants: {int(self._state.opp_ants.sum())}",
                "",
                "--- Plan ---",
                f"Beacons: {len(self._beacons)}",
                f"Reinforced: {reinforced}",
            ]
            if footprint is not None:
                lines += [
                    f"Paths: {footprint.rounds}",
                    f"Spent: {footprint.spent}",
                    f"Free: {footprint.free_ants}",
                ]

        lines += [
            "",
            "--- Controls ---",
            "SPACE: pause",
            "RIGHT: next turn",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
