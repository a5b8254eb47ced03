"""Parser for the line-based match feed.

The referee sends the map once, then one block of counts per turn.  Both
readers take an iterator of raw lines so they work the same on stdin and
on a recorded transcript.  Any malformed line is fatal for the match.
"""

from __future__ import annotations

from collections.abc import Iterator

from hexcolony.world.board import Board
from hexcolony.world.cell import NEIGHBOUR_SLOTS, CellType
from hexcolony.world.turn_state import TurnState

_VALID_TYPES = {t.value for t in CellType}


class FeedError(ValueError):
    """Raised when a feed line cannot be turned into board or turn data."""


def _next_ints(lines: Iterator[str], expected: int | None, what: str) -> list[int]:
    """Read one line and parse it as whitespace-separated integers.

    Raises:
        EOFError: If the feed is exhausted.
        FeedError: If a token is not an integer or the count is wrong.
    """
    try:
        line = next(lines)
    except StopIteration:
        msg = f"feed ended while reading {what}"
        raise EOFError(msg) from None

    tokens = line.split()
    try:
        values = [int(tok) for tok in tokens]
    except ValueError:
        msg = f"non-integer token in {what}: {line.strip()!r}"
        raise FeedError(msg) from None
    if expected is not None and len(values) != expected:
        msg = f"{what} needs {expected} values, got {len(values)}: {line.strip()!r}"
        raise FeedError(msg)
    return values


def read_board(lines: Iterator[str]) -> Board:
    """Read the one-off map description into a Board.

    Format: a cell count; per cell ``type resources n0 .. n5`` with ``-1``
    for an absent neighbour; a base count; our base indices; opponent
    base indices.

    Raises:
        EOFError: If the feed ends early.
        FeedError: If any line is malformed or the graph is inconsistent.
    """
    (count,) = _next_ints(lines, 1, "cell count")
    if count <= 0:
        msg = f"cell count must be positive, got {count}"
        raise FeedError(msg)

    rows = []
    for i in range(count):
        type_code, resources, *neighbours = _next_ints(
            lines,
            2 + NEIGHBOUR_SLOTS,
            f"cell {i}",
        )
        if type_code not in _VALID_TYPES:
            msg = f"cell {i} has unknown type {type_code}"
            raise FeedError(msg)
        if resources < 0:
            msg = f"cell {i} has negative resources {resources}"
            raise FeedError(msg)
        for n in neighbours:
            if not -1 <= n < count:
                msg = f"cell {i} names neighbour {n}, outside 0..{count - 1}"
                raise FeedError(msg)
        rows.append((type_code, resources, neighbours))

    (base_count,) = _next_ints(lines, 1, "base count")
    my_bases = _next_ints(lines, base_count, "my bases")
    opp_bases = _next_ints(lines, base_count, "opponent bases")

    try:
        return Board.from_rows(rows, my_bases, opp_bases)
    except ValueError as exc:
        raise FeedError(str(exc)) from exc


def read_turn(
    lines: Iterator[str],
    board: Board,
    *,
    with_scores: bool = True,
) -> TurnState:
    """Read one turn of counts for every cell of ``board``.

    Args:
        lines: Feed line iterator positioned at the start of a turn.
        board: The match board, for the cell count.
        with_scores: Whether the turn opens with a ``my_score opp_score``
            line, as the live referee sends.

    Raises:
        EOFError: If the feed is exhausted before the turn starts
            (normally: the match is over).
        FeedError: If any line is malformed, a count is negative, or the
            feed ends partway through the turn.
    """
    my_score = opp_score = 0
    rows = []
    started = False
    try:
        if with_scores:
            my_score, opp_score = _next_ints(lines, 2, "score line")
            started = True
        for i in range(len(board)):
            row = _next_ints(lines, 3, f"counts for cell {i}")
            started = True
            if min(row) < 0:
                msg = f"cell {i} has a negative count: {row}"
                raise FeedError(msg)
            rows.append(tuple(row))
    except EOFError as exc:
        if not started:
            raise
        msg = f"turn cut short after {len(rows)} of {len(board)} cells"
        raise FeedError(msg) from exc

    return TurnState.from_rows(rows, my_score=my_score, opp_score=opp_score)
