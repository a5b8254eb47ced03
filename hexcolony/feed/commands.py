"""Command formatting for the referee's output line."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexcolony.planning.allocator import Beacon

SEPARATOR = ";"


def beacon_directive(beacon: Beacon) -> str:
    """Return the ``BEACON <cell> <strength>`` directive for a beacon."""
    return f"BEACON {beacon.cell} {beacon.strength}"


def message_directive(text: str) -> str:
    """Return a ``MESSAGE`` directive; newlines would end the command line."""
    return "MESSAGE " + " ".join(text.split())


def format_commands(beacons: Iterable[Beacon], message: str = "") -> str:
    """Join all directives for one turn into a single line.

    An empty beacon list with no message gives an empty string.
    """
    directives = [beacon_directive(b) for b in beacons]
    if message.strip():
        directives.append(message_directive(message))
    return SEPARATOR.join(directives)
