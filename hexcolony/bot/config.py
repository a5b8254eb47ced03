"""Config — load bot parameters from YAML files.

The planning heuristics take their tunable constants from here, so a
different garrison size or feed variant can be tried without touching
the planning code.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from hexcolony.planning.expander import DEFAULT_ANT_COST


@dataclass
class BotConfig:
    """Top-level bot configuration.

    Attributes:
        ant_cost: Ants charged per annexed cell during expansion, and the
            default beacon strength of every controlled cell.
        with_scores: Whether each turn of the feed opens with a score line.
        message: Optional text sent alongside the beacons every turn.
        log_level: Logging level name for the diagnostics on stderr.
    """

    ant_cost: int = DEFAULT_ANT_COST
    with_scores: bool = True
    message: str = ""
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Reject settings the planner cannot work with.

        Raises:
            ValueError: If ``ant_cost`` is below 1.
        """
        if self.ant_cost < 1:
            msg = f"ant_cost must be at least 1, got {self.ant_cost}"
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> BotConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated BotConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a value is out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            ant_cost=int(data.get("ant_cost", cls.ant_cost)),
            with_scores=bool(data.get("with_scores", cls.with_scores)),
            message=str(data.get("message", cls.message) or ""),
            log_level=str(data.get("log_level", cls.log_level)).upper(),
        )
