"""
Scoring System
==============

Survival score and process-lifetime best score.
"""

from __future__ import annotations

import math
from typing import Optional

from square_dodger.dodger_core.config_loader import GameConfig, get_config


class ScoreTracker:
    """
    Tracks the current run's score and the best score seen so far.

    Survival points are floored on every tick: a tick of ``dt`` seconds adds
    ``floor(points_per_second * dt)``. At 60 FPS with 100 points/s that is one
    point per frame (60/s), not 100/s. The fractional remainder of each tick is
    discarded rather than carried over.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize score tracker.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._rate = config.scoring.points_per_second
        self._score: int = 0
        self._best: int = 0

    @property
    def score(self) -> int:
        """Current run score."""
        return self._score

    @property
    def best(self) -> int:
        """Best finished-run score since the process started."""
        return self._best

    def points_for(self, dt: float) -> int:
        """Points awarded for surviving a tick of ``dt`` seconds."""
        if dt <= 0:
            return 0
        return int(math.floor(self._rate * dt))

    def add_survival(self, dt: float) -> int:
        """
        Award survival points for one tick.

        Returns:
            Points added.
        """
        points = self.points_for(dt)
        self._score += points
        return points

    def commit_best(self) -> int:
        """Fold the current score into the best score and return the best."""
        self._best = max(self._best, self._score)
        return self._best

    def reset(self) -> None:
        """Reset the run score. The best score is kept."""
        self._score = 0
