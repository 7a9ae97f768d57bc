"""
Difficulty Curve
================

Fall speed and spawn interval as pure functions of elapsed run time.

Fall speed grows linearly with no cap, so a long enough run always ends.
The spawn interval decays linearly down to a fixed floor.
"""

from __future__ import annotations

from typing import Optional

from square_dodger.dodger_core.config_loader import DifficultyConfig, GameConfig, get_config


def fall_speed(elapsed: float, cfg: DifficultyConfig) -> float:
    """Obstacle fall speed in units/s after ``elapsed`` seconds."""
    return cfg.base_speed + elapsed * cfg.speed_growth


def spawn_interval(elapsed: float, cfg: DifficultyConfig) -> float:
    """Seconds between spawns after ``elapsed`` seconds."""
    return max(cfg.min_interval, cfg.base_interval - elapsed * cfg.interval_decay)


class DifficultyCurve:
    """Binds the difficulty functions to one configuration."""

    def __init__(self, config: Optional[GameConfig] = None):
        if config is None:
            config = get_config()
        self._cfg = config.difficulty

    def fall_speed(self, elapsed: float) -> float:
        return fall_speed(elapsed, self._cfg)

    def spawn_interval(self, elapsed: float) -> float:
        return spawn_interval(elapsed, self._cfg)

    def floor_reached_at(self) -> float:
        """
        Elapsed time at which the spawn interval hits its floor.

        Returns:
            Seconds, or ``float("inf")`` if the interval never decays.
        """
        if self._cfg.interval_decay <= 0:
            return float("inf")
        return (self._cfg.base_interval - self._cfg.min_interval) / self._cfg.interval_decay
