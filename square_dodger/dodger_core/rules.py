"""
Game Rules
==========

Handles run states, paddle movement bounds and delta-time sanitizing.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Optional, Tuple

from square_dodger.dodger_core.config_loader import GameConfig, get_config
from square_dodger.dodger_core.entities import Rect

logger = logging.getLogger(__name__)


class RunState(enum.Enum):
    """Lifecycle of a single run."""
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class PlayerRules:
    """
    Paddle geometry, easing and horizontal bounds.

    Easing is exponential with a per-second decay base: after ``dt`` seconds
    the remaining distance to the target is multiplied by ``base ** dt``.
    Splitting one second into sixty ticks gives the same result as a single
    one-second tick.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize player rules.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._width = config.player.width
        self._height = config.player.height
        self._bottom_offset = config.player.bottom_offset
        self._decay_base = config.player.ease_decay_base

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def decay_base(self) -> float:
        return self._decay_base

    def x_range(self, world_width: float) -> Tuple[float, float]:
        """
        Valid paddle center X range for a world width.

        A world narrower than the paddle collapses the range to its center.
        """
        half = self._width / 2.0
        if world_width < self._width:
            return (world_width / 2.0, world_width / 2.0)
        return (half, world_width - half)

    def clamp_x(self, x: float, world_width: float) -> float:
        min_x, max_x = self.x_range(world_width)
        return max(min_x, min(max_x, x))

    def ease_factor(self, dt: float) -> float:
        """Fraction of the remaining distance left after ``dt`` seconds."""
        return self._decay_base ** dt

    def ease_x(self, x: float, target: float, dt: float) -> float:
        return target + (x - target) * self.ease_factor(dt)

    def top_y(self, world_height: float) -> float:
        """Y of the paddle's top edge."""
        return world_height - self._bottom_offset

    def rect(self, x: float, world_height: float) -> Rect:
        return Rect(
            x - self._width / 2.0,
            self.top_y(world_height),
            self._width,
            self._height
        )


class ClockRules:
    """Sanitizes frame deltas so one bad sample cannot derail the simulation."""

    def __init__(self, config: Optional[GameConfig] = None):
        if config is None:
            config = get_config()

        self._max_advance = config.clock.max_advance
        self._max_frame_delta = config.clock.max_frame_delta

    @property
    def max_advance(self) -> float:
        return self._max_advance

    @property
    def max_frame_delta(self) -> float:
        return self._max_frame_delta

    def sanitize(self, dt: float, limit: Optional[float] = None) -> float:
        """
        Clamp a delta into ``[0, limit]``.

        Args:
            dt: Raw delta in seconds.
            limit: Upper bound. Defaults to max_advance.

        Returns:
            Clamped delta. NaN and negative values become 0.
        """
        if limit is None:
            limit = self._max_advance

        if not math.isfinite(dt):
            if dt > 0:
                logger.debug("infinite delta clamped to %.3fs", limit)
                return limit
            logger.debug("non-finite delta %r treated as 0", dt)
            return 0.0
        if dt < 0:
            logger.debug("negative delta %.6fs treated as 0", dt)
            return 0.0
        if dt > limit:
            logger.debug("delta %.3fs clamped to %.3fs", dt, limit)
            return limit
        return dt


class GameRules:
    """
    Combined interface for all game rules.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize game rules.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self.player = PlayerRules(config)
        self.clock = ClockRules(config)
