"""
Obstacle Field
==============

Owns the falling squares: creation, integration, pruning and overlap queries.
"""

from __future__ import annotations

from typing import List, Optional

from square_dodger.dodger_core.config_loader import GameConfig, get_config
from square_dodger.dodger_core.entities import Obstacle, Rect


class ObstacleField:
    """
    Ordered collection of obstacles.

    Iteration order is spawn order. Obstacles never move horizontally, so the
    only per-tick work is a vertical integration followed by a filter.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize obstacle field.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._spawn_y = config.obstacles.spawn_y
        self._prune_margin = config.obstacles.prune_margin

        self._obstacles: List[Obstacle] = []
        self._next_uid = 0

    @property
    def obstacles(self) -> List[Obstacle]:
        """Live obstacles in spawn order. Do not mutate."""
        return self._obstacles

    @property
    def count(self) -> int:
        return len(self._obstacles)

    @property
    def spawn_y(self) -> float:
        return self._spawn_y

    @property
    def prune_margin(self) -> float:
        return self._prune_margin

    def spawn(self, x: float, size: float, y: Optional[float] = None) -> Obstacle:
        """
        Add an obstacle.

        Args:
            x: Center X.
            size: Side length.
            y: Center Y. Defaults to the configured spawn height.

        Returns:
            The created obstacle.
        """
        obstacle = Obstacle(
            uid=self._next_uid,
            x=x,
            y=self._spawn_y if y is None else y,
            size=size
        )
        self._next_uid += 1
        self._obstacles.append(obstacle)
        return obstacle

    def step(self, fall_speed: float, dt: float) -> None:
        """Move every obstacle down by ``fall_speed * dt``."""
        dy = fall_speed * dt
        for obstacle in self._obstacles:
            obstacle.y += dy

    def prune(self, world_height: float) -> int:
        """
        Drop obstacles that fell past the bottom margin.

        Returns:
            Number of obstacles removed.
        """
        before = len(self._obstacles)
        self._obstacles = [
            o for o in self._obstacles
            if not o.is_past(world_height, self._prune_margin)
        ]
        return before - len(self._obstacles)

    def first_overlap(self, rect: Rect) -> Optional[Obstacle]:
        """First obstacle (in spawn order) overlapping ``rect``, or None."""
        for obstacle in self._obstacles:
            if obstacle.rect.overlaps(rect):
                return obstacle
        return None

    def rects(self) -> List[Rect]:
        return [o.rect for o in self._obstacles]

    def clear(self) -> None:
        """Remove all obstacles. UIDs keep counting up."""
        self._obstacles = []
