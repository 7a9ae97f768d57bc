"""
RNG - Obstacle Spawner
======================

Seeded source of obstacle sizes and horizontal positions.

The spawner owns its own ``random.Random`` so that a fixed seed reproduces
the same obstacle sequence regardless of any other randomness in the process.
"""

from __future__ import annotations

import random
from typing import Any, Optional, Tuple

from square_dodger.dodger_core.config_loader import GameConfig, get_config


class ObstacleSpawner:
    """
    Draws the size and center X of each new obstacle.

    Draw order per obstacle is fixed (size first, then X) so sequences stay
    comparable between runs that share a seed.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize spawner.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
        """
        if config is None:
            config = get_config()

        self._min_size = config.obstacles.min_size
        self._max_size = config.obstacles.max_size
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def draw(self, world_width: float) -> Tuple[float, float]:
        """
        Draw the next obstacle's geometry.

        Args:
            world_width: Current world width.

        Returns:
            (center_x, size) such that the whole square fits horizontally.
            When the world is narrower than the square, the square is centered.
        """
        size = self._min_size + self._rng.random() * (self._max_size - self._min_size)
        free = world_width - size
        if free <= 0:
            # Still consume a draw to keep the sequence aligned
            self._rng.random()
            return (world_width / 2.0, size)
        x = size / 2.0 + self._rng.random() * free
        return (x, size)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the generator.

        Args:
            seed: New random seed. Keeps current if None.
        """
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)

    def get_state(self) -> Any:
        """Opaque generator state for checkpointing."""
        return self._rng.getstate()

    def set_state(self, state: Any) -> None:
        """Restore a state returned by get_state()."""
        self._rng.setstate(state)
