"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class WorldConfig:
    """Fallback world size used before the host reports its geometry."""
    default_width: float
    default_height: float


@dataclass(frozen=True)
class PlayerConfig:
    """Paddle geometry and easing."""
    width: float
    height: float
    bottom_offset: float     # Distance from world bottom to paddle top edge
    ease_decay_base: float   # Remaining distance fraction after one second

    @property
    def half_width(self) -> float:
        return self.width / 2.0


@dataclass(frozen=True)
class ObstacleConfig:
    """Falling square parameters."""
    min_size: float
    max_size: float
    spawn_y: float           # Center Y at spawn time (negative = above world)
    prune_margin: float      # Distance below world bottom before removal


@dataclass(frozen=True)
class DifficultyConfig:
    """Linear difficulty curve constants."""
    base_speed: float
    speed_growth: float
    base_interval: float
    interval_decay: float
    min_interval: float


@dataclass(frozen=True)
class ScoringConfig:
    """Survival scoring."""
    points_per_second: float


@dataclass(frozen=True)
class ClockConfig:
    """Delta-time sanitizing limits."""
    max_advance: float
    max_frame_delta: float


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    world: WorldConfig
    player: PlayerConfig
    obstacles: ObstacleConfig
    difficulty: DifficultyConfig
    scoring: ScoringConfig
    clock: ClockConfig


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if config.world.default_width < 0 or config.world.default_height < 0:
        raise ValueError("world default size must be non-negative")

    if config.player.width <= 0 or config.player.height <= 0:
        raise ValueError(
            f"player size must be positive, got "
            f"{config.player.width}x{config.player.height}"
        )

    if not 0.0 < config.player.ease_decay_base < 1.0:
        raise ValueError(
            f"ease_decay_base must be in (0, 1), got {config.player.ease_decay_base}"
        )

    obstacles = config.obstacles
    if obstacles.min_size <= 0:
        raise ValueError(f"obstacles.min_size must be positive, got {obstacles.min_size}")
    if obstacles.min_size > obstacles.max_size:
        raise ValueError(
            f"obstacles.min_size ({obstacles.min_size}) exceeds "
            f"max_size ({obstacles.max_size})"
        )
    if obstacles.prune_margin < 0:
        raise ValueError("obstacles.prune_margin must be non-negative")

    difficulty = config.difficulty
    if difficulty.min_interval <= 0:
        raise ValueError(
            f"difficulty.min_interval must be positive, got {difficulty.min_interval}"
        )
    if difficulty.base_interval < difficulty.min_interval:
        raise ValueError(
            f"difficulty.base_interval ({difficulty.base_interval}) is below "
            f"min_interval ({difficulty.min_interval})"
        )

    if config.scoring.points_per_second < 0:
        raise ValueError("scoring.points_per_second must be non-negative")

    clock = config.clock
    if clock.max_advance <= 0:
        raise ValueError(f"clock.max_advance must be positive, got {clock.max_advance}")
    if not 0 < clock.max_frame_delta <= clock.max_advance:
        raise ValueError(
            f"clock.max_frame_delta ({clock.max_frame_delta}) must be in "
            f"(0, max_advance={clock.max_advance}]"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    world_data = raw.get("world", {})
    world = WorldConfig(
        default_width=float(world_data.get("default_width", 400)),
        default_height=float(world_data.get("default_height", 800))
    )

    player_data = raw["player"]
    player = PlayerConfig(
        width=float(player_data["width"]),
        height=float(player_data["height"]),
        bottom_offset=float(player_data["bottom_offset"]),
        ease_decay_base=float(player_data["ease_decay_base"])
    )

    obstacle_data = raw["obstacles"]
    obstacles = ObstacleConfig(
        min_size=float(obstacle_data["min_size"]),
        max_size=float(obstacle_data["max_size"]),
        spawn_y=float(obstacle_data["spawn_y"]),
        prune_margin=float(obstacle_data.get("prune_margin", 40.0))
    )

    difficulty_data = raw["difficulty"]
    difficulty = DifficultyConfig(
        base_speed=float(difficulty_data["base_speed"]),
        speed_growth=float(difficulty_data["speed_growth"]),
        base_interval=float(difficulty_data["base_interval"]),
        interval_decay=float(difficulty_data["interval_decay"]),
        min_interval=float(difficulty_data["min_interval"])
    )

    scoring_data = raw["scoring"]
    scoring = ScoringConfig(
        points_per_second=float(scoring_data["points_per_second"])
    )

    # Clock section is optional
    clock_data = raw.get("clock", {})
    clock = ClockConfig(
        max_advance=float(clock_data.get("max_advance", 1.0)),
        max_frame_delta=float(clock_data.get("max_frame_delta", 0.1))
    )

    config = GameConfig(
        world=world,
        player=player,
        obstacles=obstacles,
        difficulty=difficulty,
        scoring=scoring,
        clock=clock
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
