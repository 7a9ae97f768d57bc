"""
State Snapshot
==============

Immutable view of the simulation handed to renderers, tools and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, TYPE_CHECKING

import numpy as np

from square_dodger.dodger_core.entities import Rect
from square_dodger.dodger_core.rules import RunState

if TYPE_CHECKING:
    from square_dodger.dodger_core.obstacle_field import ObstacleField


@dataclass(frozen=True)
class GameSnapshot:
    """
    Simulation state after the most recent advance.

    Holds copies only; later ticks never change a snapshot already taken.
    """
    run_state: RunState
    elapsed: float
    score: int
    best: int

    player_rect: Rect
    obstacle_rects: Tuple[Rect, ...]   # Spawn order

    world_width: float
    world_height: float

    # Difficulty at the current elapsed time (for HUDs)
    fall_speed: float
    spawn_interval: float

    @property
    def is_running(self) -> bool:
        return self.run_state is RunState.RUNNING

    @property
    def is_game_over(self) -> bool:
        return self.run_state is RunState.GAME_OVER

    @property
    def obstacle_count(self) -> int:
        return len(self.obstacle_rects)

    def to_arrays(self) -> Dict[str, np.ndarray]:
        """
        Pack the snapshot into numpy arrays.

        ``obstacles`` has shape (N, 4) with columns left, top, width, height;
        ``player`` has shape (4,) in the same layout.
        """
        if self.obstacle_rects:
            obstacles = np.array(
                [r.as_tuple() for r in self.obstacle_rects], dtype=np.float32
            )
        else:
            obstacles = np.zeros((0, 4), dtype=np.float32)

        return {
            "run_state": np.array(
                list(RunState).index(self.run_state), dtype=np.int8
            ),
            "elapsed": np.array(self.elapsed, dtype=np.float32),
            "score": np.array(self.score, dtype=np.int64),
            "best": np.array(self.best, dtype=np.int64),
            "world_size": np.array(
                (self.world_width, self.world_height), dtype=np.float32
            ),
            "fall_speed": np.array(self.fall_speed, dtype=np.float32),
            "spawn_interval": np.array(self.spawn_interval, dtype=np.float32),
            "player": np.array(self.player_rect.as_tuple(), dtype=np.float32),
            "obstacles": obstacles,
        }


class SnapshotBuilder:
    """Builds snapshots from live simulation state."""

    def build(
        self,
        run_state: RunState,
        elapsed: float,
        score: int,
        best: int,
        player_rect: Rect,
        field: "ObstacleField",
        world_width: float,
        world_height: float,
        fall_speed: float,
        spawn_interval: float
    ) -> GameSnapshot:
        """Build a snapshot from current game state."""
        return GameSnapshot(
            run_state=run_state,
            elapsed=elapsed,
            score=score,
            best=best,
            player_rect=player_rect,
            obstacle_rects=tuple(field.rects()),
            world_width=world_width,
            world_height=world_height,
            fall_speed=fall_speed,
            spawn_interval=spawn_interval
        )
