"""
Core Game
=========

Main simulation orchestrator combining spawning, movement, collision and scoring.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Any, Dict, Optional, Tuple

from square_dodger.dodger_core.config_loader import GameConfig, get_config
from square_dodger.dodger_core.difficulty import DifficultyCurve
from square_dodger.dodger_core.entities import Obstacle, Rect
from square_dodger.dodger_core.obstacle_field import ObstacleField
from square_dodger.dodger_core.rng import ObstacleSpawner
from square_dodger.dodger_core.rules import GameRules, RunState
from square_dodger.dodger_core.scoring import ScoreTracker
from square_dodger.dodger_core.state_snapshot import GameSnapshot, SnapshotBuilder

logger = logging.getLogger(__name__)


class CoreGame:
    """
    Frame-driven dodge simulation.

    Orchestrates:
    - Difficulty curve
    - Obstacle spawning (seeded RNG)
    - Paddle easing and clamping
    - Obstacle integration and pruning
    - Collision and run termination
    - Survival scoring and best score
    - State snapshots

    One tick = one ``advance(dt)`` call. Nothing here raises during play:
    bad deltas and inputs are clamped or ignored.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducible obstacle sequences.
        """
        if config is None:
            config = get_config()

        self._config = config

        # Initialize subsystems
        self._rules = GameRules(config)
        self._difficulty = DifficultyCurve(config)
        self._spawner = ObstacleSpawner(config, seed)
        self._field = ObstacleField(config)
        self._scorer = ScoreTracker(config)
        self._snapshot_builder = SnapshotBuilder()

        # World geometry is unknown until the host calls initialize()
        self._world_width: float = 0.0
        self._world_height: float = 0.0

        # Run state
        self._run_state = RunState.IDLE
        self._elapsed: float = 0.0
        self._spawn_timer: float = 0.0
        self._player_x: float = 0.0
        self._last_tick: Optional[float] = None

        # Written by input callbacks, possibly from another thread
        self._target_lock = threading.Lock()
        self._target_x: float = 0.0

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def rules(self) -> GameRules:
        return self._rules

    @property
    def difficulty(self) -> DifficultyCurve:
        return self._difficulty

    @property
    def run_state(self) -> RunState:
        return self._run_state

    @property
    def is_running(self) -> bool:
        return self._run_state is RunState.RUNNING

    @property
    def is_over(self) -> bool:
        """True once the current run has hit an obstacle."""
        return self._run_state is RunState.GAME_OVER

    @property
    def elapsed(self) -> float:
        """Seconds simulated in the current run."""
        return self._elapsed

    @property
    def score(self) -> int:
        """Current score."""
        return self._scorer.score

    @property
    def best(self) -> int:
        """Best score since the process started."""
        return self._scorer.best

    @property
    def player_x(self) -> float:
        """Paddle center X."""
        return self._player_x

    @property
    def target_x(self) -> float:
        with self._target_lock:
            return self._target_x

    @property
    def world_size(self) -> Tuple[float, float]:
        return (self._world_width, self._world_height)

    @property
    def obstacle_count(self) -> int:
        return self._field.count

    @property
    def spawn_timer(self) -> float:
        return self._spawn_timer

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, width: float, height: float) -> None:
        """
        Set the world size.

        Safe to call every frame. While idle the paddle is kept at the
        horizontal center of the world; during or after a run its position is
        left alone and re-clamped on the next advance.

        Args:
            width: World width. Negative or non-finite values become 0.
            height: World height. Negative or non-finite values become 0.
        """
        width = _non_negative(width)
        height = _non_negative(height)

        if (width, height) != (self._world_width, self._world_height):
            logger.debug("world resized to %.1fx%.1f", width, height)
            self._world_width = width
            self._world_height = height

        if self._run_state is RunState.IDLE:
            self._center_player()

    def start_run(self, seed: Optional[int] = None) -> GameSnapshot:
        """
        Start a new run. The best score is kept.

        Args:
            seed: New random seed. Reuses the previous seed if None.

        Returns:
            Initial snapshot of the run.
        """
        self._reset_run(RunState.RUNNING, seed)
        logger.info("run started (best=%d)", self._scorer.best)
        return self.snapshot()

    def reset_to_idle(self, seed: Optional[int] = None) -> GameSnapshot:
        """
        Clear the current run and return to the idle state without playing.

        Args:
            seed: New random seed. Reuses the previous seed if None.

        Returns:
            Idle snapshot.
        """
        self._reset_run(RunState.IDLE, seed)
        logger.info("reset to idle (best=%d)", self._scorer.best)
        return self.snapshot()

    def _reset_run(self, run_state: RunState, seed: Optional[int]) -> None:
        self._spawner.reset(seed)
        self._scorer.reset()
        self._field.clear()

        self._run_state = run_state
        self._elapsed = 0.0
        self._spawn_timer = 0.0
        self._last_tick = None
        self._center_player()

    def _center_player(self) -> None:
        self._player_x = self._world_width / 2.0
        with self._target_lock:
            self._target_x = self._player_x

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_input_target(self, x: float) -> None:
        """
        Set the X the paddle eases toward.

        Last write wins; the value is sampled once at the start of the next
        advance. Bounds are applied during advance, not here.
        """
        if not math.isfinite(x):
            logger.debug("ignoring non-finite input target %r", x)
            return
        with self._target_lock:
            self._target_x = float(x)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self, timestamp: float) -> float:
        """
        Advance from a monotonic frame timestamp.

        The first tick after a start or reset only records the baseline and
        advances by 0. Later ticks advance by the gap since the previous tick,
        capped at ``clock.max_frame_delta`` so that a suspended clock resumes
        with a bounded step.

        Args:
            timestamp: Monotonic time in seconds.

        Returns:
            The delta actually simulated.
        """
        if self._last_tick is None:
            self._last_tick = timestamp
            dt = 0.0
        else:
            raw = timestamp - self._last_tick
            self._last_tick = timestamp
            dt = self._rules.clock.sanitize(raw, self._rules.clock.max_frame_delta)

        self.advance(dt)
        return dt

    def advance(self, dt: float) -> None:
        """
        Advance the simulation by ``dt`` seconds.

        Does nothing unless a run is in progress. ``dt`` is clamped into
        ``[0, clock.max_advance]``.

        Args:
            dt: Elapsed wall-clock seconds since the previous advance.
        """
        dt = self._rules.clock.sanitize(dt)

        if self._run_state is not RunState.RUNNING:
            return

        with self._target_lock:
            target_x = self._target_x

        self._elapsed += dt

        fall_speed = self._difficulty.fall_speed(self._elapsed)
        interval = self._difficulty.spawn_interval(self._elapsed)

        # Paddle
        player = self._rules.player
        self._player_x = player.ease_x(self._player_x, target_x, dt)
        self._player_x = player.clamp_x(self._player_x, self._world_width)

        # Spawn (catch-up loop for long slices)
        self._spawn_timer += dt
        while self._spawn_timer >= interval:
            self._spawn_timer -= interval
            x, size = self._spawner.draw(self._world_width)
            self._field.spawn(x, size)

        # Fall and prune
        self._field.step(fall_speed, dt)
        self._field.prune(self._world_height)

        # Collision
        hit = self._field.first_overlap(self._player_rect())
        if hit is not None:
            self._run_state = RunState.GAME_OVER
            best = self._scorer.commit_best()
            logger.info(
                "game over at %.2fs: score=%d best=%d (obstacle %d)",
                self._elapsed, self._scorer.score, best, hit.uid
            )
            return

        self._scorer.add_survival(dt)

    def spawn_obstacle(
        self,
        x: float,
        size: float,
        y: Optional[float] = None
    ) -> Obstacle:
        """
        Place an obstacle directly, bypassing the spawn timer and RNG.

        Args:
            x: Center X.
            size: Side length.
            y: Center Y. Defaults to the configured spawn height.

        Returns:
            The created obstacle.
        """
        return self._field.spawn(x, size, y)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def _player_rect(self) -> Rect:
        return self._rules.player.rect(self._player_x, self._world_height)

    def snapshot(self) -> GameSnapshot:
        """Immutable view of the state after the most recent advance."""
        return self._snapshot_builder.build(
            run_state=self._run_state,
            elapsed=self._elapsed,
            score=self._scorer.score,
            best=self._scorer.best,
            player_rect=self._player_rect(),
            field=self._field,
            world_width=self._world_width,
            world_height=self._world_height,
            fall_speed=self._difficulty.fall_speed(self._elapsed),
            spawn_interval=self._difficulty.spawn_interval(self._elapsed)
        )

    def get_info(self) -> Dict[str, Any]:
        """Flat summary for logs and tools."""
        return {
            "run_state": self._run_state.value,
            "elapsed": self._elapsed,
            "score": self._scorer.score,
            "best": self._scorer.best,
            "obstacles": self._field.count,
            "player_x": self._player_x,
            "fall_speed": self._difficulty.fall_speed(self._elapsed),
            "spawn_interval": self._difficulty.spawn_interval(self._elapsed),
        }


def _non_negative(value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value
