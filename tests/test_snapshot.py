"""
Tests for GameSnapshot.
"""

import dataclasses

import numpy as np
import pytest

from square_dodger.dodger_core.rules import RunState


class TestSnapshotContents:
    """Snapshot mirrors the state after the last advance."""

    def test_fields(self, running_game):
        running_game.spawn_obstacle(50, 30, 100)
        running_game.spawn_obstacle(300, 40, 200)

        snap = running_game.snapshot()

        assert snap.run_state is RunState.RUNNING
        assert snap.is_running
        assert not snap.is_game_over
        assert snap.world_width == 400
        assert snap.world_height == 800
        assert snap.obstacle_count == 2
        assert snap.player_rect.as_tuple() == (174, 704, 52, 18)

    def test_obstacles_in_spawn_order(self, running_game):
        running_game.spawn_obstacle(300, 40, 200)
        running_game.spawn_obstacle(50, 30, 100)

        first, second = running_game.snapshot().obstacle_rects

        assert first.center == (300, 200)
        assert second.center == (50, 100)

    def test_difficulty_fields(self, running_game):
        running_game.advance(0.5)

        snap = running_game.snapshot()

        assert snap.fall_speed == pytest.approx(146.0)
        assert snap.spawn_interval == pytest.approx(0.89)


class TestSnapshotImmutability:
    """Snapshots are copies."""

    def test_frozen(self, running_game):
        snap = running_game.snapshot()

        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.score = 999

    def test_not_affected_by_later_ticks(self, running_game):
        running_game.spawn_obstacle(50, 30, 100)
        snap = running_game.snapshot()
        rects = snap.obstacle_rects

        running_game.advance(0.1)
        running_game.spawn_obstacle(300, 30, 100)

        assert snap.obstacle_rects == rects
        assert snap.obstacle_count == 1
        assert snap.elapsed == 0.0
        assert snap.score == 0


class TestToArrays:
    """numpy packing."""

    def test_empty_board(self, running_game):
        arrays = running_game.snapshot().to_arrays()

        assert arrays["obstacles"].shape == (0, 4)
        assert arrays["obstacles"].dtype == np.float32
        assert arrays["run_state"] == 1
        np.testing.assert_allclose(arrays["player"], [174, 704, 52, 18])
        np.testing.assert_allclose(arrays["world_size"], [400, 800])

    def test_obstacle_rows(self, running_game):
        running_game.spawn_obstacle(50, 30, 100)
        running_game.spawn_obstacle(300, 40, 200)

        obstacles = running_game.snapshot().to_arrays()["obstacles"]

        assert obstacles.shape == (2, 4)
        np.testing.assert_allclose(obstacles[0], [35, 85, 30, 30])
        np.testing.assert_allclose(obstacles[1], [280, 180, 40, 40])

    def test_scalars(self, running_game):
        running_game.advance(0.5)

        arrays = running_game.snapshot().to_arrays()

        assert int(arrays["score"]) == 50
        assert int(arrays["best"]) == 0
        assert float(arrays["elapsed"]) == pytest.approx(0.5)
