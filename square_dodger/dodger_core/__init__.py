"""
Dodger Core - The frame-driven simulation.

Hosts call ``advance(dt)`` (or ``tick(timestamp)``) once per frame, push the
pointer position through ``set_input_target(x)`` and draw from ``snapshot()``.

Main exports:
- CoreGame: The simulation
- GameSnapshot: Immutable per-frame view of the simulation
- RunState: IDLE / RUNNING / GAME_OVER
- Rect, Obstacle: Geometry types
- GameConfig: Configuration loaded from game_config.yaml
"""

from square_dodger.dodger_core.config_loader import GameConfig, load_config
from square_dodger.dodger_core.entities import Obstacle, Rect
from square_dodger.dodger_core.rules import RunState
from square_dodger.dodger_core.state_snapshot import GameSnapshot
from square_dodger.dodger_core.game import CoreGame

__all__ = [
    "GameConfig",
    "load_config",
    "Obstacle",
    "Rect",
    "RunState",
    "GameSnapshot",
    "CoreGame",
]
