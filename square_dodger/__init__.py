"""
Square Dodger Package
=====================

Simulation core for a casual dodge game: the player drags a paddle along the
bottom of the world to avoid falling squares that spawn faster and fall faster
the longer the run lasts.

- dodger_core: frame-driven simulation (spawn, movement, collision, scoring)

All tunable constants live in game_config.yaml next to this file.
"""
