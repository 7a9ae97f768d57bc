"""
Human Play Mode
================

Play Square Dodger interactively with the mouse.

The window is the world: resizing the window resizes the simulation. The
renderer only reads snapshots; all game logic lives in CoreGame.

Controls:
    - Drag / click: Move the paddle toward the pointer
    - Space / Enter: Start (or play again after game over)
    - R: Back to the title screen
    - ESC: Quit

Usage:
    python -m tools.play_human [--seed SEED] [--width WIDTH] [--height HEIGHT]
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Dict, Optional, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from square_dodger.dodger_core.config_loader import load_config, GameConfig
from square_dodger.dodger_core.entities import Rect
from square_dodger.dodger_core.game import CoreGame
from square_dodger.dodger_core.rules import RunState
from square_dodger.dodger_core.state_snapshot import GameSnapshot

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


class DodgerRenderer:
    """
    Sky-themed renderer: gradient background, drifting clouds, rounded squares,
    score badges and menu overlays.
    """

    def __init__(self, window_width: int, window_height: int):
        """Initialize renderer for a window size."""
        # Colors
        self._sky_top: Color = (144, 202, 249)
        self._sky_bottom: Color = (25, 118, 210)
        self._cloud = (255, 255, 255, 230)
        self._obstacle: Color = (100, 181, 246)
        self._rim = (255, 255, 255, 170)
        self._player: Color = (255, 213, 79)
        self._text: Color = (255, 255, 255)
        self._text_dim: Color = (220, 230, 245)
        self._flash = (255, 82, 82, 68)

        # Fonts
        pygame.font.init()
        self._font_title = pygame.font.Font(None, 56)
        self._font_large = pygame.font.Font(None, 40)
        self._font_medium = pygame.font.Font(None, 28)
        self._font_small = pygame.font.Font(None, 22)

        # Clickable buttons from the last frame, by action name
        self._buttons: Dict[str, pygame.Rect] = {}

        self._window_width = 0
        self._window_height = 0
        self._bg_surface: Optional[pygame.Surface] = None
        self.resize(window_width, window_height)

    def resize(self, window_width: int, window_height: int) -> None:
        """Rebuild size-dependent surfaces."""
        if (window_width, window_height) == (self._window_width, self._window_height):
            return
        self._window_width = window_width
        self._window_height = window_height
        self._bg_surface = self._create_gradient_background()

    def _create_gradient_background(self) -> pygame.Surface:
        """Create vertical sky gradient."""
        surface = pygame.Surface((max(1, self._window_width), max(1, self._window_height)))
        height = max(1, self._window_height)
        for y in range(height):
            t = y / height
            r = int(self._sky_top[0] * (1-t) + self._sky_bottom[0] * t)
            g = int(self._sky_top[1] * (1-t) + self._sky_bottom[1] * t)
            b = int(self._sky_top[2] * (1-t) + self._sky_bottom[2] * t)
            pygame.draw.line(surface, (r, g, b), (0, y), (self._window_width, y))
        return surface

    def render(self, screen: pygame.Surface, snap: GameSnapshot) -> None:
        """Render the complete scene for one snapshot."""
        self._buttons = {}

        screen.blit(self._bg_surface, (0, 0))
        self._draw_clouds(screen, snap.elapsed)

        for rect in snap.obstacle_rects:
            self._draw_rounded(screen, rect, self._obstacle)

        self._draw_rounded(screen, snap.player_rect, self._player)

        if snap.is_game_over:
            flash = pygame.Surface((self._window_width, self._window_height), pygame.SRCALPHA)
            flash.fill(self._flash)
            screen.blit(flash, (0, 0))

        self._draw_badges(screen, snap)

        if snap.run_state is RunState.IDLE:
            self._draw_menu(screen)
        elif snap.is_game_over:
            self._draw_game_over(screen, snap)

    def button_at(self, pos: Tuple[int, int]) -> Optional[str]:
        """Name of the button under ``pos`` in the last rendered frame."""
        for name, rect in self._buttons.items():
            if rect.collidepoint(pos):
                return name
        return None

    def _draw_clouds(self, screen: pygame.Surface, elapsed: float) -> None:
        """Six clouds drifting right with run time."""
        width = max(1, self._window_width)
        layer = pygame.Surface((self._window_width, self._window_height), pygame.SRCALPHA)
        for i in range(6):
            x = (i * 120 + (elapsed * 30) % width) % width
            y = 60 + (i % 3) * 80
            r = 20
            for dx, dy, scale in ((0, 0, 1.0), (25, 5, 0.9), (-25, 5, 0.8), (10, -15, 0.7)):
                pygame.draw.circle(layer, self._cloud, (int(x + dx), int(y + dy)), int(r * scale))
        screen.blit(layer, (0, 0))

    def _draw_rounded(self, screen: pygame.Surface, rect: Rect, color: Color) -> None:
        """Filled rounded rectangle with a translucent rim."""
        box = pygame.Rect(int(rect.left), int(rect.top), int(rect.width), int(rect.height))
        pygame.draw.rect(screen, color, box, border_radius=6)

        rim = pygame.Surface((box.width, box.height), pygame.SRCALPHA)
        pygame.draw.rect(rim, self._rim, rim.get_rect(), 2, border_radius=6)
        screen.blit(rim, box.topleft)

    def _draw_badge(self, screen: pygame.Surface, text: str, right_align: bool) -> None:
        label = self._font_medium.render(text, True, self._text)
        w = label.get_width() + 24
        h = label.get_height() + 16
        x = self._window_width - 12 - w if right_align else 12
        badge = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.rect(badge, (255, 255, 255, 18), badge.get_rect(), border_radius=12)
        pygame.draw.rect(badge, (255, 255, 255, 31), badge.get_rect(), 1, border_radius=12)
        screen.blit(badge, (x, 8))
        screen.blit(label, (x + 12, 16))

    def _draw_badges(self, screen: pygame.Surface, snap: GameSnapshot) -> None:
        """Score on the left, best on the right."""
        self._draw_badge(screen, f"Score: {snap.score}", right_align=False)
        self._draw_badge(screen, f"Best: {snap.best}", right_align=True)

    def _draw_button(self, screen: pygame.Surface, name: str, text: str,
                     center: Tuple[int, int], filled: bool) -> None:
        label = self._font_medium.render(text, True, (25, 40, 90) if filled else self._text)
        box = pygame.Rect(0, 0, label.get_width() + 32, label.get_height() + 20)
        box.center = center
        if filled:
            pygame.draw.rect(screen, (230, 235, 255), box, border_radius=20)
        else:
            pygame.draw.rect(screen, (255, 255, 255), box, 2, border_radius=20)
        screen.blit(label, label.get_rect(center=box.center))
        self._buttons[name] = box

    def _draw_menu(self, screen: pygame.Surface) -> None:
        """Title screen with a start button."""
        cx = self._window_width // 2
        cy = self._window_height // 2

        title = self._font_title.render("Square Dodger", True, self._text)
        screen.blit(title, title.get_rect(center=(cx, cy - 80)))

        lines = [
            "Drag to move the yellow paddle.",
            "Dodge the blue squares!",
            "The longer you survive, the more you score.",
        ]
        for i, line in enumerate(lines):
            surf = self._font_small.render(line, True, self._text_dim)
            screen.blit(surf, surf.get_rect(center=(cx, cy - 30 + i * 22)))

        self._draw_button(screen, "start", "START", (cx, cy + 60), filled=True)

    def _draw_game_over(self, screen: pygame.Surface, snap: GameSnapshot) -> None:
        """Game over panel with reset and play-again buttons."""
        cx = self._window_width // 2
        cy = self._window_height // 2

        title = self._font_large.render("Game Over", True, self._text)
        screen.blit(title, title.get_rect(center=(cx, cy - 60)))

        score = self._font_medium.render(f"Score: {snap.score}", True, self._text_dim)
        screen.blit(score, score.get_rect(center=(cx, cy - 20)))
        best = self._font_small.render(f"Best: {snap.best}", True, self._text_dim)
        screen.blit(best, best.get_rect(center=(cx, cy + 6)))

        self._draw_button(screen, "reset", "RESET", (cx - 80, cy + 60), filled=False)
        self._draw_button(screen, "play_again", "PLAY AGAIN", (cx + 70, cy + 60), filled=True)


class HumanPlayer:
    """
    Pygame host for CoreGame.

    Each frame: forward the window size, tick the core from a monotonic clock,
    draw the snapshot. Pointer input is pushed as the paddle's target X.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        window_width: Optional[int] = None,
        window_height: Optional[int] = None,
        target_fps: int = 60
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        if config is None:
            config = load_config()

        if window_width is None:
            window_width = int(config.world.default_width)
        if window_height is None:
            window_height = int(config.world.default_height)

        self._config = config
        self._seed = seed
        self._target_fps = target_fps

        self._game = CoreGame(config=config, seed=seed)

        pygame.init()
        self._screen = pygame.display.set_mode((window_width, window_height), pygame.RESIZABLE)
        pygame.display.set_caption("Square Dodger")
        self._clock = pygame.time.Clock()

        self._renderer = DodgerRenderer(window_width, window_height)

        self._running = True
        self._dragging = False
        self._last_state = self._game.run_state

    def run(self) -> int:
        """Run the game loop. Returns the best score of the session."""
        print("=== Square Dodger ===")
        print("Drag or click to move, Space to start, R for title screen, ESC to quit")
        print()

        while self._running:
            self._handle_events()

            width, height = self._screen.get_size()
            self._game.initialize(width, height)
            self._renderer.resize(width, height)

            self._game.tick(time.monotonic())
            self._report_transition()

            self._renderer.render(self._screen, self._game.snapshot())
            pygame.display.flip()
            self._clock.tick(self._target_fps)

        pygame.quit()
        return self._game.best

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.VIDEORESIZE:
                self._screen = pygame.display.get_surface()
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                button = self._renderer.button_at(event.pos)
                if button is not None:
                    self._press(button)
                else:
                    self._dragging = True
                    self._game.set_input_target(event.pos[0])
            elif event.type == pygame.MOUSEMOTION and self._dragging:
                self._game.set_input_target(event.pos[0])
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if self._dragging:
                    self._game.set_input_target(event.pos[0])
                self._dragging = False

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self._running = False
        elif key == pygame.K_r:
            self._press("reset")
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            if not self._game.is_running:
                self._press("start")

    def _press(self, button: str) -> None:
        logger.debug("button pressed: %s", button)
        if button in ("start", "play_again"):
            self._game.start_run(seed=self._seed)
        elif button == "reset":
            self._game.reset_to_idle(seed=self._seed)
        self._dragging = False

    def _report_transition(self) -> None:
        state = self._game.run_state
        if state is self._last_state:
            return
        if state is RunState.GAME_OVER:
            print(f"\nGAME OVER - Score: {self._game.score}  Best: {self._game.best}")
        self._last_state = state


def main() -> int:
    parser = argparse.ArgumentParser(description="Play Square Dodger interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=None, help="Window width (default: from config)")
    parser.add_argument("--height", type=int, default=None, help="Window height (default: from config)")
    parser.add_argument("--fps", type=int, default=60, help="Target FPS")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())

    try:
        config = load_config()
        player = HumanPlayer(
            config=config,
            seed=args.seed,
            window_width=args.width,
            window_height=args.height,
            target_fps=args.fps
        )
        best = player.run()
        print(f"\nBest Score: {best}")
        return 0
    except ImportError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
