"""
Arcade window for playing or watching air combat
"""

from __future__ import annotations

import logging
from typing import Optional

import arcade

from .clock import ClockConfig, GameClock
from .geometry import Rect, Vector2
from .utils import make_rng

logger = logging.getLogger(__name__)


class AirCombatWindow(arcade.Window):
    """Draws session snapshots and, when interactive, drives the clock.

    The arena uses a y-down coordinate system while arcade's y axis points
    up, so every rectangle is flipped against the arena height on draw.
    """

    def __init__(self, clock: GameClock, width: int, height: int, interactive: bool = True):
        super().__init__(width, height, "Air Combat - Arcade", resizable=interactive)
        self.clock = clock
        self.interactive = interactive

        # Colors
        self.BG = (24, 24, 28)
        self.PLAYER_C = (66, 133, 244)
        self.ENEMY_C = (220, 60, 60)
        self.BULLET_C = (250, 220, 70)
        self.HUD_C = (240, 240, 240)
        self.GAME_OVER_C = (230, 40, 40)

    # ----------------------------
    # Drawing
    # ----------------------------

    def _draw_rect(self, rect: Rect, arena_height: float, color):
        bottom = arena_height - rect.bottom
        arcade.draw_lrbt_rectangle_filled(
            rect.left, rect.right, bottom, bottom + rect.height, color
        )

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        arcade.set_background_color(self.BG)

        if self.clock.session is None:
            return
        snap = self.clock.snapshot()

        self._draw_rect(snap.player.rect(), snap.height, self.PLAYER_C)
        for e in snap.enemies:
            self._draw_rect(e.rect(), snap.height, self.ENEMY_C)
        for b in snap.bullets:
            self._draw_rect(b.rect(), snap.height, self.BULLET_C)

        arcade.draw_text(f"Score: {snap.score}", 20, self.height - 44, self.HUD_C, 24)

        if snap.is_game_over:
            cx, cy = self.width / 2, self.height / 2
            arcade.draw_text("Game Over", cx, cy + 30, self.GAME_OVER_C, 48,
                             anchor_x="center", bold=True)
            arcade.draw_text(f"Score: {snap.score}", cx, cy - 10, self.HUD_C, 24,
                             anchor_x="center", bold=True)
            if self.interactive:
                arcade.draw_text("Click or press R to restart", cx, cy - 50, self.HUD_C, 16,
                                 anchor_x="center")

    # ----------------------------
    # Clock + input
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.interactive and self.clock.session is not None:
            self.clock.update(delta_time)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        if not self.interactive or self.clock.session is None:
            return
        # arcade reports dy upward; arena y points down
        self.clock.apply_input(Vector2(dx, -dy))

    def on_mouse_press(self, x, y, button, modifiers):
        if self._game_over():
            self.restart()

    def on_key_press(self, symbol, modifiers):
        if symbol == arcade.key.R and self._game_over():
            self.restart()
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def _game_over(self) -> bool:
        return (
            self.interactive
            and self.clock.session is not None
            and self.clock.session.is_game_over
        )

    def restart(self):
        """Start over using the current window size as the arena"""
        logger.info("Restart requested")
        self.clock.reset(self.width, self.height)


def play(width: int = 400, height: int = 800, seed: Optional[int] = None,
         config: Optional[ClockConfig] = None):
    """Open a window and play with the mouse"""
    clock = GameClock(config, rng=make_rng(seed))
    clock.new_game(width, height)
    window = AirCombatWindow(clock, width, height)
    window.set_update_rate(1 / clock.config.tick_rate)
    arcade.run()
    return window
