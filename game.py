# Pyglet goal-dash arcade game
# Controls: Arrows/WASD move, R resets to level 1, ESC quits.
# Install: py -m pip install pyglet

import logging

import pyglet

pyglet.options["shadow_window"] = False

from config import FPS, PALETTE, SCREEN_H, SCREEN_W
from hud import HUD
from logic import GameSession
from player import DirectionalInput
from score import HighScoreTracker
from visuals import Visuals


LOG = logging.getLogger(__name__)


class KeyboardInput:
    """Polls held arrow/WASD keys from a pyglet KeyStateHandler."""

    def __init__(self, keys: pyglet.window.key.KeyStateHandler):
        self.keys = keys

    def poll_directional_input(self) -> DirectionalInput:
        k = pyglet.window.key
        return DirectionalInput(
            up=bool(self.keys[k.UP] or self.keys[k.W]),
            down=bool(self.keys[k.DOWN] or self.keys[k.S]),
            left=bool(self.keys[k.LEFT] or self.keys[k.A]),
            right=bool(self.keys[k.RIGHT] or self.keys[k.D]),
        )


# ============================
# Main Game Class
# ============================
class Game(pyglet.window.Window):
    """Main game window."""

    def __init__(self, tracker: HighScoreTracker = None):
        super().__init__(width=SCREEN_W, height=SCREEN_H, caption="Goal Dash", vsync=True)
        pyglet.gl.glClearColor(*(c / 255.0 for c in PALETTE["background"]), 1.0)

        self.keys = pyglet.window.key.KeyStateHandler()
        self.push_handlers(self.keys)

        self.batch = pyglet.graphics.Batch()
        self.hud = HUD(self.batch)
        self.visuals = Visuals(self.batch, self.hud)
        self.session = GameSession(
            display=self.visuals,
            input_source=KeyboardInput(self.keys),
            tracker=tracker,
        )
        self.session.reset()

        pyglet.clock.schedule_interval(self.update, 1.0 / FPS)

    def on_key_press(self, symbol, modifiers):
        """Handle key presses."""
        if symbol == pyglet.window.key.R:
            self.session.reset()
        elif symbol == pyglet.window.key.ESCAPE:
            self.close()
        # Arrow keys must not fall through to pyglet's default handler.
        return pyglet.event.EVENT_HANDLED

    def on_mouse_press(self, x, y, button, modifiers):
        if button == pyglet.window.mouse.LEFT and self.hud.reset_button.contains_point(x, y):
            self.session.reset()

    def on_mouse_motion(self, x, y, dx, dy):
        self.hud.reset_button.set_hovered(self.hud.reset_button.contains_point(x, y))

    def update(self, dt: float):
        """Update game logic."""
        self.session.tick(dt)

    def on_draw(self):
        """Render the game."""
        self.clear()
        self.batch.draw()

    def on_close(self):
        pyglet.clock.unschedule(self.update)
        super().on_close()


def main():
    """Start the game."""
    try:
        _ = Game()
        pyglet.app.run()
    except KeyboardInterrupt:
        pass
    except Exception as e:
        LOG.exception("Fatal error: %s", e)
        raise


if __name__ == "__main__":
    main()
