"""HUD: status line, level, high score and the reset button."""

from dataclasses import dataclass, field

import pyglet
from pyglet import shapes

from config import HUD_H, PALETTE, SCREEN_H, SCREEN_W, STATUS_COLORS, WINDOW_PAD

UI_FONT_BODY = "Arial"


@dataclass
class ResetButton:
    """A clickable button in the HUD."""
    x: float
    y: float
    width: float = 90
    height: float = 30
    text: str = "Reset"
    color: tuple = (100, 150, 200)
    hover_color: tuple = (150, 200, 255)
    is_hovered: bool = False

    _bg: object = field(init=False, default=None, repr=False)
    _label: object = field(init=False, default=None, repr=False)

    def contains_point(self, px: float, py: float) -> bool:
        """Check if point is inside button."""
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    def ensure(self, batch: pyglet.graphics.Batch) -> None:
        if self._bg is not None:
            return
        self._bg = shapes.Rectangle(self.x, self.y, self.width, self.height, color=self.color, batch=batch)
        self._label = pyglet.text.Label(
            self.text,
            font_name=UI_FONT_BODY,
            font_size=13,
            x=self.x + self.width / 2,
            y=self.y + self.height / 2,
            anchor_x="center",
            anchor_y="center",
            batch=batch,
        )

    def set_hovered(self, hovered: bool) -> None:
        self.is_hovered = hovered
        if self._bg is not None:
            self._bg.color = self.hover_color if hovered else self.color


class HUD:
    """Game HUD displaying status, level and high score."""

    def __init__(self, batch: pyglet.graphics.Batch):
        self.batch = batch
        top = SCREEN_H - WINDOW_PAD

        def make_label(x, y, size=14, anchor_x="left"):
            return pyglet.text.Label(
                "",
                font_name=UI_FONT_BODY,
                font_size=size,
                x=x,
                y=y,
                anchor_x=anchor_x,
                anchor_y="top",
                color=(*PALETTE["hud_text"], 255),
                batch=batch,
            )

        self.level_label = make_label(WINDOW_PAD, top)
        self.high_score_label = make_label(WINDOW_PAD + 140, top)
        self.status_label = make_label(WINDOW_PAD, top - 30, size=13)

        self.reset_button = ResetButton(x=SCREEN_W - WINDOW_PAD - 90, y=SCREEN_H - WINDOW_PAD - HUD_H + 30)
        self.reset_button.ensure(batch)

        self.set_level(1)
        self.set_high_score(0)

    def set_status(self, text: str, kind: str) -> None:
        self.status_label.text = text
        self.status_label.color = STATUS_COLORS.get(kind, STATUS_COLORS["playing"])

    def set_level(self, level: int) -> None:
        self.level_label.text = f"Level: {level}"

    def set_high_score(self, value: int) -> None:
        self.high_score_label.text = f"High score: {value}"
