# Game Configuration Constants

import os

# Arena dimensions (logical units, y grows downward)
ARENA_W = 600
ARENA_H = 400
FPS = 60

# Window chrome around the arena
HUD_H = 70
WINDOW_PAD = 20
SCREEN_W = ARENA_W + WINDOW_PAD * 2
SCREEN_H = ARENA_H + WINDOW_PAD * 2 + HUD_H

# Entity sizes (squares)
PLAYER_SIZE = 30
ENEMY_SIZE = 40
GOAL_SIZE = 35

# Player stats
PLAYER_START_X = 50
PLAYER_START_Y = 50
PLAYER_SPEED = 5.0  # units per tick

# Safe zone around the start point
SAFE_ZONE_X = 0
SAFE_ZONE_Y = 0
SAFE_ZONE_W = 150
SAFE_ZONE_H = 150

# Enemy tuning
MOVING_ENEMY_PROBABILITY = 0.3
MOVING_ENEMY_SPEED = 2.0  # units per tick

# Placement
PLACEMENT_EDGE_MARGIN = 10.0
PLACEMENT_GAP = 20.0
PLACEMENT_MAX_ATTEMPTS = 200
# Roughly half the arena diagonal.
MIN_START_GOAL_DISTANCE = 350.0

# Level-clear pacing (seconds)
CLEAR_MESSAGE_DELAY = 0.5
NEXT_LEVEL_DELAY = 1.5

# High-score persistence
HIGH_SCORE_KEY = "vibeCodingGameHighScore"
HIGH_SCORE_FILE = os.environ.get(
    "GOALDASH_HIGH_SCORE_FILE",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "high_score.json"),
)

# Logging
LOG_LEVEL = os.environ.get("GOALDASH_LOG_LEVEL", "WARNING")

# Colors
PALETTE = {
    "background": (18, 20, 32),
    "arena": (236, 240, 245),
    "arena_edge": (60, 70, 100),
    "safe_zone": (190, 235, 200),
    "player": (40, 120, 230),
    "enemy": (225, 60, 60),
    "enemy_moving": (245, 150, 30),
    "goal": (60, 190, 90),
    "hud_text": (255, 255, 255),
}

STATUS_COLORS = {
    "playing": (220, 225, 235, 255),
    "game-over": (255, 90, 90, 255),
    "clear": (120, 255, 140, 255),
}
