from __future__ import annotations

"""Game configuration constants for Flappy Senac."""

import math
import os
from pathlib import Path

# Game configuration
GAME_WIDTH = 400
GAME_HEIGHT = 600
FPS = 60
FRAME_MS = 1000.0 / FPS

# Physics (per tick, one tick per frame)
GRAVITY = 0.4  # slightly floaty for better control
JUMP_STRENGTH = -7.0
MAX_ROTATION = math.pi / 4
ROTATION_FACTOR = 0.1

# Pillars
PIPE_SPEED = 3.0
PIPE_SPACING = 220  # distance between consecutive pillars
PIPE_GAP = 160  # opening the book flies through
PIPE_WIDTH = 60
PIPE_MIN_HEIGHT = 50
GROUND_MARGIN = 50
FIRST_PIPE_OFFSET = 100
PIPE_CAP_HEIGHT = 10
PIPE_CAP_OVERHANG = 2
PIPE_STRIPE_OFFSET = 10
PIPE_STRIPE_WIDTH = 5

# Player (the flying book)
BIRD_SIZE = 34
BIRD_X = GAME_WIDTH / 3
BIRD_HITBOX_RADIUS = BIRD_SIZE / 2 - 4  # hitbox slightly smaller than the sprite
IDLE_AMPLITUDE = 10.0
IDLE_PERIOD_MS = 300.0

# Particles
PARTICLE_BURST = 8
PARTICLE_SPREAD = 6.0
PARTICLE_DECAY = 0.05
PARTICLE_RADIUS = 4

# Background
GRID_STEP = 20
GROUND_HEIGHT = 10

# Senac brand palette
COLOR_SENAC_BLUE = "#004587"
COLOR_SENAC_BLUE_LIGHT = "#005BB3"
COLOR_SENAC_ORANGE = "#F68D2E"
COLOR_SKY_TOP = "#E0F7FA"
COLOR_SKY_BOTTOM = "#FFFFFF"
COLOR_GROUND = "#333333"
COLOR_PAGES = "#FFFFFF"
COLOR_EYE = "#000000"
JUMP_PARTICLE_COLOR = (255, 255, 255)
SCORE_PARTICLE_COLOR = (246, 141, 46)
GRID_RGBA = (0, 69, 135, 13)
STRIPE_RGBA = (255, 255, 255, 51)

# Feedback and persistence
HAPTIC_PULSE_MS = 200
HIGH_SCORE_KEY = "senacFlappyHighScore"
DATA_DIR = Path(os.getenv("FLAPPY_SENAC_HOME", str(Path.home() / ".flappy_senac")))
SCORES_FILE = DATA_DIR / "scores.json"
LOG_LEVEL = os.getenv("FLAPPY_SENAC_LOG_LEVEL", "INFO").upper()

# HUD layout (shared by the renderer and the input hit-test)
CARD_WIDTH = 300
RESTART_BUTTON_RECT = (70, 372, 260, 56)  # x, y, w, h
