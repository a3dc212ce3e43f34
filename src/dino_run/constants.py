"""
constants.py: Centralized tuning for the simulation and the pygame host.
All distances are in pixels, all rates are per tick.
"""

import os

# -------- Play Field Config --------
FIELD_WIDTH = 800               # Initial width; the host reports resizes
FIELD_HEIGHT = 300              # Fixed canvas height
GROUND_OFFSET = 20              # Ground line sits this far above the bottom edge
BASELINE_OFFSET = 60            # Player rests at field_height - BASELINE_OFFSET

# -------- Player Config --------
PLAYER_X = 50                   # Fixed player X position
PLAYER_WIDTH = 44
PLAYER_HEIGHT = 47
GRAVITY = 0.8                   # Added to vertical velocity each tick while airborne
JUMP_VELOCITY = -15.0           # Initial upward velocity of a jump
FRAME_TIMER_LIMIT = 5           # Run frame toggles once the timer exceeds this (every 6 ticks)

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 25
OBSTACLE_HEIGHT = 50
OBSTACLE_SPEED = 5              # Horizontal speed (pixels/tick)
SPAWN_THRESHOLD_TICKS = 60      # Counter must exceed this before a spawn roll
SPAWN_CHANCE = 0.02             # Probability of a spawn on a roll

# -------- Collision Config --------
COLLISION_MARGIN = 10           # Inset applied to both hit-boxes on every side

# -------- Host Config --------
RENDER_FPS = 60
IDLE_FPS = 15                   # Event polling rate while nothing is ticking
WINDOW_TITLE = "Dino Run"
ASSETS_DIR = os.path.join(os.path.dirname(__file__), "assets")
DINO_SPRITE_PATH = os.path.join(ASSETS_DIR, "dino.png")      # Two PLAYER_WIDTH x PLAYER_HEIGHT frames side by side
CACTUS_SPRITE_PATH = os.path.join(ASSETS_DIR, "cactus.png")
