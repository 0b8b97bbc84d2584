"""Tuned gameplay constants.

All values are per tick, not per second: the loop advances the world by one
fixed step each time the host invokes a frame.
"""

# Canvas
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 250
GROUND_MARGIN = 50
GROUND_Y = CANVAS_HEIGHT - GROUND_MARGIN

# Actor
ACTOR_X = 50
ACTOR_WIDTH = 40
ACTOR_HEIGHT = 60

# Obstacles
OBSTACLE_MIN_WIDTH = 20
OBSTACLE_MAX_WIDTH = 50
OBSTACLE_HEIGHT = 45
MIN_OBSTACLE_SPAWN_INTERVAL = 50   # frames
MAX_OBSTACLE_SPAWN_INTERVAL = 120  # frames

# Physics
GRAVITY = 0.6
JUMP_STRENGTH = -12.0  # negative is upwards

# Pacing
INITIAL_GAME_SPEED = 5.0
GAME_SPEED_INCREMENT = 0.001
SCORE_PER_TICK = 0.1
FPS = 60
