"""
Game constants for the snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# y grows downward, matching the on-screen grid
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Phases
RUNNING = "RUNNING"
PAUSED = "PAUSED"
OVER = "OVER"
WON = "WON"  # board full, no free cell left for food
TERMINAL_PHASES = {OVER, WON}

# Power-up kinds
SPEED = "SPEED"
MULTIPLIER = "MULTIPLIER"
SHIELD = "SHIELD"
POWER_UP_KINDS = (SPEED, MULTIPLIER, SHIELD)

# Difficulty levels
EASY = "EASY"
MEDIUM = "MEDIUM"
HARD = "HARD"
DIFFICULTY_SETTINGS = {
    EASY: {"speed": 200, "multiplier": 1},
    MEDIUM: {"speed": 150, "multiplier": 1.5},
    HARD: {"speed": 100, "multiplier": 2},
}

# Game settings
DEFAULT_DIFFICULTY = MEDIUM
INITIAL_GRID_SIZE = 20
MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 30
FIRST_FOOD = (15, 15)
START_DIRECTION = RIGHT

MIN_SPEED_MS = 50
SPEED_STEP_MS = 20
SPEED_POWER_UP_STEP_MS = 30
SPEED_INTERVAL = 3
GRID_GROWTH_INTERVAL = 6
GRID_GROWTH_STEP = 2

POWER_UP_PROBABILITY = 0.2
MULTIPLIER_DURATION_MS = 5000
MULTIPLIER_FACTOR = 2
INPUT_QUEUE_SIZE = 1
