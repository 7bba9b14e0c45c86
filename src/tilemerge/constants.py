GRID_SIZE = 4
TILE_SIZE = 110
# Gap between neighbouring cells; cell centres sit TILE_SIZE + TILE_SPACING apart.
TILE_SPACING = 12
BOARD_MARGIN = 30
SCORE_BAR_HEIGHT = 60

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "2048 - Arcade Edition"
UPDATE_RATE = 1 / 60

# ============================================================================
# ANIMATION TIMINGS (seconds)
# ============================================================================
MOVE_DURATION = 0.15
SPAWN_DURATION = 0.15
DEATH_DURATION = 0.35
SCORE_CHASE_DURATION = 0.5
BUMP_DURATION = 0.08
PULSE_DURATION = 0.8

# Pixel offset of the background "bump" when a cell receives a tile.
BUMP_DISTANCE = 4.0
# Scale the game-over banner pulses up to before wrapping back.
PULSE_SCALE = 1.15
# Draw depth; dying tiles sink beneath live ones.
TILE_Z = 1.0
DYING_TILE_Z = 0.5

# Overshoot constant for EaseOutBack.
EASE_OUT_BACK_C1 = 1.70518

# Tiles seeded on start and restart: ((x, y), score).
START_TILES = (
    ((1, 1), 2),
    ((2, 2), 2),
)
