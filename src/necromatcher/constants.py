import sys

ROWS = 8
COLS = 8
NUM_TILES = ROWS * COLS

# Sentinel for "no tile selected" (cursor off-board). Either axis at NO_TILE maps to the NO_TILE index.
NO_TILE = sys.maxsize

# Seconds the presentation layer waits before removing a matched piece.
DEFAULT_DESPAWN_DELAY = 0.5

# Smallest tile edge in pixels, however small the window gets.
MIN_TILE_SIZE = 20
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.60
BOARD_MAX_HEIGHT_PCT = 0.85

# Side panel (counters, current piece, level text) sits left of the board.
SIDE_PANEL_PADDING = 24

PLAYER_0_COLOUR = (0, 200, 80)
PLAYER_1_COLOUR = (220, 30, 60)
OBSTACLE_COLOUR = (140, 140, 140)
GRID_BORDER_COLOUR = (40, 40, 40)
GRID_HOVER_COLOUR = (240, 240, 240)
GRID_NEIGHBOUR_HOVER_COLOUR = (150, 150, 150)
