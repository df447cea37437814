from typing import Tuple

from necromatcher.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    COLS,
    MIN_TILE_SIZE,
    NO_TILE,
    ROWS,
)


def compute_board_geometry(window_width: int, window_height: int) -> Tuple[int, float, float]:
    """Return (tile_size, start_x, start_y) for a board centred horizontally above the bottom margin."""
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / COLS, max_board_h / ROWS))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    start_x = (window_width - COLS * tile_size) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def window_to_tile(x: float, y: float, window_width: int, window_height: int) -> Tuple[int, int]:
    """Tile under a window point, or (NO_TILE, NO_TILE) when the point is off the board."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height)
    if x < start_x or y < start_y:
        return NO_TILE, NO_TILE
    col = int((x - start_x) // tile_size)
    row = int((y - start_y) // tile_size)
    if col >= COLS or row >= ROWS:
        return NO_TILE, NO_TILE
    return col, row


def tile_origin(x: int, y: int, window_width: int, window_height: int) -> Tuple[float, float, int]:
    """Bottom-left window coordinate of a tile plus the tile size."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height)
    return start_x + x * tile_size, start_y + y * tile_size, tile_size
