from typing import List, Tuple

from necromatcher.components.piece import PieceType
from necromatcher.constants import COLS, NO_TILE, ROWS

Position = Tuple[int, int]


def tile_to_idx(x: int, y: int) -> int:
    """Converts a tile x/y to a board index. Either axis at NO_TILE gives NO_TILE."""
    if x == NO_TILE or y == NO_TILE:
        return NO_TILE
    return x + y * COLS


def idx_to_tile(idx: int) -> Position:
    if idx == NO_TILE:
        return NO_TILE, NO_TILE
    return idx % COLS, idx // COLS


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < COLS and 0 <= y < ROWS


def neighbour_offsets(piece_type: PieceType) -> Tuple[Position, ...]:
    match piece_type:
        case PieceType.SWORDSMAN:
            return ((0, -1), (-1, 0), (1, 0), (0, 1))
        case PieceType.HOUND:
            return (
                (-1, -1), (0, -1), (1, -1),
                (-1, 0), (1, 0),
                (-1, 1), (0, 1), (1, 1),
            )
        case PieceType.BOWMAN:
            return ((0, -1), (0, 1))
        case PieceType.WALL:
            return ()
    raise ValueError(f"Unknown piece type {piece_type!r}")


def neighbours(x: int, y: int, piece_type: PieceType) -> List[Position]:
    """In-bounds cells a piece of piece_type at x/y reaches. Offsets falling off the board are dropped, never wrapped."""
    if not in_bounds(x, y):
        return []
    result: List[Position] = []
    for dx, dy in neighbour_offsets(piece_type):
        nx, ny = x + dx, y + dy
        if in_bounds(nx, ny):
            result.append((nx, ny))
    return result
