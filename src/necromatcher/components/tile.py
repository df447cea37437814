from dataclasses import dataclass

from necromatcher.components.piece import EMPTY, Piece
from necromatcher.constants import COLS


@dataclass(slots=True)
class Tile:
    """One board cell. x grows to the right, y grows upwards; idx = x + y * COLS."""
    x: int
    y: int
    piece: Piece = EMPTY

    @property
    def idx(self) -> int:
        return self.x + self.y * COLS
