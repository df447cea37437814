"""Piece taxonomy: what a single tile can hold."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class PieceType(Enum):
    SWORDSMAN = "swordsman"
    HOUND = "hound"
    BOWMAN = "bowman"
    WALL = "wall"

    def toggle(self) -> PieceType:
        """Next type in the player-facing cycle. Walls never enter or leave the cycle."""
        match self:
            case PieceType.SWORDSMAN:
                return PieceType.HOUND
            case PieceType.HOUND:
                return PieceType.BOWMAN
            case PieceType.BOWMAN:
                return PieceType.SWORDSMAN
            case PieceType.WALL:
                return PieceType.WALL
        raise ValueError(f"Unknown piece type {self!r}")


# Types the player can place and collect souls for, in level-file count order.
PLACEABLE_TYPES = (PieceType.BOWMAN, PieceType.HOUND, PieceType.SWORDSMAN)


@dataclass(frozen=True, slots=True)
class Empty:
    pass


@dataclass(frozen=True, slots=True)
class Obstacle:
    """Blocks placement and matching; never removed."""
    piece_type: PieceType


@dataclass(frozen=True, slots=True)
class Friendly:
    piece_type: PieceType


@dataclass(frozen=True, slots=True)
class Enemy:
    piece_type: PieceType


Piece = Union[Empty, Obstacle, Friendly, Enemy]

EMPTY = Empty()


def match_type(piece: Piece) -> Optional[PieceType]:
    """Type used by match detection. Empty and obstacles have none; owner is ignored."""
    match piece:
        case Empty() | Obstacle():
            return None
        case Friendly(piece_type=piece_type) | Enemy(piece_type=piece_type):
            return piece_type
    raise TypeError(f"Not a piece: {piece!r}")
