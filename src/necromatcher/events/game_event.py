"""Inbound events: the only way GameState changes."""
from dataclasses import dataclass
from typing import Union

from necromatcher.components.piece import PieceType


@dataclass(frozen=True, slots=True)
class SeedRng:
    """Seeds the rng so games are repeatable."""
    seed: int


@dataclass(frozen=True, slots=True)
class LoadLevel:
    level_id: int


@dataclass(frozen=True, slots=True)
class NextLevel:
    pass


@dataclass(frozen=True, slots=True)
class Reset:
    """Restart the current level, or the whole campaign once it is completed."""


@dataclass(frozen=True, slots=True)
class PlacePlayerPiece:
    x: int
    y: int
    piece_type: PieceType


GameEvent = Union[SeedRng, LoadLevel, NextLevel, Reset, PlacePlayerPiece]
