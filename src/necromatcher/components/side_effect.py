"""Declarative output of the reducer, consumed by the presentation layer.

Each effect states what should happen on screen; none of them carries decision
logic. Delays are seconds from receipt and must be honoured at-or-after the value.
"""
from dataclasses import dataclass
from typing import Union

from necromatcher.components.piece import PieceType


@dataclass(frozen=True, slots=True)
class SpawnAtTile:
    """Create a visual at idx. also_destroy schedules its removal after DEFAULT_DESPAWN_DELAY."""
    idx: int
    piece_type: PieceType
    owned: bool
    also_destroy: bool = False


@dataclass(frozen=True, slots=True)
class DespawnAtTile:
    idx: int
    delay: float


@dataclass(frozen=True, slots=True)
class FullRespawnTiles:
    """Discard every visual and recreate one per non-empty tile."""


@dataclass(frozen=True, slots=True)
class GameOver:
    """Level cleared. load_another tells the caller to raise NextLevel; otherwise the campaign is done."""
    load_another: bool


@dataclass(frozen=True, slots=True)
class RemoveGameOverCondition:
    pass


SideEffect = Union[SpawnAtTile, DespawnAtTile, FullRespawnTiles, GameOver, RemoveGameOverCondition]
