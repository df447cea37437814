"""Validates and applies GameEvents to the GameState.

apply_event is the single entry point that mutates state. It performs no I/O
beyond logging and returns the side effects the presentation layer should
carry out, in order. A tile cleared by two crossing matches appears once in
that list: one DespawnAtTile, one soul credited.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from necromatcher.components.game_state import GameState, LevelStatus
from necromatcher.components.level_data import LevelData
from necromatcher.components.piece import EMPTY, Empty, Enemy, Friendly, PieceType
from necromatcher.components.side_effect import (
    DespawnAtTile,
    FullRespawnTiles,
    GameOver,
    RemoveGameOverCondition,
    SideEffect,
    SpawnAtTile,
)
from necromatcher.constants import DEFAULT_DESPAWN_DELAY
from necromatcher.events.game_event import (
    GameEvent,
    LoadLevel,
    NextLevel,
    PlacePlayerPiece,
    Reset,
    SeedRng,
)
from necromatcher.systems.grid import in_bounds, neighbours, tile_to_idx
from necromatcher.systems.level_loader import load_level
from necromatcher.systems.match import get_matches

logger = logging.getLogger(__name__)


def is_valid_placement_position(state: GameState, x: int, y: int) -> bool:
    """True if x/y is on the board and empty.

    With require_adjacent_friendly set, a friendly piece must also sit in the
    orthogonal neighbourhood of the target.
    """
    if not in_bounds(x, y):
        return False
    if not isinstance(state.tiles[tile_to_idx(x, y)].piece, Empty):
        return False
    if state.require_adjacent_friendly:
        return any(
            isinstance(state.tiles[tile_to_idx(nx, ny)].piece, Friendly)
            for nx, ny in neighbours(x, y, PieceType.SWORDSMAN)
        )
    return True


def validate_event(state: GameState, event: GameEvent) -> Optional[str]:
    """Return why event cannot be applied, or None if it can. Never mutates."""
    match event:
        case SeedRng():
            return None
        case PlacePlayerPiece(x=x, y=y, piece_type=piece_type):
            if state.status is not LevelStatus.PLAYING:
                return "Unable to place piece - the level is already over"
            if not state.souls.has_capacity(piece_type):
                return "Unable to place piece - not enough pieces to place"
            if not is_valid_placement_position(state, x, y):
                return "Unable to place piece - location is not valid"
            return None
        case LoadLevel(level_id=level_id):
            if level_id < 0 or level_id >= state.num_levels:
                return f"Unable to load level - {level_id} is not a valid level ID"
            return None
        case NextLevel():
            if state.current_level + 1 >= state.num_levels:
                return "Unable to load next level - already at the last level"
            return None
        case Reset():
            return None
    raise TypeError(f"Unknown game event {event!r}")


def apply_event(state: GameState, event: GameEvent) -> List[SideEffect]:
    """Validate then apply event. Rejected events change nothing and yield no side effects."""
    reason = validate_event(state, event)
    if reason is not None:
        logger.warning("Unable to apply event %r: %s", event, reason)
        return []
    return apply_valid_event(state, event)


def apply_valid_event(state: GameState, event: GameEvent) -> List[SideEffect]:
    """Apply an event validate_event has already accepted against this exact state."""
    match event:
        case SeedRng(seed=seed):
            logger.info("Seeded RNG to %s in response to GameEvent", seed)
            state.rng.seed(seed)
            state.events.append(event)
            return []
        case PlacePlayerPiece():
            return _place_player_piece(state, event)
        case LoadLevel(level_id=level_id):
            load_level(state, level_id)
            state.events.append(event)
            return [FullRespawnTiles()]
        case NextLevel():
            load_level(state, state.current_level + 1)
            state.events.append(event)
            return [FullRespawnTiles()]
        case Reset():
            return _reset(state, event)
    raise TypeError(f"Unknown game event {event!r}")


def _place_player_piece(state: GameState, event: PlacePlayerPiece) -> List[SideEffect]:
    logger.info("Adding player piece %s at %s, %s", event.piece_type.value, event.x, event.y)
    state.souls.spend(event.piece_type)

    placed_idx = tile_to_idx(event.x, event.y)
    state.tiles[placed_idx].piece = Friendly(event.piece_type)
    side_effects: List[SideEffect] = [
        SpawnAtTile(idx=placed_idx, piece_type=event.piece_type, owned=True, also_destroy=False)
    ]

    cleared: set[int] = set()
    for matched in get_matches(state.tiles):
        for idx in matched.indices():
            if idx in cleared:
                continue
            cleared.add(idx)
            if idx == placed_idx:
                # spawn and clear animate as one unit
                side_effects[0] = SpawnAtTile(
                    idx=placed_idx, piece_type=event.piece_type, owned=True, also_destroy=True
                )
            else:
                side_effects.append(DespawnAtTile(idx=idx, delay=DEFAULT_DESPAWN_DELAY))
            piece = state.tiles[idx].piece
            if isinstance(piece, Enemy):
                state.souls.add(piece.piece_type)
            state.tiles[idx].piece = EMPTY

    state.events.append(event)

    if state.enemies_remaining() == 0:
        load_another = state.current_level + 1 < state.num_levels
        state.status = LevelStatus.WON if load_another else LevelStatus.COMPLETED
        logger.warning("Level %s cleared, load another: %s", state.current_level, load_another)
        side_effects.append(GameOver(load_another=load_another))
    return side_effects


def _reset(state: GameState, event: Reset) -> List[SideEffect]:
    # The last level counts as finished whether or not it was won (status is
    # not consulted): reset there wipes history and restarts from level 0.
    if state.current_level + 1 >= state.num_levels:
        state.events.clear()
        load_level(state, 0)
        state.current_level = 0
        return [FullRespawnTiles(), RemoveGameOverCondition()]
    state.events.append(event)
    load_level(state, state.current_level)
    return [FullRespawnTiles()]


def replay_events(events: Iterable[GameEvent], levels: Sequence[LevelData]) -> GameState:
    """Rebuild a state by applying a recorded event log to a fresh, empty state."""
    state = GameState(levels=tuple(levels))
    for event in events:
        apply_event(state, event)
    return state
