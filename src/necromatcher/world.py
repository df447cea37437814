import random
from typing import Iterable

from esper import World

from necromatcher.components.game_state import GameState
from necromatcher.components.level_data import LevelData
from necromatcher.components.playing_piece import PlayingPiece
from necromatcher.events.game_event import LoadLevel, SeedRng
from necromatcher.systems.game_event_handler import apply_event
from necromatcher.systems.level_loader import load_levels


def create_game_state(
    *,
    seed: int | None = None,
    levels: Iterable[LevelData] | None = None,
    require_adjacent_friendly: bool = False,
) -> GameState:
    """Build the empty-board state. Malformed shipped levels raise LevelFormatError here."""
    level_catalogue = tuple(levels) if levels is not None else load_levels()
    if seed is None:
        seed = random.SystemRandom().getrandbits(64)
    return GameState(
        levels=level_catalogue,
        rng=random.Random(seed),
        events=[SeedRng(seed=seed)],
        require_adjacent_friendly=require_adjacent_friendly,
    )


def create_world(
    *,
    seed: int | None = None,
    levels: Iterable[LevelData] | None = None,
    require_adjacent_friendly: bool = False,
    start_level: int | None = 0,
) -> World:
    """Create the ECS world holding the single GameState and the player's PlayingPiece.

    start_level is loaded directly (no side effects are emitted); pass None to keep the board empty.
    """
    world = World()
    state = create_game_state(
        seed=seed,
        levels=levels,
        require_adjacent_friendly=require_adjacent_friendly,
    )
    world.create_entity(state)
    world.create_entity(PlayingPiece())
    if start_level is not None:
        apply_event(state, LoadLevel(level_id=start_level))
    return world
