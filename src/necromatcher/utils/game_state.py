from esper import World

from necromatcher.components.game_state import GameState
from necromatcher.components.playing_piece import PlayingPiece


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState not found")


def get_playing_piece(world: World) -> PlayingPiece:
    for _, piece in world.get_component(PlayingPiece):
        return piece
    raise RuntimeError("PlayingPiece not found")
