from esper import World

from necromatcher.components.piece_visual import GameOverBanner
from necromatcher.constants import NO_TILE
from necromatcher.events.bus import (
    EventBus,
    EVENT_GAME_EVENT,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_PIECE_TOGGLE,
    EVENT_PLAYING_PIECE_CHANGED,
    EVENT_RESET_REQUEST,
    EVENT_TILE_CLICK,
    EVENT_TILE_HOVER,
)
from necromatcher.events.game_event import PlacePlayerPiece, Reset
from necromatcher.ui.layout import window_to_tile
from necromatcher.utils.game_state import get_playing_piece

# Arcade mouse button codes.
MOUSE_BUTTON_LEFT = 1
MOUSE_BUTTON_RIGHT = 4


class InputSystem:
    """Turns raw input into GameEvents.

    Left click places the current playing piece, right click cycles it. Placement
    is ignored while the game-over banner is up; reset always goes through.
    """
    def __init__(self, world: World, event_bus: EventBus, window=None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_PIECE_TOGGLE, self.on_piece_toggle)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self.on_reset_request)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if button == MOUSE_BUTTON_RIGHT:
            self.event_bus.emit(EVENT_PIECE_TOGGLE)
            return
        if button != MOUSE_BUTTON_LEFT or x is None or y is None or self.window is None:
            return
        tile_x, tile_y = window_to_tile(x, y, self.window.width, self.window.height)
        if tile_x == NO_TILE or tile_y == NO_TILE:
            return
        self.event_bus.emit(EVENT_TILE_CLICK, x=tile_x, y=tile_y)

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or self.window is None:
            return
        tile_x, tile_y = window_to_tile(x, y, self.window.width, self.window.height)
        self.event_bus.emit(EVENT_TILE_HOVER, x=tile_x, y=tile_y)

    def on_tile_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        if self.input_locked():
            return
        piece_type = get_playing_piece(self.world).piece_type
        self.event_bus.emit(EVENT_GAME_EVENT, event=PlacePlayerPiece(x=x, y=y, piece_type=piece_type))

    def on_piece_toggle(self, sender, **kwargs):
        piece_type = get_playing_piece(self.world).toggle()
        self.event_bus.emit(EVENT_PLAYING_PIECE_CHANGED, piece_type=piece_type)

    def on_reset_request(self, sender, **kwargs):
        self.event_bus.emit(EVENT_GAME_EVENT, event=Reset())

    def input_locked(self) -> bool:
        return any(True for _ in self.world.get_component(GameOverBanner))
