from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"                    # payload: x, y
EVENT_TILE_CLICK = "tile_click"                    # payload: x=int, y=int (tile coordinates)
EVENT_TILE_HOVER = "tile_hover"                    # payload: x=int, y=int (NO_TILE when off-board)
EVENT_PIECE_TOGGLE = "piece_toggle"                # payload: None
EVENT_RESET_REQUEST = "reset_request"              # payload: None
EVENT_PLAYING_PIECE_CHANGED = "playing_piece_changed"  # payload: piece_type=PieceType


# ============================================================================
# GAME STATE
# ============================================================================
EVENT_GAME_EVENT = "game_event"                    # payload: event=GameEvent
EVENT_GAME_EVENT_APPLIED = "game_event_applied"    # payload: event=GameEvent, side_effects=list[SideEffect]
EVENT_GAME_EVENT_REJECTED = "game_event_rejected"  # payload: event=GameEvent, reason=str


# ============================================================================
# PRESENTATION
# ============================================================================
EVENT_SIDE_EFFECT = "side_effect"                  # payload: effect=SideEffect
EVENT_VISUAL_DESPAWNED = "visual_despawned"        # payload: idx=int, entity=int
