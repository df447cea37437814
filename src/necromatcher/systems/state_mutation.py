import logging
from collections import deque
from typing import Deque

from esper import World

from necromatcher.events.bus import (
    EventBus,
    EVENT_GAME_EVENT,
    EVENT_GAME_EVENT_APPLIED,
    EVENT_GAME_EVENT_REJECTED,
    EVENT_SIDE_EFFECT,
)
from necromatcher.events.game_event import GameEvent
from necromatcher.systems.game_event_handler import apply_valid_event, validate_event
from necromatcher.utils.game_state import get_game_state

logger = logging.getLogger(__name__)


class StateMutationSystem:
    """Feeds GameEvents from the bus into the reducer and publishes the resulting side effects.

    Events are applied one at a time in arrival order. An event raised by a side
    effect subscriber while another is being handled waits in the inbox until the
    current one (and all of its side effects) has finished.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._inbox: Deque[GameEvent] = deque()
        self._draining = False
        self.event_bus.subscribe(EVENT_GAME_EVENT, self.on_game_event)

    def on_game_event(self, sender, **kwargs):
        event = kwargs.get('event')
        if event is None:
            return
        self._inbox.append(event)
        if self._draining:
            return
        self._draining = True
        try:
            while self._inbox:
                self._handle(self._inbox.popleft())
        finally:
            self._draining = False

    def _handle(self, event: GameEvent):
        state = get_game_state(self.world)
        reason = validate_event(state, event)
        if reason is not None:
            logger.warning("Unable to apply event %r: %s", event, reason)
            self.event_bus.emit(EVENT_GAME_EVENT_REJECTED, event=event, reason=reason)
            return
        side_effects = apply_valid_event(state, event)
        self.event_bus.emit(EVENT_GAME_EVENT_APPLIED, event=event, side_effects=list(side_effects))
        for effect in side_effects:
            self.event_bus.emit(EVENT_SIDE_EFFECT, effect=effect)
