import logging
from typing import List

from esper import World

from necromatcher.components.piece import Empty, Enemy, Friendly, Obstacle
from necromatcher.components.piece_visual import GameOverBanner, PendingDespawn, PieceVisual
from necromatcher.components.side_effect import (
    DespawnAtTile,
    FullRespawnTiles,
    GameOver,
    RemoveGameOverCondition,
    SideEffect,
    SpawnAtTile,
)
from necromatcher.constants import DEFAULT_DESPAWN_DELAY
from necromatcher.events.bus import (
    EventBus,
    EVENT_GAME_EVENT,
    EVENT_SIDE_EFFECT,
    EVENT_TICK,
    EVENT_VISUAL_DESPAWNED,
)
from necromatcher.events.game_event import NextLevel
from necromatcher.utils.game_state import get_game_state

logger = logging.getLogger(__name__)


class SideEffectSystem:
    """Carries out side effects against PieceVisual entities in the world.

    Despawns are delayed: PendingDespawn timers count down on tick and the entity
    is removed on the first tick at or after its delay.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SIDE_EFFECT, self.on_side_effect)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_side_effect(self, sender, **kwargs):
        effect: SideEffect | None = kwargs.get('effect')
        if effect is None:
            return
        logger.info("Handling side effect: %r", effect)
        match effect:
            case SpawnAtTile(idx=idx, piece_type=piece_type, owned=owned, also_destroy=also_destroy):
                entity = self.world.create_entity(PieceVisual(idx=idx, piece_type=piece_type, owned=owned))
                if also_destroy:
                    self.world.add_component(entity, PendingDespawn(remaining=DEFAULT_DESPAWN_DELAY))
            case DespawnAtTile(idx=idx, delay=delay):
                for entity, visual in self.world.get_component(PieceVisual):
                    if visual.idx == idx and not self.world.has_component(entity, PendingDespawn):
                        self.world.add_component(entity, PendingDespawn(remaining=delay))
                        break
            case FullRespawnTiles():
                self.full_respawn()
            case GameOver(load_another=load_another):
                if load_another:
                    self.event_bus.emit(EVENT_GAME_EVENT, event=NextLevel())
                else:
                    logger.warning("Campaign completed, freezing input until reset")
                    self._clear_visuals()
                    if not self.game_over_active():
                        self.world.create_entity(GameOverBanner())
            case RemoveGameOverCondition():
                for entity, _ in list(self.world.get_component(GameOverBanner)):
                    self.world.delete_entity(entity, immediate=True)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        expired: List[int] = []
        for entity, pending in self.world.get_component(PendingDespawn):
            pending.remaining -= dt
            if pending.remaining <= 0.0:
                expired.append(entity)
        for entity in expired:
            visual = self.world.component_for_entity(entity, PieceVisual)
            self.world.delete_entity(entity, immediate=True)
            self.event_bus.emit(EVENT_VISUAL_DESPAWNED, idx=visual.idx, entity=entity)

    def full_respawn(self):
        self._clear_visuals()
        state = get_game_state(self.world)
        for tile in state.tiles:
            match tile.piece:
                case Empty():
                    continue
                case Friendly(piece_type=piece_type):
                    visual = PieceVisual(idx=tile.idx, piece_type=piece_type, owned=True)
                case Enemy(piece_type=piece_type):
                    visual = PieceVisual(idx=tile.idx, piece_type=piece_type, owned=False)
                case Obstacle(piece_type=piece_type):
                    visual = PieceVisual(idx=tile.idx, piece_type=piece_type, owned=False, obstacle=True)
            self.world.create_entity(visual)

    def game_over_active(self) -> bool:
        return any(True for _ in self.world.get_component(GameOverBanner))

    def _clear_visuals(self):
        for entity, _ in list(self.world.get_component(PieceVisual)):
            self.world.delete_entity(entity, immediate=True)
