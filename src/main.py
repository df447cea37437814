"""Entry point for the Necromatcher match-three puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, color, key, run, set_background_color

from necromatcher.events.bus import (
    EventBus,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_PIECE_TOGGLE,
    EVENT_RESET_REQUEST,
    EVENT_SIDE_EFFECT,
    EVENT_TICK,
)
from necromatcher.components.side_effect import FullRespawnTiles
from necromatcher.rendering.board_renderer import BoardRenderSystem
from necromatcher.systems.input import InputSystem
from necromatcher.systems.side_effects import SideEffectSystem
from necromatcher.systems.state_mutation import StateMutationSystem
from necromatcher.world import create_world


class NecromatcherWindow(Window):
    def __init__(self):
        super().__init__(1280, 720, "Necromatcher")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()
        self.state_mutation_system = StateMutationSystem(self.world, self.event_bus)
        self.side_effect_system = SideEffectSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.world, self.event_bus, self)
        self.render_system = BoardRenderSystem(self.world, self.event_bus, self)
        set_background_color(color.BLACK)
        # Level 0 is already loaded; build its visuals.
        self.event_bus.emit(EVENT_SIDE_EFFECT, effect=FullRespawnTiles())

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.S:
            self.event_bus.emit(EVENT_PIECE_TOGGLE)
        elif symbol == key.R:
            self.event_bus.emit(EVENT_RESET_REQUEST)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    NecromatcherWindow()
    run()


if __name__ == "__main__":
    main()
