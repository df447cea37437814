from typing import Dict, Tuple

from esper import World

from necromatcher.components.game_state import GameState, LevelStatus
from necromatcher.components.piece import PLACEABLE_TYPES, PieceType
from necromatcher.components.piece_visual import GameOverBanner, PendingDespawn, PieceVisual
from necromatcher.constants import (
    COLS,
    DEFAULT_DESPAWN_DELAY,
    GRID_BORDER_COLOUR,
    GRID_HOVER_COLOUR,
    GRID_NEIGHBOUR_HOVER_COLOUR,
    NO_TILE,
    OBSTACLE_COLOUR,
    PLAYER_0_COLOUR,
    PLAYER_1_COLOUR,
    ROWS,
    SIDE_PANEL_PADDING,
)
from necromatcher.events.bus import EventBus, EVENT_TILE_HOVER
from necromatcher.systems.grid import idx_to_tile, in_bounds, neighbours
from necromatcher.ui.layout import tile_origin
from necromatcher.utils.game_state import get_game_state, get_playing_piece

PADDING = 4

PIECE_GLYPHS: Dict[PieceType, str] = {
    PieceType.SWORDSMAN: "S",
    PieceType.HOUND: "H",
    PieceType.BOWMAN: "B",
    PieceType.WALL: "#",
}


def harvest_text(state: GameState) -> str:
    remaining = state.enemies_remaining()
    if remaining == 0:
        return ""
    return f"Harvest {remaining} more red souls to win"


class BoardRenderSystem:
    """Draws the board, piece visuals and the side panel text with arcade."""
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.hovered: Tuple[int, int] = (NO_TILE, NO_TILE)
        self.event_bus.subscribe(EVENT_TILE_HOVER, self.on_tile_hover)

    def on_tile_hover(self, sender, **kwargs):
        self.hovered = (kwargs.get('x', NO_TILE), kwargs.get('y', NO_TILE))

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade

        self._draw_grid(arcade)
        self._draw_pieces(arcade)
        self._draw_side_panel(arcade)

    def _draw_grid(self, arcade):
        highlighted: Dict[Tuple[int, int], Tuple[int, int, int]] = {}
        hx, hy = self.hovered
        if in_bounds(hx, hy):
            piece_type = get_playing_piece(self.world).piece_type
            for pos in neighbours(hx, hy, piece_type):
                highlighted[pos] = GRID_NEIGHBOUR_HOVER_COLOUR
            highlighted[(hx, hy)] = GRID_HOVER_COLOUR
        for y in range(ROWS):
            for x in range(COLS):
                left, bottom, size = tile_origin(x, y, self.window.width, self.window.height)
                colour = highlighted.get((x, y), GRID_BORDER_COLOUR)
                arcade.draw_lbwh_rectangle_outline(left, bottom, size, size, colour, border_width=2)

    def _draw_pieces(self, arcade):
        for entity, visual in self.world.get_component(PieceVisual):
            x, y = idx_to_tile(visual.idx)
            left, bottom, size = tile_origin(x, y, self.window.width, self.window.height)
            if visual.obstacle:
                arcade.draw_lbwh_rectangle_filled(
                    left + PADDING, bottom + PADDING, size - 2 * PADDING, size - 2 * PADDING, OBSTACLE_COLOUR
                )
                continue
            base = PLAYER_0_COLOUR if visual.owned else PLAYER_1_COLOUR
            alpha = 255
            if self.world.has_component(entity, PendingDespawn):
                pending = self.world.component_for_entity(entity, PendingDespawn)
                alpha = int(255 * max(0.0, min(1.0, pending.remaining / DEFAULT_DESPAWN_DELAY)))
            centre_x = left + size / 2
            centre_y = bottom + size / 2
            arcade.draw_circle_filled(centre_x, centre_y, size / 2 - PADDING, (*base, alpha))
            arcade.draw_text(
                PIECE_GLYPHS[visual.piece_type],
                centre_x,
                centre_y,
                (255, 255, 255, alpha),
                int(size * 0.35),
                anchor_x="center",
                anchor_y="center",
            )

    def _draw_side_panel(self, arcade):
        state = get_game_state(self.world)
        playing = get_playing_piece(self.world).piece_type
        left = SIDE_PANEL_PADDING
        top = self.window.height - SIDE_PANEL_PADDING
        arcade.draw_text(f"Level {state.current_level + 1} / {state.num_levels}", left, top, (255, 255, 255), 20)
        if state.level_message:
            arcade.draw_text(
                state.level_message, left, top - 40, (180, 180, 180), 12, multiline=True, width=240
            )
        harvest = harvest_text(state)
        if harvest:
            arcade.draw_text(harvest, left, top - 130, PLAYER_1_COLOUR, 12)
        line_y = top - 170
        for piece_type in PLACEABLE_TYPES:
            marker = ">" if piece_type is playing else " "
            arcade.draw_text(
                f"{marker} {piece_type.value.title()}: {state.souls.count(piece_type)}",
                left,
                line_y,
                PLAYER_0_COLOUR if piece_type is playing else (200, 200, 200),
                16,
            )
            line_y -= 28
        if any(True for _ in self.world.get_component(GameOverBanner)) or state.status is LevelStatus.COMPLETED:
            arcade.draw_text(
                "All souls harvested. Press [R] to start again.",
                self.window.width / 2,
                self.window.height - SIDE_PANEL_PADDING,
                (255, 215, 0),
                18,
                anchor_x="center",
                anchor_y="top",
            )
