"""
Grid engine for the 2048 game.

It includes functions for sliding and merging tiles, applying a move in any direction, checking whether the game
is over and spawning new tiles.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    MoveResult,
    apply_move,
    count_empty_cells,
    fill_cells,
    has_empty_cell,
    illegal_directions,
    is_terminal,
    latent_state,
    legal_directions,
    merge_row,
    new_grid,
    rotate_clockwise,
    slide_and_merge,
    spawn_random_tile,
)
from .gamemove import Direction, as_direction

__all__ = [
    "TILE_SPAWN_PROBS",
    "Direction",
    "MoveResult",
    "apply_move",
    "as_direction",
    "count_empty_cells",
    "fill_cells",
    "has_empty_cell",
    "illegal_directions",
    "is_terminal",
    "latent_state",
    "legal_directions",
    "merge_row",
    "new_grid",
    "rotate_clockwise",
    "slide_and_merge",
    "spawn_random_tile",
]
