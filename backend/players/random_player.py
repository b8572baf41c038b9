"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DELTAS, VALID_MOVES, CellType, Direction, is_opposite
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls, self-collisions
    and reversals the engine would reject anyway.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random

    def get_move(self, game_state: GameState) -> Direction:
        head_x, head_y = game_state.head

        candidates = sorted(
            move for move in VALID_MOVES
            if not is_opposite(game_state.direction, move)
        )

        valid_moves: List[Direction] = []
        for move in candidates:
            dx, dy = DELTAS[move]
            new_x, new_y = head_x + dx, head_y + dy

            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue

            # The tail is still on the board when the engine checks for self collision
            if game_state.cells[new_y][new_x] == CellType.SNAKE:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(valid_moves)
