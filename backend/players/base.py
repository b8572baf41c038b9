"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player is polled once per tick and may return a new direction
    for the snake given the current game state.
    """

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of UP, RIGHT, DOWN, LEFT, or None when there is no input this tick
        """
        raise NotImplementedError
