"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
presentation concerns (terminal input, rendering, timers).
"""

from .constants import (
    UNDEFINED, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    BOARD_SIZE, FOOD_BONUS, Direction, CellType, is_opposite,
)
from .snake import Snake
from .game_state import GameState
from .game import Game

__all__ = [
    'UNDEFINED', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'BOARD_SIZE', 'FOOD_BONUS', 'Direction', 'CellType', 'is_opposite',
    'Snake',
    'GameState',
    'Game',
]
