"""
Player implementations for the snake engine.

Players are the input side of the game loop: they turn a game state
(or a stream of key presses) into direction changes.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
