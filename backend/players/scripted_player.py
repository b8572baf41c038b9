"""
Scripted player - replays a sequence of key presses through the key bindings.
"""

import logging
from typing import Iterable, Optional

from domain.constants import KEY_BINDINGS, PAUSE_KEY, QUIT_KEYS, Direction
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)


class ScriptedPlayer(Player):
    """
    Consumes one key per tick, the way the terminal client reads one key
    per timer period.

    w/a/s/d steer, space toggles pause and q/escape asks the driver to stop.
    Unknown keys and an exhausted script mean "no input this tick".
    """

    def __init__(self, keys: Iterable[str]):
        self._keys = iter(keys)
        self.paused = False
        self.quit_requested = False

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        key = next(self._keys, None)
        if key is None:
            return None

        if key in QUIT_KEYS:
            self.quit_requested = True
            return None

        if key == PAUSE_KEY:
            self.paused = not self.paused
            logger.info("Paused" if self.paused else "Resumed")
            return None

        direction = KEY_BINDINGS.get(key.lower())
        if direction is None:
            logger.debug(f"Ignoring unbound key {key!r}")
        return direction
