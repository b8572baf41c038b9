"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple, Optional


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        head: current (x, y) of the head, moved ahead of the body each tick
        positions: deque of (x, y) from tail at index 0 to the newest segment at the end
    """

    def __init__(self, positions: Optional[Iterable[Tuple[int, int]]] = None):
        self.positions = deque(positions or [])
        self.head: Tuple[int, int] = self.positions[-1] if self.positions else (0, 0)

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (oldest segment)."""
        return self.positions[0]

    def advance(self, dx: int, dy: int) -> Tuple[int, int]:
        """Move the head one cell; the body is left untouched."""
        x, y = self.head
        self.head = (x + dx, y + dy)
        return self.head

    def grow(self) -> Tuple[int, int]:
        """Append the head to the body."""
        self.positions.append(self.head)
        return self.head

    def drop_tail(self) -> Tuple[int, int]:
        """Remove and return the oldest segment."""
        return self.positions.popleft()

    def __len__(self):
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.positions)}>"
