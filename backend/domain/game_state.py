"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional

from .constants import (
    CellType,
    Direction,
    EMPTY_GLYPH,
    FOOD_GLYPH,
    BODY_GLYPH,
    HEAD_GLYPHS,
    UNDEFINED_HEAD_GLYPH,
)


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        round_number: how many ticks have been applied (0-based)
        head: (x, y) of the snake head
        body: list of (x, y) from tail to head
        food: (x, y) of the food, or None when the board had no room for it
        score: points collected so far
        direction: current direction of travel
        game_over, win: terminal flags
        width, height: board dimensions
        cells: grid contents indexed as cells[y][x]
    """

    def __init__(
        self,
        round_number: int,
        head: Tuple[int, int],
        body: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        direction: Direction,
        game_over: bool,
        win: bool,
        width: int,
        height: int,
        cells: List[List[CellType]],
    ):
        self.round_number = round_number
        self.head = head
        self.body = body
        self.food = food
        self.score = score
        self.direction = direction
        self.game_over = game_over
        self.win = win
        self.width = width
        self.height = height
        self.cells = cells

    @property
    def length(self) -> int:
        return len(self.body)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        o = snake body
        ^ > v < = snake head, pointing in the direction of travel (x before the first move)
        Row 0 is the top line.
        """
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                cell = self.cells[y][x]
                if cell == CellType.FOOD:
                    row.append(FOOD_GLYPH)
                elif cell == CellType.SNAKE:
                    if (x, y) == self.head:
                        row.append(HEAD_GLYPHS.get(self.direction, UNDEFINED_HEAD_GLYPH))
                    else:
                        row.append(BODY_GLYPH)
                else:
                    row.append(EMPTY_GLYPH)
            lines.append("".join(row))
        return "\n".join(lines)

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, score={self.score}, "
            f"length={self.length}, over={self.game_over}, win={self.win}>"
        )
