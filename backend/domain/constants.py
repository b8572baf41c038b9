"""
Game constants for the snake engine.
"""

from enum import IntEnum


class Direction(IntEnum):
    """Movement directions. The ordering matters: opposites differ by 2."""
    UNDEFINED = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


class CellType(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FOOD = 2


UNDEFINED = Direction.UNDEFINED
UP = Direction.UP
RIGHT = Direction.RIGHT
DOWN = Direction.DOWN
LEFT = Direction.LEFT
VALID_MOVES = {UP, RIGHT, DOWN, LEFT}

# (dx, dy) per direction; y grows downwards
DELTAS = {
    UP: (0, -1),
    RIGHT: (1, 0),
    DOWN: (0, 1),
    LEFT: (-1, 0),
}

# Game settings
BOARD_SIZE = 10
FOOD_BONUS = 5

# Input bindings used by the input collaborators
KEY_BINDINGS = {
    'w': UP,
    'a': LEFT,
    's': DOWN,
    'd': RIGHT,
}
PAUSE_KEY = ' '
QUIT_KEYS = {'q', '\x1b'}

# Text frame glyphs
EMPTY_GLYPH = '.'
FOOD_GLYPH = 'F'
BODY_GLYPH = 'o'
HEAD_GLYPHS = {
    UP: '^',
    RIGHT: '>',
    DOWN: 'v',
    LEFT: '<',
}
UNDEFINED_HEAD_GLYPH = 'x'


def is_opposite(a: Direction, b: Direction) -> bool:
    """True when a and b are a 180 degree reversal of each other."""
    if a == UNDEFINED or b == UNDEFINED:
        return False
    return abs(int(a) - int(b)) == 2
