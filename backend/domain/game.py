"""
Game engine - the single-player snake state machine.

The engine owns the grid, the snake, the food, the score and the terminal
flags. Callers drive it with set_direction() and tick() from one thread and
read it back through the query methods or get_current_state().
"""

import logging
import random
from typing import Callable, List, Optional, Tuple

from .constants import (
    BOARD_SIZE,
    FOOD_BONUS,
    DELTAS,
    UNDEFINED,
    CellType,
    Direction,
    is_opposite,
)
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)


class Game:
    """
    Manages:
      - Grid (BOARD_SIZE x BOARD_SIZE cells)
      - Snake (head + body)
      - Food
      - Score
      - Terminal flags (game over / win)

    The lifecycle is Game() -> start() once -> tick() until is_over() or is_win().
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.size = BOARD_SIZE
        self.rng = rng if rng is not None else random
        self.cells: List[List[CellType]] = [
            [CellType.EMPTY for _ in range(self.size)] for _ in range(self.size)
        ]
        self.snake = Snake()
        self.food_position: Optional[Tuple[int, int]] = None
        self.score_points = 0
        self.current_direction = UNDEFINED
        self.round_number = 0
        self.started = False
        self.game_over = False
        self.win = False

    def start(self):
        """Place the head on a random cell, grow the first segment and drop the first food."""
        if self.started:
            raise ValueError("Game has already been started.")
        self.started = True

        x = self.rng.randrange(self.size)
        y = self.rng.randrange(self.size)
        self.snake.head = (x, y)

        self._grow_snake()
        self._spawn_food()
        logger.debug(f"Game started: head={self.snake.head}, food={self.food_position}")

    def set_direction(self, direction):
        """
        Change the direction of travel. A 180 degree reversal is silently ignored.

        Raises:
            ValueError: if direction is not a Direction value.
        """
        direction = Direction(direction)
        if is_opposite(self.current_direction, direction):
            logger.debug(f"Ignoring reversal {self.current_direction.name} -> {direction.name}")
            return
        self.current_direction = direction

    move = set_direction

    def tick(self):
        """
        Advance the simulation by one step:
          1) Do nothing until a direction is set or once the game has ended
          2) Move the head
          3) Wall or self collision ends the game
          4) Grow onto the new head cell
          5) A full board is a win
          6) Eat food (keep the tail) or drop the tail
        """
        if self.current_direction == UNDEFINED or self.game_over or self.win:
            return

        self.round_number += 1
        dx, dy = DELTAS[self.current_direction]
        x, y = self.snake.advance(dx, dy)

        if not self._in_bounds(x, y):
            self.game_over = True
            logger.debug(f"Wall collision at {(x, y)} on round {self.round_number}")
            return

        # The tail has not moved yet, so running into it is a collision too.
        if self.cells[y][x] == CellType.SNAKE:
            self.game_over = True
            logger.debug(f"Self collision at {(x, y)} on round {self.round_number}")
            return

        self._grow_snake()

        if not self.free_cells():
            self.win = True
            if (x, y) == self.food_position:
                self.food_position = None
            logger.debug(f"Board filled on round {self.round_number}")
            return

        if (x, y) == self.food_position:
            self._eat_food()
        else:
            self._remove_tail()

    # Queries

    def is_over(self) -> bool:
        return self.game_over

    def is_win(self) -> bool:
        return self.win

    def score(self) -> int:
        return self.score_points

    def direction(self) -> Direction:
        return self.current_direction

    def length(self) -> int:
        return len(self.snake)

    def head(self) -> Tuple[int, int]:
        return self.snake.head

    def food(self) -> Optional[Tuple[int, int]]:
        return self.food_position

    def is_head(self, x: int, y: int) -> bool:
        return self.snake.head == (x, y)

    def cell(self, x: int, y: int) -> CellType:
        return self.cells[y][x]

    def walk(self, fn: Callable[[int, int, CellType], None]):
        """
        Call fn(x, y, cell_type) for every cell.

        y is the outer loop and x the inner one, so a row is complete
        once x == size - 1. Renderers rely on that to break lines.
        """
        for y in range(self.size):
            for x in range(self.size):
                fn(x, y, self.cells[y][x])

    def free_cells(self) -> List[Tuple[int, int]]:
        """Return every EMPTY cell, x outer and y inner."""
        return [
            (x, y)
            for x in range(self.size)
            for y in range(self.size)
            if self.cells[y][x] == CellType.EMPTY
        ]

    def set_food(self, position: Tuple[int, int]):
        """
        Move the food to a specific empty cell.

        Raises:
            ValueError: if the cell is out of bounds or not empty.
        """
        x, y = position
        if not self._in_bounds(x, y):
            raise ValueError(f"Food out of bounds at {(x, y)}.")
        if self.cells[y][x] == CellType.SNAKE:
            raise ValueError(f"Cell {(x, y)} is occupied by the snake.")

        if self.food_position is not None:
            fx, fy = self.food_position
            self.cells[fy][fx] = CellType.EMPTY
        self.food_position = (x, y)
        self.cells[y][x] = CellType.FOOD

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            round_number=self.round_number,
            head=self.snake.head,
            body=list(self.snake.positions),
            food=self.food_position,
            score=self.score_points,
            direction=self.current_direction,
            game_over=self.game_over,
            win=self.win,
            width=self.size,
            height=self.size,
            cells=[list(row) for row in self.cells],
        )

    # Internals

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _grow_snake(self):
        x, y = self.snake.grow()
        self.cells[y][x] = CellType.SNAKE

    def _remove_tail(self):
        x, y = self.snake.drop_tail()
        self.cells[y][x] = CellType.EMPTY

    def _eat_food(self):
        self.score_points += FOOD_BONUS
        logger.debug(f"Food eaten at {self.food_position}, score={self.score_points}")
        self._spawn_food()

    def _spawn_food(self):
        cell = self._random_free_cell()
        if cell is None:
            return
        self.food_position = cell
        x, y = cell
        self.cells[y][x] = CellType.FOOD

    def _random_free_cell(self) -> Optional[Tuple[int, int]]:
        """
        Return a random EMPTY cell, or None when the board is full.
        """
        free = self.free_cells()
        if not free:
            return None
        return free[self.rng.randrange(len(free))]

    def __repr__(self):
        return (
            f"<Game round={self.round_number}, score={self.score_points}, "
            f"length={self.length()}, direction={self.current_direction.name}>"
        )
