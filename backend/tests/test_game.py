"""
Tests for domain/game.py - the snake engine.

Scenarios build the board by hand so every tick has a known outcome.
"""

import pytest
import sys
import os
import random

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Game,
    GameState,
    Snake,
    CellType,
    Direction,
    UNDEFINED, UP, DOWN, LEFT, RIGHT,
    VALID_MOVES,
    BOARD_SIZE,
    FOOD_BONUS,
    is_opposite,
)


def make_game(body, direction=UNDEFINED, food=None, seed=0):
    """Build a started game whose snake occupies body (tail first, head last)."""
    game = Game(rng=random.Random(seed))
    game.started = True
    game.snake = Snake(body)
    for x, y in body:
        game.cells[y][x] = CellType.SNAKE
    if food is not None:
        game.set_food(food)
    game.current_direction = direction
    return game


def count_cells(game, cell_type):
    return sum(row.count(cell_type) for row in game.cells)


def snake_path():
    """Every cell of the board in one continuous zig-zag path."""
    path = []
    for y in range(BOARD_SIZE):
        xs = range(BOARD_SIZE) if y % 2 == 0 else range(BOARD_SIZE - 1, -1, -1)
        path.extend((x, y) for x in xs)
    return path


class TestDirection:
    """Tests for the reversal rule."""

    def test_opposite_pairs(self):
        assert is_opposite(UP, DOWN)
        assert is_opposite(DOWN, UP)
        assert is_opposite(LEFT, RIGHT)
        assert is_opposite(RIGHT, LEFT)

    def test_perpendicular_and_same_are_not_opposite(self):
        assert not is_opposite(UP, LEFT)
        assert not is_opposite(RIGHT, DOWN)
        assert not is_opposite(UP, UP)

    def test_undefined_is_never_opposite(self):
        for move in VALID_MOVES:
            assert not is_opposite(UNDEFINED, move)
            assert not is_opposite(move, UNDEFINED)


class TestGameInitialization:
    """Tests for Game() and start()."""

    def test_new_game_is_empty(self):
        """A new game has an empty grid and no direction."""
        game = Game()

        assert game.direction() == UNDEFINED
        assert game.length() == 0
        assert game.score() == 0
        assert game.is_over() is False
        assert game.is_win() is False
        assert count_cells(game, CellType.EMPTY) == BOARD_SIZE * BOARD_SIZE

    def test_start_places_head_and_food(self):
        """start() grows a one-cell snake and drops one food on an empty cell."""
        game = Game(rng=random.Random(1))
        game.start()

        hx, hy = game.head()
        assert game.length() == 1
        assert game.cell(hx, hy) == CellType.SNAKE
        assert game.is_head(hx, hy)
        assert count_cells(game, CellType.SNAKE) == 1
        assert count_cells(game, CellType.FOOD) == 1
        fx, fy = game.food()
        assert game.cell(fx, fy) == CellType.FOOD
        assert game.food() != game.head()

    def test_start_twice_raises(self):
        game = Game()
        game.start()

        with pytest.raises(ValueError):
            game.start()

    def test_seeded_games_are_reproducible(self):
        """Two games with the same seed start identically."""
        a = Game(rng=random.Random(7))
        b = Game(rng=random.Random(7))
        a.start()
        b.start()

        assert a.head() == b.head()
        assert a.food() == b.food()


class TestSetDirection:
    """Tests for set_direction()."""

    @pytest.mark.parametrize("move", sorted(VALID_MOVES))
    def test_reversal_is_rejected(self, move):
        game = make_game([(5, 5)])
        game.set_direction(move)
        game.set_direction(Direction((move + 1) % 4 + 1))

        assert game.direction() == move

    @pytest.mark.parametrize("move", sorted(VALID_MOVES))
    def test_perpendicular_turn_is_accepted(self, move):
        game = make_game([(5, 5)])
        game.set_direction(move)
        turn = Direction(move % 4 + 1)
        game.set_direction(turn)

        assert game.direction() == turn

    def test_first_move_is_always_accepted(self):
        for move in VALID_MOVES:
            game = make_game([(5, 5)])
            game.set_direction(move)
            assert game.direction() == move

    def test_move_alias(self):
        game = make_game([(5, 5)])
        game.move(LEFT)
        assert game.direction() == LEFT

    def test_invalid_direction_raises(self):
        game = make_game([(5, 5)])
        with pytest.raises(ValueError):
            game.set_direction(9)

    def test_up_then_down_still_moves_up(self):
        """A rejected reversal leaves the snake moving in its old direction."""
        game = make_game([(5, 5)], food=(0, 0))
        game.set_direction(UP)
        game.set_direction(DOWN)
        game.tick()

        assert game.head() == (5, 4)
        assert game.direction() == UP


class TestTick:
    """Tests for tick()."""

    def test_tick_without_direction_is_noop(self):
        game = Game(rng=random.Random(3))
        game.start()
        before = game.get_current_state()

        game.tick()
        after = game.get_current_state()

        assert after.head == before.head
        assert after.body == before.body
        assert after.cells == before.cells
        assert after.round_number == before.round_number == 0

    def test_eating_food(self):
        """Head at (5,5) moving right onto food at (6,5)."""
        game = make_game([(5, 5)], direction=RIGHT, food=(6, 5))
        game.tick()

        assert game.head() == (6, 5)
        assert game.score() == FOOD_BONUS
        assert game.length() == 2
        assert game.cell(5, 5) == CellType.SNAKE
        assert game.cell(6, 5) == CellType.SNAKE
        assert game.food() not in [(5, 5), (6, 5)]
        assert count_cells(game, CellType.FOOD) == 1
        fx, fy = game.food()
        assert game.cell(fx, fy) == CellType.FOOD

    def test_move_without_food_keeps_length(self):
        game = make_game([(3, 5), (4, 5), (5, 5)], direction=RIGHT, food=(0, 0))
        game.tick()

        assert game.length() == 3
        assert game.cell(3, 5) == CellType.EMPTY
        assert game.cell(6, 5) == CellType.SNAKE
        assert game.head() == (6, 5)
        assert list(game.snake.positions) == [(4, 5), (5, 5), (6, 5)]
        assert game.score() == 0
        assert game.food() == (0, 0)

    def test_wall_collision(self):
        game = make_game([(8, 5), (9, 5)], direction=RIGHT, food=(0, 0))
        cells_before = [list(row) for row in game.cells]

        game.tick()

        assert game.is_over() is True
        assert game.is_win() is False
        assert game.cells == cells_before
        assert game.length() == 2

    @pytest.mark.parametrize("head, move", [
        ((0, 0), UP),
        ((0, 0), LEFT),
        ((BOARD_SIZE - 1, BOARD_SIZE - 1), DOWN),
        ((BOARD_SIZE - 1, BOARD_SIZE - 1), RIGHT),
    ])
    def test_every_wall_ends_the_game(self, head, move):
        game = make_game([head], direction=move, food=(5, 5))
        game.tick()
        assert game.is_over() is True

    def test_game_over_is_sticky(self):
        """Ticks after a collision change nothing."""
        game = make_game([(9, 5)], direction=RIGHT, food=(0, 0))
        game.tick()
        state = game.get_current_state()

        game.set_direction(UP)
        game.tick()

        assert game.is_over() is True
        assert game.get_current_state().cells == state.cells
        assert game.round_number == state.round_number

    def test_self_collision(self):
        """Running into the middle of the body ends the game."""
        body = [(3, 5), (4, 5), (4, 4), (5, 4), (5, 5)]
        game = make_game(body, direction=DOWN, food=(0, 0))
        game.set_direction(LEFT)
        game.tick()

        assert game.is_over() is True
        assert game.length() == len(body)
        assert count_cells(game, CellType.SNAKE) == len(body)

    def test_running_into_the_tail_is_a_collision(self):
        """The tail still occupies its cell when the collision check runs."""
        body = [(4, 5), (4, 4), (5, 4), (5, 5)]
        game = make_game(body, direction=DOWN, food=(0, 0))
        game.set_direction(LEFT)
        game.tick()

        assert game.is_over() is True

    def test_filling_the_board_wins(self):
        """The move that fills the last cell wins and keeps the tail."""
        path = snake_path()
        game = make_game(path[:-1], direction=LEFT, food=path[-1])
        game.tick()

        assert game.is_win() is True
        assert game.is_over() is False
        assert game.length() == BOARD_SIZE * BOARD_SIZE
        assert game.cell(*path[0]) == CellType.SNAKE
        assert count_cells(game, CellType.SNAKE) == BOARD_SIZE * BOARD_SIZE
        assert game.food() is None
        assert game.score() == 0

        game.tick()
        assert game.head() == path[-1]

    def test_grid_matches_body_over_a_long_game(self):
        """Grid and body stay consistent on every tick of an autopilot game."""
        from players.random_player import RandomPlayer

        rng = random.Random(11)
        game = Game(rng=rng)
        player = RandomPlayer(rng=rng)
        game.start()

        for _ in range(300):
            game.set_direction(player.get_move(game.get_current_state()))
            game.tick()
            if game.is_over() or game.is_win():
                break
            assert count_cells(game, CellType.SNAKE) == game.length()
            assert count_cells(game, CellType.FOOD) == 1
            for x, y in game.snake.positions:
                assert game.cell(x, y) == CellType.SNAKE
            assert game.snake.positions[-1] == game.head()


class TestQueries:
    """Tests for walk(), set_food() and snapshots."""

    def test_walk_visits_rows_in_order(self):
        game = make_game([(2, 0)], food=(7, 3))
        visited = []
        game.walk(lambda x, y, cell: visited.append((x, y, cell)))

        assert len(visited) == BOARD_SIZE * BOARD_SIZE
        assert [(x, y) for x, y, _ in visited[:BOARD_SIZE]] == [(x, 0) for x in range(BOARD_SIZE)]
        assert visited[BOARD_SIZE][:2] == (0, 1)
        assert (2, 0, CellType.SNAKE) in visited
        assert (7, 3, CellType.FOOD) in visited

    def test_free_cells_excludes_snake_and_food(self):
        game = make_game([(1, 1), (1, 2)], food=(3, 3))
        free = game.free_cells()

        assert len(free) == BOARD_SIZE * BOARD_SIZE - 3
        assert (1, 1) not in free
        assert (1, 2) not in free
        assert (3, 3) not in free

    def test_set_food_moves_the_food(self):
        game = make_game([(5, 5)], food=(0, 0))
        game.set_food((2, 2))

        assert game.food() == (2, 2)
        assert game.cell(0, 0) == CellType.EMPTY
        assert count_cells(game, CellType.FOOD) == 1

    def test_set_food_out_of_bounds_raises(self):
        game = make_game([(5, 5)])
        with pytest.raises(ValueError):
            game.set_food((BOARD_SIZE, 0))

    def test_set_food_on_snake_raises(self):
        game = make_game([(5, 5)])
        with pytest.raises(ValueError):
            game.set_food((5, 5))

    def test_snapshot_is_a_copy(self):
        game = make_game([(5, 5)], direction=RIGHT, food=(0, 0))
        state = game.get_current_state()
        state.cells[5][5] = CellType.EMPTY
        state.body.append((9, 9))

        assert isinstance(state, GameState)
        assert game.cell(5, 5) == CellType.SNAKE
        assert game.length() == 1
