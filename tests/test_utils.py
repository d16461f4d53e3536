import numpy as np
import pytest

from connect4_engine.utils import (DIRECTION_VECTORS, Direction, GameResult, Player,
                                   check_win, find_winning_line, is_valid_position, line_from)


def empty_grid(height=6, width=7):
    return np.zeros((height, width), dtype=np.int8)


def place(grid, cells, player=Player.ONE):
    for r, c in cells:
        grid[r, c] = player.value
    return grid


def test_player_other():
    assert Player.ONE.other() == Player.TWO
    assert Player.TWO.other() == Player.ONE
    assert Player.EMPTY.other() == Player.EMPTY


def test_game_result_winner_and_game_over():
    assert not GameResult.IN_PROGRESS.is_game_over()
    assert GameResult.DRAW.is_game_over()
    assert GameResult.DRAW.winner is None
    assert GameResult.PLAYER_TWO_WIN.winner == Player.TWO
    assert GameResult.won_by(Player.ONE) == GameResult.PLAYER_ONE_WIN
    with pytest.raises(ValueError):
        GameResult.won_by(Player.EMPTY)


def test_direction_scan_order():
    assert list(DIRECTION_VECTORS.values()) == [(0, 1), (1, 0), (1, 1), (1, -1)]
    assert line_from(2, 3, Direction.DIAGONAL_LEFT) == [(2, 3), (3, 2), (4, 1), (5, 0)]


def test_is_valid_position_bounds():
    assert is_valid_position(0, 0)
    assert is_valid_position(5, 6)
    assert not is_valid_position(6, 0)
    assert not is_valid_position(0, -1)
    assert is_valid_position(3, 3, height=4, width=4)
    assert not is_valid_position(4, 3, height=4, width=4)


def test_empty_board_has_no_line():
    grid = empty_grid()
    assert find_winning_line(grid, Player.ONE) is None
    assert not check_win(grid, Player.TWO)


def test_three_in_a_row_is_not_a_win():
    grid = place(empty_grid(), [(5, 0), (5, 1), (5, 2)])
    assert not check_win(grid, Player.ONE)


def test_diagonal_right_from_top_left_corner():
    grid = place(empty_grid(), [(0, 0), (1, 1), (2, 2), (3, 3)])
    assert find_winning_line(grid, Player.ONE) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_diagonal_left_reported_from_top_cell():
    grid = place(empty_grid(), [(3, 0), (2, 1), (1, 2), (0, 3)])
    assert find_winning_line(grid, Player.ONE) == [(0, 3), (1, 2), (2, 1), (3, 0)]


def test_horizontal_beats_vertical_at_same_start():
    grid = place(empty_grid(), [(2, 0), (2, 1), (2, 2), (2, 3), (3, 0), (4, 0), (5, 0)])
    assert find_winning_line(grid, Player.ONE) == [(2, 0), (2, 1), (2, 2), (2, 3)]


def test_vertical_beats_diagonal_at_same_start():
    grid = place(empty_grid(), [(0, 0), (1, 0), (2, 0), (3, 0), (1, 1), (2, 2), (3, 3)])
    assert find_winning_line(grid, Player.ONE) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_earlier_start_cell_wins_over_direction():
    # Horizontal on row 5 and a vertical starting on row 2: row-major order finds the vertical first
    grid = place(empty_grid(), [(5, 3), (5, 4), (5, 5), (5, 6), (2, 0), (3, 0), (4, 0), (5, 0)])
    assert find_winning_line(grid, Player.ONE) == [(2, 0), (3, 0), (4, 0), (5, 0)]


def test_only_the_given_players_pieces_count():
    grid = place(empty_grid(), [(5, 0), (5, 1), (5, 2), (5, 3)], Player.TWO)
    assert find_winning_line(grid, Player.ONE) is None
    assert find_winning_line(grid, Player.TWO) == [(5, 0), (5, 1), (5, 2), (5, 3)]


def test_mixed_line_is_not_a_win():
    grid = place(empty_grid(), [(5, 0), (5, 1), (5, 3)])
    grid[5, 2] = Player.TWO.value
    assert not check_win(grid, Player.ONE)


def test_lines_do_not_wrap_around_edges():
    grid = place(empty_grid(), [(4, 5), (4, 6), (5, 0), (5, 1)])
    assert not check_win(grid, Player.ONE)


def test_non_default_board_shape():
    grid = place(empty_grid(height=4, width=4), [(0, 3), (1, 2), (2, 1), (3, 0)])
    assert find_winning_line(grid, Player.ONE) == [(0, 3), (1, 2), (2, 1), (3, 0)]
