"""
rules.py - Game state management and Gymnasium environment for Connect Four

This module provides:
1. GameEngine, which owns the board and adjudicates moves
2. The GameState and MoveResult values it hands to callers
3. A gymnasium-compatible environment driving the engine
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4_engine.debug import debug
from connect4_engine.errors import GameAlreadyOver, IllegalMoveError
from connect4_engine.game.board import Board
from connect4_engine.utils import HEIGHT, WIDTH, Coord, GameResult, Outcome, Player


@dataclass(frozen=True, eq=False)
class GameState:
    """Read-only snapshot of a game, for rendering and inspection."""
    board: np.ndarray
    current_player: Player
    result: GameResult
    winning_line: Optional[Tuple[Coord, ...]] = None
    last_move: Optional[Coord] = None
    moves_made: int = 0

    @property
    def height(self) -> int:
        return self.board.shape[0]

    @property
    def width(self) -> int:
        return self.board.shape[1]

    @property
    def winner(self) -> Optional[Player]:
        return self.result.winner

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (np.array_equal(self.board, other.board)
                and self.board.shape == other.board.shape
                and self.current_player == other.current_player
                and self.result == other.result
                and self.winning_line == other.winning_line
                and self.last_move == other.last_move
                and self.moves_made == other.moves_made)


@dataclass(frozen=True)
class MoveResult:
    """What happened when a piece was dropped."""
    placed: Coord
    outcome: Outcome
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[Coord, ...]] = None
    next_player: Optional[Player] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome != Outcome.CONTINUE


class GameEngine:
    """
    Connect Four rules engine.

    Holds the board, whose turn it is and the game result. All changes go
    through drop_piece() and reset(); everything else is read-only.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        """
        Initialize a new game.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidBoardSize: width or height is not a positive integer
        """
        self._board = Board(width, height)
        debug.debug(f"Initializing GameEngine ({self.width}x{self.height})", "engine")
        self._start()

    def _start(self):
        self._current_player = Player.ONE
        self._result = GameResult.IN_PROGRESS
        self._winning_line: Optional[Tuple[Coord, ...]] = None
        self._last_move: Optional[Coord] = None
        self._moves_made = 0

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def result(self) -> GameResult:
        return self._result

    def is_game_over(self) -> bool:
        return self._result.is_game_over()

    def reset(self) -> GameState:
        """Throw the current game away and start a fresh one."""
        debug.debug("Resetting game", "engine")
        self._board.clear()
        self._start()
        return self.current_state()

    def current_state(self) -> GameState:
        return GameState(
            board=self._board.get_state(),
            current_player=self._current_player,
            result=self._result,
            winning_line=self._winning_line,
            last_move=self._last_move,
            moves_made=self._moves_made,
        )

    def is_valid_move(self, column) -> bool:
        """Check if drop_piece(column) would be accepted."""
        if self.is_game_over():
            return False
        try:
            return not self._board.is_column_full(column)
        except IllegalMoveError:
            return False

    def get_valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self._board.open_columns()

    def available_rows(self, column: int) -> int:
        """Number of empty cells left in a column."""
        return self._board.available_rows(column)

    def drop_piece(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            MoveResult describing the placement and the outcome

        Raises:
            GameAlreadyOver: the game has already been won or tied
            InvalidColumn: column is not in [0, width)
            ColumnFull: column has no empty cell
        """
        player = self._current_player
        debug.debug(f"{player} attempting move in column {column}", "engine")

        if self.is_game_over():
            debug.debug(f"Rejected move: game is over (result: {self._result.name})", "engine")
            raise GameAlreadyOver(self._result, column)

        try:
            placed = self._board.drop(column, player)
        except IllegalMoveError as e:
            debug.debug(f"Rejected move: {e}", "engine")
            raise

        self._last_move = placed
        self._moves_made += 1

        debug.start_timer("win_check")
        line = self._board.winning_line(player)
        debug.end_timer("win_check", "engine")

        if line is not None:
            self._result = GameResult.won_by(player)
            self._winning_line = tuple(line)
            debug.info(f"{player} wins with {self._winning_line} after {self._moves_made} moves", "engine")
            return MoveResult(placed=placed, outcome=Outcome.WIN, winner=player,
                              winning_line=self._winning_line)

        if self._board.is_full():
            self._result = GameResult.DRAW
            debug.info("Board is full, game ends in a tie", "engine")
            return MoveResult(placed=placed, outcome=Outcome.TIE)

        self._current_player = player.other()
        debug.debug(f"Switching to {self._current_player}", "engine")
        return MoveResult(placed=placed, outcome=Outcome.CONTINUE, next_player=self._current_player)


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Each step is one move by whichever player is current; rewards are
    from the point of view of the player who moved.
    """

    metadata = {'render_modes': []}

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        debug.debug("Initializing ConnectFourEnv", "env")

        self.engine = GameEngine(width, height)

        self.action_space = spaces.Discrete(self.engine.width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.engine.height, self.engine.width), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment to a fresh game.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.engine.reset()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Make a move for the current player.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        try:
            move = self.engine.drop_piece(action)
        except IllegalMoveError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['error'] = type(e).__name__
            return self._get_observation(), self.reward_invalid_move, False, True, info

        if move.outcome == Outcome.WIN:
            reward, terminated = self.reward_win, True
        elif move.outcome == Outcome.TIE:
            reward, terminated = self.reward_draw, True
        else:
            reward, terminated = self.reward_step, False

        return self._get_observation(), reward, terminated, False, self._get_info()

    def _get_observation(self) -> np.ndarray:
        return np.array(self.engine.current_state().board, dtype=np.int8)

    def _get_info(self) -> Dict[str, Any]:
        state = self.engine.current_state()
        valid_moves = self.engine.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': state.current_player.value,
            'game_result': state.result.name,
            'moves_made': state.moves_made,
            'winning_line': list(state.winning_line or []),
            'last_move': state.last_move,
        }
