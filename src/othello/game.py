"""
Othello game module.
Handles turn order, scoring and the end of the game.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple
import logging

import numpy as np

from .board import Board, Cell, Coord, Player
from .exceptions import InvalidCoordinate

logger = logging.getLogger(__name__)


class Winner(Enum):
    """Final result of a finished game."""
    BLACK = "black"
    WHITE = "white"
    DRAW = "draw"

    @classmethod
    def from_player(cls, player: Player) -> 'Winner':
        return cls.BLACK if player is Player.BLACK else cls.WHITE


class MoveFailure(Enum):
    """Why ``make_move`` rejected a move."""
    INVALID_COORDINATE = "invalid_coordinate"
    ILLEGAL_MOVE = "illegal_move"
    GAME_ALREADY_OVER = "game_already_over"


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a ``make_move`` call.

    Attributes:
        success: True if the piece was placed
        flipped: Coordinates turned to the mover's colour
        reason: Failure code, None on success
        passed: Player whose turn was skipped after this move, if any
        game_over: Whether the game had ended once the call returned
    """
    success: bool
    flipped: Tuple[Coord, ...] = ()
    reason: Optional[MoveFailure] = None
    passed: Optional[Player] = None
    game_over: bool = False

    def __bool__(self) -> bool:
        return self.success


class OthelloGame:
    """
    Main game class for Othello that owns the board and the turn state.
    """

    def __init__(self):
        """Initialize a new game in the standard opening position."""
        self._board = Board()
        self.current_player = Player.BLACK  # Black moves first
        self.game_over = False
        self.winner: Optional[Winner] = None
        self._score: Dict[Player, int] = {Player.BLACK: 0, Player.WHITE: 0}
        self.init_board()

    def init_board(self) -> None:
        """Set up the opening position and recount the pieces."""
        self._board.reset()
        self._calculate_score()

    @property
    def board(self) -> Board:
        """A snapshot of the board. Changing it does not affect the game."""
        return self._board.copy()

    @property
    def score(self) -> Dict[Player, int]:
        """Piece count per player (a copy)."""
        return dict(self._score)

    @property
    def empty_count(self) -> int:
        return self._board.count(Cell.EMPTY)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self._score[Player.BLACK], self._score[Player.WHITE]

    def get_board_state(self) -> np.ndarray:
        """Get a copy of the grid as a numpy array of Cell values."""
        return self._board.get_board_state()

    def can_capture_in_direction(self, row: int, col: int, d_row: int, d_col: int,
                                 player: Player) -> bool:
        return self._board.can_capture_in_direction(row, col, d_row, d_col, player)

    def is_valid_move(self, row: int, col: int, player: Player) -> bool:
        """
        Check if a move is legal for ``player``.

        Raises:
            InvalidCoordinate: if (row, col) is off the board
        """
        return self._board.is_valid_move(row, col, player)

    def get_valid_moves(self, player: Optional[Player] = None) -> List[Coord]:
        """
        Get all valid moves for a player.

        Args:
            player: The player to get valid moves for. If None, uses current player.

        Returns:
            List of (row, col) tuples in row-major order
        """
        if player is None:
            player = self.current_player
        return self._board.get_valid_moves(player)

    def make_move(self, row: int, col: int) -> MoveResult:
        """
        Place a piece for the current player.

        Rejected moves never raise and never change the state.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            MoveResult; falsy when the move was rejected
        """
        if self.game_over:
            logger.debug("Rejected move (%r, %r): game is over", row, col)
            return MoveResult(False, reason=MoveFailure.GAME_ALREADY_OVER, game_over=True)

        mover = self.current_player
        try:
            legal = self._board.is_valid_move(row, col, mover)
        except InvalidCoordinate:
            logger.debug("Rejected move (%r, %r): off the board", row, col)
            return MoveResult(False, reason=MoveFailure.INVALID_COORDINATE)
        if not legal:
            logger.debug("Rejected move (%d, %d) for %s: illegal", row, col, mover)
            return MoveResult(False, reason=MoveFailure.ILLEGAL_MOVE)

        flipped = self._board.place(row, col, mover)
        self._calculate_score()
        logger.debug("%s played (%d, %d), flipped %d", mover, row, col, len(flipped))

        passed = self._switch_turn()
        return MoveResult(True, flipped=tuple(flipped), passed=passed,
                          game_over=self.game_over)

    def _switch_turn(self) -> Optional[Player]:
        """
        Hand the turn to whoever can move next.

        Returns:
            The player who had to pass, or None
        """
        mover = self.current_player
        opponent = mover.opponent

        if self._board.has_any_valid_move(opponent):
            self.current_player = opponent
            return None
        if not self._board.has_any_valid_move(mover):
            self._end_game()
            return None

        logger.info("Player %s has no moves. Passing back to %s.", opponent, mover)
        return opponent

    def _calculate_score(self) -> None:
        """Recount both players' pieces from the full grid."""
        self._score[Player.BLACK] = self._board.count(Cell.BLACK)
        self._score[Player.WHITE] = self._board.count(Cell.WHITE)

    def _end_game(self) -> None:
        """Mark the game finished and decide the winner from the final score."""
        self.game_over = True
        black, white = self.get_score()
        if black > white:
            self.winner = Winner.BLACK
        elif white > black:
            self.winner = Winner.WHITE
        else:
            self.winner = Winner.DRAW
        logger.info("Game over: %s (Black %d, White %d)", self.winner.name, black, white)

    def reset_game(self) -> None:
        """Reset the game to its initial state."""
        self.game_over = False
        self.winner = None
        self.current_player = Player.BLACK
        self.init_board()

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [str(self._board), f"Score - Black: {black}, White: {white}"]
        if not self.game_over:
            lines.append(f"Current player: {self.current_player}")
        elif self.winner is Winner.DRAW:
            lines.append("Game over! It's a draw!")
        else:
            lines.append(f"Game over! {self.winner.name.capitalize()} wins!")
        return "\n".join(lines)
