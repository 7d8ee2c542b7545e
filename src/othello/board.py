"""
Board module for Othello.
Handles the grid state, coordinate checking, move validation and flipping.
"""
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple
import numpy as np

from .exceptions import InvalidCoordinate

Coord = Tuple[int, int]


class Cell(IntEnum):
    """State of a single square. Values are what the numpy grid stores."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2


class Player(Enum):
    """A side in the game. Black moves first."""
    BLACK = "black"
    WHITE = "white"

    @property
    def cell(self) -> Cell:
        return Cell.BLACK if self is Player.BLACK else Cell.WHITE

    @property
    def opponent(self) -> 'Player':
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    def __str__(self) -> str:
        return self.name.capitalize()


# N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Coord, ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)

DEFAULT_SYMBOLS: Dict[Cell, str] = {Cell.EMPTY: '.', Cell.BLACK: 'B', Cell.WHITE: 'W'}


def _check_player(player) -> Player:
    if not isinstance(player, Player):
        raise TypeError(f"Expected a Player, got {player!r}")
    return player


class Board:
    """
    Represents the 8x8 Othello grid.

    The grid is a numpy array of Cell values in row-major order. Only
    ``reset`` and ``place`` write to it.
    """

    SIZE = 8

    def __init__(self):
        """Initialize a board in the standard opening position."""
        self._grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self.reset()

    def reset(self) -> None:
        """Clear the grid and set up the four centre pieces."""
        self._grid.fill(Cell.EMPTY)
        self._grid[3, 3] = Cell.WHITE
        self._grid[4, 4] = Cell.WHITE
        self._grid[3, 4] = Cell.BLACK
        self._grid[4, 3] = Cell.BLACK

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        """Check if (row, col) is on the board."""
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    @classmethod
    def check_coordinate(cls, row, col) -> None:
        """
        Reject coordinates that cannot address a cell.

        Raises:
            InvalidCoordinate: if row or col is not an integer in [0, 7]
        """
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidCoordinate(row, col)
        if not cls.in_bounds(row, col):
            raise InvalidCoordinate(row, col)

    def at(self, row: int, col: int) -> Cell:
        """Get the cell value at (row, col)."""
        self.check_coordinate(row, col)
        return Cell(int(self._grid[row, col]))

    def count(self, cell: Cell) -> int:
        """Count the squares holding the given cell value."""
        return int(np.count_nonzero(self._grid == cell))

    def can_capture_in_direction(self, row: int, col: int, d_row: int, d_col: int,
                                 player: Player) -> bool:
        """
        Check whether a piece for ``player`` at (row, col) would capture along
        (d_row, d_col).

        The run must start with at least one opponent piece and end on one of
        the player's own pieces. Reaching an empty square or the edge first
        means no capture.
        """
        self.check_coordinate(row, col)
        if (d_row, d_col) not in DIRECTIONS:
            raise ValueError(f"Unknown direction ({d_row!r}, {d_col!r})")
        own = _check_player(player).cell
        opponent = player.opponent.cell
        r, c = row + d_row, col + d_col
        has_opponent_between = False

        while self.in_bounds(r, c):
            cell = self._grid[r, c]
            if cell == opponent:
                has_opponent_between = True
            elif cell == own:
                return has_opponent_between
            else:
                return False
            r += d_row
            c += d_col
        return False

    def is_valid_move(self, row: int, col: int, player: Player) -> bool:
        """Check if placing a piece for ``player`` at (row, col) is legal."""
        self.check_coordinate(row, col)
        _check_player(player)
        if self._grid[row, col] != Cell.EMPTY:
            return False

        for d_row, d_col in DIRECTIONS:
            if self.can_capture_in_direction(row, col, d_row, d_col, player):
                return True
        return False

    def get_valid_moves(self, player: Player) -> List[Coord]:
        """
        Get all legal moves for ``player``.

        Returns:
            List of (row, col) tuples in row-major order
        """
        _check_player(player)
        moves = []
        for r in range(self.SIZE):
            for c in range(self.SIZE):
                if self.is_valid_move(r, c, player):
                    moves.append((r, c))
        return moves

    def has_any_valid_move(self, player: Player) -> bool:
        """Check if the player has at least one legal move."""
        return len(self.get_valid_moves(player)) > 0

    def place(self, row: int, col: int, player: Player) -> List[Coord]:
        """
        Put ``player``'s piece at (row, col) and flip every captured run.

        The caller must have checked the move with ``is_valid_move``.

        Returns:
            The flipped coordinates, direction by direction, nearest first
        """
        own = player.cell
        opponent = player.opponent.cell
        # Decide the capturing directions before the grid changes
        capturing = [(d_row, d_col) for d_row, d_col in DIRECTIONS
                     if self.can_capture_in_direction(row, col, d_row, d_col, player)]

        self._grid[row, col] = own
        flipped: List[Coord] = []
        for d_row, d_col in capturing:
            r, c = row + d_row, col + d_col
            while self._grid[r, c] == opponent:
                self._grid[r, c] = own
                flipped.append((r, c))
                r += d_row
                c += d_col
        return flipped

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 8x8 grid of Cell values
        """
        return self._grid.copy()

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._grid = self._grid.copy()
        return new_board

    def to_string(self, symbols: Optional[Dict[Cell, str]] = None,
                  highlight: Optional[List[Coord]] = None,
                  highlight_symbol: str = '*') -> str:
        """
        Render the grid as text, one row per line.

        Args:
            symbols: Cell to character mapping (default: '.', 'B', 'W')
            highlight: Empty squares to mark, e.g. the valid moves
            highlight_symbol: Character used for highlighted squares
        """
        symbols = symbols or DEFAULT_SYMBOLS
        marked = set(highlight or ())
        rows = ['  ' + ' '.join(str(c) for c in range(self.SIZE))]
        for i in range(self.SIZE):
            row = []
            for j in range(self.SIZE):
                cell = Cell(int(self._grid[i, j]))
                if cell == Cell.EMPTY and (i, j) in marked:
                    row.append(highlight_symbol)
                else:
                    row.append(symbols[cell])
            rows.append(f"{i} " + ' '.join(row))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.to_string()
