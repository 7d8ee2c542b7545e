"""
Othello rules engine.
This package contains the board, the game state machine and their helpers.
"""

from .board import Board, Cell, Player, DIRECTIONS
from .exceptions import OthelloError, InvalidCoordinate
from .game import OthelloGame, MoveResult, MoveFailure, Winner

__all__ = [
    'Board', 'Cell', 'Player', 'DIRECTIONS',
    'OthelloError', 'InvalidCoordinate',
    'OthelloGame', 'MoveResult', 'MoveFailure', 'Winner',
]
