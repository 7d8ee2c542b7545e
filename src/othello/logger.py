"""
Logging utilities for hosts driving the Othello engine.
"""
import os
import logging
from datetime import datetime
from typing import Optional

from .config import Config
from .board import Coord, Player
from .game import MoveResult, OthelloGame


class Logger:
    """Attaches console and file handlers to the ``othello`` logger."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        self.log_file: Optional[str] = None

        level = logging.getLevelName(config.logging.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {config.logging.log_level}")
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        self.logger = logging.getLogger("othello")
        self.previous_level = self.logger.level
        self.logger.setLevel(level)
        self.handlers = []

        # Console logging
        if config.logging.verbose:
            console = logging.StreamHandler()
            console.setLevel(level)
            console.setFormatter(formatter)
            self.handlers.append(console)

        # File logging
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            self.log_file = os.path.join(self.run_dir, 'game.log')
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        for handler in self.handlers:
            self.logger.addHandler(handler)

    def log_move(self, result: MoveResult, player: Player, move: Coord):
        """Log the outcome of one ``make_move`` call."""
        row, col = move
        if not result:
            self.logger.warning(f"{player} move ({row}, {col}) rejected: {result.reason.value}")
            return
        self.logger.info(f"{player} played ({row}, {col}), flipped {len(result.flipped)}")
        if result.passed is not None:
            self.logger.info(f"{result.passed} passes")

    def log_game_over(self, game: OthelloGame):
        """Log the final score and result."""
        black, white = game.get_score()
        result = game.winner.name if game.winner is not None else "UNFINISHED"
        self.logger.info(f"Final score - Black: {black}, White: {white}; result: {result}")

    def close(self):
        """Flush and detach the handlers this logger added."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.logger.setLevel(self.previous_level)


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
