"""
Configuration parameters for the Othello engine and its replay tool.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

from .board import Cell


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = True


@dataclass
class DisplayConfig:
    """Characters used when printing the board."""
    empty_symbol: str = "."
    black_symbol: str = "B"
    white_symbol: str = "W"
    valid_move_symbol: str = "*"
    show_valid_moves: bool = False

    def symbols(self) -> Dict[Cell, str]:
        return {
            Cell.EMPTY: self.empty_symbol,
            Cell.BLACK: self.black_symbol,
            Cell.WHITE: self.white_symbol,
        }


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello-Engine"
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello-Engine'),
            logging=LoggingConfig(**config_dict.get('logging', {})),
            display=DisplayConfig(**config_dict.get('display', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
