"""
Replay a sequence of moves and print the resulting position.
"""
import os
import re
import sys
import argparse
from typing import List, Optional

from .board import Coord
from .config import Config, get_default_config
from .game import OthelloGame
from .logger import setup_logger

MOVE_PATTERN = re.compile(r"^-?\d+,-?\d+$")


def parse_move(text: str) -> Coord:
    """Parse 'row,col' (0-based) into a coordinate tuple."""
    try:
        row_s, col_s = text.split(',')
        return int(row_s), int(col_s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid move {text!r}, expected row,col")


def split_moves(argv: List[str]) -> List[str]:
    """
    Move row,col tokens behind a "--" so argparse does not read "-1,0" as
    an option. Arguments that already contain "--" are left alone.
    """
    if "--" in argv:
        return list(argv)
    moves = [arg for arg in argv if MOVE_PATTERN.match(arg)]
    if not moves:
        return list(argv)
    options = [arg for arg in argv if not MOVE_PATTERN.match(arg)]
    return options + ["--"] + moves


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Replay Othello moves and show the result')
    parser.add_argument('moves', nargs='*', type=parse_move, metavar='MOVE',
                        help='Moves as row,col (0-based), played alternately from the opening')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--show-moves', action='store_true',
                        help='Mark the valid moves of the side to move')
    return parser


def render(game: OthelloGame, config: Config, show_moves: bool = False) -> str:
    """Format the board, score and status using the display settings."""
    display = config.display
    highlight = None
    if (show_moves or display.show_valid_moves) and not game.game_over:
        highlight = game.get_valid_moves()
    board_text = game.board.to_string(display.symbols(), highlight, display.valid_move_symbol)

    black, white = game.get_score()
    lines = [board_text, f"Score - Black: {black}, White: {white}"]
    if game.game_over:
        lines.append(f"Game over! Result: {game.winner.name}")
    else:
        lines.append(f"To move: {game.current_player}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the replay tool. Returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(split_moves(argv))

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    logger = setup_logger(config)
    game = OthelloGame()
    try:
        for move in args.moves:
            player = game.current_player
            result = game.make_move(*move)
            logger.log_move(result, player, move)
            if not result:
                print(f"error: move {move[0]},{move[1]} rejected for {player} "
                      f"({result.reason.value})", file=sys.stderr)
                print(render(game, config, args.show_moves))
                return 1
        if game.game_over:
            logger.log_game_over(game)
        print(render(game, config, args.show_moves))
    finally:
        logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
