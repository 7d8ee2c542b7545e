"""
Tests for the replay command line tool.
"""
import argparse

import pytest

from othello.cli import main, parse_move, split_moves


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "missing.json")]


def test_parse_move():
    assert parse_move("2,3") == (2, 3)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_move("2;3")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_move("a,b")


def test_replay_prints_position(no_config, capsys):
    assert main(["2,3"] + no_config) == 0
    out = capsys.readouterr().out
    assert "Score - Black: 4, White: 1" in out
    assert "To move: White" in out


def test_replay_without_moves(no_config, capsys):
    assert main(no_config) == 0
    out = capsys.readouterr().out
    assert "Score - Black: 2, White: 2" in out
    assert "To move: Black" in out


def test_show_moves_marks_valid_squares(no_config, capsys):
    assert main(["--show-moves"] + no_config) == 0
    out = capsys.readouterr().out
    assert out.count("*") == 4


def test_illegal_move_stops_replay(no_config, capsys):
    assert main(["2,3", "0,0", "2,2"] + no_config) == 1
    captured = capsys.readouterr()
    assert "move 0,0 rejected for White (illegal_move)" in captured.err
    # Position after the last legal move
    assert "Score - Black: 4, White: 1" in captured.out


def test_off_board_move(no_config, capsys):
    assert main(["8,8"] + no_config) == 1
    assert "invalid_coordinate" in capsys.readouterr().err


def test_unparsable_move_exits_with_usage_error(no_config):
    with pytest.raises(SystemExit) as excinfo:
        main(["two,three"] + no_config)
    assert excinfo.value.code == 2


def test_custom_display_config(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text('{"display": {"black_symbol": "X", "white_symbol": "O"}, '
                    '"logging": {"verbose": false}}')
    assert main(["--config", str(path)]) == 0
    out = capsys.readouterr().out
    assert "3 . . . O X . . ." in out


def test_split_moves_puts_moves_after_separator():
    assert split_moves(["2,3", "--show-moves", "-1,0"]) == ["--show-moves", "--", "2,3", "-1,0"]
    assert split_moves(["--show-moves"]) == ["--show-moves"]
    assert split_moves(["--", "-1,0"]) == ["--", "-1,0"]


@pytest.mark.parametrize("move", ["-1,0", "0,-1", "-3,-3"])
def test_negative_move_is_rejected_as_off_board(no_config, capsys, move):
    assert main([move] + no_config) == 1
    assert "invalid_coordinate" in capsys.readouterr().err


def test_explicit_separator_is_accepted(no_config, capsys):
    assert main(no_config + ["--", "2,3", "-1,0"]) == 1
    captured = capsys.readouterr()
    assert "move -1,0 rejected for White (invalid_coordinate)" in captured.err
    assert "Score - Black: 4, White: 1" in captured.out
