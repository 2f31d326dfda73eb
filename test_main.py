"""
Tests for the console driver.
Answers are scripted through input_func; output is checked with capsys.
"""

import sys

import pytest

from logic import GameMode, GameOutcome, Mark
from main import TicTacToeGame, format_board, select_mode, main


def scripted(*answers):
    """input() replacement that replays answers in order."""
    remaining = iter(answers)
    return lambda prompt="": next(remaining)


def make_game(mode, *answers, **kwargs):
    kwargs.setdefault("clear_screen", False)
    kwargs.setdefault("pause", False)
    return TicTacToeGame(mode, input_func=scripted(*answers), **kwargs)


def test_format_board_shows_numbers_then_marks():
    game = make_game(GameMode.TWO_PLAYER)
    text = format_board(game.engine)
    assert "  1  |  2  |  3  " in text
    assert "  7  |  8  |  9  " in text
    
    game.engine.apply_move(5)
    text = format_board(game.engine)
    assert "  4  |  X  |  6  " in text
    assert text.count("_____|_____|_____") == 2


def test_select_mode_reprompts(capsys):
    mode = select_mode(scripted("3", "abc", " 1 "))
    assert mode == GameMode.SINGLE_PLAYER
    assert "Select game mode:" in capsys.readouterr().out


def test_select_mode_two_players():
    assert select_mode(scripted("2")) == GameMode.TWO_PLAYER


def test_two_player_win(capsys):
    game = make_game(GameMode.TWO_PLAYER, "1", "4", "2", "5", "3")
    assert game.start() == GameOutcome.WIN
    
    out = capsys.readouterr().out
    assert "Player 1 (X) - Player 2 (O)" in out
    assert "Player 1 wins!" in out


def test_second_player_win(capsys):
    game = make_game(GameMode.TWO_PLAYER, "1", "2", "4", "5", "9", "8")
    assert game.start() == GameOutcome.WIN
    assert "Player 2 wins!" in capsys.readouterr().out


def test_draw(capsys):
    game = make_game(GameMode.TWO_PLAYER, "1", "5", "9", "2", "8", "7", "3", "6", "4")
    assert game.start() == GameOutcome.DRAW
    assert "Game is a draw!" in capsys.readouterr().out


def test_bad_input_and_illegal_move_are_retried(capsys):
    game = make_game(
        GameMode.TWO_PLAYER,
        "abc", "1",     # X: not a number, then 1
        "1", "",        # O: taken, then Enter at the pause
        "12", "",       # O: out of range, then Enter
        "4", "2", "5", "3",
        pause=True,
    )
    assert game.start() == GameOutcome.WIN
    assert game.engine.cell(4) == Mark.O
    
    out = capsys.readouterr().out
    assert "Invalid move! Position 1 is already taken or out of range." in out
    assert "Invalid move! Position 12 is already taken or out of range." in out
    assert "Player 1 wins!" in out


def test_single_player_game_finishes(capsys):
    game = TicTacToeGame(GameMode.SINGLE_PLAYER, seed=7, clear_screen=False, pause=False)
    # Human always plays the lowest free position
    game.input_func = lambda prompt="": str(game.engine.empty_positions()[0])
    
    status = game.start()
    assert status in (GameOutcome.WIN, GameOutcome.DRAW)
    
    out = capsys.readouterr().out
    assert "Player 1 (X) - Computer (O)" in out
    assert "Computer chooses position 5" in out
    assert any(msg in out for msg in ("Computer wins!", "You win!", "Game is a draw!"))


def test_computer_win_announcement(capsys):
    game = make_game(GameMode.SINGLE_PLAYER, seed=0)
    # X 1 2 4 vs O 5 3: X's 4 ignores O's 3-5-7 threat
    for position in (1, 2):
        game.engine.apply_move(position)
        game.engine.play_computer_move()
    game.input_func = scripted("4")
    
    assert game.start() == GameOutcome.WIN
    assert "Computer wins!" in capsys.readouterr().out


def test_main_with_mode_flag(monkeypatch, capsys):
    answers = iter(["1", "4", "2", "5", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    
    main(["--mode", "2", "--no-clear", "--no-pause"])
    
    out = capsys.readouterr().out
    assert "Player 1 wins!" in out
    assert out.rstrip().endswith("Goodbye!")


def test_main_asks_for_mode(monkeypatch, capsys):
    answers = iter(["2", "1", "4", "2", "5", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    
    main(["--no-clear", "--no-pause"])
    assert "Player 1 wins!" in capsys.readouterr().out


def test_main_interrupted(monkeypatch, capsys):
    def interrupt(prompt=""):
        raise KeyboardInterrupt
    
    monkeypatch.setattr("builtins.input", interrupt)
    
    main(["--mode", "1", "--no-clear"])
    
    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


def test_main_end_of_input(monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError
    
    monkeypatch.setattr("builtins.input", eof)
    
    main([])
    assert "Game interrupted by user." in capsys.readouterr().out


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-q"]))
