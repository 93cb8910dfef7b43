import io

import pytest

from dominion.interface import help_text
from dominion.player import main, run


def _run(text, seed=1):
    out = io.StringIO()
    code = run(seed, io.StringIO(text), out)
    return code, out.getvalue()


def test_exit_stops_at_once():
    code, text = _run("exit\n")
    assert code == 0
    assert text == 'Please enter a command or "help" for commands\n$ '


def test_end_of_input_stops():
    code, text = _run("")
    assert code == 0
    assert text.endswith("$ ")


def test_help():
    _, text = _run("help\nexit\n")
    assert help_text() in text


def test_whos_and_num():
    _, text = _run("whos\nnum\nexit\n")
    assert "Player 0's turn\n" in text
    assert "There are 5 cards in your hand.\n" in text


def test_stat_needs_started_game():
    _, text = _run("stat\nexit\n")
    assert "phase" not in text
    _, text = _run("init 2 0\nstat\nexit\n")
    assert "Player 0's turn number 0\n\n" in text
    assert "Action phase" in text


def test_buy_unknown_card_fails():
    _, text = _run("buy 100\nexit\n")
    assert "Player 0 cannot buy card 100, ?" in text


def test_add_then_show():
    _, text = _run("init 2 0\nadd 13\nshow\nexit\n")
    assert "Player 0 adds Smithy to their hand" in text
    assert "Player 0's hand:" in text
    hand_part = text.split("Player 0's hand:")[1]
    assert "Smithy" in hand_part


def test_three_letter_commands_need_exact_match():
    _, text = _run("adds 13\nexit\n")
    assert "adds Smithy" not in text


def test_long_command_matches_on_prefix():
    _, text = _run("supply\nexit\n")
    assert "#   Card          Cost   Copies" in text


def test_play_treasure_fails():
    _, text = _run("init 2 0\nplay 0\nexit\n")
    assert "Player 0 cannot play card 0" in text


def test_end_turn_passes_to_next_player():
    _, text = _run("init 2 0\nend\nwhos\nexit\n")
    assert "Player 1's turn number 0\n\n" in text
    assert "Player 1's turn\n" in text


def test_resign_shows_scores():
    _, text = _run("resign\n")
    assert "Player 0 has a score of" in text
    assert "Player 1 has a score of" in text


def test_bots_play_to_the_end():
    _, text = _run("init 2 2\n")
    assert "Executing Bot Player 0" in text
    assert "the winner(s) are:" in text
    winners_part = text.split("the winner(s) are:\n")[1]
    assert winners_part.startswith("Player ")


def test_bad_player_count_does_not_start():
    _, text = _run("init 7 0\nstat\nexit\n")
    assert "phase" not in text


@pytest.mark.parametrize("argv", [[], ["0"], ["abc"], ["1", "2"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == "Usage: player [integer random number seed]\n"


def test_main_runs_game(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("whos\nexit\n"))
    assert main(["4"]) == 0
    assert "Player 0's turn\n" in capsys.readouterr().out