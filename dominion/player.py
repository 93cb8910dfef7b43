"""Interactive command-line game for humans and bots."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from contextlib import suppress
from typing import TextIO

from .cards import MAX_PLAYERS, UNUSED, Card, GameError, card_name
from .game import new_game
from .interface import (
    add_card_to_hand,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_state,
    format_supply,
    help_text,
)
from .rngs import RandomStreams

_KINGDOM = [
    Card.ADVENTURER,
    Card.GARDENS,
    Card.EMBARGO,
    Card.VILLAGE,
    Card.MINION,
    Card.MINE,
    Card.CUTPURSE,
    Card.SEA_HAG,
    Card.TRIBUTE,
    Card.SMITHY,
]

_USAGE = "Usage: player [integer random number seed]\n"


def _matches(command: str, word: str) -> bool:
    """Compare at most the first four characters, as the command words are keyed."""
    if len(word) >= 4:
        return command[:4] == word[:4]
    return command == word


def _parse(line: str) -> tuple[str, list[int]]:
    tokens = line.split()
    if not tokens:
        return "", [UNUSED] * 4
    args: list[int] = []
    for token in tokens[1:5]:
        try:
            args.append(int(token))
        except ValueError:
            break
    return tokens[0], args + [UNUSED] * (4 - len(args))


def run(seed: int, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Read commands until exit, resignation, game over or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout

    rng = RandomStreams()
    game = new_game(2, _KINGDOM, seed, rng)
    is_bot = [False] * MAX_PLAYERS
    game_started = False
    turn_num = 0

    out.write('Please enter a command or "help" for commands\n')

    while True:
        current = game.whose_turn

        if game_started and game.is_game_over():
            out.write(format_scores(game))
            winners = game.get_winners()
            out.write(f"After {turn_num} turns, the winner(s) are:\n")
            for player in range(game.num_players):
                if winners[player] == 1:
                    out.write(f"Player {player}\n")
            for player in range(game.num_players):
                out.write(format_hand(game, player))
                out.write(format_played(game, player))
                out.write(format_discard(game, player))
                out.write(format_deck(game, player))
            break

        if is_bot[current]:
            turn_num = execute_bot_turn(game, current, turn_num, out)
            continue

        out.write("$ ")
        line = stdin.readline()
        if not line:
            break
        command, (arg0, arg1, arg2, arg3) = _parse(line)

        if _matches(command, "add"):
            with suppress(GameError):
                add_card_to_hand(game, current, arg0)
            out.write(f"Player {current} adds {card_name(arg0)} to their hand\n\n")
        elif _matches(command, "buy"):
            try:
                game.buy_card(arg0)
            except GameError:
                out.write(f"Player {current} cannot buy card {arg0}, {card_name(arg0)}\n\n")
            else:
                out.write(f"Player {current} buys card {arg0}, {card_name(arg0)}\n\n")
        elif _matches(command, "end"):
            if game_started:
                if current == game.num_players - 1:
                    turn_num += 1
                game.end_turn()
                out.write(f"Player {game.whose_turn}'s turn number {turn_num}\n\n")
        elif _matches(command, "exit"):
            break
        elif _matches(command, "help"):
            out.write(help_text())
        elif _matches(command, "init"):
            for player in range(max(arg0 - arg1, 0), min(arg0, MAX_PLAYERS)):
                is_bot[player] = True
            try:
                started = new_game(arg0, _KINGDOM, seed, rng)
            except GameError:
                out.write("\n")
            else:
                game = started
                out.write("\n")
                game_started = True
                out.write(f"Player {game.whose_turn}'s turn number {turn_num}\n\n")
        elif _matches(command, "num"):
            out.write(f"There are {game.num_hand_cards()} cards in your hand.\n")
        elif _matches(command, "play"):
            try:
                card = game.hand_card(arg0)
                game.play_card(arg0, arg1, arg2, arg3)
            except GameError:
                out.write(f"Player {current} cannot play card {arg0}\n\n")
            else:
                out.write(f"Player {current} plays {card_name(card)}\n\n")
        elif _matches(command, "resi"):
            game.end_turn()
            out.write(format_scores(game))
            break
        elif _matches(command, "show"):
            if not game_started:
                continue
            out.write(format_hand(game, current))
            out.write(format_played(game, current))
        elif _matches(command, "stat"):
            if not game_started:
                continue
            out.write(format_state(game))
        elif _matches(command, "supp"):
            out.write(format_supply(game))
        elif _matches(command, "whos"):
            out.write(f"Player {game.whose_turn}'s turn\n")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive game with the seed given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write(_USAGE)
        return 0
    try:
        seed = int(args[0])
    except ValueError:
        seed = 0
    if seed <= 0:
        sys.stdout.write(_USAGE)
        return 0
    return run(seed)


if __name__ == "__main__":
    sys.exit(main())