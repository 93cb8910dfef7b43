"""A scripted two-player game: a smithy player against an adventurer player."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from contextlib import suppress
from typing import TextIO

from .cards import Card, GameError
from .game import GameState, new_game

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

_MONEY = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}


def _try(action, *args) -> None:
    with suppress(GameError):
        action(*args)


def _play_treasures(state: GameState) -> int:
    money = 0
    pos = 0
    while pos < state.num_hand_cards():
        card = state.hand_card(pos)
        if card in _MONEY:
            _try(state.play_card, pos, -1, -1, -1)
            money += _MONEY[card]
        pos += 1
    return money


def play_game(seed: int, out: TextIO | None = None) -> GameState:
    """Play the scripted game with ``seed`` to the end and return its final state."""
    out = sys.stdout if out is None else out
    out.write("Starting game.\n")
    state = new_game(2, _KINGDOM, seed)
    num_smithies = 0
    num_adventurers = 0

    while not state.is_game_over():
        money = 0
        smithy_pos = -1
        adventurer_pos = -1
        for pos, card in enumerate(state.hand[state.whose_turn]):
            if card in _MONEY:
                money += _MONEY[card]
            elif card == Card.SMITHY:
                smithy_pos = pos
            elif card == Card.ADVENTURER:
                adventurer_pos = pos

        if state.whose_turn == 0:
            if smithy_pos != -1:
                out.write(f"0: smithy played from position {smithy_pos}\n")
                _try(state.play_card, smithy_pos, -1, -1, -1)
                out.write("smithy played.\n")
                money = _play_treasures(state)

            if money >= 8:
                out.write("0: bought province\n")
                _try(state.buy_card, Card.PROVINCE)
            elif money >= 6:
                out.write("0: bought gold\n")
                _try(state.buy_card, Card.GOLD)
            elif money >= 4 and num_smithies < 2:
                out.write("0: bought smithy\n")
                _try(state.buy_card, Card.SMITHY)
                num_smithies += 1
            elif money >= 3:
                out.write("0: bought silver\n")
                _try(state.buy_card, Card.SILVER)

            out.write("0: end turn\n")
            state.end_turn()
        else:
            if adventurer_pos != -1:
                out.write(f"1: adventurer played from position {adventurer_pos}\n")
                _try(state.play_card, adventurer_pos, -1, -1, -1)
                money = _play_treasures(state)

            if money >= 8:
                out.write("1: bought province\n")
                _try(state.buy_card, Card.PROVINCE)
            elif money >= 6 and num_adventurers < 2:
                out.write("1: bought adventurer\n")
                _try(state.buy_card, Card.ADVENTURER)
                num_adventurers += 1
            elif money >= 6:
                out.write("1: bought gold\n")
                _try(state.buy_card, Card.GOLD)
            elif money >= 3:
                out.write("1: bought silver\n")
                _try(state.buy_card, Card.SILVER)
            out.write("1: endTurn\n")
            state.end_turn()

    out.write("Finished game.\n")
    out.write(f"Player 0: {state.score_for(0)}\nPlayer 1: {state.score_for(1)}\n")
    return state


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scripted game with the seed given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        seed = int(args[0])
    except (IndexError, ValueError):
        print("Usage: playdom [integer random number seed]")
        return 1
    play_game(seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())