"""Text views of a game and the simple bot used by the interactive player."""

from __future__ import annotations

import math
import sys
from contextlib import suppress
from typing import TextIO

from .cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    SILVER_VALUE,
    UNUSED,
    Card,
    GameError,
    card_cost,
    card_name,
    phase_name,
)
from .game import GameState
from .rngs import RandomStreams

_COIN_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}

_HELP = (
    "Commands are: \n"
    "  add [Supply Card Number] \t\t\t- add any card to your hand (teh hacks)\n"
    "  buy [Supply Card Number] \t\t\t- buy a card at supply position\n"
    "  end \t\t\t      \t\t\t- end your turn\n"
    "  init [Number of Players] [Number of Bots] \t- initialize the game\n"
    "  num \t\t\t      \t\t\t- print number of cards in your hand\n"
    "  play [Hand Index] [Choice] [Choice] [Choice]\t- play a card from your hand\n"
    "  resign\t\t\t\t\t- end the game showing the current scores\n"
    "  show \t\t\t\t\t\t- show your current hand\n"
    "  stat \t\t\t\t\t\t- show your turn's status\n"
    "  supp \t\t\t\t\t\t- show the supply\n"
    "  whos \t\t\t      \t\t\t- whos turn\n"
    "  exit \t\t\t      \t\t\t- exit the interface"
    "\n\n"
)


def _listing(title: str, cards: list[int], trailing: str) -> str:
    parts = [title]
    if cards:
        parts.append("#  Card\n")
    parts.extend(
        f"{index:<2} {card_name(card):<13}{trailing}\n"
        for index, card in enumerate(cards)
    )
    parts.append("\n")
    return "".join(parts)


def format_hand(state: GameState, player: int) -> str:
    """Numbered listing of the player's hand."""
    return _listing(f"Player {player}'s hand:\n", state.hand[player], "")


def format_deck(state: GameState, player: int) -> str:
    """Numbered listing of the player's deck."""
    return _listing(f"Player {player}'s deck: \n", state.deck[player], "")


def format_played(state: GameState, player: int) -> str:
    """Numbered listing of the cards played this turn."""
    return _listing(f"Player {player}'s played cards: \n", state.played_cards, " ")


def format_discard(state: GameState, player: int) -> str:
    """Numbered listing of the player's discard pile."""
    return _listing(f"Player {player}'s discard: \n", state.discard[player], " ")


def format_supply(state: GameState) -> str:
    """Table of the supply piles in the game with their costs and counts."""
    parts = ["#   Card          Cost   Copies\n"]
    for card in range(NUM_TOTAL_K_CARDS):
        count = state.supply[card]
        if count == UNUSED:
            continue
        parts.append(
            f"{card:<2}  {card_name(card):<13} {card_cost(card):<5}  {count:<5}\n"
        )
    parts.append("\n")
    return "".join(parts)


def format_state(state: GameState) -> str:
    """Summary of the current turn."""
    return (
        f"Player {state.whose_turn}:\n"
        f"{phase_name(state.phase)} phase\n"
        f"{state.num_actions} actions\n"
        f"{state.coins} coins\n"
        f"{state.num_buys} buys\n\n"
    )


def format_scores(state: GameState) -> str:
    """One line with the score of each player."""
    return "".join(
        f"Player {player} has a score of {state.score_for(player)}\n"
        for player in range(state.num_players)
    )


def help_text() -> str:
    """The list of commands of the interactive player."""
    return _HELP


def add_card_to_hand(state: GameState, player: int, card: int) -> None:
    """Put a kingdom card straight into the player's hand."""
    if not Card.ADVENTURER <= card < NUM_TOTAL_K_CARDS:
        raise GameError(f"card {card} is not a kingdom card")
    state.hand[player].append(card)


def select_kingdom_cards(seed: int, rng: RandomStreams | None = None) -> list[int]:
    """Pick ten different kingdom cards at random from stream 1 seeded with ``seed``."""
    rng = RandomStreams() if rng is None else rng
    rng.select_stream(1)
    rng.put_seed(seed)
    chosen: list[int] = []
    while len(chosen) < NUM_K_CARDS:
        card = math.floor(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(card)
    return chosen


def count_hand_coins(state: GameState, player: int) -> int:
    """Total value of the treasures in the player's hand."""
    return sum(_COIN_VALUES.get(card, 0) for card in state.hand[player])


def execute_bot_turn(
    state: GameState, player: int, turn_num: int, out: TextIO | None = None
) -> int:
    """Play one turn for a bot and return the updated turn number."""
    out = sys.stdout if out is None else out
    coins = count_hand_coins(state, player)
    out.write(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************\n"
    )
    out.write(format_supply(state))

    choice = None
    if coins >= card_cost(Card.PROVINCE) and state.supply_count(Card.PROVINCE) > 0:
        choice = Card.PROVINCE
    elif state.supply_count(Card.PROVINCE) == 0 and coins >= card_cost(Card.DUCHY):
        choice = Card.DUCHY
    elif coins >= card_cost(Card.GOLD) and state.supply_count(Card.GOLD) > 0:
        choice = Card.GOLD
    elif coins >= card_cost(Card.SILVER) and state.supply_count(Card.SILVER) > 0:
        choice = Card.SILVER
    if choice is not None:
        with suppress(GameError):
            state.buy_card(choice)
        out.write(f"Player {player} buys card {card_name(choice)}\n\n")

    if player == state.num_players - 1:
        turn_num += 1
    state.end_turn()
    if not state.is_game_over():
        out.write(f"Player {state.whose_turn}'s turn number {turn_num}\n\n")
    return turn_num