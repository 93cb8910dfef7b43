"""Game state and the rules for setting up and running a game."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from .cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    MAX_PLAYERS,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    SILVER_VALUE,
    UNUSED,
    Card,
    GameError,
    Phase,
    get_cost,
)
from .effects import TO_DECK, TO_DISCARD, TO_HAND, card_effect
from .rngs import RandomStreams

_COIN_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}

_VICTORY_POINTS = {
    Card.CURSE: -1,
    Card.ESTATE: 1,
    Card.DUCHY: 3,
    Card.PROVINCE: 6,
    Card.GREAT_HALL: 1,
}

_GAME_OVER_PILES = 25
_INVALID_SCORE = -9999


def _empty_piles() -> list[list[int]]:
    return [[] for _ in range(MAX_PLAYERS)]


def kingdom_cards(*args: int) -> list[int]:
    """Return the ten given kingdom cards as a list."""
    if len(args) != NUM_K_CARDS:
        raise TypeError(f"expected {NUM_K_CARDS} kingdom cards, got {len(args)}")
    return list(args)


@dataclass
class GameState:
    """Everything about a game in progress."""

    num_players: int
    rng: RandomStreams = field(default_factory=RandomStreams, repr=False, compare=False)
    supply: list[int] = field(default_factory=lambda: [UNUSED] * NUM_TOTAL_K_CARDS)
    embargo_tokens: list[int] = field(default_factory=lambda: [0] * NUM_TOTAL_K_CARDS)
    hand: list[list[int]] = field(default_factory=_empty_piles)
    deck: list[list[int]] = field(default_factory=_empty_piles)
    discard: list[list[int]] = field(default_factory=_empty_piles)
    played_cards: list[int] = field(default_factory=list)
    outpost_played: int = 0
    outpost_turn: int = 0
    whose_turn: int = 0
    phase: int = Phase.ACTION
    num_actions: int = 1
    coins: int = 0
    num_buys: int = 1

    def shuffle(self, player: int) -> None:
        """Shuffle the player's deck; the deck must not be empty."""
        deck = self.deck[player]
        if not deck:
            raise GameError(f"player {player} has no deck to shuffle")
        remaining = sorted(deck)
        shuffled = []
        while remaining:
            shuffled.append(remaining.pop(math.floor(self.rng.random() * len(remaining))))
        self.deck[player] = shuffled

    def play_card(self, hand_pos: int, choice1: int, choice2: int, choice3: int) -> None:
        """Play the action card at ``hand_pos`` of the current player's hand."""
        if self.phase != Phase.ACTION:
            raise GameError("cards can only be played in the action phase")
        if self.num_actions < 1:
            raise GameError("no actions left")
        card = self.hand_card(hand_pos)
        if not Card.ADVENTURER <= card <= Card.TREASURE_MAP:
            raise GameError(f"card {card} is not an action card")
        card_effect(self, card, choice1, choice2, choice3, hand_pos)
        self.num_actions -= 1
        self.update_coins(self.whose_turn, 0)

    def buy_card(self, supply_pos: int) -> None:
        """Buy one card from the supply pile ``supply_pos``."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(supply_pos) < 1:
            raise GameError("none of that card left")
        cost = get_cost(supply_pos)
        if self.coins < cost:
            raise GameError(f"not enough coins: have {self.coins}, need {cost}")
        self.phase = Phase.BUY
        self.gain_card(supply_pos, TO_DISCARD, self.whose_turn)
        self.coins -= cost
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hand[self.whose_turn])

    def hand_card(self, hand_pos: int) -> int:
        """The card at ``hand_pos`` of the current player's hand."""
        hand = self.hand[self.whose_turn]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """How many of ``card`` are left in the supply; -1 if not in the game."""
        if not Card.CURSE <= card <= Card.TREASURE_MAP:
            raise GameError(f"{card} is not a supply pile")
        return self.supply[card]

    def full_deck_count(self, player: int, card: int) -> int:
        """How many of ``card`` the player has in deck, hand and discard."""
        return sum(
            pile.count(card)
            for pile in (self.deck[player], self.hand[player], self.discard[player])
        )

    def end_turn(self) -> None:
        """Clean up the current player's turn and start the next one."""
        current = self.whose_turn
        self.discard[current].extend(self.hand[current])
        self.hand[current] = []
        self.whose_turn = current + 1 if current < self.num_players - 1 else 0
        self.outpost_played = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards = []
        self.hand[self.whose_turn] = []
        for _ in range(5):
            self.draw_card(self.whose_turn)
        self.update_coins(self.whose_turn, 0)

    def is_game_over(self) -> bool:
        """True when provinces are gone or three supply piles are empty."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_GAME_OVER_PILES] if count == 0)
        return empty >= 3

    def _card_score(self, player: int, card: int) -> int:
        if card == Card.GARDENS:
            return self.full_deck_count(player, Card.CURSE) // 10
        return _VICTORY_POINTS.get(card, 0)

    def score_for(self, player: int) -> int:
        """Victory points of ``player``."""
        discard = self.discard[player]
        cards = [*self.hand[player], *discard, *self.deck[player][: len(discard)]]
        return sum(self._card_score(player, card) for card in cards)

    def get_winners(self) -> list[int]:
        """One entry per possible player: 1 for each winner, 0 otherwise."""
        scores = [
            self.score_for(p) if p < self.num_players else _INVALID_SCORE
            for p in range(MAX_PLAYERS)
        ]
        high = max(scores)
        scores = [
            score + 1 if score == high and p > self.whose_turn else score
            for p, score in enumerate(scores)
        ]
        high = max(scores)
        return [1 if score == high else 0 for score in scores]

    def draw_card(self, player: int) -> int | None:
        """Move the top deck card into the hand and return it.

        An empty deck is first refilled from the shuffled discard pile.
        Returns None if there is nothing to draw.
        """
        if not self.deck[player]:
            self.deck[player] = list(self.discard[player])
            self.discard[player] = []
            if not self.deck[player]:
                return None
            self.shuffle(player)
        card = self.deck[player].pop()
        self.hand[player].append(card)
        return card

    def discard_card(self, hand_pos: int, player: int, trash: bool = False) -> None:
        """Remove a hand card, putting it on the played pile unless trashed."""
        hand = self.hand[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        if not trash:
            self.played_cards.append(hand[hand_pos])
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(self, supply_pos: int, to_flag: int = TO_DISCARD, player: int = 0) -> None:
        """Take a card from the supply into the discard, deck or hand."""
        if self.supply_count(supply_pos) < 1:
            raise GameError("that supply pile is empty or not in the game")
        if to_flag == TO_DECK:
            self.deck[player].append(supply_pos)
        elif to_flag == TO_HAND:
            self.hand[player].append(supply_pos)
        else:
            self.discard[player].append(supply_pos)
        self.supply[supply_pos] -= 1

    def update_coins(self, player: int, bonus: int = 0) -> None:
        """Set coins to the treasure in the player's hand plus ``bonus``."""
        self.coins = sum(_COIN_VALUES.get(card, 0) for card in self.hand[player]) + bonus


def _setup_supply(num_players: int, kingdom: Sequence[int]) -> list[int]:
    supply = [UNUSED] * NUM_TOTAL_K_CARDS
    supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
    victory = 8 if num_players == 2 else 12
    for card in (Card.ESTATE, Card.DUCHY, Card.PROVINCE):
        supply[card] = victory
    supply[Card.COPPER] = 60 - 7 * num_players
    supply[Card.SILVER] = 40
    supply[Card.GOLD] = 30
    chosen = set(kingdom)
    for card in range(Card.ADVENTURER, Card.TREASURE_MAP + 1):
        if card not in chosen:
            continue
        supply[card] = victory if card in (Card.GREAT_HALL, Card.GARDENS) else 10
    return supply


def new_game(
    num_players: int,
    kingdom: Sequence[int],
    seed: int = 1,
    rng: RandomStreams | None = None,
) -> GameState:
    """Set up a game: supply, shuffled starting decks and the first hand."""
    rng = RandomStreams() if rng is None else rng
    rng.select_stream(1)
    rng.put_seed(seed)
    if not 2 <= num_players <= MAX_PLAYERS:
        raise GameError(f"a game needs 2 to {MAX_PLAYERS} players")
    kingdom = list(kingdom)
    if len(kingdom) != NUM_K_CARDS:
        raise GameError(f"a game needs {NUM_K_CARDS} kingdom cards")
    if any(count > 1 for count in Counter(kingdom).values()):
        raise GameError("kingdom cards must all be different")

    state = GameState(num_players=num_players, rng=rng)
    state.supply = _setup_supply(num_players, kingdom)
    for player in range(num_players):
        state.deck[player] = [Card.ESTATE] * 3 + [Card.COPPER] * 7
    for player in range(num_players):
        state.shuffle(player)
    for _ in range(5):
        state.draw_card(state.whose_turn)
    state.update_coins(state.whose_turn, 0)
    return state