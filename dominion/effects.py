"""Effects of playing each action card.

``card_effect`` works on any game state that exposes the players' card
piles as lists (``hand``, ``deck``, ``discard``), the shared
``played_cards`` list, the ``supply`` and ``embargo_tokens`` counts, the
turn counters (``num_actions``, ``num_buys``, ``coins``,
``outpost_played``), ``whose_turn`` and ``num_players``, and the methods
``draw_card``, ``discard_card``, ``gain_card``, ``update_coins``,
``shuffle`` and ``supply_count``.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
from typing import Any

from .cards import UNUSED, Card, GameError, get_cost

TO_DISCARD = 0
TO_DECK = 1
TO_HAND = 2

_TREASURES = frozenset({Card.COPPER, Card.SILVER, Card.GOLD})
_VICTORIES = frozenset(
    {Card.ESTATE, Card.DUCHY, Card.PROVINCE, Card.GARDENS, Card.GREAT_HALL}
)


@dataclass(frozen=True)
class _Play:
    state: Any
    player: int
    choice1: int
    choice2: int
    choice3: int
    hand_pos: int

    @property
    def hand(self) -> list[int]:
        return self.state.hand[self.player]

    @property
    def next_player(self) -> int:
        following = self.player + 1
        return 0 if following > self.state.num_players - 1 else following

    @property
    def others(self) -> list[int]:
        return [p for p in range(self.state.num_players) if p != self.player]


def _hand_at(state: Any, player: int, pos: int) -> int:
    hand = state.hand[player]
    if not 0 <= pos < len(hand):
        raise GameError(f"no card at hand position {pos}")
    return hand[pos]


def _check_supply_card(card: int) -> None:
    if not Card.CURSE <= card <= Card.TREASURE_MAP:
        raise GameError(f"{card} is not a supply pile")


def _discard(state: Any, pos: int, player: int, trash: bool = False) -> None:
    """Discard (or trash) a hand card; a position past the end takes the last card."""
    hand = state.hand[player]
    if not hand:
        return
    if pos < 0:
        raise GameError(f"no card at hand position {pos}")
    state.discard_card(min(pos, len(hand) - 1), player, trash)


def _discard_hand(state: Any, player: int) -> None:
    while state.hand[player]:
        state.discard_card(len(state.hand[player]) - 1, player, False)


def _gain(state: Any, card: int, to_flag: int, player: int) -> None:
    with suppress(GameError):
        state.gain_card(card, to_flag, player)


def _draw(state: Any, player: int, count: int) -> None:
    for _ in range(count):
        state.draw_card(player)


def _adventurer(p: _Play) -> None:
    state = p.state
    treasures = 0
    set_aside: list[int] = []
    while treasures < 2:
        card = state.draw_card(p.player)
        if card is None:
            break
        if card in _TREASURES:
            treasures += 1
        else:
            set_aside.append(state.hand[p.player].pop())
    state.discard[p.player].extend(reversed(set_aside))


def _council_room(p: _Play) -> None:
    _draw(p.state, p.player, 4)
    p.state.num_buys += 1
    for other in p.others:
        p.state.draw_card(other)
    _discard(p.state, p.hand_pos, p.player)


def _feast(p: _Play) -> None:
    state = p.state
    _check_supply_card(p.choice1)
    saved = state.hand[p.player]
    state.hand[p.player] = []
    try:
        state.update_coins(p.player, 5)
        if state.supply_count(p.choice1) <= 0:
            raise GameError("none of that card left")
        if state.coins < get_cost(p.choice1):
            raise GameError("that card is too expensive")
        state.gain_card(p.choice1, TO_DISCARD, p.player)
    finally:
        state.hand[p.player] = saved


def _gardens(p: _Play) -> None:
    raise GameError("gardens cannot be played")


def _exchange(p: _Play, extra_cost: int, to_flag: int) -> None:
    trashed = _hand_at(p.state, p.player, p.choice1)
    if get_cost(trashed) + extra_cost > get_cost(p.choice2):
        raise GameError("the card to gain costs too little")
    _gain(p.state, p.choice2, to_flag, p.player)
    _discard(p.state, p.hand_pos, p.player)
    hand = p.hand
    if trashed in hand:
        _discard(p.state, hand.index(trashed), p.player)


def _mine(p: _Play) -> None:
    trashed = _hand_at(p.state, p.player, p.choice1)
    if trashed not in _TREASURES:
        raise GameError("mine needs a treasure to trash")
    if not Card.CURSE <= p.choice2 <= Card.TREASURE_MAP:
        raise GameError(f"{p.choice2} is not a supply pile")
    _exchange(p, 3, TO_HAND)


def _remodel(p: _Play) -> None:
    _exchange(p, 2, TO_DISCARD)


def _smithy(p: _Play) -> None:
    _draw(p.state, p.player, 3)
    _discard(p.state, p.hand_pos, p.player)


def _village(p: _Play) -> None:
    p.state.draw_card(p.player)
    p.state.num_actions += 2
    _discard(p.state, p.hand_pos, p.player)


def _baron(p: _Play) -> None:
    state = p.state
    state.num_buys += 1
    hand = p.hand
    if p.choice1 > 0 and Card.ESTATE in hand:
        hand.remove(Card.ESTATE)
        state.coins += 4
        state.discard[p.player].append(Card.ESTATE)
    elif state.supply_count(Card.ESTATE) > 0:
        state.gain_card(Card.ESTATE, TO_DISCARD, p.player)
        state.supply[Card.ESTATE] -= 1


def _great_hall(p: _Play) -> None:
    p.state.draw_card(p.player)
    p.state.num_actions += 1
    _discard(p.state, p.hand_pos, p.player)


def _minion(p: _Play) -> None:
    state = p.state
    state.num_actions += 1
    _discard(state, p.hand_pos, p.player)
    if p.choice1:
        state.coins += 2
    elif p.choice2:
        _discard_hand(state, p.player)
        _draw(state, p.player, 4)
        for other in p.others:
            if len(state.hand[other]) > 4:
                _discard_hand(state, other)
                _draw(state, other, 4)


def _steward(p: _Play) -> None:
    state = p.state
    if p.choice1 == 1:
        _draw(state, p.player, 2)
    elif p.choice1 == 2:
        state.coins += 2
    else:
        _discard(state, p.choice2, p.player, trash=True)
        _discard(state, p.choice3, p.player, trash=True)
    _discard(state, p.hand_pos, p.player)


def _tribute(p: _Play) -> None:
    state = p.state
    target = p.next_player
    deck, discard = state.deck[target], state.discard[target]
    revealed: list[int] = []
    if len(deck) + len(discard) <= 1:
        if deck:
            revealed.append(deck.pop())
        elif discard:
            revealed.append(discard.pop())
    else:
        if not deck:
            deck.extend(discard)
            discard.clear()
            state.shuffle(target)
            deck = state.deck[target]
        for _ in range(2):
            revealed.append((deck or discard).pop())
    first, second = (revealed + [UNUSED, UNUSED])[:2]
    if first == second:
        state.played_cards.append(second)
        second = UNUSED
    for card in (first, second):
        if card in _TREASURES:
            state.coins += 2
        elif card in _VICTORIES:
            _draw(state, p.player, 2)
        else:
            state.num_actions += 2


def _ambassador(p: _Play) -> None:
    state = p.state
    if p.choice2 > 2 or p.choice2 < 0:
        raise GameError("may return only 0 to 2 cards")
    if p.choice1 == p.hand_pos:
        raise GameError("cannot reveal the ambassador itself")
    revealed = _hand_at(state, p.player, p.choice1)
    copies = sum(
        1
        for pos in range(len(p.hand))
        if pos == revealed and pos not in (p.hand_pos, p.choice1)
    )
    if copies < p.choice2:
        raise GameError("not enough copies to return")
    state.supply[revealed] += p.choice2
    for other in p.others:
        _gain(state, revealed, TO_DISCARD, other)
    _discard(state, p.hand_pos, p.player)
    for _ in range(p.choice2):
        hand = p.hand
        if p.choice1 >= len(hand):
            break
        _discard(state, hand.index(hand[p.choice1]), p.player, trash=True)


def _cutpurse(p: _Play) -> None:
    state = p.state
    state.update_coins(p.player, 2)
    for other in p.others:
        hand = state.hand[other]
        if Card.COPPER in hand:
            state.discard_card(hand.index(Card.COPPER), other, False)
    _discard(state, p.hand_pos, p.player)


def _embargo(p: _Play) -> None:
    state = p.state
    _check_supply_card(p.choice1)
    state.coins += 2
    if state.supply[p.choice1] == UNUSED:
        raise GameError("that pile is not in the game")
    state.embargo_tokens[p.choice1] += 1
    _discard(state, p.hand_pos, p.player, trash=True)


def _outpost(p: _Play) -> None:
    p.state.outpost_played += 1
    _discard(p.state, p.hand_pos, p.player)


def _salvager(p: _Play) -> None:
    state = p.state
    state.num_buys += 1
    if p.choice1:
        state.coins += get_cost(_hand_at(state, p.player, p.choice1))
        _discard(state, p.choice1, p.player, trash=True)
    _discard(state, p.hand_pos, p.player)


def _sea_hag(p: _Play) -> None:
    state = p.state
    for other in p.others:
        deck = state.deck[other]
        if deck:
            state.discard[other].append(deck.pop())
        deck.append(Card.CURSE)


def _treasure_map(p: _Play) -> None:
    state = p.state
    other_map = next(
        (
            pos
            for pos, card in enumerate(p.hand)
            if card == Card.TREASURE_MAP and pos != p.hand_pos
        ),
        None,
    )
    if other_map is None:
        raise GameError("no second treasure map in hand")
    _discard(state, p.hand_pos, p.player, trash=True)
    _discard(state, other_map, p.player, trash=True)
    for _ in range(4):
        _gain(state, Card.GOLD, TO_DECK, p.player)


_HANDLERS: dict[int, Callable[[_Play], None]] = {
    Card.ADVENTURER: _adventurer,
    Card.COUNCIL_ROOM: _council_room,
    Card.FEAST: _feast,
    Card.GARDENS: _gardens,
    Card.MINE: _mine,
    Card.REMODEL: _remodel,
    Card.SMITHY: _smithy,
    Card.VILLAGE: _village,
    Card.BARON: _baron,
    Card.GREAT_HALL: _great_hall,
    Card.MINION: _minion,
    Card.STEWARD: _steward,
    Card.TRIBUTE: _tribute,
    Card.AMBASSADOR: _ambassador,
    Card.CUTPURSE: _cutpurse,
    Card.EMBARGO: _embargo,
    Card.OUTPOST: _outpost,
    Card.SALVAGER: _salvager,
    Card.SEA_HAG: _sea_hag,
    Card.TREASURE_MAP: _treasure_map,
}


def card_effect(
    state: Any,
    card: int,
    choice1: int,
    choice2: int,
    choice3: int,
    hand_pos: int,
) -> None:
    """Apply the effect of ``card`` played from ``hand_pos`` by the current player.

    Raises GameError when the card cannot be played with these choices.
    """
    handler = _HANDLERS.get(card)
    if handler is None:
        raise GameError(f"card {card} has no action")
    handler(_Play(state, state.whose_turn, choice1, choice2, choice3, hand_pos))