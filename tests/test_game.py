from collections import Counter

import pytest

from dominion.cards import Card, GameError, Phase, get_cost
from dominion.game import GameState, kingdom_cards, new_game

K = [
    Card.ADVENTURER,
    Card.COUNCIL_ROOM,
    Card.FEAST,
    Card.GARDENS,
    Card.MINE,
    Card.REMODEL,
    Card.SMITHY,
    Card.VILLAGE,
    Card.BARON,
    Card.GREAT_HALL,
]


def _blank_game():
    state = new_game(2, K, 1)
    for p in range(4):
        state.hand[p] = []
        state.deck[p] = []
        state.discard[p] = []
    return state


def test_adventurer_supply_four_players():
    state = new_game(4, K, 1)
    assert state.supply_count(Card.ADVENTURER) == 10


def test_unused_kingdom_card_is_minus_one():
    state = new_game(2, K, 1)
    assert state.supply_count(Card.MINION) == -1


@pytest.mark.parametrize("players,victory", [(2, 8), (3, 12), (4, 12)])
def test_victory_kingdom_cards(players, victory):
    state = new_game(players, K, 1)
    assert state.supply_count(Card.GARDENS) == victory
    assert state.supply_count(Card.GREAT_HALL) == victory
    assert state.supply_count(Card.PROVINCE) == victory


@pytest.mark.parametrize("players,curses", [(2, 10), (3, 20), (4, 30)])
def test_curse_supply(players, curses):
    assert new_game(players, K, 1).supply_count(Card.CURSE) == curses


@pytest.mark.parametrize("players", [2, 3, 4])
def test_copper_total_is_sixty(players):
    state = new_game(players, K, 1)
    owned = sum(state.full_deck_count(p, Card.COPPER) for p in range(players))
    assert state.supply_count(Card.COPPER) + owned == 60


@pytest.mark.parametrize("players", [1, 5])
def test_bad_player_count(players):
    with pytest.raises(GameError):
        new_game(players, K, 1)


def test_duplicate_kingdom_cards():
    with pytest.raises(GameError):
        new_game(2, K[:9] + [K[0]], 1)


def test_kingdom_cards_needs_ten():
    assert kingdom_cards(*K) == K
    with pytest.raises(TypeError):
        kingdom_cards(*K[:9])


def test_initial_state():
    state = new_game(2, K, 1)
    assert len(state.hand[0]) == 5
    assert len(state.deck[0]) == 5
    assert state.hand[1] == []
    assert len(state.deck[1]) == 10
    for p in range(2):
        assert state.full_deck_count(p, Card.ESTATE) == 3
        assert state.full_deck_count(p, Card.COPPER) == 7
    assert state.coins == state.hand[0].count(Card.COPPER)
    assert state.whose_turn == 0 and state.num_actions == 1 and state.num_buys == 1
    assert state.embargo_tokens == [0] * len(state.embargo_tokens)


def test_same_seed_same_game():
    first = new_game(2, K, 7)
    second = new_game(2, K, 7)
    assert len(first.hand[0]) == 5
    assert first.hand[0] == second.hand[0]
    assert first.deck[0] == second.deck[0]
    assert first.deck[1] == second.deck[1]
    assert first.coins == second.coins


def test_shuffle_keeps_cards():
    state = _blank_game()
    state.deck[0] = [Card.GOLD, Card.COPPER, Card.ESTATE, Card.SILVER, Card.COPPER]
    before = Counter(state.deck[0])
    state.shuffle(0)
    assert Counter(state.deck[0]) == before


def test_shuffle_empty_deck_raises():
    state = _blank_game()
    with pytest.raises(GameError):
        state.shuffle(0)


def test_draw_from_deck_takes_top_card():
    state = new_game(2, K, 1)
    top = state.deck[0][-1]
    deck_size = len(state.deck[0])
    assert state.draw_card(0) == top
    assert state.hand[0][-1] == top
    assert len(state.deck[0]) == deck_size - 1


def test_draw_reshuffles_discard():
    state = _blank_game()
    cards = [Card.COPPER, Card.SILVER, Card.GOLD, Card.ESTATE]
    state.discard[0] = list(cards)
    drawn = state.draw_card(0)
    assert state.discard[0] == []
    assert len(state.deck[0]) == len(cards) - 1
    assert Counter(state.deck[0] + [drawn]) == Counter(cards)
    assert state.hand[0] == [drawn]


def test_draw_nothing_left():
    state = _blank_game()
    assert state.draw_card(0) is None
    assert state.hand[0] == []


def test_discard_card_moves_last_into_place():
    state = _blank_game()
    state.hand[0] = [Card.SMITHY, Card.COPPER, Card.GOLD]
    state.played_cards = []
    state.discard_card(0, 0, False)
    assert state.hand[0] == [Card.GOLD, Card.COPPER]
    assert state.played_cards == [Card.SMITHY]
    state.discard_card(1, 0, True)
    assert state.hand[0] == [Card.GOLD]
    assert state.played_cards == [Card.SMITHY]


def test_discard_card_bad_position():
    state = _blank_game()
    with pytest.raises(GameError):
        state.discard_card(0, 0, False)


@pytest.mark.parametrize("flag,pile", [(0, "discard"), (1, "deck"), (2, "hand")])
def test_gain_card_destinations(flag, pile):
    state = _blank_game()
    before = state.supply_count(Card.SILVER)
    state.gain_card(Card.SILVER, flag, 1)
    assert getattr(state, pile)[1] == [Card.SILVER]
    assert state.supply_count(Card.SILVER) == before - 1


def test_gain_card_unavailable():
    state = _blank_game()
    with pytest.raises(GameError):
        state.gain_card(Card.MINION, 0, 0)
    state.supply[Card.GOLD] = 0
    with pytest.raises(GameError):
        state.gain_card(Card.GOLD, 0, 0)


def test_buy_card():
    state = _blank_game()
    state.coins = 5
    state.buy_card(Card.SILVER)
    assert state.discard[0] == [Card.SILVER]
    assert state.coins == 5 - get_cost(Card.SILVER)
    assert state.num_buys == 0
    assert state.phase == Phase.BUY
    with pytest.raises(GameError):
        state.buy_card(Card.SILVER)


def test_buy_card_too_expensive():
    state = _blank_game()
    state.coins = 0
    with pytest.raises(GameError):
        state.buy_card(Card.PROVINCE)
    assert state.discard[0] == []


def test_play_smithy():
    state = new_game(2, K, 1)
    state.hand[0].append(Card.SMITHY)
    size = len(state.hand[0])
    state.play_card(size - 1, -1, -1, -1)
    assert len(state.hand[0]) == size + 2
    assert state.num_actions == 0
    assert state.played_cards == [Card.SMITHY]
    assert state.coins == state.hand[0].count(Card.COPPER)


def test_play_card_rejections():
    state = new_game(2, K, 1)
    with pytest.raises(GameError):
        state.play_card(0, -1, -1, -1)
    state.hand[0].append(Card.SMITHY)
    state.phase = Phase.BUY
    with pytest.raises(GameError):
        state.play_card(len(state.hand[0]) - 1, -1, -1, -1)
    state.phase = Phase.ACTION
    state.num_actions = 0
    with pytest.raises(GameError):
        state.play_card(len(state.hand[0]) - 1, -1, -1, -1)


def test_hand_card_out_of_range():
    state = new_game(2, K, 1)
    assert state.hand_card(0) == state.hand[0][0]
    with pytest.raises(GameError):
        state.hand_card(len(state.hand[0]))


def test_end_turn():
    state = new_game(2, K, 1)
    old_hand = list(state.hand[0])
    state.end_turn()
    assert state.whose_turn == 1
    assert state.hand[0] == []
    assert state.discard[0] == old_hand
    assert len(state.hand[1]) == 5
    assert state.num_hand_cards() == 5
    assert state.coins == state.hand[1].count(Card.COPPER)
    assert state.played_cards == []
    state.end_turn()
    assert state.whose_turn == 0


def test_is_game_over():
    state = new_game(2, K, 1)
    assert not state.is_game_over()
    state.supply[Card.PROVINCE] = 0
    assert state.is_game_over()
    state.supply[Card.PROVINCE] = 8
    state.supply[Card.SILVER] = 0
    state.supply[Card.GOLD] = 0
    assert not state.is_game_over()
    state.supply[Card.SMITHY] = 0
    assert state.is_game_over()


def test_score_for_province():
    state = _blank_game()
    state.hand[0] = [Card.PROVINCE]
    assert state.score_for(0) == 6
    state.hand[0] = [Card.CURSE]
    assert state.score_for(0) == -1


def test_update_coins_with_bonus():
    state = _blank_game()
    state.hand[0] = [Card.COPPER, Card.SILVER, Card.GOLD, Card.ESTATE]
    state.update_coins(0, 0)
    base = state.coins
    state.update_coins(0, 5)
    assert state.coins == base + 5


def test_get_winners_clear_winner():
    state = _blank_game()
    state.hand[0] = [Card.PROVINCE]
    assert state.get_winners() == [1, 0, 0, 0]


def test_get_winners_tie_favours_later_player():
    state = _blank_game()
    state.hand[0] = [Card.PROVINCE]
    state.hand[1] = [Card.PROVINCE]
    assert state.get_winners() == [0, 1, 0, 0]


def test_full_deck_count():
    state = _blank_game()
    state.hand[0] = [Card.GOLD]
    state.deck[0] = [Card.GOLD, Card.COPPER]
    state.discard[0] = [Card.GOLD]
    assert state.full_deck_count(0, Card.GOLD) == 3
    assert state.full_deck_count(0, Card.SILVER) == 0


def test_game_state_defaults():
    state = GameState(num_players=2)
    assert state.supply_count(Card.COPPER) == -1
    with pytest.raises(GameError):
        state.supply_count(99)