import pytest

from dominion.cards import (
    NUM_TOTAL_K_CARDS,
    Card,
    Phase,
    card_cost,
    card_name,
    get_cost,
    phase_name,
)


def test_card_numbering_is_contiguous():
    assert [int(c) for c in Card] == list(range(NUM_TOTAL_K_CARDS))
    assert all(get_cost(c) >= 0 for c in Card)
    assert get_cost(NUM_TOTAL_K_CARDS) == -1
    assert card_name(NUM_TOTAL_K_CARDS - 1) == "Treasure Map"


@pytest.mark.parametrize(
    "card, cost",
    [
        (Card.CURSE, 0),
        (Card.PROVINCE, 8),
        (Card.GOLD, 6),
        (Card.ADVENTURER, 6),
        (Card.EMBARGO, 2),
        (Card.VILLAGE, 3),
    ],
)
def test_get_cost_values(card, cost):
    assert get_cost(card) == cost


def test_get_cost_accepts_plain_ints():
    assert get_cost(3) == get_cost(Card.PROVINCE)


def test_get_cost_unknown_card():
    assert get_cost(27) == -1
    assert get_cost(-1) == -1


def test_card_cost_agrees_with_get_cost_for_every_card():
    assert all(card_cost(c) == get_cost(c) for c in Card)


def test_card_cost_unknown_card():
    assert card_cost(99) == 1000


@pytest.mark.parametrize(
    "card, name",
    [
        (Card.CURSE, "Curse"),
        (Card.COUNCIL_ROOM, "Council Room"),
        (Card.GREAT_HALL, "Great Hall"),
        (Card.SEA_HAG, "Sea Hag"),
        (Card.TREASURE_MAP, "Treasure Map"),
    ],
)
def test_card_names(card, name):
    assert card_name(card) == name


def test_card_names_are_unique():
    names = [card_name(c) for c in Card]
    assert len(set(names)) == len(names)
    assert "?" not in names


def test_card_name_unknown():
    assert card_name(-1) == "?"
    assert card_name(NUM_TOTAL_K_CARDS) == "?"


@pytest.mark.parametrize(
    "phase, name",
    [(Phase.ACTION, "Action"), (Phase.BUY, "Buy"), (Phase.CLEANUP, "Cleanup"), (0, "Action")],
)
def test_phase_names(phase, name):
    assert phase_name(phase) == name


def test_phase_name_unknown():
    assert phase_name(7) == ""