# dominion

A compact engine for a simplified version of the Dominion deck-building
card game. It holds the game rules and the effects of twenty action
cards, a seeded multi-stream Lehmer random number generator so that
games replay exactly from a seed, text views of the game, a simple bot,
an interactive console player and a scripted two-player game.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command-line use

### Interactive player

Start an interactive game with a positive integer seed:

```
dominion-player 42
```

Without exactly one argument, or with a seed that is not a positive
integer, the command prints a usage line and stops. At the `$ ` prompt,
type `help` to list the commands. Commands are matched on their first
four letters.

- `init <players> <bots>` starts a game for 2 to 4 players; the last
  `<bots>` players are played by the bot. `end`, `show` and `stat` only
  act once a game has been started this way.
- `show` lists your hand and the cards played this turn, `stat` shows
  the phase, actions, coins and buys, `supp` shows the supply, `num`
  the number of cards in your hand and `whos` whose turn it is.
- `play <hand index> [choice] [choice] [choice]` plays an action card,
  `buy <supply number>` buys a card, `end` ends your turn, and
  `add <card number>` puts any kingdom card into your hand.
- `resign` ends the turn, prints the scores and quits; `exit` quits.

When the game is over the scores, the winners and every player's piles
are printed. The program also stops at the end of its input.

### Scripted game

Play a game between a Smithy player (player 0) and an Adventurer player
(player 1) and print each move and the final scores:

```
dominion-playdom 7
```

### Random number search

Draw integers below 10**9 from stream 1 of the generator, seeded with
the first argument, until one equals the second argument, then print
`Found the bug!`:

```
dominion-rt 1 123456
```

The search does not stop until the target turns up.

## Library use

```python
from dominion.cards import Card, GameError, card_name
from dominion.game import kingdom_cards, new_game
from dominion.interface import format_hand, format_supply

kingdom = kingdom_cards(
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
state = new_game(2, kingdom, 1)

print(format_hand(state, state.whose_turn))
print(format_supply(state))
print(state.coins, state.supply_count(Card.PROVINCE))

try:
    state.buy_card(Card.SILVER)
except GameError as error:
    print("cannot buy", card_name(Card.SILVER), error)

state.end_turn()
print(state.is_game_over(), state.score_for(0), state.get_winners())
```

The modules are:

- `dominion.cards`: the `Card` and `Phase` enums, `GameError`, the
  game limits, and `get_cost`, `card_cost`, `card_name` and
  `phase_name`.
- `dominion.game`: `GameState`, `new_game` and `kingdom_cards`.
  `GameState` has `play_card`, `buy_card`, `end_turn`, `draw_card`,
  `gain_card`, `discard_card`, `shuffle`, `update_coins`,
  `is_game_over`, `score_for`, `get_winners` and the queries
  `num_hand_cards`, `hand_card`, `supply_count` and `full_deck_count`.
- `dominion.effects`: `card_effect`, the effect of each action card.
- `dominion.interface`: the text views `format_hand`, `format_deck`,
  `format_played`, `format_discard`, `format_supply`, `format_state`,
  `format_scores` and `help_text`, plus `add_card_to_hand`,
  `select_kingdom_cards`, `count_hand_coins` and the bot's
  `execute_bot_turn`.
- `dominion.playdom`: `play_game(seed, out)`, the scripted game.
- `dominion.player`: `run(seed, stdin, stdout)`, the interactive game
  on any pair of text streams.
- `dominion.rngs`: `RandomStreams` and `find_target`.

An illegal move, such as buying a card you cannot afford or playing
with no actions left, raises `dominion.cards.GameError`.

The random number generator can also be used on its own:

```python
from dominion.rngs import RandomStreams

rng = RandomStreams()
rng.select_stream(1)
rng.put_seed(3)
print(rng.random())
print(rng.self_test())
```

## What it does not do

Games live only in memory: there is no saving or loading. There is no
network play and no graphical screen; the interactive player reads
commands from a text stream. The bot never plays action cards; it only
buys Province, Duchy, Gold or Silver and ends its turn.