"""A simplified Dominion deck-building card game: rules, card effects, a seeded
random number generator, text views, a bot, an interactive player and a
scripted two-player game."""

__version__ = "0.1.0"
__all__ = ["rngs", "cards", "effects", "game", "interface", "playdom", "player"]