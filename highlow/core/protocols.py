"""
Game and observer interfaces.

Any playable game and any observer of it are matched structurally against
these protocols; no base class is required.
"""

from typing import Protocol, runtime_checkable

from .cards import Card, Deck


@runtime_checkable
class CardGame(Protocol):
    """A game played from a single deck."""

    @property
    def deck(self) -> Deck:
        """The deck the game draws from."""
        ...

    def play(self):
        """Run the game to completion."""
        ...


@runtime_checkable
class CardGameDelegate(Protocol):
    """Observer of a card game.

    Both callbacks run synchronously on the thread calling ``play()``,
    before the game continues. Implementations must not change game state.
    """

    def on_game_start(self, game: CardGame) -> None:
        """Called once, before the first card is drawn.

        Args:
            game: The game that is starting
        """
        ...

    def on_round_drawn(self, card1: Card, card2: Card) -> None:
        """Called once per round, after both players have drawn.

        Args:
            card1: Card drawn by player 1
            card2: Card drawn by player 2
        """
        ...
