"""Console game tracker.

A CardGameDelegate that echoes the start of the game and every round's
draws to the console.
"""

import click

from highlow.core import Card, CardGame
from .render import CLIRenderer


class CardGameTracker:
    """Prints game start and draws as they happen."""

    def __init__(self, err: bool = False):
        """
        Args:
            err: Write to stderr instead of stdout
        """
        self._err = err
        self.rounds_seen = 0

    def on_game_start(self, game: CardGame) -> None:
        self.rounds_seen = 0
        click.echo(CLIRenderer.render_game_start(game), err=self._err)

    def on_round_drawn(self, card1: Card, card2: Card) -> None:
        self.rounds_seen += 1
        click.echo(CLIRenderer.render_draws(card1, card2), err=self._err)
