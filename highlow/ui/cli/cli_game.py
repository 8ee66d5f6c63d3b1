"""High-Low command line game.

Plays one game of High-Low in the console through the controller API.
"""

import logging
import sys
from typing import Optional

import click

from highlow import __version__
from highlow.controller import GameConfiguration, HighLowController, LOG_LEVELS
from highlow.core import CardGameError, EventType, GameEvent
from .render import CLIRenderer
from .tracker import CardGameTracker


class HighLowCLI:
    """Console session for a single High-Low game."""

    def __init__(self, config: GameConfiguration):
        """
        Args:
            config: Validated game configuration
        """
        self.config = config

        logging.basicConfig(
            level=getattr(logging, config.log_level, logging.WARNING),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        self.logger = logging.getLogger(__name__)

        self.tracker: Optional[CardGameTracker] = CardGameTracker() if config.show_draws else None
        self.controller = HighLowController(
            config, delegate=self.tracker, logger=logging.getLogger("highlow.game")
        )
        if self.tracker is None:
            # without a tracker the start banner comes from the bus
            self.controller.event_bus.subscribe(EventType.GAME_STARTED, self._on_game_started)
        self.controller.event_bus.subscribe(EventType.ROUND_RESOLVED, self._on_round_resolved)

    def _on_game_started(self, event: GameEvent) -> None:
        click.echo(CLIRenderer.render_game_start(self.controller.game))

    def _on_round_resolved(self, event: GameEvent) -> None:
        click.echo(CLIRenderer.render_round(event.data['round']))

    def run(self) -> int:
        """Play the game and print the summary.

        Returns:
            Process exit status
        """
        try:
            summary = self.controller.run()
        except CardGameError as e:
            self.logger.error("Game aborted: %s", e)
            click.echo(f"Error: {e}", err=True)
            return 1

        click.echo(CLIRenderer.render_summary(summary))
        return 0


@click.command()
@click.option('--seed', type=click.IntRange(min=0), default=None,
              help='Seed for a reproducible game.')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default='WARNING', show_default=True, help='Library log level.')
@click.option('--quiet', is_flag=True, help="Don't print each round's draws.")
@click.version_option(__version__, prog_name='highlow')
def main(seed: Optional[int], log_level: str, quiet: bool) -> None:
    """Play a game of High-Low: two players draw until the deck runs out."""
    config = GameConfiguration(seed=seed, log_level=log_level, show_draws=not quiet)
    sys.exit(HighLowCLI(config).run())


if __name__ == '__main__':
    main()
