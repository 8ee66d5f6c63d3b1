"""
High-Low game controller.

Bridges the core engine and the console front end: builds a seeded game from
a GameConfiguration, runs it and returns a GameSummary.
"""

import logging
import random
from typing import Optional

from highlow.core import CardGameDelegate, Deck, EventBus, GameResult, HighLow
from .dto import GameConfiguration, GameSummary


class HighLowController:
    """Runs one High-Low game from a configuration.

    The controller keeps a strong reference to the delegate for the lifetime
    of the game, since the game itself only holds it weakly.
    """

    def __init__(
        self,
        config: Optional[GameConfiguration] = None,
        delegate: Optional[CardGameDelegate] = None,
        logger: Optional[logging.Logger] = None
    ):
        """Initialize the controller.

        Args:
            config: Game configuration, defaults if None
            delegate: Observer attached to the game
            logger: Logger, the module logger if None
        """
        self._config = config or GameConfiguration()
        self._delegate = delegate
        self._logger = logger or logging.getLogger(__name__)
        self._event_bus = EventBus(logger=self._logger)
        self._game = HighLow(
            deck=Deck(random.Random(self._config.seed)),
            delegate=delegate,
            event_bus=self._event_bus,
            logger=self._logger,
        )

    @property
    def config(self) -> GameConfiguration:
        return self._config

    @property
    def game(self) -> HighLow:
        return self._game

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def run(self) -> GameSummary:
        """Play the game.

        Returns:
            Summary of the finished game

        Raises:
            GameStateError: If the game was already run
        """
        self._logger.debug("Running High-Low with seed %s", self._config.seed)
        result: GameResult = self._game.play()
        return GameSummary.from_result(result, seed=self._config.seed)
