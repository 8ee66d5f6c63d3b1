"""
Controller layer for the High-Low card game.

This package bridges the core game logic with the console front end.
"""

from .dto import GameConfiguration, GameSummary, LOG_LEVELS
from .game_controller import HighLowController

__all__ = [
    'HighLowController',
    'GameConfiguration', 'GameSummary', 'LOG_LEVELS'
]
