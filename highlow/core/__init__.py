"""
Core game logic for the High-Low card game.

This package contains the cards and deck, the game engine, its observer
interfaces and the event system.
"""

import random
from typing import Optional

from .enums import Suit, Rank, RoundOutcome, GamePhase, get_all_suits, get_all_ranks
from .exceptions import CardGameError, InvalidRank, InvalidSuit, EmptyDeckError, GameStateError
from .cards import Card, Deck
from .events import EventBus, EventType, GameEvent
from .protocols import CardGame, CardGameDelegate
from .game import HighLow, RoundResult, GameResult, compare_cards, determine_winner


def new_deck(seed: Optional[int] = None) -> Deck:
    """Create a full deck drawing from a generator seeded with ``seed``.

    Args:
        seed: Seed for reproducible draws; unseeded if None.

    Returns:
        A new 52-card deck.
    """
    return Deck(random.Random(seed))


__all__ = [
    # Enums
    'Suit', 'Rank', 'RoundOutcome', 'GamePhase',

    # Errors
    'CardGameError', 'InvalidRank', 'InvalidSuit', 'EmptyDeckError', 'GameStateError',

    # Core classes
    'Card', 'Deck', 'HighLow', 'RoundResult', 'GameResult',

    # Interfaces
    'CardGame', 'CardGameDelegate',

    # Events
    'EventBus', 'EventType', 'GameEvent',

    # Utility functions
    'new_deck', 'compare_cards', 'determine_winner', 'get_all_suits', 'get_all_ranks'
]
