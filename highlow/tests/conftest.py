"""
Shared pytest fixtures for the High-Low tests.

Provides seeded generators, a generator that always picks the first card,
and a delegate that records every callback.
"""

import random
from typing import Any, List, Tuple

import pytest

from highlow.core import Card, CardGame, Rank, Suit


class FirstCardRandom(random.Random):
    """Generator that always selects index 0, so draws follow deck order."""

    def randrange(self, *args, **kwargs) -> int:
        return 0


class RecordingDelegate:
    """Delegate that records callbacks together with the game state seen."""

    def __init__(self):
        self.calls: List[Tuple[Any, ...]] = []
        self.game = None

    def on_game_start(self, game: CardGame) -> None:
        self.game = game
        self.calls.append(('start', game.phase, game.deck.cards_remaining))

    def on_round_drawn(self, card1: Card, card2: Card) -> None:
        self.calls.append(('round', card1, card2))

    @property
    def start_calls(self) -> List[Tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == 'start']

    @property
    def round_calls(self) -> List[Tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == 'round']


@pytest.fixture
def seeded_rng():
    """Generator with a fixed seed"""
    return random.Random(42)


@pytest.fixture
def first_card_rng():
    return FirstCardRandom()


@pytest.fixture
def recording_delegate():
    return RecordingDelegate()


@pytest.fixture
def full_deck_cards():
    """All 52 cards in deck construction order"""
    return [Card(suit, rank) for suit in Suit for rank in Rank]
