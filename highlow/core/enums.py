"""
Enumerations for the High-Low card game.

Contains the card suits and ranks plus the outcome and phase types used by
the game engine.
"""

from enum import Enum, IntEnum
from typing import Dict, List

from .exceptions import InvalidRank, InvalidSuit


class Suit(Enum):
    """
    Card suit enumeration.

    The four standard suits. Suits carry no ordering relation; the
    declaration order only fixes the traversal order used to build a deck.
    """

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    SPADES = "spades"
    CLUBS = "clubs"

    @property
    def display_name(self) -> str:
        """Lowercase name, e.g. "hearts"."""
        return self.value

    @classmethod
    def from_token(cls, token: str) -> 'Suit':
        """
        Parse a suit from its name or single-letter abbreviation.

        Args:
            token: "hearts", "Hearts", "h", "H", ...

        Returns:
            Suit: the matching suit

        Raises:
            InvalidSuit: when the token names no suit
        """
        if not isinstance(token, str):
            raise InvalidSuit(f"Invalid suit: {token!r}")

        key = token.strip().lower()
        for suit in cls:
            if key == suit.value or key == suit.value[0]:
                return suit
        raise InvalidSuit(f"Invalid suit: {token!r}")

    def __str__(self) -> str:
        return self.display_name


_FACE_NAMES: Dict[int, str] = {1: "Ace", 11: "Jack", 12: "Queen", 13: "King"}


class Rank(IntEnum):
    """
    Card rank enumeration.

    Thirteen ranks ordered by ordinal, ace low (ACE=1) through KING=13.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def ordinal(self) -> int:
        return int(self.value)

    @property
    def display_name(self) -> str:
        """Face cards by name, number cards by their number."""
        return _FACE_NAMES.get(self.value, str(self.value))

    @classmethod
    def from_ordinal(cls, ordinal: int) -> 'Rank':
        """
        Look up a rank by ordinal.

        Args:
            ordinal: 1 (ace) through 13 (king)

        Returns:
            Rank: the matching rank

        Raises:
            InvalidRank: when the ordinal is not an integer in [1, 13]
        """
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise InvalidRank(f"Rank ordinal must be an integer, got {ordinal!r}")
        if not cls.ACE <= ordinal <= cls.KING:
            raise InvalidRank(f"Rank ordinal out of range [1, 13]: {ordinal}")
        return cls(ordinal)

    def __str__(self) -> str:
        return self.display_name


class RoundOutcome(Enum):
    """Who took a round, or the whole game."""

    PLAYER1 = "player1"
    PLAYER2 = "player2"
    TIE = "tie"

    @property
    def label(self) -> str:
        return {
            RoundOutcome.PLAYER1: "Player 1",
            RoundOutcome.PLAYER2: "Player 2",
            RoundOutcome.TIE: "Tie",
        }[self]


class GamePhase(Enum):
    """Lifecycle of a single game."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


def get_all_suits() -> List[Suit]:
    """Get all card suits.

    Returns:
        List of all Suit values in deck traversal order.
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """Get all card ranks.

    Returns:
        List of all Rank values, ace through king.
    """
    return list(Rank)
