"""
Card and deck data structures.

Contains the immutable Card value type and the Deck that hands out cards at
random without replacement.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .enums import Suit, Rank, get_all_suits, get_all_ranks
from .exceptions import EmptyDeckError, InvalidRank

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Card:
    """
    A single playing card.

    Equality and hashing use both suit and rank. Ordering uses the rank
    alone, so two cards of the same rank in different suits are neither
    equal nor less than one another. Only the rank is at stake in High-Low.

    Attributes:
        suit: card suit
        rank: card rank

    Examples:
        >>> str(Card(Suit.DIAMONDS, Rank.TWO))
        '2 of diamonds'
        >>> Card(Suit.HEARTS, Rank.ACE) < Card(Suit.SPADES, Rank.TWO)
        True
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        Check field types.

        Raises:
            TypeError: when suit or rank is not the enum type
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {type(self.suit).__name__}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(self.rank).__name__}")

    @property
    def display_name(self) -> str:
        return f"{self.rank.display_name} of {self.suit.display_name}"

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        Build a card from a short code such as "AH", "10d" or "KS".

        Args:
            card_str: rank token followed by a suit token

        Returns:
            Card: the parsed card

        Raises:
            TypeError: when card_str is not a string
            InvalidRank: when the rank token is unknown
            InvalidSuit: when the suit token is unknown
        """
        if not isinstance(card_str, str):
            raise TypeError(f"card_str must be a string, got {type(card_str).__name__}")

        text = card_str.strip()
        if len(text) < 2:
            raise InvalidRank(f"Malformed card string: {card_str!r}")

        # "10" is the only two-character rank
        if text.startswith("10"):
            rank_str, suit_str = "10", text[2:]
        else:
            rank_str, suit_str = text[0], text[1:]

        rank_map: Dict[str, Rank] = {
            "A": Rank.ACE, "2": Rank.TWO, "3": Rank.THREE, "4": Rank.FOUR,
            "5": Rank.FIVE, "6": Rank.SIX, "7": Rank.SEVEN, "8": Rank.EIGHT,
            "9": Rank.NINE, "10": Rank.TEN, "T": Rank.TEN, "J": Rank.JACK,
            "Q": Rank.QUEEN, "K": Rank.KING,
        }
        rank = rank_map.get(rank_str.upper())
        if rank is None:
            raise InvalidRank(f"Invalid rank: {rank_str!r}")

        return cls(Suit.from_token(suit_str), rank)

    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.ordinal < other.rank.ordinal

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self) -> int:
        return hash((self.suit, self.rank))


class Deck:
    """
    The pool of cards still available to draw.

    A new deck holds one card for every (suit, rank) pair, built suit by
    suit. Cards are drawn from a uniformly random position using the
    injected random number generator, so a seeded generator replays the
    same sequence of draws.

    Examples:
        >>> deck = Deck(random.Random(7))
        >>> card = deck.draw_card()
        >>> len(deck)
        51
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 cards: Optional[Iterable[Card]] = None) -> None:
        """
        Initialize the deck.

        Args:
            rng: random number generator used for draws. A private
                random.Random() is created when omitted.
            cards: explicit deck contents. The standard 52 cards when omitted.
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        if cards is None:
            self.initialize()
        else:
            self._cards = list(cards)

    def initialize(self) -> None:
        """Fill the deck with the full 52 cards, suit outer and rank inner."""
        self._cards = [
            Card(suit, rank)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]

    def draw_card(self) -> Card:
        """
        Remove and return a card from a random position.

        Returns:
            Card: the drawn card

        Raises:
            EmptyDeckError: when no cards remain
        """
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        index = self._rng.randrange(len(self._cards))
        card = self._cards.pop(index)
        logger.debug("Drew %s from position %d, %d left", card, index, len(self._cards))
        return card

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    def remaining_count(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    @property
    def cards(self) -> List[Card]:
        """Copy of the remaining cards, in deck order."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
