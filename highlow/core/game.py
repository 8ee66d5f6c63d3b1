"""
High-Low game engine.

Each round both players draw one card and the higher rank takes a point.
The game runs until the deck cannot supply another pair of cards.
"""

import logging
import random
import weakref
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .cards import Card, Deck
from .enums import GamePhase, RoundOutcome
from .events import EventBus, EventType
from .exceptions import EmptyDeckError, GameStateError
from .protocols import CardGameDelegate

CARDS_PER_ROUND = 2


def compare_cards(card1: Card, card2: Card) -> RoundOutcome:
    """Decide a round by rank alone.

    Args:
        card1: Player 1's card
        card2: Player 2's card

    Returns:
        The player holding the higher rank, or TIE on equal ranks
    """
    if card2 < card1:
        return RoundOutcome.PLAYER1
    if card1 < card2:
        return RoundOutcome.PLAYER2
    return RoundOutcome.TIE


def determine_winner(player1_score: int, player2_score: int) -> RoundOutcome:
    """Decide the game from the final counters."""
    if player1_score > player2_score:
        return RoundOutcome.PLAYER1
    if player2_score > player1_score:
        return RoundOutcome.PLAYER2
    return RoundOutcome.TIE


@dataclass(frozen=True)
class RoundResult:
    """One resolved round.

    Attributes:
        round_number: 1-based round index
        player1_card: Card drawn by player 1
        player2_card: Card drawn by player 2
        outcome: Who took the round
    """

    round_number: int
    player1_card: Card
    player2_card: Card
    outcome: RoundOutcome

    @property
    def is_tie(self) -> bool:
        return self.outcome is RoundOutcome.TIE

    @property
    def winning_card(self) -> Optional[Card]:
        if self.outcome is RoundOutcome.PLAYER1:
            return self.player1_card
        if self.outcome is RoundOutcome.PLAYER2:
            return self.player2_card
        return None

    @property
    def message(self) -> str:
        if self.is_tie:
            return (f"Round ends in a tie with {self.player1_card.display_name} "
                    f"and {self.player2_card.display_name}.")
        return f"{self.outcome.label} wins with {self.winning_card.display_name}."


@dataclass(frozen=True)
class GameResult:
    """Final result of a finished game.

    Attributes:
        player1_score: Rounds won by player 1
        player2_score: Rounds won by player 2
        outcome: Game winner, or TIE on equal scores
        rounds: Every round in play order
        cards_left: Cards left undrawn when the deck could not supply a pair
    """

    player1_score: int
    player2_score: int
    outcome: RoundOutcome
    rounds: Tuple[RoundResult, ...] = ()
    cards_left: int = 0

    @property
    def is_tie(self) -> bool:
        return self.outcome is RoundOutcome.TIE

    @property
    def ties(self) -> int:
        return sum(1 for r in self.rounds if r.is_tie)

    @property
    def score_line(self) -> str:
        return (f"Player 1 has a score of {self.player1_score} "
                f"and Player 2 has a score of {self.player2_score}.")

    @property
    def message(self) -> str:
        if self.is_tie:
            return "The game ended in a tie."
        return f"{self.outcome.label} wins the game."


class HighLow:
    """High-Low card game for two players.

    The game owns its deck and event bus. The delegate is held through a
    weak reference: the caller keeps it alive, and a collected delegate
    simply stops receiving callbacks.

    A game is played once. ``play()`` on a started or finished game raises
    GameStateError, since the deck is consumed and never reset.
    """

    def __init__(
        self,
        deck: Optional[Deck] = None,
        delegate: Optional[CardGameDelegate] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
        logger: Optional[logging.Logger] = None
    ):
        """Initialize the game.

        Args:
            deck: Deck to play from; a standard deck drawing with ``rng`` if None
            delegate: Observer notified of game start and of every round
            rng: Random number generator for the default deck
            event_bus: Bus for game events; a private bus if None
            logger: Logger; the module logger if None
        """
        self._deck = deck if deck is not None else Deck(rng)
        self._delegate_ref: Optional[weakref.ref] = None
        self.delegate = delegate
        self._logger = logger or logging.getLogger(__name__)
        self._event_bus = event_bus or EventBus(logger=self._logger)
        self._phase = GamePhase.NOT_STARTED
        self._player1_score = 0
        self._player2_score = 0
        self._rounds: List[RoundResult] = []
        self._result: Optional[GameResult] = None

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def delegate(self) -> Optional[CardGameDelegate]:
        if self._delegate_ref is None:
            return None
        return self._delegate_ref()

    @delegate.setter
    def delegate(self, value: Optional[CardGameDelegate]) -> None:
        self._delegate_ref = weakref.ref(value) if value is not None else None

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def player1_score(self) -> int:
        return self._player1_score

    @property
    def player2_score(self) -> int:
        return self._player2_score

    @property
    def rounds(self) -> List[RoundResult]:
        return list(self._rounds)

    @property
    def result(self) -> Optional[GameResult]:
        """The final result, or None until the game has finished."""
        return self._result

    def play(self) -> GameResult:
        """Play rounds until fewer than two cards remain.

        Returns:
            The final GameResult

        Raises:
            GameStateError: If the game was already played, or if the deck
                ran dry in the middle of a round
        """
        if self._phase is not GamePhase.NOT_STARTED:
            raise GameStateError(f"High-Low game cannot be played again (phase: {self._phase.value})")

        self._phase = GamePhase.IN_PROGRESS
        self._logger.info("Starting High-Low with %d cards", self._deck.cards_remaining)

        delegate = self.delegate
        if delegate is not None:
            delegate.on_game_start(self)
        self._event_bus.emit_simple(EventType.GAME_STARTED, source="highlow",
                                    cards=self._deck.cards_remaining)

        while self._deck.cards_remaining >= CARDS_PER_ROUND:
            self._play_round()

        self._phase = GamePhase.FINISHED
        self._result = GameResult(
            player1_score=self._player1_score,
            player2_score=self._player2_score,
            outcome=determine_winner(self._player1_score, self._player2_score),
            rounds=tuple(self._rounds),
            cards_left=self._deck.cards_remaining,
        )

        if self._result.cards_left:
            self._logger.info("%d card(s) left undrawn", self._result.cards_left)
        self._logger.info(self._result.score_line)
        self._logger.info(self._result.message)
        self._event_bus.emit_simple(EventType.GAME_ENDED, source="highlow", result=self._result)
        return self._result

    def _play_round(self) -> RoundResult:
        """Draw, notify, compare and score one round."""
        try:
            player1_card = self._deck.draw_card()
            player2_card = self._deck.draw_card()
        except EmptyDeckError as exc:
            self._logger.error("Deck ran out during round %d", len(self._rounds) + 1)
            raise GameStateError("Deck ran out in the middle of a round") from exc

        round_number = len(self._rounds) + 1
        self._logger.debug("Round %d: player 1 drew %s, player 2 drew %s",
                           round_number, player1_card, player2_card)

        delegate = self.delegate
        if delegate is not None:
            delegate.on_round_drawn(player1_card, player2_card)
        self._event_bus.emit_simple(EventType.CARDS_DRAWN, source="highlow",
                                    round_number=round_number,
                                    player1_card=player1_card,
                                    player2_card=player2_card)

        outcome = compare_cards(player1_card, player2_card)
        if outcome is RoundOutcome.PLAYER1:
            self._player1_score += 1
        elif outcome is RoundOutcome.PLAYER2:
            self._player2_score += 1

        round_result = RoundResult(round_number, player1_card, player2_card, outcome)
        self._rounds.append(round_result)
        self._logger.info(round_result.message)
        self._event_bus.emit_simple(EventType.ROUND_RESOLVED, source="highlow", round=round_result)
        return round_result

    def __repr__(self) -> str:
        return (f"HighLow(phase={self._phase.value}, score={self._player1_score}-"
                f"{self._player2_score}, cards_remaining={self._deck.cards_remaining})")
