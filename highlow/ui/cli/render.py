"""High-Low console rendering.

Turns cards, rounds and summaries into console text. Every method is a pure
function of its arguments.
"""

from highlow.controller import GameSummary
from highlow.core import Card, CardGame, HighLow, RoundResult


class CLIRenderer:
    """Console text for each point of the game."""

    @staticmethod
    def render_game_start(game: CardGame) -> str:
        if isinstance(game, HighLow):
            return "Started a new game of High Low!"
        return f"Started a new game of {type(game).__name__}!"

    @staticmethod
    def render_draws(card1: Card, card2: Card) -> str:
        """Render one round's draws.

        Args:
            card1: Card drawn by player 1
            card2: Card drawn by player 2

        Returns:
            e.g. "Player 1 drew a 6 of hearts, Player 2 drew a Jack of spades."
        """
        return f"Player 1 drew a {card1.display_name}, Player 2 drew a {card2.display_name}."

    @staticmethod
    def render_round(round_result: RoundResult) -> str:
        return round_result.message

    @staticmethod
    def render_summary(summary: GameSummary) -> str:
        """Render the final score line and outcome.

        Args:
            summary: Summary of the finished game

        Returns:
            Two lines: the scores and the outcome message
        """
        lines = [
            f"Player 1 has a score of {summary.player1_score} "
            f"and Player 2 has a score of {summary.player2_score}.",
            summary.message,
        ]
        return "\n".join(lines)
