"""Data transfer objects.

Configuration coming in from the command line and the summary handed back
to it. Pydantic dataclasses validate both.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from highlow.core import GameResult

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@pydantic_dataclass
class GameConfiguration:
    """Game configuration.

    Attributes:
        seed: Seed for the draw generator; unseeded when None
        log_level: Library log level
        show_draws: Whether the console tracker prints each draw
    """
    seed: Optional[int] = Field(None, ge=0, description="Random seed")
    log_level: str = Field("WARNING", description="Log level")
    show_draws: bool = Field(True, description="Print each round's draws")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


@pydantic_dataclass
class GameSummary:
    """Outcome of a finished game, for display."""
    player1_score: int = Field(..., ge=0, description="Player 1 score")
    player2_score: int = Field(..., ge=0, description="Player 2 score")
    rounds_played: int = Field(..., ge=0, description="Rounds played")
    ties: int = Field(..., ge=0, description="Tied rounds")
    winner: str = Field(..., description="'Player 1', 'Player 2' or 'Tie'")
    message: str = Field(..., description="Final outcome message")
    seed: Optional[int] = Field(None, description="Seed the game was played with")

    @classmethod
    def from_result(cls, result: GameResult, seed: Optional[int] = None) -> 'GameSummary':
        return cls(
            player1_score=result.player1_score,
            player2_score=result.player2_score,
            rounds_played=len(result.rounds),
            ties=result.ties,
            winner=result.outcome.label,
            message=result.message,
            seed=seed,
        )
