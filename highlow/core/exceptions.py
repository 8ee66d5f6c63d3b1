"""
High-Low game exceptions.

Invalid inputs raise ValueError subclasses so callers validating user input
can catch either the game hierarchy or the builtin type.
"""


class CardGameError(Exception):
    """Base class for all card game errors"""
    pass


class InvalidRank(CardGameError, ValueError):
    """Rank ordinal or token outside the thirteen ranks"""
    pass


class InvalidSuit(CardGameError, ValueError):
    """Unrecognized suit token"""
    pass


class EmptyDeckError(CardGameError, IndexError):
    """Draw attempted on an exhausted deck"""
    pass


class GameStateError(CardGameError):
    """Operation not allowed in the current game phase, or a broken game invariant"""
    pass
