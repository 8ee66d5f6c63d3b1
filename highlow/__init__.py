"""
High-Low card game.

A 52-card deck, a two-player high card game and a console front end.
"""

__version__ = "0.1.0"
__author__ = "High-Low Development Team"
