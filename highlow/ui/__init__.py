"""User interface layers for the High-Low card game."""
