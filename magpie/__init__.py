"""Core data structures for a crossword board game engine."""

__version__ = "0.1.0"

__all__ = [
    "letter_distribution",
    "log",
    "move",
    "player",
    "rack",
    "stats",
    "string_builder",
]