"""Small console exercises: bit operations, shapes, word sorting, days per month, include listings and tic-tac-toe."""

__version__ = "1.0.0"