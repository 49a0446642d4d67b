"""Tic-tac-toe split into model, control and view."""

__all__ = ["model", "control", "view"]