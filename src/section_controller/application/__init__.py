"""Application layer - building trains and running a game session."""

from section_controller.application.game import Game, GameSettings

__all__ = ["Game", "GameSettings"]
