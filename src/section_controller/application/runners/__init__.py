"""Recurring simulation jobs."""

from section_controller.application.runners.train_runner import TrainRunner

__all__ = ["TrainRunner"]
