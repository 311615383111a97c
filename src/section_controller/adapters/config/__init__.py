"""Configuration adapters."""

from section_controller.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
