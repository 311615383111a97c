"""Section data adapters."""

from section_controller.adapters.data.toml_section_repository import TomlSectionRepository

__all__ = ["TomlSectionRepository"]
