"""Ports (interfaces) for the ports-and-adapters architecture."""

from section_controller.domain.ports.section_repository import SectionRepository

__all__ = ["SectionRepository"]
