"""Shared fixtures for the section controller tests."""

import pytest

from section_controller.domain.models import Station
from tests.fakes import InMemorySectionRepository


@pytest.fixture
def cal() -> Station:
    return Station("CAL", "Calicut", 3, 0)


@pytest.fixture
def tir() -> Station:
    return Station("TIR", "Tirur", 2, 41)


@pytest.fixture
def srr() -> Station:
    return Station("SRR", "Shoranur", 3, 86)


@pytest.fixture
def stations(cal: Station, tir: Station, srr: Station) -> list[Station]:
    """Stations of the Calicut - Shoranur section, deliberately out of order."""
    return [tir, srr, cal]


@pytest.fixture
def repository() -> InMemorySectionRepository:
    return InMemorySectionRepository()
