"""Section repository port."""

from typing import Protocol

from section_controller.domain.models.records import (
    SectionRecord,
    StationRecord,
    StopRecord,
    TrainRecord,
)


class SectionRepository(Protocol):
    """Port for reading the section definition and each train's stops.

    Implementations raise ``SectionLoadError`` when the section itself cannot be read
    and ``TrainLoadError`` when one train's stops cannot be read.
    """

    def get_section(self) -> SectionRecord:
        """Get the identity of the section."""
        ...

    def get_stations(self) -> list[StationRecord]:
        """Get every station on the section."""
        ...

    def get_trains(self) -> list[TrainRecord]:
        """Get every train that runs over the section."""
        ...

    def get_stops(self, train_number: str) -> list[StopRecord]:
        """Get a train's stops in the order the source lists them."""
        ...
