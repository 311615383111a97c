"""Section repository reading TOML section and train files."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from section_controller.domain.exceptions import SectionLoadError, TrainLoadError
from section_controller.domain.models import (
    SectionRecord,
    StationRecord,
    StopRecord,
    TrainRecord,
)
from section_controller.domain.ports import SectionRepository

logger = logging.getLogger(__name__)


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


class TomlSectionRepository(SectionRepository):
    """Reads a section from TOML files.

    The section file holds a ``[section]`` table, ``[[stations]]`` and ``[[trains]]``.
    Each train's stops live in ``<trains_dir>/<train number>.toml`` as ``[[stops]]``;
    ``trains_dir`` defaults to a ``trains`` directory next to the section file.
    """

    def __init__(self, section_file: Path | str, trains_dir: Path | str | None = None) -> None:
        """Initialize the repository.

        Args:
            section_file: Path to the section TOML file.
            trains_dir: Directory of the per-train stop files.
        """
        self._section_file = Path(section_file)
        self._trains_dir = (
            Path(trains_dir) if trains_dir is not None else self._section_file.parent / "trains"
        )
        self._section_data: dict[str, Any] | None = None

    def get_section(self) -> SectionRecord:
        data = self._load_section_data()
        section = data.get("section", {"code": self._section_file.stem})
        try:
            return SectionRecord.model_validate(section)
        except ValidationError as e:
            raise SectionLoadError(f"Invalid [section] in {self._section_file}: {e}") from e

    def get_stations(self) -> list[StationRecord]:
        return self._validate_list("stations", StationRecord)

    def get_trains(self) -> list[TrainRecord]:
        """Get every valid train. A malformed train entry is logged and left out."""
        items = self._load_section_data().get("trains", [])
        if not isinstance(items, list):
            raise SectionLoadError(f"'trains' in {self._section_file} must be a list")
        trains = []
        for index, item in enumerate(items):
            try:
                trains.append(TrainRecord.model_validate(item))
            except ValidationError as e:
                number = item.get("number") if isinstance(item, dict) else None
                if number is None:
                    number = f"#{index + 1}"
                logger.error(f"Skipping train {number} in {self._section_file}: {e}")
        return trains

    def get_stops(self, train_number: str) -> list[StopRecord]:
        train_file = self._trains_dir / f"{train_number}.toml"
        try:
            data = _read_toml(train_file)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise TrainLoadError(f"Cannot read stops of train {train_number}: {e}") from e

        stops = data.get("stops", [])
        if not isinstance(stops, list):
            raise TrainLoadError(f"'stops' in {train_file} must be a list")
        try:
            return [StopRecord.model_validate(stop) for stop in stops]
        except ValidationError as e:
            raise TrainLoadError(f"Invalid stop in {train_file}: {e}") from e

    def _load_section_data(self) -> dict[str, Any]:
        if self._section_data is None:
            try:
                self._section_data = _read_toml(self._section_file)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise SectionLoadError(
                    f"Cannot read section file {self._section_file}: {e}"
                ) from e
            logger.debug(f"Read section file {self._section_file}")
        return self._section_data

    def _validate_list(self, key: str, model: Any) -> list[Any]:
        items = self._load_section_data().get(key, [])
        if not isinstance(items, list):
            raise SectionLoadError(f"'{key}' in {self._section_file} must be a list")
        try:
            return [model.model_validate(item) for item in items]
        except ValidationError as e:
            raise SectionLoadError(f"Invalid entry in '{key}' of {self._section_file}: {e}") from e
