"""Airport model and CSV loading utilities."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

from flight_planning.config import DOMESTIC_ORIGIN_A, DOMESTIC_ORIGIN_B
from flight_planning.loader import Record, RecordSourceError, read_records, require_field

DISTANCE_COLUMNS = {
    DOMESTIC_ORIGIN_A: f"distance{DOMESTIC_ORIGIN_A}",
    DOMESTIC_ORIGIN_B: f"distance{DOMESTIC_ORIGIN_B}",
}


@dataclass(frozen=True)
class Airport:
    """Overseas airport with its distance in km from each domestic origin."""

    code: str
    name: str
    distances_km: Dict[str, int]

    def distance_from(self, origin: str) -> int:
        # Anything that is not origin A is treated as origin B.
        if origin == DOMESTIC_ORIGIN_A:
            return self.distances_km[DOMESTIC_ORIGIN_A]
        return self.distances_km[DOMESTIC_ORIGIN_B]


def _to_distance(value: str, source: str) -> int:
    try:
        distance = int(float(value))
    except ValueError as exc:
        raise RecordSourceError(f"{source}: invalid distance {value!r}") from exc
    if distance < 0:
        raise RecordSourceError(f"{source}: negative distance {value!r}")
    return distance


def airport_from_record(record: Record, source: str = "airport record") -> Airport:
    code = require_field(record, "code", source=source)
    distances = {
        origin: _to_distance(require_field(record, column, source=source), source)
        for origin, column in DISTANCE_COLUMNS.items()
    }
    return Airport(code=code, name=record.get("full name", code), distances_km=distances)


def airports_from_records(records: Iterable[Record], source: str = "airports") -> List[Airport]:
    return [airport_from_record(record, f"{source} row {row}") for row, record in enumerate(records, start=2)]


def load_airports_from_csv(path: Path) -> List[Airport]:
    """Parse airports.csv into Airport objects in file order."""
    return airports_from_records(read_records(path), source=str(path))
