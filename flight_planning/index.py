"""Read-only lookup tables over the airport and aircraft reference data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional

from flight_planning.config import AIRCRAFT_FILE, AIRPORTS_FILE, DATA_DIR
from flight_planning.loader import Record
from flight_planning.models.aircraft import AircraftType, aircraft_types_from_records, load_aircraft_types_from_csv
from flight_planning.models.airport import Airport, airports_from_records, load_airports_from_csv


class ReferenceIndex:
    """Airports keyed by code and aircraft types keyed by type name.

    Keys are matched exactly (case-sensitive). When a key appears more than
    once in the source data the first occurrence is kept.
    """

    def __init__(self, airports: Iterable[Airport], aircraft_types: Iterable[AircraftType]) -> None:
        self._airports: Dict[str, Airport] = {}
        for airport in airports:
            self._airports.setdefault(airport.code, airport)
        self._aircraft: Dict[str, AircraftType] = {}
        for aircraft in aircraft_types:
            self._aircraft.setdefault(aircraft.type_name, aircraft)

    @classmethod
    def from_records(cls, airport_records: Iterable[Record], aircraft_records: Iterable[Record]) -> "ReferenceIndex":
        return cls(airports_from_records(airport_records), aircraft_types_from_records(aircraft_records))

    @classmethod
    def from_directory(
        cls,
        data_dir: Path = DATA_DIR,
        airports_file: str = AIRPORTS_FILE,
        aircraft_file: str = AIRCRAFT_FILE,
    ) -> "ReferenceIndex":
        """Load both reference CSVs from ``data_dir``."""
        data_dir = Path(data_dir)
        return cls(
            load_airports_from_csv(data_dir / airports_file),
            load_aircraft_types_from_csv(data_dir / aircraft_file),
        )

    def lookup_airport(self, code: str) -> Optional[Airport]:
        return self._airports.get(code)

    def lookup_aircraft(self, type_name: str) -> Optional[AircraftType]:
        return self._aircraft.get(type_name)

