"""Aircraft type model and CSV loading utility."""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, List

from flight_planning.loader import Record, RecordSourceError, read_records, require_field

from .cabin import Cabin

RANGE_COLUMNS = ("maxflightrange(km)", "maxflightrange")
RUNNING_COST_COLUMN = "runningcostperseatper100km"

CURRENCY_PREFIXES = ("Â£", "£")
_AMOUNT = re.compile(r"-?\d+(?:\.\d+)?")


@dataclass(frozen=True)
class AircraftType:
    type_name: str
    running_cost_per_seat_per_100km: Decimal
    max_range_km: int
    seat_capacity: Dict[Cabin, int]

    @property
    def total_capacity(self) -> int:
        return sum(self.seat_capacity.get(cabin, 0) for cabin in Cabin)


def parse_currency(text: str) -> Decimal:
    """Turn a string such as ``"£1,200.50"`` into ``Decimal("1200.50")``."""
    cleaned = (text or "").strip()
    for prefix in CURRENCY_PREFIXES:
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix):].strip()
            break
    cleaned = cleaned.replace(",", "")
    if not _AMOUNT.fullmatch(cleaned):
        raise ValueError(f"Not a currency amount: {text!r}")
    amount = Decimal(cleaned)
    if amount < 0:
        raise ValueError(f"Negative currency amount: {text!r}")
    return amount


def aircraft_from_record(record: Record, source: str = "aircraft record") -> AircraftType:
    type_name = require_field(record, "type", source=source)

    def _to_int(column: str, *aliases: str) -> int:
        value = require_field(record, column, *aliases, source=source)
        try:
            number = int(float(value))
        except ValueError as exc:
            raise RecordSourceError(f"{source}: invalid {column} {value!r}") from exc
        if number < 0:
            raise RecordSourceError(f"{source}: negative {column} {value!r}")
        return number

    try:
        running_cost = parse_currency(require_field(record, RUNNING_COST_COLUMN, source=source))
    except ValueError as exc:
        raise RecordSourceError(f"{source}: {exc}") from exc

    return AircraftType(
        type_name=type_name,
        running_cost_per_seat_per_100km=running_cost,
        max_range_km=_to_int(*RANGE_COLUMNS),
        seat_capacity={cabin: _to_int(cabin.capacity_column) for cabin in Cabin},
    )


def aircraft_types_from_records(records: Iterable[Record], source: str = "aircraft") -> List[AircraftType]:
    return [aircraft_from_record(record, f"{source} row {row}") for row, record in enumerate(records, start=2)]


def load_aircraft_types_from_csv(path: Path) -> List[AircraftType]:
    """Read aeroplanes.csv into AircraftType objects in file order."""
    return aircraft_types_from_records(read_records(path), source=str(path))
