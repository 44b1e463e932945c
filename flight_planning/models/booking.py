"""Flight booking model and the normalizer that builds it from raw records."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional

from flight_planning.loader import Record, read_records

from .cabin import Cabin

ORIGIN_COLUMN = "UK airport"
DESTINATION_COLUMN = "Overseas airport"
AIRCRAFT_COLUMN = "Type of aircraft"

BOOKING_COLUMNS: List[str] = [ORIGIN_COLUMN, DESTINATION_COLUMN, AIRCRAFT_COLUMN]
BOOKING_COLUMNS += [cabin.booked_column for cabin in Cabin]
BOOKING_COLUMNS += [cabin.price_column for cabin in Cabin]

ZERO = Decimal("0")


@dataclass(frozen=True)
class FlightBooking:
    """One requested flight with seats booked and seat prices per cabin."""

    origin: str
    destination: str
    aircraft_type: str
    seats_booked: Dict[Cabin, int] = field(default_factory=dict)
    seat_prices: Dict[Cabin, Decimal] = field(default_factory=dict)

    @property
    def total_seats_booked(self) -> int:
        return sum(self.seats_booked.get(cabin, 0) for cabin in Cabin)


def _to_decimal(value: Optional[str]) -> Decimal:
    """Coerce a price; blanks, garbage, non-finite and negative values become zero."""
    if value in (None, "", "null"):
        return ZERO
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return ZERO
    if not number.is_finite() or number < 0:
        return ZERO
    return number


def _to_seats(value: Optional[str]) -> int:
    # Fractional seat counts are truncated toward zero.
    return int(_to_decimal(value))


def normalize_booking(record: Record) -> FlightBooking:
    """Build a FlightBooking from a raw record; never rejects the record."""
    return FlightBooking(
        origin=(record.get(ORIGIN_COLUMN) or "").strip(),
        destination=(record.get(DESTINATION_COLUMN) or "").strip(),
        aircraft_type=(record.get(AIRCRAFT_COLUMN) or "").strip(),
        seats_booked={cabin: _to_seats(record.get(cabin.booked_column)) for cabin in Cabin},
        seat_prices={cabin: _to_decimal(record.get(cabin.price_column)) for cabin in Cabin},
    )


def load_bookings_from_csv(path: Path) -> List[FlightBooking]:
    return [normalize_booking(record) for record in read_records(path)]
