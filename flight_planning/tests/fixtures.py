"""Builders shared by the test modules."""
from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Dict, Optional

from flight_planning.index import ReferenceIndex
from flight_planning.models.aircraft import AircraftType
from flight_planning.models.airport import Airport
from flight_planning.models.booking import FlightBooking
from flight_planning.models.cabin import Cabin

SAMPLE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def cabins(economy: int, business: int, first: int) -> Dict[Cabin, int]:
    return {Cabin.ECONOMY: economy, Cabin.BUSINESS: business, Cabin.FIRST: first}


def prices(economy: str, business: str, first: str) -> Dict[Cabin, Decimal]:
    return {Cabin.ECONOMY: Decimal(economy), Cabin.BUSINESS: Decimal(business), Cabin.FIRST: Decimal(first)}


def make_airport(code: str = "MAD", man: int = 1435, lgw: int = 1216) -> Airport:
    return Airport(code=code, name=f"Airport {code}", distances_km={"MAN": man, "LGW": lgw})


def make_aircraft(
    type_name: str = "Large narrow body",
    running_cost: str = "7",
    max_range: int = 5600,
    capacity: Optional[Dict[Cabin, int]] = None,
) -> AircraftType:
    return AircraftType(
        type_name=type_name,
        running_cost_per_seat_per_100km=Decimal(running_cost),
        max_range_km=max_range,
        seat_capacity=capacity if capacity is not None else cabins(180, 20, 4),
    )


def make_booking(
    origin: str = "MAN",
    destination: str = "MAD",
    aircraft_type: str = "Large narrow body",
    seats: Optional[Dict[Cabin, int]] = None,
    seat_prices: Optional[Dict[Cabin, Decimal]] = None,
) -> FlightBooking:
    return FlightBooking(
        origin=origin,
        destination=destination,
        aircraft_type=aircraft_type,
        seats_booked=seats if seats is not None else cabins(150, 12, 2),
        seat_prices=seat_prices if seat_prices is not None else prices("399", "999", "1899"),
    )


def make_index(*aircraft: AircraftType) -> ReferenceIndex:
    return ReferenceIndex(
        airports=[make_airport("MAD", 1435, 1216), make_airport("JFK", 5376, 5583)],
        aircraft_types=aircraft or [make_aircraft()],
    )
