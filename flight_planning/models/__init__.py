"""Typed records for airports, aircraft types and flight bookings."""

from .aircraft import AircraftType, load_aircraft_types_from_csv, parse_currency
from .airport import Airport, load_airports_from_csv
from .booking import FlightBooking, load_bookings_from_csv, normalize_booking
from .cabin import Cabin

__all__ = [
    "AircraftType",
    "Airport",
    "Cabin",
    "FlightBooking",
    "load_aircraft_types_from_csv",
    "load_airports_from_csv",
    "load_bookings_from_csv",
    "normalize_booking",
    "parse_currency",
]
