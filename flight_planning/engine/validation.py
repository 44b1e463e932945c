"""Ordered flyability checks for a single booking.

Checks run in a fixed order and stop at the first failure, so a booking that
breaks several rules always reports the same single reason:

1. destination airport is known
2. aircraft type is known
3. route distance is within the aircraft's range
4. economy, then business, then first-class bookings fit their cabins
5. total bookings fit the aircraft's total capacity
"""
from __future__ import annotations

from typing import Dict

from flight_planning.index import ReferenceIndex
from flight_planning.models.booking import FlightBooking
from flight_planning.models.cabin import Cabin

from .outcomes import Flyable, Rejected, RejectionKind, ValidationOutcome

OVERBOOKED_KIND_BY_CABIN: Dict[Cabin, RejectionKind] = {
    Cabin.ECONOMY: RejectionKind.ECONOMY_OVERBOOKED,
    Cabin.BUSINESS: RejectionKind.BUSINESS_OVERBOOKED,
    Cabin.FIRST: RejectionKind.FIRST_CLASS_OVERBOOKED,
}


def validate_booking(booking: FlightBooking, index: ReferenceIndex) -> ValidationOutcome:
    """Return Flyable for a booking that passes every check, else the first Rejected."""
    airport = index.lookup_airport(booking.destination)
    if airport is None:
        return Rejected(RejectionKind.UNKNOWN_AIRPORT, {"code": booking.destination})

    aircraft = index.lookup_aircraft(booking.aircraft_type)
    if aircraft is None:
        return Rejected(RejectionKind.UNKNOWN_AIRCRAFT_TYPE, {"aircraft_type": booking.aircraft_type})

    distance = airport.distance_from(booking.origin)
    if distance > aircraft.max_range_km:
        return Rejected(
            RejectionKind.RANGE_EXCEEDED,
            {
                "aircraft_type": booking.aircraft_type,
                "distance": distance,
                "destination": booking.destination,
                "max_range": aircraft.max_range_km,
            },
        )

    # Cabin iteration order is economy, business, first.
    for cabin in Cabin:
        booked = booking.seats_booked.get(cabin, 0)
        capacity = aircraft.seat_capacity.get(cabin, 0)
        if booked > capacity:
            return Rejected(OVERBOOKED_KIND_BY_CABIN[cabin], {"booked": booked, "capacity": capacity})

    total_capacity = aircraft.total_capacity
    total_booked = booking.total_seats_booked
    if total_booked > total_capacity:
        return Rejected(RejectionKind.TOTAL_OVERBOOKED, {"booked": total_booked, "capacity": total_capacity})

    return Flyable(distance_km=distance, total_capacity=total_capacity, aircraft=aircraft)
