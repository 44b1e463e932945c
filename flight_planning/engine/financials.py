"""Income, cost and profit for a flyable booking."""
from __future__ import annotations

from decimal import Decimal

from flight_planning.models.booking import FlightBooking
from flight_planning.models.cabin import Cabin

from .outcomes import FinancialResult, Flyable

HUNDRED_KM = Decimal(100)


def calculate_income(booking: FlightBooking) -> Decimal:
    return sum(
        (Decimal(booking.seats_booked.get(cabin, 0)) * booking.seat_prices.get(cabin, Decimal(0)) for cabin in Cabin),
        Decimal(0),
    )


def calculate_cost(booking: FlightBooking, flyable: Flyable) -> Decimal:
    """Running cost per seat scaled by distance in units of 100 km, times seats booked."""
    cost_per_seat = flyable.aircraft.running_cost_per_seat_per_100km * (Decimal(flyable.distance_km) / HUNDRED_KM)
    return cost_per_seat * booking.total_seats_booked


def calculate_financials(booking: FlightBooking, flyable: Flyable) -> FinancialResult:
    # No rounding here; reports round to pence when rendering.
    income = calculate_income(booking)
    cost = calculate_cost(booking, flyable)
    return FinancialResult(income=income, cost=cost, profit=income - cost)
