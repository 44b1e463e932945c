"""Validation and financial calculation for flight bookings."""

from .financials import calculate_financials
from .outcomes import (
    BookingOutcome,
    FinancialResult,
    FlightResult,
    Flyable,
    Rejected,
    RejectedFlight,
    RejectionKind,
    ValidationOutcome,
)
from .validation import validate_booking

__all__ = [
    "BookingOutcome",
    "FinancialResult",
    "FlightResult",
    "Flyable",
    "Rejected",
    "RejectedFlight",
    "RejectionKind",
    "ValidationOutcome",
    "calculate_financials",
    "validate_booking",
]
