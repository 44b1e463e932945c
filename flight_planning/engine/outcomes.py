"""Outcome types produced by validation and the financial calculation.

Rejections are ordinary values. Nothing in the engine raises for a booking
that breaks a business rule; callers branch on ``isinstance(outcome, Rejected)``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, Union

from flight_planning.models.aircraft import AircraftType
from flight_planning.models.booking import FlightBooking


class RejectionKind(Enum):
    """Closed set of reasons a booking cannot be flown."""

    UNKNOWN_AIRPORT = "UNKNOWN_AIRPORT"
    UNKNOWN_AIRCRAFT_TYPE = "UNKNOWN_AIRCRAFT_TYPE"
    RANGE_EXCEEDED = "RANGE_EXCEEDED"
    ECONOMY_OVERBOOKED = "ECONOMY_OVERBOOKED"
    BUSINESS_OVERBOOKED = "BUSINESS_OVERBOOKED"
    FIRST_CLASS_OVERBOOKED = "FIRST_CLASS_OVERBOOKED"
    TOTAL_OVERBOOKED = "TOTAL_OVERBOOKED"


@dataclass(frozen=True)
class Rejected:
    """First violated rule plus the numbers that violated it."""

    kind: RejectionKind
    details: Dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class Flyable:
    distance_km: int
    total_capacity: int
    aircraft: AircraftType


ValidationOutcome = Union[Flyable, Rejected]


@dataclass(frozen=True)
class FinancialResult:
    income: Decimal
    cost: Decimal
    profit: Decimal


@dataclass(frozen=True)
class FlightResult:
    """Accepted booking with its financials."""

    booking: FlightBooking
    financials: FinancialResult


@dataclass(frozen=True)
class RejectedFlight:
    booking: FlightBooking
    rejection: Rejected

    @property
    def kind(self) -> RejectionKind:
        return self.rejection.kind


BookingOutcome = Union[FlightResult, RejectedFlight]
