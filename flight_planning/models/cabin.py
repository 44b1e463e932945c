"""Cabin definitions and their CSV column names."""
from __future__ import annotations

from enum import Enum


class Cabin(Enum):
    """Seat classes in the order capacity checks are applied."""

    ECONOMY = (
        "economy",
        "economyseats",
        "Number of economy seats booked",
        "Price of a economy class seat",
    )
    BUSINESS = (
        "business",
        "businessseats",
        "Number of business seats booked",
        "Price of a business class seat",
    )
    FIRST = (
        "first-class",
        "firstclassseats",
        "Number of first class seats booked",
        "Price of a first class seat",
    )

    _label: str
    _capacity_column: str
    _booked_column: str
    _price_column: str

    def __init__(self, label: str, capacity_column: str, booked_column: str, price_column: str) -> None:
        self._label = label
        self._capacity_column = capacity_column
        self._booked_column = booked_column
        self._price_column = price_column

    @property
    def label(self) -> str:
        """Return the wording used for this cabin in report lines."""
        return self._label

    @property
    def capacity_column(self) -> str:
        """Return the aircraft CSV column holding this cabin's seat count."""
        return self._capacity_column

    @property
    def booked_column(self) -> str:
        return self._booked_column

    @property
    def price_column(self) -> str:
        return self._price_column
