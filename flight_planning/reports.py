"""Render booking outcomes as report lines and write the report files."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Callable, Dict, Iterable, List

from flight_planning.config import CURRENCY_SYMBOL
from flight_planning.engine.outcomes import BookingOutcome, FlightResult, Rejected, RejectedFlight, RejectionKind
from flight_planning.engine.validation import OVERBOOKED_KIND_BY_CABIN
from flight_planning.models.booking import FlightBooking

PENNY = Decimal("0.01")


def _overbooked(label: str, details: Dict[str, object]) -> str:
    return f"Too many {label} seats booked ({details['booked']} > {details['capacity']})"


_REASON_TEMPLATES: Dict[RejectionKind, Callable[[Dict[str, object]], str]] = {
    RejectionKind.UNKNOWN_AIRPORT: lambda d: f"Invalid airport code: {d['code']}",
    RejectionKind.UNKNOWN_AIRCRAFT_TYPE: lambda d: f"Invalid aircraft type: {d['aircraft_type']}",
    RejectionKind.RANGE_EXCEEDED: lambda d: (
        f"Aircraft {d['aircraft_type']} doesn't have the range to fly to {d['destination']}"
    ),
    RejectionKind.TOTAL_OVERBOOKED: lambda d: _overbooked("total", d),
}
for _cabin, _kind in OVERBOOKED_KIND_BY_CABIN.items():
    _REASON_TEMPLATES[_kind] = lambda d, label=_cabin.label: _overbooked(label, d)


def format_money(amount: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """Round half-up to two decimal places and prefix the currency symbol."""
    return f"{symbol}{amount.quantize(PENNY, rounding=ROUND_HALF_UP)}"


def describe_rejection(rejection: Rejected) -> str:
    return _REASON_TEMPLATES[rejection.kind](rejection.details)


def _route(booking: FlightBooking) -> str:
    return f"from {booking.origin} to {booking.destination} with {booking.aircraft_type}"


def format_accepted(result: FlightResult, symbol: str = CURRENCY_SYMBOL) -> str:
    money = result.financials
    return (
        f"Flight {_route(result.booking)}:\n"
        f"Income: {format_money(money.income, symbol)}, "
        f"Cost: {format_money(money.cost, symbol)}, "
        f"Profit: {format_money(money.profit, symbol)}"
    )


def format_rejected(rejected: RejectedFlight) -> str:
    return f"Error in flight {_route(rejected.booking)}: {describe_rejection(rejected.rejection)}"


def format_outcome(outcome: BookingOutcome, symbol: str = CURRENCY_SYMBOL) -> str:
    if isinstance(outcome, FlightResult):
        return format_accepted(outcome, symbol)
    return format_rejected(outcome)


def write_report(lines: Iterable[str], path: Path) -> None:
    """Write ``lines`` joined by newlines, replacing any previous content."""
    Path(path).write_text("\n".join(lines), encoding="utf-8")


def ensure_report_files(paths: Iterable[Path]) -> List[Path]:
    """Create any missing report files empty; return the ones that were created."""
    created: List[Path] = []
    for path in map(Path, paths):
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")
            created.append(path)
    return created
