"""Pipeline runner: reference data in, accepted and rejected reports out."""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from colorama import Fore, Style, init as colorama_init

from flight_planning.config import (
    ACCEPTED_REPORT_FILE,
    BOOKING_FILES,
    DATA_DIR,
    INTERACTIVE,
    OUTPUT_DIR,
    REJECTED_REPORT_FILE,
    VERBOSE,
)
from flight_planning.engine.financials import calculate_financials
from flight_planning.engine.outcomes import BookingOutcome, FlightResult, Rejected, RejectedFlight
from flight_planning.engine.validation import validate_booking
from flight_planning.index import ReferenceIndex
from flight_planning.loader import Record, RecordSourceError
from flight_planning.models.booking import BOOKING_COLUMNS, FlightBooking, load_bookings_from_csv, normalize_booking
from flight_planning.reports import ensure_report_files, format_accepted, format_outcome, format_rejected, write_report

RED = Fore.RED
GREEN = Fore.GREEN
YELLOW = Fore.YELLOW
RESET = Style.RESET_ALL


@dataclass
class PlanningReport:
    accepted: List[FlightResult] = field(default_factory=list)
    rejected: List[RejectedFlight] = field(default_factory=list)

    def add(self, outcome: BookingOutcome) -> None:
        if isinstance(outcome, FlightResult):
            self.accepted.append(outcome)
        else:
            self.rejected.append(outcome)

    @property
    def accepted_lines(self) -> List[str]:
        return [format_accepted(result) for result in self.accepted]

    @property
    def rejected_lines(self) -> List[str]:
        return [format_rejected(rejected) for rejected in self.rejected]

    def __len__(self) -> int:
        return len(self.accepted) + len(self.rejected)


def evaluate_booking(booking: FlightBooking, index: ReferenceIndex) -> BookingOutcome:
    """Validate one booking and, when flyable, attach its financials."""
    outcome = validate_booking(booking, index)
    if isinstance(outcome, Rejected):
        return RejectedFlight(booking=booking, rejection=outcome)
    return FlightResult(booking=booking, financials=calculate_financials(booking, outcome))


class PlanningRunner:
    """Builds the reference index once and runs every booking file through it."""

    def __init__(
        self,
        data_dir: Path = DATA_DIR,
        output_dir: Path = OUTPUT_DIR,
        booking_files: Sequence[str] = BOOKING_FILES,
        index: Optional[ReferenceIndex] = None,
        verbose: bool = VERBOSE,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.output_dir = Path(output_dir)
        self.booking_files = list(booking_files)
        self.verbose = verbose
        self.index = index or ReferenceIndex.from_directory(self.data_dir)

    @property
    def accepted_report_path(self) -> Path:
        return self.output_dir / ACCEPTED_REPORT_FILE

    @property
    def rejected_report_path(self) -> Path:
        return self.output_dir / REJECTED_REPORT_FILE

    def _log(self, message: str, color: str = RESET) -> None:
        if not self.verbose:
            return
        print(f"{color}{message}{RESET}")

    def evaluate(self, booking: FlightBooking) -> BookingOutcome:
        return evaluate_booking(booking, self.index)

    def evaluate_all(self, bookings: Iterable[FlightBooking]) -> PlanningReport:
        report = PlanningReport()
        for booking in bookings:
            report.add(self.evaluate(booking))
        return report

    def load_bookings(self) -> List[FlightBooking]:
        """Read every configured booking file that exists, in order."""
        bookings: List[FlightBooking] = []
        for name in self.booking_files:
            path = self.data_dir / name
            if not path.exists():
                self._log(f"Skipping missing booking file {path}", YELLOW)
                continue
            loaded = load_bookings_from_csv(path)
            self._log(f"Loaded {len(loaded)} bookings from {path}")
            bookings.extend(loaded)
        return bookings

    def run(self) -> PlanningReport:
        """Evaluate all bookings and write both reports."""
        ensure_report_files([self.accepted_report_path, self.rejected_report_path])
        report = self.evaluate_all(self.load_bookings())
        write_report(report.accepted_lines, self.accepted_report_path)
        write_report(report.rejected_lines, self.rejected_report_path)
        self._log(
            f"{len(report.accepted)} accepted -> {self.accepted_report_path}, "
            f"{len(report.rejected)} rejected -> {self.rejected_report_path}",
            GREEN,
        )
        return report


def prompt_booking(ask: Callable[[str], str] = input) -> Record:
    """Collect one raw booking record, one prompt per booking column."""
    return {column: ask(f"{column}: ").strip() for column in BOOKING_COLUMNS}


def run_interactive(runner: PlanningRunner, ask: Callable[[str], str] = input) -> BookingOutcome:
    outcome = runner.evaluate(normalize_booking(prompt_booking(ask)))
    color = GREEN if isinstance(outcome, FlightResult) else RED
    print(f"{color}{format_outcome(outcome)}{RESET}")
    return outcome


def main(interactive: bool = INTERACTIVE) -> int:
    colorama_init()
    try:
        runner = PlanningRunner()
        if interactive:
            run_interactive(runner)
        else:
            runner.run()
    except RecordSourceError as exc:
        print(f"{RED}Error reading input data: {exc}{RESET}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
