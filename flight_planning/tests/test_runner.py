"""End-to-end pipeline runs over the bundled sample data."""
from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from flight_planning.engine.outcomes import FlightResult, RejectedFlight, RejectionKind
from flight_planning.loader import RecordSourceError
from flight_planning.runner import PlanningRunner, main, prompt_booking, run_interactive

from .fixtures import SAMPLE_DATA_DIR

EXPECTED_ACCEPTED = [
    "Flight from MAN to JFK with Large narrow body:\nIncome: £75636.00, Cost: £61716.48, Profit: £13919.52",
    "Flight from LGW to ORY with Medium narrow body:\nIncome: £21600.00, Cost: £3328.00, Profit: £18272.00",
    "Flight from MAN to MAD with Medium wide body:\nIncome: £58400.00, Cost: £11767.00, Profit: £46633.00",
    "Flight from LGW to AMS with Medium narrow body:\nIncome: £14400.00, Cost: £3078.24, Profit: £11321.76",
    "Flight from MAN to CAI with Large narrow body:\nIncome: £97800.00, Cost: £47385.80, Profit: £50414.20",
    "Flight from MAN to ORY with Medium narrow body:\nIncome: £17240.00, Cost: £5709.60, Profit: £11530.40",
    "Flight from LGW to MAD with Large narrow body:\nIncome: £66150.00, Cost: £15662.08, Profit: £50487.92",
    "Flight from MAN to AMS with Medium narrow body:\nIncome: £11650.00, Cost: £3686.00, Profit: £7964.00",
    "Flight from LGW to CAI with Medium wide body:\nIncome: £114400.00, Cost: £34241.20, Profit: £80158.80",
]

EXPECTED_REJECTED = [
    "Error in flight from MAN to JFK with Medium narrow body: "
    "Aircraft Medium narrow body doesn't have the range to fly to JFK",
    "Error in flight from LGW to ORY with Large narrow body: Too many economy seats booked (200 > 180)",
    "Error in flight from MAN to MAD with Medium narrow body: Too many first-class seats booked (2 > 0)",
    "Error in flight from LGW to AMS with Medium narrow body: Too many economy seats booked (180 > 160)",
    "Error in flight from MAN to CAI with Large narrow body: Too many business seats booked (25 > 20)",
    "Error in flight from LGW to JFKKK with Medium wide body: Invalid airport code: JFKKK",
    "Error in flight from MAN to ORY with Medium narrow body: Too many economy seats booked (165 > 160)",
    "Error in flight from LGW to MAD with Large narrow body: Too many business seats booked (22 > 20)",
    "Error in flight from MAN to AMSSS with Medium narrow body: Invalid airport code: AMSSS",
    "Error in flight from LGW to CAI with Medium wide body: Too many economy seats booked (385 > 380)",
]


class PlanningRunnerTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.output_dir = Path(self._tmp.name)
        self.runner = PlanningRunner(data_dir=SAMPLE_DATA_DIR, output_dir=self.output_dir, verbose=False)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_run_writes_both_reports(self) -> None:
        report = self.runner.run()
        self.assertEqual(report.accepted_lines, EXPECTED_ACCEPTED)
        self.assertEqual(report.rejected_lines, EXPECTED_REJECTED)
        accepted = (self.output_dir / "valid_flight_results.txt").read_text(encoding="utf-8")
        rejected = (self.output_dir / "invalid_flight_results.txt").read_text(encoding="utf-8")
        self.assertEqual(accepted, "\n".join(EXPECTED_ACCEPTED))
        self.assertEqual(rejected, "\n".join(EXPECTED_REJECTED))

    def test_every_booking_lands_in_exactly_one_report(self) -> None:
        bookings = self.runner.load_bookings()
        report = self.runner.evaluate_all(bookings)
        self.assertEqual(len(report), len(bookings))
        self.assertEqual(len(report.accepted) + len(report.rejected), 19)

    def test_profit_matches_income_minus_cost(self) -> None:
        for result in self.runner.run().accepted:
            money = result.financials
            self.assertEqual(money.profit, money.income - money.cost)

    def test_missing_booking_file_is_skipped(self) -> None:
        runner = PlanningRunner(
            data_dir=SAMPLE_DATA_DIR,
            output_dir=self.output_dir,
            booking_files=["valid_flight_data.csv", "no_such_file.csv"],
            verbose=False,
        )
        report = runner.run()
        self.assertEqual(len(report.accepted), 9)
        self.assertEqual(report.rejected, [])
        self.assertEqual((self.output_dir / "invalid_flight_results.txt").read_text(encoding="utf-8"), "")

    def test_missing_reference_data_raises(self) -> None:
        with self.assertRaises(RecordSourceError):
            PlanningRunner(data_dir=self.output_dir, output_dir=self.output_dir, verbose=False)

    def test_verbose_logging(self) -> None:
        self.runner.verbose = True
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            self.runner.run()
        self.assertIn("9 accepted", buffer.getvalue())
        self.assertIn("10 rejected", buffer.getvalue())


class InteractiveTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.runner = PlanningRunner(data_dir=SAMPLE_DATA_DIR, output_dir=Path(self._tmp.name), verbose=False)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    @staticmethod
    def _answers(*values: str):
        replies = iter(values)
        return lambda prompt: next(replies)

    def test_prompt_booking_asks_every_column(self) -> None:
        prompts = []

        def ask(prompt: str) -> str:
            prompts.append(prompt)
            return " 1 "

        record = prompt_booking(ask)
        self.assertEqual(len(prompts), 9)
        self.assertEqual(prompts[0], "UK airport: ")
        self.assertTrue(all(value == "1" for value in record.values()))

    def test_accepted_booking(self) -> None:
        ask = self._answers("MAN", "JFK", "Large narrow body", "150", "12", "2", "399", "999", "1899")
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            outcome = run_interactive(self.runner, ask)
        self.assertIsInstance(outcome, FlightResult)
        self.assertIn("Profit: £13919.52", buffer.getvalue())

    def test_rejected_booking(self) -> None:
        ask = self._answers("LGW", "AMS", "Medium narrow body", "161", "0", "0", "10", "0", "0")
        with redirect_stdout(io.StringIO()):
            outcome = run_interactive(self.runner, ask)
        self.assertIsInstance(outcome, RejectedFlight)
        self.assertEqual(outcome.kind, RejectionKind.ECONOMY_OVERBOOKED)


class MainTest(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("flight_planning.runner.colorama_init")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_batch_mode(self) -> None:
        with mock.patch("flight_planning.runner.PlanningRunner") as runner_cls:
            self.assertEqual(main(interactive=False), 0)
        runner_cls.return_value.run.assert_called_once_with()

    def test_interactive_mode(self) -> None:
        with mock.patch("flight_planning.runner.PlanningRunner") as runner_cls, mock.patch(
            "flight_planning.runner.run_interactive"
        ) as interactive:
            self.assertEqual(main(interactive=True), 0)
        interactive.assert_called_once_with(runner_cls.return_value)
        runner_cls.return_value.run.assert_not_called()

    def test_unreadable_reference_data(self) -> None:
        with mock.patch(
            "flight_planning.runner.PlanningRunner", side_effect=RecordSourceError("File not found: airports.csv")
        ), redirect_stdout(io.StringIO()), mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            self.assertEqual(main(interactive=False), 1)
        self.assertIn("airports.csv", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
