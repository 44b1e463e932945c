"""Configuration values for the flight planning pipeline."""
import os
from pathlib import Path

# Data locations
DATA_DIR = Path(os.getenv("FLIGHT_PLANNING_DATA_DIR", Path(__file__).resolve().parent / "data"))
OUTPUT_DIR = Path(os.getenv("FLIGHT_PLANNING_OUTPUT_DIR", "."))

AIRPORTS_FILE = "airports.csv"
AIRCRAFT_FILE = "aeroplanes.csv"
BOOKING_FILES = ("valid_flight_data.csv", "invalid_flight_data.csv")

ACCEPTED_REPORT_FILE = "valid_flight_results.txt"
REJECTED_REPORT_FILE = "invalid_flight_results.txt"

# CSV parsing
CSV_DELIMITER = os.getenv("FLIGHT_PLANNING_CSV_DELIMITER", ",")

# Domestic origins; any origin other than A is priced with B's distance
DOMESTIC_ORIGIN_A = "MAN"
DOMESTIC_ORIGIN_B = "LGW"

CURRENCY_SYMBOL = os.getenv("FLIGHT_PLANNING_CURRENCY_SYMBOL", "£")

# Runtime switches
INTERACTIVE = os.getenv("FLIGHT_PLANNING_INTERACTIVE", "").lower() in {"1", "true", "yes"}
VERBOSE = os.getenv("FLIGHT_PLANNING_VERBOSE", "1").lower() not in {"0", "false", "no"}
