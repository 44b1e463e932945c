"""Read delimited text files into lists of field-named records.

Every value is kept as a whitespace-trimmed string; typing the fields is the
job of the model loaders that consume these records.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd

from flight_planning.config import CSV_DELIMITER

Record = Dict[str, str]


class RecordSourceError(Exception):
    """Raised when a source file cannot be turned into records."""


def read_records(path: Path, delimiter: str = CSV_DELIMITER) -> List[Record]:
    """Parse ``path`` into one dict per data row keyed by the header names."""
    path = Path(path)
    try:
        df = pd.read_csv(
            path,
            sep=delimiter,
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except FileNotFoundError as exc:
        raise RecordSourceError(f"File not found: {path}") from exc
    except pd.errors.EmptyDataError as exc:
        raise RecordSourceError(f"File is empty: {path}") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise RecordSourceError(f"Could not parse {path}: {exc}") from exc

    df.columns = [str(column).strip() for column in df.columns]
    df = df.fillna("")
    for column in df.columns:
        df[column] = df[column].astype(str).str.strip()

    records: List[Record] = []
    for _, row in df.iterrows():
        records.append({column: row[column] for column in df.columns})
    return records


def require_field(record: Record, *names: str, source: str = "record") -> str:
    """Return the first present field among ``names`` or raise RecordSourceError."""
    for name in names:
        if name in record:
            return record[name]
    raise RecordSourceError(f"{source}: missing column {names[0]!r}")
