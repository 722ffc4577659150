"""
Load mood and habit-completion exports from CSV or JSON files.

These loaders sit on the caller side of the engine: they turn exported
tables into MoodSample and CompletionRecord lists so the analysis can run
from the command line without a data store.
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from .models import CompletionRecord, MoodSample

logger = logging.getLogger(__name__)

MOOD_COLUMNS = ["date", "mood", "energy", "stress", "sleep"]
COMPLETION_COLUMNS = ["habit_id", "date", "completed"]

TRUE_VALUES = {"true", "1", "yes", "y", "t"}
FALSE_VALUES = {"false", "0", "no", "n", "f", ""}


class LoaderError(Exception):
    """Raised when an export file cannot be turned into records."""
    pass


def _read_table(path: Union[str, Path]) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise LoaderError(f"File not found: {path}")

    try:
        if path.suffix.lower() == ".json":
            df = pd.read_json(path, orient="records", dtype=False)
        else:
            df = pd.read_csv(path, encoding="utf-8", dtype=str, keep_default_na=False)
    except ValueError as e:
        raise LoaderError(f"Could not parse {path}: {e}") from e

    # Clean column names and accept camelCase exports
    df.columns = df.columns.astype(str).str.strip()
    return df.rename(columns={"habitId": "habit_id"})


def _require_columns(df: pd.DataFrame, columns: List[str], path: Union[str, Path]) -> None:
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise LoaderError(f"{path} is missing required column(s): {', '.join(missing)}")


def _normalize_date(value) -> str:
    if isinstance(value, pd.Timestamp):
        return value.strftime("%Y-%m-%d")
    return str(value).strip()


def _parse_completed(value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise LoaderError(f"Unrecognised completed value: {value!r}")


def _parse_rating(value, column: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise LoaderError(f"Column {column} must hold integers, got {value!r}") from e


def load_mood_samples(path: Union[str, Path]) -> List[MoodSample]:
    """Load mood samples from a CSV or JSON export."""
    df = _read_table(path)
    _require_columns(df, MOOD_COLUMNS, path)

    samples = [
        MoodSample(
            date=_normalize_date(row["date"]),
            mood=_parse_rating(row["mood"], "mood"),
            energy=_parse_rating(row["energy"], "energy"),
            stress=_parse_rating(row["stress"], "stress"),
            sleep=_parse_rating(row["sleep"], "sleep"),
        )
        for _, row in df.iterrows()
    ]
    logger.debug(f"Loaded {len(samples)} mood samples from {path}")
    return samples


def load_completion_records(path: Union[str, Path]) -> List[CompletionRecord]:
    """Load habit completion records from a CSV or JSON export."""
    df = _read_table(path)
    _require_columns(df, COMPLETION_COLUMNS, path)

    records = [
        CompletionRecord(
            habit_id=str(row["habit_id"]).strip(),
            date=_normalize_date(row["date"]),
            completed=_parse_completed(row["completed"]),
        )
        for _, row in df.iterrows()
    ]
    logger.debug(f"Loaded {len(records)} completion records from {path}")
    return records
