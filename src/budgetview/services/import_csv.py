"""CSV ingestion for the command-line harness."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..models.category import CategoryRecord
from ..models.transaction import TransactionRecord

logger = logging.getLogger(__name__)

# CSV headers arrive lower-cased; map common exports onto record fields.
_TRANSACTION_ALIASES = {
    "transaction id": "id",
    "memo": "description",
    "payee": "name",
    "created at": "created_at",
}


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file into a DataFrame with consistent column casing."""

    frame = pd.read_csv(file_path, encoding=encoding, dtype=str, keep_default_na=False)
    frame.columns = [c.strip().lower() for c in frame.columns]
    return frame


def _rows(frame: pd.DataFrame) -> list[dict]:
    return frame.to_dict(orient="records")


def load_category_records(csv_path: Path) -> list[CategoryRecord]:
    """Read ``category,total_amount`` rows; unreadable amounts become 0."""

    frame = normalize_frame(file_path=csv_path)
    frame.columns = [c.replace(" ", "_") for c in frame.columns]
    records = [CategoryRecord.from_raw(row) for row in _rows(frame)]
    logger.info("Loaded %d category rows from %s", len(records), csv_path)
    return records


def load_transaction_records(csv_path: Path) -> list[TransactionRecord]:
    """Read transaction rows, keeping file order."""

    frame = normalize_frame(file_path=csv_path)
    frame = frame.rename(columns={k: v for k, v in _TRANSACTION_ALIASES.items() if v not in frame.columns})
    records = []
    for row in _rows(frame):
        cleaned = {key: (value if value != "" else None) for key, value in row.items()}
        records.append(TransactionRecord.from_raw(cleaned))
    logger.info("Loaded %d transaction rows from %s", len(records), csv_path)
    return records
