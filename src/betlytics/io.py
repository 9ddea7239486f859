"""Load wager snapshots exported by the store (CSV or JSON)."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import pandas as pd

from betlytics.analytics.wager import PortfolioSnapshot, Wager
from betlytics.utils.logging import get_logger

log = get_logger(__name__)

# Store exports use camelCase; settlement time was tracked as updatedAt
COLUMN_ALIASES = {
    "createdAt": "created_at",
    "settledAt": "settled_at",
    "updatedAt": "updated_at",
}

_DETAIL_COLUMNS = ["id", "event", "market", "sport", "league", "bookmaker"]
_REQUIRED_COLUMNS = ["date", "odds", "stake", "status"]


def _missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value)) or value is pd.NaT


def _timestamp(value: Any):
    if _missing(value):
        return None
    return pd.Timestamp(value).to_pydatetime()


def read_frame(path: str | Path) -> pd.DataFrame:
    """Read a CSV or JSON export into a normalized DataFrame."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        df = pd.read_json(path, orient="records", convert_dates=False)
    else:
        df = pd.read_csv(path)

    df = df.rename(columns=COLUMN_ALIASES)
    missing = [c for c in _REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing required columns {missing}")

    if "settled_at" not in df.columns and "updated_at" in df.columns:
        df["settled_at"] = df["updated_at"]
    for col in ("created_at", "settled_at"):
        if col not in df.columns:
            df[col] = None
    if "profit" not in df.columns:
        df["profit"] = float("nan")

    df["date"] = pd.to_datetime(df["date"]).dt.date
    df["status"] = df["status"].astype(str).str.strip().str.lower()
    return df


def wager_from_record(record: dict[str, Any]) -> Wager:
    """Build a validated wager from one exported record.

    A record without a profit gets one from the settlement formula; a
    cashout record must carry its own.
    """
    details = {
        col: ("" if _missing(record.get(col)) else str(record[col]))
        for col in _DETAIL_COLUMNS
        if col in record
    }
    if details.get("id") == "":
        details["id"] = None
    common = dict(
        date=record["date"],
        odds=float(record["odds"]),
        stake=float(record["stake"]),
        created_at=_timestamp(record.get("created_at")),
        settled_at=_timestamp(record.get("settled_at")),
        **details,
    )
    profit = record.get("profit")
    if _missing(profit):
        return Wager.create(status=record["status"], **common)
    return Wager(status=record["status"], profit=float(profit), **common)


def frame_to_snapshot(df: pd.DataFrame) -> PortfolioSnapshot:
    """Build validated wagers from a normalized DataFrame."""
    return PortfolioSnapshot(
        tuple(wager_from_record(row) for row in df.to_dict(orient="records"))
    )


def load_wagers(path: str | Path) -> PortfolioSnapshot:
    """Read an exported wager history into a :class:`PortfolioSnapshot`."""
    snapshot = frame_to_snapshot(read_frame(path))
    log.info("wagers_loaded", path=str(path), wagers=len(snapshot))
    return snapshot
