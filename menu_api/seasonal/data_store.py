from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_APP_CONFIG
from .models import SeasonalDish

logger = logging.getLogger(__name__)

_DISH_FIELDS = list(SeasonalDish.model_fields)

_df: pd.DataFrame | None = None


def load_catalog(path: Path) -> pd.DataFrame:
    """Read and validate a seasonal dish catalog from a JSON records file."""
    df = pd.read_json(path, orient="records", dtype=False)

    # Reject malformed records up front; the frame is never mutated afterwards
    for record in df[_DISH_FIELDS].to_dict(orient="records"):
        SeasonalDish.model_validate(record)

    # Flatten the range and lowercase benefits for matching
    df["temp_min"] = df["temperature_range"].apply(lambda r: float(r["min"]))
    df["temp_max"] = df["temperature_range"].apply(lambda r: float(r["max"]))
    df["benefits_lower"] = df["benefits"].apply(lambda bs: [b.lower() for b in bs])
    df["name_lower"] = df["name"].str.lower()

    logger.info("Loaded %d seasonal dishes from %s", len(df), path)
    return df


def get_catalog() -> pd.DataFrame:
    """Return the in-memory seasonal catalog, loading it on first call."""
    global _df
    if _df is None:
        _df = load_catalog(DEFAULT_APP_CONFIG.seasonal_path)
    return _df


def to_dishes(df: pd.DataFrame) -> list[SeasonalDish]:
    """Convert catalog rows to models, keeping row order."""
    return [
        SeasonalDish.model_validate(record)
        for record in df[_DISH_FIELDS].to_dict(orient="records")
    ]
