from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_APP_CONFIG
from .models import IngredientNutrition

logger = logging.getLogger(__name__)

_INGREDIENT_FIELDS = list(IngredientNutrition.model_fields)

_df: pd.DataFrame | None = None


def load_ingredients(path: Path) -> pd.DataFrame:
    """Read the ingredient nutrition table, indexed by lowercase name."""
    df = pd.read_json(path, orient="records", dtype=False)

    for record in df[_INGREDIENT_FIELDS].to_dict(orient="records"):
        IngredientNutrition.model_validate(record)

    df["key"] = df["key"].str.strip().str.lower()
    df.index = df["key"].tolist()

    logger.info("Loaded %d ingredients from %s", len(df), path)
    return df


def get_ingredients() -> pd.DataFrame:
    """Return the in-memory ingredient table, loading it on first call."""
    global _df
    if _df is None:
        _df = load_ingredients(DEFAULT_APP_CONFIG.ingredients_path)
    return _df


def to_ingredients(df: pd.DataFrame) -> list[IngredientNutrition]:
    return [
        IngredientNutrition.model_validate(record)
        for record in df[_INGREDIENT_FIELDS].to_dict(orient="records")
    ]
