from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class AppConfig:
    log_level: str = os.getenv("MENU_API_LOG_LEVEL", "INFO").upper()
    data_dir: Path = Path(os.getenv("MENU_API_DATA_DIR", str(_DEFAULT_DATA_DIR)))
    seasonal_filename: str = "seasonal_dishes.json"
    ingredients_filename: str = "ingredients.json"

    @property
    def seasonal_path(self) -> Path:
        return self.data_dir / self.seasonal_filename

    @property
    def ingredients_path(self) -> Path:
        return self.data_dir / self.ingredients_filename


@dataclass(frozen=True)
class RecommendationLimits:
    smart: int = 6
    response: int = 8
    dishes: int = 20


@dataclass(frozen=True)
class NutritionConfig:
    servings: int = 4


DEFAULT_APP_CONFIG = AppConfig()
DEFAULT_LIMITS = RecommendationLimits()
DEFAULT_NUTRITION_CONFIG = NutritionConfig()
