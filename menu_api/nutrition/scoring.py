"""
Health score and improvement tips for a per-serving nutrient vector.

Each factor earns points from fixed buckets; the factor's maximum is its
weight. The score is the weighted mean of the per-factor ratios
(points / maximum), scaled to 0-100, so a dish hitting every top bucket
scores 100.
"""
from __future__ import annotations

from dataclasses import dataclass

from .models import NutritionFacts

BALANCED_MESSAGE = "Món ăn này có dinh dưỡng cân bằng tốt!"


@dataclass(frozen=True)
class RangeFactor:
    """Points for a value inside a good range, a wider acceptable range, or neither."""

    nutrient: str
    good: tuple[float, float]
    acceptable: tuple[float, float]
    max_points: int = 20
    acceptable_points: int = 15
    fallback_points: int = 5

    def points(self, value: float) -> int:
        if self.good[0] <= value <= self.good[1]:
            return self.max_points
        if self.acceptable[0] <= value <= self.acceptable[1]:
            return self.acceptable_points
        return self.fallback_points


@dataclass(frozen=True)
class ThresholdFactor:
    """Points stepping down as a value crosses two thresholds."""

    nutrient: str
    top: float
    mid: float
    higher_is_better: bool
    max_points: int = 10
    mid_points: int = 5

    def points(self, value: float) -> int:
        if self.higher_is_better:
            if value >= self.top:
                return self.max_points
            return self.mid_points if value >= self.mid else 0
        if value <= self.top:
            return self.max_points
        return self.mid_points if value <= self.mid else 0


FACTORS: tuple[RangeFactor | ThresholdFactor, ...] = (
    RangeFactor("calories", good=(400, 800), acceptable=(300, 1000)),
    RangeFactor("protein", good=(15, 40), acceptable=(10, 50)),
    RangeFactor("carbs", good=(30, 100), acceptable=(20, 120)),
    RangeFactor("fat", good=(10, 35), acceptable=(5, 45)),
    ThresholdFactor("fiber", top=4, mid=2, higher_is_better=True),
    ThresholdFactor("sodium", top=600, mid=1000, higher_is_better=False),
)


def factor_points(nutrition: NutritionFacts) -> dict[str, int]:
    return {f.nutrient: f.points(getattr(nutrition, f.nutrient)) for f in FACTORS}


def calculate_health_score(nutrition: NutritionFacts) -> int:
    """Return an integer in [0, 100]; 100 means every factor is in its top bucket.

    The factor maximums (four ranges at 20, two thresholds at 10) add up to
    100, so the weighted mean of the ratios is simply the sum of the points.
    """
    return sum(factor_points(nutrition).values())


# (nutrient, low, high, tip when below low, tip when above high)
_TIPS: tuple[tuple[str, float | None, float | None, str | None, str | None], ...] = (
    (
        "calories", 400, 800,
        "Tăng lượng calo bằng cách thêm tinh bột hoặc chất béo lành mạnh",
        "Giảm lượng calo bằng cách giảm tinh bột hoặc chất béo",
    ),
    (
        "protein", 15, 40,
        "Tăng protein bằng cách thêm thịt, cá, trứng hoặc đậu",
        "Cân bằng protein với rau củ và tinh bột",
    ),
    (
        "carbs", 30, 100,
        "Tăng carbohydrate bằng cách thêm cơm, bánh mì hoặc khoai tây",
        "Giảm carbohydrate, chọn món ít tinh bột",
    ),
    (
        "fat", 10, 35,
        "Tăng chất béo lành mạnh bằng dầu oliu, bơ hoặc các loại hạt",
        "Giảm chất béo, chọn phương pháp nấu ít dầu",
    ),
    ("fiber", 4, None, "Tăng chất xơ bằng cách thêm rau củ và trái cây", None),
    ("sodium", None, 1000, None, "Giảm muối và gia vị có natri cao"),
)


def generate_recommendations(nutrition: NutritionFacts) -> list[str]:
    """Independent per-nutrient tips, or the balanced message when none apply."""
    tips: list[str] = []
    for nutrient, low, high, below, above in _TIPS:
        value = getattr(nutrition, nutrient)
        if low is not None and value < low:
            tips.append(below)
        elif high is not None and value > high:
            tips.append(above)

    return tips or [BALANCED_MESSAGE]
