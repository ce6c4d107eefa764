from __future__ import annotations

import random
from datetime import date

import pandas as pd

from ..config import DEFAULT_LIMITS
from .filters import filter_by_weather
from .models import Season, SmartRecommendations, WeatherCondition, WeatherInfo
from .weather import estimate_weather

COLD_THRESHOLD = 15
HOT_THRESHOLD = 30

_COLD_TIPS = [
    "🌡️ Trời lạnh, nên chọn món ăn ấm áp",
    "🍲 Các món hầm, lẩu sẽ giúp giữ ấm cơ thể",
]
_HOT_TIPS = [
    "☀️ Trời nóng, nên chọn món ăn thanh mát",
    "🥗 Salad và gỏi sẽ giúp giải nhiệt",
]
_MILD_TIP = "🌤️ Thời tiết dễ chịu, có thể chọn nhiều loại món"

_CONDITION_TIPS: dict[WeatherCondition, str] = {
    WeatherCondition.rainy: "🌧️ Trời mưa, món ăn ấm áp sẽ rất phù hợp",
    WeatherCondition.sunny: "☀️ Trời nắng, nên uống nhiều nước và ăn món thanh mát",
}

_SEASON_TIPS: dict[Season, str] = {
    Season.spring: "🌸 Mùa xuân, nên ăn nhiều rau củ tươi",
    Season.summer: "☀️ Mùa hè, cần bổ sung nước và vitamin",
    Season.autumn: "🍂 Mùa thu, nên ăn món bổ dưỡng",
    Season.winter: "❄️ Mùa đông, cần ăn món ấm áp và giàu năng lượng",
}


def build_suggestions(context: WeatherInfo) -> list[str]:
    """Templated tips for a weather context, independent of matched dishes."""
    if context.temperature < COLD_THRESHOLD:
        suggestions = list(_COLD_TIPS)
    elif context.temperature > HOT_THRESHOLD:
        suggestions = list(_HOT_TIPS)
    else:
        suggestions = [_MILD_TIP]

    if context.condition in _CONDITION_TIPS:
        suggestions.append(_CONDITION_TIPS[context.condition])

    suggestions.append(_SEASON_TIPS[context.season])
    return suggestions


def generate_smart_recommendations(
    catalog: pd.DataFrame | None = None,
    context: WeatherInfo | None = None,
    rng: random.Random | None = None,
    today: date | None = None,
    limit: int = DEFAULT_LIMITS.smart,
) -> SmartRecommendations:
    """Filter the catalog for *context*, estimating the weather when none is given.

    Without a caller-supplied context the result depends on a random draw
    (see ``estimate_weather``).
    """
    resolved = context or estimate_weather(rng=rng, today=today)
    dishes = filter_by_weather(catalog, resolved)

    return SmartRecommendations(
        recommendations=dishes[:limit],
        weather_info=resolved,
        suggestions=build_suggestions(resolved),
    )
