from __future__ import annotations

import random
from datetime import date
from unittest.mock import patch

from menu_api.seasonal.models import Season, WeatherCondition, WeatherInfo
from menu_api.seasonal.recommender import build_suggestions, generate_smart_recommendations


def _context(season: str, condition: str, temperature: float) -> WeatherInfo:
    return WeatherInfo(temperature=temperature, humidity=70, condition=condition, season=season)


class TestSuggestions:
    def test_cold_rainy_winter(self):
        tips = build_suggestions(_context("winter", "rainy", 8))
        assert len(tips) == 4
        assert tips[0].startswith("🌡️")
        assert "Trời mưa" in tips[2]
        assert "Mùa đông" in tips[3]

    def test_hot_sunny_summer(self):
        tips = build_suggestions(_context("summer", "sunny", 33))
        assert len(tips) == 4
        assert "Trời nóng" in tips[0]
        assert "Salad" in tips[1]
        assert "Trời nắng" in tips[2]

    def test_thresholds_are_strict(self):
        # 15 and 30 are both mild
        assert len(build_suggestions(_context("autumn", "cloudy", 15))) == 2
        assert len(build_suggestions(_context("summer", "sunny", 30))) == 3

    def test_cloudy_adds_no_condition_tip(self):
        tips = build_suggestions(_context("autumn", "cloudy", 20))
        assert tips == [
            "🌤️ Thời tiết dễ chịu, có thể chọn nhiều loại món",
            "🍂 Mùa thu, nên ăn món bổ dưỡng",
        ]


def test_supplied_context_is_used_as_is():
    ctx = _context("summer", "sunny", 30)
    result = generate_smart_recommendations(context=ctx)
    assert result.weather_info == ctx
    assert [d.id for d in result.recommendations] == [
        "summer-cooling", "summer-salad", "summer-soup", "hot-day-cooling",
    ]


def test_recommendations_truncated_to_limit():
    result = generate_smart_recommendations(context=_context("autumn", "rainy", 15), limit=2)
    assert [d.id for d in result.recommendations] == ["autumn-warm", "autumn-soup"]


def test_never_more_than_six():
    rng = random.Random(5)
    for month in range(1, 13):
        for _ in range(20):
            result = generate_smart_recommendations(rng=rng, today=date(2026, month, 10))
            assert len(result.recommendations) <= 6


def test_estimates_weather_when_missing():
    estimated = _context("winter", "rainy", 8)
    with patch(
        "menu_api.seasonal.recommender.estimate_weather", return_value=estimated,
    ) as mock_estimate:
        result = generate_smart_recommendations()
    mock_estimate.assert_called_once()
    assert result.weather_info.season == Season.winter
    assert result.weather_info.condition == WeatherCondition.rainy
    assert [d.id for d in result.recommendations] == ["winter-hot", "winter-soup", "winter-stew"]
