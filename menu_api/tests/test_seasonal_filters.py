from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from menu_api.seasonal.data_store import get_catalog, load_catalog
from menu_api.seasonal.filters import (
    all_dishes,
    filter_by_category_and_season,
    filter_by_health_condition,
    filter_by_season,
    filter_by_temperature,
    filter_by_weather,
    find_dish_by_name,
)
from menu_api.seasonal.models import Season, WeatherCondition, WeatherInfo


def _context(season: str, condition: str, temperature: float) -> WeatherInfo:
    return WeatherInfo(
        temperature=temperature,
        humidity=75,
        condition=condition,
        season=season,
    )


WINTER_RAIN = _context("winter", "rainy", 8)


def _ids(dishes) -> list[str]:
    return [d.id for d in dishes]


# ── Catalog ──────────────────────────────────────────────────────────────


def test_catalog_loads_all_dishes():
    dishes = all_dishes()
    assert len(dishes) == 13
    assert dishes[0].id == "spring-salad"
    for dish in dishes:
        assert dish.temperature_range.min <= dish.temperature_range.max


def test_load_catalog_rejects_inverted_range(tmp_path: Path):
    bad = [{
        "id": "broken",
        "name": "Món lỗi",
        "category": "Canh",
        "seasons": ["winter"],
        "weather_conditions": ["rainy"],
        "temperature_range": {"min": 20, "max": 10},
        "description": "",
        "benefits": [],
        "ingredients": [],
    }]
    path = tmp_path / "dishes.json"
    path.write_text(json.dumps(bad), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_catalog(path)


# ── Weather filter ───────────────────────────────────────────────────────


def test_winter_rain_includes_hotpot_and_excludes_summer_salad():
    ids = _ids(filter_by_weather(None, WINTER_RAIN))
    assert "winter-hot" in ids
    assert "summer-salad" not in ids
    assert ids == ["winter-hot", "winter-soup", "winter-stew"]


def test_weather_filter_preserves_catalog_order():
    ids = _ids(filter_by_weather(None, _context("autumn", "rainy", 15)))
    assert ids == ["autumn-warm", "autumn-soup", "rainy-comfort", "stormy-comfort"]


def test_weather_filter_matches_conjunction_for_every_dish():
    catalog = get_catalog()
    for season in Season:
        for condition in WeatherCondition:
            for temperature in (0, 5, 10, 15, 20, 25, 30, 35, 40):
                ctx = _context(season.value, condition.value, temperature)
                matched = set(_ids(filter_by_weather(catalog, ctx)))
                for dish in all_dishes(catalog):
                    expected = (
                        season in dish.seasons
                        and condition in dish.weather_conditions
                        and dish.temperature_range.min <= temperature <= dish.temperature_range.max
                    )
                    assert (dish.id in matched) == expected


def test_temperature_bounds_are_inclusive():
    assert "winter-soup" in _ids(filter_by_weather(None, _context("winter", "foggy", 0)))
    assert "winter-soup" in _ids(filter_by_weather(None, _context("winter", "foggy", 10)))
    assert "winter-soup" not in _ids(filter_by_weather(None, _context("winter", "foggy", 10.5)))


def test_no_match_returns_empty_list():
    assert filter_by_weather(None, _context("summer", "snowy", 30)) == []


# ── Single-predicate filters ─────────────────────────────────────────────


def test_filter_by_season():
    assert _ids(filter_by_season(None, Season.winter)) == [
        "winter-hot", "winter-soup", "winter-stew", "rainy-comfort",
    ]
    assert _ids(filter_by_season(None, "winter")) == _ids(filter_by_season(None, Season.winter))


def test_filter_by_season_unknown_value_is_empty():
    assert filter_by_season(None, "monsoon") == []


def test_filter_by_temperature():
    assert _ids(filter_by_temperature(None, 8)) == ["winter-hot", "winter-soup", "winter-stew"]
    assert len(filter_by_temperature(None, 25)) == 7


def test_single_predicate_filters_are_supersets():
    for season in Season:
        for condition in WeatherCondition:
            for temperature in (2, 12, 18, 27, 33):
                ctx = _context(season.value, condition.value, temperature)
                strict = set(_ids(filter_by_weather(None, ctx)))
                assert strict <= set(_ids(filter_by_season(None, season)))
                assert strict <= set(_ids(filter_by_temperature(None, temperature)))


# ── Health conditions ────────────────────────────────────────────────────


class TestHealthCondition:
    def test_cold_keeps_warming_dishes(self):
        ids = _ids(filter_by_health_condition(None, "cold", WINTER_RAIN))
        # hotpot and porridge by category, the stew by its warming benefit
        assert ids == ["winter-hot", "winter-soup", "winter-stew"]

    def test_hot_keeps_porridge_and_easy_to_digest(self):
        assert _ids(filter_by_health_condition(None, "hot", WINTER_RAIN)) == ["winter-soup"]

    def test_tired_keeps_nourishing(self):
        assert _ids(filter_by_health_condition(None, "tired", WINTER_RAIN)) == ["winter-stew"]

    def test_digestive_keeps_digestion_benefits(self):
        assert _ids(filter_by_health_condition(None, "digestive", WINTER_RAIN)) == ["winter-soup"]

    def test_unknown_label_passes_weather_result_through(self):
        weather_ids = _ids(filter_by_weather(None, WINTER_RAIN))
        assert _ids(filter_by_health_condition(None, "headache", WINTER_RAIN)) == weather_ids

    def test_result_is_subset_of_weather_filter(self):
        ctx = _context("autumn", "rainy", 15)
        weather_ids = set(_ids(filter_by_weather(None, ctx)))
        for label in ("cold", "hot", "tired", "digestive"):
            assert set(_ids(filter_by_health_condition(None, label, ctx))) <= weather_ids

    def test_empty_weather_result_stays_empty(self):
        ctx = _context("summer", "snowy", 30)
        assert filter_by_health_condition(None, "cold", ctx) == []


# ── Lookup helpers ───────────────────────────────────────────────────────


def test_filter_by_category_and_season():
    assert _ids(filter_by_category_and_season(None, "Canh", "summer")) == ["summer-soup"]
    assert filter_by_category_and_season(None, "Lẩu", "summer") == []


def test_find_dish_by_name():
    assert find_dish_by_name(None, "phở").id == "rainy-comfort"
    assert find_dish_by_name(None, "Cháo gà ngon").id == "winter-soup"
    assert find_dish_by_name(None, "pizza") is None
    assert find_dish_by_name(None, "   ") is None
