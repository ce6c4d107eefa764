"""
Season resolution and a synthetic weather estimate.

``estimate_weather`` stands in for a real weather API and is
non-deterministic: temperature, humidity and condition are random draws
within per-season bands. Pass ``rng`` (anything with a ``random()``
method, e.g. ``random.Random(seed)``) and ``today`` to make it
reproducible.
"""
from __future__ import annotations

import random
from datetime import date
from typing import Callable

from .models import Season, WeatherCondition, WeatherInfo

# (low, span) in degrees Celsius
TEMPERATURE_BANDS: dict[Season, tuple[float, float]] = {
    Season.spring: (18.0, 7.0),
    Season.summer: (25.0, 10.0),
    Season.autumn: (15.0, 10.0),
    Season.winter: (5.0, 10.0),
}

HUMIDITY_BAND: tuple[float, float] = (60.0, 30.0)


def current_season(today: date | None = None) -> Season:
    month = (today or date.today()).month
    if 3 <= month <= 5:
        return Season.spring
    if 6 <= month <= 8:
        return Season.summer
    if 9 <= month <= 11:
        return Season.autumn
    return Season.winter


def _draw_condition(season: Season, draw: Callable[[], float]) -> WeatherCondition:
    # Each comparison consumes its own draw
    if season == Season.spring:
        if draw() > 0.7:
            return WeatherCondition.rainy
        return WeatherCondition.cloudy if draw() > 0.5 else WeatherCondition.sunny
    if season == Season.summer:
        return WeatherCondition.rainy if draw() > 0.8 else WeatherCondition.sunny
    if season == Season.autumn:
        if draw() > 0.6:
            return WeatherCondition.rainy
        return WeatherCondition.cloudy if draw() > 0.4 else WeatherCondition.sunny
    if draw() > 0.5:
        return WeatherCondition.cloudy
    return WeatherCondition.rainy if draw() > 0.3 else WeatherCondition.sunny


def estimate_weather(
    season: Season | None = None,
    rng: random.Random | None = None,
    today: date | None = None,
) -> WeatherInfo:
    """Return a plausible weather context for *season* (default: today's season)."""
    draw = (rng or random).random
    season = season or current_season(today)

    low, span = TEMPERATURE_BANDS[season]
    temperature = round(low + draw() * span)
    condition = _draw_condition(season, draw)
    h_low, h_span = HUMIDITY_BAND
    humidity = round(h_low + draw() * h_span)

    return WeatherInfo(
        temperature=temperature,
        humidity=humidity,
        condition=condition,
        season=season,
    )
