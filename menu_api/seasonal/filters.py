from __future__ import annotations

import pandas as pd

from .data_store import get_catalog, to_dishes
from .models import Season, SeasonalDish, WeatherInfo

# Labels map to a category allow-list and/or benefit substrings.
# Unknown labels are not an error: the weather-filtered list passes through.
HEALTH_CONDITION_RULES: dict[str, dict[str, list[str]]] = {
    # cảm lạnh
    "cold": {
        "categories": ["Cháo", "Canh", "Lẩu"],
        "benefits": ["ấm áp", "sức đề kháng"],
    },
    # sốt
    "hot": {
        "categories": ["Cháo", "Salad"],
        "benefits": ["dễ tiêu hóa"],
    },
    # mệt mỏi
    "tired": {
        "categories": [],
        "benefits": ["bổ dưỡng", "năng lượng"],
    },
    # vấn đề tiêu hóa
    "digestive": {
        "categories": [],
        "benefits": ["tiêu hóa", "dễ tiêu"],
    },
}


def _season_mask(df: pd.DataFrame, season: Season | str) -> pd.Series:
    value = season.value if isinstance(season, Season) else season
    return df["seasons"].apply(lambda seasons: value in seasons)


def _temperature_mask(df: pd.DataFrame, temperature: float) -> pd.Series:
    return (df["temp_min"] <= temperature) & (df["temp_max"] >= temperature)


def _weather_mask(df: pd.DataFrame, context: WeatherInfo) -> pd.Series:
    condition = context.condition.value
    return (
        _season_mask(df, context.season)
        & df["weather_conditions"].apply(lambda conditions: condition in conditions)
        & _temperature_mask(df, context.temperature)
    )


def _benefit_mask(df: pd.DataFrame, needles: list[str]) -> pd.Series:
    return df["benefits_lower"].apply(
        lambda benefits: any(n in b for b in benefits for n in needles)
    )


def filter_by_weather(
    catalog: pd.DataFrame | None, context: WeatherInfo,
) -> list[SeasonalDish]:
    """Dishes matching the context's season, condition and temperature."""
    df = get_catalog() if catalog is None else catalog
    return to_dishes(df.loc[_weather_mask(df, context)])


def filter_by_season(catalog: pd.DataFrame | None, season: Season | str) -> list[SeasonalDish]:
    df = get_catalog() if catalog is None else catalog
    return to_dishes(df.loc[_season_mask(df, season)])


def filter_by_temperature(catalog: pd.DataFrame | None, temperature: float) -> list[SeasonalDish]:
    df = get_catalog() if catalog is None else catalog
    return to_dishes(df.loc[_temperature_mask(df, temperature)])


def filter_by_health_condition(
    catalog: pd.DataFrame | None,
    condition: str,
    context: WeatherInfo,
) -> list[SeasonalDish]:
    """Weather-filter the catalog, then narrow it for a health condition.

    Benefit tags are matched case-insensitively as substrings. A label
    outside ``HEALTH_CONDITION_RULES`` leaves the weather result as is.
    """
    df = get_catalog() if catalog is None else catalog
    candidates = df.loc[_weather_mask(df, context)]

    rule = HEALTH_CONDITION_RULES.get(condition)
    if rule is None or candidates.empty:
        return to_dishes(candidates)

    mask = candidates["category"].isin(rule["categories"]) | _benefit_mask(
        candidates, rule["benefits"]
    )
    return to_dishes(candidates.loc[mask])


def filter_by_category_and_season(
    catalog: pd.DataFrame | None, category: str, season: Season | str,
) -> list[SeasonalDish]:
    df = get_catalog() if catalog is None else catalog
    mask = (df["category"] == category) & _season_mask(df, season)
    return to_dishes(df.loc[mask])


def find_dish_by_name(catalog: pd.DataFrame | None, name: str) -> SeasonalDish | None:
    """Return the first dish whose name contains *name* or is contained in it."""
    df = get_catalog() if catalog is None else catalog
    query = name.strip().lower()
    if not query:
        return None
    mask = df["name_lower"].apply(lambda n: query in n or n in query)
    matches = to_dishes(df.loc[mask].head(1))
    return matches[0] if matches else None


def all_dishes(catalog: pd.DataFrame | None = None) -> list[SeasonalDish]:
    df = get_catalog() if catalog is None else catalog
    return to_dishes(df)
