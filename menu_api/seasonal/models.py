from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys for the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Season(str, Enum):
    spring = "spring"
    summer = "summer"
    autumn = "autumn"
    winter = "winter"


class WeatherCondition(str, Enum):
    sunny = "sunny"
    cloudy = "cloudy"
    rainy = "rainy"
    stormy = "stormy"
    foggy = "foggy"
    snowy = "snowy"


class TemperatureRange(CamelModel):
    min: float
    max: float

    @model_validator(mode="after")
    def _check_bounds(self) -> TemperatureRange:
        if self.min > self.max:
            raise ValueError(f"temperature range min {self.min} exceeds max {self.max}")
        return self

    def contains(self, temperature: float) -> bool:
        return self.min <= temperature <= self.max


class SeasonalDish(CamelModel):
    id: str
    name: str
    category: str
    seasons: list[Season]
    weather_conditions: list[WeatherCondition]
    temperature_range: TemperatureRange
    description: str = ""
    benefits: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)


class WeatherInfo(CamelModel):
    temperature: float = Field(..., description="Degrees Celsius")
    humidity: float = Field(..., ge=0.0, le=100.0, description="Relative humidity in percent")
    condition: WeatherCondition
    season: Season
    location: str | None = None


class SmartRecommendations(CamelModel):
    recommendations: list[SeasonalDish]
    weather_info: WeatherInfo
    suggestions: list[str]


# ── HTTP surface ─────────────────────────────────────────────────────────


class RecommendationPreferences(CamelModel):
    category: str | None = None
    season: Season | None = None
    temperature: float | None = None


class SeasonalRecommendationRequest(CamelModel):
    weather: WeatherInfo | None = None
    health_condition: str | None = Field(
        default=None, description="One of cold, hot, tired, digestive"
    )
    preferences: RecommendationPreferences | None = None


class WeatherAnalysis(CamelModel):
    season: Season
    temperature: float
    condition: WeatherCondition
    humidity: float


class SeasonalRecommendationResponse(CamelModel):
    success: bool = True
    weather_info: WeatherInfo
    recommendations: list[SeasonalDish]
    suggestions: list[str]
    total_found: int
    analysis: WeatherAnalysis
