from __future__ import annotations

from enum import Enum

from pydantic import Field

from ..seasonal.models import CamelModel


class IngredientCategory(str, Enum):
    protein = "protein"
    carbs = "carbs"
    vegetables = "vegetables"
    fruits = "fruits"
    dairy = "dairy"
    grains = "grains"
    oils = "oils"
    spices = "spices"


class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class NutritionFacts(CamelModel):
    """Nutrient amounts; fields the caller omits count as zero."""

    calories: float = 0.0
    protein: float = 0.0  # g
    carbs: float = 0.0  # g
    fat: float = 0.0  # g
    fiber: float = 0.0  # g
    sugar: float = 0.0  # g
    sodium: float = 0.0  # mg
    vitamins: dict[str, float] = Field(default_factory=dict)
    minerals: dict[str, float] = Field(default_factory=dict)


class IngredientNutrition(CamelModel):
    id: str
    name: str
    nutrition: NutritionFacts
    price_per_unit: float = Field(..., description="VND per unit")
    unit: str
    category: IngredientCategory


class RecipeItem(CamelModel):
    ingredient_name: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=0.0)
    unit: str


class DishNutrition(CamelModel):
    dish_id: str = "calculated"
    dish_name: str = "Món ăn tính toán"
    category: str = "Món chính"
    nutrition: NutritionFacts
    estimated_cost: float = Field(default=0.0, description="VND per serving")
    difficulty: Difficulty = Difficulty.easy
    prep_time: int = 0  # minutes
    cook_time: int = 0  # minutes
    servings: int = 4


class PlannedMeal(CamelModel):
    meal_type: str
    dish: DishNutrition


class MealPlanDay(CamelModel):
    day: str
    meals: list[PlannedMeal] = Field(default_factory=list)


class DailyNutrition(CamelModel):
    day: str
    nutrition: NutritionFacts
    cost: float


class MealPlanAnalysis(CamelModel):
    total_nutrition: NutritionFacts
    daily_nutrition: list[DailyNutrition]
    recommendations: list[str]


# ── HTTP surface ─────────────────────────────────────────────────────────


class NutritionAnalysisRequest(CamelModel):
    recipe: list[RecipeItem] = Field(default_factory=list)
    dish_name: str | None = None


class NutritionBreakdown(CamelModel):
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    sodium: float
    vitamins: dict[str, float]
    minerals: dict[str, float]


class NutritionAnalysisResponse(CamelModel):
    success: bool = True
    nutrition: DishNutrition
    health_score: int
    recommendations: list[str]
    analysis: NutritionBreakdown


class MealPlanRequest(CamelModel):
    days: list[MealPlanDay] = Field(default_factory=list)


class MealPlanResponse(MealPlanAnalysis):
    success: bool = True


class IngredientListResponse(CamelModel):
    success: bool = True
    ingredients: list[IngredientNutrition]
