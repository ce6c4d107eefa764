from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from ..config import DEFAULT_NUTRITION_CONFIG
from .data_store import get_ingredients, to_ingredients
from .models import (
    DailyNutrition,
    Difficulty,
    DishNutrition,
    IngredientCategory,
    IngredientNutrition,
    MealPlanAnalysis,
    MealPlanDay,
    NutritionFacts,
    RecipeItem,
)

logger = logging.getLogger(__name__)

# Fraction of a kilogram (or litre) per unit
UNIT_CONVERSIONS: dict[str, float] = {
    "kg": 1.0,
    "g": 0.001,
    "cái": 0.05,  # ~50 g
    "chai": 0.5,  # ~500 ml
    "muỗng canh": 0.015,  # ~15 ml
    "muỗng cà phê": 0.005,  # ~5 ml
    "bó": 0.2,  # ~200 g
    "quả": 0.1,  # ~100 g
}

PREP_MINUTES: dict[str, float] = {
    "protein": 10, "vegetables": 5, "fruits": 3, "grains": 2,
    "dairy": 1, "oils": 1, "spices": 1,
}
COOK_MINUTES: dict[str, float] = {
    "protein": 20, "vegetables": 8, "fruits": 5, "grains": 15,
    "dairy": 3, "oils": 2, "spices": 1,
}
_DEFAULT_PREP = 5
_DEFAULT_COOK = 10
_MAX_PREP_SCALE = 2.0
_MAX_COOK_SCALE = 1.5

_MACROS = ("calories", "protein", "carbs", "fat", "fiber", "sugar", "sodium")


def get_ingredient_nutrition(
    name: str, table: pd.DataFrame | None = None,
) -> IngredientNutrition | None:
    """Look up an ingredient: exact name first, then substring either way."""
    df = get_ingredients() if table is None else table
    key = name.strip().lower()
    if not key:
        return None

    if key in df.index:
        return to_ingredients(df.loc[[key]])[0]

    for candidate in df.index:
        if candidate in key or key in candidate:
            return to_ingredients(df.loc[[candidate]])[0]

    return None


def convert_unit_to_multiplier(quantity: float, from_unit: str, to_unit: str) -> float:
    """Express *quantity* of *from_unit* in multiples of *to_unit*; unknown units count as 1."""
    from_factor = UNIT_CONVERSIONS.get(from_unit.strip().lower(), 1.0)
    to_factor = UNIT_CONVERSIONS.get(to_unit.strip().lower(), 1.0)
    return quantity * from_factor / to_factor


def estimate_prep_time(category: str, multiplier: float) -> float:
    return PREP_MINUTES.get(category, _DEFAULT_PREP) * min(multiplier, _MAX_PREP_SCALE)


def estimate_cook_time(category: str, multiplier: float) -> float:
    return COOK_MINUTES.get(category, _DEFAULT_COOK) * min(multiplier, _MAX_COOK_SCALE)


def calculate_difficulty(ingredient_count: int, total_minutes: float) -> Difficulty:
    if ingredient_count <= 5 and total_minutes <= 30:
        return Difficulty.easy
    if ingredient_count <= 10 and total_minutes <= 60:
        return Difficulty.medium
    return Difficulty.hard


def _add_scaled(total: NutritionFacts, facts: NutritionFacts, factor: float = 1.0) -> None:
    for field in _MACROS:
        setattr(total, field, getattr(total, field) + getattr(facts, field) * factor)
    for key, value in facts.vitamins.items():
        if value:
            total.vitamins[key] = total.vitamins.get(key, 0.0) + value * factor
    for key, value in facts.minerals.items():
        if value:
            total.minerals[key] = total.minerals.get(key, 0.0) + value * factor


def calculate_dish_nutrition(
    recipe: Iterable[RecipeItem],
    servings: int = DEFAULT_NUTRITION_CONFIG.servings,
    table: pd.DataFrame | None = None,
) -> DishNutrition | None:
    """
    Compute per-serving nutrition, cost and timing for a recipe.

    Ingredients missing from the nutrition table are logged and skipped.
    Returns ``None`` when none of the recipe's ingredients can be resolved.
    """
    items = list(recipe)
    total = NutritionFacts()
    total_cost = 0.0
    prep_minutes = 0.0
    cook_minutes = 0.0
    resolved = 0

    for item in items:
        ingredient = get_ingredient_nutrition(item.ingredient_name, table)
        if ingredient is None:
            logger.warning("No nutrition data for ingredient %r", item.ingredient_name)
            continue
        resolved += 1

        multiplier = convert_unit_to_multiplier(item.quantity, item.unit, ingredient.unit)
        _add_scaled(total, ingredient.nutrition, multiplier)

        total_cost += ingredient.price_per_unit * multiplier
        prep_minutes += estimate_prep_time(ingredient.category.value, multiplier)
        cook_minutes += estimate_cook_time(ingredient.category.value, multiplier)

    if resolved == 0:
        return None

    per_serving = NutritionFacts(
        calories=round(total.calories / servings),
        protein=round(total.protein / servings, 1),
        carbs=round(total.carbs / servings, 1),
        fat=round(total.fat / servings, 1),
        fiber=round(total.fiber / servings, 1),
        sugar=round(total.sugar / servings, 1),
        sodium=round(total.sodium / servings),
        vitamins=total.vitamins,
        minerals=total.minerals,
    )

    return DishNutrition(
        nutrition=per_serving,
        estimated_cost=round(total_cost / servings),
        difficulty=calculate_difficulty(len(items), prep_minutes + cook_minutes),
        prep_time=round(prep_minutes),
        cook_time=round(cook_minutes),
        servings=servings,
    )


def list_ingredients(
    category: IngredientCategory | str | None = None,
    table: pd.DataFrame | None = None,
) -> list[IngredientNutrition]:
    df = get_ingredients() if table is None else table
    if category is not None:
        value = category.value if isinstance(category, IngredientCategory) else category
        df = df.loc[df["category"] == value]
    return to_ingredients(df)


# ── Meal plans ───────────────────────────────────────────────────────────

# Daily targets for an adult: (low, high); None means no bound on that side
DAILY_TARGETS: dict[str, tuple[float | None, float | None]] = {
    "calories": (1800, 2800),
    "protein": (40, 120),
    "carbs": (150, 400),
    "fat": (30, 100),
    "fiber": (25, None),
    "sodium": (None, 2300),
}

_DAILY_TIPS: dict[str, tuple[str, str]] = {
    "calories": (
        "• Tăng lượng calo: Thêm món ăn giàu năng lượng như cơm, bánh mì",
        "• Giảm lượng calo: Chọn món ăn ít calo hơn, tăng rau củ",
    ),
    "protein": (
        "• Tăng protein: Thêm thịt, cá, trứng, đậu phụ",
        "• Giảm protein: Cân bằng với rau củ và tinh bột",
    ),
    "carbs": (
        "• Tăng carbohydrate: Thêm cơm, bánh mì, khoai tây",
        "• Giảm carbohydrate: Chọn món ăn ít tinh bột",
    ),
    "fat": (
        "• Tăng chất béo lành mạnh: Dùng dầu oliu, bơ, các loại hạt",
        "• Giảm chất béo: Hạn chế dầu mỡ, chọn phương pháp nấu ít dầu",
    ),
    "fiber": (
        "• Tăng chất xơ: Ăn nhiều rau củ, trái cây, ngũ cốc nguyên hạt",
        "",
    ),
    "sodium": (
        "",
        "• Giảm muối: Hạn chế nước mắm, muối, đồ chế biến sẵn",
    ),
}


def meal_plan_recommendations(total: NutritionFacts, days: int) -> list[str]:
    """Tips comparing daily averages against adult targets."""
    if days <= 0:
        return []

    tips: list[str] = []
    for field, (low, high) in DAILY_TARGETS.items():
        average = getattr(total, field) / days
        raise_tip, lower_tip = _DAILY_TIPS[field]
        if low is not None and average < low:
            tips.append(raise_tip)
        elif high is not None and average > high:
            tips.append(lower_tip)
    return tips


def analyze_meal_plan(plan: Iterable[MealPlanDay]) -> MealPlanAnalysis:
    """Sum per-serving dish nutrition per day and across the whole plan."""
    total = NutritionFacts()
    daily: list[DailyNutrition] = []

    for day in plan:
        day_total = NutritionFacts()
        day_cost = 0.0
        for meal in day.meals:
            _add_scaled(day_total, meal.dish.nutrition)
            day_cost += meal.dish.estimated_cost
        _add_scaled(total, day_total)
        daily.append(DailyNutrition(day=day.day, nutrition=day_total, cost=day_cost))

    return MealPlanAnalysis(
        total_nutrition=total,
        daily_nutrition=daily,
        recommendations=meal_plan_recommendations(total, len(daily)),
    )
