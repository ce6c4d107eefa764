from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DEFAULT_APP_CONFIG, DEFAULT_LIMITS
from .nutrition.calculator import (
    analyze_meal_plan,
    calculate_dish_nutrition,
    list_ingredients,
)
from .nutrition.models import (
    IngredientListResponse,
    MealPlanRequest,
    MealPlanResponse,
    NutritionAnalysisRequest,
    NutritionAnalysisResponse,
    NutritionBreakdown,
)
from .nutrition.scoring import calculate_health_score, generate_recommendations
from .seasonal.filters import (
    all_dishes,
    filter_by_category_and_season,
    filter_by_health_condition,
    filter_by_season,
)
from .seasonal.models import (
    SeasonalRecommendationRequest,
    SeasonalRecommendationResponse,
    WeatherAnalysis,
)
from .seasonal.recommender import generate_smart_recommendations
from .seasonal.weather import current_season, estimate_weather

logging.basicConfig(level=DEFAULT_APP_CONFIG.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Meal Planner Recommendation API", version="1.0.0")


def _internal_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "Internal server error", "message": message},
    )


# ── Error rendering ──────────────────────────────────────────────────────


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content={"success": False, **detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": "Invalid request",
            "message": "Dữ liệu yêu cầu không hợp lệ.",
        },
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Seasonal recommendations ─────────────────────────────────────────────


@app.post("/api/seasonal-recommendations", response_model=SeasonalRecommendationResponse)
def seasonal_recommendations(body: SeasonalRecommendationRequest) -> SeasonalRecommendationResponse:
    try:
        result = generate_smart_recommendations(context=body.weather)
        context = result.weather_info

        recommendations = result.recommendations
        if body.health_condition:
            recommendations = filter_by_health_condition(None, body.health_condition, context)

        prefs = body.preferences
        if prefs is not None:
            if prefs.category:
                recommendations = [d for d in recommendations if d.category == prefs.category]
            if prefs.season is not None:
                recommendations = [d for d in recommendations if prefs.season in d.seasons]
            if prefs.temperature is not None:
                recommendations = [
                    d for d in recommendations if d.temperature_range.contains(prefs.temperature)
                ]

        return SeasonalRecommendationResponse(
            weather_info=context,
            recommendations=recommendations[: DEFAULT_LIMITS.response],
            suggestions=result.suggestions,
            total_found=len(recommendations),
            analysis=WeatherAnalysis(
                season=context.season,
                temperature=context.temperature,
                condition=context.condition,
                humidity=context.humidity,
            ),
        )
    except Exception:
        logger.exception("Seasonal recommendation failed")
        raise _internal_error("Có lỗi xảy ra khi tạo gợi ý theo mùa.")


@app.get("/api/seasonal-recommendations")
def seasonal_info(
    action: str | None = Query(default=None),
    season: str | None = Query(default=None),
    category: str | None = Query(default=None),
) -> dict:
    if action not in ("weather", "season", "dishes"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid action parameter"},
        )

    try:
        if action == "weather":
            weather = estimate_weather()
            return {"success": True, "weather": weather.model_dump(by_alias=True, mode="json")}

        if action == "season":
            return {"success": True, "season": current_season().value}

        if season and category:
            dishes = filter_by_category_and_season(None, category, season)
        elif season:
            dishes = filter_by_season(None, season)
        else:
            dishes = all_dishes()
        return {
            "success": True,
            "dishes": [
                d.model_dump(by_alias=True, mode="json")
                for d in dishes[: DEFAULT_LIMITS.dishes]
            ],
        }
    except Exception:
        logger.exception("Seasonal info lookup failed for action=%s", action)
        raise _internal_error("Có lỗi xảy ra khi lấy thông tin theo mùa.")


# ── Nutrition analysis ───────────────────────────────────────────────────


@app.post("/api/nutrition-analysis", response_model=NutritionAnalysisResponse)
def nutrition_analysis(body: NutritionAnalysisRequest) -> NutritionAnalysisResponse:
    if not body.recipe:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Recipe is required",
                "message": "Vui lòng cung cấp công thức món ăn.",
            },
        )

    try:
        dish = calculate_dish_nutrition(body.recipe)
    except Exception:
        logger.exception("Nutrition calculation failed")
        raise _internal_error("Có lỗi xảy ra khi phân tích dinh dưỡng.")

    if dish is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Unable to calculate nutrition",
                "message": "Không thể tính toán dinh dưỡng cho công thức này",
            },
        )

    try:
        if body.dish_name:
            dish.dish_name = body.dish_name

        facts = dish.nutrition
        return NutritionAnalysisResponse(
            nutrition=dish,
            health_score=calculate_health_score(facts),
            recommendations=generate_recommendations(facts),
            analysis=NutritionBreakdown(
                calories=facts.calories,
                protein=facts.protein,
                carbs=facts.carbs,
                fat=facts.fat,
                fiber=facts.fiber,
                sodium=facts.sodium,
                vitamins=facts.vitamins,
                minerals=facts.minerals,
            ),
        )
    except Exception:
        logger.exception("Nutrition scoring failed for %s", dish.dish_name)
        raise _internal_error("Có lỗi xảy ra khi phân tích dinh dưỡng.")


@app.get("/api/nutrition-analysis/ingredients", response_model=IngredientListResponse)
def ingredients(category: str | None = Query(default=None)) -> IngredientListResponse:
    try:
        return IngredientListResponse(ingredients=list_ingredients(category))
    except Exception:
        logger.exception("Ingredient listing failed for category=%s", category)
        raise _internal_error("Có lỗi xảy ra khi lấy danh sách nguyên liệu.")


@app.post("/api/nutrition-analysis/meal-plan", response_model=MealPlanResponse)
def meal_plan_analysis(body: MealPlanRequest) -> MealPlanResponse:
    if not body.days:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Meal plan is required",
                "message": "Vui lòng cung cấp kế hoạch bữa ăn.",
            },
        )

    try:
        analysis = analyze_meal_plan(body.days)
        return MealPlanResponse(**analysis.model_dump())
    except Exception:
        logger.exception("Meal plan analysis failed")
        raise _internal_error("Có lỗi xảy ra khi phân tích kế hoạch bữa ăn.")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("menu_api.app:app", host="0.0.0.0", port=8000)
