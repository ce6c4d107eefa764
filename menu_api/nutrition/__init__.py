"""
Nutrition analysis package.

Responsibilities:
- Hold the static ingredient nutrition table (per kg / bottle / piece, VND prices).
- Turn a recipe into per-serving nutrition, cost, timing and difficulty.
- Score a nutrient vector (0-100) and produce improvement tips.
- Summarise multi-day meal plans.
"""
