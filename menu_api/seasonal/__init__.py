"""
Seasonal recommendation package.

Responsibilities:
- Hold the static catalog of Vietnamese dishes tagged by season, weather
  and temperature range.
- Resolve a weather context (caller-supplied or estimated from the season).
- Filter the catalog by weather, season, temperature and health condition.
- Produce templated tips for the resolved context.
"""
