"""
Meal planner recommendation backend.

Serves seasonal dish recommendations and recipe nutrition analysis for the
Vietnamese meal-planning web client.
"""
