"""Guidance categories and their user-facing wording."""

from dataclasses import dataclass
from enum import Enum


class MealFrequencyGuidance(Enum):
    """Meal frequency versus training volume."""

    EXCELLENT = "Excellent meal frequency for muscle recovery!"
    EAT_MORE_OFTEN = "Consider eating more often to support your training."
    POSSIBLY_OVEREATING = (
        "You might be eating more than necessary, "
        "ensure portion sizes are balanced."
    )
    APPROPRIATE = "Your meal frequency seems appropriate for your activity level."


class CalorieGuidance(Enum):
    """Calorie target versus training volume."""

    SUFFICIENT = "Your intake is sufficient for a high activity week. Keep it up!"
    DECENT = (
        "Your intake is decent for your activity level, "
        "but you could increase protein slightly."
    )
    UNDER_FUELING = (
        "You might be under fueling. Consider adding extra calories per day."
    )
    POSSIBLY_EXCESSIVE = (
        "You may be eating more than your activity requires. "
        "Consider slightly reducing calories per day."
    )
    BALANCED = "Your calorie intake seems balanced for your activity level."


@dataclass(frozen=True)
class GoalGuidance:
    """Goal heading and advice shown with the nutrition check."""

    heading: str
    advice: str
