"""Rule-based guidance on meal frequency, calories and goals."""

from dataclasses import dataclass
from typing import assert_never

from lifter_nutrition.domain.guidance import (
    CalorieGuidance,
    GoalGuidance,
    MealFrequencyGuidance,
)
from lifter_nutrition.domain.nutrition import DAYS_PER_WEEK
from lifter_nutrition.domain.profile import Goal, UserProfile

ACTIVITY_HIGH_HOURS = 5.0
ACTIVITY_MEDIUM_HOURS = 3.0

CALORIES_EXCESS = 2500
CALORIES_HIGH = 2200
CALORIES_MEDIUM = 2000
CALORIES_LOW = 1800

MEALS_PER_DAY_HIGH = 6
MEALS_PER_DAY_MEDIUM = 4
MEALS_PER_WEEK_HIGH = MEALS_PER_DAY_HIGH * DAYS_PER_WEEK
MEALS_PER_WEEK_MEDIUM = MEALS_PER_DAY_MEDIUM * DAYS_PER_WEEK


@dataclass(frozen=True)
class NutritionCheck:
    """Combined result of the activity and goal evaluations."""

    calories: CalorieGuidance
    goal: GoalGuidance
    meal_frequency: MealFrequencyGuidance


def evaluate_meal_frequency(
    meals_per_day: int, weekly_workout_hours: float
) -> MealFrequencyGuidance:
    """Classify weekly meal count against training hours.

    Rules are checked in order and the first match wins. Low meal counts
    with light training fall through to ``APPROPRIATE``.
    """
    meals_per_week = meals_per_day * DAYS_PER_WEEK
    if (
        MEALS_PER_WEEK_MEDIUM <= meals_per_week <= MEALS_PER_WEEK_HIGH
        and weekly_workout_hours >= ACTIVITY_HIGH_HOURS
    ):
        return MealFrequencyGuidance.EXCELLENT
    if (
        meals_per_week < MEALS_PER_WEEK_MEDIUM
        and weekly_workout_hours >= ACTIVITY_MEDIUM_HOURS
    ):
        return MealFrequencyGuidance.EAT_MORE_OFTEN
    if meals_per_week > MEALS_PER_WEEK_HIGH:
        return MealFrequencyGuidance.POSSIBLY_OVEREATING
    return MealFrequencyGuidance.APPROPRIATE


def evaluate_calorie_adequacy(
    daily_calorie_target: int, weekly_workout_hours: float
) -> CalorieGuidance:
    """Classify the daily calorie target against training hours."""
    if (
        weekly_workout_hours >= ACTIVITY_HIGH_HOURS
        and daily_calorie_target >= CALORIES_HIGH
    ):
        return CalorieGuidance.SUFFICIENT
    if (
        weekly_workout_hours >= ACTIVITY_MEDIUM_HOURS
        and daily_calorie_target >= CALORIES_MEDIUM
    ):
        return CalorieGuidance.DECENT
    if (
        weekly_workout_hours < ACTIVITY_MEDIUM_HOURS
        and daily_calorie_target < CALORIES_LOW
    ):
        return CalorieGuidance.UNDER_FUELING
    if (
        weekly_workout_hours < ACTIVITY_MEDIUM_HOURS
        and daily_calorie_target > CALORIES_EXCESS
    ):
        return CalorieGuidance.POSSIBLY_EXCESSIVE
    return CalorieGuidance.BALANCED


def goal_guidance(goal: Goal) -> GoalGuidance:
    """Return the goal heading and advice for the nutrition check."""
    match goal:
        case Goal.FAT_LOSS:
            advice = (
                "Aim for a small, sustainable calorie deficit and prioritize protein."
            )
        case Goal.MAINTENANCE:
            advice = "Keep your calorie intake steady and focus on consistency."
        case Goal.MUSCLE_GAIN:
            advice = (
                "Make sure you're in a slight calorie surplus "
                "and hitting your protein target."
            )
        case _:
            assert_never(goal)
    return GoalGuidance(heading=f"Goal: {goal.label}", advice=advice)


def meal_table_tip(goal: Goal) -> str:
    """Return the goal tip shown under the per-meal macro grid."""
    match goal:
        case Goal.FAT_LOSS:
            return (
                "Fat Loss Tip: Keep protein consistent at each meal\n"
                "to support muscle retention while in a calorie deficit."
            )
        case Goal.MAINTENANCE:
            return (
                "Maintenance Tip: These balanced macros support steady\n"
                "energy and recovery throughout the week."
            )
        case Goal.MUSCLE_GAIN:
            return (
                "Muscle Gain Tip: Try placing higher-carb meals around\n"
                "your workouts to support strength and recovery."
            )
        case _:
            assert_never(goal)


def evaluate_nutrition(profile: UserProfile) -> NutritionCheck:
    """Run every guidance rule for a profile."""
    return NutritionCheck(
        calories=evaluate_calorie_adequacy(
            profile.daily_calorie_target, profile.weekly_workout_hours
        ),
        goal=goal_guidance(profile.goal),
        meal_frequency=evaluate_meal_frequency(
            profile.meals_per_day, profile.weekly_workout_hours
        ),
    )
