"""Macro target calculation."""

import logging

from lifter_nutrition.domain.nutrition import (
    CALORIES_PER_GRAM_CARBS,
    CALORIES_PER_GRAM_FAT,
    CALORIES_PER_GRAM_PROTEIN,
    CARB_PERCENT,
    DAYS_PER_WEEK,
    FAT_PERCENT,
    PROTEIN_PERCENT,
    MacrosPerMealTable,
    MacroTargets,
)
from lifter_nutrition.domain.profile import UserProfile

_logger = logging.getLogger(__name__)


def compute_macro_targets(profile: UserProfile) -> MacroTargets:
    """Split calories 30/40/30 into protein, carb and fat grams.

    Grams are truncated toward zero, so the macros never add up to more
    calories than the target. Per-meal values use integer division and may
    be zero when there are more meals than grams.
    """
    calories = profile.daily_calorie_target
    meals = profile.meals_per_day
    protein_g = _grams(calories, PROTEIN_PERCENT, CALORIES_PER_GRAM_PROTEIN)
    carb_g = _grams(calories, CARB_PERCENT, CALORIES_PER_GRAM_CARBS)
    fat_g = _grams(calories, FAT_PERCENT, CALORIES_PER_GRAM_FAT)
    targets = MacroTargets(
        daily_protein_g=protein_g,
        daily_carb_g=carb_g,
        daily_fat_g=fat_g,
        protein_per_meal_g=protein_g // meals,
        carbs_per_meal_g=carb_g // meals,
        fats_per_meal_g=fat_g // meals,
        weekly_protein_g=protein_g * DAYS_PER_WEEK,
        weekly_carb_g=carb_g * DAYS_PER_WEEK,
        weekly_fat_g=fat_g * DAYS_PER_WEEK,
        weekly_calorie_target=calories * DAYS_PER_WEEK,
    )
    _logger.debug(
        "Macro targets: calories=%s meals=%s protein=%s carbs=%s fat=%s",
        calories,
        meals,
        protein_g,
        carb_g,
        fat_g,
    )
    return targets


def build_macros_per_meal_table(targets: MacroTargets) -> MacrosPerMealTable:
    """Broadcast the per-meal targets across every day of the week."""
    per_meal = (
        targets.protein_per_meal_g,
        targets.carbs_per_meal_g,
        targets.fats_per_meal_g,
    )
    return MacrosPerMealTable(
        rows=tuple((value,) * DAYS_PER_WEEK for value in per_meal)
    )


def _grams(calories: int, percent: int, calories_per_gram: int) -> int:
    return calories * percent // (100 * calories_per_gram)
