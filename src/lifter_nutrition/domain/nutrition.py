"""Nutrition constants and derived macro targets."""

from dataclasses import dataclass

PROTEIN_PERCENT = 30
CARB_PERCENT = 40
FAT_PERCENT = 30

CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_CARBS = 4
CALORIES_PER_GRAM_FAT = 9

DAYS_PER_WEEK = 7

MACRO_ROW_LABELS = ("Protein", "Carbs", "Fats")


@dataclass(frozen=True)
class MacroTargets:
    """Daily, per-meal and weekly macro grams for one profile."""

    daily_protein_g: int
    daily_carb_g: int
    daily_fat_g: int
    protein_per_meal_g: int
    carbs_per_meal_g: int
    fats_per_meal_g: int
    weekly_protein_g: int
    weekly_carb_g: int
    weekly_fat_g: int
    weekly_calorie_target: int

    @property
    def daily_protein_calories(self) -> int:
        return self.daily_protein_g * CALORIES_PER_GRAM_PROTEIN

    @property
    def daily_carb_calories(self) -> int:
        return self.daily_carb_g * CALORIES_PER_GRAM_CARBS

    @property
    def daily_fat_calories(self) -> int:
        return self.daily_fat_g * CALORIES_PER_GRAM_FAT


@dataclass(frozen=True)
class MacrosPerMealTable:
    """Per-meal grams by macro (rows) and day (columns)."""

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if len(self.rows) != len(MACRO_ROW_LABELS):
            raise ValueError("expected one row per macro")
        if any(len(row) != DAYS_PER_WEEK for row in self.rows):
            raise ValueError(f"each row must have {DAYS_PER_WEEK} days")

    def labelled_rows(self) -> list[tuple[str, tuple[int, ...]]]:
        """Return rows paired with their macro label."""
        return list(zip(MACRO_ROW_LABELS, self.rows, strict=True))
