"""Domain models for the lifter's profile."""

import math
from dataclasses import dataclass
from enum import Enum


class Goal(Enum):
    """Primary training goal, valued by its menu selector."""

    FAT_LOSS = 1
    MAINTENANCE = 2
    MUSCLE_GAIN = 3

    @property
    def label(self) -> str:
        """Human readable goal name."""
        return _GOAL_LABELS[self]


_GOAL_LABELS = {
    Goal.FAT_LOSS: "Fat loss",
    Goal.MAINTENANCE: "Maintenance",
    Goal.MUSCLE_GAIN: "Muscle gain",
}


@dataclass(frozen=True)
class UserProfile:
    """Inputs collected once per session."""

    name: str
    favorite_protein: str
    daily_calorie_target: int
    meals_per_day: int
    weekly_workout_hours: float
    goal: Goal

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.favorite_protein:
            raise ValueError("favorite_protein must not be empty")
        if self.daily_calorie_target <= 0:
            raise ValueError("daily_calorie_target must be positive")
        if self.meals_per_day <= 0:
            raise ValueError("meals_per_day must be positive")
        if not math.isfinite(self.weekly_workout_hours) or (
            self.weekly_workout_hours < 0
        ):
            raise ValueError("weekly_workout_hours must be a nonnegative number")
