"""Domain models for the weekly calorie log and daily sessions."""

from dataclasses import dataclass

from lifter_nutrition.domain.nutrition import DAYS_PER_WEEK

DAY_LABELS = tuple(f"Day {day}" for day in range(1, DAYS_PER_WEEK + 1))


@dataclass(frozen=True)
class DailyCalorieLog:
    """Actual calories eaten on each day of the week, in day order."""

    calories: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.calories) != DAYS_PER_WEEK:
            raise ValueError(f"expected {DAYS_PER_WEEK} daily entries")
        if any(value < 0 for value in self.calories):
            raise ValueError("daily calories must be nonnegative")

    @property
    def total(self) -> int:
        return sum(self.calories)


@dataclass(frozen=True)
class NutritionSession:
    """One day of the week with its targets and outcome."""

    day_label: str
    actual_calories: int
    target_protein_g: int
    target_carb_g: int
    target_fat_g: int
    met_calorie_goal: bool


@dataclass(frozen=True)
class WeeklySessionLog:
    """Seven nutrition sessions, Day 1 through Day 7."""

    sessions: tuple[NutritionSession, ...]

    def __post_init__(self) -> None:
        if len(self.sessions) != DAYS_PER_WEEK:
            raise ValueError(f"expected {DAYS_PER_WEEK} sessions")

    @property
    def days_goal_met(self) -> int:
        return sum(1 for session in self.sessions if session.met_calorie_goal)
