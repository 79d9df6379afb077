"""Statistics over the weekly calorie log."""

from collections.abc import Sequence
from dataclasses import dataclass

from lifter_nutrition.domain.sessions import DailyCalorieLog


@dataclass(frozen=True)
class WeeklyCalorieSummary:
    """Aggregated calories for the week."""

    total: int
    average: float
    highest: int


def compute_average(values: Sequence[int]) -> float:
    """Return the arithmetic mean without rounding."""
    if not values:
        raise ValueError("cannot average an empty sequence")
    return sum(values) / len(values)


def compute_max(values: Sequence[int]) -> int:
    """Return the largest value, seeded from the first element."""
    if not values:
        raise ValueError("cannot take the maximum of an empty sequence")
    highest = values[0]
    for value in values[1:]:
        if value > highest:
            highest = value
    return highest


def summarize_week(calorie_log: DailyCalorieLog) -> WeeklyCalorieSummary:
    """Return total, average and highest daily calories."""
    return WeeklyCalorieSummary(
        total=calorie_log.total,
        average=compute_average(calorie_log.calories),
        highest=compute_max(calorie_log.calories),
    )
