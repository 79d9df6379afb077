"""Tests for profile domain models."""

import math

import pytest

from lifter_nutrition.domain.profile import Goal
from tests.conftest import make_profile


def test_goal_values_match_menu_selectors() -> None:
    assert Goal(1) is Goal.FAT_LOSS
    assert Goal(2) is Goal.MAINTENANCE
    assert Goal(3) is Goal.MUSCLE_GAIN
    assert Goal.MUSCLE_GAIN.label == "Muscle gain"


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"favorite_protein": ""},
        {"daily_calorie_target": 0},
        {"meals_per_day": 0},
        {"meals_per_day": -2},
        {"weekly_workout_hours": -0.5},
        {"weekly_workout_hours": math.nan},
    ],
)
def test_profile_rejects_invalid_values(overrides: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        make_profile(**overrides)


def test_profile_accepts_zero_workout_hours() -> None:
    profile = make_profile(weekly_workout_hours=0.0)

    assert profile.weekly_workout_hours == 0.0
