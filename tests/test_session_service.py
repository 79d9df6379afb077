"""Tests for weekly sessions and the session aggregate."""

import pytest

from lifter_nutrition.domain.sessions import DailyCalorieLog
from lifter_nutrition.services.macros import compute_macro_targets
from lifter_nutrition.services.sessions import SessionService, build_weekly_sessions
from tests.conftest import WEEK_CALORIES, make_profile


def test_build_weekly_sessions_labels_days_and_copies_targets() -> None:
    targets = compute_macro_targets(make_profile())

    weekly = build_weekly_sessions(
        DailyCalorieLog(calories=WEEK_CALORIES), targets, daily_calorie_target=2000
    )

    assert [day.day_label for day in weekly.sessions] == [
        f"Day {number}" for number in range(1, 8)
    ]
    assert [day.actual_calories for day in weekly.sessions] == list(WEEK_CALORIES)
    for day in weekly.sessions:
        assert day.target_protein_g == targets.daily_protein_g
        assert day.target_carb_g == targets.daily_carb_g
        assert day.target_fat_g == targets.daily_fat_g


def test_met_calorie_goal_is_inclusive_of_target() -> None:
    targets = compute_macro_targets(make_profile())
    log = DailyCalorieLog(calories=(1950, 2000, 2001, 0, 2500, 1999, 2000))

    weekly = build_weekly_sessions(log, targets, daily_calorie_target=2000)

    assert [day.met_calorie_goal for day in weekly.sessions] == [
        True,
        True,
        False,
        True,
        False,
        True,
        True,
    ]
    assert weekly.days_goal_met == 5


def test_daily_calorie_log_requires_seven_nonnegative_days() -> None:
    with pytest.raises(ValueError):
        DailyCalorieLog(calories=(1, 2, 3, 4, 5, 6))
    with pytest.raises(ValueError):
        DailyCalorieLog(calories=(1, 2, 3, 4, 5, 6, -7))

    assert DailyCalorieLog(calories=WEEK_CALORIES).total == 11900


def test_start_derives_everything_from_the_inputs() -> None:
    profile = make_profile(daily_calorie_target=1800, meals_per_day=3)
    log = DailyCalorieLog(calories=WEEK_CALORIES)

    session = SessionService().start(profile, log)

    assert session.profile is profile
    assert session.calorie_log is log
    assert session.targets == compute_macro_targets(profile)
    assert session.weekly_sessions.sessions[3].met_calorie_goal is False
    assert session.macros_per_meal.rows[0] == (session.targets.protein_per_meal_g,) * 7


def test_new_session_replaces_previous_results() -> None:
    service = SessionService()
    log = DailyCalorieLog(calories=WEEK_CALORIES)

    first = service.start(make_profile(daily_calorie_target=2000), log)
    second = service.start(make_profile(daily_calorie_target=3000), log)

    assert second.targets.daily_protein_g == 225
    assert first.targets.daily_protein_g == 150
    assert all(day.met_calorie_goal for day in second.weekly_sessions.sessions)
