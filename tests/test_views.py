"""Tests for console views."""

from lifter_nutrition.adapters.console import RECIPE_STYLE
from lifter_nutrition.domain.profile import Goal
from lifter_nutrition.services.sessions import TrackerSession
from lifter_nutrition.views import NO_CALORIE_DATA, SMOOTHIE_RECIPE, SessionViews
from tests.conftest import ScriptedConsole, make_profile, make_session


def test_daily_macros_echoes_inputs_and_targets(session: TrackerSession) -> None:
    console = ScriptedConsole()

    SessionViews(console).daily_macros(session)

    assert "Favorite protein source: ".ljust(50, ".") + "tofu" in console.output
    assert "Weekly workout hours: ".ljust(50, ".") + "5\n" in console.output
    assert "Protein: ".ljust(50, ".") + "150 grams" in console.output
    assert "Fats grams per meal: ".ljust(50, ".") + "16" in console.output
    assert "Keep lifting heavy, Ana!" in console.output


def test_nutrition_check_shows_guidance_and_recipe() -> None:
    console = ScriptedConsole()
    session = make_session(
        make_profile(daily_calorie_target=2400, meals_per_day=6, goal=Goal.MAINTENANCE)
    )

    SessionViews(console).nutrition_check(session)

    assert "sufficient for a high activity week" in console.output
    assert "Goal: Maintenance" in console.output
    assert "Excellent meal frequency for muscle recovery!" in console.output
    assert (SMOOTHIE_RECIPE, RECIPE_STYLE) in console.messages


def test_weekly_calorie_log_shows_average_and_highest(session: TrackerSession) -> None:
    console = ScriptedConsole()

    SessionViews(console).weekly_calorie_log(session)

    assert "Average daily calories this week: 1700" in console.output
    assert "Highest daily calories this week: 2000" in console.output
    assert "Total calories this week: 11900" in console.output


def test_weekly_calorie_log_truncates_average() -> None:
    console = ScriptedConsole()

    SessionViews(console).weekly_calorie_log(
        make_session(calories=(1, 2, 2, 2, 2, 2, 2))
    )

    assert "Average daily calories this week: 1\n" in console.output


def test_zero_on_day_one_is_shown_as_no_data_only_in_the_log_view() -> None:
    session = make_session(calories=(0, 1600, 1800, 2000, 1900, 1700, 1500))
    log_console = ScriptedConsole()
    sessions_console = ScriptedConsole()

    SessionViews(log_console).weekly_calorie_log(session)
    SessionViews(sessions_console).weekly_sessions(session)

    assert NO_CALORIE_DATA in log_console.output
    assert "Average daily calories" not in log_console.output
    assert session.weekly_sessions.sessions[0].actual_calories == 0
    assert session.weekly_sessions.sessions[0].met_calorie_goal is True
    day_one = next(
        line for line in sessions_console.output.splitlines() if "Day 1" in line
    )
    assert day_one.split() == ["Day", "1", "0", "150", "200", "66", "Yes"]


def test_weekly_sessions_marks_goal_met() -> None:
    console = ScriptedConsole()
    session = make_session(calories=(2001, 2000, 1, 1, 1, 1, 1))

    SessionViews(console).weekly_sessions(session)

    rows = {
        parts[1]: parts[-1]
        for parts in (line.split() for line in console.output.splitlines())
        if parts[:1] == ["Day"] and parts[1].isdigit()
    }
    assert "Calorie Goal?" in console.output
    assert rows["1"] == "No"
    assert rows["2"] == "Yes"


def test_macros_per_meal_grid_and_goal_tip(session: TrackerSession) -> None:
    console = ScriptedConsole()

    SessionViews(console).macros_per_meal(session)

    rows = {
        line.split()[0]: line.split()[1:]
        for line in console.output.splitlines()
        if line.split() and line.split()[0] in {"Protein", "Carbs", "Fats"}
    }
    assert rows == {
        "Protein": ["37"] * 7,
        "Carbs": ["50"] * 7,
        "Fats": ["16"] * 7,
    }
    assert "Muscle Gain Tip:" in console.output
    assert "Based on 4 meals per day." in console.output


def test_menu_lists_all_actions() -> None:
    console = ScriptedConsole()

    SessionViews(console, width=20).menu()

    assert "*" * 20 in console.output
    assert "1. View Daily Macro Targets" in console.output
    assert "8. Exit Program" in console.output
