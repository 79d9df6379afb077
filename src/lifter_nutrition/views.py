"""Console views for each menu action."""

from dataclasses import dataclass

from rich.table import Table

from lifter_nutrition.adapters.console import (
    HEADER_STYLE,
    RECIPE_STYLE,
    SUB_HEADING_STYLE,
    Console,
)
from lifter_nutrition.domain.nutrition import DAYS_PER_WEEK
from lifter_nutrition.formatting import dot_leader, format_hours, section_rule
from lifter_nutrition.menu_commands import menu_lines
from lifter_nutrition.services.guidance import evaluate_nutrition, meal_table_tip
from lifter_nutrition.services.sessions import TrackerSession
from lifter_nutrition.services.stats import summarize_week

SMOOTHIE_RECIPE = (
    "Oatmeal Smoothie Recipe:\n"
    "- 1/4 cup rolled oats\n"
    "- 2 tbsp cocoa powder\n"
    "- 1/4 cup protein powder\n"
    "- 1 tbsp maple syrup\n"
    "- 1 tbsp chia seeds\n"
    "- 1 tbsp peanut butter\n"
    "- 3/4 cup almond milk\n\n"
    "Blend all ingredients until smooth.\n"
    "Protein: 30g | Carbs: 37g | Fat: 13g\n"
)

NO_CALORIE_DATA = "No calorie data entered yet."


@dataclass
class SessionViews:
    """Render tracker screens to a console."""

    console: Console
    width: int = 75

    def rule(self, style: str | None = None) -> None:
        self.console.show(section_rule(self.width), style=style)

    def intro_banner(self) -> None:
        self.rule(HEADER_STYLE)
        self.console.show(
            "      Welcome to the Vegetarian Nutrition for Weightlifters Program!",
            style=HEADER_STYLE,
        )
        self.rule(HEADER_STYLE)
        self.console.show("\nLet's learn more about you!\n", style=HEADER_STYLE)

    def menu(self) -> None:
        self.rule(HEADER_STYLE)
        self.console.show("\n".join(menu_lines()) + "\n", style=HEADER_STYLE)

    def daily_macros(self, session: TrackerSession) -> None:
        """Show the profile echo, daily macros and per-meal targets."""
        profile = session.profile
        targets = session.targets
        self.rule(SUB_HEADING_STYLE)
        self.console.show(
            "You chose to view your suggested daily macros!\n",
            style=SUB_HEADING_STYLE,
        )
        lines = [
            "Here is the information you provided:",
            dot_leader("Favorite protein source: ", profile.favorite_protein),
            dot_leader("Daily calorie target: ", profile.daily_calorie_target),
            dot_leader("Meals per day: ", profile.meals_per_day),
            dot_leader(
                "Weekly workout hours: ", format_hours(profile.weekly_workout_hours)
            ),
            "",
            "Suggested daily macros:",
            dot_leader("Protein: ", f"{targets.daily_protein_g} grams"),
            dot_leader("Carbs: ", f"{targets.daily_carb_g} grams"),
            dot_leader("Fats: ", f"{targets.daily_fat_g} grams"),
            "",
            "Per meal macro targets:",
            dot_leader("Protein grams per meal: ", targets.protein_per_meal_g),
            dot_leader("Carbs grams per meal: ", targets.carbs_per_meal_g),
            dot_leader("Fats grams per meal: ", targets.fats_per_meal_g),
        ]
        self.console.show("\n".join(lines))
        self.rule(SUB_HEADING_STYLE)
        self.console.show(
            f"Keep fueling with {profile.favorite_protein} to hit "
            f"{targets.daily_protein_g} grams of protein daily!\n"
            f"Remember your {format_hours(profile.weekly_workout_hours)} hours "
            "of weightlifting per week...\n"
            f"Keep lifting heavy, {profile.name}!\n",
            style=SUB_HEADING_STYLE,
        )

    def nutrition_check(self, session: TrackerSession) -> None:
        """Show calorie, goal and meal frequency guidance plus the recipe."""
        check = evaluate_nutrition(session.profile)
        self.rule(SUB_HEADING_STYLE)
        self.console.show(
            "Checking your calorie intake vs activity level...\n",
            style=SUB_HEADING_STYLE,
        )
        self.console.show(f"{check.calories.value}\n")
        self.console.show(f"{check.goal.heading}\n{check.goal.advice}\n")
        self.console.show(f"{check.meal_frequency.value} Try the smoothie below!\n")
        self.console.show(SMOOTHIE_RECIPE, style=RECIPE_STYLE)
        self.rule(SUB_HEADING_STYLE)

    def weekly_calorie_log(self, session: TrackerSession) -> None:
        """Show daily calories with the weekly total, average and maximum."""
        self.rule(SUB_HEADING_STYLE)
        self.console.show("Your Weekly Calorie Log:\n", style=SUB_HEADING_STYLE)
        calories = session.calorie_log.calories
        # A zero on day 1 is read as "nothing entered" for display only.
        if calories[0] == 0:
            self.console.show(NO_CALORIE_DATA)
            return
        table = Table(box=None, header_style="bold")
        table.add_column("Day", justify="left", min_width=10)
        table.add_column("Calories", justify="right", min_width=15)
        for day, value in enumerate(calories, start=1):
            table.add_row(str(day), str(value))
        self.console.show(table)
        summary = summarize_week(session.calorie_log)
        self.console.show(
            f"\nTotal calories this week: {summary.total}\n"
            f"Average daily calories this week: {int(summary.average)}\n"
            f"Highest daily calories this week: {summary.highest}\n"
        )
        self.rule(SUB_HEADING_STYLE)

    def weekly_sessions(self, session: TrackerSession) -> None:
        """Show one row per day with targets and whether the goal was met."""
        self.rule(SUB_HEADING_STYLE)
        self.console.show("Your Weekly Nutrition Summary:\n", style=SUB_HEADING_STYLE)
        table = Table(box=None, header_style="bold")
        for header in ("Day", "Calories", "Protein", "Carbs", "Fats", "Calorie Goal?"):
            table.add_column(header, justify="left")
        for day in session.weekly_sessions.sessions:
            table.add_row(
                day.day_label,
                str(day.actual_calories),
                str(day.target_protein_g),
                str(day.target_carb_g),
                str(day.target_fat_g),
                "Yes" if day.met_calorie_goal else "No",
            )
        self.console.show(table)
        self.console.show("")
        self.rule(SUB_HEADING_STYLE)

    def macros_per_meal(self, session: TrackerSession) -> None:
        """Show the macro by day grid of per-meal grams and a goal tip."""
        self.rule(SUB_HEADING_STYLE)
        self.console.show(
            "Per-Meal Macros by Day (grams per meal)\n\n"
            "All values below represent how your daily macros are\n"
            "distributed evenly across each meal.\n",
            style=SUB_HEADING_STYLE,
        )
        table = Table(box=None, header_style="bold")
        table.add_column("Macro", justify="left", min_width=10)
        for day in range(1, DAYS_PER_WEEK + 1):
            table.add_column(str(day), justify="left", min_width=6)
        for label, row in session.macros_per_meal.labelled_rows():
            table.add_row(label, *(str(value) for value in row))
        self.console.show(table)
        self.console.show("")
        self.console.show(meal_table_tip(session.profile.goal))
        self.console.show(
            f"\nBased on {session.profile.meals_per_day} meals per day.\n"
        )
