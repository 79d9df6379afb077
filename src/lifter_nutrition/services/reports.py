"""Plain-text nutrition report generation."""

import logging
from dataclasses import dataclass

from lifter_nutrition.adapters.file_report_sink import ReportSink
from lifter_nutrition.formatting import dot_leader, section_rule
from lifter_nutrition.services.sessions import TrackerSession

REPORT_TITLE = "Vegetarian Nutrition for Weightlifters Report"

_logger = logging.getLogger(__name__)


@dataclass
class ReportService:
    """Render a session report and hand it to a sink."""

    sink: ReportSink
    width: int = 75

    @property
    def location(self) -> str:
        return self.sink.location

    def render(self, session: TrackerSession) -> str:
        """Return the full report text for a session."""
        profile = session.profile
        targets = session.targets
        rule = section_rule(self.width)
        hours = f"{profile.weekly_workout_hours:.2f}"
        lines = [
            rule,
            REPORT_TITLE,
            rule,
            "",
            "Information you provided:",
            dot_leader("Favorite protein source: ", profile.favorite_protein),
            dot_leader("Daily calorie target: ", profile.daily_calorie_target),
            dot_leader("Weekly calorie target: ", targets.weekly_calorie_target),
            dot_leader("Meals per day: ", profile.meals_per_day),
            dot_leader("Weekly workout hours: ", hours),
            "",
            "Suggested weekly macros:",
            dot_leader("Protein: ", f"{targets.weekly_protein_g} grams"),
            dot_leader("Carbs: ", f"{targets.weekly_carb_g} grams"),
            dot_leader("Fats: ", f"{targets.weekly_fat_g} grams"),
            "",
            "Suggested total daily macros:",
            dot_leader(
                "Protein: ",
                f"{targets.daily_protein_g} grams "
                f"({targets.daily_protein_calories} cal)",
            ),
            dot_leader(
                "Carbs: ",
                f"{targets.daily_carb_g} grams ({targets.daily_carb_calories} cal)",
            ),
            dot_leader(
                "Fats: ",
                f"{targets.daily_fat_g} grams ({targets.daily_fat_calories} cal)",
            ),
            "",
            "Per meal macro targets:",
            dot_leader("Protein grams per meal: ", targets.protein_per_meal_g),
            dot_leader("Carbs grams per meal: ", targets.carbs_per_meal_g),
            dot_leader("Fats grams per meal: ", targets.fats_per_meal_g),
            "",
            rule,
            f"Keep fueling with {profile.favorite_protein} to hit "
            f"{targets.daily_protein_g} grams of protein daily!",
            f"Remember your {hours} hours of weightlifting per week...",
            f"Keep lifting heavy, {profile.name}!",
            "",
        ]
        return "\n".join(lines)

    def write_report(self, session: TrackerSession) -> str:
        """Write the report, returning where it went.

        Errors opening or writing the sink propagate to the caller.
        """
        self.sink.write(self.render(session))
        _logger.debug("Report written to %s", self.sink.location)
        return self.sink.location
