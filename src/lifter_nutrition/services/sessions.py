"""Weekly session building and the per-run session aggregate."""

import logging
from dataclasses import dataclass

from lifter_nutrition.domain.nutrition import MacrosPerMealTable, MacroTargets
from lifter_nutrition.domain.profile import UserProfile
from lifter_nutrition.domain.sessions import (
    DAY_LABELS,
    DailyCalorieLog,
    NutritionSession,
    WeeklySessionLog,
)
from lifter_nutrition.services.macros import (
    build_macros_per_meal_table,
    compute_macro_targets,
)

_logger = logging.getLogger(__name__)


def build_weekly_sessions(
    calorie_log: DailyCalorieLog,
    targets: MacroTargets,
    daily_calorie_target: int,
) -> WeeklySessionLog:
    """Create one session per logged day with the shared daily targets."""
    sessions = tuple(
        NutritionSession(
            day_label=label,
            actual_calories=calories,
            target_protein_g=targets.daily_protein_g,
            target_carb_g=targets.daily_carb_g,
            target_fat_g=targets.daily_fat_g,
            met_calorie_goal=calories <= daily_calorie_target,
        )
        for label, calories in zip(DAY_LABELS, calorie_log.calories, strict=True)
    )
    weekly = WeeklySessionLog(sessions=sessions)
    _logger.debug(
        "Weekly sessions built: goal met on %s of %s days",
        weekly.days_goal_met,
        len(sessions),
    )
    return weekly


@dataclass(frozen=True)
class TrackerSession:
    """Everything derived from one round of user input."""

    profile: UserProfile
    targets: MacroTargets
    calorie_log: DailyCalorieLog
    weekly_sessions: WeeklySessionLog
    macros_per_meal: MacrosPerMealTable


@dataclass
class SessionService:
    """Derive a complete tracker session from collected inputs."""

    def start(
        self, profile: UserProfile, calorie_log: DailyCalorieLog
    ) -> TrackerSession:
        """Compute targets, weekly sessions and the per-meal grid together."""
        targets = compute_macro_targets(profile)
        session = TrackerSession(
            profile=profile,
            targets=targets,
            calorie_log=calorie_log,
            weekly_sessions=build_weekly_sessions(
                calorie_log, targets, profile.daily_calorie_target
            ),
            macros_per_meal=build_macros_per_meal_table(targets),
        )
        _logger.debug("Session started for %s", profile.name)
        return session
