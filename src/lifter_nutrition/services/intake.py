"""Collect validated user input through the console."""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from lifter_nutrition.adapters.console import ERROR_STYLE, Console
from lifter_nutrition.domain.nutrition import DAYS_PER_WEEK
from lifter_nutrition.domain.profile import Goal, UserProfile
from lifter_nutrition.domain.sessions import DailyCalorieLog

T = TypeVar("T")

GOAL_MENU = (
    "Select your primary goal:\n"
    "  1. Fat loss\n"
    "  2. Maintenance\n"
    "  3. Muscle gain\n"
)


def acquire(
    console: Console,
    prompt: str,
    parse: Callable[[str], T],
    accept: Callable[[T], bool],
    error_text: str,
) -> T:
    """Prompt until ``parse`` succeeds and ``accept`` approves the value.

    ``parse`` signals malformed input by raising ``ValueError``. Every
    failed attempt re-prompts with ``error_text`` in the error style.
    """
    raw = console.ask(prompt)
    while True:
        try:
            value = parse(raw)
        except ValueError:
            pass
        else:
            if accept(value):
                return value
        raw = console.ask(error_text, style=ERROR_STYLE)


def _parse_text(raw: str) -> str:
    return raw.strip()


def _parse_int(raw: str) -> int:
    return int(raw.strip())


def _parse_float(raw: str) -> float:
    return float(raw.strip())


def _is_nonnegative_number(value: float) -> bool:
    return math.isfinite(value) and value >= 0


@dataclass
class IntakeService:
    """Gathers a profile and a week of calories from the user."""

    console: Console

    def collect_profile(self) -> UserProfile:
        """Ask for every profile field, re-prompting on invalid answers."""
        name = self._text("What is your name? ")
        self.console.show(f"Hi {name}!\n")
        favorite_protein = self._text(
            "What is your favorite vegetarian protein source? "
        )
        daily_calorie_target = self._positive_int(
            "How many calories are you targeting each day? "
        )
        meals_per_day = self._positive_int("How many meals do you eat per day? ")
        weekly_workout_hours = acquire(
            self.console,
            "How many hours per week do you weightlift? ",
            _parse_float,
            _is_nonnegative_number,
            "That is not a valid answer. Please enter a nonnegative number: ",
        )
        goal = self.collect_goal()
        return UserProfile(
            name=name,
            favorite_protein=favorite_protein,
            daily_calorie_target=daily_calorie_target,
            meals_per_day=meals_per_day,
            weekly_workout_hours=weekly_workout_hours,
            goal=goal,
        )

    def collect_goal(self) -> Goal:
        """Map a 1-3 selection onto a goal."""
        self.console.show(GOAL_MENU)
        choice = acquire(
            self.console,
            "Enter 1, 2, or 3: ",
            _parse_int,
            lambda value: value in {goal.value for goal in Goal},
            "That is not a valid choice. Please enter 1, 2, or 3: ",
        )
        return Goal(choice)

    def collect_calorie_log(self) -> DailyCalorieLog:
        """Ask for actual calories on each day of the week."""
        self.console.show(
            "Now let's log your actual calories for each day this week.\n"
            "(Enter a nonnegative number for each day.)\n"
        )
        calories = tuple(
            acquire(
                self.console,
                f"Enter your total calories for day {day}: ",
                _parse_int,
                lambda value: value >= 0,
                f"Please enter a nonnegative number for day {day}: ",
            )
            for day in range(1, DAYS_PER_WEEK + 1)
        )
        self.console.show("Thank you! Your weekly calorie log has been recorded.\n")
        return DailyCalorieLog(calories=calories)

    def _text(self, prompt: str) -> str:
        return acquire(
            self.console,
            prompt,
            _parse_text,
            bool,
            "That is not a valid answer. Please try again: ",
        )

    def _positive_int(self, prompt: str) -> int:
        return acquire(
            self.console,
            prompt,
            _parse_int,
            lambda value: value > 0,
            "That is not a valid answer. Please enter a positive number: ",
        )
