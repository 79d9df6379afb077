"""Main menu configuration."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class MenuEntry:
    """Declarative menu entry definition."""

    number: int
    label: str


class MenuAction(Enum):
    """Enum of menu actions (single source of truth)."""

    DAILY_MACROS = MenuEntry(1, "View Daily Macro Targets")
    REPORT = MenuEntry(2, "Generate Full Nutrition Report")
    NUTRITION_CHECK = MenuEntry(3, "Nutrition Check & Recipe Unlock")
    CALORIE_LOG = MenuEntry(4, "View Weekly Calorie Log")
    WEEKLY_SESSIONS = MenuEntry(5, "View Weekly Nutrition Sessions")
    MACROS_PER_MEAL = MenuEntry(6, "View Macros Per Meal (2D Table)")
    NEW_SESSION = MenuEntry(7, "Start a New User Session")
    EXIT = MenuEntry(8, "Exit Program")

    @classmethod
    def from_number(cls, number: int) -> "MenuAction | None":
        """Return the action for a menu number, if any."""
        for action in cls:
            if action.value.number == number:
                return action
        return None


def menu_lines() -> list[str]:
    """Return the numbered menu lines in display order."""
    return [f"{action.value.number}. {action.value.label}" for action in MenuAction]

