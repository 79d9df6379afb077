"""Shared test fixtures."""

import io
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from rich.console import Console as RichTerminal
from rich.console import RenderableType
from rich.text import Text

from lifter_nutrition.adapters.console import Console
from lifter_nutrition.adapters.file_report_sink import ReportSink
from lifter_nutrition.config import Settings
from lifter_nutrition.domain.profile import Goal, UserProfile
from lifter_nutrition.domain.sessions import DailyCalorieLog
from lifter_nutrition.services.sessions import SessionService, TrackerSession

WEEK_CALORIES = (1400, 1600, 1800, 2000, 1900, 1700, 1500)


@dataclass
class ScriptedConsole(Console):
    """Console that replays scripted answers and records what was shown."""

    inputs: list[str] = field(default_factory=list)
    prompts: list[tuple[str, str | None]] = field(default_factory=list)
    messages: list[tuple[str, str | None]] = field(default_factory=list)
    buffer: io.StringIO = field(default_factory=io.StringIO)
    terminal: RichTerminal = field(init=False)

    def __post_init__(self) -> None:
        self.terminal = RichTerminal(
            file=self.buffer, width=120, color_system=None, highlight=False
        )

    def show(self, renderable: RenderableType = "", style: str | None = None) -> None:
        if isinstance(renderable, str):
            self.messages.append((renderable, style))
            renderable = Text(renderable)
        self.terminal.print(renderable)

    def ask(self, prompt: str, style: str | None = None) -> str:
        self.prompts.append((prompt, style))
        self.terminal.print(Text(prompt), end="")
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@dataclass
class InMemoryReportSink(ReportSink):
    """Report sink that keeps every written report."""

    writes: list[str] = field(default_factory=list)

    @property
    def location(self) -> str:
        return "memory-report.txt"

    def write(self, text: str) -> None:
        self.writes.append(text)


@dataclass
class FailingReportSink(ReportSink):
    """Report sink whose destination can never be opened."""

    @property
    def location(self) -> str:
        return "locked/report.txt"

    def write(self, text: str) -> None:
        raise PermissionError(13, "Permission denied", self.location)


def make_profile(**overrides: object) -> UserProfile:
    values: dict[str, object] = {
        "name": "Ana",
        "favorite_protein": "tofu",
        "daily_calorie_target": 2000,
        "meals_per_day": 4,
        "weekly_workout_hours": 5.0,
        "goal": Goal.MUSCLE_GAIN,
    }
    values.update(overrides)
    return UserProfile(**values)


def make_session(
    profile: UserProfile | None = None, calories: tuple[int, ...] = WEEK_CALORIES
) -> TrackerSession:
    return SessionService().start(
        profile or make_profile(), DailyCalorieLog(calories=calories)
    )


def session_inputs(
    name: str = "Ana",
    calorie_target: int = 2000,
    meals: int = 4,
    hours: str = "5",
    goal: int = 3,
    calories: tuple[int, ...] = WEEK_CALORIES,
) -> list[str]:
    """Answers for one full round of intake prompts."""
    return [
        name,
        "tofu",
        str(calorie_target),
        str(meals),
        hours,
        str(goal),
        *(str(value) for value in calories),
    ]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(report_path=str(tmp_path / "report.txt"), log_level="DEBUG")


@pytest.fixture
def session() -> TrackerSession:
    return make_session()
