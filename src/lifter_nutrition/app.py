"""Interactive session loop and menu dispatch."""

import logging
from dataclasses import dataclass

from lifter_nutrition.adapters.console import ERROR_STYLE, SUB_HEADING_STYLE, Console
from lifter_nutrition.menu_commands import MenuAction
from lifter_nutrition.services.intake import IntakeService
from lifter_nutrition.services.reports import ReportService
from lifter_nutrition.services.sessions import SessionService, TrackerSession
from lifter_nutrition.views import SessionViews

FAREWELL = "Program ended. Have a great day!"

_logger = logging.getLogger(__name__)


@dataclass
class TrackerApp:
    """Runs sessions until the user chooses to exit."""

    console: Console
    intake_service: IntakeService
    session_service: SessionService
    report_service: ReportService
    views: SessionViews

    def run(self) -> None:
        """Collect inputs, then serve the menu; restart replaces the session."""
        while True:
            session = self.start_session()
            if self.serve_menu(session) is MenuAction.EXIT:
                break
        self.console.show(f"\n{FAREWELL}")

    def start_session(self) -> TrackerSession:
        self.views.intro_banner()
        profile = self.intake_service.collect_profile()
        calorie_log = self.intake_service.collect_calorie_log()
        return self.session_service.start(profile, calorie_log)

    def serve_menu(self, session: TrackerSession) -> MenuAction:
        """Dispatch menu choices until a restart or exit is chosen."""
        while True:
            self.views.menu()
            action = self.read_choice()
            if action is None:
                continue
            _logger.debug("Menu action: %s", action.name)
            self.dispatch(action, session)
            if action in {MenuAction.NEW_SESSION, MenuAction.EXIT}:
                return action

    def read_choice(self) -> MenuAction | None:
        """Read a menu number, reporting invalid entries."""
        last = len(MenuAction)
        raw = self.console.ask("Enter your choice: ")
        try:
            number = int(raw.strip())
        except ValueError:
            self.console.show(
                f"Invalid choice. Please enter a number from 1 to {last}.\n",
                style=ERROR_STYLE,
            )
            return None
        action = MenuAction.from_number(number)
        if action is None:
            self.console.show(
                f"Invalid choice. Please select 1-{last}.\n", style=ERROR_STYLE
            )
        return action

    def dispatch(self, action: MenuAction, session: TrackerSession) -> None:
        match action:
            case MenuAction.DAILY_MACROS:
                self.views.daily_macros(session)
            case MenuAction.REPORT:
                self.generate_report(session)
            case MenuAction.NUTRITION_CHECK:
                self.views.nutrition_check(session)
            case MenuAction.CALORIE_LOG:
                self.views.weekly_calorie_log(session)
            case MenuAction.WEEKLY_SESSIONS:
                self.views.weekly_sessions(session)
            case MenuAction.MACROS_PER_MEAL:
                self.views.macros_per_meal(session)
            case MenuAction.NEW_SESSION:
                self.console.show(
                    "Starting a new session...\n", style=SUB_HEADING_STYLE
                )
            case MenuAction.EXIT:
                self.console.show(
                    "Thanks for using the program! Keep lifting strong!",
                    style=SUB_HEADING_STYLE,
                )
                self.views.rule(SUB_HEADING_STYLE)

    def generate_report(self, session: TrackerSession) -> None:
        """Write the report; a failed write is reported and the menu resumes."""
        location = self.report_service.location
        self.views.rule(SUB_HEADING_STYLE)
        self.console.show(
            "You chose to generate a report of your suggested "
            "daily and weekly macros!\n"
            f"Open '{location}' to view, save, or print it.\n",
            style=SUB_HEADING_STYLE,
        )
        try:
            self.report_service.write_report(session)
        except OSError as exc:
            _logger.warning("Failed to write report to %s: %s", location, exc)
            self.console.show(f"Error: Unable to open {location}\n", style=ERROR_STYLE)
            return
        self.console.show(
            f"Report successfully generated: {location}\n", style=SUB_HEADING_STYLE
        )
