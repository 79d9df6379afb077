"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from lifter_nutrition.adapters.console import Console, RichConsole
from lifter_nutrition.adapters.file_report_sink import FileReportSink
from lifter_nutrition.app import TrackerApp
from lifter_nutrition.config import Settings
from lifter_nutrition.services.intake import IntakeService
from lifter_nutrition.services.reports import ReportService
from lifter_nutrition.services.sessions import SessionService
from lifter_nutrition.views import SessionViews


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    console: Console
    intake_service: IntakeService
    session_service: SessionService
    report_service: ReportService
    app: TrackerApp


def build_container(
    settings: Settings | None = None, console: Console | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_console = console or RichConsole.create()
    intake_service = IntakeService(resolved_console)
    session_service = SessionService()
    report_service = ReportService(
        sink=FileReportSink(Path(resolved_settings.report_path)),
        width=resolved_settings.console_width,
    )
    views = SessionViews(resolved_console, width=resolved_settings.console_width)
    app = TrackerApp(
        console=resolved_console,
        intake_service=intake_service,
        session_service=session_service,
        report_service=report_service,
        views=views,
    )
    return AppContainer(
        settings=resolved_settings,
        console=resolved_console,
        intake_service=intake_service,
        session_service=session_service,
        report_service=report_service,
        app=app,
    )
