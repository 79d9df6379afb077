"""Console entry point."""

from lifter_nutrition.app import FAREWELL
from lifter_nutrition.app_logging import configure_logging
from lifter_nutrition.config import Settings, parse_log_level
from lifter_nutrition.containers import AppContainer, build_container


def main(container: AppContainer | None = None) -> None:
    """Run the tracker until the user exits or input ends."""
    if container is None:
        settings = Settings()
        configure_logging(parse_log_level(settings.log_level))
        container = build_container(settings)
    try:
        container.app.run()
    except (EOFError, KeyboardInterrupt):
        container.console.show(f"\n{FAREWELL}")


if __name__ == "__main__":
    main()
