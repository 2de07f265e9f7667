"""Allow running Countdown as a module: python -m countdown."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .settings import Settings, load_settings
from .app import CountdownApp


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def bootstrap() -> Settings:
    """Set up logging, then load settings and apply their log level.

    Logging is configured with the default level first so warnings raised
    while reading the settings file already use the app's format.
    """
    configure_logging(Settings().log_level)
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


def main() -> None:
    settings = bootstrap()

    app = QApplication(sys.argv)
    app.setApplicationName("Countdown")
    app.setOrganizationName("Countdown")

    window = CountdownApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
