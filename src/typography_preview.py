"""
Application entry point for the DynamicType preview window.
"""

import logging
import signal
import sys

from PyQt6.QtWidgets import QApplication, QMessageBox

from dynamictype import constants
from dynamictype.core.font_map import FontMap
from dynamictype.core.notifications import SizeCategoryMonitor
from dynamictype.core.point_sizes import make_font_mapping
from dynamictype.utils.config import ConfigManager
from dynamictype.views.preview import TypographyPreviewWindow


def main() -> int:
    """
    Main entry point for the preview application.

    Orchestrates the startup sequence:
    1. Sets up logging.
    2. Loads configuration and re-applies its log level.
    3. Creates the size category monitor and a font map for the configured family.
    4. Shows the preview window and runs the event loop.

    Returns:
        An integer exit code.
    """
    logger = logging.getLogger(f"{constants.app.APP_NAME}.Main")

    # The QApplication must exist before any fonts are queried from the platform.
    app = QApplication(sys.argv)

    try:
        ConfigManager.setup_logging()
        config = ConfigManager().load()
        ConfigManager.setup_logging(config["log_level"])

        monitor = SizeCategoryMonitor(
            initial=config["size_category"],
            follow_application_font=config["follow_application_font"],
        )
        font_map = FontMap(make_font_mapping(family=config["font_family"]))

        window = TypographyPreviewWindow(monitor=monitor, font_map=font_map)

        signal.signal(signal.SIGINT, lambda s, f: QApplication.instance().quit())
        signal.signal(signal.SIGTERM, lambda s, f: QApplication.instance().quit())

        window.show()
        logger.info("%s %s started.", constants.app.APP_NAME, constants.app.VERSION)
        return app.exec()

    except Exception as e:
        # Global catch-all for any critical error during startup.
        logger.critical("A critical error occurred during startup: %s", e, exc_info=True)
        QMessageBox.critical(None, "Application Error", f"A critical error occurred and {constants.app.APP_NAME} must close:\n\n{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
