"""Main entry point for the hadith overlay application."""

import sys

from PySide6.QtWidgets import QApplication

from hadith_overlay.coordinators import LayerPlacementManager, OverlayController
from hadith_overlay.io import HadithLoader, SettingsStore
from hadith_overlay.logger_config import configure_logging
from hadith_overlay.services import AppConfig, RefreshScheduler


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Resolve environment configuration and logging
    config = AppConfig()
    configure_logging(config.get_log_level(), config.get_log_dir())

    # 2. Initialize Application (the overlay has no main window)
    app = QApplication(sys.argv)
    app.setApplicationName("hadith-overlay")
    app.setOrganizationName("HadithOverlay")
    app.setQuitOnLastWindowClosed(False)

    # 3. Initialize Infrastructure
    settings_file = config.get_settings_file()
    if settings_file is not None:
        settings_store = SettingsStore.from_file(settings_file)
    else:
        settings_store = SettingsStore()
    settings_store.ensure_defaults()
    loader = HadithLoader(config.get_data_file())

    # 4. Instantiate Coordinator (Dependency Injection)
    controller = OverlayController(
        settings_store=settings_store,
        hadith_loader=loader,
        layer_manager=LayerPlacementManager(),
        scheduler=RefreshScheduler(),
    )

    # 5. Signal Wiring
    controller.quit_requested.connect(app.quit)
    app.aboutToQuit.connect(controller.stop)
    app.aboutToQuit.connect(settings_store.close)

    # 6. Show UI and start event loop
    controller.start()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
