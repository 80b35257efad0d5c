"""Hadith Indicator - system tray icon exposing the overlay's actions."""

import qtawesome as qta
from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QMenu, QSystemTrayIcon

ICON_COLOR = "white"


class HadithIndicator(QObject):
    """
    Tray icon with a context menu.

    Signals:
    - refresh_requested: user asked for a new hadith now
    - settings_requested: user asked to open the settings
    - quit_requested: user asked to quit the overlay
    """

    refresh_requested = Signal()
    settings_requested = Signal()
    quit_requested = Signal()

    def __init__(self):
        super().__init__()
        self._menu = QMenu()
        self._create_menu()

        self._tray = QSystemTrayIcon(qta.icon("mdi.book-open-variant", color=ICON_COLOR))
        self._tray.setToolTip("Hadith Overlay")
        self._tray.setContextMenu(self._menu)

    def _create_menu(self):
        """Create the Refresh / Settings / Quit menu."""
        self.refresh_action = self._menu.addAction(qta.icon("mdi.refresh"), "Refresh Hadith")
        self.refresh_action.triggered.connect(self.refresh_requested)

        self._menu.addSeparator()

        self.settings_action = self._menu.addAction(qta.icon("mdi.cog"), "Settings")
        self.settings_action.triggered.connect(self.settings_requested)

        self.quit_action = self._menu.addAction(qta.icon("mdi.power"), "Quit")
        self.quit_action.triggered.connect(self.quit_requested)

    @property
    def menu(self) -> QMenu:
        return self._menu

    def show(self):
        """Show the tray icon when the desktop provides a tray."""
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray.show()

    def release(self):
        """Hide the icon and dispose of the menu."""
        self._tray.hide()
        self._tray.deleteLater()
        self._menu.deleteLater()
