"""Overlay Controller - lifecycle owner wiring content, rendering, layers and input."""

from typing import Callable, List, Optional

from PySide6.QtCore import QObject, QUrl, Signal, Slot
from PySide6.QtGui import QDesktopServices

from hadith_overlay.core import HadithEntry, OverlaySettings
from hadith_overlay.io import HadithLoader, SettingsStore
from hadith_overlay.logger_config import get_logger
from hadith_overlay.services import RefreshScheduler, pick_random, render_markup
from hadith_overlay.ui import HadithIndicator, HadithLabel

from .drag_controller import DragController
from .layer_placement import LayerPlacementManager

logger = get_logger(__name__)


class OverlayController(QObject):
    """
    Central coordinator of the overlay session.

    Startup order:
    settings -> content -> widget -> style -> drag handling -> layer
    -> position -> first render -> scheduler -> settings subscription
    -> tray indicator.

    A settings change re-runs style, position, layer, render and
    scheduler arming, in that order. ``stop`` releases everything that
    was acquired and is safe to call at any point.
    """

    # Signal emitted when the user picks Quit from the tray menu
    quit_requested = Signal()

    def __init__(
        self,
        settings_store: SettingsStore,
        hadith_loader: HadithLoader,
        layer_manager: LayerPlacementManager,
        scheduler: RefreshScheduler,
        label_factory: Callable[[], HadithLabel] = HadithLabel,
        indicator_factory: Callable[[], HadithIndicator] = HadithIndicator,
    ):
        super().__init__()

        if settings_store is None:
            raise ValueError("SettingsStore must not be None")
        if hadith_loader is None:
            raise ValueError("HadithLoader must not be None")
        if layer_manager is None:
            raise ValueError("LayerPlacementManager must not be None")
        if scheduler is None:
            raise ValueError("RefreshScheduler must not be None")

        self._settings_store = settings_store
        self._hadith_loader = hadith_loader
        self._layer_manager = layer_manager
        self._scheduler = scheduler
        self._label_factory = label_factory
        self._indicator_factory = indicator_factory

        # Session state
        self._settings: Optional[OverlaySettings] = None
        self._hadiths: List[HadithEntry] = []
        self._current_hadith: Optional[HadithEntry] = None
        self._label: Optional[HadithLabel] = None
        self._drag: Optional[DragController] = None
        self._indicator: Optional[HadithIndicator] = None
        self._subscribed = False

    @property
    def label(self) -> Optional[HadithLabel]:
        return self._label

    @property
    def drag_controller(self) -> Optional[DragController]:
        return self._drag

    @property
    def current_hadith(self) -> Optional[HadithEntry]:
        return self._current_hadith

    @property
    def hadiths(self) -> List[HadithEntry]:
        return list(self._hadiths)

    def start(self):
        """Bring the overlay up. On failure, releases what was acquired and re-raises."""
        try:
            self._settings = self._settings_store.snapshot()
            self._hadiths = self._hadith_loader.load()

            self._label = self._label_factory()
            self._label.apply_style(self._settings)

            self._drag = DragController(self._label, self._settings_store)
            self._drag.install()

            self._update_layer()
            self._update_position()
            self.display_random_hadith()
            self._scheduler.arm(self._settings.refresh_interval)

            self._scheduler.refresh_due.connect(self.display_random_hadith)
            self._settings_store.changed.connect(self.handle_settings_changed)
            self._subscribed = True

            self._indicator = self._indicator_factory()
            self._indicator.refresh_requested.connect(self.display_random_hadith)
            self._indicator.settings_requested.connect(self.open_preferences)
            self._indicator.quit_requested.connect(self.quit_requested)
            self._indicator.show()
        except Exception:
            self.stop()
            raise

    def stop(self):
        """Tear the overlay down in reverse dependency order."""
        self._scheduler.disarm()

        if self._drag is not None:
            self._drag.uninstall()
            self._drag = None

        if self._label is not None:
            self._layer_manager.detach(self._label)
            self._layer_manager.untrack(self._label)
            self._label.hide()
            self._label.deleteLater()
            self._label = None

        if self._indicator is not None:
            self._indicator.release()
            self._indicator = None

        if self._subscribed:
            self._scheduler.refresh_due.disconnect(self.display_random_hadith)
            self._settings_store.changed.disconnect(self.handle_settings_changed)
            self._subscribed = False

        self._settings = None
        self._hadiths = []
        self._current_hadith = None

    @Slot()
    def display_random_hadith(self):
        """Pick a new entry and render it."""
        if self._label is None:
            return
        self._current_hadith = pick_random(self._hadiths)
        self._render_current_hadith()

    @Slot(str)
    def handle_settings_changed(self, key: str = ""):
        """Recompute everything derived from settings; cheap and idempotent."""
        if self._label is None:
            return

        self._settings = self._settings_store.snapshot()
        self._label.apply_style(self._settings)
        self._update_position()
        self._update_layer()
        if self._current_hadith is None:
            self.display_random_hadith()
        else:
            self._render_current_hadith()
        self._scheduler.arm(self._settings.refresh_interval)

    @Slot()
    def open_preferences(self):
        """Hand the settings file to the desktop's default editor."""
        path = self._settings_store.file_path
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(path))):
            logger.error("Error opening preferences: no handler for %s", path)

    def _render_current_hadith(self):
        self._label.show_markup(render_markup(self._current_hadith, self._settings))

    def _update_position(self):
        self._label.move(self._settings.position_x, self._settings.position_y)

    def _update_layer(self):
        self._layer_manager.place(self._label, self._settings.always_on_top)
