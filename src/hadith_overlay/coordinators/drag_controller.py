"""Drag Controller - turns pointer events into overlay moves."""

from typing import Tuple, override

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtWidgets import QWidget

from hadith_overlay.core import IDLE, Dragging, DragState, Idle, SettingsKey
from hadith_overlay.io import SettingsStore
from hadith_overlay.logger_config import get_logger

logger = get_logger(__name__)

PRIMARY_BUTTON = Qt.MouseButton.LeftButton


class DragController(QObject):
    """
    Explicit Idle/Dragging state machine for moving the overlay.

    Installed as an event filter on the widget. Handlers return True when
    the event is consumed and False when it must propagate.
    """

    # Signal emitted after the final position was written (x, y)
    position_committed = Signal(int, int)

    def __init__(self, widget: QWidget, settings_store: SettingsStore):
        super().__init__()

        if widget is None:
            raise ValueError("Widget must not be None")
        if settings_store is None:
            raise ValueError("SettingsStore must not be None")

        self._widget = widget
        self._settings_store = settings_store
        self._state: DragState = IDLE

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return isinstance(self._state, Dragging)

    def install(self) -> None:
        self._widget.installEventFilter(self)

    def uninstall(self) -> None:
        self.cancel()
        self._widget.removeEventFilter(self)

    def press(self, button: Qt.MouseButton, pointer: Tuple[float, float]) -> bool:
        """Idle -> Dragging on primary press; captures pointer and widget origin."""
        if button != PRIMARY_BUTTON or not isinstance(self._state, Idle):
            return False

        position = self._widget.pos()
        self._state = Dragging(
            origin_pointer=(pointer[0], pointer[1]),
            origin_position=(position.x(), position.y()),
        )
        self._widget.setCursor(Qt.CursorShape.SizeAllCursor)
        return True

    def move(self, pointer: Tuple[float, float]) -> bool:
        """Reposition the widget immediately while dragging."""
        if not isinstance(self._state, Dragging):
            return False

        x, y = self._state.position_for(pointer[0], pointer[1])
        self._widget.move(x, y)
        return True

    def release(self, button: Qt.MouseButton) -> bool:
        """Dragging -> Idle on primary release; writes the final position to settings."""
        if button != PRIMARY_BUTTON or not isinstance(self._state, Dragging):
            return False

        self._state = IDLE
        self._widget.unsetCursor()

        position = self._widget.pos()
        x, y = position.x(), position.y()
        self._settings_store.set_values({SettingsKey.POSITION_X: x, SettingsKey.POSITION_Y: y})

        logger.debug("Overlay moved to (%d, %d)", x, y)
        self.position_committed.emit(x, y)
        return True

    def cancel(self) -> None:
        """Abandon a drag without persisting anything."""
        if not isinstance(self._state, Dragging):
            return
        self._state = IDLE
        self._widget.unsetCursor()
        logger.debug("Drag cancelled")

    @override
    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        """Route the widget's mouse events into the state machine."""
        event_type = event.type()

        if event_type == QEvent.Type.MouseButtonPress:
            return self.press(event.button(), _global_coords(event))
        if event_type == QEvent.Type.MouseMove:
            return self.move(_global_coords(event))
        if event_type == QEvent.Type.MouseButtonRelease:
            return self.release(event.button())
        if event_type == QEvent.Type.Hide:
            # A hidden window never receives the release
            self.cancel()

        return False


def _global_coords(event) -> Tuple[float, float]:
    point = event.globalPosition()
    return point.x(), point.y()
