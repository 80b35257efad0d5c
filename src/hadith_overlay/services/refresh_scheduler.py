"""Refresh Scheduler - periodic trigger for showing a new hadith."""

from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from hadith_overlay.core import MAX_REFRESH_INTERVAL
from hadith_overlay.logger_config import get_logger

logger = get_logger(__name__)

MILLISECONDS_PER_MINUTE = 60 * 1000


class RefreshScheduler(QObject):
    """
    Owns at most one repeating timer.

    Arming replaces any existing timer, so intervals never overlap.
    """

    # Signal emitted every time the interval elapses
    refresh_due = Signal()

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._handle: Optional[QTimer] = None

    @property
    def handle(self) -> Optional[QTimer]:
        """The currently armed timer, if any."""
        return self._handle

    def is_armed(self) -> bool:
        return self._handle is not None and self._handle.isActive()

    def arm(self, interval_minutes: int) -> QTimer:
        """
        Start firing every ``interval_minutes``, replacing the current timer.

        Returns:
            The timer handle, accepted by ``disarm``.
        """
        if interval_minutes > MAX_REFRESH_INTERVAL:
            logger.warning(
                "Refresh interval %d minute(s) too long, using %d",
                interval_minutes,
                MAX_REFRESH_INTERVAL,
            )
            interval_minutes = MAX_REFRESH_INTERVAL

        self.disarm(self._handle)

        timer = QTimer()
        timer.setSingleShot(False)
        timer.setInterval(interval_minutes * MILLISECONDS_PER_MINUTE)
        timer.timeout.connect(self._on_timeout)
        timer.start()

        self._handle = timer
        logger.debug("Refresh timer armed for %d minute(s)", interval_minutes)
        return timer

    def disarm(self, handle: Optional[QTimer] = None) -> None:
        """Stop a timer. Disarming None or an already stopped timer is a no-op."""
        if handle is None:
            handle = self._handle
        if handle is None:
            return

        if handle.isActive():
            handle.stop()
            logger.debug("Refresh timer disarmed")

        if handle is self._handle:
            self._handle = None

    @Slot()
    def _on_timeout(self) -> None:
        self.refresh_due.emit()
