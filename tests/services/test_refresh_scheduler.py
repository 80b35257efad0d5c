"""Unit tests for RefreshScheduler."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication

from hadith_overlay.core import MAX_REFRESH_INTERVAL
from hadith_overlay.services import RefreshScheduler


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


@pytest.fixture
def scheduler():
    ensure_qt_app()
    scheduler = RefreshScheduler()
    yield scheduler
    scheduler.disarm()


def test_arm_starts_repeating_timer(scheduler):
    handle = scheduler.arm(5)

    assert handle.isActive()
    assert not handle.isSingleShot()
    assert handle.interval() == 5 * 60 * 1000
    assert scheduler.is_armed()


def test_rearm_replaces_previous_timer(scheduler):
    first = scheduler.arm(30)
    second = scheduler.arm(1)

    assert not first.isActive()
    assert second.isActive()
    assert second.interval() == 60 * 1000
    assert scheduler.handle is second


def test_overlong_interval_is_clamped_to_timer_range(scheduler):
    handle = scheduler.arm(100000)

    assert handle.isActive()
    assert handle.interval() == MAX_REFRESH_INTERVAL * 60 * 1000
    assert scheduler.handle is handle


def test_timeout_emits_refresh_due(scheduler):
    listener = MagicMock()
    scheduler.refresh_due.connect(listener)
    scheduler.arm(1)

    scheduler._on_timeout()

    listener.assert_called_once_with()


def test_disarm_stops_timer(scheduler):
    handle = scheduler.arm(5)

    scheduler.disarm(handle)

    assert not handle.isActive()
    assert scheduler.handle is None
    assert not scheduler.is_armed()


def test_disarm_is_idempotent(scheduler):
    handle = scheduler.arm(5)

    scheduler.disarm(handle)
    scheduler.disarm(handle)
    scheduler.disarm()
    scheduler.disarm(None)

    assert not scheduler.is_armed()


def test_disarm_stale_handle_keeps_current_timer(scheduler):
    stale = scheduler.arm(5)
    current = scheduler.arm(10)

    scheduler.disarm(stale)

    assert current.isActive()
    assert scheduler.handle is current
