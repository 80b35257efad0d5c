"""Unit tests for drag state values."""

from hadith_overlay.core import Dragging


def test_position_adds_pointer_delta_to_origin():
    state = Dragging(origin_pointer=(10.0, 10.0), origin_position=(100, 100))
    assert state.position_for(15.0, 17.0) == (105, 107)


def test_position_rounds_to_nearest_pixel():
    state = Dragging(origin_pointer=(0.0, 0.0), origin_position=(10, 10))
    assert state.position_for(2.5, -0.6) == (13, 9)


def test_negative_delta_moves_back():
    state = Dragging(origin_pointer=(50.0, 50.0), origin_position=(200, 300))
    assert state.position_for(20.0, 10.0) == (170, 260)
