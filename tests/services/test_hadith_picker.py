"""Unit tests for random hadith selection."""

from unittest.mock import patch

from hadith_overlay.core import HadithEntry
from hadith_overlay.services import pick_random

ENTRIES = [HadithEntry(english=f"Text {index}") for index in range(5)]


def test_empty_sequence_returns_none():
    assert pick_random([]) is None


def test_always_returns_a_member():
    for _ in range(200):
        assert pick_random(ENTRIES) in ENTRIES


def test_single_entry_is_always_chosen():
    assert pick_random(ENTRIES[:1]) is ENTRIES[0]


def test_uses_uniform_index_over_whole_range():
    with patch("hadith_overlay.services.hadith_picker.random.randrange", return_value=4) as randrange:
        assert pick_random(ENTRIES) is ENTRIES[4]
    randrange.assert_called_once_with(5)


def test_every_entry_can_be_selected():
    seen = {pick_random(ENTRIES) for _ in range(500)}
    assert seen == set(ENTRIES)
