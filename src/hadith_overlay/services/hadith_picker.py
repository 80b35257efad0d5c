"""Uniform random selection of a hadith."""

import random
from typing import Optional, Sequence

from hadith_overlay.core import HadithEntry


def pick_random(entries: Sequence[HadithEntry]) -> Optional[HadithEntry]:
    """Return a uniformly chosen entry, or None when there is nothing to choose from."""
    if not entries:
        return None
    return entries[random.randrange(len(entries))]
