"""Drag gesture state values."""

import math
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""


@dataclass(frozen=True)
class Dragging:
    """A primary-button drag in progress.

    Attributes:
        origin_pointer: Global pointer coordinates captured at press.
        origin_position: Widget position captured at press.
    """

    origin_pointer: Tuple[float, float]
    origin_position: Tuple[int, int]

    def position_for(self, pointer_x: float, pointer_y: float) -> Tuple[int, int]:
        """Widget position for the given pointer, rounded to whole pixels."""
        delta_x = pointer_x - self.origin_pointer[0]
        delta_y = pointer_y - self.origin_pointer[1]
        return (
            _round_half_up(self.origin_position[0] + delta_x),
            _round_half_up(self.origin_position[1] + delta_y),
        )


DragState = Union[Idle, Dragging]

IDLE = Idle()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
