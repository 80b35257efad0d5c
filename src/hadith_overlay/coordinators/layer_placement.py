"""Layer Placement Manager - decides which stacking layer the overlay lives in."""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from hadith_overlay.logger_config import get_logger

logger = get_logger(__name__)


class Layer(Enum):
    """Stacking tiers an overlay widget can be attached to."""

    TOPMOST = "topmost"
    BACKGROUND = "background-desktop"


# Frameless, kept out of the taskbar and never taking keyboard focus
_BASE_FLAGS = (
    Qt.WindowType.FramelessWindowHint
    | Qt.WindowType.Tool
    | Qt.WindowType.WindowDoesNotAcceptFocus
)

LAYER_FLAGS = {
    Layer.TOPMOST: _BASE_FLAGS | Qt.WindowType.WindowStaysOnTopHint,
    Layer.BACKGROUND: _BASE_FLAGS | Qt.WindowType.WindowStaysOnBottomHint,
}


class LayerPlacementManager:
    """
    Re-parents overlay widgets between the topmost and the desktop layer.

    Keeps a record of which widget is attached to which layer and which
    widgets are tracked as always-on-top chrome, so repeated placement
    never attaches a widget twice.
    """

    def __init__(self):
        self._attached: Dict[Layer, List[QWidget]] = {layer: [] for layer in Layer}
        self._tracked: List[QWidget] = []

    def place(self, widget: QWidget, always_on_top: bool) -> Layer:
        """
        Detach the widget from wherever it is and attach it to the requested layer.

        Args:
            widget: The top-level overlay widget.
            always_on_top: True for the topmost layer, False for the desktop layer.

        Returns:
            The layer the widget ends up in.
        """
        self.detach(widget)
        self.untrack(widget)

        layer = Layer.TOPMOST if always_on_top else Layer.BACKGROUND
        if layer is Layer.TOPMOST:
            self._tracked.append(widget)

        self._attach(widget, layer)
        logger.debug("Overlay placed on %s layer", layer.value)
        return layer

    def detach(self, widget: QWidget) -> None:
        """Remove the widget from its current layer; no-op if not attached."""
        for widgets in self._attached.values():
            if widget in widgets:
                widgets.remove(widget)

    def untrack(self, widget: QWidget) -> None:
        """Stop tracking the widget as always-on-top chrome; no-op if not tracked."""
        if widget in self._tracked:
            self._tracked.remove(widget)

    def layer_of(self, widget: QWidget) -> Optional[Layer]:
        """Return the layer the widget is attached to, if any."""
        for layer, widgets in self._attached.items():
            if widget in widgets:
                return layer
        return None

    def attached_widgets(self, layer: Layer) -> Tuple[QWidget, ...]:
        return tuple(self._attached[layer])

    def is_tracked(self, widget: QWidget) -> bool:
        return widget in self._tracked

    def _attach(self, widget: QWidget, layer: Layer) -> None:
        flags = LAYER_FLAGS[layer]
        # setWindowFlags hides the window, so only touch it on an actual change
        if widget.windowFlags() != flags:
            widget.setWindowFlags(flags)
        widget.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)
        widget.show()
        if layer is Layer.TOPMOST:
            widget.raise_()
        else:
            widget.lower()
        self._attached[layer].append(widget)
