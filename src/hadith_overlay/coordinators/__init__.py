"""Coordinators - Orchestration layer connecting UI with business logic."""

from .drag_controller import DragController
from .layer_placement import Layer, LayerPlacementManager
from .overlay_controller import OverlayController

__all__ = [
    "OverlayController",
    "DragController",
    "Layer",
    "LayerPlacementManager",
]
