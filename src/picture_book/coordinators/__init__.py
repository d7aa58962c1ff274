"""Coordinators - Orchestration layer connecting UI with the catalog."""

from .page_layout import PageLayout, compute_page_layout, is_landscape
from .shelf_coordinator import ShelfCoordinator
from .viewer_controller import ViewerController, ViewerState

__all__ = [
    "PageLayout",
    "ShelfCoordinator",
    "ViewerController",
    "ViewerState",
    "compute_page_layout",
    "is_landscape",
]
