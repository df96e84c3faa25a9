"""Viewport metrics protocol and ABC for pagination triggers.

The pagination trigger needs the rendered height of the list, nothing else.
Measuring through this seam keeps the trigger testable without a live widget.

Example:
    class FixedMetrics(ViewportMetricsABC):
        def __init__(self, height):
            self.height = height

        def list_height(self) -> int:
            return self.height

    trigger = ScrollPaginationTrigger(FixedMetrics(800), controller)
"""

from abc import ABC, abstractmethod
from typing import Protocol

from PyQt6.QtWidgets import QWidget


class ViewportMetricsProvider(Protocol):
    """Protocol for anything that can report the rendered list height.

    Use this for duck-typed checking. For implementation, prefer ViewportMetricsABC.
    """

    def list_height(self) -> int:
        """Return the current rendered height of the list in pixels."""
        ...


class ViewportMetricsABC(ABC):
    """Abstract base class for viewport metrics providers."""

    @abstractmethod
    def list_height(self) -> int:
        """Return the current rendered height of the list in pixels.

        Returns:
            Height in pixels; 0 when the list has not been laid out yet
        """
        ...


class WidgetViewportMetrics(ViewportMetricsABC):
    """Reads the list height from a laid-out QWidget."""

    def __init__(self, widget: QWidget):
        self._widget = widget

    def list_height(self) -> int:
        return self._widget.height()
