"""
Signal blocking for list reconciliation.

Row widgets are added, moved and deleted while the scroll area is laid out
again; the scroll bar emits ``valueChanged`` during that churn. Blocking it
keeps relayout from being mistaken for a user scroll.
"""

from contextlib import contextmanager
import logging

from PyQt6.QtCore import QObject

logger = logging.getLogger(__name__)


class SignalService:
    """
    Context managers for temporarily silencing Qt signal emitters.

    Examples:
        with SignalService.block_signals(scroll_bar):
            layout.insertWidget(0, row_widget)
    """

    @staticmethod
    @contextmanager
    def block_signals(*objects: QObject):
        """Block signals on every given object, restoring the previous flag on exit."""
        previous = []
        for obj in objects:
            if obj is not None:
                previous.append((obj, obj.blockSignals(True)))
                logger.debug(f"Blocked signals on {type(obj).__name__}")

        try:
            yield
        finally:
            for obj, was_blocked in reversed(previous):
                obj.blockSignals(was_blocked)
