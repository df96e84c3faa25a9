"""Scroll-driven pagination."""

import logging
from typing import Optional

from pyqt_doclist.protocols import ViewportMetricsProvider

logger = logging.getLogger(__name__)


class ScrollPaginationTrigger:
    """
    Fires "load more" when the list is scrolled near its end.

    The distance from the end is the list height at first measurement and is
    not recomputed on resize. The controller gates the request on
    loaded-vs-total; overlapping in-flight fetches are the store's to merge.

    Usage:
        trigger = ScrollPaginationTrigger(WidgetViewportMetrics(list_body), controller)
        scroll_bar.valueChanged.connect(trigger.handle_scroll)
    """

    def __init__(self, metrics: ViewportMetricsProvider, controller):
        self._metrics = metrics
        self._controller = controller
        self._scroll_delta: Optional[int] = None

    def scroll_delta(self) -> int:
        """Distance in pixels from the list end at which the next page is fetched."""
        # A zero height means the list was not laid out yet; measure again later.
        if not self._scroll_delta:
            self._scroll_delta = self._metrics.list_height()
            logger.debug(f"Scroll delta measured: {self._scroll_delta}px")
        return self._scroll_delta

    def handle_scroll(self, scroll_offset: int) -> bool:
        """Returns True if a fetch was requested."""
        if not self._controller.has_more():
            return False
        if scroll_offset > self._metrics.list_height() - self.scroll_delta():
            return self._controller.load_more()
        return False
