"""Tests for the scroll pagination trigger."""

import pytest

from pyqt_doclist.protocols import ViewportMetricsABC
from pyqt_doclist.services import DocumentListController, DocumentStoreChannels, ScrollPaginationTrigger


class FixedMetrics(ViewportMetricsABC):
    def __init__(self, height):
        self.height = height
        self.calls = 0

    def list_height(self) -> int:
        self.calls += 1
        return self.height


@pytest.fixture
def setup(qapp):
    channels = DocumentStoreChannels()
    fetches = []
    controller = DocumentListController(channels, fetch_next_page=fetches.append)
    return channels, controller, fetches


def test_never_fetches_when_everything_loaded(setup):
    channels, controller, fetches = setup
    channels.documents_reset.emit([{"_id": i} for i in range(3)], 3)
    trigger = ScrollPaginationTrigger(FixedMetrics(500), controller)

    for offset in (0, 1, 250, 499, 500, 10_000):
        assert not trigger.handle_scroll(offset)
    assert fetches == []


def test_fetches_past_threshold(setup):
    channels, controller, fetches = setup
    channels.documents_reset.emit([{"_id": 1}], 10)
    metrics = FixedMetrics(400)
    trigger = ScrollPaginationTrigger(metrics, controller)

    assert trigger.scroll_delta() == 400
    # List grows; the delta stays at the first measurement
    metrics.height = 1000
    assert trigger.scroll_delta() == 400
    assert not trigger.handle_scroll(600)
    assert trigger.handle_scroll(601)
    assert fetches == [1]


def test_zero_height_is_measured_again(setup):
    _, controller, _ = setup
    metrics = FixedMetrics(0)
    trigger = ScrollPaginationTrigger(metrics, controller)
    assert trigger.scroll_delta() == 0
    metrics.height = 300
    assert trigger.scroll_delta() == 300
    metrics.height = 900
    assert trigger.scroll_delta() == 300

