"""pytest configuration and fixtures for pyqt-doclist tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default DocListConfig."""
    from pyqt_doclist.protocols import set_doclist_config
    set_doclist_config(None)
    yield
    set_doclist_config(None)


class FakeObjectId:
    """Structured 12-byte id exposing ``binary`` like bson.ObjectId."""

    def __init__(self, hex_string):
        self.binary = bytes.fromhex(hex_string)

    def __eq__(self, other):
        return isinstance(other, FakeObjectId) and other.binary == self.binary

    def __hash__(self):
        return hash(self.binary)

    def __repr__(self):
        return f"FakeObjectId({self.binary.hex()!r})"


@pytest.fixture
def make_object_id():
    return FakeObjectId
